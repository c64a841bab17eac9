from __future__ import annotations

from ..java_fmt import indent, java_annotation, java_string


def gen_get_shadow_map() -> list[str]:
    return [
        indent(1, java_annotation("Override")),
        indent(1, "public Map<String, String> getShadowMap() {"),
        indent(2, "return SHADOW_MAP;"),
        indent(1, "}"),
        "",
    ]


def gen_provided_package_names(packages: tuple[str, ...], enabled: bool) -> list[str]:
    """Generate `getProvidedPackageNames()`.

    The array stays empty when package instrumentation is disabled, whatever
    the model lists.
    """
    lines: list[str] = [
        indent(1, java_annotation("Override")),
        indent(1, "public String[] getProvidedPackageNames() {"),
        indent(2, "return new String[] {"),
    ]
    if enabled:
        last = len(packages) - 1
        for i, pkg in enumerate(packages):
            sep = "," if i < last else ""
            lines.append(indent(3, java_string(pkg) + sep))
    lines.append(indent(2, "};"))
    lines.append(indent(1, "}"))
    return lines


def gen_class_close() -> list[str]:
    return ["}"]
