from __future__ import annotations

from ..java_fmt import (
    assert_java_ident,
    java_annotation,
    java_doc_comment,
    java_import,
    java_package,
    java_string,
)


def gen_package_decl(package: str) -> list[str]:
    return [java_package(package)]


def gen_imports(imports: tuple[str, ...]) -> list[str]:
    """One import per model entry, in model order, then a separating blank line."""
    lines = [java_import(name) for name in imports]
    lines.append("")
    return lines


def gen_class_open(class_name: str, generator_name: str) -> list[str]:
    lines = java_doc_comment("Shadow mapper. Automatically generated by shadowgen.")
    lines.append(java_annotation("Generated", java_string(generator_name)))
    lines.append(java_annotation("SuppressWarnings", '{"unchecked","deprecation"}'))
    lines.append(
        f"public class {assert_java_ident(class_name)} implements ShadowProvider {{"
    )
    return lines
