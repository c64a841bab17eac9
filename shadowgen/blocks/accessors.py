from __future__ import annotations

from ..java_fmt import indent, java_annotation, type_param_def, type_param_use
from ..model import AccessorSpec, ShadowModel


def gen_accessor(spec: AccessorSpec, extract_call: str) -> list[str]:
    """Generate one typed `shadowOf` accessor.

    Type parameters carry their bounds at the definition site and appear by
    name only on the argument and return types.
    """
    param_def = type_param_def(spec.type_parameters)
    param_use = type_param_use(spec.type_parameters)
    actual = spec.real_type.referent + param_use
    shadow = spec.shadow_type.referent + param_use

    lines: list[str] = []
    if spec.deprecated:
        lines.append(indent(1, java_annotation("Deprecated")))
    lines.extend(
        [
            indent(1, f"public static {param_def}{shadow} shadowOf({actual} actual) {{"),
            indent(2, f"return ({shadow}) {extract_call}(actual);"),
            indent(1, "}"),
            "",
        ]
    )
    return lines


def gen_accessors(model: ShadowModel, extract_call: str) -> list[str]:
    lines: list[str] = []
    for spec in model.accessors:
        # Callers outside the real type's package could not name it.
        if not spec.is_public:
            continue
        lines.extend(gen_accessor(spec, extract_call))
    return lines
