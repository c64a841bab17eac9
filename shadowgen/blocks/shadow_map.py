from __future__ import annotations

from ..java_fmt import indent, java_string
from ..model import ShadowModel


def gen_shadow_map(model: ShadowModel) -> list[str]:
    """Generate the static SHADOW_MAP field and its initializer block.

    Reflected associations are put first, then extra ones, so a repeated real
    name keeps the last value.
    """
    lines: list[str] = [
        indent(
            1,
            "private static final Map<String, String> SHADOW_MAP = "
            f"new HashMap<>({model.association_count});",
        ),
        "",
        indent(1, "static {"),
    ]

    for assoc in (*model.reflected_associations, *model.extra_associations):
        real = java_string(assoc.real_name)
        shadow = java_string(assoc.shadow_name)
        lines.append(indent(2, f"SHADOW_MAP.put({real}, {shadow});"))

    lines.append(indent(1, "}"))
    lines.append("")
    return lines
