from __future__ import annotations

from ..java_fmt import indent, java_annotation, java_static_call, version_guard
from ..model import ShadowModel


def gen_reset(model: ShadowModel, version_query: str) -> list[str]:
    """Generate `reset()`, calling every resetter in model order."""
    lines: list[str] = [
        indent(1, java_annotation("Override")),
        indent(1, "public void reset() {"),
    ]
    for resetter in model.resetters:
        guard = version_guard(
            version_query, resetter.min_version, resetter.max_version
        )
        call = java_static_call(resetter.owner, resetter.method_name)
        lines.append(indent(2, guard + call))
    lines.append(indent(1, "}"))
    lines.append("")
    return lines
