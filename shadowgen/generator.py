# shadowgen/generator.py
from __future__ import annotations

from typing import Protocol

from .blocks.registry import BLOCKS, GeneratorConfig
from .model import ShadowModel

__all__ = [
    "GenerationError",
    "GeneratorConfig",
    "ShadowProviderGenerator",
    "TextSink",
    "render_shadow_provider",
]


class GenerationError(Exception):
    """The generated source could not be written; the artifact must be discarded."""


class TextSink(Protocol):
    def write(self, text: str) -> object: ...


def render_shadow_provider(model: ShadowModel, cfg: GeneratorConfig) -> str:
    """Render the complete shadow provider compilation unit.

    Blocks are emitted in BLOCKS order. Output depends only on `model` and
    `cfg`, so identical inputs give byte-identical text.
    """
    lines: list[str] = []
    for spec in BLOCKS:
        lines.extend(spec.render(model, cfg))
    return "\n".join(lines) + "\n"


class ShadowProviderGenerator:
    """Writes the shadow provider for one configured target package."""

    def __init__(self, cfg: GeneratorConfig) -> None:
        self.cfg = cfg

    @property
    def enabled(self) -> bool:
        return self.cfg.package is not None

    def generate(self, model: ShadowModel, sink: TextSink) -> bool:
        """Write the provider source to `sink`.

        Returns False without touching the sink when no target package is
        configured. Raises GenerationError if the sink rejects the write.
        """
        if not self.enabled:
            return False

        source = render_shadow_provider(model, self.cfg)
        try:
            sink.write(source)
        except OSError as e:
            raise GenerationError(f"Failed to write shadow class file: {e}") from e
        return True
