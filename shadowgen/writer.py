from __future__ import annotations

import sys
from io import StringIO
from pathlib import Path
from typing import Callable, Optional

from .generator import GenerationError, GeneratorConfig, ShadowProviderGenerator
from .model import ShadowModel

ReportFn = Callable[[str], None]


def _report_stderr(message: str) -> None:
    print(f"error: {message}", file=sys.stderr)


def provider_path(out_dir: Path, cfg: GeneratorConfig) -> Path:
    """Return `<out_dir>/<package as dirs>/<ClassName>.java`."""
    if cfg.package is None:
        raise ValueError("provider_path requires a target package")
    return out_dir.joinpath(*cfg.package.split(".")) / f"{cfg.class_name}.java"


def write_shadow_provider(
    out_dir: Path,
    model: ShadowModel,
    cfg: GeneratorConfig,
    *,
    report: ReportFn = _report_stderr,
) -> Optional[Path]:
    """Create the provider source file and write the generated class into it.

    Returns the written path, or None when generation is disabled (no target
    package). Open/write failures are reported through `report` and raised as
    GenerationError; whatever was written must be discarded by the caller.
    The source is rendered before the file is opened, so names the renderer
    rejects leave an existing file untouched.
    """
    generator = ShadowProviderGenerator(cfg)
    if not generator.enabled:
        return None

    buf = StringIO()
    try:
        generator.generate(model, buf)
    except ValueError as e:
        report(f"Failed to render shadow class file: {e}")
        raise GenerationError(f"Failed to render shadow class file: {e}") from e

    path = provider_path(out_dir, cfg)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as fh:
            fh.write(buf.getvalue())
    except OSError as e:
        report(f"Failed to write shadow class file: {e}")
        raise GenerationError(f"Failed to write shadow class file: {e}") from e

    return path
