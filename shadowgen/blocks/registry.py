from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..constants import (
    EXTRACT_CALL_DEFAULT,
    GEN_CLASS,
    GENERATOR_NAME,
    VERSION_QUERY_DEFAULT,
)
from ..model import ShadowModel
from .accessors import gen_accessors
from .preamble import gen_class_open, gen_imports, gen_package_decl
from .provider import gen_class_close, gen_get_shadow_map, gen_provided_package_names
from .reset import gen_reset
from .shadow_map import gen_shadow_map

RenderFn = Callable[[ShadowModel, "GeneratorConfig"], list[str]]


@dataclass(frozen=True)
class GeneratorConfig:
    """Generation-time settings; none of these come from the model.

    `package=None` disables generation entirely.
    """

    package: Optional[str]
    instrument_packages: bool = True
    class_name: str = GEN_CLASS
    generator_name: str = GENERATOR_NAME
    version_query: str = VERSION_QUERY_DEFAULT
    extract_call: str = EXTRACT_CALL_DEFAULT


@dataclass(frozen=True)
class BlockSpec:
    block_id: str
    render: RenderFn


def _render_package(_: ShadowModel, cfg: GeneratorConfig) -> list[str]:
    if cfg.package is None:
        raise ValueError("package block rendered without a target package")
    return gen_package_decl(cfg.package)


def _render_imports(model: ShadowModel, _: GeneratorConfig) -> list[str]:
    return gen_imports(model.imports)


def _render_class_open(_: ShadowModel, cfg: GeneratorConfig) -> list[str]:
    return gen_class_open(cfg.class_name, cfg.generator_name)


def _render_shadow_map(model: ShadowModel, _: GeneratorConfig) -> list[str]:
    return gen_shadow_map(model)


def _render_accessors(model: ShadowModel, cfg: GeneratorConfig) -> list[str]:
    return gen_accessors(model, cfg.extract_call)


def _render_reset(model: ShadowModel, cfg: GeneratorConfig) -> list[str]:
    return gen_reset(model, cfg.version_query)


def _render_get_shadow_map(_: ShadowModel, __: GeneratorConfig) -> list[str]:
    return gen_get_shadow_map()


def _render_package_names(model: ShadowModel, cfg: GeneratorConfig) -> list[str]:
    return gen_provided_package_names(model.packages, cfg.instrument_packages)


def _render_class_close(_: ShadowModel, __: GeneratorConfig) -> list[str]:
    return gen_class_close()


# Emission order of the generated compilation unit.
BLOCKS: list[BlockSpec] = [
    BlockSpec(block_id="package", render=_render_package),
    BlockSpec(block_id="imports", render=_render_imports),
    BlockSpec(block_id="class_open", render=_render_class_open),
    BlockSpec(block_id="shadow_map", render=_render_shadow_map),
    BlockSpec(block_id="accessors", render=_render_accessors),
    BlockSpec(block_id="reset", render=_render_reset),
    BlockSpec(block_id="get_shadow_map", render=_render_get_shadow_map),
    BlockSpec(block_id="provided_package_names", render=_render_package_names),
    BlockSpec(block_id="class_close", render=_render_class_close),
]
