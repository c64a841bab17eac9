from __future__ import annotations

from typing import Any

from .constants import DEFAULT_IMPORTS, UNBOUNDED
from .model import (
    AccessorSpec,
    Association,
    ResetterSpec,
    ShadowModel,
    TypeParameter,
    TypeReference,
)


def _require_str(val: object, *, path: str) -> str:
    if not isinstance(val, str) or not val:
        raise TypeError(f"Expected non-empty string at {path}, got: {val!r}")
    return val


def _require_list(val: object, *, path: str) -> list[Any]:
    if val is None:
        return []
    if not isinstance(val, list):
        raise TypeError(f"Expected list at {path}, got: {type(val).__name__}")
    return val


def _require_bool(val: object, *, default: bool, path: str) -> bool:
    if val is None:
        return default
    if not isinstance(val, bool):
        raise TypeError(f"Expected true/false at {path}, got: {val!r}")
    return val


def _require_version(val: object, *, path: str) -> int:
    """API level bound; absent means UNBOUNDED."""
    if val is None:
        return UNBOUNDED
    if isinstance(val, bool) or not isinstance(val, int):
        raise TypeError(f"Expected integer API level at {path}, got: {val!r}")
    return val


def simple_name(name: str) -> str:
    return name.rsplit(".", 1)[-1]


def package_of(name: str) -> str:
    """Package part of a canonical name; nested types stop at the outer class."""
    parts = name.split(".")
    pkg: list[str] = []
    for part in parts[:-1]:
        if part[:1].isupper():
            break
        pkg.append(part)
    return ".".join(pkg)


def referent_for(name: str, imports: frozenset[str]) -> str:
    """Spell a type the way generated source refers to it."""
    if name in imports:
        return simple_name(name)
    return name


def _type_parameters(
    raw: object, imports: frozenset[str], *, path: str
) -> tuple[TypeParameter, ...]:
    params: list[TypeParameter] = []
    for i, item in enumerate(_require_list(raw, path=path)):
        if isinstance(item, str):
            params.append(TypeParameter(name=item))
            continue
        if not isinstance(item, dict):
            raise TypeError(f"Expected string or mapping at {path}[{i}]")
        name = _require_str(item.get("name"), path=f"{path}[{i}].name")
        bounds = tuple(
            referent_for(_require_str(b, path=f"{path}[{i}].bounds[{j}]"), imports)
            for j, b in enumerate(_require_list(item.get("bounds"), path=f"{path}[{i}].bounds"))
        )
        params.append(TypeParameter(name=name, bounds=bounds))
    return tuple(params)


def _real_type(raw: object, imports: frozenset[str], *, path: str) -> TypeReference:
    if isinstance(raw, str):
        return TypeReference(name=raw, referent=referent_for(raw, imports))
    if not isinstance(raw, dict):
        raise TypeError(f"Expected string or mapping at {path}, got: {raw!r}")

    name = _require_str(raw.get("name"), path=f"{path}.name")
    return TypeReference(
        name=name,
        referent=referent_for(name, imports),
        binary_name=raw.get("binary_name") or name,
        public=_require_bool(raw.get("public"), default=True, path=f"{path}.public"),
        type_parameters=_type_parameters(
            raw.get("type_parameters"), imports, path=f"{path}.type_parameters"
        ),
    )


def build_shadow_model(model: dict[str, Any]) -> ShadowModel:
    """Build the generator's read-only model from a loaded YAML mapping.

    Entry order is preserved everywhere. Packages are taken verbatim when the
    model lists them, otherwise derived from the real types in first-seen
    order.
    """
    raw_imports = model.get("imports")
    if raw_imports is None:
        imports = DEFAULT_IMPORTS
    else:
        imports = tuple(
            _require_str(v, path=f"imports[{i}]")
            for i, v in enumerate(_require_list(raw_imports, path="imports"))
        )
    imported = frozenset(imports)

    reflected: list[Association] = []
    accessors: list[AccessorSpec] = []
    resetters: list[ResetterSpec] = []
    real_names: list[str] = []

    for i, item in enumerate(_require_list(model.get("shadows"), path="shadows")):
        path = f"shadows[{i}]"
        if not isinstance(item, dict):
            raise TypeError(f"Expected mapping at {path}, got: {item!r}")

        shadow_name = _require_str(item.get("shadow"), path=f"{path}.shadow")
        real = _real_type(item.get("real"), imported, path=f"{path}.real")
        shadow = TypeReference(
            name=shadow_name,
            referent=referent_for(shadow_name, imported),
            binary_name=item.get("binary_name") or shadow_name,
            deprecated=_require_bool(
                item.get("deprecated"), default=False, path=f"{path}.deprecated"
            ),
        )

        reflected.append(Association(real_name=real.name, shadow_name=shadow.binary_name))
        real_names.append(real.name)

        if _require_bool(item.get("accessor"), default=True, path=f"{path}.accessor"):
            accessors.append(AccessorSpec(shadow_type=shadow, real_type=real))

        method = item.get("resetter")
        if method is not None:
            resetters.append(
                ResetterSpec(
                    owner=shadow.referent,
                    method_name=_require_str(method, path=f"{path}.resetter"),
                    min_version=_require_version(
                        item.get("min_version"), path=f"{path}.min_version"
                    ),
                    max_version=_require_version(
                        item.get("max_version"), path=f"{path}.max_version"
                    ),
                )
            )

    extra: list[Association] = []
    for i, item in enumerate(_require_list(model.get("extra_shadows"), path="extra_shadows")):
        path = f"extra_shadows[{i}]"
        if not isinstance(item, dict):
            raise TypeError(f"Expected mapping at {path}, got: {item!r}")
        real_name = _require_str(item.get("real"), path=f"{path}.real")
        shadow_name = _require_str(item.get("shadow"), path=f"{path}.shadow")
        extra.append(Association(real_name=real_name, shadow_name=shadow_name))
        real_names.append(real_name)

    raw_packages = model.get("packages")
    if raw_packages is None:
        packages: list[str] = []
        for name in real_names:
            pkg = package_of(name)
            if pkg and pkg not in packages:
                packages.append(pkg)
    else:
        packages = [
            _require_str(v, path=f"packages[{i}]")
            for i, v in enumerate(_require_list(raw_packages, path="packages"))
        ]

    return ShadowModel(
        imports=tuple(imports),
        reflected_associations=tuple(reflected),
        extra_associations=tuple(extra),
        accessors=tuple(accessors),
        resetters=tuple(resetters),
        packages=tuple(packages),
    )
