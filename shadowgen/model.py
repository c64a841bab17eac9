# shadowgen/model.py
from __future__ import annotations

from dataclasses import dataclass

from .constants import UNBOUNDED


@dataclass(frozen=True)
class TypeParameter:
    """A generic type parameter and its explicit bounds (already referents)."""

    name: str
    bounds: tuple[str, ...] = ()


@dataclass(frozen=True)
class TypeReference:
    """Opaque stand-in for a compiler type element.

    `referent` is how the type is spelled in generated source (simple name when
    imported). `binary_name` differs from `name` only for nested types.
    """

    name: str
    referent: str = ""
    binary_name: str = ""
    public: bool = True
    type_parameters: tuple[TypeParameter, ...] = ()
    deprecated: bool = False

    def __post_init__(self) -> None:
        if not self.referent:
            object.__setattr__(self, "referent", self.name)
        if not self.binary_name:
            object.__setattr__(self, "binary_name", self.name)


@dataclass(frozen=True)
class Association:
    real_name: str
    shadow_name: str


@dataclass(frozen=True)
class AccessorSpec:
    shadow_type: TypeReference
    real_type: TypeReference

    @property
    def type_parameters(self) -> tuple[TypeParameter, ...]:
        return self.real_type.type_parameters

    @property
    def deprecated(self) -> bool:
        return self.shadow_type.deprecated

    @property
    def is_public(self) -> bool:
        return self.real_type.public


@dataclass(frozen=True)
class ResetterSpec:
    owner: str
    method_name: str
    min_version: int = UNBOUNDED
    max_version: int = UNBOUNDED


@dataclass(frozen=True)
class ShadowModel:
    """Read-only views consumed by the generator.

    Every view is an ordered tuple; the generator never re-sorts them. The
    same real name may appear more than once across the two association
    views, in which case the later entry wins in the emitted table.
    """

    imports: tuple[str, ...] = ()
    reflected_associations: tuple[Association, ...] = ()
    extra_associations: tuple[Association, ...] = ()
    accessors: tuple[AccessorSpec, ...] = ()
    resetters: tuple[ResetterSpec, ...] = ()
    packages: tuple[str, ...] = ()

    @property
    def association_count(self) -> int:
        return len(self.reflected_associations) + len(self.extra_associations)
