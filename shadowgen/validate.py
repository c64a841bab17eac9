# shadowgen/validate.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Tuple

from .constants import UNBOUNDED
from .java_fmt import JAVA_IDENT_RE, JAVA_NAME_RE

Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class ValidationIssue:
    """Structured validation issue for callers that want more than strings."""

    severity: Severity
    code: str
    message: str
    path: str = ""
    hint: Optional[str] = None


@dataclass(frozen=True)
class ValidateConfig:
    # Rule controls
    ignore: set[str] = field(default_factory=set)
    escalate: set[str] = field(default_factory=set)


def _is_version(value: Any) -> bool:
    return value is None or (isinstance(value, int) and not isinstance(value, bool))


def _is_flag(value: Any) -> bool:
    return value is None or isinstance(value, bool)


def validate_model_issues(
    model: dict[str, Any], cfg: Optional[ValidateConfig] = None
) -> list[ValidationIssue]:
    """Return structured validation issues for a loaded shadow model.

    Duplicate real names are only a warning: the generated table keeps the
    last entry, which is a model problem rather than a generation failure.
    """

    cfg = cfg or ValidateConfig()
    issues: list[ValidationIssue] = []

    def emit(
        severity: Severity,
        code: str,
        message: str,
        path: str = "",
        hint: Optional[str] = None,
    ) -> None:
        if code in cfg.ignore:
            return
        final_severity: Severity = (
            "error" if (severity == "warning" and code in cfg.escalate) else severity
        )
        issues.append(
            ValidationIssue(
                severity=final_severity,
                code=code,
                message=message,
                path=path,
                hint=hint,
            )
        )

    def check_name(value: Any, code: str, what: str, path: str) -> bool:
        if not isinstance(value, str) or not value:
            emit("error", code, f"{what} missing string name", path=path)
            return False
        if not JAVA_NAME_RE.match(value):
            emit(
                "error",
                code,
                f"{what} {value!r} is not a valid Java name",
                path=path,
                hint="Use a dotted name such as com.example.Widget",
            )
            return False
        return True

    for key in ("imports", "packages"):
        values = model.get(key)
        if values is None:
            continue
        if not isinstance(values, list):
            emit("error", f"E_{key.upper()}_NOT_LIST", f"model.{key} must be a list", path=f"/{key}")
            continue
        seen: set[str] = set()
        for i, value in enumerate(values):
            if not check_name(value, f"E_{key.upper()}_ENTRY_INVALID", f"{key} entry", f"/{key}/{i}"):
                continue
            if value in seen:
                emit(
                    "warning",
                    f"W_{key.upper()}_DUPLICATE",
                    f"{key} entry {value!r} listed more than once",
                    path=f"/{key}/{i}",
                )
            seen.add(value)

    real_seen: dict[str, str] = {}

    def track_real(real_name: str, path: str) -> None:
        if real_name in real_seen:
            emit(
                "warning",
                "W_DUPLICATE_REAL_TYPE",
                f"real type {real_name!r} is shadowed more than once "
                f"(also at {real_seen[real_name]}); the last entry wins",
                path=path,
            )
        else:
            real_seen[real_name] = path

    shadows = model.get("shadows", []) or []
    if not isinstance(shadows, list):
        emit("error", "E_SHADOWS_NOT_LIST", "model.shadows must be a list", path="/shadows")
        shadows = []

    for i, item in enumerate(shadows):
        path = f"/shadows/{i}"
        if not isinstance(item, dict):
            emit(
                "warning",
                "W_SHADOWS_ITEM_NOT_MAPPING",
                "model.shadows contains a non-mapping item; skipping",
                path=path,
            )
            continue

        check_name(item.get("shadow"), "E_SHADOW_NAME_INVALID", "shadow", f"{path}/shadow")

        real = item.get("real")
        if isinstance(real, dict):
            real_name = real.get("name")
            real_path = f"{path}/real/name"
            params = real.get("type_parameters") or []
            if not isinstance(params, list):
                emit(
                    "error",
                    "E_TYPE_PARAMETERS_NOT_LIST",
                    "real.type_parameters must be a list",
                    path=f"{path}/real/type_parameters",
                )
                params = []
            for j, param in enumerate(params):
                name = param.get("name") if isinstance(param, dict) else param
                if not isinstance(name, str) or not JAVA_IDENT_RE.match(name):
                    emit(
                        "error",
                        "E_TYPE_PARAMETER_INVALID",
                        f"type parameter {name!r} is not a valid Java identifier",
                        path=f"{path}/real/type_parameters/{j}",
                    )
                bounds = param.get("bounds") if isinstance(param, dict) else None
                if bounds is not None and (
                    not isinstance(bounds, list)
                    or not all(isinstance(b, str) and b for b in bounds)
                ):
                    emit(
                        "error",
                        "E_TYPE_PARAMETER_BOUNDS_INVALID",
                        f"type parameter {name!r} bounds must be a list of type names",
                        path=f"{path}/real/type_parameters/{j}/bounds",
                    )
            if not _is_flag(real.get("public")):
                emit(
                    "error",
                    "E_FLAG_NOT_BOOL",
                    f"real.public must be true or false, got {real.get('public')!r}",
                    path=f"{path}/real/public",
                )
        else:
            real_name = real
            real_path = f"{path}/real"

        if check_name(real_name, "E_REAL_NAME_INVALID", "real type", real_path):
            track_real(real_name, path)

        for bound_key in ("min_version", "max_version"):
            if not _is_version(item.get(bound_key)):
                emit(
                    "error",
                    "E_VERSION_NOT_INT",
                    f"{bound_key} must be an integer, got {item.get(bound_key)!r}",
                    path=f"{path}/{bound_key}",
                )

        for flag_key in ("deprecated", "accessor"):
            if not _is_flag(item.get(flag_key)):
                emit(
                    "error",
                    "E_FLAG_NOT_BOOL",
                    f"{flag_key} must be true or false, got {item.get(flag_key)!r}",
                    path=f"{path}/{flag_key}",
                )

        min_v, max_v = item.get("min_version"), item.get("max_version")
        if (
            isinstance(min_v, int)
            and isinstance(max_v, int)
            and min_v != UNBOUNDED
            and max_v != UNBOUNDED
            and min_v > max_v
        ):
            emit(
                "warning",
                "W_VERSION_RANGE_EMPTY",
                f"min_version {min_v} is greater than max_version {max_v}; "
                "the resetter can never run",
                path=path,
            )

        method = item.get("resetter")
        if method is not None and (not isinstance(method, str) or not JAVA_IDENT_RE.match(method)):
            emit(
                "error",
                "E_RESETTER_INVALID",
                f"resetter {method!r} is not a valid Java method name",
                path=f"{path}/resetter",
            )

    extra = model.get("extra_shadows", []) or []
    if not isinstance(extra, list):
        emit("error", "E_EXTRA_SHADOWS_NOT_LIST", "model.extra_shadows must be a list", path="/extra_shadows")
        extra = []

    for i, item in enumerate(extra):
        path = f"/extra_shadows/{i}"
        if not isinstance(item, dict):
            emit(
                "warning",
                "W_EXTRA_SHADOWS_ITEM_NOT_MAPPING",
                "model.extra_shadows contains a non-mapping item; skipping",
                path=path,
            )
            continue
        check_name(item.get("shadow"), "E_SHADOW_NAME_INVALID", "shadow", f"{path}/shadow")
        if check_name(item.get("real"), "E_REAL_NAME_INVALID", "real type", f"{path}/real"):
            track_real(item["real"], path)

    return issues


def validate_model(model: dict[str, Any]) -> Tuple[list[str], list[str]]:
    """Split issues into (errors, warnings) message lists for the CLI."""
    issues = validate_model_issues(model)
    errors = [iss.message for iss in issues if iss.severity == "error"]
    warnings = [iss.message for iss in issues if iss.severity == "warning"]
    return errors, warnings
