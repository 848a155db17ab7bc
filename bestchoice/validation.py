"""
Request validation returning structured, field-level violations.

The constraints live on the pydantic models in ``bestchoice.types``. This
module runs them and translates each pydantic error into one of the
violation variants below, so callers get a flat list they can report
without depending on pydantic's error format.

Usage:
    violations = validate_keyword_create({"label": "  "})
    # [RequiredFieldMissing(field="label", message="Le libellé ...")]

    request = parse(PreferenceCreateRequest, payload)  # raises on failure
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, TypeVar, get_args

from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from core.logging import validation_logger

from .exceptions import RequestValidationFailed
from .types import (
    KeywordCreateRequest,
    KeywordUpdateRequest,
    PreferenceCreateRequest,
    SkillCreateRequest,
    SkillUpdateRequest,
)

M = TypeVar("M", bound=BaseModel)

Payload = Mapping[str, Any] | str | bytes | BaseModel

_LOWER_BOUND_ERRORS = frozenset({"greater_than_equal", "greater_than"})
_RANGE_ERRORS = _LOWER_BOUND_ERRORS | {"less_than_equal", "less_than"}


# =============================================================================
# Violation variants
# =============================================================================

@dataclass(frozen=True)
class Violation:
    field: str
    message: str

    rule: ClassVar[str] = "invalid"


@dataclass(frozen=True)
class RequiredFieldMissing(Violation):
    rule: ClassVar[str] = "required"


@dataclass(frozen=True)
class LengthExceeded(Violation):
    max_length: int
    actual_length: int

    rule: ClassVar[str] = "max-length"


@dataclass(frozen=True)
class RangeViolation(Violation):
    minimum: int | None
    maximum: int | None
    value: Any

    rule: ClassVar[str] = "range"


@dataclass(frozen=True)
class InvalidEnumValue(Violation):
    value: Any
    allowed: tuple[str, ...]

    rule: ClassVar[str] = "enum"


@dataclass(frozen=True)
class InvalidType(Violation):
    value: Any

    rule: ClassVar[str] = "type"


# =============================================================================
# Translation from pydantic errors
# =============================================================================

def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) if loc else "__root__"


def _field_info(model_cls: type[BaseModel] | None, name: str) -> FieldInfo | None:
    if model_cls is None:
        return None
    for field_name, info in model_cls.model_fields.items():
        if name in (field_name, info.alias):
            return info
    return None


def _bounds(info: FieldInfo | None) -> tuple[int | None, int | None]:
    minimum = maximum = None
    if info is not None:
        for constraint in info.metadata:
            minimum = getattr(constraint, "ge", minimum)
            maximum = getattr(constraint, "le", maximum)
    return minimum, maximum


def _enum_names(info: FieldInfo | None) -> tuple[str, ...]:
    if info is None:
        return ()
    for candidate in get_args(info.annotation) or (info.annotation,):
        if isinstance(candidate, type) and issubclass(candidate, Enum):
            return tuple(candidate.__members__)
    return ()


def _default_message(violation_cls: type[Violation], field: str, **extra: Any) -> str:
    if violation_cls is RequiredFieldMissing:
        return f"{field} est obligatoire"
    if violation_cls is LengthExceeded:
        return f"{field} ne doit pas dépasser {extra['max_length']} caractères"
    if violation_cls is RangeViolation:
        return f"{field} doit être compris entre {extra['minimum']} et {extra['maximum']}"
    if violation_cls is InvalidEnumValue:
        return f"{field} doit être l'une des valeurs : {', '.join(extra['allowed'])}"
    return f"{field} a un type invalide"


def _build(
    model_cls: type[BaseModel] | None,
    violation_cls: type[Violation],
    field: str,
    variant: str | None = None,
    **extra: Any,
) -> Violation:
    messages = getattr(model_cls, "violation_messages", None) or {}
    message = (
        (variant and messages.get((field, variant)))
        or messages.get((field, violation_cls.rule))
        or _default_message(violation_cls, field, **extra)
    )
    return violation_cls(field=field, message=message, **extra)


def _translate(model_cls: type[BaseModel] | None, error: Mapping[str, Any]) -> Violation:
    field = _field_name(tuple(error.get("loc", ())))
    kind = error["type"]
    value = error.get("input")
    ctx = error.get("ctx") or {}

    if kind in ("missing", "blank") or value is None:
        return _build(model_cls, RequiredFieldMissing, field)

    if kind == "string_too_long":
        return _build(
            model_cls,
            LengthExceeded,
            field,
            max_length=ctx.get("max_length"),
            actual_length=len(value),
        )

    info = _field_info(model_cls, field)

    if kind in _RANGE_ERRORS:
        minimum, maximum = _bounds(info)
        return _build(
            model_cls,
            RangeViolation,
            field,
            variant="range-min" if kind in _LOWER_BOUND_ERRORS else "range-max",
            minimum=minimum,
            maximum=maximum,
            value=value,
        )

    if kind == "enum":
        return _build(model_cls, InvalidEnumValue, field, value=value, allowed=_enum_names(info))

    return _build(model_cls, InvalidType, field, value=value)


def violations_from_errors(
    errors: Iterable[Mapping[str, Any]],
    model_cls: type[BaseModel] | None = None,
) -> list[Violation]:
    """
    Translate pydantic error dicts into violations.

    Without ``model_cls`` the default messages are used and range bounds
    or enum members are left unknown.
    """
    return [_translate(model_cls, error) for error in errors]


# =============================================================================
# Entry points
# =============================================================================

def _run(model_cls: type[M], payload: Payload) -> tuple[M | None, list[Violation]]:
    try:
        if isinstance(payload, (str, bytes)):
            return model_cls.model_validate_json(payload), []
        return model_cls.model_validate(payload), []
    except ValidationError as exc:
        return None, violations_from_errors(exc.errors(), model_cls)


def validate(model_cls: type[BaseModel], payload: Payload) -> list[Violation]:
    """
    Validate ``payload`` against ``model_cls``.

    Args:
        model_cls: One of the request or response schemas.
        payload: A mapping, a JSON document, or a model instance.

    Returns:
        Every violation found. An empty list means the payload is valid.
    """
    _, violations = _run(model_cls, payload)
    return violations


def parse(model_cls: type[M], payload: Payload) -> M:
    """
    Validate ``payload`` and return the model instance.

    Raises:
        RequestValidationFailed: With every violation, if any. Nothing of
            the payload is applied in that case.
    """
    instance, violations = _run(model_cls, payload)
    if violations:
        validation_logger.info(
            "request_validation_failed",
            model=model_cls.__name__,
            fields=[v.field for v in violations],
            rules=[v.rule for v in violations],
        )
        raise RequestValidationFailed(model_cls.__name__, violations)
    return instance  # type: ignore[return-value]


def validate_keyword_create(payload: Payload) -> list[Violation]:
    return validate(KeywordCreateRequest, payload)


def validate_keyword_update(payload: Payload) -> list[Violation]:
    return validate(KeywordUpdateRequest, payload)


def validate_skill_create(payload: Payload) -> list[Violation]:
    return validate(SkillCreateRequest, payload)


def validate_skill_update(payload: Payload) -> list[Violation]:
    return validate(SkillUpdateRequest, payload)


def validate_preference_create(payload: Payload) -> list[Violation]:
    return validate(PreferenceCreateRequest, payload)


__all__ = [
    "Violation",
    "RequiredFieldMissing",
    "LengthExceeded",
    "RangeViolation",
    "InvalidEnumValue",
    "InvalidType",
    "violations_from_errors",
    "validate",
    "parse",
    "validate_keyword_create",
    "validate_keyword_update",
    "validate_skill_create",
    "validate_skill_update",
    "validate_preference_create",
]
