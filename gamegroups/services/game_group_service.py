"""Game group request service: build validated requests and convert them for transport."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from gamegroups.config import settings
from gamegroups.models.game_group import (
    AccessRule,
    GameGroupCreateRequest,
    GameGroupFields,
    GameGroupUpdateRequest,
    Modality,
    Visibility,
)

logger = logging.getLogger(__name__)

_INTEGER_ERRORS = {"int_type", "int_parsing", "int_parsing_size", "int_from_float"}


@dataclass(frozen=True)
class FieldViolation:
    field: str
    rule: str

    def __str__(self) -> str:
        return f"{self.field}: {self.rule}"


class ValidationFailure(ValueError):
    """Raised when a payload breaks one or more field rules.

    Carries every violation, one per field, in field declaration order.
    """

    def __init__(self, violations: list[FieldViolation]):
        self.violations = list(violations)
        super().__init__("; ".join(str(v) for v in self.violations))

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.violations]


def _field_name(model: type[BaseModel], alias: str) -> str | None:
    """Map a wire (camelCase) name back to the model attribute."""
    for name, info in model.model_fields.items():
        if alias in (name, info.alias):
            return name
    return None


def _length_bounds(model: type[BaseModel], name: str) -> tuple[int | None, int | None]:
    min_length = max_length = None
    for meta in model.model_fields[name].metadata:
        min_length = getattr(meta, "min_length", min_length)
        max_length = getattr(meta, "max_length", max_length)
    return min_length, max_length


def _describe(model: type[BaseModel], name: str | None, error: dict) -> str:
    """Turn a pydantic error into a human-readable rule description."""
    kind = error["type"]

    if kind == "missing":
        return "is required"

    if kind in ("string_too_short", "string_too_long") and name:
        min_length, max_length = _length_bounds(model, name)
        if min_length:
            return f"length must be between {min_length} and {max_length}"
        return f"length must be at most {max_length}"

    if kind == "enum" and name:
        choices = model.model_fields[name].annotation
        return "must be one of " + ", ".join(member.value for member in choices)

    if kind in _INTEGER_ERRORS:
        return "must be an integer"

    if kind == "string_type":
        return "must be a string"

    return error["msg"]


def _violations(model: type[BaseModel], exc: ValidationError) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    seen: set[str] = set()
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        name = _field_name(model, field)
        # violations always carry the wire name, whatever spelling was sent
        if name:
            field = model.model_fields[name].alias or field
        if field in seen:
            continue
        seen.add(field)
        violations.append(FieldViolation(field, _describe(model, name, error)))
    return violations


def _build(model: type[GameGroupFields], data: Any, enforce_player_order: bool | None):
    if not isinstance(data, Mapping):
        raise ValidationFailure([FieldViolation("body", "must be a JSON object")])

    if enforce_player_order is None:
        enforce_player_order = settings.enforce_player_order

    try:
        request = model.model_validate(
            dict(data),
            context={"enforce_player_order": enforce_player_order},
        )
    except ValidationError as exc:
        failure = ValidationFailure(_violations(model, exc))
        logger.info(
            "Rejected %s with %d violation(s): %s",
            model.__name__, len(failure.violations), ", ".join(failure.fields),
        )
        raise failure from exc

    logger.debug("Accepted %s for campaign %r", model.__name__, request.campaign_name)
    return request


def build_update_request(
    data: Mapping[str, Any],
    *,
    enforce_player_order: bool | None = None,
) -> GameGroupUpdateRequest:
    """Validate a game group update payload.

    Keys may be camelCase or snake_case. Raises ValidationFailure listing
    every violated field; otherwise returns the immutable request.
    ``enforce_player_order`` overrides the configured default.
    """
    return _build(GameGroupUpdateRequest, data, enforce_player_order)


def build_create_request(
    data: Mapping[str, Any],
    *,
    enforce_player_order: bool | None = None,
) -> GameGroupCreateRequest:
    """Validate a game group creation payload. Same rules as updates."""
    return _build(GameGroupCreateRequest, data, enforce_player_order)


def to_payload(request: GameGroupFields) -> dict:
    """Convert a validated request to its plain wire shape.

    camelCase keys, enum members as their tokens, absent optionals omitted.
    """
    return request.model_dump(mode="json", by_alias=True, exclude_none=True)


def list_options() -> dict[str, list[str]]:
    """Closed value sets keyed by wire field name."""
    return {
        "visibility": [member.value for member in Visibility],
        "accessRule": [member.value for member in AccessRule],
        "modality": [member.value for member in Modality],
    }
