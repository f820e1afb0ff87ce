"""Pydantic models for game group requests."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class Visibility(str, Enum):
    PUBLIC = "PUBLIC"
    FRIENDS = "FRIENDS"
    PRIVATE = "PRIVATE"


class AccessRule(str, Enum):
    FREE = "FREE"
    FRIENDS = "FRIENDS"
    APPROVAL = "APPROVAL"


class Modality(str, Enum):
    ONLINE = "ONLINE"
    PRESENCIAL = "PRESENCIAL"


REQUIRED_FIELDS = (
    "campaign_name",
    "game_system",
    "short_description",
    "visibility",
    "access_rule",
    "modality",
)


class GameGroupFields(BaseModel):
    """Field set shared by the create and update payloads.

    Attributes are snake_case; the wire names are camelCase and either
    spelling is accepted on input. Instances are immutable.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    campaign_name: str = Field(..., min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)
    game_system: str = Field(..., min_length=2, max_length=50)
    setting_world: str | None = Field(None, max_length=100)
    short_description: str = Field(..., min_length=3, max_length=100)
    visibility: Visibility
    access_rule: AccessRule
    modality: Modality
    min_players: int | None = None
    max_players: int | None = None
    country: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    city: str | None = Field(None, max_length=100)
    themes_content: str | None = Field(None, max_length=500)
    punctuality_attendance: str | None = Field(None, max_length=500)
    house_rules: str | None = Field(None, max_length=500)
    behavioral_expectations: str | None = Field(None, max_length=500)

    @field_validator(*REQUIRED_FIELDS, mode="before")
    @classmethod
    def _require_value(cls, value):
        # null and whitespace-only text count as missing
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("required", "is required")
        return value

    @field_validator("min_players", "max_players", mode="before")
    @classmethod
    def _reject_bool(cls, value):
        # lax int parsing would turn true/false into 1/0
        if isinstance(value, bool):
            raise PydanticCustomError("integer", "must be an integer")
        return value

    @field_validator("max_players")
    @classmethod
    def _check_player_order(cls, value: int | None, info: ValidationInfo) -> int | None:
        context = info.context or {}
        if not context.get("enforce_player_order") or value is None:
            return value
        min_players = info.data.get("min_players")
        if min_players is not None and min_players > value:
            raise PydanticCustomError(
                "player_order", "must be greater than or equal to minPlayers"
            )
        return value


class GameGroupCreateRequest(GameGroupFields):
    """Payload for creating a game group."""


class GameGroupUpdateRequest(GameGroupFields):
    """Desired new state of a game group, submitted to the update operation."""


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    message: str
    field_errors: list[FieldErrorResponse]


class ValidationSuccessResponse(BaseModel):
    valid: bool = True
    request: dict
