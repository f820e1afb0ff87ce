"""Game group request validation routes."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException

from gamegroups.models.game_group import (
    FieldErrorResponse,
    ValidationErrorResponse,
    ValidationSuccessResponse,
)
from gamegroups.services import game_group_service
from gamegroups.services.game_group_service import ValidationFailure

router = APIRouter(prefix="/api/game-groups", tags=["game-groups"])


def _reject(failure: ValidationFailure) -> HTTPException:
    detail = ValidationErrorResponse(
        message="Invalid fields",
        field_errors=[
            FieldErrorResponse(field=v.field, message=v.rule) for v in failure.violations
        ],
    )
    return HTTPException(status_code=422, detail=detail.model_dump())


@router.get("/options")
async def get_options():
    """List the allowed values for visibility, accessRule and modality."""
    return game_group_service.list_options()


@router.post("/validate-update", response_model=ValidationSuccessResponse)
async def validate_update(data: Any = Body(None)):
    """Check a game group update payload without applying it.

    Returns the normalized payload, or 422 with every violated field.
    """
    try:
        request = game_group_service.build_update_request(data)
    except ValidationFailure as e:
        raise _reject(e)
    return {"valid": True, "request": game_group_service.to_payload(request)}


@router.post("/validate-create", response_model=ValidationSuccessResponse)
async def validate_create(data: Any = Body(None)):
    """Check a game group creation payload without applying it."""
    try:
        request = game_group_service.build_create_request(data)
    except ValidationFailure as e:
        raise _reject(e)
    return {"valid": True, "request": game_group_service.to_payload(request)}
