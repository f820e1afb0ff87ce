"""Game group request contract FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gamegroups.config import settings

# Configure logging so our INFO messages appear in container logs
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

from gamegroups.models.game_group import FieldErrorResponse, ValidationErrorResponse
from gamegroups.routers import game_groups

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

app = FastAPI(
    title="Game Groups",
    description="Validation contract for game group create and update requests",
    version=VERSION,
)

# CORS: localhost defaults plus any extra origins from GAMEGROUPS_CORS_ORIGINS
_cors_origins = ["http://localhost:5173", "http://localhost:8080"]
_cors_origins.extend(settings.cors_origin_list)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(game_groups.router)

if settings.enforce_player_order:
    logger.info("minPlayers <= maxPlayers is enforced (GAMEGROUPS_ENFORCE_PLAYER_ORDER=true)")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}


@app.exception_handler(RequestValidationError)
async def request_validation_error(request: Request, exc: RequestValidationError):
    """Report unparseable bodies in the same shape as field violations."""
    field_errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) if loc[:1] == ["body"] and len(loc) > 1 else "body"
        if error.get("type") == "json_invalid":
            field, message = "body", "must be valid JSON"
        else:
            message = error.get("msg", "is invalid")
        field_errors.append(FieldErrorResponse(field=field, message=message))

    logger.info("Rejected unparseable request to %s", request.url.path)
    detail = ValidationErrorResponse(message="Invalid fields", field_errors=field_errors)
    return JSONResponse(status_code=422, content={"detail": detail.model_dump()})
