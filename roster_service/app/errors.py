"""Domain errors raised by the CRUD layer and their HTTP translation.

The CRUD functions raise these; only the handlers registered here turn
them into responses. Unknown exceptions are left to FastAPI, which answers
with a 500 after they are logged.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RosterError(Exception):
    """Base class for errors the API knows how to answer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateKeyError(RosterError):
    """The store rejected a write on one of its unique indexes."""

    def __init__(self, entity: str, field: str, value):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"A {entity} with {field} {value} already exists")


class NotFoundError(RosterError):
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} does not exist.")


class MissingReferenceError(RosterError):
    """A write referenced another record (e.g. a parent team) that is absent."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"Referenced {entity} with id {entity_id} does not exist.")


class HierarchyCycleError(RosterError):
    def __init__(self, team_id):
        self.team_id = team_id
        super().__init__(f"Team {team_id} cannot be its own ancestor")


async def duplicate_key_handler(request: Request, exc: DuplicateKeyError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"message": exc.message})


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    # Lookups by id answer 200 with the error in the body; clients depend on this shape
    return JSONResponse(status_code=status.HTTP_200_OK, content={"errorMessage": exc.message})


async def missing_reference_handler(request: Request, exc: MissingReferenceError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})


async def hierarchy_cycle_handler(request: Request, exc: HierarchyCycleError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"message": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DuplicateKeyError, duplicate_key_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(MissingReferenceError, missing_reference_handler)
    app.add_exception_handler(HierarchyCycleError, hierarchy_cycle_handler)
