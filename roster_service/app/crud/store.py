import logging
import uuid
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roster_service.app.errors import DuplicateKeyError, MissingReferenceError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"
FOREIGN_KEY_VIOLATION_SQLSTATE = "23503"


def parse_id(raw_id) -> Optional[uuid.UUID]:
    """Ids arrive as raw path strings; anything that is not a UUID matches no record."""
    if isinstance(raw_id, uuid.UUID):
        return raw_id
    try:
        return uuid.UUID(str(raw_id))
    except ValueError:
        return None


def _sqlstate(exc: IntegrityError) -> Optional[str]:
    # asyncpg exposes the SQLSTATE; SQLite only gives a message
    return getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)


def is_unique_violation(exc: IntegrityError) -> bool:
    code = _sqlstate(exc)
    if code:
        return code == UNIQUE_VIOLATION_SQLSTATE
    return "unique" in str(exc.orig).lower()


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    code = _sqlstate(exc)
    if code:
        return code == FOREIGN_KEY_VIOLATION_SQLSTATE
    return "foreign key" in str(exc.orig).lower()


async def commit_unique(
    db: AsyncSession, entity: str, field: str, value, reference: Optional[Tuple[str, object]] = None
) -> None:
    """Commit pending writes, turning store rejections into domain errors.

    A unique-index rejection becomes DuplicateKeyError; the store's index is
    the only uniqueness check, nothing is looked up first. When `reference`
    names the (entity, id) the write points at, a foreign-key rejection
    becomes MissingReferenceError. Any other failure is re-raised as is.
    """
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        if is_unique_violation(e):
            logger.warning(f"Unique index rejected {entity} with {field} {value!r}")
            raise DuplicateKeyError(entity, field, value) from e
        if reference is not None and is_foreign_key_violation(e):
            logger.warning(f"Foreign key rejected {entity} referencing {reference[0]} {reference[1]}")
            raise MissingReferenceError(*reference) from e
        logger.error(f"IntegrityError writing {entity}: {e}", exc_info=True)
        raise
    except Exception:
        await db.rollback()
        raise
