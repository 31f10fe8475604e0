import re
import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .base import DuplicateError, QAError, RepositoryError

logger = logging.getLogger(__name__)

# -----------------------
# Column extraction helpers
# -----------------------

def _extract_unique_columns(msg: str) -> list[str] | None:
    """
    Best-effort extraction of the columns named in a unique-constraint message.
      - SQLite:   'UNIQUE constraint failed: users.name'
      - Postgres: 'DETAIL:  Key (name)=(John Doe) already exists.'
    """
    if not msg:
        return None

    m = re.search(r'UNIQUE constraint failed: (?P<cols>.+)$', msg, flags=re.IGNORECASE | re.MULTILINE)
    if m:
        return [c.split('.')[-1].strip() for c in re.split(r',\s*', m.group("cols"))]

    m = re.search(r'key \((?P<cols>[^)]+)\)=', msg, flags=re.IGNORECASE)
    if m:
        return [c.strip().strip('"') for c in m.group("cols").split(",")]

    return None


def _is_unique_violation(msg: str) -> bool:
    lowered = msg.lower()
    return "unique" in lowered or "duplicate" in lowered or "already exists" in lowered


def raise_mapped_integrity_error(exc: IntegrityError, model_name: str | None = None) -> None:
    """
    Map a SQLAlchemy IntegrityError to an app-level exception and raise it.
    """
    msg = str(exc.orig) if exc.orig is not None else str(exc)
    model_part = model_name or "Record"

    if _is_unique_violation(msg):
        columns = _extract_unique_columns(msg)
        # Duplicates are expected client-level scenarios (409), so INFO rather than WARNING.
        logger.info("mapper.duplicate_detected", extra={"model": model_part, "fields": columns})
        if columns:
            raise DuplicateError(f"{model_part} already exists for field(s): {', '.join(columns)}", fields=columns) from exc
        raise DuplicateError(f"{model_part} already exists") from exc

    logger.warning("mapper.unknown_integrity_error", extra={"model": model_part})
    # Raw DB text only at DEBUG; it may contain row values.
    logger.debug("mapper.unknown_integrity_raw", extra={"model": model_part, "raw": msg})
    raise RepositoryError(f"{model_part} database integrity error.") from exc


# -----------------------
# Async context manager to DRY error handling in repositories
# -----------------------
@asynccontextmanager
async def db_error_handler(db: AsyncSession, model_name: str | None = None):
    """
    Usage:
        async with db_error_handler(self.db, self.model.__name__):
            ... DB ops that may raise IntegrityError ...
    This will rollback on error and raise a mapped app-level exception.
    """
    try:
        yield
    except IntegrityError as exc:
        try:
            await db.rollback()
        except Exception:
            logger.exception("Failed to rollback session after IntegrityError", extra={"model": model_name})
        raise_mapped_integrity_error(exc, model_name)
    except QAError:
        # already app-level
        raise
    except Exception as exc:
        try:
            await db.rollback()
        except Exception:
            logger.exception("Failed to rollback session after unexpected error", extra={"model": model_name})

        logger.exception("Unexpected DB error for %s", model_name, extra={"model": model_name})
        raise RepositoryError(f"Failed to operate on {model_name or 'database'}") from exc
