r"""
Map SQLAlchemy failures to application errors.

Repositories wrap their DB work in `db_error_handler`; whatever the driver raises
leaves the repository as an `AppError`:

| DB failure                     | AppError category | HTTP |
| ------------------------------ | ----------------- | ---- |
| NOT NULL violation             | BAD_REQUEST       | 400  |
| any other integrity error      | UNCLASSIFIED      | 500  |
| any other SQLAlchemy error     | UNCLASSIFIED      | 500  |

Raw DB messages are only ever logged at DEBUG; clients get a safe message.
"""
import re
import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .base import AppError, bad_request, unclassified

logger = logging.getLogger(__name__)

NOT_NULL_SQLSTATE = "23502"

# -----------------------
# Column extraction helpers
# -----------------------

def _extract_not_null_columns(msg: str) -> list[str] | None:
    """
    Pull the column names out of NOT NULL violation messages:
      - Postgres: 'null value in column "email" of relation "users" violates not-null constraint'
      - SQLite:   'NOT NULL constraint failed: users.email'
    """
    if not msg:
        return None

    m = re.search(r'null value in column "(?P<col>[^"]+)"', msg, flags=re.IGNORECASE)
    if m:
        return [m.group("col")]

    m = re.search(r'NOT NULL constraint failed: (?P<cols>[^\n]+)', msg, flags=re.IGNORECASE)
    if m:
        return [c.split('.')[-1].strip() for c in re.split(r',\s*', m.group("cols").strip())]

    return None


def _is_not_null_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == NOT_NULL_SQLSTATE
    msg = str(orig) if orig is not None else str(exc)
    return "not null" in msg.lower() or "null value in column" in msg.lower()


# -----------------------
# Mapper
# -----------------------

def map_integrity_error(exc: IntegrityError, model_name: str | None = None) -> AppError:
    """
    Translate an IntegrityError into an AppError (the caller raises it).
    """
    model_part = model_name or "Record"
    raw = str(exc.orig) if exc.orig is not None else str(exc)

    if _is_not_null_violation(exc):
        columns = _extract_not_null_columns(raw) or []
        # Missing input is a client-level problem; no stack trace needed.
        logger.info(
            "mapper.not_null_violation",
            extra={"model": model_part, "fields": columns},
        )
        fields = {col: "must not be null" for col in columns}
        return bad_request(f"Missing required field(s) for {model_part}", fields=fields or None)

    logger.warning("mapper.unknown_integrity_error", extra={"model": model_part})
    logger.debug("mapper.unknown_integrity_raw", extra={"model": model_part, "raw": raw})
    return unclassified(f"{model_part} database integrity error.")


# -----------------------
# Async context manager to DRY error handling in repositories
# -----------------------
@asynccontextmanager
async def db_error_handler(db: AsyncSession, model_name: str | None = None):
    """
    Usage:
        async with db_error_handler(self.db, self.model.__name__):
            ... DB ops that may raise ...
    Rolls the session back on error and raises a mapped AppError.
    AppErrors raised inside the block pass through untouched.
    """
    try:
        yield
    except AppError:
        raise
    except IntegrityError as exc:
        await _safe_rollback(db, model_name)
        raise map_integrity_error(exc, model_name) from exc
    except SQLAlchemyError as exc:
        await _safe_rollback(db, model_name)
        # Unexpected DB failures are logged with stack trace for diagnostics.
        logger.exception("Unexpected DB error for %s", model_name, extra={"model": model_name})
        raise unclassified(f"Failed to operate on {model_name or 'database'}") from exc


async def _safe_rollback(db: AsyncSession, model_name: str | None) -> None:
    try:
        await db.rollback()
    except SQLAlchemyError:
        logger.exception("Failed to rollback session", extra={"model": model_name})
