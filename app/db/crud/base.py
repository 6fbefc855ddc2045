import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Union
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, SQLAlchemyError, StatementError
from sqlalchemy.orm import Session
from app.db.errors import DataStoreError, ErrorKind

logger = logging.getLogger(__name__)


def to_store_error(exc: Union[SQLAlchemyError, OverflowError]) -> DataStoreError:
    """Classify a SQLAlchemy or driver failure into the data layer's error kinds."""
    if isinstance(exc, OverflowError):
        # The driver rejects integers that do not fit its column type while binding
        return DataStoreError(ErrorKind.INVALID, str(exc))

    message = str(getattr(exc, "orig", None) or exc)
    if isinstance(exc, IntegrityError):
        kind = ErrorKind.CONSTRAINT_VIOLATION
    elif isinstance(exc, DataError):
        kind = ErrorKind.INVALID
    elif isinstance(exc, StatementError) and not isinstance(exc, DBAPIError):
        # Raised while binding parameters, before anything reaches the database
        kind = ErrorKind.INVALID
    else:
        kind = ErrorKind.UNKNOWN
    return DataStoreError(kind, message)


@contextmanager
def translate_errors(db: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise any database failure as a DataStoreError."""
    try:
        yield
    except (SQLAlchemyError, OverflowError) as e:
        db.rollback()
        error = to_store_error(e)
        if error.kind is ErrorKind.UNKNOWN:
            logger.error("Failed to %s: %s", action, error.message)
        else:
            logger.warning("Failed to %s (%s): %s", action, error.kind.value, error.message)
        raise error from e


def not_found(entity: str, entity_id: int) -> DataStoreError:
    logger.warning("%s %s not found", entity, entity_id)
    return DataStoreError(ErrorKind.NOT_FOUND, f"{entity} not found")


def apply_changes(db_obj: Any, changes: Dict[str, Any]) -> None:
    for field, value in changes.items():
        setattr(db_obj, field, value)
