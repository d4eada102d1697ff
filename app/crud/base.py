# crud/base.py
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.core.exceptions import DatabaseConflictError, DatabaseError

logger = logging.getLogger(__name__)


def commit(db: Session) -> None:
    """
    Commit the session, rolling back and translating failures.

    Raises:
        DatabaseConflictError: A versioned row changed since it was read
        DatabaseError: Any other storage failure
    """
    try:
        db.commit()
    except StaleDataError as exc:
        db.rollback()
        raise DatabaseConflictError(str(exc)) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Commit failed")
        raise DatabaseError(str(exc)) from exc
