# services/progression.py
import logging
from typing import Callable, Optional, TypeVar
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import ConflictError, DatabaseConflictError, DatabaseError
from app.crud.base import commit
from app.crud.user_profile import crud_user_profile
from app.engine.progression import Standing, derive_standing
from app.engine.streak import StreakState
from app.models.user_profile import UserProfile

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProgressionService:
    """
    Applies XP and streak changes to a profile.

    Every change runs as one transaction: the staged rows and the profile
    write commit together or not at all. The profile's version column turns
    a lost update into a DatabaseConflictError, and the whole unit of work
    is replayed from a fresh read.
    """

    def __init__(self):
        self.profile_crud = crud_user_profile

    def stage_award(
        self,
        db: Session,
        *,
        user: UserProfile,
        xp: int,
        streak: Optional[StreakState] = None,
    ) -> Standing:
        """Stage points (and optionally streak) on the profile; caller commits."""
        standing = derive_standing((user.points or 0) + xp)
        self.profile_crud.stage_progress(db, db_obj=user, standing=standing, streak=streak)
        return standing

    def run_atomic(
        self,
        db: Session,
        unit_of_work: Callable[[], T],
        *,
        description: str,
        attempts: Optional[int] = None,
    ) -> T:
        """
        Run `unit_of_work` and commit, replaying it on version conflicts.

        `unit_of_work` must re-read whatever it depends on; after a rollback
        every loaded instance is expired and reloads on access.

        Raises:
            ConflictError: Still conflicting after the last attempt
            DatabaseError: Storage failed; nothing was committed
        """
        attempts = attempts or settings.PROFILE_UPDATE_RETRIES

        for attempt in range(1, attempts + 1):
            try:
                result = unit_of_work()
                commit(db)
                return result
            except DatabaseConflictError:
                logger.warning(
                    f"Concurrent profile update during {description}, "
                    f"attempt {attempt}/{attempts}"
                )
            except SQLAlchemyError as exc:
                db.rollback()
                raise DatabaseError(str(exc)) from exc
            except Exception:
                db.rollback()
                raise

        raise ConflictError("Your profile was updated at the same time, please try again")


progression_service = ProgressionService()
