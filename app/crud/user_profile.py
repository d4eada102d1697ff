# crud/user_profile.py
from typing import Dict, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy import asc, desc
from passlib.context import CryptContext

from app.crud.base import commit
from app.engine.progression import Standing
from app.engine.streak import StreakState
from app.models.user_profile import UserProfile

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class UserProfileCRUD:
    """CRUD operations for UserProfile model."""

    # =====================================================================
    # HELPER METHODS
    # =====================================================================

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return pwd_context.verify(plain_password, hashed_password)

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(
        self,
        db: Session,
        *,
        name: str,
        email: str,
        password: str,
        standing: Standing,
        initial_assessment: Dict[str, int],
    ) -> UserProfile:
        """
        Create a new profile with seeded points.

        Args:
            db: Database session
            name: Display name
            email: Unique email
            password: Plain password, hashed here
            standing: Points, level and rank to start from
            initial_assessment: Onboarding ratings keyed by domain name

        Returns:
            Created UserProfile instance
        """
        db_obj = UserProfile(
            name=name,
            email=email,
            password_hash=self.hash_password(password),
            points=standing.points,
            level=standing.level,
            rank=standing.rank.value,
            current_streak=0,
            longest_streak=0,
            initial_assessment=initial_assessment,
        )

        db.add(db_obj)
        commit(db)
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get(self, db: Session, id: UUID) -> Optional[UserProfile]:
        """Get profile by ID."""
        return db.query(UserProfile).filter(UserProfile.id == id).first()

    def get_by_email(self, db: Session, email: str) -> Optional[UserProfile]:
        """Get profile by email (case-insensitive)."""
        return (
            db.query(UserProfile)
            .filter(UserProfile.email == email.lower())
            .first()
        )

    def get_leaderboard(self, db: Session, *, limit: int = 50) -> List[UserProfile]:
        """
        Get profiles ordered by points.

        Args:
            db: Database session
            limit: Maximum number of profiles

        Returns:
            Profiles, highest points first, oldest first on ties
        """
        return (
            db.query(UserProfile)
            .order_by(desc(UserProfile.points), asc(UserProfile.created_at))
            .limit(limit)
            .all()
        )

    # =====================================================================
    # UPDATE OPERATIONS
    # =====================================================================

    def stage_progress(
        self,
        db: Session,
        *,
        db_obj: UserProfile,
        standing: Standing,
        streak: Optional[StreakState] = None,
    ) -> UserProfile:
        """
        Write new standing (and optionally streak) onto the profile without
        committing, so it lands in the caller's transaction.

        The version column makes the eventual commit fail if another writer
        got there first.
        """
        db_obj.points = standing.points
        db_obj.level = standing.level
        db_obj.rank = standing.rank.value

        if streak is not None:
            db_obj.current_streak = streak.current
            db_obj.longest_streak = streak.longest

        db.add(db_obj)
        return db_obj


# Create singleton instance
crud_user_profile = UserProfileCRUD()
