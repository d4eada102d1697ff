# services/user_profile.py
import logging
from typing import List
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import ConflictError, UnauthorizedError
from app.core.security import issue_tokens, load_user, verify_refresh_token
from app.crud.user_profile import crud_user_profile
from app.engine.progression import derive_standing, level_progress, LevelProgress
from app.models.user_profile import UserProfile
from app.schemas.user_profile import (
    LeaderboardEntry,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserProfileOut,
)

logger = logging.getLogger(__name__)

# Each self-assessment point is worth this many starting XP.
ASSESSMENT_MULTIPLIER = 10


# =====================================================================
# SERVICE CLASS
# =====================================================================


class UserProfileService:
    """Service layer for registration, login and profile reads."""

    def __init__(self):
        self.crud = crud_user_profile

    # =====================================================================
    # REGISTRATION
    # =====================================================================

    def register_user(self, db: Session, data: RegisterRequest) -> UserProfile:
        """
        Public registration.

        Starting points are the sum of the six domain ratings times
        ASSESSMENT_MULTIPLIER; level and rank follow from them.

        Raises:
            ConflictError: If the email is already registered
        """
        email = data.email.lower()
        if self.crud.get_by_email(db, email=email):
            raise ConflictError("Email already registered")

        points = sum(data.ratings.values()) * ASSESSMENT_MULTIPLIER
        user = self.crud.create(
            db,
            name=data.name,
            email=email,
            password=data.password,
            standing=derive_standing(points),
            initial_assessment={domain.value: rating for domain, rating in data.ratings.items()},
        )
        logger.info(f"Registered user {user.id} with {points} starting points")
        return user

    # =====================================================================
    # AUTHENTICATION & LOGIN
    # =====================================================================

    def authenticate_user(self, db: Session, login_data: LoginRequest) -> UserProfile:
        """
        Authenticate with email and password.

        Raises:
            UnauthorizedError: If credentials are invalid
        """
        user = self.crud.get_by_email(db, email=login_data.email)
        if not user or not self.crud.verify_password(login_data.password, user.password_hash):
            raise UnauthorizedError("Invalid email or password")
        return user

    def login(self, db: Session, login_data: LoginRequest) -> TokenResponse:
        user = self.authenticate_user(db, login_data)
        return TokenResponse(user=UserProfileOut.model_validate(user), **issue_tokens(user))

    def refresh(self, db: Session, refresh_token: str) -> TokenResponse:
        user_id = verify_refresh_token(refresh_token)
        user = load_user(db, user_id)
        return TokenResponse(user=UserProfileOut.model_validate(user), **issue_tokens(user))

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get_level_progress(self, user: UserProfile) -> LevelProgress:
        return level_progress(user.points)

    def get_leaderboard(
        self, db: Session, requesting_user: UserProfile, limit: int = None
    ) -> List[LeaderboardEntry]:
        """Top profiles by points, flagging the requesting user."""
        limit = limit or settings.LEADERBOARD_LIMIT
        profiles = self.crud.get_leaderboard(db, limit=limit)
        return [
            LeaderboardEntry(
                position=position,
                id=profile.id,
                name=profile.name,
                level=profile.level,
                rank=profile.rank,
                points=profile.points,
                current_streak=profile.current_streak,
                is_current_user=profile.id == requesting_user.id,
            )
            for position, profile in enumerate(profiles, start=1)
        ]


# =====================================================================
# SINGLETON INSTANCE
# =====================================================================

user_profile_service = UserProfileService()
