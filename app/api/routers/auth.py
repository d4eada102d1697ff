# app/api/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.services.user_profile import user_profile_service
from app.models.user_profile import UserProfile
from app.schemas.user_profile import (
    LevelProgressOut,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserProfileOut,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# =====================================================================
# PUBLIC ENDPOINTS - No authentication required
# =====================================================================

@router.post(
    "/register",
    response_model=UserProfileOut,
    status_code=status.HTTP_201_CREATED,
    summary="Register with the initial self-assessment"
)
def register(
    register_data: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Create a profile.

    - **name**: Display name
    - **email**: Valid email address, unique
    - **password**: At least 6 characters
    - **ratings**: Self-rating 1-10 for each of the six life domains

    Starting points are the sum of the ratings times 10.
    """
    return user_profile_service.register_user(db, register_data)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login to get access token"
)
def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate and receive access and refresh tokens.

    - **email**: Account email
    - **password**: Account password
    """
    return user_profile_service.login(db, login_data)


@router.post(
    "/refresh",
    response_model=TokenResponse,
    summary="Refresh access token"
)
def refresh_token(
    refresh_data: RefreshTokenRequest,
    db: Session = Depends(get_db)
):
    """
    Get a new token pair using a refresh token.
    """
    return user_profile_service.refresh(db, refresh_data.refresh_token)


# =====================================================================
# USER ENDPOINTS - Authentication required
# =====================================================================

@router.get(
    "/me",
    response_model=UserProfileOut,
    summary="Get current profile"
)
def get_current_user_profile(
    current_user: UserProfile = Depends(get_current_user)
):
    """
    Points, level, rank and streaks of the authenticated profile.
    """
    return current_user


@router.get(
    "/me/progress",
    response_model=LevelProgressOut,
    summary="Get progress towards the next level"
)
def get_level_progress(
    current_user: UserProfile = Depends(get_current_user)
):
    progress = user_profile_service.get_level_progress(current_user)
    return LevelProgressOut(**progress._asdict())
