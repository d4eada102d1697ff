# app/api/routers/leaderboard.py
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.models.user_profile import UserProfile
from app.services.user_profile import user_profile_service
from app.schemas.user_profile import LeaderboardEntry

router = APIRouter(prefix="/leaderboard", tags=["Leaderboard"])


@router.get(
    "",
    response_model=List[LeaderboardEntry],
    summary="Top profiles by points"
)
def get_leaderboard(
    limit: int = Query(50, ge=1, le=200),
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Profiles ordered by points, highest first. Ties go to the older profile.
    The caller's own row has `is_current_user` set.
    """
    return user_profile_service.get_leaderboard(db, current_user, limit=limit)
