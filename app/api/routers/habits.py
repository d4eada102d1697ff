# app/api/routers/habits.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.engine.domains import Domain
from app.engine.reporting import Report
from app.models.user_profile import UserProfile
from app.services.habit_log import user_habit_log_service
from app.schemas.habit_log import (
    DashboardResponse,
    HabitLogCreate,
    HabitLogRead,
    SubmissionResponse,
    XPPreviewResponse,
)

router = APIRouter(prefix="/habits", tags=["Habit Logs"])


# ====================================================
# SUBMISSION
# ====================================================

@router.post(
    "",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log today's habits for one domain"
)
def submit_habit_log(
    log_data: HabitLogCreate,
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Store one domain's metrics for a day and award XP.

    - **domain**: One of the six life domains
    - **date**: Optional, defaults to today
    - metrics the domain does not use are ignored

    Returns the stored log, XP earned, whether the streak moved and the
    updated profile.
    """
    return user_habit_log_service.submit_log(db, user=current_user, data=log_data)


@router.post(
    "/preview",
    response_model=XPPreviewResponse,
    summary="Preview XP for a submission"
)
def preview_habit_log(
    log_data: HabitLogCreate,
    current_user: UserProfile = Depends(get_current_user)
):
    """
    Score a submission without storing anything.
    """
    return user_habit_log_service.preview_xp(log_data)


# ====================================================
# READ
# ====================================================

@router.get(
    "",
    response_model=List[HabitLogRead],
    summary="List my habit logs"
)
def list_habit_logs(
    domain: Optional[Domain] = Query(None, description="Only logs of this domain"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Own logs, newest first.
    """
    return user_habit_log_service.list_logs(
        db, user_id=current_user.id, domain=domain, skip=skip, limit=limit
    )


@router.get(
    "/report",
    response_model=Report,
    summary="Analysis report"
)
def get_report(
    window: str = Query("7", pattern="^(7|30|all)$", description="7, 30 or all"),
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Daily and cumulative XP, logs per domain, balance scores and a 14 day
    consistency grid.

    - **window**: `7`, `30` or `all`
    """
    window_days = None if window == "all" else int(window)
    return user_habit_log_service.get_report(
        db, user_id=current_user.id, window_days=window_days
    )


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Dashboard summary"
)
def get_dashboard(
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return user_habit_log_service.get_dashboard(db, user=current_user)
