# app/api/routers/insights.py
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.models.user_profile import UserProfile
from app.services.insight_client import InsightClient, get_insight_client
from app.services.simulation import simulation_service
from app.schemas.simulation import InsightRequest, SimulationRead
from app.schemas.user_profile import SuccessResponse

router = APIRouter(prefix="/insights", tags=["AI Insights"])


@router.post(
    "",
    response_model=SimulationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Generate an AI projection for one domain"
)
def generate_insight(
    request: InsightRequest,
    current_user: UserProfile = Depends(get_current_user),
    client: InsightClient = Depends(get_insight_client),
    db: Session = Depends(get_db)
):
    """
    Send recent logs of the domain to the language model and store its
    30 day projection.

    Returns 422 when there are no logs for the domain and 502 when the
    model call fails. Nothing is stored on failure.
    """
    return simulation_service.generate(
        db, user=current_user, domain=request.domain, client=client
    )


@router.get(
    "",
    response_model=List[SimulationRead],
    summary="List my insights"
)
def list_insights(
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Stored insights, newest first.
    """
    return simulation_service.list_for_user(db, current_user)


@router.delete(
    "/{simulation_id}",
    response_model=SuccessResponse,
    summary="Delete one insight"
)
def delete_insight(
    simulation_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    simulation_service.delete(db, simulation_id, current_user)
    return SuccessResponse(message="Insight deleted")


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Delete all my insights"
)
def clear_insights(
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    deleted = simulation_service.clear(db, current_user)
    return SuccessResponse(message=f"Deleted {deleted} insights")
