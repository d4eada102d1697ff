# app/api/routers/tasks.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.models.user_profile import UserProfile
from app.services.task import task_service
from app.schemas.task import TaskCompletionResponse, TaskCreate, TaskRead
from app.schemas.user_profile import SuccessResponse

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task"
)
def create_task(
    task_data: TaskCreate,
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Create a task. Reward by difficulty: easy 5, medium 10, hard 15 XP.
    """
    return task_service.create_task(db, task_data, current_user)


@router.get(
    "",
    response_model=List[TaskRead],
    summary="List my tasks"
)
def list_tasks(
    completed: Optional[bool] = Query(None, description="Filter on completion"),
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return task_service.list_tasks(db, current_user, completed=completed)


@router.post(
    "/{task_id}/complete",
    response_model=TaskCompletionResponse,
    summary="Complete a task"
)
def complete_task(
    task_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Mark the task done and add its reward to the profile.

    A task pays out once; completing it again returns 409.
    """
    return task_service.complete_task(db, task_id, current_user)


@router.delete(
    "/{task_id}",
    response_model=SuccessResponse,
    summary="Delete a task"
)
def delete_task(
    task_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    task_service.delete_task(db, task_id, current_user)
    return SuccessResponse(message="Task deleted")
