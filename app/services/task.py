# services/task.py
import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.crud.task import crud_task
from app.models.task import Difficulty, Task
from app.models.user_profile import UserProfile
from app.schemas.task import TaskCompletionResponse, TaskCreate, TaskRead
from app.services.progression import progression_service

logger = logging.getLogger(__name__)


# =====================================================================
# SERVICE CLASS
# =====================================================================

class TaskService:
    """Service layer for one-off tasks that pay a fixed XP reward."""

    def __init__(self):
        self.crud = crud_task

    def _get_owned(self, db: Session, task_id: UUID, user: UserProfile) -> Task:
        task = self.crud.get_for_user(db, id=task_id, user_id=user.id)
        if not task:
            raise NotFoundError("Task not found")
        return task

    # =====================================================================
    # CREATE / READ
    # =====================================================================

    def create_task(self, db: Session, task_data: TaskCreate, user: UserProfile) -> Task:
        task = self.crud.create(
            db,
            user_id=user.id,
            title=task_data.title,
            description=task_data.description,
            difficulty=Difficulty(task_data.difficulty.value),
        )
        logger.info(f"User {user.id} created {task.difficulty.value} task {task.id}")
        return task

    def list_tasks(
        self, db: Session, user: UserProfile, completed: Optional[bool] = None
    ) -> List[Task]:
        return self.crud.get_by_user(db, user_id=user.id, completed=completed)

    # =====================================================================
    # COMPLETION
    # =====================================================================

    def complete_task(
        self, db: Session, task_id: UUID, user: UserProfile
    ) -> TaskCompletionResponse:
        """
        Mark a task completed and pay its reward exactly once.

        The streak is left alone; only habit logs move it.

        Raises:
            NotFoundError: Task missing or owned by someone else
            ConflictError: Task already completed
        """
        task = self._get_owned(db, task_id, user)

        def unit_of_work():
            if not self.crud.stage_completion(db, db_obj=task):
                raise ConflictError("Task already completed")
            return progression_service.stage_award(db, user=user, xp=task.xp_reward)

        standing = progression_service.run_atomic(
            db, unit_of_work, description="task completion"
        )
        db.refresh(task)

        logger.info(f"User {user.id} completed task {task.id} for {task.xp_reward} XP")
        return TaskCompletionResponse(
            task=TaskRead.model_validate(task),
            xp_earned=task.xp_reward,
            points=standing.points,
            level=standing.level,
            rank=standing.rank.value,
        )

    # =====================================================================
    # DELETE
    # =====================================================================

    def delete_task(self, db: Session, task_id: UUID, user: UserProfile) -> None:
        task = self._get_owned(db, task_id, user)
        self.crud.delete(db, db_obj=task)
        logger.info(f"User {user.id} deleted task {task_id}")


# =====================================================================
# SINGLETON INSTANCE
# =====================================================================

task_service = TaskService()
