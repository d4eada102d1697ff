# crud/task.py
from typing import Optional, List
from uuid import UUID
from datetime import datetime, timezone
from sqlalchemy.orm import Session

from app.crud.base import commit
from app.models.task import Task, Difficulty, DIFFICULTY_XP


class CRUDTask:
    """CRUD operations for Task model."""

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(
        self,
        db: Session,
        *,
        user_id: UUID,
        title: str,
        description: Optional[str],
        difficulty: Difficulty,
    ) -> Task:
        """
        Create a new task. The XP reward is fixed here from the difficulty.

        Args:
            db: Database session
            user_id: Owner UUID
            title: Task title
            description: Optional details
            difficulty: Difficulty tier

        Returns:
            Created Task instance
        """
        db_obj = Task(
            user_id=user_id,
            title=title,
            description=description,
            difficulty=difficulty,
            xp_reward=DIFFICULTY_XP[difficulty],
            completed=False,
        )

        db.add(db_obj)
        commit(db)
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get_for_user(self, db: Session, *, id: UUID, user_id: UUID) -> Optional[Task]:
        """Get a task by ID, only if it belongs to `user_id`."""
        return (
            db.query(Task)
            .filter(Task.id == id, Task.user_id == user_id)
            .first()
        )

    def get_by_user(
        self, db: Session, *, user_id: UUID, completed: Optional[bool] = None
    ) -> List[Task]:
        """
        Get tasks of a user, newest first.

        Args:
            db: Database session
            user_id: Owner UUID
            completed: Filter on completion state when given

        Returns:
            List of Task instances
        """
        query = db.query(Task).filter(Task.user_id == user_id)
        if completed is not None:
            query = query.filter(Task.completed == completed)
        return query.order_by(Task.created_at.desc()).all()

    # =====================================================================
    # UPDATE OPERATIONS
    # =====================================================================

    def stage_completion(self, db: Session, *, db_obj: Task) -> bool:
        """
        Flip an open task to completed inside the caller's transaction.

        The update is conditional on `completed` still being false, so only
        one caller can win it.

        Returns:
            True if this call completed the task, False if it was already done
        """
        completed_at = datetime.now(timezone.utc)
        updated = (
            db.query(Task)
            .filter(Task.id == db_obj.id, Task.completed == False)  # noqa: E712
            .update(
                {Task.completed: True, Task.completed_at: completed_at},
                synchronize_session=False,
            )
        )
        if updated:
            db_obj.completed = True
            db_obj.completed_at = completed_at
        return updated == 1

    # =====================================================================
    # DELETE OPERATIONS
    # =====================================================================

    def delete(self, db: Session, *, db_obj: Task) -> Task:
        """Delete a task."""
        db.delete(db_obj)
        commit(db)
        return db_obj


# Create singleton instance
crud_task = CRUDTask()
