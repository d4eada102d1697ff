from sqlalchemy.orm import Session
from uuid import UUID
from datetime import date
from typing import Optional, List

from app import models
from app.engine.domains import Domain, Metric
from app.engine.normalizer import MetricSet


class CRUDHabitLog:
    # ====================================================
    # CREATE
    # ====================================================

    def stage(
        self,
        db: Session,
        *,
        user_id: UUID,
        domain: Domain,
        log_date: date,
        metrics: MetricSet,
        notes: Optional[str],
        xp_earned: int,
    ) -> models.HabitLog:
        """Add a log to the session without committing."""
        habit_log = models.HabitLog(
            user_id=user_id,
            domain=domain.value,
            date=log_date,
            notes=notes,
            xp_earned=xp_earned,
            **{metric.value: metrics.get(metric) for metric in Metric},
        )
        db.add(habit_log)
        db.flush()
        return habit_log

    # ====================================================
    # READ
    # ====================================================

    def exists_on(self, db: Session, *, user_id: UUID, day: date) -> bool:
        """Whether the user has at least one log dated `day`."""
        return (
            db.query(models.HabitLog.id)
            .filter(models.HabitLog.user_id == user_id, models.HabitLog.date == day)
            .first()
            is not None
        )

    def get_by_user(
        self,
        db: Session,
        *,
        user_id: UUID,
        domain: Optional[Domain] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[models.HabitLog]:
        """Logs newest first, optionally for one domain."""
        query = db.query(models.HabitLog).filter(models.HabitLog.user_id == user_id)
        if domain is not None:
            query = query.filter(models.HabitLog.domain == domain.value)
        query = query.order_by(
            models.HabitLog.date.desc(), models.HabitLog.created_at.desc()
        ).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_all_ascending(self, db: Session, *, user_id: UUID) -> List[models.HabitLog]:
        """Every log of the user in date order, for reports."""
        return (
            db.query(models.HabitLog)
            .filter(models.HabitLog.user_id == user_id)
            .order_by(models.HabitLog.date.asc(), models.HabitLog.created_at.asc())
            .all()
        )


crud_habit_log = CRUDHabitLog()
