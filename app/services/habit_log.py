import logging
from typing import Dict, List, Optional
from uuid import UUID
from datetime import date, timedelta
from sqlalchemy.orm import Session

from app import models, schemas
from app.core.exceptions import ValidationError
from app.crud.habit_log import crud_habit_log
from app.engine.domains import Domain
from app.engine.normalizer import MetricFormatError, MetricSet, normalize_metrics, present_metrics
from app.engine.progression import level_progress
from app.engine.reporting import WINDOW_CHOICES, Report, aggregate
from app.engine.streak import StreakState, update_streak
from app.engine.xp import compute_xp
from app.services.progression import progression_service

logger = logging.getLogger(__name__)


def current_date() -> date:
    """Server-side calendar day used for streaks and reports."""
    return date.today()


class UserHabitLogService:
    """
    Service layer for habit log submission and the read-only views built
    on top of the log history.
    """

    # ====================================================
    # HELPERS
    # ====================================================

    def _normalize(self, data: schemas.HabitLogCreate) -> MetricSet:
        try:
            return normalize_metrics(data.domain, data.raw_metrics())
        except MetricFormatError as exc:
            raise ValidationError(str(exc)) from exc

    # ====================================================
    # SUBMISSION
    # ====================================================

    def preview_xp(self, data: schemas.HabitLogCreate) -> schemas.XPPreviewResponse:
        """XP a submission would earn. Nothing is written."""
        metrics = self._normalize(data)
        return schemas.XPPreviewResponse(
            domain=data.domain,
            xp=compute_xp(data.domain, metrics),
            metrics={metric.value: value for metric, value in present_metrics(metrics).items()},
        )

    def submit_log(
        self,
        db: Session,
        *,
        user: models.UserProfile,
        data: schemas.HabitLogCreate,
    ) -> schemas.SubmissionResponse:
        """
        Store one day's metrics for one domain and update the profile.

        Only logs dated today move the streak; a back-dated log earns its XP
        and leaves the streak alone. Future dates are rejected.

        Streak checks, log insert and profile write run in one transaction.
        A storage failure anywhere leaves both untouched.

        Raises:
            ValidationError: Malformed metric or a date after today
        """
        metrics = self._normalize(data)
        xp = compute_xp(data.domain, metrics)
        today = current_date()
        log_date = data.date or today
        if log_date > today:
            raise ValidationError("Cannot log habits for a future date")

        def unit_of_work():
            previous = StreakState(current=user.current_streak or 0, longest=user.longest_streak or 0)
            streak = previous
            if log_date == today:
                # Checked before the insert so the new row does not count as "today".
                has_logged_today = crud_habit_log.exists_on(db, user_id=user.id, day=today)
                has_logged_yesterday = not has_logged_today and crud_habit_log.exists_on(
                    db, user_id=user.id, day=today - timedelta(days=1)
                )
                streak = update_streak(previous, has_logged_today, has_logged_yesterday)

            habit_log = crud_habit_log.stage(
                db,
                user_id=user.id,
                domain=data.domain,
                log_date=log_date,
                metrics=metrics,
                notes=data.notes,
                xp_earned=xp,
            )
            progression_service.stage_award(db, user=user, xp=xp, streak=streak)
            return habit_log, streak != previous

        habit_log, streak_changed = progression_service.run_atomic(
            db, unit_of_work, description="habit log submission"
        )
        db.refresh(habit_log)
        db.refresh(user)

        logger.info(
            f"User {user.id} logged {data.domain.value} on {log_date}: "
            f"{xp:+d} XP, streak {user.current_streak}"
        )
        return schemas.SubmissionResponse(
            log=schemas.HabitLogRead.model_validate(habit_log),
            xp_earned=xp,
            streak_changed=streak_changed,
            profile=schemas.UserProfileOut.model_validate(user),
        )

    # ====================================================
    # READ
    # ====================================================

    def list_logs(
        self,
        db: Session,
        *,
        user_id: UUID,
        domain: Optional[Domain] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[models.HabitLog]:
        return crud_habit_log.get_by_user(
            db, user_id=user_id, domain=domain, skip=skip, limit=limit
        )

    def get_report(
        self,
        db: Session,
        *,
        user_id: UUID,
        window_days: Optional[int],
        today: Optional[date] = None,
    ) -> Report:
        """Analysis report for 7 days, 30 days or everything (None)."""
        if window_days is not None and window_days not in WINDOW_CHOICES:
            raise ValidationError(
                f"Window must be one of {', '.join(map(str, WINDOW_CHOICES))} or 'all'"
            )
        logs = crud_habit_log.get_all_ascending(db, user_id=user_id)
        return aggregate(logs, window_days, today or current_date())

    def get_dashboard(
        self, db: Session, *, user: models.UserProfile
    ) -> schemas.DashboardResponse:
        """Latest log per domain plus headline numbers."""
        logs = crud_habit_log.get_by_user(db, user_id=user.id)

        latest_by_domain: Dict[Domain, Optional[models.HabitLog]] = {domain: None for domain in Domain}
        for log in logs:
            try:
                domain = Domain(log.domain)
            except ValueError:
                continue
            # Newest first, so the first hit per domain is the latest.
            if latest_by_domain[domain] is None:
                latest_by_domain[domain] = log

        progress = level_progress(user.points)
        return schemas.DashboardResponse(
            profile=schemas.UserProfileOut.model_validate(user),
            progress=schemas.LevelProgressOut(**progress._asdict()),
            latest_by_domain={
                domain: schemas.HabitLogRead.model_validate(log) if log else None
                for domain, log in latest_by_domain.items()
            },
            total_logs=len(logs),
            days_active=len({log.date for log in logs}),
            current_streak=user.current_streak,
            longest_streak=user.longest_streak,
        )


user_habit_log_service = UserHabitLogService()
