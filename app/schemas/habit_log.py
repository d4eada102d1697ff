# schemas/habit_log.py
from __future__ import annotations
from typing import Any, Dict, Optional
from uuid import UUID
from datetime import datetime, date as Date

from pydantic import BaseModel, ConfigDict, Field

from app.engine.domains import Domain
from app.schemas.user_profile import LevelProgressOut, UserProfileOut


# ----------------------
# Generic / Shared Types
# ----------------------
# Raw values are kept exactly as submitted (no coercion of true -> 1);
# the normalizer decides what they mean.
RawMetric = Any


# ----------------------
# Submission Schemas
# ----------------------
class HabitLogCreate(BaseModel):
    domain: Domain
    date: Optional[Date] = Field(
        default=None, description="User-local calendar date, defaults to today"
    )

    sleep_hours: RawMetric = None
    exercise_minutes: RawMetric = None
    food_quality: RawMetric = None
    mood: RawMetric = None
    study_hours: RawMetric = None
    spending: RawMetric = None
    leisure_hours: RawMetric = None
    quality_time: RawMetric = None
    social_count: RawMetric = None
    connection_quality: RawMetric = None

    notes: Optional[str] = Field(default=None, max_length=2000)

    def raw_metrics(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"domain", "date", "notes"})


# ----------------------
# Read Schemas
# ----------------------
class HabitLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    domain: Domain
    date: Date

    sleep_hours: Optional[float] = None
    exercise_minutes: Optional[int] = None
    food_quality: Optional[int] = None
    mood: Optional[int] = None
    study_hours: Optional[float] = None
    spending: Optional[float] = None
    leisure_hours: Optional[float] = None
    quality_time: Optional[float] = None
    social_count: Optional[int] = None
    connection_quality: Optional[int] = None

    notes: Optional[str] = None
    xp_earned: int
    created_at: datetime


class XPPreviewResponse(BaseModel):
    domain: Domain
    xp: int
    metrics: Dict[str, Optional[float]]


class SubmissionResponse(BaseModel):
    log: HabitLogRead
    xp_earned: int
    streak_changed: bool
    profile: UserProfileOut


class DashboardResponse(BaseModel):
    profile: UserProfileOut
    progress: LevelProgressOut
    latest_by_domain: Dict[Domain, Optional[HabitLogRead]]
    total_logs: int
    days_active: int
    current_streak: int
    longest_streak: int
