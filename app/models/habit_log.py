# models/habit_log.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship
from app.core.config import Base


class HabitLog(Base):
    """
    One submission of metrics for one domain on one day.
    Metrics the domain does not use stay NULL, never 0.
    """

    __tablename__ = "habit_log"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("user_profile.id", ondelete="CASCADE"), nullable=False)
    domain = Column(String(32), nullable=False, index=True)
    date = Column(Date, nullable=False)

    # Physical Health
    sleep_hours = Column(Float, nullable=True)
    exercise_minutes = Column(Integer, nullable=True)
    food_quality = Column(Integer, nullable=True)  # 1-10
    # Mental Health
    mood = Column(Integer, nullable=True)  # 1-10
    # Career/Education
    study_hours = Column(Float, nullable=True)
    # Finance
    spending = Column(Float, nullable=True)
    # Hobbies
    leisure_hours = Column(Float, nullable=True)
    # Relationships
    quality_time = Column(Float, nullable=True)
    social_count = Column(Integer, nullable=True)
    connection_quality = Column(Integer, nullable=True)  # 1-10

    notes = Column(Text, nullable=True)
    xp_earned = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (Index("ix_habit_log_user_date", "user_id", "date"),)

    user = relationship("UserProfile", back_populates="habit_logs")
