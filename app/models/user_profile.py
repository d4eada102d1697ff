# models/user_profile.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Integer, JSON, Uuid
from sqlalchemy.orm import relationship
from app.core.config import Base


class UserProfile(Base):
    __tablename__ = "user_profile"

    # ---- Identity ----
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # ---- Progression (level and rank always derived from points) ----
    points = Column(Integer, nullable=False, default=0, index=True)
    level = Column(Integer, nullable=False, default=1)
    rank = Column(String(20), nullable=False, default="Beginner")
    current_streak = Column(Integer, nullable=False, default=0)
    longest_streak = Column(Integer, nullable=False, default=0)

    # ---- Onboarding self-assessment: {domain: 1-10} ----
    initial_assessment = Column(JSON, nullable=True)

    # ---- Optimistic locking ----
    version = Column(Integer, nullable=False)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))

    __mapper_args__ = {"version_id_col": version}

    # ---- Relationships ----
    habit_logs = relationship("HabitLog", back_populates="user", cascade="all, delete-orphan")
    tasks = relationship("Task", back_populates="user", cascade="all, delete-orphan")
    simulations = relationship("Simulation", back_populates="user", cascade="all, delete-orphan")
