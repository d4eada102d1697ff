# app/models/__init__.py

from app.core.config import Base

# Import all models here so metadata.create_all and app-wide imports work
from .user_profile import UserProfile
from .habit_log import HabitLog
from .task import Task, Difficulty, DIFFICULTY_XP
from .simulation import Simulation

__all__ = [
    "Base",
    "UserProfile",
    "HabitLog",
    "Task",
    "Difficulty",
    "DIFFICULTY_XP",
    "Simulation",
]
