# schemas/task.py
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID
import enum


class DifficultyLevel(str, enum.Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    difficulty: DifficultyLevel = DifficultyLevel.medium

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Title must not be blank')
        return v.strip()


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: Optional[str] = None
    difficulty: DifficultyLevel
    xp_reward: int
    completed: bool
    created_at: datetime
    completed_at: Optional[datetime] = None


class TaskCompletionResponse(BaseModel):
    task: TaskRead
    xp_earned: int
    points: int
    level: int
    rank: str
