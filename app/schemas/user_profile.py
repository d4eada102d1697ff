# schemas/user_profile.py
from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from typing import Dict, Optional
from datetime import datetime
from uuid import UUID

from app.engine.domains import Domain
from app.engine.progression import Rank


# =====================================================================
# 1. AUTH REQUESTS
# =====================================================================

class RegisterRequest(BaseModel):
    """Public registration with the onboarding self-assessment."""
    name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    ratings: Dict[Domain, int] = Field(
        ..., description="Self-assessment per domain, 1-10, all six required"
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Name is required')
        return v.strip()

    @field_validator('ratings')
    @classmethod
    def validate_ratings(cls, v: Dict[Domain, int]) -> Dict[Domain, int]:
        missing = [d.value for d in Domain if d not in v]
        if missing:
            raise ValueError(f"Please rate all domains, missing: {', '.join(missing)}")
        for domain, rating in v.items():
            if not 1 <= rating <= 10:
                raise ValueError(f"Rating for {domain.value} must be between 1 and 10")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RefreshTokenRequest(BaseModel):
    refresh_token: str


# =====================================================================
# 2. READ SCHEMAS
# =====================================================================

class UserProfileOut(BaseModel):
    """Public view of a profile."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: EmailStr
    points: int
    level: int
    rank: Rank
    current_streak: int
    longest_streak: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: UserProfileOut


class LevelProgressOut(BaseModel):
    level: int
    points_into_level: int
    points_per_level: int
    points_to_next_level: int
    percentage: float


class LeaderboardEntry(BaseModel):
    position: int
    id: UUID
    name: str
    level: int
    rank: Rank
    points: int
    current_streak: int
    is_current_user: bool = False


# =====================================================================
# 3. RESPONSE SCHEMAS
# =====================================================================

class SuccessResponse(BaseModel):
    """Generic success response."""
    success: bool = True
    message: str
