# app/schemas/__init__.py

from .user_profile import (
    RegisterRequest,
    LoginRequest,
    RefreshTokenRequest,
    UserProfileOut,
    TokenResponse,
    LevelProgressOut,
    LeaderboardEntry,
    SuccessResponse,
)
from .habit_log import (
    HabitLogCreate,
    HabitLogRead,
    XPPreviewResponse,
    SubmissionResponse,
    DashboardResponse,
)
from .task import (
    DifficultyLevel,
    TaskCreate,
    TaskRead,
    TaskCompletionResponse,
)
from .simulation import (
    InsightRequest,
    Projection,
    SimulationRead,
)


__all__ = [
    # Profiles & auth
    "RegisterRequest", "LoginRequest", "RefreshTokenRequest",
    "UserProfileOut", "TokenResponse", "LevelProgressOut",
    "LeaderboardEntry", "SuccessResponse",

    # Habit logs
    "HabitLogCreate", "HabitLogRead", "XPPreviewResponse",
    "SubmissionResponse", "DashboardResponse",

    # Tasks
    "DifficultyLevel", "TaskCreate", "TaskRead", "TaskCompletionResponse",

    # Insights
    "InsightRequest", "Projection", "SimulationRead",
]
