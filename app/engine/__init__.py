# app/engine/__init__.py

# Pure scoring & progression functions, free of storage and HTTP concerns.
from .domains import Domain, Metric, DOMAIN_METRICS
from .normalizer import MetricFormatError, normalize_metrics, normalize_value
from .xp import compute_xp, XP_MIN, XP_MAX
from .progression import Rank, derive_level, derive_rank, derive_standing, level_progress
from .streak import StreakState, update_streak
from .reporting import Report, aggregate

__all__ = [
    "Domain", "Metric", "DOMAIN_METRICS",
    "MetricFormatError", "normalize_metrics", "normalize_value",
    "compute_xp", "XP_MIN", "XP_MAX",
    "Rank", "derive_level", "derive_rank", "derive_standing", "level_progress",
    "StreakState", "update_streak",
    "Report", "aggregate",
]
