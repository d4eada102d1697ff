# app/engine/domains.py
from enum import Enum
from typing import Dict, Tuple


# =====================================================================
# ENUMS
# =====================================================================

class Domain(str, Enum):
    """Six life domains a habit log can belong to."""
    PHYSICAL_HEALTH = "Physical Health"
    MENTAL_HEALTH = "Mental Health"
    CAREER_EDUCATION = "Career/Education"
    RELATIONSHIPS = "Relationships"
    FINANCE = "Finance"
    HOBBIES = "Hobbies"


class Metric(str, Enum):
    """Numeric fields a habit log may carry."""
    SLEEP_HOURS = "sleep_hours"
    EXERCISE_MINUTES = "exercise_minutes"
    FOOD_QUALITY = "food_quality"
    MOOD = "mood"
    STUDY_HOURS = "study_hours"
    SPENDING = "spending"
    LEISURE_HOURS = "leisure_hours"
    QUALITY_TIME = "quality_time"
    SOCIAL_COUNT = "social_count"
    CONNECTION_QUALITY = "connection_quality"


# =====================================================================
# DOMAIN -> METRIC MAPPING
# =====================================================================

DOMAIN_METRICS: Dict[Domain, Tuple[Metric, ...]] = {
    Domain.PHYSICAL_HEALTH: (
        Metric.SLEEP_HOURS,
        Metric.EXERCISE_MINUTES,
        Metric.FOOD_QUALITY,
    ),
    Domain.MENTAL_HEALTH: (Metric.MOOD,),
    Domain.CAREER_EDUCATION: (Metric.STUDY_HOURS,),
    Domain.RELATIONSHIPS: (
        Metric.QUALITY_TIME,
        Metric.SOCIAL_COUNT,
        Metric.CONNECTION_QUALITY,
    ),
    Domain.FINANCE: (Metric.SPENDING,),
    Domain.HOBBIES: (Metric.LEISURE_HOURS,),
}

# Counts and 1-10 ratings are whole numbers; everything else is decimal.
INTEGER_METRICS = frozenset({
    Metric.EXERCISE_MINUTES,
    Metric.FOOD_QUALITY,
    Metric.MOOD,
    Metric.SOCIAL_COUNT,
    Metric.CONNECTION_QUALITY,
})

ALL_METRICS: Tuple[Metric, ...] = tuple(Metric)
