# app/engine/progression.py
from enum import Enum
from typing import NamedTuple

POINTS_PER_LEVEL = 100


class Rank(str, Enum):
    BEGINNER = "Beginner"
    NOVICE = "Novice"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"
    MASTER = "Master"


# Minimum level for each rank, highest first.
RANK_THRESHOLDS = (
    (21, Rank.MASTER),
    (16, Rank.EXPERT),
    (11, Rank.ADVANCED),
    (6, Rank.INTERMEDIATE),
    (3, Rank.NOVICE),
)


class Standing(NamedTuple):
    points: int
    level: int
    rank: Rank


class LevelProgress(NamedTuple):
    level: int
    points_into_level: int
    points_per_level: int
    points_to_next_level: int
    percentage: float


def derive_level(points: int) -> int:
    """Level from cumulative points. Floor division, so -1 points is level 0."""
    return points // POINTS_PER_LEVEL + 1


def derive_rank(level: int) -> Rank:
    for minimum, rank in RANK_THRESHOLDS:
        if level >= minimum:
            return rank
    return Rank.BEGINNER


def derive_standing(points: int) -> Standing:
    level = derive_level(points)
    return Standing(points=points, level=level, rank=derive_rank(level))


def level_progress(points: int) -> LevelProgress:
    """Progress bar data for the current level."""
    level = derive_level(points)
    level_floor = (level - 1) * POINTS_PER_LEVEL
    into_level = points - level_floor
    percentage = min(100.0, max(0.0, into_level / POINTS_PER_LEVEL * 100))
    return LevelProgress(
        level=level,
        points_into_level=into_level,
        points_per_level=POINTS_PER_LEVEL,
        points_to_next_level=POINTS_PER_LEVEL - into_level,
        percentage=round(percentage, 1),
    )
