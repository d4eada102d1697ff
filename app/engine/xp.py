# app/engine/xp.py
from typing import Dict, Mapping, Optional

from app.engine.bands import BandTable, above, at_least, at_most, between, table
from app.engine.domains import DOMAIN_METRICS, Domain, Metric
from app.engine.normalizer import Number

XP_MIN = -20
XP_MAX = 50


# =====================================================================
# XP TABLES
# =====================================================================

XP_TABLES: Dict[Metric, BandTable] = {
    Metric.SLEEP_HOURS: table(
        between(7, 9, 15),
        between(6, 10, 10),
        between(4, 12, 5),
        otherwise=-2,
    ),
    Metric.EXERCISE_MINUTES: table(
        at_least(40, 15),
        at_least(25, 10),
        at_least(10, 5),
        above(0, -2),
    ),
    Metric.FOOD_QUALITY: table(
        at_least(8, 15),
        at_least(6, 10),
        at_least(4, 5),
        at_least(1, -2),
    ),
    Metric.MOOD: table(
        at_least(8, 15),
        at_least(6, 10),
        at_least(4, 5),
        at_least(1, -2),
    ),
    Metric.STUDY_HOURS: table(
        at_least(5, 20),
        at_least(3, 15),
        at_least(2, 10),
        at_least(1, 5),
        at_least(0, -2),
    ),
    Metric.SPENDING: table(
        at_most(500, 20),
        at_most(1000, 15),
        at_most(4000, 10),
        at_most(8000, 5),
        otherwise=-2,
    ),
    Metric.LEISURE_HOURS: table(
        at_least(5, 15),
        at_least(3, 10),
        at_least(1, 5),
    ),
    Metric.QUALITY_TIME: table(
        at_least(4, 15),
        at_least(3, 10),
        at_least(1, 5),
        at_least(0, -2),
    ),
    Metric.SOCIAL_COUNT: table(
        at_least(5, 15),
        at_least(3, 10),
        at_least(2, 5),
        at_least(1, 2),
    ),
    Metric.CONNECTION_QUALITY: table(
        at_least(8, 15),
        at_least(6, 10),
        at_least(4, 5),
        at_least(1, -2),
    ),
}


# =====================================================================
# SCORING
# =====================================================================

def clamp_xp(xp: int) -> int:
    return max(XP_MIN, min(XP_MAX, xp))


def metric_xp(metric: Metric, value: Optional[Number]) -> int:
    """XP for a single metric; absent values contribute nothing."""
    if value is None:
        return 0
    return int(XP_TABLES[metric].score(value))


def compute_xp(domain: Domain, metrics: Mapping[Metric, Optional[Number]]) -> int:
    """
    XP delta for one habit log.

    Only the metrics that belong to `domain` are scored. Sub-scores are
    summed and the total is clamped to [XP_MIN, XP_MAX].
    """
    domain = Domain(domain)
    total = sum(
        metric_xp(metric, metrics.get(metric))
        for metric in DOMAIN_METRICS[domain]
    )
    return clamp_xp(total)
