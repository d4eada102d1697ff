# app/engine/reporting.py
"""
Read-only analysis over a user's habit logs.

Everything here is recomputed from the raw logs on every call; nothing is
cached or written back.
"""
import math
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel

from app.engine.bands import BandTable, at_least, at_most, between, table
from app.engine.domains import DOMAIN_METRICS, Domain, Metric
from app.engine.normalizer import MetricSet, Number
from app.engine.xp import compute_xp

CONSISTENCY_DAYS = 14
WINDOW_CHOICES = (7, 30)


# =====================================================================
# BALANCE TABLES (0-10 per metric)
# =====================================================================

BALANCE_TABLES: Dict[Metric, BandTable] = {
    Metric.SLEEP_HOURS: table(between(7, 9, 10), between(6, 10, 7), between(5, 11, 5)),
    Metric.EXERCISE_MINUTES: table(
        at_least(60, 10), at_least(30, 7), at_least(15, 5), at_least(10, 3)
    ),
    Metric.FOOD_QUALITY: table(at_least(8, 10), at_least(6, 8), at_least(4, 5)),
    Metric.MOOD: table(at_least(8, 10), at_least(6, 7), at_least(4, 5)),
    Metric.STUDY_HOURS: table(at_least(4, 10), at_least(2, 7), at_least(1, 5)),
    Metric.SPENDING: table(
        at_most(500, 10), at_most(1500, 8), at_most(3000, 6), at_most(8000, 4)
    ),
    Metric.LEISURE_HOURS: table(at_least(3, 10), at_least(1, 7)),
    Metric.QUALITY_TIME: table(at_least(3, 10), at_least(1, 7)),
    Metric.SOCIAL_COUNT: table(at_least(5, 10), at_least(3, 7), at_least(1, 5)),
    Metric.CONNECTION_QUALITY: table(at_least(8, 10), at_least(6, 8), at_least(4, 5)),
}


# =====================================================================
# REPORT SHAPE
# =====================================================================

class ConsistencyDay(BaseModel):
    day: date
    has_log: bool


class Report(BaseModel):
    window_days: Optional[int]
    start_date: Optional[date]
    end_date: date
    dates: List[date]
    daily_xp: List[int]
    cumulative_xp: List[int]
    domain_counts: Dict[Domain, int]
    balance: Dict[Domain, float]
    consistency: List[ConsistencyDay]
    total_logs: int
    total_xp: int
    average_xp: int
    top_domain: Optional[Domain]


# =====================================================================
# HELPERS
# =====================================================================

def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _log_day(log: Any) -> date:
    value = log.date
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _log_domain(log: Any) -> Optional[Domain]:
    try:
        return Domain(log.domain)
    except ValueError:
        return None


def _log_metrics(log: Any) -> MetricSet:
    return {metric: getattr(log, metric.value, None) for metric in Metric}


def _day_range(start: date, end: date) -> List[date]:
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def score_log(log: Any) -> int:
    """XP a stored log is worth under the current tables."""
    domain = _log_domain(log)
    if domain is None:
        return 0
    return compute_xp(domain, _log_metrics(log))


def balance_score(domain: Domain, metrics: MetricSet) -> Optional[float]:
    """Mean 0-10 score of the present metrics of one log, None if none present."""
    scores: List[Number] = []
    for metric in DOMAIN_METRICS[domain]:
        value = metrics.get(metric)
        if value is None:
            continue
        scores.append(BALANCE_TABLES[metric].score(value))
    if not scores:
        return None
    return sum(scores) / len(scores)


# =====================================================================
# AGGREGATION
# =====================================================================

def aggregate(logs: Iterable[Any], window_days: Optional[int], today: date) -> Report:
    """
    Build the analysis report for the window ending on `today`.

    `window_days` of None covers everything from the earliest log. Each log
    only needs `domain`, `date` and the metric attributes, so ORM rows and
    schema objects both work.
    """
    logs = list(logs)
    days_with_logs = {_log_day(log) for log in logs}

    if window_days is None:
        past_days = [day for day in days_with_logs if day <= today]
        start = min(past_days) if past_days else None
    else:
        start = today - timedelta(days=window_days - 1)

    dates = _day_range(start, today) if start is not None else []

    daily_xp: Dict[date, int] = {day: 0 for day in dates}
    domain_counts: Dict[Domain, int] = {domain: 0 for domain in Domain}
    domain_balance: Dict[Domain, List[float]] = defaultdict(list)
    total_logs = 0
    total_xp = 0

    for log in logs:
        day = _log_day(log)
        if day not in daily_xp:
            continue

        xp = score_log(log)
        daily_xp[day] += xp
        total_xp += xp
        total_logs += 1

        domain = _log_domain(log)
        if domain is None:
            continue
        domain_counts[domain] += 1

        value = balance_score(domain, _log_metrics(log))
        if value is not None:
            domain_balance[domain].append(value)

    cumulative: List[int] = []
    running = 0
    for day in dates:
        running += daily_xp[day]
        cumulative.append(running)

    balance = {
        domain: (
            _round_half_up(sum(domain_balance[domain]) / len(domain_balance[domain]), 1)
            if domain_balance[domain]
            else 0.0
        )
        for domain in Domain
    }

    consistency = [
        ConsistencyDay(day=day, has_log=day in days_with_logs)
        for day in _day_range(today - timedelta(days=CONSISTENCY_DAYS - 1), today)
    ]

    top_domain = max(Domain, key=lambda domain: domain_counts[domain])
    if domain_counts[top_domain] == 0:
        top_domain = None

    return Report(
        window_days=window_days,
        start_date=start,
        end_date=today,
        dates=dates,
        daily_xp=[daily_xp[day] for day in dates],
        cumulative_xp=cumulative,
        domain_counts=domain_counts,
        balance=balance,
        consistency=consistency,
        total_logs=total_logs,
        total_xp=total_xp,
        average_xp=int(_round_half_up(total_xp / total_logs)) if total_logs else 0,
        top_domain=top_domain,
    )
