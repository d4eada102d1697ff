import itertools

import pytest

from app.engine.domains import DOMAIN_METRICS, Domain, Metric
from app.engine.xp import XP_MAX, XP_MIN, clamp_xp, compute_xp, metric_xp

S = Metric


def test_physical_health_examples():
    assert compute_xp(Domain.PHYSICAL_HEALTH, {S.SLEEP_HOURS: 8}) == 15
    assert compute_xp(
        Domain.PHYSICAL_HEALTH,
        {S.SLEEP_HOURS: 8, S.EXERCISE_MINUTES: 45, S.FOOD_QUALITY: 9},
    ) == 45
    assert compute_xp(Domain.PHYSICAL_HEALTH, {S.SLEEP_HOURS: 2}) == -2


def test_mood_boundaries():
    assert compute_xp(Domain.MENTAL_HEALTH, {S.MOOD: 10}) == 15
    assert compute_xp(Domain.MENTAL_HEALTH, {S.MOOD: 1}) == -2
    # 0 matches no band and contributes nothing.
    assert compute_xp(Domain.MENTAL_HEALTH, {S.MOOD: 0}) == 0


@pytest.mark.parametrize(
    "metric,value,expected",
    [
        (S.SLEEP_HOURS, 7, 15),
        (S.SLEEP_HOURS, 9, 15),
        (S.SLEEP_HOURS, 6, 10),
        (S.SLEEP_HOURS, 10, 10),
        (S.SLEEP_HOURS, 4, 5),
        (S.SLEEP_HOURS, 12, 5),
        (S.SLEEP_HOURS, 12.5, -2),
        (S.EXERCISE_MINUTES, 40, 15),
        (S.EXERCISE_MINUTES, 25, 10),
        (S.EXERCISE_MINUTES, 10, 5),
        (S.EXERCISE_MINUTES, 5, -2),
        (S.EXERCISE_MINUTES, 0, 0),
        (S.STUDY_HOURS, 5, 20),
        (S.STUDY_HOURS, 3, 15),
        (S.STUDY_HOURS, 2, 10),
        (S.STUDY_HOURS, 1, 5),
        (S.STUDY_HOURS, 0, -2),
        (S.SPENDING, 500, 20),
        (S.SPENDING, 1000, 15),
        (S.SPENDING, 4000, 10),
        (S.SPENDING, 8000, 5),
        (S.SPENDING, 8000.01, -2),
        (S.LEISURE_HOURS, 5, 15),
        (S.LEISURE_HOURS, 0.5, 0),
        (S.QUALITY_TIME, 0, -2),
        (S.SOCIAL_COUNT, 1, 2),
        (S.SOCIAL_COUNT, 0, 0),
        (S.CONNECTION_QUALITY, 8, 15),
    ],
)
def test_band_edges(metric, value, expected):
    assert metric_xp(metric, value) == expected


def test_absent_metric_contributes_nothing():
    assert metric_xp(S.SLEEP_HOURS, None) == 0
    assert compute_xp(Domain.PHYSICAL_HEALTH, {}) == 0


def test_other_domains_metrics_are_ignored():
    assert compute_xp(Domain.FINANCE, {S.SLEEP_HOURS: 8, S.SPENDING: 300}) == 20


def test_clamp():
    assert clamp_xp(75) == XP_MAX
    assert clamp_xp(-30) == XP_MIN
    assert clamp_xp(12) == 12


def test_relationships_sum_all_present_metrics():
    metrics = {S.QUALITY_TIME: 5, S.SOCIAL_COUNT: 6, S.CONNECTION_QUALITY: 9}
    assert compute_xp(Domain.RELATIONSHIPS, metrics) == 45
    assert compute_xp(Domain.RELATIONSHIPS, {S.SOCIAL_COUNT: 1, S.QUALITY_TIME: 0}) == 0


def test_accepts_domain_value_string():
    assert compute_xp("Career/Education", {S.STUDY_HOURS: 5}) == 20


def test_output_always_in_range():
    samples = [None, 0, 0.5, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 13, 25, 40, 60, 500, 1000, 9000]
    for domain, metrics in DOMAIN_METRICS.items():
        for values in itertools.product(samples, repeat=len(metrics)):
            xp = compute_xp(domain, dict(zip(metrics, values)))
            assert XP_MIN <= xp <= XP_MAX
