from datetime import date, timedelta
from types import SimpleNamespace

from app.engine.domains import Domain, Metric
from app.engine.reporting import CONSISTENCY_DAYS, aggregate, balance_score
from app.engine.xp import compute_xp

TODAY = date(2026, 3, 15)


def make_log(days_ago, domain, **metrics):
    fields = {metric.value: None for metric in Metric}
    fields.update(metrics)
    return SimpleNamespace(date=TODAY - timedelta(days=days_ago), domain=domain.value, **fields)


def test_empty_window():
    report = aggregate([], 7, TODAY)
    assert report.dates[0] == TODAY - timedelta(days=6)
    assert report.daily_xp == [0] * 7
    assert report.cumulative_xp == [0] * 7
    assert set(report.domain_counts.values()) == {0}
    assert set(report.balance.values()) == {0.0}
    assert len(report.consistency) == CONSISTENCY_DAYS
    assert not any(day.has_log for day in report.consistency)
    assert report.total_logs == 0
    assert report.average_xp == 0
    assert report.top_domain is None


def test_empty_all_window_has_no_dates():
    report = aggregate([], None, TODAY)
    assert report.dates == []
    assert report.start_date is None


def test_cumulative_series_matches_per_log_scores():
    logs = [
        make_log(0, Domain.PHYSICAL_HEALTH, sleep_hours=8, exercise_minutes=45, food_quality=9),
        make_log(0, Domain.MENTAL_HEALTH, mood=2),
        make_log(2, Domain.FINANCE, spending=300),
        make_log(5, Domain.HOBBIES, leisure_hours=4),
    ]
    report = aggregate(logs, 7, TODAY)

    expected_total = sum(
        compute_xp(Domain(log.domain), {m: getattr(log, m.value) for m in Metric})
        for log in logs
    )
    assert report.cumulative_xp[-1] == expected_total == 45 - 2 + 20 + 10
    assert sum(report.daily_xp) == expected_total
    assert report.daily_xp[-1] == 43
    assert report.daily_xp[-3] == 20
    assert report.total_logs == 4
    assert report.average_xp == 18


def test_logs_outside_window_are_skipped():
    logs = [make_log(10, Domain.FINANCE, spending=100), make_log(1, Domain.FINANCE, spending=100)]
    report = aggregate(logs, 7, TODAY)
    assert report.total_logs == 1
    assert report.domain_counts[Domain.FINANCE] == 1
    # The grid looks back 14 days regardless of the window.
    assert report.consistency[-11].has_log is True


def test_all_window_starts_at_earliest_log():
    logs = [make_log(40, Domain.MENTAL_HEALTH, mood=8), make_log(0, Domain.MENTAL_HEALTH, mood=8)]
    report = aggregate(logs, None, TODAY)
    assert report.start_date == TODAY - timedelta(days=40)
    assert len(report.dates) == 41
    assert report.total_xp == 30


def test_balance_averages_present_metrics():
    assert balance_score(Domain.PHYSICAL_HEALTH, {Metric.SLEEP_HOURS: 8, Metric.FOOD_QUALITY: 6}) == 9
    assert balance_score(Domain.PHYSICAL_HEALTH, {}) is None

    logs = [
        make_log(0, Domain.RELATIONSHIPS, quality_time=3, social_count=3, connection_quality=6),
        make_log(1, Domain.RELATIONSHIPS, quality_time=0),
    ]
    report = aggregate(logs, 7, TODAY)
    # (10 + 7 + 8) / 3 and 0, averaged per log
    assert report.balance[Domain.RELATIONSHIPS] == 4.2
    assert report.balance[Domain.FINANCE] == 0.0


def test_top_domain_ties_go_to_first_domain():
    logs = [make_log(0, Domain.HOBBIES, leisure_hours=1), make_log(0, Domain.MENTAL_HEALTH, mood=5)]
    assert aggregate(logs, 7, TODAY).top_domain is Domain.MENTAL_HEALTH
