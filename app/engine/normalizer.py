# app/engine/normalizer.py
import math
from typing import Any, Dict, Mapping, Optional, Union

from app.engine.domains import ALL_METRICS, DOMAIN_METRICS, INTEGER_METRICS, Domain, Metric

Number = Union[int, float]
MetricSet = Dict[Metric, Optional[Number]]


class MetricFormatError(ValueError):
    """Raised when a submitted metric value cannot be read as a number."""

    def __init__(self, metric: Metric, raw: Any):
        self.metric = metric
        self.raw = raw
        super().__init__(f"Invalid value for {metric.value}: {raw!r}")


def normalize_value(raw: Any, *, metric: Metric) -> Optional[Number]:
    """
    Coerce a raw submitted value into a number or None (absent).

    None and blank strings are absent. Numeric strings are parsed as int for
    integer metrics and float otherwise. Anything that does not parse is
    rejected rather than read as zero.
    """
    if raw is None:
        return None

    if isinstance(raw, bool):
        raise MetricFormatError(metric, raw)

    if isinstance(raw, str):
        text = raw.strip()
        if text == "":
            return None
        try:
            value: Number = float(text)
        except ValueError:
            raise MetricFormatError(metric, raw)
    elif isinstance(raw, (int, float)):
        value = raw
    else:
        raise MetricFormatError(metric, raw)

    try:
        finite = math.isfinite(value)
    except OverflowError:
        # Integers beyond float range.
        raise MetricFormatError(metric, raw)
    if not finite:
        raise MetricFormatError(metric, raw)

    if metric in INTEGER_METRICS:
        if value != int(value):
            raise MetricFormatError(metric, raw)
        return int(value)

    return float(value)


def normalize_metrics(domain: Domain, raw: Mapping[str, Any]) -> MetricSet:
    """
    Normalize every known metric of a submission for the given domain.

    Metrics the domain does not use come back as None so they are stored as
    NULL instead of zero. Unknown keys are ignored.
    """
    relevant = DOMAIN_METRICS[domain]
    metrics: MetricSet = {}

    for metric in ALL_METRICS:
        if metric not in relevant:
            metrics[metric] = None
            continue
        value = raw.get(metric.value)
        metrics[metric] = normalize_value(value, metric=metric)

    return metrics


def present_metrics(metrics: Mapping[Metric, Optional[Number]]) -> Dict[Metric, Number]:
    """Drop absent entries."""
    return {metric: value for metric, value in metrics.items() if value is not None}
