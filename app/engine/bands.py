# app/engine/bands.py
from typing import NamedTuple, Optional, Tuple, Union

Number = Union[int, float]


class Band(NamedTuple):
    """
    One row of a threshold table.

    `low` and `high` are inclusive bounds; None leaves that side open.
    `low_exclusive` turns the lower bound into a strict comparison.
    """
    score: Number
    low: Optional[Number] = None
    high: Optional[Number] = None
    low_exclusive: bool = False

    def contains(self, value: Number) -> bool:
        if self.low is not None:
            if self.low_exclusive and not value > self.low:
                return False
            if not self.low_exclusive and not value >= self.low:
                return False
        if self.high is not None and not value <= self.high:
            return False
        return True


def at_least(low: Number, score: Number) -> Band:
    return Band(score=score, low=low)


def above(low: Number, score: Number) -> Band:
    return Band(score=score, low=low, low_exclusive=True)


def at_most(high: Number, score: Number) -> Band:
    return Band(score=score, high=high)


def between(low: Number, high: Number, score: Number) -> Band:
    return Band(score=score, low=low, high=high)


class BandTable(NamedTuple):
    """Ordered bands evaluated top to bottom; first match wins."""
    bands: Tuple[Band, ...]
    # Applied when a value is present but matches no band.
    otherwise: Number = 0

    def score(self, value: Number) -> Number:
        for band in self.bands:
            if band.contains(value):
                return band.score
        return self.otherwise


def table(*bands: Band, otherwise: Number = 0) -> BandTable:
    return BandTable(bands=tuple(bands), otherwise=otherwise)

