"""Era spans and the segment descriptors that build the period grid.

A period grid is laid out as an ordered list of segments, each a run of
periods sharing one step length::

    era 1 full steps | era 1 remainder | era 2 full steps | ... | era 3 remainder

Remainder segments hold a single period and only exist for eras whose
length is not a multiple of their step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class EraSpan:
    """A range of calendar years stepped by a nominal step length.

    Attributes:
        start: First year of the era (represented by the previous era or the base period).
        end: Last year of the era.
        step: Nominal step length in years.
    """

    start: int
    end: int
    step: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def full_steps(self) -> int:
        """Number of whole steps that fit in the era."""
        return self.length // self.step

    @property
    def remainder(self) -> int:
        """Years left over after the whole steps."""
        return self.length % self.step

    @property
    def has_remainder(self) -> bool:
        return self.remainder != 0

    @property
    def period_count(self) -> int:
        """Whole steps plus one remainder period if the era is uneven."""
        return self.full_steps + int(self.has_remainder)


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of ``count`` consecutive periods that each advance ``step`` years."""

    count: int
    step: int


def era_segments(spans: list[EraSpan]) -> list[Segment]:
    """Build the ordered segment descriptors for a sequence of eras.

    Each era contributes its full steps followed by a one-period remainder
    segment when the era length is not divisible by its step. Empty
    segments are omitted.
    """
    segments: list[Segment] = []
    for span in spans:
        if span.full_steps > 0:
            segments.append(Segment(count=span.full_steps, step=span.step))
        if span.has_remainder:
            segments.append(Segment(count=1, step=span.remainder))
    return segments


def expand_segments(segments: list[Segment], base_step: int) -> NDArray[np.int64]:
    """Expand segment descriptors into a per-period step vector.

    Args:
        segments: Ordered segments following the base period.
        base_step: Nominal step assigned to the base period (index 0).

    Returns:
        Integer array of length ``1 + sum(seg.count)``.
    """
    counts = [1] + [seg.count for seg in segments]
    steps = [base_step] + [seg.step for seg in segments]
    return np.repeat(np.asarray(steps, dtype=np.int64), counts)


def period_years(start_year: int, steps: NDArray[np.int64]) -> NDArray[np.int64]:
    """Return the representative year of every period.

    Period 0 is ``start_year``; each later period advances by its own step.
    The base period's step is not walked.
    """
    years = np.empty(len(steps), dtype=np.int64)
    years[0] = start_year
    years[1:] = start_year + np.cumsum(steps[1:])
    return years


def build_year_map(years: NDArray[Any]) -> dict[int, int]:
    """Map every calendar year covered by ``years`` to a period index.

    Years strictly between two representative years belong to the later
    period.
    """
    year_map: dict[int, int] = {int(years[0]): 0}
    for period in range(1, len(years)):
        for year in range(int(years[period - 1]) + 1, int(years[period]) + 1):
            year_map[year] = period
    return year_map
