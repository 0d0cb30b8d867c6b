"""
Scale primitive - a finite generating list of intervals, repeated forever.

A scale of degree N stores N intervals: positions 1..N of the first period.
Position 0 is always the unison 1/1. Every other position k maps to a stored
interval transposed by whole octaves:

    at(k) = intervals[(k - 1) mod N] transposed by floor((k - 1) / N) octaves

so at(k + N) is always at(k) one octave up, for negative k as well.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from chuk_mcp_tuning.constants import ErrorMessages
from chuk_mcp_tuning.core.errors import InvalidScale
from chuk_mcp_tuning.core.interval import Interval


@dataclass(frozen=True)
class Scale:
    """
    A named tuning: one period of intervals measured from the tonic.

    The last stored interval is conventionally the period (2/1 for octave
    repeating scales), but any interval is accepted.

    Immutable and hashable.

    Examples:
        Scale("12-tet", "12 equal", [Interval(100.0 * i) for i in range(1, 13)])
        Scale("just", "5-limit triad", [Interval.from_ratio(5, 4), ...])
    """

    name: str
    description: str
    intervals: tuple[Interval, ...]

    def __post_init__(self) -> None:
        # Accept any sequence, store a tuple
        if not isinstance(self.intervals, tuple):
            object.__setattr__(self, "intervals", tuple(self.intervals))
        if not self.intervals:
            raise InvalidScale(ErrorMessages.EMPTY_SCALE.format(name=self.name))

    @classmethod
    def from_strings(cls, name: str, description: str, intervals: Sequence[str]) -> Scale:
        """Build a scale from interval tokens like '94.87252' or '4/3'."""
        return cls(name, description, tuple(Interval.parse(text) for text in intervals))

    def degree(self) -> int:
        """Number of stored intervals."""
        return len(self.intervals)

    def at(self, k: int) -> Interval:
        """
        Get the k-th interval of the infinitely repeating scale.

        Args:
            k: Any integer. 0 is the unison, 1..N the stored intervals,
               larger or negative values repeat them by octaves.

        Returns:
            The interval at position k, in the storage form of its base interval
        """
        if k == 0:
            return Interval.UNISON

        # Python floor division keeps the index in [0, N) for negative k
        octave, base_index = divmod(k - 1, self.degree())
        return self.intervals[base_index].transpose_octaves(octave)

    def span(self, start: int, stop: int) -> list[Interval]:
        """Get at(k) for every k in [start, stop)."""
        return [self.at(k) for k in range(start, stop)]

    def period(self) -> Interval:
        """The repeating interval (the last stored one)."""
        return self.intervals[-1]

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __str__(self) -> str:
        return self.name or f"Scale({self.degree()} intervals)"

    def __repr__(self) -> str:
        return f"Scale({self.name!r}, {self.description!r}, {self.intervals!r})"
