"""
Performance Ratings - Qualitative label derived from the final guess count.

The thresholds are data, not branches. A RatingTable is an ordered list
of bands; the first band whose upper bound covers the count wins. Counts
below 1 and counts above the last band get the fallback label.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class RatingBand:
    """Counts from the previous band's bound + 1 up to `upper` (inclusive)."""
    upper: int
    label: str


@dataclass(frozen=True)
class RatingTable:
    """
    An ordered threshold table.

    Bands must be non-empty with strictly increasing upper bounds >= 1.
    """
    bands: tuple[RatingBand, ...]
    fallback: str

    def __post_init__(self):
        if not self.bands:
            raise ValueError("RatingTable needs at least one band")
        previous = 0
        for band in self.bands:
            if band.upper <= previous:
                raise ValueError(
                    f"Band upper bounds must be strictly increasing and >= 1, got {band.upper}"
                )
            previous = band.upper

    @classmethod
    def from_mapping(cls, mapping: Mapping[int, str], fallback: str) -> RatingTable:
        """Build a table from {upper_bound: label}."""
        bands = tuple(
            RatingBand(upper=upper, label=label)
            for upper, label in sorted(mapping.items())
        )
        return cls(bands=bands, fallback=fallback)

    def rate(self, guess_count: int) -> str:
        """Get the label for a guess count."""
        if guess_count < 1:
            return self.fallback
        for band in self.bands:
            if guess_count <= band.upper:
                return band.label
        return self.fallback

    def rows(self) -> list[tuple[int, int | None, str]]:
        """(low, high, label) rows for display. high is None for the fallback row."""
        rows = []
        low = 1
        for band in self.bands:
            rows.append((low, band.upper, band.label))
            low = band.upper + 1
        rows.append((low, None, self.fallback))
        return rows


REFERENCE_TABLE = RatingTable.from_mapping(
    {
        3: "Outstanding!",
        5: "Excellent!",
        7: "Good!",
        10: "Average!",
        15: "Okay!",
    },
    fallback="Bad!",
)


def performance_rating(guess_count: int, table: RatingTable = REFERENCE_TABLE) -> str:
    """Pure lookup of the rating for a final guess count."""
    return table.rate(guess_count)
