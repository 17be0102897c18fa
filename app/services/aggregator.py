"""
Aggregator - summary statistics for the dashboard.

Pure functions over already-fetched collections. No I/O, no failure modes:
empty input always yields the zero value.
"""

from typing import Iterable, List, NamedTuple, Optional, Sized


KNOWN_STATUSES = ("Applied", "Shortlisted", "Selected", "Rejected")


class StatusCount(NamedTuple):
    status: str
    count: int
    percentage: float


def count(collection: Optional[Sized]) -> int:
    """Size of a collection, 0 for None."""
    return len(collection) if collection else 0


def placement_rate(selected: int, total: int) -> float:
    """Selected applications as a percentage of all students."""
    if total == 0:
        return 0.0
    return selected / total * 100


def average_package(packages: Iterable[float]) -> float:
    """Mean package in LPA, 0 when there are no job profiles."""
    values = list(packages or [])
    if not values:
        return 0.0
    return sum(values) / len(values)


def _tally(values: Iterable[str], seed: Iterable[str] = ()) -> dict:
    # dicts keep insertion order: seeds first, then values as first seen
    counts = {key: 0 for key in seed}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def top_branch(branches: Iterable[str]) -> str:
    """
    Most common branch among students.

    Ties go to the branch seen first: sorted() is stable, so equal counts
    keep their insertion order.
    """
    counts = _tally(branches or [])
    if not counts:
        return ""
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return ranked[0][0]


def status_breakdown(statuses: Iterable[str], total: Optional[int] = None) -> List[StatusCount]:
    """
    Application counts per status.

    The four known statuses always appear (in display order) even at zero;
    anything else is tallied under its literal value after them.
    Percentages are against `total`, which defaults to the number of
    statuses given.
    """
    statuses = list(statuses or [])
    counts = _tally(statuses, seed=KNOWN_STATUSES)
    if total is None:
        total = len(statuses)

    return [
        StatusCount(status, n, n / total * 100 if total > 0 else 0.0)
        for status, n in counts.items()
    ]
