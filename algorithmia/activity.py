"""Greedy activity selection by earliest finishing time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Activity:
    """An activity with a start, an end and an identifying number."""

    start: int
    end: int
    number: int


def select_activities(activities: Iterable[Activity]) -> list[Activity]:
    """Return a largest set of compatible activities, in order of finishing."""
    chosen: list[Activity] = []
    for activity in sorted(activities, key=lambda a: a.end):
        if not chosen or activity.start >= chosen[-1].end:
            chosen.append(activity)
    return chosen


def select_from_times(starts: Sequence[int], ends: Sequence[int]) -> list[int]:
    """Select activities given as parallel start and end lists; return 1-based numbers."""
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    activities = [
        Activity(start, end, number)
        for number, (start, end) in enumerate(zip(starts, ends), start=1)
    ]
    return [activity.number for activity in select_activities(activities)]