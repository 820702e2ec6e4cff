"""Puzzles solved by walking through a sequence of events or records."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def pages_turned(m: int, names: Iterable[int]) -> list[int]:
    """Pages turned on each day when writing ``names[i]`` names into a notebook of ``m`` per page."""
    if m <= 0:
        raise ValueError("a page must hold at least one name")
    room = m
    turns = []
    for written in names:
        if room > written:
            room -= written
            turns.append(0)
            continue
        overflow = written - room
        turns.append(1 + overflow // m)
        room = m - overflow % m
    return turns


def rooms_available(rooms: Iterable[tuple[int, int]]) -> int:
    """Rooms, given as (occupied, capacity), with space for two more people."""
    return sum(1 for occupied, capacity in rooms if capacity - occupied >= 2)


def max_grade(m: int, scores: Iterable[int]) -> int:
    """Highest score the first student can claim while keeping the average and the cap ``m``."""
    return min(sum(scores), m)


def is_easy(responses: Iterable[int]) -> bool:
    """Whether nobody marked the problem as hard (a response of 1)."""
    return all(response != 1 for response in responses)


def magnet_groups(magnets: Iterable[int | str]) -> int:
    """Groups formed by a row of magnets written as "01" or "10"."""
    poles = [int(magnet) for magnet in magnets]
    return 1 + sum(1 for prev, cur in pairwise(poles) if prev % 10 == cur // 10)


def paving_cost(grid: Iterable[str], x: int, y: int) -> int:
    """Cheapest cost to pave every '.' with 1x1 tiles at ``x`` or 1x2 tiles at ``y``."""
    singles = 0
    doubles = 0
    for row in grid:
        pending = False
        for cell in row:
            if cell != ".":
                pending = False
            elif pending:
                singles -= 1
                doubles += 1
                pending = False
            else:
                singles += 1
                pending = True
    return min(x * singles + y * doubles, x * (singles + 2 * doubles))


def tram_capacity(stops: Sequence[tuple[int, int]]) -> int:
    """Smallest tram capacity for stops given as (leaving, entering) passengers."""
    load = 0
    capacity = 0
    last = len(stops) - 1
    for index, (leaving, entering) in enumerate(stops):
        load += entering - leaving
        if index != last:
            capacity = max(capacity, load)
    return capacity


def fence_width(h: int, heights: Iterable[int]) -> int:
    """Road width for friends walking past a fence of height ``h``; tall ones bend and take two."""
    return sum(2 if height > h else 1 for height in heights)


def solved_count(views: Iterable[Sequence[int]]) -> int:
    """Problems that at least two of the three friends are sure about."""
    return sum(1 for view in views if sum(1 for v in view if v == 1) >= 2)