"""Small number puzzles: counting, divisibility and simple simulations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _trunc_half(n: int) -> int:
    """Halve ``n``, rounding toward zero."""
    return n // 2 if n >= 0 else -((-n) // 2)


def years_to_exceed(a: int, b: int) -> int:
    """Years until ``a`` (tripling yearly) is strictly larger than ``b`` (doubling yearly)."""
    if a <= 0 and b >= 0:
        raise ValueError("a must be positive to ever exceed b")
    years = 0
    while a <= b:
        a *= 3
        b *= 2
        years += 1
    return years


def moves_to_center(matrix: Sequence[Sequence[int]]) -> int:
    """Swaps of adjacent rows or columns needed to bring the single 1 to the middle of a 5x5 grid."""
    position = None
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if value == 1:
                position = (r, c)
    if position is None:
        raise ValueError("matrix contains no 1")
    row, col = position
    return abs(2 - row) + abs(2 - col)


def poker_max_points(n: int, m: int, k: int) -> int:
    """Best score in Berland poker with ``n`` cards, ``m`` jokers and ``k`` players."""
    cards = n // k
    if cards >= m:
        return m
    rest = m - cards
    if k <= 1:
        raise ValueError("more jokers than cards")
    others = -(-rest // (k - 1))
    return max(cards - others, 0)


def alternating_sum(n: int) -> int:
    """Value of -1 + 2 - 3 + ... + (-1)^n * n."""
    if n % 2 == 0:
        return _trunc_half(n)
    return -(_trunc_half(n) + 1)


def elephant_steps(x: int) -> int:
    """Fewest steps of length 1 to 5 needed to walk to point ``x``."""
    if x <= 5:
        return 1
    return -(-x // 5)


def leader_choices(n: int) -> int:
    """Ways to pick a team-leader count that splits the other employees evenly."""
    return sum(1 for i in range(1, n // 2 + 1) if n % i == 0)


def garden_hours(k: int, buckets: Iterable[int]) -> int:
    """Hours to water a garden of length ``k`` with the best bucket that fits exactly."""
    for size in sorted(buckets, reverse=True):
        if k % size == 0:
            return k // size
    raise ValueError("no bucket divides the garden length")


def damaged_dragons(k: int, l: int, m: int, n: int, d: int) -> int:
    """Dragons among 1..d whose number is a multiple of any of ``k``, ``l``, ``m``, ``n``."""
    divisors = (k, l, m, n)
    return sum(1 for i in range(1, d + 1) if any(i % x == 0 for x in divisors))


def problems_solved(n: int, k: int) -> int:
    """Problems solvable (the i-th taking 5*i minutes) while leaving ``k`` minutes of a 240-minute contest."""
    time_left = 240 - k
    solved = 0
    for i in range(1, n + 1):
        if time_left < 5 * i:
            break
        time_left -= 5 * i
        solved += 1
    return solved


def orac_add(n: int, k: int) -> int:
    """Result of adding the smallest divisor greater than one to ``n``, ``k`` times."""
    if n < 2:
        raise ValueError("n must be at least 2")
    smallest = next(j for j in range(2, n + 1) if n % j == 0)
    return n + smallest + 2 * (k - 1)


def borrow_amount(k: int, n: int, w: int) -> int:
    """Dollars to borrow to buy ``w`` bananas where the i-th costs ``i*k``, holding ``n``."""
    total = sum(i * k for i in range(1, w + 1))
    return max(total - n, 0)


def can_split_evenly(w: int) -> bool:
    """Whether weight ``w`` splits into two positive even parts."""
    return w % 2 == 0 and w > 2


def wrong_subtract(n: int, k: int) -> int:
    """Apply Tanya's faulty decrement ``k`` times to ``n``."""
    for _ in range(k):
        n = n // 10 if n % 10 == 0 else n - 1
    return n