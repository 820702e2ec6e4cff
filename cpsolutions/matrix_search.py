"""Search for a value in a matrix whose rows are sorted."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` occurs in ``matrix``, binary-searching each sorted row."""
    if not matrix or not matrix[0]:
        return False
    for row in matrix:
        pos = bisect_left(row, target)
        if pos < len(row) and row[pos] == target:
            return True
    return False