import pytest

from cpsolutions.simulation import (
    fence_width,
    is_easy,
    magnet_groups,
    max_grade,
    pages_turned,
    paving_cost,
    rooms_available,
    solved_count,
    tram_capacity,
)


def test_pages_turned_example():
    assert pages_turned(5, [3, 7, 9]) == [0, 2, 1]


@pytest.mark.parametrize(
    "m, names",
    [(5, [3, 7, 9]), (1, [1, 2, 3]), (4, [4, 4, 4]), (10, [1, 1, 1, 25, 3])],
)
def test_pages_turned_totals_match_cumulative_pages(m, names):
    turns = pages_turned(m, names)
    assert len(turns) == len(names)
    total = 0
    for day, _ in enumerate(names):
        total += names[day]
        assert sum(turns[: day + 1]) == total // m


def test_pages_turned_rejects_empty_page():
    with pytest.raises(ValueError):
        pages_turned(0, [1])


def test_rooms_available():
    assert rooms_available([(1, 1), (2, 2), (3, 3)]) == 0
    assert rooms_available([(1, 10), (0, 10), (10, 10)]) == 2


def test_max_grade_capped_or_sum():
    assert max_grade(10, [1, 2, 3, 4]) == 10
    assert max_grade(5, [1, 2, 3, 4]) == 5
    assert max_grade(100, [0, 0]) == 0


def test_is_easy():
    assert is_easy([0, 0, 0]) is True
    assert is_easy([0, 0, 1]) is False


def test_magnet_groups_example():
    assert magnet_groups(["10", "10", "10", "01", "10", "10"]) == 3


def test_magnet_groups_same_and_alternating():
    assert magnet_groups(["10"] * 4) == 1
    assert magnet_groups(["10", "01", "10"]) == 3
    assert magnet_groups([10, 1, 10]) == magnet_groups(["10", "01", "10"])


def test_paving_cost():
    assert paving_cost(["."], 10, 1) == 10
    assert paving_cost([".."], 10, 1) == 1
    assert paving_cost([".."], 1, 10) == 2
    assert paving_cost(["**", "**"], 3, 7) == 0


def test_paving_cost_rows_do_not_join():
    assert paving_cost([".", "."], 10, 1) == paving_cost(["."], 10, 1) * 2


def test_tram_capacity_example():
    assert tram_capacity([(0, 3), (2, 5), (4, 2), (4, 0)]) == 6


def test_tram_capacity_at_least_every_load():
    stops = [(0, 2), (1, 4), (3, 1), (0, 5), (8, 0)]
    capacity = tram_capacity(stops)
    load = 0
    for leaving, entering in stops:
        load += entering - leaving
        assert load <= capacity


def test_fence_width():
    heights = [1, 2, 3, 4]
    assert fence_width(10, heights) == len(heights)
    assert fence_width(0, heights) == 2 * len(heights)


def test_solved_count():
    assert solved_count([(1, 1, 1)] * 4) == 4
    assert solved_count([(0, 0, 0), (1, 0, 0)]) == 0
    assert solved_count([(1, 1, 0), (1, 0, 0)]) == 1