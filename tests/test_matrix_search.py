from cpsolutions.matrix_search import search_matrix

MATRIX = [
    [1, 4, 7, 11, 15],
    [2, 5, 8, 12, 19],
    [3, 6, 9, 16, 22],
    [10, 13, 14, 17, 24],
    [18, 21, 23, 26, 30],
]


def test_search_matrix_found_and_missing():
    assert search_matrix(MATRIX, 5) is True
    assert search_matrix(MATRIX, 20) is False


def test_every_element_is_found():
    for row in MATRIX:
        for value in row:
            assert search_matrix(MATRIX, value) is True


def test_absent_values_are_not_found():
    present = {value for row in MATRIX for value in row}
    for value in range(-5, 40):
        assert search_matrix(MATRIX, value) is (value in present)


def test_empty_matrix():
    assert search_matrix([], 1) is False
    assert search_matrix([[]], 1) is False