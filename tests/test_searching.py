import pytest

from algolab.searching import binary_search, linear_search

SORTED = [0, 2, 3, 4, 9, 10, 32, 36, 45, 87]
UNSORTED = [9, 3, 10, 32, 4, 10, 2, 87, 36, 45]


def test_binary_search_missing_key():
    assert binary_search(SORTED, 90) == -1


@pytest.mark.parametrize("key", SORTED)
def test_binary_search_finds_every_element(key):
    index = binary_search(SORTED, key)
    assert SORTED[index] == key


@pytest.mark.parametrize("key", [-5, 1, 5, 33, 100])
def test_binary_search_absent_keys(key):
    assert binary_search(SORTED, key) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


def test_linear_search_first_occurrence():
    assert linear_search(UNSORTED, 10) == UNSORTED.index(10)


@pytest.mark.parametrize("key", UNSORTED)
def test_linear_search_matches_index(key):
    assert linear_search(UNSORTED, key) == UNSORTED.index(key)


def test_linear_search_missing():
    assert linear_search(UNSORTED, 1000) == -1
    assert linear_search([], 1) == -1


def test_linear_search_finds_first_position():
    assert linear_search(UNSORTED, 9) == UNSORTED.index(9)