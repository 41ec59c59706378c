from hypothesis import given
from hypothesis import strategies as st

from dsalgo.searching import binary_search, linear_search, sentinel_search


def test_binary_search_source_example():
    data = [2, 3, 4, 10, 40]
    result = binary_search(data, 10)
    assert result == 3
    assert data[result] == 10


def test_binary_search_missing():
    assert binary_search([2, 3, 4, 10, 40], 5) is None
    assert binary_search([], 1) is None


@given(st.sets(st.integers(min_value=-500, max_value=500), max_size=50))
def test_binary_search_finds_every_element(values):
    data = sorted(values)
    for index, value in enumerate(data):
        assert binary_search(data, value) == index


@given(
    st.lists(st.integers(min_value=-20, max_value=20), max_size=30),
    st.integers(min_value=-20, max_value=20),
)
def test_binary_search_result_holds_target(values, target):
    data = sorted(values)
    result = binary_search(data, target)
    if target in data:
        assert data[result] == target
    else:
        assert result is None


def test_linear_search_all_positions():
    assert linear_search([5, 1, 5], 5) == [0, 2]
    assert linear_search([5, 1, 5], 9) == []


@given(
    st.lists(st.integers(min_value=0, max_value=5), max_size=30),
    st.integers(min_value=0, max_value=5),
)
def test_linear_search_positions_match(values, target):
    positions = linear_search(values, target)
    assert all(values[i] == target for i in positions)
    assert len(positions) == values.count(target)
    assert positions == sorted(positions)


@given(
    st.lists(st.integers(min_value=0, max_value=5), max_size=30),
    st.integers(min_value=0, max_value=5),
)
def test_sentinel_search_first_occurrence(values, target):
    result = sentinel_search(values, target)
    if target in values:
        assert result == values.index(target)
    else:
        assert result is None


def test_sentinel_search_last_element_and_empty():
    assert sentinel_search([4, 7, 9], 9) == 2
    assert sentinel_search([], 1) is None