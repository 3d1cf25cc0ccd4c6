from operator import attrgetter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortbench.sorting import (
    WordSum,
    bubble_sort,
    format_items,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
    word_value,
)

ALL_SORTS = [bubble_sort, selection_sort, insertion_sort, merge_sort, quick_sort, shell_sort]
STABLE_SORTS = [bubble_sort, insertion_sort, merge_sort]

pairs = st.lists(
    st.tuples(st.text(alphabet="abc", max_size=3), st.integers(-5, 5)),
    max_size=40,
)


@pytest.mark.parametrize("sort", ALL_SORTS)
@given(values=st.lists(st.integers(-1000, 1000), max_size=60))
def test_sorts_order_numbers(sort, values):
    items = [WordSum.from_number(v) for v in values]
    sort(items)
    assert [item.sum for item in items] == sorted(values)


@pytest.mark.parametrize("sort", ALL_SORTS)
@given(data=pairs)
def test_sorts_keep_the_same_records(sort, data):
    items = [WordSum(word, value) for word, value in data]
    work = list(items)
    sort(work)
    assert sorted(work, key=repr) == sorted(items, key=repr)
    assert all(a.sum <= b.sum for a, b in zip(work, work[1:]))


@pytest.mark.parametrize("sort", STABLE_SORTS)
@given(data=pairs)
def test_stable_sorts_preserve_equal_key_order(sort, data):
    items = [WordSum(word, value) for word, value in data]
    work = list(items)
    sort(work)
    assert work == sorted(items, key=attrgetter("sum"))


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_sorts_handle_empty_and_single(sort):
    empty = []
    sort(empty)
    assert empty == []
    single = [WordSum.from_number(7)]
    sort(single)
    assert single == [WordSum(None, 7)]


def test_quick_sort_on_presorted_input_is_not_limited_by_recursion():
    items = [WordSum.from_number(v) for v in range(5000)]
    quick_sort(items)
    assert [item.sum for item in items] == list(range(5000))


def test_word_value_weights_by_position():
    assert word_value("abc") == 590


def test_word_value_empty_and_single_char():
    assert word_value("") == 0
    assert word_value("z") == ord("z")


def test_from_word_and_from_number():
    assert WordSum.from_word("hello") == WordSum("hello", word_value("hello"))
    assert WordSum.from_number(42) == WordSum(None, 42)


def test_format_items():
    text = format_items([WordSum("ab", 3), WordSum(None, 5)])
    assert text == "(ab, 3) (NULL, 5) "


def test_format_items_empty():
    assert format_items([]) == ""