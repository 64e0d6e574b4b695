import random
from dataclasses import dataclass, field

import pytest

from algozoo.sorting import (
    bubble_sort,
    counting_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SAMPLE = [9, 1, 8, 2, 7, 3, 6, 4, 5]


@dataclass(order=True)
class Tagged:
    key: int
    tag: str = field(compare=False)


def test_sample():
    expected = list(range(1, 10))
    assert bubble_sort(SAMPLE) == expected
    assert counting_sort(SAMPLE) == expected
    assert insertion_sort(SAMPLE) == expected
    assert merge_sort(SAMPLE) == expected
    assert quick_sort(SAMPLE) == expected
    assert selection_sort(SAMPLE) == expected


def test_empty_and_single():
    assert bubble_sort([]) == [] and bubble_sort([42]) == [42]
    assert counting_sort([]) == [] and counting_sort([42]) == [42]
    assert insertion_sort([]) == [] and insertion_sort([42]) == [42]
    assert merge_sort([]) == [] and merge_sort([42]) == [42]
    assert quick_sort([]) == [] and quick_sort([42]) == [42]
    assert selection_sort([]) == [] and selection_sort([42]) == [42]


def test_does_not_modify_input():
    data = list(SAMPLE)
    bubble_sort(data)
    counting_sort(data)
    insertion_sort(data)
    merge_sort(data)
    quick_sort(data)
    selection_sort(data)
    assert data == SAMPLE


@pytest.mark.parametrize("seed", range(5))
def test_random_integers_match_sorted(seed):
    rng = random.Random(seed)
    data = [rng.randint(-20, 20) for _ in range(rng.randint(0, 60))]
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert counting_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected


def test_duplicates():
    data = [3, 1, 3, 3, 0, 1, -2, 3]
    expected = [-2, 0, 1, 1, 3, 3, 3, 3]
    assert bubble_sort(data) == expected
    assert counting_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected


def test_already_sorted_and_reversed():
    ascending = list(range(200))
    assert bubble_sort(ascending) == ascending
    assert bubble_sort(reversed(ascending)) == ascending
    assert counting_sort(ascending) == ascending
    assert counting_sort(reversed(ascending)) == ascending
    assert insertion_sort(ascending) == ascending
    assert insertion_sort(reversed(ascending)) == ascending
    assert merge_sort(ascending) == ascending
    assert merge_sort(reversed(ascending)) == ascending
    assert quick_sort(ascending) == ascending
    assert quick_sort(reversed(ascending)) == ascending
    assert selection_sort(ascending) == ascending
    assert selection_sort(reversed(ascending)) == ascending


def test_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert insertion_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert selection_sort(words) == expected


def test_stability():
    data = [Tagged(k, str(i)) for i, k in enumerate([2, 1, 2, 1, 0, 2])]
    expected = ["4", "1", "3", "0", "2", "5"]
    assert [t.tag for t in bubble_sort(data)] == expected
    assert [t.tag for t in insertion_sort(data)] == expected
    assert [t.tag for t in merge_sort(data)] == expected


def test_counting_sort_rejects_floats():
    with pytest.raises(TypeError):
        counting_sort([1.5, 2.0])


def test_counting_sort_accepts_generator():
    assert counting_sort(x for x in SAMPLE) == sorted(SAMPLE)