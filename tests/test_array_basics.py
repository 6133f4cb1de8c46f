import pytest

from algodrills.array_basics import (
    is_sorted,
    is_sorted_brute,
    largest,
    largest_by_sorting,
    linear_search,
    max_consecutive_ones,
    missing_number_brute,
    missing_number_hash,
    missing_number_sum,
    remove_duplicates,
    second_largest,
    second_largest_by_sorting,
    second_largest_two_pass,
    single_number_brute,
    single_number_counter,
    single_number_hash,
    single_number_xor,
)

SAMPLES = [[], [1], [1, 2, 2, 3], [3, 2, 1], [1, 3, 2], [5, 5, 5], [-2, 0, 7, 7, 9]]


@pytest.mark.parametrize("arr", SAMPLES)
def test_sorted_checks_agree_with_sorting(arr):
    expected = arr == sorted(arr)
    assert is_sorted(arr) == expected
    assert is_sorted_brute(arr) == expected


@pytest.mark.parametrize("func", [largest, largest_by_sorting])
@pytest.mark.parametrize("arr, expected", [([2, 5, 1, 3, 0], 5), ([8, 10, 5, 7, 9], 10)])
def test_largest_examples(func, arr, expected):
    assert func(arr) == expected


@pytest.mark.parametrize("func", [largest, largest_by_sorting])
def test_largest_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


def test_largest_does_not_mutate():
    arr = [3, 1, 2]
    largest_by_sorting(arr)
    assert arr == [3, 1, 2]


@pytest.mark.parametrize(
    "func", [second_largest, second_largest_by_sorting, second_largest_two_pass]
)
def test_second_largest_example(func):
    assert func([1, 2, 4, 7, 7, 5]) == 5


def test_second_largest_absent():
    assert second_largest_by_sorting([7, 7]) is None
    assert second_largest_two_pass([7, 7]) is None
    assert second_largest([7, 7]) == -1


def test_second_largest_empty():
    assert second_largest_two_pass([]) is None
    with pytest.raises(ValueError):
        second_largest([])
    with pytest.raises(ValueError):
        second_largest_by_sorting([])


def test_linear_search_examples():
    assert linear_search([1, 2, 3, 4, 5], 3)
    assert linear_search([5, 4, 3, 2, 1], 5)
    assert not linear_search([1, 2, 3], 9)
    assert not linear_search([], 1)


def test_max_consecutive_ones():
    assert max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3
    assert max_consecutive_ones([0, 0]) == 0
    assert max_consecutive_ones([]) == 0


def test_max_consecutive_ones_bounded_by_count():
    arr = [1, 0, 1, 1, 0, 1]
    assert max_consecutive_ones(arr) <= arr.count(1)


@pytest.mark.parametrize(
    "func", [single_number_brute, single_number_hash, single_number_counter, single_number_xor]
)
def test_single_number_all_methods(func):
    assert func([4, 1, 2, 1, 2]) == 4


def test_single_number_counter_picks_largest_single():
    assert single_number_counter([1, 3, 2, 2]) == 3
    assert single_number_brute([1, 3, 2, 2]) == 1


def test_single_number_none_found():
    assert single_number_brute([2, 2]) is None
    assert single_number_hash([2, 2]) is None


def test_single_number_hash_rejects_bad_input():
    with pytest.raises(ValueError):
        single_number_hash([-1, 2, 2])
    with pytest.raises(ValueError):
        single_number_hash([])


@pytest.mark.parametrize("nums", [[3, 0, 1], [1], [9, 6, 4, 2, 3, 5, 7, 0, 1], [2, 0]])
def test_missing_number_methods_agree(nums):
    result = missing_number_sum(nums)
    assert result not in nums
    assert 0 <= result <= len(nums)
    assert missing_number_brute(nums) == result
    assert missing_number_hash(nums) == result


def test_missing_number_at_end():
    nums = [0, 1]
    assert missing_number_brute(nums) == len(nums)
    assert missing_number_sum(nums) == len(nums)
    assert missing_number_hash(nums) is None


def test_missing_number_hash_out_of_range():
    with pytest.raises(ValueError):
        missing_number_hash([0, 5])


@pytest.mark.parametrize("arr", [[1, 1, 2, 2, 2, 3, 3], [4], [1, 2, 3], [0, 0, 0]])
def test_remove_duplicates_compacts_front(arr):
    original = list(arr)
    count = remove_duplicates(arr)
    assert arr[:count] == sorted(set(original))
    assert len(arr) == len(original)


def test_remove_duplicates_empty():
    arr = []
    assert remove_duplicates(arr) == 0
    assert arr == []