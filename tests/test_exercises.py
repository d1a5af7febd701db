from collections import Counter

import pytest

from algonotes.exercises import (
    apply_ac,
    countdown,
    frequency_sort,
    is_right_triangle,
    is_vps,
    min_decrements,
    outfit_combinations,
    parking_walk,
    remove_typo,
    running_medians,
    still_in_office,
)


def test_running_medians_ascending():
    values = list(range(1, 10))
    assert running_medians(values) == values[:5]


def test_running_medians_descending():
    values = list(range(9, 0, -1))
    assert running_medians(values) == values[:5]


def test_running_medians_length_and_membership():
    values = [7, -3, 12, 0, 5, 5, 40, -8]
    medians = running_medians(values)
    assert len(medians) == (len(values) + 1) // 2
    assert set(medians) <= set(values)
    assert medians[0] == values[0]


def test_remove_typo_drops_one_character():
    word = "MISSPELL"
    result = remove_typo(4, word)
    assert len(result) == len(word) - 1
    assert result == word[:3] + word[4:]


def test_remove_typo_ends():
    word = "abcdef"
    assert remove_typo(1, word) == word[1:]
    assert remove_typo(len(word), word) == word[:-1]


def test_remove_typo_out_of_range():
    with pytest.raises(IndexError):
        remove_typo(0, "abc")
    with pytest.raises(IndexError):
        remove_typo(4, "abc")


def test_countdown():
    assert countdown(5) == list(reversed(range(1, 6)))
    assert countdown(0) == []


def test_min_decrements_already_increasing():
    assert min_decrements([1, 2, 3, 10]) == 0


def test_min_decrements_equal_scores():
    assert min_decrements([5, 5, 5]) == 3


def test_frequency_sort_preserves_multiset_and_groups():
    values = [1, 2, 2, 1, 2, 3, 3, 3, 3]
    result = frequency_sort(values)
    assert Counter(result) == Counter(values)
    counts = Counter(values)
    assert [counts[v] for v in result] == sorted((counts[v] for v in result), reverse=True)


def test_frequency_sort_ties_keep_first_appearance():
    assert frequency_sort([3, 1, 3, 1]) == [3, 3, 1, 1]


@pytest.mark.parametrize("sides", [(3, 4, 5), (5, 3, 4), (10, 6, 8)])
def test_right_triangles(sides):
    assert is_right_triangle(*sides) is True


@pytest.mark.parametrize("sides", [(1, 2, 3), (6, 6, 6), (2, 3, 4)])
def test_not_right_triangles(sides):
    assert is_right_triangle(*sides) is False


def test_parking_walk_invariants():
    positions = [24, 13, 89, 37]
    base = parking_walk(positions)
    assert parking_walk([p + 5 for p in positions]) == base
    assert parking_walk(reversed(positions)) == base
    assert parking_walk([42]) == 0


def test_parking_walk_empty():
    with pytest.raises(ValueError):
        parking_walk([])


def test_apply_ac_identity_and_reverse():
    values = [1, 2, 3, 4]
    assert apply_ac("", values) == values
    assert apply_ac("RR", values) == values
    assert apply_ac("R", values) == list(reversed(values))


def test_apply_ac_drops_from_correct_end():
    values = [1, 2, 3, 4]
    assert apply_ac("D", values) == values[1:]
    assert apply_ac("RD", values) == list(reversed(values))[1:]
    assert apply_ac("D" * len(values), values) == []


def test_apply_ac_error_on_empty():
    with pytest.raises(ValueError):
        apply_ac("DD", [7])
    with pytest.raises(ValueError):
        apply_ac("D", [])


def test_still_in_office():
    log = [
        ("Baha", "enter"),
        ("Askar", "enter"),
        ("Baha", "leave"),
        ("Artem", "enter"),
    ]
    assert still_in_office(log) == ["Askar", "Artem"]


def test_still_in_office_reentry():
    log = [("x", "enter"), ("x", "leave"), ("x", "enter")]
    assert still_in_office(log) == ["x"]


@pytest.mark.parametrize("text", ["()", "(())", "(()())((()))", "()" * 5])
def test_valid_parentheses(text):
    assert is_vps(text) is True


@pytest.mark.parametrize("text", [")(", "(()", "(())())", "())(()", "((", ""[:0] + "(()))("])
def test_invalid_parentheses(text):
    assert is_vps(text) is False


def test_outfits_single_category_counts_items():
    items = [("a", "hat"), ("b", "hat"), ("c", "hat")]
    assert outfit_combinations(items) == len(items)


def test_outfits_two_categories():
    items = [("hat", "headgear"), ("sunglasses", "eyewear"), ("turban", "headgear")]
    assert outfit_combinations(items) == 5


def test_outfits_none():
    assert outfit_combinations([]) == 0