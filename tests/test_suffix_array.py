from itertools import pairwise

from algoshelf.suffix_array import (
    build_suffix_array,
    character_classes,
    find_occurrences,
    sort_characters,
    sort_doubled,
    update_classes,
)


def _cyclic(text, start, size):
    return (text[start:] + text[:start])[:size]


def test_sort_characters_orders_and_is_stable():
    text = "ababaa"
    order = sort_characters(text)
    assert sorted(order) == list(range(len(text)))
    for a, b in pairwise(order):
        assert text[a] < text[b] or (text[a] == text[b] and a < b)


def test_character_classes_follow_characters():
    text = "banana"
    classes = character_classes(text, sort_characters(text))
    assert max(classes) + 1 == len(set(text))
    for i in range(len(text)):
        for j in range(len(text)):
            assert (classes[i] == classes[j]) == (text[i] == text[j])
            assert (classes[i] < classes[j]) == (text[i] < text[j])


def test_doubling_step_sorts_pairs():
    text = "abracadabra$"
    order = sort_characters(text)
    classes = character_classes(text, order)
    order = sort_doubled(text, 1, order, classes)
    classes = update_classes(order, classes, 1)
    pairs = [_cyclic(text, p, 2) for p in order]
    assert pairs == sorted(pairs)
    for i in range(len(text)):
        for j in range(len(text)):
            assert (classes[i] == classes[j]) == (_cyclic(text, i, 2) == _cyclic(text, j, 2))


def test_empty_text():
    assert build_suffix_array("") == []
    assert sort_characters("") == []


def test_suffix_array_small():
    assert build_suffix_array("GAC$") == [3, 1, 2, 0]


def test_suffix_array_repeats():
    assert build_suffix_array("GAGAGAGA$") == [8, 7, 5, 3, 1, 6, 4, 2, 0]


def test_suffix_array_longer():
    assert build_suffix_array("AACGATAGCGGTAGA$") == [
        15, 14, 0, 1, 12, 6, 4, 2, 8, 13, 3, 7, 9, 10, 11, 5,
    ]


def test_suffix_array_orders_suffixes():
    text = "mississippi$"
    order = build_suffix_array(text)
    assert sorted(order) == list(range(len(text)))
    for a, b in pairwise(order):
        assert text[a:] < text[b:]


def test_find_occurrences_banana():
    text = "banana$"
    assert find_occurrences(text, "ana", build_suffix_array(text)) == [1, 3]


def test_find_occurrences_absent():
    assert find_occurrences("banana$", "nab") == []


def test_find_occurrences_are_real_matches():
    text = "AATCGGGTTCAATCGGGGT$"
    order = build_suffix_array(text)
    for pattern in ["ATCG", "GGGT", "G", "T"]:
        positions = find_occurrences(text, pattern, order)
        assert positions == sorted(positions)
        assert len(positions) == sum(text.startswith(pattern, i) for i in range(len(text)))
        for p in positions:
            assert text[p:p + len(pattern)] == pattern