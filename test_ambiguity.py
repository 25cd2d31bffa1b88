from ambiguity import Ambiguity
from ambiguity import find_ambiguity
from ambiguity import is_uniquely_decodable
from ambiguity import spell
from mapping import default_mapping
from parsers import DfsParser


def check_ambiguity(ambiguity, mapping):
    """ Assert that both splits are distinct, valid, and really parse. """

    digits, first, second = ambiguity

    assert first != second
    assert "".join(str(key) for key in first) == digits
    assert "".join(str(key) for key in second) == digits
    assert all(key in mapping for key in first + second)

    words = DfsParser(mapping).parse(digits)
    assert spell(first, mapping) in words
    assert spell(second, mapping) in words


def test_that_alphabet_code_is_ambiguous_on_eleven():

    mapping = default_mapping()
    ambiguity = find_ambiguity(mapping)

    assert ambiguity == Ambiguity("11", (1, 1), (11,))
    assert not is_uniquely_decodable(mapping)
    assert spell(ambiguity.first, mapping) == "AA"
    assert spell(ambiguity.second, mapping) == "K"
    check_ambiguity(ambiguity, mapping)


def test_that_splits_are_followed_across_several_keys():

    mapping = {1: "A", 2: "B", 3: "C", 123: "D"}

    assert find_ambiguity(mapping) == Ambiguity("123", (1, 2, 3), (123,))


def test_that_prefix_free_mappings_are_uniquely_decodable():

    assert is_uniquely_decodable({1: "A", 22: "B", 203: "C"})
    assert is_uniquely_decodable({7: "G"})
    assert is_uniquely_decodable({})


def test_that_unparseable_leftovers_do_not_count_as_ambiguity():

    # 1 is a prefix of 10, but the leftover 0 is never a key:
    assert find_ambiguity({1: "A", 10: "B"}) is None
    assert DfsParser({1: "A", 10: "B"}).parse("110") == ["AB"]


def test_that_found_splits_really_are_parses():

    mappings = [
        {1: "A", 21: "B", 212: "C", 2: "D"},
        {12: "A", 34: "B", 1234: "C"},
        {10: "A", 101: "B", 110: "C", 1: "D"},
        {1: "A", 12: "B", 23: "C", 3: "D"},
        {5: "E", 10: "J", 105: "X"},
    ]

    for mapping in mappings:
        ambiguity = find_ambiguity(mapping)
        assert ambiguity is not None, mapping
        check_ambiguity(ambiguity, mapping)


if __name__ == "__main__":

    test_that_alphabet_code_is_ambiguous_on_eleven()
    test_that_splits_are_followed_across_several_keys()
    test_that_prefix_free_mappings_are_uniquely_decodable()
    test_that_unparseable_leftovers_do_not_count_as_ambiguity()
    test_that_found_splits_really_are_parses()
