"""
This script decides whether a mapping from numbers to letters is uniquely
decodable, that is, whether every digit string has at most one parse. If
not, it finds a short digit string together with two of its competing
splits into numbers.

The search is the Sardinas-Patterson test: two rival splits of the same
prefix are followed side by side, and only the digits by which one side
runs ahead of the other (the dangling suffix) determine how they can go on.
"""

from collections import deque
from collections import namedtuple

from mapping import validate_mapping


Ambiguity = namedtuple("Ambiguity", ["digits", "first", "second"])
Ambiguity.__doc__ = """ A digit string with two different splits into keys. """


def find_ambiguity(mapping):
    """ Find a digit string with two parses, or None if there is none.

    Parameters:
    -----------
    mapping : dict
        A table in the format {number: symbol}. Its code words are the
        decimal representations of the numbers, which never begin with
        a zero and therefore always pass the leading-zero rule.

    Returns:
    --------
    ambiguity : Ambiguity or None
        A triple `(digits, first, second)` where `first` and `second` are
        distinct tuples of keys whose decimal representations both
        concatenate to `digits`, or None if the mapping is uniquely
        decodable.

    Notes:
    ------
    Every search state pairs a split that is `behind` with a split that is
    `ahead` by a dangling suffix, so that behind + suffix == ahead as digit
    strings. The states are explored breadth-first, one key at a time, so
    the splits found use few keys. A dangling suffix that was seen before
    cannot lead anywhere new, so the search is finite: every suffix is a
    tail of some code word.
    """

    validate_mapping(mapping)
    words = sorted(str(number) for number in mapping)

    frontier = deque()
    seen = set()
    for short in words:
        for long in words:
            if len(short) < len(long) and long.startswith(short):
                suffix = long[len(short):]
                if suffix not in seen:
                    seen.add(suffix)
                    frontier.append((suffix, (short,), (long,)))

    while frontier:
        suffix, behind, ahead = frontier.popleft()
        for word in words:
            if suffix.startswith(word):
                # the lagging split catches up by `word`, or draws level:
                state = (suffix[len(word):], behind + (word,), ahead)
            elif word.startswith(suffix):
                # the lagging split overtakes, so the two swap roles:
                state = (word[len(suffix):], ahead, behind + (word,))
            else:
                continue
            if state[0] == "":
                return Ambiguity("".join(state[1]),
                                 tuple(int(w) for w in state[1]),
                                 tuple(int(w) for w in state[2]))
            if state[0] not in seen:
                seen.add(state[0])
                frontier.append(state)

    return None


def is_uniquely_decodable(mapping) -> bool:
    """ Return True iff no digit string has more than one parse. """

    return find_ambiguity(mapping) is None


def spell(keys, mapping):
    """ Return the word that a tuple of keys decodes to. """

    return "".join(mapping[key] for key in keys)


if __name__ == "__main__":

    from mapping import default_mapping
    from parsers import DfsParser

    mappings = [
        default_mapping(),
        {1: "A", 11: "B"},
        {1: "A", 10: "B"},
        {1: "A", 22: "B", 203: "C"},
        {12: "A", 34: "B", 1234: "C", 5: "D"},
        {1: "A", 21: "B", 212: "C", 2: "D"},
    ]

    for mapping in mappings:
        ambiguity = find_ambiguity(mapping)
        if ambiguity is None:
            print("Mapping %r is uniquely decodable." % mapping)
        else:
            digits, first, second = ambiguity
            print("Digits %r are ambiguous under %r:" % (digits, mapping))
            print("  %r --> %r" % (first, spell(first, mapping)))
            print("  %r --> %r" % (second, spell(second, mapping)))
            print("All parses: %r" % DfsParser(mapping).parse(digits))
        print()
