"""
NUMBER PARSING
--------------

This script contains three parsers that read a string of decimal digits as
a sequence of letters, given a table like {1: 'A', 2: 'B', ..., 26: 'Z'}.
Since "12" may be read either as AB or as L, a digit string generally has
many parses, and all of them are returned.

The three parsers return the same words in the same order: at every
position, the narrowest group is tried first, and all of its completions
come before any completion of a wider group. They differ in how much work
they repeat and how much they copy:

 - NaiveParser keeps a queue of partial words and copies a partial word
   every time it is extended;
 - DfsParser walks the parses depth-first, growing and shrinking a single
   buffer, and copies the buffer only when a parse is complete;
 - MemoizedParser first counts how many parses start at each position and
   then writes every letter straight into its final place in a matrix of
   exactly the right size.

The number of parses may grow exponentially with the length of the string.
For a run of n ones under the alphabet code, it is the Fibonacci number
F(n + 1), so a string of thirty ones already has 1,346,269 parses.
"""

from collections import deque
from typing import Dict
from typing import List

import numpy as np

from groups import GroupValidator
from mapping import default_mapping
from mapping import validate_mapping


DIGITS = "0123456789"


class ParseError(ValueError):
    """ Base class for inputs that cannot be parsed. """


class InvalidCharacter(ParseError):
    """ The input contains something other than the digits 0-9. """

    def __init__(self, character, position):
        message = "Invalid character %r at position %s." % (character, position)
        super().__init__(message)
        self.character = character
        self.position = position


class CountOverflow(ParseError):
    """ The number of parses does not fit in the count table. """


class NumberParser:
    """ Common interface of the parsers: `parser.parse(digits)`.

    Subclasses implement `_parse`, which may assume that the input is a
    string consisting only of the digits 0-9.
    """

    name = None

    def __init__(self, mapping=None) -> None:
        """ Create a parser for the given {number: symbol} table.

        If no mapping is given, the alphabet code 1 -> 'A', ..., 26 -> 'Z'
        is used. The mapping is read, never modified.
        """

        if mapping is None:
            mapping = default_mapping()

        validate_mapping(mapping)

        self.mapping = mapping
        self.groups = GroupValidator(mapping)

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.mapping)

    def parse(self, digits: str) -> List[str]:
        """ Return every reading of the digit string as a list of words.

        Parameters:
        -----------
        digits : str
            A string of the characters 0-9, possibly empty.

        Returns:
        --------
        words : list of strings
            All the words the digit string can be decoded into, ordered
            narrowest-group-first. The empty string has exactly one parse,
            the empty word. A string without any parse gives an empty list.

        Raises:
        -------
        InvalidCharacter:
            If the string contains anything but the digits 0-9.
        """

        check_digits(digits)

        return self._parse(digits)

    def _parse(self, digits: str) -> List[str]:
        raise NotImplementedError


def check_digits(digits):
    """ Raise an error unless `digits` is a string of ASCII digits. """

    if not isinstance(digits, str):
        raise TypeError("Expected a string of digits, got %r." % (digits,))

    # str.isdigit would let through characters like '²' and '٣':
    for position, character in enumerate(digits):
        if character not in DIGITS:
            raise InvalidCharacter(character, position)


class NaiveParser(NumberParser):
    """ Parser that extends copies of partial words one group at a time. """

    name = "naive"

    def _parse(self, digits):

        queue = deque([(digits, "")])
        words = []

        while queue:
            suffix, word = queue.popleft()
            if not suffix:
                words.append(word)
                continue
            extensions = [(suffix[width:], word + symbol) for width, symbol
                          in self.groups.iter_groups(suffix, 0)]
            # the extensions go in front, narrowest first, so that every
            # completion of a branch is emitted before its next sibling:
            queue.extendleft(reversed(extensions))

        return words


class DfsParser(NumberParser):
    """ Parser that backtracks over a single shared buffer of symbols. """

    name = "dfs"

    def _parse(self, digits):

        length = len(digits)
        if length == 0:
            return [""]

        buffer = []
        words = []

        # each frame is (position, groups not yet tried at that position);
        # below the root frame, every frame owns one symbol in the buffer:
        stack = [(0, self.groups.iter_groups(digits, 0))]

        while stack:
            start, groups = stack[-1]
            step = next(groups, None)
            if step is None:
                stack.pop()
                if stack:
                    buffer.pop()
                continue
            width, symbol = step
            buffer.append(symbol)
            if start + width == length:
                words.append("".join(buffer))
                buffer.pop()
            else:
                stack.append((start + width,
                              self.groups.iter_groups(digits, start + width)))

        return words


class MemoizedParser(NumberParser):
    """ Parser that counts the parses first and then fills them in place.

    The counts are stored as unsigned 64-bit integers. They can hold the
    number of parses of a run of up to 92 ones, which is many orders of
    magnitude more than could ever be listed; a `CountOverflow` is raised
    for longer runs rather than letting the count wrap around.
    """

    name = "memoized"

    def compile_counts(self, digits):
        """ Count the parses of every suffix of the digit string.

        Returns:
        --------
        counts : read-only array of shape (len(digits) + 1,)
            The entry `counts[i]` is the number of ways the suffix
            `digits[i:]` can be split into groups; `counts[-1] == 1`.
        continuations : dict of lists
            For each starting point `i`, the list of `(width, symbol)`
            pairs such that `digits[i:i + width]` reads as `symbol` and
            the rest of the string after it has at least one parse.
        """

        length = len(digits)
        ceiling = int(np.iinfo(np.uint64).max)

        counts = np.zeros(length + 1, dtype=np.uint64)
        counts[length] = 1
        continuations = {length: []}

        for start in reversed(range(length)):
            total = 0
            continuations[start] = []
            for width, symbol in self.groups.iter_groups(digits, start):
                if counts[start + width] > 0:
                    total += int(counts[start + width])
                    continuations[start].append((width, symbol))
            if total > ceiling:
                raise CountOverflow("The suffix starting at position %s has "
                                    "more than %s parses." % (start, ceiling))
            counts[start] = total

        counts.flags.writeable = False

        return counts, continuations

    def count_completions(self, digits):
        """ Return the table of suffix parse counts for a digit string. """

        check_digits(digits)
        counts, _ = self.compile_counts(digits)

        return counts

    def count_parses(self, digits: str) -> int:
        """ Return the number of parses without listing them. """

        return int(self.count_completions(digits)[0])

    def _parse(self, digits):

        counts, continuations = self.compile_counts(digits)
        length = len(digits)
        num_words = int(counts[0])

        # object cells, since fixed-width numpy strings drop "\x00":
        letters = np.empty((num_words, length), dtype=object)
        lengths = np.zeros(num_words, dtype=np.int64)

        # each frame is (position, depth, first row): the parses of the
        # suffix at `position` occupy the next `counts[position]` rows
        # of the matrix, starting at `first row`, and their letters so
        # far fill the first `depth` columns of those rows.
        stack = [(0, 0, 0)] if num_words > 0 else []

        while stack:
            start, depth, row = stack.pop()
            if start == length:
                lengths[row] = depth
                continue
            for width, symbol in continuations[start]:
                size = int(counts[start + width])
                letters[row:row + size, depth] = symbol
                stack.append((start + width, depth + 1, row))
                row += size

        words = [None] * num_words
        for row, (chars, size) in enumerate(zip(letters, lengths)):
            words[row] = "".join(chars[:size])

        return words


PARSERS: Dict[str, type] = {
    NaiveParser.name: NaiveParser,
    DfsParser.name: DfsParser,
    MemoizedParser.name: MemoizedParser,
}


def build_parser(name="memoized", mapping=None) -> NumberParser:
    """ Construct one of the parsers by name ('naive', 'dfs', 'memoized'). """

    try:
        parser_class = PARSERS[name]
    except KeyError:
        raise ValueError("Unknown parser %r; choose one of %s."
                         % (name, ", ".join(sorted(PARSERS)))) from None

    return parser_class(mapping)


if __name__ == "__main__":

    for digits in ["1234", "11111111", "226", "0", "10", "2101", ""]:
        words = build_parser("memoized").parse(digits)
        print("%r --> %s parse(s): %r" % (digits, len(words), words))
