"""
DIGIT MAPPINGS
--------------

This module contains the tables that turn numbers into letters. A mapping
is a plain dict from positive integers to single characters, such as the
canonical alphabet code {1: 'A', 2: 'B', ..., 26: 'Z'}, under which the
digit string "1234" can be read as ABCD, AWD, or LCD.
"""

from typing import Dict


def default_mapping() -> Dict[int, str]:
    """ Return the canonical code {1: 'A', 2: 'B', ..., 26: 'Z'}. """

    alphabet = [chr(i) for i in range(65, 91)]

    return {number: letter for number, letter in enumerate(alphabet, 1)}


def validate_mapping(mapping):
    """ Complain if a mapping is not a table of positive ints to letters.

    Parameters:
    -----------
    mapping : dict
        A table in the format {number: symbol}.

    Raises:
    -------
    ValueError:
        If a key is not a positive integer, or if a value is not a
        string of length one.
    """

    for key, symbol in mapping.items():
        # bool is a subclass of int, but True is not a number we decode:
        if type(key) is bool or not isinstance(key, int) or key <= 0:
            raise ValueError("Mapping keys must be positive ints, got %r."
                             % (key,))
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError("Symbol for %r must be a single character, "
                             "got %r." % (key, symbol))


def max_width(mapping) -> int:
    """ Return the number of digits in the largest key (0 if empty). """

    if not mapping:
        return 0

    return len(str(max(mapping)))


def encode_word(word, mapping) -> str:
    """ Convert a word back into the digit string it was decoded from.

    Parameters:
    -----------
    word : str
        A sequence of symbols that occur as values in the mapping.
    mapping : dict
        A table in the format {number: symbol}.

    Returns:
    --------
    digits : str
        The concatenated decimal representations of the numbers that
        map to the letters of the word.

    Raises:
    -------
    ValueError:
        If the word contains a symbol that the mapping never produces.

    Notes:
    ------
    If several numbers map to the same symbol, the smallest one is used,
    so the encoding is only an inverse of decoding for injective maps.
    """

    inverse = {}
    for number in sorted(mapping, reverse=True):
        inverse[mapping[number]] = str(number)

    try:
        return "".join(inverse[symbol] for symbol in word)
    except KeyError as error:
        raise ValueError("Symbol %r has no number in the mapping."
                         % error.args[0]) from None


if __name__ == "__main__":

    mapping = default_mapping()
    print("Canonical mapping: %r" % mapping)
    print("Maximal group width: %s" % max_width(mapping))
    print("HELLO --> %r" % encode_word("HELLO", mapping))
