"""
Code for deciding which digit substrings can be read as a single symbol.
"""

from typing import Iterator
from typing import Optional
from typing import Tuple

from mapping import max_width


class GroupValidator:
    """ Decides which slices of a digit string are legal groups. """

    def __init__(self, mapping) -> None:
        """ Precompute the group widths that occur among the keys. """

        self.mapping = mapping
        self.max_width = max_width(mapping)
        self.widths = tuple(sorted(set(len(str(key)) for key in mapping)))

    def __repr__(self):
        return "<GroupValidator with widths=%r>" % (self.widths,)

    def lookup(self, digits: str, start: int, width: int) -> Optional[str]:
        """ Return the symbol for `digits[start:start + width]`, or None.

        Multi-digit groups may not begin with a zero, since "05" would
        otherwise be indistinguishable from "5".

        Raises:
        -------
        ValueError:
            If the group is empty or does not fit inside the string.
        """

        if width < 1 or start < 0 or start + width > len(digits):
            raise ValueError("Group of width %s at position %s does not fit "
                             "in a string of length %s."
                             % (width, start, len(digits)))

        if width > 1 and digits[start] == "0":
            return None

        return self.mapping.get(int(digits[start:start + width]))

    def iter_groups(self, digits: str, start: int) -> Iterator[Tuple[int, str]]:
        """ Yield every `(width, symbol)` legal at `start`, narrowest first. """

        for width in self.widths:
            if start + width > len(digits):
                break  # the widths are sorted, so the rest won't fit either
            symbol = self.lookup(digits, start, width)
            if symbol is not None:
                yield width, symbol
