"""
Command-line interface for listing the parses of digit strings.

    python decode_digits.py 1234 11111
    python decode_digits.py --parser dfs --count 111111111111
"""

import argparse

from parsers import PARSERS
from parsers import ParseError
from parsers import build_parser


def build_argument_parser():

    parser = argparse.ArgumentParser(
        description="Decode digit strings with the code 1=A, ..., 26=Z.")
    parser.add_argument("digits", nargs="+",
                        help="strings of the digits 0-9")
    parser.add_argument("--parser", default="memoized", choices=sorted(PARSERS),
                        help="decoding strategy (default: memoized)")
    parser.add_argument("--count", action="store_true",
                        help="only print the number of parses")

    return parser


def main(argv=None):

    argument_parser = build_argument_parser()
    args = argument_parser.parse_args(argv)
    number_parser = build_parser(args.parser)

    for digits in args.digits:
        try:
            words = number_parser.parse(digits)
        except ParseError as error:
            argument_parser.error("%r: %s" % (digits, error))
        if args.count:
            print("%s: %s" % (digits, len(words)))
        else:
            print("%s: %s" % (digits, " ".join(words)))


if __name__ == "__main__":
    main()
