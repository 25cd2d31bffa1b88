"""
PARSER BENCHMARK
----------------

This script times the three number parsers on runs of the digit 1, which
are the worst case for the alphabet code: a run of n ones has F(n + 1)
parses, so the running time of every parser grows exponentially with n.
The timings are printed and then plotted on a logarithmic scale.
"""

import time

import numpy as np
from matplotlib import pyplot as plt
from tqdm import tqdm

from mapping import default_mapping
from parsers import PARSERS


LENGTHS = {
    "naive": [10, 15, 20, 25],
    "dfs": [10, 15, 20, 25, 30],
    "memoized": [10, 15, 20, 25, 30],
}


def time_parser(parser, digits, repetitions=3):
    """ Return the fastest of several wall-clock timings of a parse.

    Arguments:
    ----------
    parser : NumberParser
        The parser to time.
    digits : str
        The input string.
    repetitions : int >= 1
        The number of times to repeat the parse.

    Returns:
    --------
    seconds : float
        The smallest observed duration of a call to `parser.parse`.
    num_words : int
        The number of parses returned.
    """

    durations = []
    for _ in range(repetitions):
        start = time.perf_counter()
        words = parser.parse(digits)
        durations.append(time.perf_counter() - start)

    return min(durations), len(words)


def run_benchmark(lengths=None, mapping=None, repetitions=3):
    """ Time every parser on every length, returning {name: timings}. """

    if lengths is None:
        lengths = LENGTHS
    if mapping is None:
        mapping = default_mapping()

    timings = {}
    for name, sizes in lengths.items():
        parser = PARSERS[name](mapping)
        timings[name] = []
        for length in tqdm(sizes, leave=False, unit="inputs", desc=name):
            seconds, _ = time_parser(parser, "1" * length, repetitions)
            timings[name].append(seconds)

    return timings


def plot_timings(timings, lengths=None):
    """ Draw the timings against the input lengths on a log scale. """

    if lengths is None:
        lengths = LENGTHS

    figure = plt.figure(figsize=(8, 5))
    for name, seconds in timings.items():
        plt.plot(lengths[name], seconds, "o-", label=name)
    plt.yscale("log")
    plt.xlabel("Number of ones")
    plt.ylabel("Seconds per parse")
    plt.legend()
    plt.tight_layout()
    plt.show()
    plt.close(figure)


if __name__ == "__main__":

    timings = run_benchmark()

    for name, seconds in timings.items():
        for length, duration in zip(LENGTHS[name], seconds):
            print("%-8s  n=%-3s  %10.6f s" % (name, length, duration))
        growth = np.exp(np.mean(np.diff(np.log(seconds))))
        print("%-8s  average growth per step: %.2f\n" % (name, growth))

    plot_timings(timings)
