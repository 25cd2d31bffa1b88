from benchmark_parsers import run_benchmark
from benchmark_parsers import time_parser
from parsers import MemoizedParser


def test_that_timing_returns_a_duration_and_the_number_of_parses():

    seconds, num_words = time_parser(MemoizedParser(), "11111111", repetitions=2)

    assert seconds >= 0.0
    assert num_words == 34


def test_that_benchmark_times_every_requested_length():

    lengths = {"naive": [2, 4], "dfs": [2, 4, 6], "memoized": [3]}
    timings = run_benchmark(lengths, repetitions=1)

    assert sorted(timings) == ["dfs", "memoized", "naive"]
    for name, sizes in lengths.items():
        assert len(timings[name]) == len(sizes)
        assert all(seconds >= 0.0 for seconds in timings[name])


if __name__ == "__main__":

    test_that_timing_returns_a_duration_and_the_number_of_parses()
    test_that_benchmark_times_every_requested_length()
