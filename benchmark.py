import argparse
import logging
from pathlib import Path
from random import randrange
from tempfile import TemporaryDirectory
from timeit import timeit

from typedstore import Properties, StoreSettings, TypedStore
from typedstore.logging_setup import setup_logging

logger = logging.getLogger("benchmark")

benchmark_fns = []
implementations = {impl.__name__: impl for impl in [TypedStore, Properties]}


def benchmark(fn):
    benchmark_fns.append(fn)
    return fn


@benchmark
def sequential_sets(store: TypedStore, iterations: int):
    """Repeatedly sets a sequence of key-value pairs.

    Purely in-memory; nothing touches the file.
    """
    numbers = iter(range(iterations))

    def workload():
        i = next(numbers)
        store.set_value(f"key_{i}", f"value_{i}")

    return timeit(workload, number=iterations)


@benchmark
def set_and_save(store: TypedStore, iterations: int):
    """Sets a key and saves the whole store after every write.

    Each save rewrites the full document, so this degrades as the store grows.
    """
    numbers = iter(range(iterations))

    def workload():
        i = next(numbers)
        store.set_value(f"key_{i}", {"index": i, "tags": [f"tag_{i}"]})
        store.save()

    return timeit(workload, number=iterations)


@benchmark
def repeated_loads(store: TypedStore, iterations: int):
    """Reloads a pre-filled store from disk over and over."""
    for i in range(iterations):
        store.set_value(f"key_{i}", i)
    store.save()

    return timeit(store.load, number=iterations)


@benchmark
def random_typed_reads(store: TypedStore, iterations: int):
    """Reads random keys through the lenient numeric accessor.

    Half the values are stored as numeric strings to exercise the text parse.
    """
    for i in range(iterations):
        store.set_value(f"key_{i}", str(i) if i % 2 else i)

    def workload():
        i = randrange(iterations)
        store.opt_int(f"key_{i}", -1)

    return timeit(workload, number=iterations)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Run benchmarks on typedstore implementations."
    )
    parser.add_argument(
        "--iterations",
        dest="iterations",
        type=int,
        default=1000,
        help="Number of iterations to run for the benchmarks",
    )
    parser.add_argument(
        "--implementation",
        dest="implementation",
        type=str,
        choices=implementations.keys(),
        default=TypedStore.__name__,
        help="The store class to run benchmarks against",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str,
        default=None,
        help="Logging level (defaults to TYPEDSTORE_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args()
    setup_logging(args.log_level)
    settings = StoreSettings.from_env()
    line = "=============================="
    print(line)
    for benchmark_fn in benchmark_fns:
        print(f"Running: {benchmark_fn.__name__}")
        print(benchmark_fn.__doc__)
        with TemporaryDirectory() as tmpdir:
            store = implementations[args.implementation](
                Path(tmpdir) / "store.json", settings=settings
            )
            time_taken = benchmark_fn(store, args.iterations)
            logger.info("%s finished with %d keys in memory", benchmark_fn.__name__, store.size())
        print(f"Completed in {time_taken:.4f} seconds")
        print(line)
