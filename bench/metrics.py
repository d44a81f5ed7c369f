"""Timing helpers for the benchmark harness."""

import time


class Timer:
    """Wall-clock timer with nanosecond resolution."""

    def __init__(self):
        self.start_ns = None
        self.end_ns = None

    def start(self):
        self.start_ns = time.perf_counter_ns()
        self.end_ns = None

    def stop(self) -> int:
        self.end_ns = time.perf_counter_ns()
        return self.elapsed

    @property
    def elapsed(self) -> int:
        if self.start_ns is None:
            return 0
        end = self.end_ns if self.end_ns is not None else time.perf_counter_ns()
        return end - self.start_ns

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc):
        self.stop()
        return False


def timed(fn, *args, **kwargs) -> tuple[object, int]:
    """Call fn and return (result, elapsed_ns)."""
    timer = Timer()
    timer.start()
    result = fn(*args, **kwargs)
    return result, timer.stop()


def trimmed_mean(samples: list[float]) -> float:
    """Mean after dropping the fastest and slowest fifth (at least one each)."""
    ordered = sorted(samples)
    cut = max(1, len(ordered) // 5)
    kept = ordered[cut:len(ordered) - cut]
    if not kept:
        return 0.0
    return sum(kept) / len(kept)


def format_duration(ns: float) -> str:
    if ns < 1_000:
        return f"{ns:.2f} ns"
    if ns < 1_000_000:
        return f"{ns / 1_000:.2f} us"
    if ns < 1_000_000_000:
        return f"{ns / 1_000_000:.2f} ms"
    return f"{ns / 1_000_000_000:.2f} s"
