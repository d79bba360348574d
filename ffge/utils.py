"""Small helpers: random ranges, clamping, timing and logging."""

from __future__ import annotations

import random
import sys
import time


def rand_range(low: int, high: int) -> int:
    """Random integer in [low, high]; returns low when the range is empty or a point."""
    if low >= high:
        return low
    return random.randint(low, high)


def clamp(value: int, low: int, high: int) -> int:
    """Limit value to the interval [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def get_time_ms() -> int:
    """Processor time used by the program, in milliseconds."""
    return int(time.process_time() * 1000)


def delay(ms: int) -> None:
    """Pause for the given number of milliseconds."""
    if ms > 0:
        time.sleep(ms / 1000)


def log(msg: str | None) -> None:
    """Write a tagged line to standard output."""
    if msg is None:
        return
    print(f"[ffge] {msg}", file=sys.stdout, flush=True)