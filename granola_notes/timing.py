"""
Debug status logging for the CLI.

With --debug-timing each loading stage prints a start line and a finish line
carrying its duration and whatever the stage reported about its result
(bytes read, meetings built). Without the flag nothing is printed.
"""

from __future__ import annotations

import datetime as dt
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

DEBUG_TIMING: bool = False
START_TS: float = time.perf_counter()


@dataclass
class StepResult:
    """Filled in by the code inside a step(); shown on the finish line."""
    detail: str = ""


def configure(enabled: bool) -> None:
    """Switch debug output on or off and restart the elapsed-time clock."""
    global DEBUG_TIMING, START_TS
    DEBUG_TIMING = bool(enabled)
    START_TS = time.perf_counter()


def _prefix() -> str:
    elapsed = f"{time.perf_counter() - START_TS:.1f}s"
    return f"[{dt.datetime.now():%H:%M:%S} +{elapsed:>6}]"


def status(msg: str) -> None:
    if DEBUG_TIMING:
        print(f"{_prefix()} {msg}", flush=True)


@contextmanager
def step(msg: str) -> Iterator[StepResult]:
    """
    Time a loading stage:

        with step("Parsing cache") as result:
            state = parse_cache(raw)
            result.detail = f"{len(state.documents)} documents"
    """
    result = StepResult()
    if not DEBUG_TIMING:
        yield result
        return
    t0 = time.perf_counter()
    status(f"{msg} …")
    try:
        yield result
    finally:
        took = f"{(time.perf_counter() - t0) * 1000:.0f} ms"
        suffix = f"{took}, {result.detail}" if result.detail else took
        status(f"{msg} ✓ ({suffix})")
