import os
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

import psutil


@dataclass
class RunMetrics:
    elapsed_ms: float = 0.0
    cpu_seconds: float = 0.0
    memory_mb: float = 0.0


def _cpu_seconds(process: psutil.Process) -> float:
    times = process.cpu_times()
    return times.user + times.system


def _rss_mb(process: psutil.Process) -> float:
    return process.memory_info().rss / (1024 * 1024)


@contextmanager
def measure() -> Iterator[RunMetrics]:
    """Measure wall time, CPU time and RSS growth of the enclosed block.

    The yielded RunMetrics is filled in when the block exits.
    """
    process = psutil.Process(os.getpid())
    metrics = RunMetrics()
    cpu_before = _cpu_seconds(process)
    mem_before = _rss_mb(process)
    start = time.perf_counter()
    try:
        yield metrics
    finally:
        metrics.elapsed_ms = (time.perf_counter() - start) * 1000.0
        metrics.cpu_seconds = _cpu_seconds(process) - cpu_before
        metrics.memory_mb = _rss_mb(process) - mem_before
