"""
Hashing Throughput Benchmark
=============================

Times hashing the same synthetic passwords one after another and then
through :meth:`Argon2Hasher.batch_hash`, to show what the thread pool
buys on the current machine.
"""

from __future__ import annotations

import time
from typing import Sequence

from warden.core.models import BenchmarkResult
from warden.hashing.argon import Argon2Hasher

DEFAULT_SIZES: tuple[int, ...] = (10, 100)


def generate_passwords(count: int) -> list[str]:
    return [f"Password{i}!SecureTest" for i in range(count)]


def run_benchmark(
    hasher: Argon2Hasher, sizes: Sequence[int] = DEFAULT_SIZES
) -> list[BenchmarkResult]:
    """Benchmark sequential vs. batch hashing for each size in *sizes*."""
    results: list[BenchmarkResult] = []
    for size in sizes:
        passwords = generate_passwords(size)

        with hasher.logger.timed(f"sequential hashing x{size}") as seq_timer:
            for password in passwords:
                hasher.hash(password)

        with hasher.logger.timed(f"batch hashing x{size}") as batch_timer:
            hasher.batch_hash(passwords)

        results.append(BenchmarkResult(
            count=size,
            workers=hasher.config.batch_workers,
            sequential_seconds=seq_timer.elapsed,
            batch_seconds=batch_timer.elapsed,
        ))
    return results
