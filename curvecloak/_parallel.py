"""Splitting an index range across a thread pool."""

import concurrent.futures

from . import config


def resolve_workers(total: int, workers: int | None = None) -> int:
    """Explicit ``workers`` wins; otherwise go parallel only for large inputs."""
    if workers is not None:
        return max(1, workers)
    if total < config.parallel_min_pixels():
        return 1
    return config.worker_count()


def run_sliced(total: int, workers: int, fn) -> None:
    """Call ``fn(start, end)`` over disjoint slices covering ``[0, total)``."""
    if total <= 0:
        return
    if workers <= 1:
        fn(0, total)
        return
    chunk = -(-total // workers)
    ranges = [
        (start, min(start + chunk, total))
        for start in range(0, total, chunk)
    ]

    def _slice(bounds: "tuple[int, int]") -> None:
        start, end = bounds
        fn(start, end)

    max_workers = min(len(ranges), workers)
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        list(executor.map(_slice, ranges))
