"""Fork-join runtime that runs one function per worker thread."""

from __future__ import annotations

import threading
from typing import Any, Callable, List, Optional


_JOB_LOCK = threading.Lock()
_JOB_ACTIVE = False


class JobStateError(RuntimeError):
    pass


class WorkerFailure(RuntimeError):
    def __init__(self, rank: int, error: BaseException):
        super().__init__(f"worker {rank} failed: {error!r}")
        self.rank = rank
        self.error = error


def job_active() -> bool:
    return _JOB_ACTIVE


def run_workers(fn: Callable[..., Any], size: int, *args, **kwargs) -> List[Any]:
    """Run fn(rank, *args, **kwargs) on `size` threads and wait for all of them.

    Results come back in rank order. Every thread is joined before anything is
    returned or raised. If any worker raised, the lowest failing rank is
    re-raised as WorkerFailure and no results are returned.
    """
    global _JOB_ACTIVE
    size = max(1, size)

    with _JOB_LOCK:
        if _JOB_ACTIVE:
            raise JobStateError("A simulation is already running; wait for it to finish before starting a new one")
        _JOB_ACTIVE = True

    results: List[Any] = [None] * size
    errors: List[Optional[BaseException]] = [None] * size

    # each thread writes only its own slot
    def _target(rank: int) -> None:
        try:
            results[rank] = fn(rank, *args, **kwargs)
        except Exception as exc:
            errors[rank] = exc

    threads = [
        threading.Thread(target=_target, args=(rank,), name=f"lotto-worker-{rank}")
        for rank in range(size)
    ]
    try:
        for t in threads:
            t.start()
    finally:
        for t in threads:
            if t.ident is not None:
                t.join()
        with _JOB_LOCK:
            _JOB_ACTIVE = False

    for rank, error in enumerate(errors):
        if error is not None:
            raise WorkerFailure(rank, error) from error
    return results
