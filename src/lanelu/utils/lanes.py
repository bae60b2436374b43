# Copyright 2023-2025 ETH Zurich. All rights reserved.

from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, Callable, Optional


class LaneScheduler:
    """Run one phase of work on every lane and wait for all of them.

    Each call to :meth:`run_phase` is a barrier: it returns only once every
    lane has finished. With ``parallel=True`` the lanes are dispatched to a
    thread pool, otherwise they run one after the other in the calling
    thread. Lanes must work on disjoint data.

    Use as a context manager so that the pool is shut down on exit.
    """

    def __init__(
        self,
        lane_count: int,
        parallel: bool = False,
        max_workers: Optional[int] = None,
    ):
        if lane_count < 1:
            raise ValueError(f"lane_count must be >= 1, got {lane_count}.")

        self.lane_count = lane_count
        self.parallel = parallel and lane_count > 1
        self.max_workers = max_workers if max_workers is not None else lane_count
        self._executor = None

    def __enter__(self):
        if self.parallel:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="lanelu-lane"
            )
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def run_phase(self, fn: Callable[..., Any], *args) -> list:
        """Call ``fn(lane, *args)`` for every lane.

        Returns the per-lane results in lane order. If a lane raises, the
        exception is re-raised after all lanes of the phase returned.
        """
        if self._executor is None:
            return [fn(lane, *args) for lane in range(self.lane_count)]

        futures = [
            self._executor.submit(fn, lane, *args) for lane in range(self.lane_count)
        ]
        wait(futures)
        return [future.result() for future in futures]
