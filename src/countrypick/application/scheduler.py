"""
RecomputeScheduler - debounced, last-query-wins suggestion recomputation.

Every query change submits a computation tagged with a sequence number. A new
submission cancels whatever is still pending, and a result is only reported
when its sequence number is still the latest one submitted. Superseded
results are therefore never applied, whatever order the worker threads
finish in.
"""

import asyncio
from typing import Callable

from countrypick.domain.types import SuggestionList
from countrypick.logger import get_logger
from countrypick.utils import shorten

logger = get_logger("scheduler")

ComputeFn = Callable[[str], SuggestionList]
ResultCallback = Callable[[int, str, SuggestionList], None]


class RecomputeScheduler:
    """
    Runs the suggestion filter for the most recent query only.

    The scheduler must be used from inside a running event loop. Results are
    delivered on the loop thread, even when the filter itself ran in a worker
    thread.
    """

    def __init__(
        self,
        compute: ComputeFn,
        on_result: ResultCallback,
        *,
        debounce: float = 0.0,
        off_thread: bool = True,
    ):
        """
        Initialize the RecomputeScheduler.

        Args:
            compute: Pure function mapping a query to its SuggestionList
            on_result: Called with (sequence, query, suggestions) for fresh results
            debounce: Seconds to wait before computing; a newer query restarts the wait
            off_thread: Run ``compute`` in a worker thread via ``asyncio.to_thread``
        """
        if debounce < 0:
            raise ValueError(f"debounce must be >= 0, got {debounce}")
        self._compute = compute
        self._on_result = on_result
        self._debounce = debounce
        self._off_thread = off_thread
        self._task: asyncio.Task | None = None
        self._latest_sequence = 0

    @property
    def latest_sequence(self) -> int:
        """Sequence number of the most recent submission."""
        return self._latest_sequence

    @property
    def is_pending(self) -> bool:
        """Whether a computation is scheduled or running."""
        return self._task is not None and not self._task.done()

    def submit(self, sequence: int, query: str) -> None:
        """
        Schedule a recompute for ``query``, superseding any pending one.

        Args:
            sequence: Monotonically increasing number identifying this query
            query: Raw query text
        """
        if sequence <= self._latest_sequence:
            logger.debug(f"Ignoring out-of-order submission #{sequence} (latest={self._latest_sequence})")
            return

        self._latest_sequence = sequence
        if self.is_pending:
            self._task.cancel()  # type: ignore[union-attr]
            logger.debug(f"Cancelled pending recompute in favour of #{sequence}")

        self._task = asyncio.create_task(self._run(sequence, query))

    async def _run(self, sequence: int, query: str) -> None:
        try:
            if self._debounce:
                await asyncio.sleep(self._debounce)
            logger.debug(f"Computing suggestions #{sequence} for '{shorten(query)}'")
            if self._off_thread:
                result = await asyncio.to_thread(self._compute, query)
            else:
                result = self._compute(query)
        except asyncio.CancelledError:
            logger.debug(f"Recompute #{sequence} superseded")
            raise
        except Exception as e:
            logger.exception(f"Recompute #{sequence} failed: {e}")
            return

        if sequence != self._latest_sequence:
            logger.debug(f"Discarding result #{sequence}; #{self._latest_sequence} is newer")
            return

        self._on_result(sequence, query, result)

    async def wait_idle(self) -> None:
        """Wait until no computation is pending, including ones submitted meanwhile."""
        while self.is_pending:
            await asyncio.wait({self._task})  # type: ignore[arg-type]

    async def stop(self) -> None:
        """Cancel the pending computation, if any, and wait for it to unwind."""
        if self.is_pending:
            self._task.cancel()  # type: ignore[union-attr]
            try:
                await self._task  # type: ignore[misc]
            except asyncio.CancelledError:
                pass
            logger.info("Recompute scheduler stopped")
        self._task = None
