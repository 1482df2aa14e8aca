"""
Background estimation keyed by the form inputs.

Each (address, business type) pair gets at most one estimation task. A new
pair supersedes the current task: it is cancelled if it has not started,
and its outcome is discarded if it finishes later.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional, Tuple

from .feasibility_calcs import estimate_building_size
from .session_state import ScreenerState, settle_estimation

log = logging.getLogger(__name__)

Fingerprint = Tuple[str, str]


def input_fingerprint(address: str, business_type: str) -> Fingerprint:
    return (address, business_type)


class EstimationScheduler:
    """Runs estimations for one session and writes the current one to its state."""

    def __init__(
        self,
        state: ScreenerState,
        estimate: Callable = estimate_building_size,
        executor: Optional[ThreadPoolExecutor] = None
    ):
        self.state = state
        self._estimate = estimate
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="estimate"
        )
        self._lock = threading.Lock()
        self._current_key: Optional[Fingerprint] = None
        self._current: Optional[Future] = None

    @property
    def current_key(self) -> Optional[Fingerprint]:
        return self._current_key

    def submit(self, address: str, business_type: Optional[str]) -> Optional[Future]:
        """
        Start an estimation for these inputs unless it is already current.

        Returns:
            The Future for the inputs, or None if either input is empty
        """
        if not address or not business_type:
            return None

        key = input_fingerprint(address, business_type)
        with self._lock:
            if key == self._current_key and self._current is not None:
                return self._current

            # Raises if the executor is shut down; state is untouched then
            future = self._executor.submit(self._run, key, address, business_type)

            if self._current is not None and not self._current.done():
                cancelled = self._current.cancel()
                log.debug(
                    "Superseded estimation for %r (%s)",
                    self._current_key, "cancelled" if cancelled else "discarding"
                )

            self._current_key = key
            self._current = future
            self.state.is_estimating = True
            return future

    def _run(self, key: Fingerprint, address: str, business_type: str):
        outcome = None
        try:
            outcome = self._estimate(address, business_type)
            return outcome
        except Exception:
            log.exception("Estimation failed for %r", address)
            raise
        finally:
            with self._lock:
                if key == self._current_key:
                    settle_estimation(self.state, outcome)

    def shutdown(self, wait: bool = False) -> None:
        self._executor.shutdown(wait=wait, cancel_futures=True)
