"""
Per-session screener state and the helpers that update it.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .business_data import DEFAULT_UTILITY, DEFAULT_TARIFF
from .feasibility_calcs import (
    EstimationFailure,
    EstimationResult,
    ScanFailure,
    ScanResult,
    compute_feasibility
)


@dataclass
class ScreenerState:
    """Form inputs, loading flags and the latest outputs for one session."""
    address: str = ''
    business_type: Optional[str] = None
    utility: str = DEFAULT_UTILITY
    tariff: str = DEFAULT_TARIFF
    is_estimating: bool = False
    is_loading: bool = False
    estimation: Optional[EstimationResult] = None
    results: Optional[ScanResult] = None
    last_error: Optional[str] = None

    @property
    def monthly_usage(self) -> int:
        """Last monthly usage estimate, 0 if there is none."""
        if self.estimation is None:
            return 0
        return self.estimation.monthly_usage_kwh

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and not self.is_estimating and bool(self.monthly_usage)


def settle_estimation(state: ScreenerState, outcome) -> None:
    """
    Store an estimation outcome and clear is_estimating.

    An outcome of None means the estimate raised; the estimate is cleared.
    """
    if outcome is None:
        state.estimation = None
        state.last_error = "Estimation failed"
    elif isinstance(outcome, EstimationFailure):
        state.estimation = None
        state.last_error = outcome.error
    else:
        state.estimation = outcome
        state.last_error = None
    state.is_estimating = False


def run_feasibility_scan(
    state: ScreenerState,
    address: str,
    compute: Callable = compute_feasibility
) -> Optional[ScanResult]:
    """
    Run a feasibility scan, with is_loading set for the call.

    On success the new result replaces state.results. On failure the
    previous results are kept and the error is recorded.

    Returns:
        The new ScanResult, or None if the scan failed
    """
    state.is_loading = True
    try:
        outcome = compute(address, state.monthly_usage)
        if isinstance(outcome, ScanFailure):
            state.last_error = outcome.error
            return None

        state.results = outcome
        state.last_error = None
        return outcome
    finally:
        state.is_loading = False
