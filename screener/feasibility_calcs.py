"""
Feasibility calculations for the solar site screener.
Estimates monthly usage from roof area and business type, then sizes
savings, build cost and a single-year ROI.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .api_calls import fetch_solar_estimate
from .business_data import get_usage_intensity
from .config import (
    SQFT_PER_M2,
    OFFSET_RATE_PER_KWH,
    INSTALLED_COST_PER_KW,
    MONTHS_PER_YEAR
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimationResult:
    """Building size and usage estimate for an address."""
    roof_area_sqft: int
    monthly_usage_kwh: int


@dataclass(frozen=True)
class EstimationFailure:
    """Estimation could not be completed."""
    error: str


@dataclass(frozen=True)
class ScanResult:
    """Results of a feasibility scan."""
    roof_size: int          # ft²
    monthly_usage: int      # kWh
    system_size: float      # kW, as reported by the service
    annual_savings: int     # $
    build_cost: int         # $
    roi: Union[int, float]  # %, non-finite when build_cost is 0

    @property
    def roi_is_finite(self) -> bool:
        return math.isfinite(self.roi)


@dataclass(frozen=True)
class ScanFailure:
    """Feasibility scan could not be completed."""
    error: str


def round_half_up(value: float) -> Union[int, float]:
    """
    Round to the nearest integer, halves toward positive infinity.

    Non-finite values (inf, nan) are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def convert_m2_to_sqft(area_m2: float) -> int:
    """Convert square meters to whole square feet."""
    return round_half_up(area_m2 * SQFT_PER_M2)


def estimate_monthly_usage(roof_area_sqft: float, business_type: str) -> int:
    """
    Estimate monthly electricity usage for a building.

    Args:
        roof_area_sqft: Building footprint in ft²
        business_type: Key of ENERGY_USAGE_ESTIMATES

    Returns:
        Estimated monthly usage in kWh
    """
    annual_usage = get_usage_intensity(business_type) * roof_area_sqft
    return round_half_up(annual_usage / MONTHS_PER_YEAR)


def calculate_roi(annual_savings: float, build_cost: float) -> Union[int, float]:
    """
    Single-year simple ROI in percent.

    A zero build cost gives inf (or nan when savings are also zero).
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        ratio = float(np.divide(np.float64(annual_savings), np.float64(build_cost)))

    if not math.isfinite(ratio):
        log.warning(
            "ROI undefined: savings=%s build_cost=%s", annual_savings, build_cost
        )
    return round_half_up(ratio * 100)


def calculate_feasibility(
    roof_area_m2: float,
    estimated_kw: float,
    monthly_usage: int
) -> ScanResult:
    """
    Calculate savings, build cost and ROI for a site.

    Args:
        roof_area_m2: Roof area from the estimation service (m²)
        estimated_kw: System size from the estimation service (kW)
        monthly_usage: Last monthly usage estimate (kWh), 0 if none

    Returns:
        ScanResult
    """
    annual_savings = round_half_up(monthly_usage * MONTHS_PER_YEAR * OFFSET_RATE_PER_KWH)
    build_cost = round_half_up(estimated_kw * INSTALLED_COST_PER_KW)

    return ScanResult(
        roof_size=convert_m2_to_sqft(roof_area_m2),
        monthly_usage=monthly_usage,
        system_size=estimated_kw,
        annual_savings=annual_savings,
        build_cost=build_cost,
        roi=calculate_roi(annual_savings, build_cost)
    )


def estimate_building_size(
    address: str,
    business_type: str,
    api_url: Optional[str] = None,
    timeout: Optional[float] = None
) -> Union[EstimationResult, EstimationFailure]:
    """
    Estimate building size and monthly usage for an address.

    Args:
        address: Street address
        business_type: Key of ENERGY_USAGE_ESTIMATES
        api_url: Estimation endpoint (defaults to configured URL)
        timeout: Request timeout in seconds

    Returns:
        EstimationResult, or EstimationFailure if the service call failed
    """
    # Fail on an unknown business type before spending a request
    get_usage_intensity(business_type)

    solar = fetch_solar_estimate(address, api_url=api_url, timeout=timeout)
    if not solar.success:
        return EstimationFailure(error=solar.error or "Unknown error")

    roof_area_sqft = convert_m2_to_sqft(solar.roof_area_m2)
    monthly_usage = estimate_monthly_usage(roof_area_sqft, business_type)
    log.info(
        "Estimated %s ft², %s kWh/month for %r (%s)",
        roof_area_sqft, monthly_usage, address, business_type
    )

    return EstimationResult(
        roof_area_sqft=roof_area_sqft,
        monthly_usage_kwh=monthly_usage
    )


def compute_feasibility(
    address: str,
    last_monthly_usage: int,
    api_url: Optional[str] = None,
    timeout: Optional[float] = None
) -> Union[ScanResult, ScanFailure]:
    """
    Run a feasibility scan for an address.

    The estimation service is called again; usage is taken from the last
    estimate rather than recomputed.

    Args:
        address: Street address
        last_monthly_usage: Most recent monthly usage estimate (kWh), 0 if none
        api_url: Estimation endpoint (defaults to configured URL)
        timeout: Request timeout in seconds

    Returns:
        ScanResult, or ScanFailure if the service call failed
    """
    solar = fetch_solar_estimate(address, api_url=api_url, timeout=timeout)
    if not solar.success:
        return ScanFailure(error=solar.error or "Unknown error")

    result = calculate_feasibility(
        roof_area_m2=solar.roof_area_m2,
        estimated_kw=solar.estimated_kw,
        monthly_usage=last_monthly_usage or 0
    )
    log.info(
        "Feasibility for %r: %s kW, $%s/yr savings, $%s build, ROI %s%%",
        address, result.system_size, result.annual_savings,
        result.build_cost, result.roi
    )
    return result
