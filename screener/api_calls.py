"""
Client for the roof/solar estimation service.
Resolves a street address to roof area and an estimated system size.
"""

import logging
import requests
from typing import Optional, Dict, Any
from dataclasses import dataclass

from .config import get_solar_api_url, get_request_timeout

log = logging.getLogger(__name__)


@dataclass
class SolarEstimateResult:
    """Result from the solar estimation service."""
    roof_area_m2: float
    estimated_kw: float
    success: bool
    error: Optional[str] = None
    raw_data: Optional[Dict[str, Any]] = None


def _failed(error: str) -> SolarEstimateResult:
    return SolarEstimateResult(
        roof_area_m2=0, estimated_kw=0, success=False, error=error
    )


def fetch_solar_estimate(
    address: str,
    api_url: Optional[str] = None,
    timeout: Optional[float] = None
) -> SolarEstimateResult:
    """
    Get roof area and estimated system size for an address.

    Args:
        address: Street address of the building
        api_url: Estimation endpoint (defaults to configured URL)
        timeout: Request timeout in seconds (defaults to configured value)

    Returns:
        SolarEstimateResult; failures are reported in the result, not raised
    """
    if api_url is None:
        api_url = get_solar_api_url()
    if timeout is None:
        timeout = get_request_timeout()

    try:
        response = requests.post(
            api_url,
            json={"address": address},
            headers={"Content-Type": "application/json"},
            timeout=timeout
        )
        response.raise_for_status()
        data = response.json()

        solar = data['solar']
        return SolarEstimateResult(
            roof_area_m2=float(solar['roofAreaMeters2']),
            estimated_kw=float(solar['estimatedKw']),
            success=True,
            raw_data=data
        )

    except requests.exceptions.Timeout:
        log.warning("Solar estimate timed out after %ss for %r", timeout, address)
        return _failed("Request timed out. Please try again.")
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        log.error("Solar estimate HTTP %s for %r", status, address)
        if status == 404:
            return _failed("No solar data available for this location")
        return _failed(f"API error: {status}")
    except requests.exceptions.JSONDecodeError as e:
        log.error("Solar estimate response is not JSON for %r: %s", address, e)
        return _failed("Unexpected response: body is not JSON")
    except requests.exceptions.RequestException as e:
        log.error("Solar estimate network error for %r: %s", address, e)
        return _failed(f"Network error: {str(e)}")
    except (KeyError, TypeError, ValueError) as e:
        log.error("Solar estimate response unreadable for %r: %r", address, e)
        return _failed(f"Unexpected response: {e!r}")
