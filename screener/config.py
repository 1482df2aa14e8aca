"""
Settings and fixed coefficients for the Solar Site Screener.
Settings are read from Streamlit secrets, then environment variables.
"""

import logging
import os
from typing import Any, Optional

import streamlit as st
from streamlit.errors import StreamlitAPIException

log = logging.getLogger(__name__)

# ============================================================================
# SOLAR ESTIMATION SERVICE
# ============================================================================

DEFAULT_SOLAR_API_URL = "http://165.232.159.15:3000/solar"
REQUEST_TIMEOUT_SECONDS = 15.0

# ============================================================================
# FEASIBILITY COEFFICIENTS
# ============================================================================

SQFT_PER_M2 = 10.76           # 1 m² = 10.76 ft²
OFFSET_RATE_PER_KWH = 0.35    # $/kWh offset by solar
INSTALLED_COST_PER_KW = 2150  # $2.15/watt installed
MONTHS_PER_YEAR = 12

# ============================================================================
# LOGGING
# ============================================================================

DEFAULT_LOG_LEVEL = "INFO"


def _read_secret(name: str) -> Optional[Any]:
    """Read a value from Streamlit secrets, or None if unavailable."""
    try:
        return st.secrets[name]
    except (KeyError, FileNotFoundError, StreamlitAPIException):
        return None


def get_setting(name: str, default: Any = None) -> Any:
    """Resolve a setting from secrets, then the environment, then the default."""
    value = _read_secret(name)
    if value is not None:
        return value

    value = os.environ.get(name)
    if value:
        return value

    return default


def get_solar_api_url() -> str:
    """URL of the roof/solar estimation endpoint."""
    return get_setting("SOLAR_API_URL", DEFAULT_SOLAR_API_URL)


def get_request_timeout() -> float:
    """Timeout in seconds for calls to the estimation endpoint."""
    raw = get_setting("SOLAR_API_TIMEOUT", REQUEST_TIMEOUT_SECONDS)
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        log.warning("Invalid SOLAR_API_TIMEOUT %r, using %s", raw, REQUEST_TIMEOUT_SECONDS)
        return REQUEST_TIMEOUT_SECONDS

    if timeout <= 0:
        log.warning("Non-positive SOLAR_API_TIMEOUT %r, using %s", raw, REQUEST_TIMEOUT_SECONDS)
        return REQUEST_TIMEOUT_SECONDS
    return timeout


def get_log_level() -> str:
    return str(get_setting("SCREENER_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
