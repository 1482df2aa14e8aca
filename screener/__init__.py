"""Helper modules for the Solar Site Screener."""

from .api_calls import (
    fetch_solar_estimate,
    SolarEstimateResult
)

from .business_data import (
    ENERGY_USAGE_ESTIMATES,
    BUSINESS_TYPES,
    UTILITY_PROVIDERS,
    TARIFF_PLANS,
    UnknownBusinessTypeError,
    get_usage_intensity,
    usage_intensity_table
)

from .feasibility_calcs import (
    estimate_building_size,
    compute_feasibility,
    calculate_feasibility,
    estimate_monthly_usage,
    convert_m2_to_sqft,
    round_half_up,
    EstimationResult,
    EstimationFailure,
    ScanResult,
    ScanFailure
)

from .session_state import (
    ScreenerState,
    settle_estimation,
    run_feasibility_scan
)

from .estimation_task import (
    EstimationScheduler,
    input_fingerprint
)
