"""
Business-type energy-use intensities and the utility/tariff option lists.
"""

from types import MappingProxyType

import pandas as pd


class UnknownBusinessTypeError(KeyError):
    """Raised when a business type has no energy-use intensity."""


# Annual energy-use intensity (kWh per ft² per year) by business type.
# The business type select offers exactly these keys, in this order.
ENERGY_USAGE_ESTIMATES = MappingProxyType({
    'Office': 15,
    'Warehouse (non-refrigerated)': 6,
    'Cold Storage Facility': 40,
    'Grocery Store / Supermarket': 50,
    'Restaurant': 35,
    'Retail Store': 18,
    'Agriculture Processing Facility': 25,
    'Manufacturing / Industrial': 22,
    'School / Educational Facility': 10,
    'Gym / Fitness Center': 30,
})

BUSINESS_TYPES = tuple(ENERGY_USAGE_ESTIMATES.keys())

# Utility providers and tariff plans are collected on the form but not
# used by any calculation yet.
UTILITY_PROVIDERS = {
    'PG&E': 'PG&E',
    'SCE': 'SCE',
    'SDGE': 'SDG&E',
}

TARIFF_PLANS = ('A-1', 'B-1', 'B-10')

DEFAULT_UTILITY = 'PG&E'
DEFAULT_TARIFF = 'A-1'


def get_usage_intensity(business_type: str) -> float:
    """
    Get the annual energy-use intensity for a business type.

    Args:
        business_type: One of BUSINESS_TYPES

    Returns:
        Intensity in kWh/ft²/year

    Raises:
        UnknownBusinessTypeError: business_type is not in the table
    """
    try:
        return ENERGY_USAGE_ESTIMATES[business_type]
    except KeyError:
        raise UnknownBusinessTypeError(business_type) from None


def usage_intensity_table() -> pd.DataFrame:
    """Energy-use intensity table for display."""
    return pd.DataFrame(
        [
            {'Business Type': name, 'kWh / ft² / year': intensity}
            for name, intensity in ENERGY_USAGE_ESTIMATES.items()
        ]
    )
