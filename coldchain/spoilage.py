"""
Spoilage model for perishable dairy loads.

Risk is a percentage of product degraded over a transit leg. Each product
kind has two hourly rates, one for ambient and one for refrigerated
carriage. At or below 4 °C the refrigerated rate applies as-is; above it
the ambient rate is scaled by exp((T - 25) / 10), so a hot day raises risk
faster than linearly and a cool one lowers it. Crossing 4 °C is a cliff:
4.00 °C uses the refrigerated row, 4.01 °C the ambient one.
"""

import math

from coldchain.config import (
    DEFAULT_AMBIENT_TEMP_C,
    DEFAULT_PRODUCT,
    MAX_SPOILAGE_PERCENT,
    REFERENCE_TEMP_C,
    REFRIGERATION_THRESHOLD_C,
    SPOILAGE_RATES,
    TEMPERATURE_SCALE_C,
)


def _rates_for(product: str) -> dict:
    return SPOILAGE_RATES.get(product, SPOILAGE_RATES[DEFAULT_PRODUCT])


def hourly_rate(temperature_c: float = DEFAULT_AMBIENT_TEMP_C,
                product: str = DEFAULT_PRODUCT) -> float:
    """Effective percent lost per hour at this temperature."""
    rates = _rates_for(product)
    if temperature_c <= REFRIGERATION_THRESHOLD_C:
        return rates["refrigerated"]
    factor = math.exp((temperature_c - REFERENCE_TEMP_C) / TEMPERATURE_SCALE_C)
    return rates["ambient"] * factor


def spoilage_risk(time_hours: float,
                  temperature_c: float = DEFAULT_AMBIENT_TEMP_C,
                  product: str = DEFAULT_PRODUCT) -> float:
    """Spoilage risk (%) for a leg of `time_hours`, capped at 100.

    Unknown product kinds use the milk row.
    """
    return min(hourly_rate(temperature_c, product) * time_hours, MAX_SPOILAGE_PERCENT)


def shelf_life_hours(temperature_c: float = DEFAULT_AMBIENT_TEMP_C,
                     product: str = DEFAULT_PRODUCT) -> float:
    """Hours of transit until the risk reaches the 100% cap."""
    return MAX_SPOILAGE_PERCENT / hourly_rate(temperature_c, product)
