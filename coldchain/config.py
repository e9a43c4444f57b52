"""
Policy constants for the cold-chain routing engine.

Everything that is a tunable number lives here: the Earth radius used by
the haversine formula, per-product spoilage rates, the tier table that
decides which echelons connect and at what speed/rate, the divisors that
normalise each objective before weighting, and the fixed quality
thresholds used for the isOptimal flag and the network efficiency score.
"""

from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0

DEFAULT_AMBIENT_TEMP_C = 25.0
DEFAULT_PRODUCT = "milk"

# At or below this temperature the load counts as refrigerated.
REFRIGERATION_THRESHOLD_C = 4.0
# exp((T - 25) / 10): the ambient rate is quoted at 25 °C.
REFERENCE_TEMP_C = 25.0
TEMPERATURE_SCALE_C = 10.0
MAX_SPOILAGE_PERCENT = 100.0

# Percent of product lost per hour, keyed by product kind.
# Unknown kinds fall back to DEFAULT_PRODUCT.
SPOILAGE_RATES = {
    "milk": {"ambient": 8.33, "refrigerated": 0.21},
    "yogurt": {"ambient": 4.17, "refrigerated": 0.08},
    "cheese": {"ambient": 2.08, "refrigerated": 0.035},
    "butter": {"ambient": 1.67, "refrigerated": 0.023},
}

# Safe storage band (min °C, max °C) per product kind.
SAFE_TEMPERATURE_BANDS = {
    "milk": (0.0, 4.0),
    "yogurt": (0.0, 4.0),
    "cheese": (2.0, 8.0),
    "butter": (0.0, 6.0),
}

# Ideal storage temperature (°C); compliance outside the band is scored
# by distance from this point.
OPTIMAL_TEMPERATURES = {
    "milk": 2.0,
    "yogurt": 2.0,
    "cheese": 4.0,
    "butter": 3.0,
}


@dataclass(frozen=True)
class TierPolicy:
    """Connection rule between two adjacent echelons."""
    source: str
    target: str
    radius_km: float        # inclusive upper bound on great-circle distance
    speed_kmh: float
    rate_per_km: float
    vehicle: str


# Ordered producer -> retail. Kinds are FacilityKind values.
TIER_POLICIES = (
    TierPolicy("producer", "collection", 50.0, 40.0, 15.0, "milk_tanker"),
    TierPolicy("collection", "processing", 100.0, 50.0, 20.0, "refrigerated_truck"),
    TierPolicy("processing", "distributor", 150.0, 60.0, 18.0, "distribution_truck"),
    TierPolicy("distributor", "retail", 75.0, 45.0, 12.0, "delivery_van"),
)

# Link capacity rules
PRODUCER_TRIP_CAP = 2000.0
PROCESSING_TRIP_SHARE = 0.10
DEFAULT_RETAIL_DEMAND = 500.0

# ── Composite weight ─────────────────────────────────────────────────────
DEFAULT_WEIGHTS = {"distance": 0.3, "time": 0.3, "cost": 0.2, "spoilage_risk": 0.2}

DISTANCE_SCALE_KM = 100.0
TIME_SCALE_HOURS = 10.0
COST_SCALE = 1000.0
SPOILAGE_SCALE_PERCENT = 100.0

# ── Quality thresholds ──────────────────────────────────────────────────
# Fixed heuristics, not derived from anything.
OPTIMAL_MAX_DISTANCE_KM = 200.0
OPTIMAL_MAX_TIME_HOURS = 8.0
OPTIMAL_MAX_SPOILAGE_PERCENT = 5.0

SUCCESS_RATE_WEIGHT = 50.0
PERFORMANCE_WEIGHT = 0.5
TIME_PENALTY_PER_HOUR = 2.0

# Route labels used by metrics.route_summary
GOOD_MAX_SPOILAGE_PERCENT = 10.0
GOOD_MAX_TIME_HOURS = 12.0
COMPLIANCE_PENALTY_PER_DEGREE = 10.0
