"""
Derived dashboard metrics on top of routing results.

Small, stateless helpers: how loaded the network is, how a single route
rates, and how far the ambient temperature strays from a product's safe
storage band.
"""

from coldchain.config import (
    COMPLIANCE_PENALTY_PER_DEGREE,
    DEFAULT_PRODUCT,
    GOOD_MAX_SPOILAGE_PERCENT,
    GOOD_MAX_TIME_HOURS,
    OPTIMAL_TEMPERATURES,
    SAFE_TEMPERATURE_BANDS,
)
from coldchain.ontology import FacilityKind, PathResult


def network_utilization(nodes) -> float:
    """Producer output as a percentage of total visible capacity (max 100)."""
    visible = [n for n in nodes if n.visible]
    total_capacity = sum(n.capacity for n in visible)
    if total_capacity <= 0:
        return 0.0
    total_production = sum(
        n.production or 0 for n in visible if n.kind == FacilityKind.PRODUCER
    )
    return min(100.0, total_production / total_capacity * 100)


def efficiency_label(path: PathResult) -> str:
    """'optimal', 'good' or 'poor'."""
    if path.is_optimal:
        return "optimal"
    raw = path.raw_totals()
    if (raw["spoilage_risk"] < GOOD_MAX_SPOILAGE_PERCENT
            and raw["time"] < GOOD_MAX_TIME_HOURS):
        return "good"
    return "poor"


def route_summary(path: PathResult) -> dict:
    """Per-route ratios for display.

    Returns dict: {cost_per_km, time_per_node, hops, efficiency}.
    """
    raw = path.raw_totals()
    cost_per_km = raw["cost"] / raw["distance"] if raw["distance"] > 0 else 0.0
    return {
        "cost_per_km": round(cost_per_km, 2),
        "time_per_node": round(raw["time"] / len(path.path), 2),
        "hops": path.num_hops,
        "efficiency": efficiency_label(path),
    }


def temperature_compliance(ambient_temp: float, product: str = DEFAULT_PRODUCT) -> float:
    """100 inside the product's safe band; outside it, minus 10 points per
    degree away from the product's optimal temperature.
    """
    low, high = SAFE_TEMPERATURE_BANDS.get(product, SAFE_TEMPERATURE_BANDS[DEFAULT_PRODUCT])
    if low <= ambient_temp <= high:
        return 100.0
    optimal = OPTIMAL_TEMPERATURES.get(product, OPTIMAL_TEMPERATURES[DEFAULT_PRODUCT])
    deviation = abs(ambient_temp - optimal)
    return max(0.0, 100.0 - COMPLIANCE_PENALTY_PER_DEGREE * deviation)
