"""
Candidate link synthesis between adjacent echelons.

For every tier in TIER_POLICIES (producer -> collection, collection ->
processing, processing -> distributor, distributor -> retail), every visible
source/target pair within the tier radius becomes a Link. Travel time,
cost and spoilage risk all derive from the great-circle distance; the
trip capacity depends on which tier the link belongs to.

The full link set is rebuilt on every call. Nothing is cached, so the
same facilities and temperature always give the same links.
"""

from coldchain.config import (
    DEFAULT_AMBIENT_TEMP_C,
    DEFAULT_PRODUCT,
    DEFAULT_RETAIL_DEMAND,
    PROCESSING_TRIP_SHARE,
    PRODUCER_TRIP_CAP,
    TIER_POLICIES,
    TierPolicy,
)
from coldchain.geo import facility_distance_km
from coldchain.ontology import Facility, FacilityKind, Link
from coldchain.spoilage import spoilage_risk
from coldchain.utils import setup_logging

logger = setup_logging()


def _trip_capacity(policy: TierPolicy, source: Facility, target: Facility) -> float:
    """Litres one vehicle carries on this tier."""
    if policy.source == FacilityKind.PRODUCER:
        return min(source.production or 0, PRODUCER_TRIP_CAP)
    if policy.source == FacilityKind.COLLECTION:
        # Whatever the collection centre holds goes out in one run
        return source.capacity
    if policy.source == FacilityKind.PROCESSING:
        return source.capacity * PROCESSING_TRIP_SHARE
    return target.demand or DEFAULT_RETAIL_DEMAND


def partition_by_kind(nodes) -> dict[FacilityKind, list[Facility]]:
    """Group visible facilities by echelon, preserving input order."""
    groups = {kind: [] for kind in FacilityKind}
    for node in nodes:
        if node.visible:
            groups[node.kind].append(node)
    return groups


def synthesize_edges(
    nodes,
    ambient_temp: float = DEFAULT_AMBIENT_TEMP_C,
    product: str = DEFAULT_PRODUCT,
) -> list[Link]:
    """
    Build every candidate link between adjacent echelons.

    Args:
        nodes: Facility records. Hidden facilities are ignored entirely.
        ambient_temp: Ambient temperature (°C) used for spoilage risk.
        product: Product kind for the spoilage rate table.

    Returns:
        List of Link, grouped by tier in chain order.
    """
    groups = partition_by_kind(nodes)
    edges = []

    for policy in TIER_POLICIES:
        sources = groups[FacilityKind(policy.source)]
        targets = groups[FacilityKind(policy.target)]
        tier_count = 0

        for source in sources:
            for target in targets:
                distance = facility_distance_km(source, target)
                if not distance <= policy.radius_km:
                    continue

                time_hours = distance / policy.speed_kmh
                edges.append(Link(
                    source=source.id,
                    target=target.id,
                    distance_km=distance,
                    time_hours=time_hours,
                    cost=distance * policy.rate_per_km,
                    spoilage_risk=spoilage_risk(time_hours, ambient_temp, product),
                    vehicle=policy.vehicle,
                    capacity=_trip_capacity(policy, source, target),
                ))
                tier_count += 1

        logger.debug(
            f"Tier {policy.source}->{policy.target}: {len(sources)}x{len(targets)} "
            f"pairs, {tier_count} within {policy.radius_km:g} km"
        )

    return edges
