"""
Multi-criteria shortest path between two facilities.

The four objectives (distance, time, cost, spoilage risk) are collapsed
into one composite weight per link (see knowledge_graph.composite_weight)
and the route is found with Dijkstra over that single number. This is a
weighted-sum scalarisation, not a Pareto search: one route comes back,
the best under the caller's weights.

Dijkstra is valid because every composite weight is non-negative as long
as link fields and weights are. NetworkX stops the search as soon as the
target is settled.

Reported totals:
  - distance, time, cost: summed over the legs
  - spoilage risk: the WORST single leg (risk does not add up across legs)
  - is_optimal: distance < 200 km and time < 8 h and spoilage < 5 %
    (a fixed quality flag, not a proof of global optimality)
"""

import networkx as nx

from coldchain.config import (
    OPTIMAL_MAX_DISTANCE_KM,
    OPTIMAL_MAX_SPOILAGE_PERCENT,
    OPTIMAL_MAX_TIME_HOURS,
)
from coldchain.knowledge_graph import LogisticsGraph
from coldchain.ontology import OptimizationWeights, PathResult
from coldchain.utils import round_half_up, setup_logging

logger = setup_logging()


def is_optimal_route(distance_km: float, time_hours: float, spoilage_risk: float) -> bool:
    return (
        distance_km < OPTIMAL_MAX_DISTANCE_KM
        and time_hours < OPTIMAL_MAX_TIME_HOURS
        and spoilage_risk < OPTIMAL_MAX_SPOILAGE_PERCENT
    )


def route_in_graph(graph: LogisticsGraph, source_id: str, target_id: str):
    """
    Run Dijkstra on an already-built LogisticsGraph.

    Returns:
        PathResult, or None when the target cannot be reached. A query
        from a facility to itself also gives None: there is no leg to
        report.
    """
    if source_id == target_id:
        return None

    try:
        nodes = nx.dijkstra_path(graph.graph, source_id, target_id, weight="weight")
    except (nx.NodeNotFound, nx.NetworkXNoPath):
        logger.debug(f"No path {source_id}->{target_id}")
        return None

    legs = tuple(graph.link(u, v) for u, v in zip(nodes, nodes[1:]))

    # Totals from raw link values; rounding happens only on the way out
    distance = sum(leg.distance_km for leg in legs)
    time_hours = sum(leg.time_hours for leg in legs)
    cost = sum(leg.cost for leg in legs)
    worst_risk = max(leg.spoilage_risk for leg in legs)

    return PathResult(
        path=tuple(nodes),
        edges=legs,
        total_distance=round_half_up(distance, 1),
        total_time=round_half_up(time_hours, 1),
        total_cost=round_half_up(cost),
        total_spoilage_risk=round_half_up(worst_risk, 1),
        is_optimal=is_optimal_route(distance, time_hours, worst_risk),
    )


def shortest_path(
    nodes,
    edges,
    source_id: str,
    target_id: str,
    weights: OptimizationWeights = None,
):
    """
    Find the best route from source_id to target_id.

    Args:
        nodes: Facility records; only visible ones are routable.
        edges: Links (typically from edges.synthesize_edges). Links that
            touch a missing or hidden facility are ignored.
        source_id: Starting facility id.
        target_id: Destination facility id.
        weights: OptimizationWeights; defaults to 0.3/0.3/0.2/0.2.

    Returns:
        PathResult, or None if there is no route.
    """
    graph = LogisticsGraph(nodes, edges, weights)
    return route_in_graph(graph, source_id, target_id)
