"""
Network-wide flow roll-up.

Synthesises the link set once, then finds the best route for every
(producer, retailer) pair independently and reduces the successful ones
into network statistics:

  total_cost, total_time     sums over successful routes
  average_spoilage_risk      mean of each route's worst-leg risk
  path_success_rate          successful pairs / (producers x retailers)
  performance_score          max(0, 100 - avg risk - 2 x mean route hours)
  network_efficiency         50 x success rate + 0.5 x performance score

Routes do not share capacity: each pair is optimised as if it had the
network to itself. Pair searches are independent, so they may run on a
thread pool; results are reduced in pair order either way.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from coldchain.config import (
    DEFAULT_AMBIENT_TEMP_C,
    DEFAULT_PRODUCT,
    DEFAULT_RETAIL_DEMAND,
    PERFORMANCE_WEIGHT,
    SUCCESS_RATE_WEIGHT,
    TIME_PENALTY_PER_HOUR,
)
from coldchain.edges import partition_by_kind, synthesize_edges
from coldchain.knowledge_graph import LogisticsGraph
from coldchain.ontology import FacilityKind, FlowEntry, FlowResult, OptimizationWeights
from coldchain.optimizer import route_in_graph
from coldchain.utils import round_half_up, setup_logging

logger = setup_logging()

# Echelons that can start / end a route in find_all_paths
ROUTE_SOURCES = (
    FacilityKind.PRODUCER, FacilityKind.COLLECTION,
    FacilityKind.PROCESSING, FacilityKind.DISTRIBUTOR,
)
ROUTE_TARGETS = (
    FacilityKind.COLLECTION, FacilityKind.PROCESSING,
    FacilityKind.DISTRIBUTOR, FacilityKind.RETAIL,
)


def _flow_volume(producer, retailer) -> float:
    return min(producer.production or 0, retailer.demand or DEFAULT_RETAIL_DEMAND)


def _solve_pairs(graph: LogisticsGraph, pairs, max_workers: Optional[int]) -> list:
    """Best route per (source, target) pair, in pair order."""
    def solve(pair):
        source, target = pair
        return route_in_graph(graph, source.id, target.id)

    if not max_workers:
        return [solve(p) for p in pairs]
    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        return list(ex.map(solve, pairs))


def network_flow(
    nodes,
    ambient_temp: float = DEFAULT_AMBIENT_TEMP_C,
    weights: OptimizationWeights = None,
    product: str = DEFAULT_PRODUCT,
    max_workers: Optional[int] = None,
) -> FlowResult:
    """
    Route every producer to every retailer and roll up the results.

    Args:
        nodes: Facility records; hidden ones are ignored.
        ambient_temp: Ambient temperature (°C) for spoilage risk.
        weights: OptimizationWeights for the composite link cost.
        product: Product kind for the spoilage rate table.
        max_workers: If set, run pair searches on a thread pool of this size.

    Returns:
        FlowResult. An empty network, or one with no routable pair, gives
        all-zero aggregates and no flows.
    """
    groups = partition_by_kind(nodes)
    producers = groups[FacilityKind.PRODUCER]
    retailers = groups[FacilityKind.RETAIL]

    edges = synthesize_edges(nodes, ambient_temp, product)
    graph = LogisticsGraph(nodes, edges, weights)

    pairs = [(p, r) for p in producers for r in retailers]
    routes = _solve_pairs(graph, pairs, max_workers)

    # ── Reduce ──────────────────────────────────────────────────────────
    # Sums use unrounded leg values; only the final figures are rounded.
    flows = []
    total_cost = 0.0
    total_time = 0.0
    risks = []
    for (producer, retailer), route in zip(pairs, routes):
        if route is None:
            continue
        raw = route.raw_totals()
        flows.append(FlowEntry(
            source=producer,
            target=retailer,
            volume=_flow_volume(producer, retailer),
            path=route,
        ))
        total_cost += raw["cost"]
        total_time += raw["time"]
        risks.append(raw["spoilage_risk"])

    successful = len(flows)
    average_risk = sum(risks) / successful if successful else 0.0
    success_rate = successful / len(pairs) if pairs else 0.0

    if successful:
        mean_hours = total_time / successful
        performance = max(0.0, 100 - average_risk - TIME_PENALTY_PER_HOUR * mean_hours)
    else:
        performance = 0.0
    efficiency = SUCCESS_RATE_WEIGHT * success_rate + PERFORMANCE_WEIGHT * performance

    logger.info(
        f"Network flow: {successful}/{len(pairs)} producer-retail pairs routed, "
        f"{len(edges)} links, efficiency {efficiency:.1f}"
    )

    return FlowResult(
        flows=tuple(flows),
        total_cost=round_half_up(total_cost),
        total_time=round_half_up(total_time, 1),
        average_spoilage_risk=round_half_up(average_risk, 1),
        network_efficiency=round_half_up(efficiency, 1),
        path_success_rate=success_rate,
        performance_score=round_half_up(performance, 1),
    )


def find_all_paths(
    nodes,
    ambient_temp: float = DEFAULT_AMBIENT_TEMP_C,
    product: str = DEFAULT_PRODUCT,
) -> list:
    """
    Every routable (upstream, downstream) pair, for map overlays.

    Sources are visible producers, collection centres, plants and
    distributors; targets are visible collection centres, plants,
    distributors and retailers. Uses default weights. No aggregation.
    """
    groups = partition_by_kind(nodes)
    sources = [n for kind in ROUTE_SOURCES for n in groups[kind]]
    targets = [n for kind in ROUTE_TARGETS for n in groups[kind]]

    graph = LogisticsGraph(nodes, synthesize_edges(nodes, ambient_temp, product))

    paths = []
    for source in sources:
        for target in targets:
            if source.id == target.id:
                continue
            route = route_in_graph(graph, source.id, target.id)
            if route is not None:
                paths.append(route)
    return paths
