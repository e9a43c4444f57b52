"""
Knowledge Graph: per-call NetworkX DiGraph of the cold-chain network.

Nodes are visible facilities keyed by facility id, carrying their kind and
name. Edges are Links, each stored with its composite weight so that the
optimizer can hand the graph straight to Dijkstra. The graph is owned by
the LogisticsGraph instance that built it; nothing is shared between
calls.

Besides routing, the graph answers topology questions that are awkward
over a flat link list:
  - Reachability: "Which retailers can this farm supply at all?"
  - Impact analysis: "Which retailers lose supply if this site goes dark?"
  - Dead ends: "Which visible facilities have no links?"
"""

import networkx as nx

from coldchain.config import (
    COST_SCALE,
    DISTANCE_SCALE_KM,
    SPOILAGE_SCALE_PERCENT,
    TIME_SCALE_HOURS,
)
from coldchain.ontology import FacilityKind, Link, OptimizationWeights


def composite_weight(link: Link, weights: OptimizationWeights) -> float:
    """Scalarise a link's four objectives into one non-negative cost.

    Each objective is divided by a fixed scale (100 km, 10 h, 1000 currency
    units, 100 %) before weighting.
    """
    return (
        weights.distance * (link.distance_km / DISTANCE_SCALE_KM)
        + weights.time * (link.time_hours / TIME_SCALE_HOURS)
        + weights.cost * (link.cost / COST_SCALE)
        + weights.spoilage_risk * (link.spoilage_risk / SPOILAGE_SCALE_PERCENT)
    )


class LogisticsGraph:
    """NetworkX DiGraph over visible facilities and their links."""

    def __init__(self, nodes, edges, weights: OptimizationWeights = None):
        self.weights = weights or OptimizationWeights()
        self.graph = nx.DiGraph()
        self._build(nodes, edges)

    def _build(self, nodes, edges):
        g = self.graph

        # ── Facility nodes (hidden ones never enter the graph) ────────────
        for node in nodes:
            if not node.visible:
                continue
            g.add_node(node.id, kind=node.kind, name=node.name, facility=node)

        # ── Link edges ─────────────────────────────────────────────────────
        # Parallel links between the same pair: the cheapest one wins,
        # which is the only one Dijkstra could ever use.
        for link in edges:
            if link.source not in g or link.target not in g:
                continue
            weight = composite_weight(link, self.weights)
            if g.has_edge(link.source, link.target):
                if g[link.source][link.target]["weight"] <= weight:
                    continue
            g.add_edge(link.source, link.target, weight=weight, link=link)

    # ═══════════════════════════════════════════════════════════════════════
    # QUERY METHODS
    # ═══════════════════════════════════════════════════════════════════════

    def __contains__(self, facility_id) -> bool:
        return facility_id in self.graph

    def link(self, source_id: str, target_id: str) -> Link:
        return self.graph[source_id][target_id]["link"]

    def get_nodes_by_kind(self, kind) -> list[str]:
        """Return facility ids of the given kind, in insertion order."""
        kind = FacilityKind(kind)
        return [n for n, d in self.graph.nodes(data=True) if d["kind"] == kind]

    def reachable_retailers(self, producer_id: str) -> list[str]:
        """Retailers with at least one directed path from this producer."""
        if producer_id not in self.graph:
            return []
        reachable = nx.descendants(self.graph, producer_id)
        return [n for n in self.get_nodes_by_kind(FacilityKind.RETAIL) if n in reachable]

    def served_retailers(self, graph=None) -> set:
        """Retailers reachable from any producer."""
        graph = self.graph if graph is None else graph
        served = set()
        for producer in self.get_nodes_by_kind(FacilityKind.PRODUCER):
            if producer in graph:
                served |= nx.descendants(graph, producer)
        return {n for n in served if graph.nodes[n]["kind"] == FacilityKind.RETAIL}

    def impact_analysis(self, facility_id: str) -> list[str]:
        """Which retailers lose EVERY producer path if this facility is hidden?

        A retailer that still has some route through other sites is not
        listed. Unknown facility ids return an empty list.
        """
        if facility_id not in self.graph:
            return []

        before = self.served_retailers()
        without = nx.restricted_view(self.graph, [facility_id], [])
        after = self.served_retailers(without)

        lost = before - after
        return [n for n in self.get_nodes_by_kind(FacilityKind.RETAIL) if n in lost]

    def isolated_facilities(self) -> list[str]:
        """Visible facilities with no incoming or outgoing link."""
        return list(nx.isolates(self.graph))
