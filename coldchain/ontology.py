"""
Ontology Layer: typed entities for the cold-chain routing engine.

Frozen dataclasses for facilities, transport links, optimisation weights
and the two result shapes (single-pair PathResult, network-wide
FlowResult). Everything here is immutable: a routing call builds fresh
instances and hands them back to the caller.

The five echelons form a fixed chain:

    producer -> collection -> processing -> distributor -> retail

and links only ever connect a facility to one in the next echelon.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from coldchain.config import DEFAULT_WEIGHTS


class FacilityKind(str, Enum):
    PRODUCER = "producer"
    COLLECTION = "collection"
    PROCESSING = "processing"
    DISTRIBUTOR = "distributor"
    RETAIL = "retail"

    @property
    def echelon(self) -> int:
        """Position in the producer -> retail chain (0-based)."""
        return ECHELON_ORDER.index(self)


ECHELON_ORDER = (
    FacilityKind.PRODUCER,
    FacilityKind.COLLECTION,
    FacilityKind.PROCESSING,
    FacilityKind.DISTRIBUTOR,
    FacilityKind.RETAIL,
)


# ═══════════════════════════════════════════════════════════════════════════════
# ENTITY DATACLASSES
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Facility:
    """A geolocated site in the network (farm, collection centre, plant, ...)."""
    id: str
    name: str
    kind: FacilityKind
    latitude: float
    longitude: float
    capacity: float
    production: Optional[float] = None     # producers only, litres/day
    demand: Optional[float] = None         # retail only, litres/day
    visible: bool = True

    def __post_init__(self):
        # Accept plain strings from catalogs ("producer", "retail", ...)
        if not isinstance(self.kind, FacilityKind):
            object.__setattr__(self, "kind", FacilityKind(self.kind))

    @property
    def coords(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Link:
    """A directed transport leg between facilities in adjacent echelons."""
    source: str
    target: str
    distance_km: float
    time_hours: float
    cost: float
    spoilage_risk: float        # percent, 0-100
    vehicle: str
    capacity: float             # litres per trip


@dataclass(frozen=True)
class OptimizationWeights:
    """Scalarisation weights for the composite edge cost.

    Not normalised: callers choose the magnitudes. Negative weights would
    break Dijkstra, so they are rejected.
    """
    distance: float = DEFAULT_WEIGHTS["distance"]
    time: float = DEFAULT_WEIGHTS["time"]
    cost: float = DEFAULT_WEIGHTS["cost"]
    spoilage_risk: float = DEFAULT_WEIGHTS["spoilage_risk"]

    def __post_init__(self):
        for name in ("distance", "time", "cost", "spoilage_risk"):
            if getattr(self, name) < 0:
                raise ValueError(
                    f"Optimization weight '{name}' must be non-negative, "
                    f"got {getattr(self, name)}"
                )


# ═══════════════════════════════════════════════════════════════════════════════
# RESULTS
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class PathResult:
    """Best route between two facilities.

    Totals are rounded for display (distance/time/spoilage to 0.1, cost to
    a whole unit). Use raw_totals() when the numbers feed another
    calculation.
    """
    path: tuple[str, ...]
    edges: tuple[Link, ...]
    total_distance: float
    total_time: float
    total_cost: float
    total_spoilage_risk: float      # worst single leg, not a sum
    is_optimal: bool

    @property
    def origin(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def num_hops(self) -> int:
        return len(self.edges)

    def raw_totals(self) -> dict[str, float]:
        """Unrounded distance/time/cost sums and max spoilage over the legs."""
        return {
            "distance": sum(e.distance_km for e in self.edges),
            "time": sum(e.time_hours for e in self.edges),
            "cost": sum(e.cost for e in self.edges),
            "spoilage_risk": max((e.spoilage_risk for e in self.edges), default=0.0),
        }

    def __str__(self) -> str:
        return (
            f"{' -> '.join(self.path)} ({self.total_distance} km, "
            f"{self.total_time} h, {self.total_cost:.0f}, "
            f"risk {self.total_spoilage_risk}%)"
        )


@dataclass(frozen=True)
class FlowEntry:
    """One producer -> retailer assignment and the route it takes."""
    source: Facility
    target: Facility
    volume: float
    path: PathResult


@dataclass(frozen=True)
class FlowResult:
    """Network-wide roll-up of every producer -> retailer best path."""
    flows: tuple[FlowEntry, ...] = field(default_factory=tuple)
    total_cost: float = 0.0
    total_time: float = 0.0
    average_spoilage_risk: float = 0.0
    network_efficiency: float = 0.0
    path_success_rate: float = 0.0
    performance_score: float = 0.0

    @property
    def successful_pairs(self) -> int:
        return len(self.flows)

    @property
    def total_volume(self) -> float:
        return sum(f.volume for f in self.flows)
