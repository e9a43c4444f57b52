"""
pandas adapters between the routing engine and tabular callers.

The facility catalog lives outside this package; whatever store it uses,
it can hand over a DataFrame and get typed Facility records back. Results
go the other way: links, paths and flows flatten into DataFrames ready for
tables, charts or CSV export.
"""

import pandas as pd

from coldchain.ontology import Facility, FlowResult
from coldchain.utils import format_path_nodes

FACILITY_COLUMNS = ["id", "name", "kind", "latitude", "longitude", "capacity"]


def _optional(value):
    """NaN/None -> None, anything else -> float."""
    if value is None or pd.isna(value):
        return None
    return float(value)


def facilities_from_frame(df: pd.DataFrame) -> list[Facility]:
    """
    Convert a facility DataFrame into Facility records.

    Required columns: id, name, kind, latitude, longitude, capacity.
    Optional: production, demand, visible (defaults to True).

    Raises:
        ValueError: a required column is missing or a kind is unknown.
    """
    missing = [c for c in FACILITY_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Facility frame is missing columns: {missing}")

    facilities = []
    for _, row in df.iterrows():
        visible = row["visible"] if "visible" in df.columns else True
        facilities.append(Facility(
            id=str(row["id"]),
            name=row["name"],
            kind=row["kind"],
            latitude=float(row["latitude"]),
            longitude=float(row["longitude"]),
            capacity=float(row["capacity"]),
            production=_optional(row["production"]) if "production" in df.columns else None,
            demand=_optional(row["demand"]) if "demand" in df.columns else None,
            visible=True if pd.isna(visible) else bool(visible),
        ))
    return facilities


def edges_to_frame(edges) -> pd.DataFrame:
    """One row per link."""
    return pd.DataFrame([
        {
            "source": e.source,
            "target": e.target,
            "distance_km": e.distance_km,
            "time_hours": e.time_hours,
            "cost": e.cost,
            "spoilage_risk": e.spoilage_risk,
            "vehicle": e.vehicle,
            "capacity": e.capacity,
        }
        for e in edges
    ], columns=["source", "target", "distance_km", "time_hours", "cost",
                "spoilage_risk", "vehicle", "capacity"])


def paths_to_frame(paths) -> pd.DataFrame:
    """One row per route, sorted by origin then destination."""
    df = pd.DataFrame([
        {
            "origin": p.origin,
            "destination": p.destination,
            "route": format_path_nodes(p.path),
            "hops": p.num_hops,
            "total_distance": p.total_distance,
            "total_time": p.total_time,
            "total_cost": p.total_cost,
            "total_spoilage_risk": p.total_spoilage_risk,
            "is_optimal": p.is_optimal,
        }
        for p in paths
    ], columns=["origin", "destination", "route", "hops", "total_distance",
                "total_time", "total_cost", "total_spoilage_risk", "is_optimal"])
    return df.sort_values(["origin", "destination"]).reset_index(drop=True)


def flows_to_frame(result: FlowResult) -> pd.DataFrame:
    """One row per routed producer -> retailer pair."""
    return pd.DataFrame([
        {
            "producer_id": f.source.id,
            "producer": f.source.name,
            "retailer_id": f.target.id,
            "retailer": f.target.name,
            "volume": f.volume,
            "route": format_path_nodes(f.path.path),
            "total_distance": f.path.total_distance,
            "total_time": f.path.total_time,
            "total_cost": f.path.total_cost,
            "total_spoilage_risk": f.path.total_spoilage_risk,
            "is_optimal": f.path.is_optimal,
        }
        for f in result.flows
    ], columns=["producer_id", "producer", "retailer_id", "retailer", "volume",
                "route", "total_distance", "total_time", "total_cost",
                "total_spoilage_risk", "is_optimal"])
