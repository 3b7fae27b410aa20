from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

LatLon = Tuple[float, float]  # (lat, lon)


class MalformedRoute(ValueError):
    """Node list and distance annotation do not describe a route."""


@dataclass(frozen=True)
class RouteNode:
    id: int
    lat: float
    lon: float

    @property
    def latlon(self) -> LatLon:
        return (self.lat, self.lon)


@dataclass(frozen=True)
class RouteEdge:
    """
    One route segment between two consecutive OSM nodes.
    ordinal: position on the route, 0-based (edge i joins node i and node i+1)
    """
    start: int
    end: int
    distance_m: float
    ordinal: int


def extract_edges(nodes: Sequence[int], distances: Sequence[float]) -> List[RouteEdge]:
    # OSRM annotation: distance[i] is the length between nodes[i] and nodes[i + 1]
    if len(nodes) < 2:
        raise MalformedRoute(f"route needs at least 2 nodes, got {len(nodes)}")
    if len(distances) != len(nodes) - 1:
        raise MalformedRoute(
            f"expected {len(nodes) - 1} distances for {len(nodes)} nodes, got {len(distances)}"
        )

    edges = []
    for i, d in enumerate(distances):
        if d < 0:
            raise MalformedRoute(f"negative distance {d} at edge {i}")
        edges.append(RouteEdge(start=nodes[i], end=nodes[i + 1], distance_m=float(d), ordinal=i))
    return edges
