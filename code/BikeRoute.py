from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

LatLon = Tuple[float, float]  # (lat, lon)


@dataclass(frozen=True)
class BikeRoute:
    """
    Route as returned by the routing provider.
    geometry_latlon: overview polyline, only used for drawing
    nodes: OSM node ids from the OSRM annotation
    seg_dist_m: distance between nodes i -> i+1
    """
    start: LatLon
    dest: LatLon
    dist: float
    duration: float
    geometry_latlon: List[LatLon]
    seg_dist_m: List[float]
    nodes: Optional[List[int]] = None
    profile: str = "bike"
