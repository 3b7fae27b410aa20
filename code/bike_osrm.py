import logging
from typing import Any, Dict, Optional

import polyline
import requests

from BikeRoute import BikeRoute, LatLon
from config import HTTP_TIMEOUT_S, OSRM_PROFILE, OSRM_URL

logger = logging.getLogger(__name__)


class RoutingError(RuntimeError):
    """OSRM answered, but without a usable route."""


def route_url(start: LatLon, dest: LatLon, profile: str, base: Optional[str] = None) -> str:
    a_lat, a_lon = start
    b_lat, b_lon = dest
    coords = f"{a_lon},{a_lat};{b_lon},{b_lat}"
    return f"{base or OSRM_URL}/route/v1/{profile}/{coords}"


def fetch_route_json(start: LatLon, dest: LatLon, profile: str = OSRM_PROFILE) -> Dict[str, Any]:
    url = route_url(start, dest, profile)
    logger.debug("GET %s", url)

    r = requests.get(
        url,
        params={
            "overview": "full",
            "geometries": "polyline",
            "annotations": "true",  # nodes + distance per segment
            "steps": "false",
        },
        timeout=HTTP_TIMEOUT_S,
    )
    r.raise_for_status()
    data = r.json()
    if data.get("code") != "Ok":
        raise RoutingError(f"OSRM error: {data.get('message', data.get('code'))}")
    return data


def parse_route(data: Dict[str, Any], start: LatLon, dest: LatLon, profile: str = OSRM_PROFILE) -> BikeRoute:
    if not data.get("routes"):
        raise RoutingError("OSRM returned no route")

    route = data["routes"][0]
    leg = route["legs"][0]
    ann = leg["annotation"]

    return BikeRoute(
        start=start,
        dest=dest,
        dist=route["distance"],
        duration=route["duration"],
        geometry_latlon=polyline.decode(route["geometry"]),
        seg_dist_m=[float(d) for d in ann["distance"]],
        nodes=ann.get("nodes"),
        profile=profile,
    )


def fetch_route(start: LatLon, dest: LatLon, profile: str = OSRM_PROFILE) -> BikeRoute:
    return parse_route(fetch_route_json(start, dest, profile), start, dest, profile)
