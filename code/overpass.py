import logging
from typing import Any, Dict, List, Sequence, Tuple

import requests

from RouteEdge import RouteNode
from WayIndex import TaggedWay, WayIndex
from config import HTTP_TIMEOUT_S, OVERPASS_URL

logger = logging.getLogger(__name__)


class GeodataError(RuntimeError):
    """Overpass answered with something that is not an element list."""


def build_query(node_ids: Sequence[int]) -> str:
    # the route nodes, every way through them, and all nodes of those ways
    ids = ",".join(str(n) for n in node_ids)
    return f"[out:json][timeout:25];node(id:{ids});way(bn);(._;>;);out;"


def parse_elements(elements: List[Dict[str, Any]]) -> Tuple[List[RouteNode], List[TaggedWay]]:
    nodes = []
    ways = []
    for e in elements:
        if e.get("type") == "node":
            nodes.append(RouteNode(id=e["id"], lat=e["lat"], lon=e["lon"]))
        elif e.get("type") == "way":
            ways.append(TaggedWay(id=e["id"], nodes=tuple(e.get("nodes", ())), tags=dict(e.get("tags", {}))))
    return nodes, ways


def fetch_geodata(node_ids: Sequence[int]) -> WayIndex:
    """
    One Overpass request for a whole route.

    Ways stay in the order Overpass returned them, which is what WayIndex
    resolves ambiguous edges by.
    """
    if not node_ids:
        return WayIndex([], [])

    logger.debug("POST %s (%d route nodes)", OVERPASS_URL, len(node_ids))
    r = requests.post(OVERPASS_URL, data={"data": build_query(node_ids)}, timeout=HTTP_TIMEOUT_S)
    r.raise_for_status()
    answer = r.json()

    elements = answer.get("elements") if isinstance(answer, dict) else None
    if elements is None:
        raise GeodataError(f"unexpected Overpass answer: {str(answer)[:200]}")

    nodes, ways = parse_elements(elements)
    index = WayIndex(ways, nodes)
    logger.debug("overpass: %d nodes, %d ways", len(nodes), len(index))
    return index
