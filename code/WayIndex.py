from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from RouteEdge import LatLon, RouteNode

logger = logging.getLogger(__name__)


class IncompleteGeodata(KeyError):
    """A route node has no coordinate record in the fetched geodata."""


@dataclass(frozen=True)
class TaggedWay:
    """
    OSM way as returned by the geodata query.
    nodes: node ids in way order
    tags: raw OSM tags (surface, lit, ...) - any of them may be missing
    """
    id: int
    nodes: Tuple[int, ...]
    tags: Mapping[str, str] = field(default_factory=dict, hash=False)
    node_set: FrozenSet[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "node_set", frozenset(self.nodes))

    def tag(self, key: str) -> Optional[str]:
        return self.tags.get(key)


class WayIndex:
    """
    Lookup structure built once per geodata batch.

    Answers which way carries a route edge and where a node lies. Ways keep the
    order they were received in; when several ways contain both ends of an edge
    the first one wins.
    """

    def __init__(self, ways: Iterable[TaggedWay], nodes: Iterable[RouteNode] = ()):
        self._ways: Tuple[TaggedWay, ...] = tuple(ways)
        self._nodes: Dict[int, RouteNode] = {n.id: n for n in nodes}

        # node id -> positions of the ways passing through it, ascending
        by_node: Dict[int, List[int]] = {}
        for pos, way in enumerate(self._ways):
            for node_id in way.node_set:
                by_node.setdefault(node_id, []).append(pos)
        self._by_node: Dict[int, Tuple[int, ...]] = {k: tuple(v) for k, v in by_node.items()}

    def __len__(self) -> int:
        return len(self._ways)

    def find_way_for(self, start: int, end: int) -> Optional[TaggedWay]:
        for pos in self._by_node.get(start, ()):
            way = self._ways[pos]
            if end in way.node_set:
                return way
        logger.debug("no way contains both %s and %s", start, end)
        return None

    def node(self, node_id: int) -> RouteNode:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise IncompleteGeodata(node_id) from None

    def coord(self, node_id: int) -> LatLon:
        return self.node(node_id).latlon
