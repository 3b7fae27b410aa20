from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import reduce
from typing import Dict, Iterable, Optional, Sequence, Tuple

from RouteEdge import LatLon, MalformedRoute, RouteEdge, extract_edges
from TagTranslator import AXES, Axis, UNKNOWN, translate
from WayIndex import WayIndex

logger = logging.getLogger(__name__)

Polyline = Tuple[LatLon, ...]


@dataclass(frozen=True)
class AxisResult:
    """
    Classification of one route along one axis.
    totals: category -> metres on the route
    groups: category -> maximal runs of route-adjacent edges, as coordinate polylines
    Categories appear in the order they were first met on the route.
    """
    axis: str
    totals: Dict[str, float] = field(hash=False)
    groups: Dict[str, Tuple[Polyline, ...]] = field(hash=False)

    @classmethod
    def empty(cls, axis: str) -> "AxisResult":
        return cls(axis=axis, totals={}, groups={})

    @property
    def total_m(self) -> float:
        return sum(self.totals.values())


@dataclass(frozen=True)
class _Trail:
    # polyline kept as a backwards chain so extending it never copies
    prev: Optional["_Trail"]
    point: LatLon

    def points(self) -> Polyline:
        out = []
        node: Optional[_Trail] = self
        while node is not None:
            out.append(node.point)
            node = node.prev
        out.reverse()
        return tuple(out)


# fold state: (totals, trails per category)
_State = Tuple[Dict[str, float], Dict[str, Tuple[_Trail, ...]]]


def classify_edge(edge: RouteEdge, index: WayIndex, axis: Axis) -> str:
    way = index.find_way_for(edge.start, edge.end)
    if way is None:
        return UNKNOWN
    return translate(axis, way.tag(axis.tag))


def _step(state: _State, item: Tuple[str, RouteEdge, LatLon, LatLon]) -> _State:
    totals, trails = state
    category, edge, a, b = item

    totals = {**totals, category: totals.get(category, 0.0) + edge.distance_m}

    runs = trails.get(category, ())
    # exact float comparison: both coordinates come from the same node record
    if runs and runs[-1].point == a:
        runs = runs[:-1] + (_Trail(runs[-1], b),)
    else:
        runs = runs + (_Trail(_Trail(None, a), b),)
    trails = {**trails, category: runs}

    return totals, trails


def aggregate(edges: Sequence[RouteEdge], index: WayIndex, axis: Axis) -> AxisResult:
    ordered = sorted(edges, key=lambda e: e.ordinal)
    items = (
        (classify_edge(e, index, axis), e, index.coord(e.start), index.coord(e.end))
        for e in ordered
    )
    totals, trails = reduce(_step, items, ({}, {}))

    groups = {cat: tuple(t.points() for t in runs) for cat, runs in trails.items()}
    return AxisResult(axis=axis.name, totals=totals, groups=groups)


def aggregate_axes(
        edges: Sequence[RouteEdge],
        index: WayIndex,
        axes: Iterable[Axis] = AXES,
        parallel: bool = False,
) -> Dict[str, AxisResult]:
    axes = list(axes)
    if not parallel or len(axes) < 2:
        return {axis.name: aggregate(edges, index, axis) for axis in axes}

    # the index is read-only, axes can share it
    with ThreadPoolExecutor(max_workers=len(axes)) as pool:
        futures = {axis.name: pool.submit(aggregate, edges, index, axis) for axis in axes}
        return {name: f.result() for name, f in futures.items()}


def classify_route(
        nodes: Sequence[int],
        distances: Sequence[float],
        index: WayIndex,
        axes: Iterable[Axis] = AXES,
        parallel: bool = False,
) -> Dict[str, AxisResult]:
    axes = list(axes)
    try:
        edges = extract_edges(nodes, distances)
    except MalformedRoute as e:
        logger.warning("route not classified: %s", e)
        return {axis.name: AxisResult.empty(axis.name) for axis in axes}

    return aggregate_axes(edges, index, axes, parallel=parallel)
