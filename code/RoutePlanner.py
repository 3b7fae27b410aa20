from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

import requests

from BikeRoute import BikeRoute, LatLon
from SegmentAggregator import AxisResult, classify_route
from TagTranslator import AXES, Axis
from WayIndex import IncompleteGeodata, WayIndex
from bike_osrm import RoutingError, fetch_route
from config import RECOMPUTE_DEBOUNCE_S
from overpass import GeodataError, fetch_geodata

logger = logging.getLogger(__name__)

RouteFetcher = Callable[[LatLon, LatLon], BikeRoute]
GeodataFetcher = Callable[[Sequence[int]], WayIndex]


@dataclass(frozen=True)
class PlannedRoute:
    route: BikeRoute
    results: Dict[str, AxisResult]
    generation: int

    def result(self, axis: str) -> AxisResult:
        return self.results[axis]


class RoutePlanner:
    """
    Keeps the classification of the current start/dest pair up to date.

    Endpoint edits are debounced: each edit restarts the timer, so a burst of
    drags ends in one recompute. Every run is numbered; a run that finishes
    after a newer one has started is dropped.
    """

    def __init__(self,
                 route_fetcher: RouteFetcher = fetch_route,
                 geodata_fetcher: GeodataFetcher = fetch_geodata,
                 axes: Sequence[Axis] = AXES,
                 debounce_s: float = RECOMPUTE_DEBOUNCE_S,
                 parallel: bool = True):
        self.route_fetcher = route_fetcher
        self.geodata_fetcher = geodata_fetcher
        self.axes = tuple(axes)
        self.debounce_s = debounce_s
        self.parallel = parallel

        self.start: Optional[LatLon] = None
        self.dest: Optional[LatLon] = None

        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._latest: Optional[PlannedRoute] = None

    def set_start(self, pos: LatLon) -> None:
        self.start = pos
        self._schedule()

    def set_dest(self, pos: LatLon) -> None:
        self.dest = pos
        self._schedule()

    def latest(self) -> Optional[PlannedRoute]:
        with self._lock:
            return self._latest

    def _schedule(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.debounce_s, self.recompute_now)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def recompute_now(self) -> Optional[PlannedRoute]:
        start, dest = self.start, self.dest
        if start is None or dest is None:
            return None

        with self._lock:
            self._generation += 1
            generation = self._generation

        try:
            route = self.route_fetcher(start, dest)
            nodes = route.nodes or []
            index = self.geodata_fetcher(nodes)
            results = classify_route(nodes, route.seg_dist_m, index,
                                     self.axes, parallel=self.parallel)
        except (requests.RequestException, RoutingError, GeodataError, IncompleteGeodata) as e:
            logger.error("route %s -> %s failed: %s", start, dest, e)
            with self._lock:
                # the previous result belongs to other endpoints
                if generation == self._generation:
                    self._latest = None
            return None

        planned = PlannedRoute(route=route, results=results, generation=generation)
        with self._lock:
            if generation != self._generation:
                logger.debug("dropping superseded run %d (latest %d)", generation, self._generation)
                return None
            self._latest = planned
        return planned
