import pytest

from RouteEdge import RouteNode
from WayIndex import TaggedWay, WayIndex

# N0 -> N1 -> N2 -> N3, roughly north along Leopoldstrasse
COORDS = {
    0: (48.1500, 11.5800),
    1: (48.1509, 11.5801),
    2: (48.1513, 11.5803),
    3: (48.1520, 11.5806),
}


def route_nodes():
    return [RouteNode(id=i, lat=lat, lon=lon) for i, (lat, lon) in COORDS.items()]


@pytest.fixture
def coords():
    return COORDS


@pytest.fixture
def asphalt_then_untagged():
    ways = [
        TaggedWay(id=1, nodes=(0, 1, 2), tags={"surface": "asphalt", "lit": "yes"}),
        TaggedWay(id=2, nodes=(2, 3), tags={"highway": "cycleway"}),
    ]
    return WayIndex(ways, route_nodes())


@pytest.fixture
def gap_in_the_middle():
    # nothing carries N1 -> N2
    ways = [
        TaggedWay(id=1, nodes=(0, 1), tags={"surface": "asphalt", "lit": "no"}),
        TaggedWay(id=3, nodes=(2, 3), tags={"surface": "paved", "lit": "no"}),
    ]
    return WayIndex(ways, route_nodes())
