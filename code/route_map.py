from typing import Dict, List, Mapping, Optional, Tuple

import folium

from BikeRoute import BikeRoute
from SegmentAggregator import AxisResult
from TagTranslator import AXES, Axis

ROUTE_COLOR = "#005180"
AXES_BY_NAME: Dict[str, Axis] = {a.name: a for a in AXES}


def format_distance(distance_m: float) -> str:
    if distance_m > 1000:
        # in units of 10 m, so 1999 m rounds up to 2,00 km
        km, rest = divmod(round(distance_m / 10), 100)
        return f"{km},{rest:02d} km"
    return f"{round(distance_m)} m"


def format_duration(duration_s: float) -> str:
    return f"{round(duration_s / 60)} min"


def share_bars(result: AxisResult) -> List[Tuple[str, float, str]]:
    """(category, fraction of route, colour) for a proportional bar, longest first."""
    total = result.total_m
    if not result.totals or total <= 0:
        return []
    axis = AXES_BY_NAME.get(result.axis)
    ranked = sorted(result.totals.items(), key=lambda kv: kv[1], reverse=True)
    return [
        (cat, dist / total, axis.color(cat) if axis else "gray")
        for cat, dist in ranked
    ]


def summary_lines(result: AxisResult) -> List[str]:
    return [
        f"{cat:<16} {format_distance(result.totals[cat]):>10}  {share * 100:5.1f} %"
        for cat, share, _ in share_bars(result)
    ]


def draw_highlight(m: folium.Map, result: AxisResult, category: str) -> None:
    axis = AXES_BY_NAME.get(result.axis)
    color = axis.color(category) if axis else "gray"
    for line in result.groups.get(category, ()):
        # white casing below the coloured line
        folium.PolyLine(line, color="white", weight=6).add_to(m)
        folium.PolyLine(line, color=color, weight=4, tooltip=category).add_to(m)


def draw_route_map(route: BikeRoute,
                   results: Mapping[str, AxisResult],
                   highlight: Optional[Tuple[str, str]] = None) -> folium.Map:
    center = route.geometry_latlon[len(route.geometry_latlon) // 2] if route.geometry_latlon else route.start
    m = folium.Map(location=center, zoom_start=13)

    folium.Marker(route.start, popup="Start", icon=folium.Icon(color="green")).add_to(m)
    folium.Marker(route.dest, popup="Destination", icon=folium.Icon(color="red")).add_to(m)
    if route.geometry_latlon:
        folium.PolyLine(route.geometry_latlon, color=ROUTE_COLOR,
                        tooltip=f"{format_distance(route.dist)}, {format_duration(route.duration)}").add_to(m)

    if highlight is not None:
        axis_name, category = highlight
        if axis_name in results:
            draw_highlight(m, results[axis_name], category)
    return m
