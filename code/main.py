import argparse
import logging
import webbrowser

from RoutePlanner import RoutePlanner
from route_map import draw_route_map, format_distance, format_duration, summary_lines

# Coordinates: (lat, lon)
START = (48.1374, 11.5755)   # Marienplatz
DEST = (48.1642, 11.6056)    # Englischer Garten, Kleinhesseloher See


def parse_latlon(value):
    lat, lon = value.split(",")
    return float(lat), float(lon)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Plan a bike route and break it down by surface and lighting.")
    parser.add_argument("--start", type=parse_latlon, default=START, metavar="LAT,LON", help="route start; write --start=LAT,LON when LAT is negative")
    parser.add_argument("--dest", type=parse_latlon, default=DEST, metavar="LAT,LON", help="route destination; write --dest=LAT,LON when LAT is negative")
    parser.add_argument("--highlight", metavar="AXIS:CATEGORY", help="highlight one category on the map, e.g. surface:Asphalt")
    parser.add_argument("--map", default="map.html", help="output html file")
    parser.add_argument("--open", action="store_true", help="open the map in a browser")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    planner = RoutePlanner(debounce_s=0.0)
    planner.start = args.start
    planner.dest = args.dest
    planned = planner.recompute_now()
    if planned is None:
        print("no route")
        raise SystemExit(1)

    route = planned.route
    print(f"Distance: {format_distance(route.dist)}  Duration: {format_duration(route.duration)}  ({len(route.nodes or [])} nodes)")
    for name, result in planned.results.items():
        print(f"\n[{name}]")
        for line in summary_lines(result):
            print("  " + line)

    highlight = None
    if args.highlight:
        axis_name, _, category = args.highlight.partition(":")
        highlight = (axis_name, category)

    m = draw_route_map(route, planned.results, highlight=highlight)
    m.save(args.map)
    print(f"\nmap written to {args.map}")
    if args.open:
        webbrowser.open(args.map)


if __name__ == "__main__":
    main()
