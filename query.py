#!/usr/bin/env python3
"""CLI entry point for querying the flight network.

Locations are airport codes or one of name:<airport name>,
city:<city>,<country>, coord:<lat>,<lon>.

Usage:
    python query.py stats                          # global counts
    python query.py airport OPO                    # one airport's direct figures
    python query.py city Paris France              # countries served from a city
    python query.py reach OPO --stops 2            # reachable airports/cities/countries
    python query.py route OPO "city:Tokyo,Japan"   # best flight options
    python query.py route OPO JFK --airline TAP --airline UAL
    python query.py route OPO JFK --fewest-airlines
    python query.py route OPO JFK --shortest-distance
    python query.py max-trip                       # longest minimum-hop trips
    python query.py top 10                         # busiest airports
    python query.py essential                      # articulation-point airports
"""

import argparse
import logging
import sys
from pathlib import Path

from flightnet import report
from flightnet.config import DB_PATH, setup_logging
from flightnet.db import connect
from flightnet.errors import UnknownAirline, UnknownAirport
from flightnet.system import FlightSystem

log = setup_logging(logging.WARNING)


def cmd_stats(system, args):
    lines = [
        f"Airports: {system.airport_count()}",
        f"Flights:  {system.flight_count()}",
        f"Connected components: {system.component_count()}",
    ]
    if args.per_city:
        for (city, country), n in system.flights_per_city().items():
            lines.append(f"City: {city} ({country}) -- {n} flights")
    if args.per_airline:
        for code, n in system.flights_per_airline().items():
            airline = system.airlines.get(code)
            name = airline.name if airline else "?"
            lines.append(f"Airline: {code} ({name}) -- {n} flights")
    return lines


def cmd_airport(system, args):
    lines = []
    for code in system.resolve(args.location):
        lines.extend(report.format_airport(system.airport(code), system.airport_stats(code)))
    return lines


def cmd_city(system, args):
    n = system.city_countries(args.city, args.country)
    return [f"Countries served directly from {args.city} ({args.country}): {n}"]


def cmd_reach(system, args):
    lines = []
    for code in system.resolve(args.location):
        lines.extend(report.format_reach(code, system.reachable(code, args.stops), args.stops))
    return lines


def cmd_route(system, args):
    if args.shortest_distance:
        lines = []
        for source in system.resolve(args.source):
            for destination in system.resolve(args.destination):
                result = system.shortest_distance_route(source, destination, args.airline)
                lines.extend(report.format_distance_route(system.airports, result))
        return lines
    results = system.best_options(args.source, args.destination,
                                  airlines=args.airline,
                                  fewest_airlines=args.fewest_airlines)
    return report.format_best_options(system.airports, results)


def cmd_max_trip(system, args):
    hops, pairs = system.max_trip()
    return report.format_max_trip(system.airports, hops, pairs)


def cmd_top(system, args):
    ranked = system.top_traffic(args.k)
    if not ranked:
        return [f"k must be between 1 and {system.airport_count()}."]
    return report.format_top(system.airports, ranked)


def cmd_essential(system, args):
    return report.format_essential(system.airports, system.essential_airports())


def build_parser():
    parser = argparse.ArgumentParser(description="Query the flight route network.")
    parser.add_argument("--db", type=str, default=None, help="Path to SQLite database")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("stats", help="Global airport and flight counts")
    p.add_argument("--per-city", action="store_true")
    p.add_argument("--per-airline", action="store_true")
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser("airport", help="Direct flights, airlines and countries of an airport")
    p.add_argument("location")
    p.set_defaults(func=cmd_airport)

    p = sub.add_parser("city", help="Countries served directly from a city's airports")
    p.add_argument("city")
    p.add_argument("country")
    p.set_defaults(func=cmd_city)

    p = sub.add_parser("reach", help="Destinations reachable from an airport")
    p.add_argument("location")
    p.add_argument("--stops", type=int, default=None, help="Maximum number of stops")
    p.set_defaults(func=cmd_reach)

    p = sub.add_parser("route", help="Best flight options between two locations")
    p.add_argument("source")
    p.add_argument("destination")
    p.add_argument("--airline", action="append", default=None,
                   help="Only fly with this airline (repeatable)")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--fewest-airlines", action="store_true")
    group.add_argument("--shortest-distance", action="store_true")
    p.set_defaults(func=cmd_route)

    p = sub.add_parser("max-trip", help="Trips with the most stops")
    p.set_defaults(func=cmd_max_trip)

    p = sub.add_parser("top", help="Airports with the most flights")
    p.add_argument("k", type=int)
    p.set_defaults(func=cmd_top)

    p = sub.add_parser("essential", help="Airports whose loss disconnects the network")
    p.set_defaults(func=cmd_essential)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    db_path = Path(args.db) if args.db else DB_PATH
    if not db_path.exists():
        log.error("No database at %s. Run fetch.py first.", db_path)
        return 1

    conn = connect(db_path)
    try:
        system = FlightSystem.from_db(conn)
    finally:
        conn.close()

    try:
        lines = args.func(system, args)
    except (UnknownAirport, UnknownAirline) as exc:
        print(exc.args[0], file=sys.stderr)
        return 1
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
