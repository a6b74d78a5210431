"""Text rendering of query results. Nothing here touches the graph."""


def _airport_label(airports, code):
    airport = airports.get(code)
    return f"{code} ({airport.name})" if airport else code


def format_leg(airports, leg):
    return (
        f"{_airport_label(airports, leg.source)} --> "
        f"{_airport_label(airports, leg.target)} - ({', '.join(leg.airlines)})"
    )


def format_options(airports, options):
    """Alternative routes separated by an "Or..." line."""
    if not options:
        return ["No route found."]
    lines = []
    for i, legs in enumerate(options):
        if i:
            lines.extend(["", "\t\tOr..."])
        lines.extend(format_leg(airports, leg) for leg in legs)
    return lines


def format_best_options(airports, results):
    """Routes for several (source, destination) pairs, numbered as options."""
    if len(results) == 1:
        return format_options(airports, results[0][2])
    lines = []
    for n, (source, destination, options) in enumerate(results, 1):
        lines.append(f"Option {n}: {source} -> {destination}")
        lines.extend(format_options(airports, options))
        lines.append("")
    return lines


def format_distance_route(airports, result):
    if result is None:
        return ["No route found."]
    legs, km = result
    lines = ["The path with the smallest distance is:"]
    lines.extend(format_leg(airports, leg) for leg in legs)
    lines.append(f"Total distance: {km:.2f} km")
    return lines


def format_reach(code, reach, stops=None):
    scope = "reachable" if stops is None else f"reachable with at most {stops} stops"
    return [
        f"Airports {scope} from {code}: {reach.airports}",
        f"Cities {scope} from {code}: {reach.cities}",
        f"Countries {scope} from {code}: {reach.countries}",
    ]


def format_max_trip(airports, hops, pairs):
    if not pairs:
        return ["The network has no trips."]
    lines = [f"Maximum trips have {hops - 1} stops ({hops} flights):"]
    lines.extend(
        f"{_airport_label(airports, s)} --> {_airport_label(airports, t)}"
        for s, t in pairs
    )
    return lines


def format_top(airports, ranked):
    return [
        f"{i} -> {_airport_label(airports, code)} -- {degree} flights"
        for i, (code, degree) in enumerate(ranked, 1)
    ]


def format_essential(airports, codes):
    lines = [f"{len(codes)} essential airports:"]
    lines.extend(_airport_label(airports, code) for code in sorted(codes))
    return lines


def format_airport(airport, figures):
    return [
        f"{airport.code}: {airport.name}, {airport.city} ({airport.country})",
        f"  Position:   {airport.latitude:.4f}, {airport.longitude:.4f}",
        f"  Flights:    {figures['flights']}",
        f"  Airlines:   {figures['airlines']}",
        f"  Countries:  {figures['countries']}",
    ]
