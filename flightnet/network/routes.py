"""Minimum-hop route search between two airports.

``shortest_paths`` runs a BFS that keeps, for every airport, all of its
predecessors at the minimum distance, then rebuilds every minimum-hop
sequence by walking those predecessor sets backwards from the destination.
``best_routes`` turns each sequence into route legs annotated with the
airlines able to fly every hop.
"""

from collections import Counter, deque, namedtuple

Route = namedtuple("Route", "source target airlines")


def _predecessors(graph, source, destination, airlines=None):
    """BFS from source; returns {code: [predecessors at minimum distance]}."""
    start = graph.find_vertex(source)
    dist = {source: 0}
    preds = {source: []}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        d = dist[current.code]
        # Everything at the destination's depth is already queued.
        if destination in dist and d >= dist[destination]:
            break
        for edge in current.adj:
            if airlines is not None and edge.airline not in airlines:
                continue
            code = edge.dest.code
            if code not in dist:
                dist[code] = d + 1
                preds[code] = [current.code]
                queue.append(edge.dest)
            elif dist[code] == d + 1 and current.code not in preds[code]:
                preds[code].append(current.code)
    return preds


def shortest_paths(graph, source, destination, airlines=None):
    """Every distinct minimum-hop code sequence from source to destination.

    ``airlines`` restricts the search to flights of those airline codes.
    Returns ``[]`` when source == destination, when either code is not in
    the graph, or when the destination cannot be reached.
    """
    if source == destination or source not in graph or destination not in graph:
        return []
    if airlines is not None:
        airlines = set(airlines)

    preds = _predecessors(graph, source, destination, airlines)
    if destination not in preds:
        return []

    paths = []
    seen = set()
    stack = [(destination, [destination])]
    while stack:
        code, suffix = stack.pop()
        if code == source:
            path = suffix[::-1]
            key = tuple(path)
            if key not in seen:
                seen.add(key)
                paths.append(path)
            continue
        for prev in reversed(preds[code]):
            stack.append((prev, suffix + [prev]))
    return paths


def annotate(graph, path, airlines=None):
    """Route legs for a code sequence, each with the airlines flying that hop."""
    return [
        Route(a, b, graph.airlines_between(a, b, airlines))
        for a, b in zip(path, path[1:])
    ]


def best_routes(graph, source, destination, airlines=None):
    """All minimum-hop routes as lists of Route legs, duplicates suppressed."""
    if airlines is not None:
        airlines = set(airlines)
    options = []
    for path in shortest_paths(graph, source, destination, airlines):
        legs = annotate(graph, path, airlines)
        if legs not in options:
            options.append(legs)
    return options


def minimize_airlines(legs):
    """Narrow a route to the airlines that can fly every one of its hops.

    Counts, over the legs, how many hops each airline can fly. When the top
    count equals the number of legs, every leg is rewritten to the airlines
    reaching that count; otherwise the legs are returned unchanged. This is
    a heuristic, not a minimum airline-switch search: a route that needs a
    change of airline is never narrowed at all.
    """
    counts = Counter(airline for leg in legs for airline in leg.airlines)
    if not counts:
        return list(legs)
    top = max(counts.values())
    if top != len(legs):
        return list(legs)
    frequent = tuple(code for code, n in counts.items() if n == top)
    return [leg._replace(airlines=frequent) for leg in legs]


def fewest_airline_routes(graph, source, destination, airlines=None):
    return [
        minimize_airlines(legs)
        for legs in best_routes(graph, source, destination, airlines)
    ]


def route_distance(graph, legs):
    total = 0.0
    for leg in legs:
        total += graph.distance_between(leg.source, leg.target) or 0.0
    return total


def shortest_distance_route(graph, source, destination, airlines=None):
    """The minimum-hop route with the smallest total distance, or None.

    Returns ``(legs, kilometres)``; ties keep the first route found.
    """
    best = None
    for legs in best_routes(graph, source, destination, airlines):
        km = route_distance(graph, legs)
        if best is None or km < best[1]:
            best = (legs, km)
    return best
