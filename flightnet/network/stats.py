"""Counting queries over the network and its metadata."""

from collections import Counter


def flight_count(graph):
    return sum(v.outdegree for v in graph.vertices())


def flights_from(graph, code):
    vertex = graph.find_vertex(code)
    return vertex.outdegree if vertex else 0


def airlines_from(graph, code):
    vertex = graph.find_vertex(code)
    if vertex is None:
        return 0
    return len({edge.airline for edge in vertex.adj})


def destination_countries(graph, airports, codes):
    """Distinct countries served by direct flights out of ``codes``."""
    countries = set()
    for code in codes:
        vertex = graph.find_vertex(code)
        if vertex is None:
            continue
        for edge in vertex.adj:
            airport = airports.get(edge.dest.code)
            if airport is not None:
                countries.add(airport.country)
    return len(countries)


def flights_per_city(graph, airports):
    """{(city, country): arriving + departing flights}, sorted by city."""
    totals = Counter()
    for vertex in graph.vertices():
        airport = airports.get(vertex.code)
        if airport is None:
            continue
        totals[(airport.city, airport.country)] += vertex.degree
    return dict(sorted(totals.items()))


def flights_per_airline(graph):
    """{airline code: flights}, sorted by code."""
    totals = Counter(edge.airline for v in graph.vertices() for edge in v.adj)
    return dict(sorted(totals.items()))
