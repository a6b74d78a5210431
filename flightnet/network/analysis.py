"""Whole-network analysis: reachability, max trip, traffic, essential airports."""

import logging
from collections import namedtuple

from flightnet.network.traversal import bfs_at_distance, bfs_distances, dfs_visit

log = logging.getLogger("flightnet")

Reach = namedtuple("Reach", "airports cities countries")


def reach_summary(airports, source, codes):
    """Distinct airports, (city, country) pairs and countries among ``codes``.

    The source itself is left out, so its city or country only counts when
    another reached airport shares it.
    """
    reached = set()
    cities = set()
    countries = set()
    for code in codes:
        if code == source:
            continue
        airport = airports.get(code)
        if airport is None:
            continue
        reached.add(code)
        cities.add((airport.city, airport.country))
        countries.add(airport.country)
    return Reach(len(reached), len(cities), len(countries))


def reachable(graph, airports, code):
    return reach_summary(airports, code, dfs_visit(graph, code))


def reachable_within(graph, airports, code, stops):
    """Reach with at most ``stops`` intermediate stops (stops + 1 flights)."""
    if stops < 0:
        log.warning("Stop limit out of range: %d", stops)
        return Reach(0, 0, 0)
    return reach_summary(airports, code, bfs_at_distance(graph, code, stops + 1))


def max_trip(graph):
    """Longest minimum-hop trip in the network.

    Returns ``(hops, pairs)`` where ``pairs`` lists every (source, target)
    whose shortest trip has that many hops, across all sources.
    """
    best = 0
    pairs = []
    for vertex in graph.vertices():
        dist = bfs_distances(graph, vertex.code)
        farthest = max(dist.values())
        if farthest == 0 or farthest < best:
            continue
        found = [(vertex.code, code) for code, d in dist.items() if d == farthest]
        if farthest > best:
            best = farthest
            pairs = found
        else:
            pairs.extend(found)
    return best, pairs


def top_traffic(graph, k):
    """The ``k`` airports with most flights (in + out), busiest first."""
    vertices = graph.vertices()
    if k <= 0 or k > len(vertices):
        log.warning("Top-k query out of range: k=%d, %d airports", k, len(vertices))
        return []
    ranked = sorted(vertices, key=lambda v: v.degree, reverse=True)
    return [(v.code, v.degree) for v in ranked[:k]]


def undirected_neighbours(graph):
    """Adjacency sets of the graph with edge direction and multiplicity dropped."""
    neighbours = {code: [] for code in graph.codes()}
    seen = {code: set() for code in neighbours}
    for vertex in graph.vertices():
        for edge in vertex.adj:
            a, b = vertex.code, edge.dest.code
            if a == b or b in seen[a]:
                continue
            seen[a].add(b)
            seen[b].add(a)
            neighbours[a].append(b)
            neighbours[b].append(a)
    return neighbours


def articulation_points(graph):
    """Airports whose removal splits the (undirected) network into more pieces."""
    neighbours = undirected_neighbours(graph)
    disc = {}
    low = {}
    points = set()
    timer = 0

    for root in neighbours:
        if root in disc:
            continue
        disc[root] = low[root] = timer
        timer += 1
        root_children = 0
        stack = [(root, None, iter(neighbours[root]))]
        while stack:
            node, parent, it = stack[-1]
            for nxt in it:
                if nxt == parent:
                    continue
                if nxt in disc:
                    low[node] = min(low[node], disc[nxt])
                    continue
                disc[nxt] = low[nxt] = timer
                timer += 1
                if node == root:
                    root_children += 1
                stack.append((nxt, node, iter(neighbours[nxt])))
                break
            else:
                stack.pop()
                if parent is not None:
                    low[parent] = min(low[parent], low[node])
                    if parent != root and low[node] >= disc[parent]:
                        points.add(parent)
        if root_children > 1:
            points.add(root)
    return points


def component_count(graph, removed=None):
    """Connected components of the undirected network, ignoring ``removed``."""
    neighbours = undirected_neighbours(graph)
    visited = set()
    count = 0
    for code in neighbours:
        if code == removed or code in visited:
            continue
        count += 1
        visited.add(code)
        stack = [code]
        while stack:
            current = stack.pop()
            for nxt in neighbours[current]:
                if nxt != removed and nxt not in visited:
                    visited.add(nxt)
                    stack.append(nxt)
    return count
