"""Directed multigraph of airports (vertices) and flights (edges).

Vertices keep insertion order, which is the order of the source dataset.
Several algorithms break ties by that order, so it must stay stable.

Vertices carry no traversal state: every traversal keeps its own
visitation map, so queries never interfere with one another.
"""

import logging

log = logging.getLogger("flightnet")


class Edge:
    __slots__ = ("dest", "airline", "distance")

    def __init__(self, dest, airline, distance=0.0):
        self.dest = dest
        self.airline = airline
        self.distance = distance

    def __repr__(self):
        return f"Edge(->{self.dest.code}, {self.airline}, {self.distance:.0f}km)"


class Vertex:
    __slots__ = ("code", "adj", "indegree", "outdegree")

    def __init__(self, code):
        self.code = code
        self.adj = []
        self.indegree = 0
        self.outdegree = 0

    @property
    def degree(self):
        return self.indegree + self.outdegree

    def __repr__(self):
        return f"Vertex({self.code}, out={self.outdegree}, in={self.indegree})"


class Graph:
    def __init__(self):
        self._vertices = {}
        self._edge_count = 0

    def __len__(self):
        return len(self._vertices)

    def __contains__(self, code):
        return code in self._vertices

    def find_vertex(self, code):
        return self._vertices.get(code)

    def add_vertex(self, code):
        if code in self._vertices:
            return False
        self._vertices[code] = Vertex(code)
        return True

    def add_edge(self, source, target, airline, distance=0.0):
        """Add a flight; parallel edges are kept. False if an endpoint is unknown."""
        src = self._vertices.get(source)
        dst = self._vertices.get(target)
        if src is None or dst is None:
            log.debug("Rejected flight %s -> %s (%s): unknown airport", source, target, airline)
            return False
        src.adj.append(Edge(dst, airline, distance))
        src.outdegree += 1
        dst.indegree += 1
        self._edge_count += 1
        return True

    def vertices(self):
        return list(self._vertices.values())

    def codes(self):
        return list(self._vertices)

    def edge_count(self):
        return self._edge_count

    def airlines_between(self, source, target, airlines=None):
        """Airline codes flying source -> target, in adjacency order, without repeats."""
        vertex = self._vertices.get(source)
        if vertex is None:
            return ()
        found = []
        for edge in vertex.adj:
            if edge.dest.code != target:
                continue
            if airlines is not None and edge.airline not in airlines:
                continue
            if edge.airline not in found:
                found.append(edge.airline)
        return tuple(found)

    def distance_between(self, source, target):
        """Great-circle length of the first source -> target edge, or None."""
        vertex = self._vertices.get(source)
        if vertex is None:
            return None
        for edge in vertex.adj:
            if edge.dest.code == target:
                return edge.distance
        return None
