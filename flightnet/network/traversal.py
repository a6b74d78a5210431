"""Breadth-first and depth-first walks over a Graph.

Every walk owns its visitation state, so nothing has to be reset between
calls.
"""

from collections import deque


def dfs_visit(graph, start, visited=None):
    """Codes reachable from ``start`` in depth-first preorder.

    Siblings are explored in adjacency-list order. Pass ``visited`` to share
    one visitation set across several roots.
    """
    if visited is None:
        visited = set()
    vertex = graph.find_vertex(start)
    if vertex is None or start in visited:
        return []

    order = [start]
    visited.add(start)
    stack = [iter(vertex.adj)]
    while stack:
        for edge in stack[-1]:
            code = edge.dest.code
            if code not in visited:
                visited.add(code)
                order.append(code)
                stack.append(iter(edge.dest.adj))
                break
        else:
            stack.pop()
    return order


def bfs_at_distance(graph, start, max_hops):
    """Every code within ``max_hops`` hops of ``start``, start included."""
    if max_hops < 0 or start not in graph:
        return []
    return list(bfs_distances(graph, start, max_hops=max_hops))


def bfs_distances(graph, start, airlines=None, max_hops=None):
    """Minimum hop count from ``start`` to every reachable code.

    Optionally restricted to flights of ``airlines`` and to ``max_hops``.
    The returned dict is ordered by discovery.
    """
    vertex = graph.find_vertex(start)
    if vertex is None:
        return {}

    dist = {start: 0}
    queue = deque([vertex])
    while queue:
        current = queue.popleft()
        d = dist[current.code]
        if max_hops is not None and d >= max_hops:
            continue
        for edge in current.adj:
            if airlines is not None and edge.airline not in airlines:
                continue
            code = edge.dest.code
            if code not in dist:
                dist[code] = d + 1
                queue.append(edge.dest)
    return dist
