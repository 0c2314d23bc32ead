"""
Shortest-path and selection helpers built on :class:`PriorityQueue`.

The queue holds ``(distance, node)`` tuples. When a shorter route to a node
that is still queued turns up, its stale tuple is taken out with
``PriorityQueue.remove`` and the improved one is added, so the queue never
holds more than one entry per node (decrease-key by value removal).

Graphs are plain mappings ``node -> iterable of (neighbour, weight)``; nodes
only need to be hashable and orderable (ties on distance compare nodes).
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, TypeVar

from ..datastructures import PriorityQueue

N = TypeVar("N", bound=Hashable)
T = TypeVar("T")

Graph = Mapping[N, Iterable[Tuple[N, float]]]

logger = logging.getLogger(__name__)


def dijkstra(graph: Graph, source: N) -> Tuple[Dict[N, float], Dict[N, Optional[N]]]:
    """
    Single-source shortest distances over non-negative edge weights.

    Returns:
        (dist, prev): `dist[v]` is the cost of the cheapest path from `source`
        to every reachable `v`; `prev[v]` is the node before `v` on that path
        (None for the source).

    Raises:
        KeyError: if `source` is not a node of `graph`.
        ValueError: if a negative edge weight is encountered.
    """
    if source not in graph:
        raise KeyError(source)

    dist: Dict[N, float] = {source: 0.0}
    prev: Dict[N, Optional[N]] = {source: None}
    done = set()

    pq: PriorityQueue[Tuple[float, N]] = PriorityQueue()
    pq.add((0.0, source))

    while not pq.is_empty():
        d, u = pq.poll()
        done.add(u)
        for v, w in graph.get(u, ()):
            if w < 0:
                raise ValueError(f"negative edge weight {w!r} on {u!r} -> {v!r}")
            if v in done:
                continue
            nd = d + w
            old = dist.get(v)
            if old is not None and nd >= old:
                continue
            if old is not None:
                # Decrease-key: drop the stale entry before queueing the better one.
                pq.remove((old, v))
                logger.debug("decrease-key %r: %s -> %s", v, old, nd)
            dist[v] = nd
            prev[v] = u
            pq.add((nd, v))

    return dist, prev


def shortest_path(graph: Graph, source: N, target: N) -> Tuple[float, List[N]]:
    """
    Cheapest path from `source` to `target`.

    Returns ``(cost, [source, ..., target])``, or ``(inf, [])`` if `target`
    cannot be reached.
    """
    dist, prev = dijkstra(graph, source)
    if target not in dist:
        return math.inf, []

    path: List[N] = []
    node: Optional[N] = target
    while node is not None:
        path.append(node)
        node = prev[node]
    path.reverse()
    return dist[target], path


def k_smallest(items: Iterable[T], k: int) -> List[T]:
    """Return the `k` smallest items in ascending order (heapify, then `k` polls)."""
    if k <= 0:
        return []
    pq: PriorityQueue[T] = PriorityQueue(items)
    out: List[T] = []
    while len(out) < k and not pq.is_empty():
        out.append(pq.poll())
    return out
