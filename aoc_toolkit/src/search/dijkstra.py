"""Dijkstra shortest path over a caller-defined implicit graph.

The graph is never materialised: a :class:`DijkstraController` names the
start and target nodes, produces the neighbours of any node on demand and is
told when each node's distance becomes final. Nodes are opaque to the engine
and only need to be hashable and comparable for equality, e.g. ``(x, y)`` or
``(x, y, direction)`` tuples.

When a target may be reached in several "states" (such as the direction of
arrival), the controller still exposes a single target node and links every
variant of the real end cell to it with a zero-cost edge.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import sys
from abc import ABC, abstractmethod
from typing import Dict, Generic, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

from ..utils.logger import get_logger

N = TypeVar("N", bound=Hashable)

# Returned when the frontier empties before the target is finalised.
UNREACHABLE = sys.maxsize

logger = get_logger(__name__)


class DijkstraController(ABC, Generic[N]):
    """Interface a caller implements to be searched by :func:`dijkstra`."""

    @abstractmethod
    def get_starting_node(self) -> N:
        """Return the node the search starts from."""

    @abstractmethod
    def get_target_node(self) -> N:
        """Return the node that ends the search once finalised.

        A node that never appears in the graph forces a full exploration.
        """

    @abstractmethod
    def get_neighbors_distances(self, node: N) -> Iterable[Tuple[N, int]]:
        """Return ``(neighbor, weight)`` pairs reachable in one hop.

        Weights must be non-negative. Already finalised or duplicate
        neighbours may be included; the engine filters them.
        """

    def mark_visited_distance(self, node: N, distance: int, previous: Optional[N]) -> None:
        """Called once per node when its shortest distance becomes final.

        ``previous`` is the predecessor on one shortest path, ``None`` for
        the start node. The engine does not depend on anything done here.
        """


def dijkstra(
    controller: DijkstraController[N],
    explore_all: bool = False,
    log: Optional[logging.Logger] = None,
) -> int:
    """Return the shortest distance from the start node to the target node.

    With ``explore_all`` the search goes on after the target is finalised so
    that every reachable node gets reported to the controller; the target
    distance is still returned. ``UNREACHABLE`` is returned if the target is
    never finalised.
    """
    log = log or logger

    finalized: Set[N] = set()
    # node -> (tentative distance, predecessor)
    frontier: Dict[N, Tuple[int, Optional[N]]] = {}
    # (distance, sequence, node); the sequence keeps nodes out of comparisons
    # and resolves ties in discovery order. Entries superseded by a better
    # distance stay in the heap and are skipped when popped.
    heap: List[Tuple[int, int, N]] = []
    sequence = itertools.count()

    start = controller.get_starting_node()
    target = controller.get_target_node()
    frontier[start] = (0, None)
    heapq.heappush(heap, (0, next(sequence), start))

    target_distance: Optional[int] = None

    while frontier:
        distance, _, node = heapq.heappop(heap)
        entry = frontier.get(node)
        if entry is None or entry[0] != distance:
            continue

        del frontier[node]
        finalized.add(node)
        controller.mark_visited_distance(node, distance, entry[1])

        if node == target:
            target_distance = distance
            if not explore_all:
                log.debug("Target reached at distance %d after %d nodes", distance, len(finalized))
                return distance

        for next_node, weight in controller.get_neighbors_distances(node):
            if next_node in finalized:
                continue
            total = distance + weight
            known = frontier.get(next_node)
            if known is None or total < known[0]:
                frontier[next_node] = (total, node)
                heapq.heappush(heap, (total, next(sequence), next_node))

    log.debug("Explored %d nodes", len(finalized))
    if target_distance is not None:
        return target_distance

    log.warning("Dijkstra algorithm finished exploring all nodes without reaching target")
    return UNREACHABLE


__all__ = ["DijkstraController", "UNREACHABLE", "dijkstra"]
