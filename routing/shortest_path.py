"""Dijkstra shortest-path search over an explicit weighted adjacency mapping."""

import heapq
import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from core.errors import InvalidGraphError
from core.types import NodeID

logger = logging.getLogger(__name__)

# node -> {neighbor -> non-negative edge weight}
WeightedGraph = Mapping[NodeID, Mapping[NodeID, float]]


@dataclass(frozen=True)
class PathResult:
    """Outcome of a shortest-path search.

    Attributes:
        path: Node IDs from start to end (inclusive). Empty if end is unreachable.
        cost: Total accumulated weight. math.inf if end is unreachable.
    """

    path: tuple[NodeID, ...]
    cost: float

    @property
    def found(self) -> bool:
        """True if a path exists (including the single-node start == end path)."""
        return bool(self.path)

    @classmethod
    def unreachable(cls) -> "PathResult":
        """Result used when end cannot be reached from start."""
        return cls(path=(), cost=math.inf)


class ShortestPathSolver:
    """Classic Dijkstra with a binary-heap frontier.

    Relaxed nodes are re-inserted into the heap rather than having their
    priority decreased in place; stale entries are discarded when popped.

    Weights must be non-negative. A negative weight raises InvalidGraphError
    before any search is attempted.
    """

    def compute(self, graph: WeightedGraph, start: NodeID, end: NodeID) -> PathResult:
        """Find the cheapest path from start to end.

        Args:
            graph: Adjacency mapping node -> {neighbor: weight}
            start: Source node ID
            end: Target node ID

        Returns:
            PathResult with the start->end node sequence and its cost, or an
            empty path with infinite cost if end is unreachable or either
            node is absent from the graph.

        Raises:
            InvalidGraphError: If any edge weight is negative

        Complexity:
            O((V + E) log V)
        """
        self._validate_weights(graph)

        known = self._known_nodes(graph)
        if start not in known or end not in known:
            return PathResult.unreachable()

        if start == end:
            return PathResult(path=(start,), cost=0.0)

        dist: dict[NodeID, float] = {node: math.inf for node in known}
        dist[start] = 0.0
        prev: dict[NodeID, NodeID] = {}
        finalized: set[NodeID] = set()

        # Priority queue: (distance, counter, node_id)
        counter = 0
        frontier: list[tuple[float, int, NodeID]] = [(0.0, counter, start)]
        counter += 1
        pops = 0

        while frontier:
            current_dist, _, current = heapq.heappop(frontier)
            pops += 1

            # Stale entry left behind by a later relaxation
            if current in finalized or current_dist > dist[current]:
                continue
            finalized.add(current)

            if current == end:
                break

            for neighbor, weight in graph.get(current, {}).items():
                if neighbor == current or neighbor in finalized:
                    continue

                tentative = current_dist + weight
                if tentative < dist[neighbor]:
                    dist[neighbor] = tentative
                    prev[neighbor] = current
                    heapq.heappush(frontier, (tentative, counter, neighbor))
                    counter += 1

        logger.debug(f"Dijkstra {start}->{end}: {pops} pops, {len(finalized)} finalized")

        if end not in prev:
            return PathResult.unreachable()

        path = [end]
        node = end
        while node in prev:
            node = prev[node]
            path.append(node)
        path.reverse()

        return PathResult(path=tuple(path), cost=dist[end])

    @staticmethod
    def _known_nodes(graph: WeightedGraph) -> set[NodeID]:
        """All node IDs that appear as a key or as a neighbor."""
        nodes = set(graph.keys())
        for neighbors in graph.values():
            nodes.update(neighbors.keys())
        return nodes

    @staticmethod
    def _validate_weights(graph: WeightedGraph) -> None:
        for node, neighbors in graph.items():
            for neighbor, weight in neighbors.items():
                if weight < 0:
                    raise InvalidGraphError(
                        f"Edge {node}->{neighbor} has negative weight {weight}"
                    )


def path_cost(graph: WeightedGraph, path: Sequence[NodeID]) -> float:
    """Sum the edge weights along path.

    Returns:
        Total weight, 0.0 for a single-node path, math.inf if the path is
        empty or uses an edge that is not in the graph.
    """
    if not path:
        return math.inf

    total = 0.0
    for from_node, to_node in zip(path, path[1:]):
        neighbors = graph.get(from_node, {})
        if to_node not in neighbors:
            return math.inf
        total += neighbors[to_node]
    return total
