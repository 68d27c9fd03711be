from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from heapq import heappop, heappush
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple


logger = logging.getLogger(__name__)


class GraphValidationError(ValueError):
    """Raised when an edge weight is not a non-negative integer."""


class GraphFrozenError(RuntimeError):
    """Raised when the graph is mutated after the build phase."""


@dataclass(frozen=True)
class Edge:
    start: str
    end: str
    weight: int


@dataclass
class Vertex:
    name: str
    _neighbors: Dict[str, int] = field(default_factory=dict, repr=False)

    @property
    def neighbors(self) -> Mapping[str, int]:
        return MappingProxyType(self._neighbors)


class Graph:
    """Undirected weighted graph keyed by canonical country name."""

    def __init__(self) -> None:
        self._vertices: Dict[str, Vertex] = {}
        self._frozen = False

    def __contains__(self, name: object) -> bool:
        return name in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Graph":
        self._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph is read-only once built.")

    def add_vertex(self, name: str) -> Vertex:
        self._check_mutable()
        vertex = self._vertices.get(name)
        if vertex is None:
            vertex = Vertex(name)
            self._vertices[name] = vertex
        return vertex

    def add_edge(self, name1: str, name2: str, weight: int) -> None:
        """Connect two existing vertices, overwriting any previous weight.

        A missing endpoint makes this a no-op: unresolved ids upstream leave
        countries isolated rather than failing the build.
        """
        self._check_mutable()
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise GraphValidationError(
                f"Edge {name1}-{name2} needs a non-negative integer weight, got {weight!r}."
            )
        v1 = self._vertices.get(name1)
        v2 = self._vertices.get(name2)
        if v1 is None or v2 is None:
            logger.debug("Skipping edge %s-%s: endpoint not in graph", name1, name2)
            return
        v1._neighbors[name2] = weight
        v2._neighbors[name1] = weight

    def get_vertex(self, name: str) -> Optional[Vertex]:
        return self._vertices.get(name)

    def contains_vertex(self, name: str) -> bool:
        return name in self._vertices

    def names(self) -> List[str]:
        return list(self._vertices)

    def neighbors(self, name: str) -> Mapping[str, int]:
        return self._vertices[name].neighbors

    def weight(self, name1: str, name2: str) -> Optional[int]:
        vertex = self._vertices.get(name1)
        if vertex is None:
            return None
        return vertex.neighbors.get(name2)

    def edges(self) -> Iterator[Edge]:
        """Yield every undirected edge once, in vertex insertion order."""
        seen = set()
        for name, vertex in self._vertices.items():
            for neighbor, weight in vertex.neighbors.items():
                if neighbor in seen:
                    continue
                yield Edge(name, neighbor, weight)
            seen.add(name)

    def dijkstra(self, source: str) -> Tuple[Dict[str, float], Dict[str, Optional[str]]]:
        """Relax every vertex reachable from source and return (costs, predecessors).

        A vertex is settled the first time it leaves the heap; settled vertices
        are never relaxed again and stale heap entries are dropped. Vertices
        that stay out of reach keep cost math.inf and predecessor None. Heap
        entries compare as (cost, name), so of two vertices with the same cost
        the alphabetically smaller one is settled first.
        """
        costs: Dict[str, float] = {name: math.inf for name in self._vertices}
        predecessors: Dict[str, Optional[str]] = {name: None for name in self._vertices}
        settled = set()
        costs[source] = 0

        queue: List[Tuple[float, str]] = [(0, source)]

        while queue:
            cost_u, u = heappop(queue)
            if u in settled or cost_u > costs[u]:
                continue
            settled.add(u)

            for v, weight in self.neighbors(u).items():
                if v in settled:
                    continue
                candidate = cost_u + weight
                if candidate < costs[v]:
                    costs[v] = candidate
                    predecessors[v] = u
                    heappush(queue, (candidate, v))

        return costs, predecessors


def shortest_path(graph: Graph, start: str, end: str) -> List[Edge]:
    """Return the minimum-weight edge sequence from start to end.

    The result is empty when either vertex is unknown, when start == end,
    or when end cannot be reached.
    """
    if start not in graph or end not in graph:
        return []

    _, predecessors = graph.dijkstra(start)

    path: List[Edge] = []
    current = end
    while predecessors[current] is not None:
        previous = predecessors[current]
        path.append(Edge(previous, current, graph.neighbors(current)[previous]))
        current = previous
    path.reverse()
    return path


def path_cost(path: List[Edge]) -> int:
    """Return the total weight of walking along the given edges."""
    return sum(edge.weight for edge in path)
