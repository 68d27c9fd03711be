from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from aliases import AliasTable
from builder import load_country_graph
from graph import Edge, Graph, path_cost, shortest_path
from loaders import REFERENCE_DATE


class RoadTrip:
    """Distance and route queries over a built country graph.

    Unknown countries and missing routes are reported as -1 or an empty
    list, never raised.
    """

    def __init__(self, graph: Graph, aliases: AliasTable) -> None:
        self.graph = graph
        self.aliases = aliases

    @classmethod
    def from_files(
        cls,
        borders_path: Path,
        capdist_path: Path,
        state_name_path: Path,
        aliases: Optional[AliasTable] = None,
        reference_date: str = REFERENCE_DATE,
    ) -> "RoadTrip":
        aliases = aliases if aliases is not None else AliasTable.default()
        graph = load_country_graph(
            borders_path, capdist_path, state_name_path, aliases, reference_date
        )
        return cls(graph, aliases)

    def canonical(self, name: str) -> str:
        return self.aliases.normalize(name)

    def is_known(self, name: str) -> bool:
        return self.graph.contains_vertex(self.canonical(name))

    def shares_border(self, country1: str, country2: str) -> bool:
        vertex = self.graph.get_vertex(self.canonical(country1))
        other = self.canonical(country2)
        return vertex is not None and other in self.graph and other in vertex.neighbors

    def distance(self, country1: str, country2: str) -> int:
        """Distance in km between two directly bordering countries.

        Returns 0 for the same country, -1 when either is unknown or when the
        two do not share a border, even if a longer route exists.
        """
        name1 = self.canonical(country1)
        name2 = self.canonical(country2)
        if name1 not in self.graph or name2 not in self.graph:
            return -1
        if name1 == name2:
            return 0
        if not self.shares_border(country1, country2):
            return -1
        path = shortest_path(self.graph, name1, name2)
        if not path:
            return -1
        return path_cost(path)

    def find_route(self, country1: str, country2: str) -> List[Edge]:
        name1 = self.canonical(country1)
        name2 = self.canonical(country2)
        if name1 not in self.graph or name2 not in self.graph:
            return []
        return shortest_path(self.graph, name1, name2)

    def find_path(self, country1: str, country2: str) -> List[str]:
        """Border crossings on the shortest route, e.g. "France --> Spain (1054 km.)"."""
        return self.format_route(self.find_route(country1, country2), country1, country2)

    def format_route(self, route: List[Edge], country1: str, country2: str) -> List[str]:
        return [self._format_edge(edge, country1, country2) for edge in route]

    def _display_name(self, name: str, country1: str, country2: str) -> str:
        # Route endpoints echo the caller's spelling; intermediate hops stay canonical.
        if self.canonical(country1) == name:
            return country1
        if self.canonical(country2) == name:
            return country2
        return name

    def _format_edge(self, edge: Edge, country1: str, country2: str) -> str:
        start = self._display_name(edge.start, country1, country2)
        end = self._display_name(edge.end, country1, country2)
        return f"{start} --> {end} ({edge.weight} km.)"
