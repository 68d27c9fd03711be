from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional, Tuple

from aliases import AliasTable
from graph import Graph
from loaders import REFERENCE_DATE, read_borders, read_distances, read_state_ids


logger = logging.getLogger(__name__)


def resolve_distance(
    distances: Mapping[Tuple[str, str], int],
    first_id: Optional[str],
    second_id: Optional[str],
) -> Optional[int]:
    """Look the id pair up in either order; None when neither is present."""
    distance = distances.get((first_id, second_id))
    if distance is None:
        distance = distances.get((second_id, first_id))
    return distance


def build_country_graph(
    borders: Mapping[str, Iterable[str]],
    distances: Mapping[Tuple[str, str], int],
    state_ids: Mapping[str, str],
    aliases: AliasTable,
) -> Graph:
    """Populate a read-only country graph from the three loaded datasets.

    Every name is normalised before use. A border pair becomes an edge only
    when a capital distance exists for the two ids; later pairs overwrite
    earlier weights. Countries without a state id stay as isolated vertices.
    """
    graph = Graph()
    skipped = 0

    for country_name, neighbor_names in borders.items():
        country = aliases.normalize(country_name)
        graph.add_vertex(country)
        country_id = state_ids.get(country)

        for neighbor_name in neighbor_names:
            neighbor = aliases.normalize(neighbor_name)
            graph.add_vertex(neighbor)

            distance = resolve_distance(distances, country_id, state_ids.get(neighbor))
            if distance is None:
                skipped += 1
                logger.debug("No capital distance for %s - %s", country, neighbor)
                continue
            graph.add_edge(country, neighbor, distance)

    graph.freeze()
    edge_count = sum(1 for _ in graph.edges())
    logger.info(
        "Country graph built: %d countries, %d borders, %d border pairs without distance",
        len(graph),
        edge_count,
        skipped,
    )
    return graph


def load_country_graph(
    borders_path: Path,
    capdist_path: Path,
    state_name_path: Path,
    aliases: AliasTable,
    reference_date: str = REFERENCE_DATE,
) -> Graph:
    """Read the three data files and build the graph.

    Raises loaders.DataLoadError when any file cannot be read.
    """
    borders = read_borders(borders_path)
    distances = read_distances(capdist_path)
    state_ids = read_state_ids(state_name_path, reference_date)
    return build_country_graph(borders, distances, state_ids, aliases)
