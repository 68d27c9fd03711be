from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Set, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Edge, Graph, path_cost


def build_networkx_graph(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(graph.names())
    for edge in graph.edges():
        g.add_edge(edge.start, edge.end, km=edge.weight)
    return g


def route_nodes(route: Sequence[Edge]) -> List[str]:
    if not route:
        return []
    return [route[0].start] + [edge.end for edge in route]


def route_subgraph(graph: Graph, route: Sequence[Edge], radius: int = 1) -> nx.Graph:
    """Keep the countries on the route plus everything within radius borders of it."""
    full = build_networkx_graph(graph)
    keep: Set[str] = set()
    for node in route_nodes(route):
        keep.update(nx.single_source_shortest_path_length(full, node, cutoff=radius))
    return full.subgraph(keep).copy()


def compute_layout(graph_nx: nx.Graph) -> Dict[str, Tuple[float, float]]:
    return nx.spring_layout(graph_nx, seed=42)


def route_edges(route: Sequence[Edge]) -> List[Tuple[str, str]]:
    return [(edge.start, edge.end) for edge in route]


def draw_route(
    graph: Graph,
    route: Sequence[Edge],
    output: Path | None,
    show: bool = False,
    radius: int = 1,
) -> None:
    graph_nx = route_subgraph(graph, route, radius=radius)
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    highlighted = route_edges(route)
    if highlighted:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=highlighted,
            edge_color="#d62728",
            width=2.5,
            ax=ax,
        )

    on_route = set(route_nodes(route))
    node_colors = ["#d62728" if node in on_route else "#9ecae1" for node in graph_nx.nodes]
    nx.draw_networkx_nodes(graph_nx, layout, node_color=node_colors, node_size=400, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, font_size=8, ax=ax)

    edge_labels = {(edge.start, edge.end): f"{edge.weight} km" for edge in route}
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    if route:
        title = f"{route[0].start} to {route[-1].end}: {path_cost(list(route))} km"
    else:
        title = "No route"
    ax.set_axis_off()
    ax.set_title(title)

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)
