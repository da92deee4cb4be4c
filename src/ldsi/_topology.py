"""Structural coherence of a text via its co-occurrence graph.

A connected, clustered graph reads as structured discourse; a graph broken
into many small components reads as drift or noise.
"""

from __future__ import annotations

from collections import deque

from ._graph import CooccurrenceGraph
from ._tokenizer import tokenize
from ._types import TopologyResult

# Number of BFS sources used to estimate the average path length
PATH_SAMPLE_SIZE: int = 50

# topology_delta weights
LCC_WEIGHT: float = 0.5
CLUSTERING_WEIGHT: float = 0.3
FRAGMENTATION_PENALTY: float = -0.2
FRAGMENTATION_FACTOR: int = 2
DELTA_BASELINE: float = 0.5

_EMPTY = TopologyResult(
    node_count=0,
    edge_count=0,
    density=0.0,
    components=0,
    lcc_size=0,
    lcc_ratio=0.0,
    clustering_coefficient=0.0,
    avg_path_length=0.0,
    small_world_index=0.0,
    avg_degree=0.0,
)


def _density(node_count: int, edge_count: int) -> float:
    if node_count < 2:
        return 0.0
    return edge_count / (node_count * (node_count - 1))


def _component_sizes(graph: CooccurrenceGraph) -> list[int]:
    """Sizes of the weakly connected components, in discovery order."""
    visited = [False] * graph.node_count
    sizes: list[int] = []

    for start in graph.nodes():
        if visited[start]:
            continue
        visited[start] = True
        size = 0
        queue = deque([start])
        while queue:
            current = queue.popleft()
            size += 1
            for other in graph.neighbors_undirected(current):
                if not visited[other]:
                    visited[other] = True
                    queue.append(other)
        sizes.append(size)

    return sizes


def _local_clustering(graph: CooccurrenceGraph, node: int) -> float:
    neighbors = list(graph.neighbors_undirected(node))
    k = len(neighbors)
    if k < 2:
        return 0.0

    # Ordered pairs: each linked neighbor pair counts twice
    links = 0
    for n1 in neighbors:
        for n2 in neighbors:
            if n1 != n2 and graph.connected(n1, n2):
                links += 1
    return links / (k * (k - 1))


def _average_clustering(graph: CooccurrenceGraph) -> float:
    n = graph.node_count
    if n == 0:
        return 0.0
    return sum(_local_clustering(graph, v) for v in graph.nodes()) / n


def _average_path_length(graph: CooccurrenceGraph) -> float:
    """Mean directed shortest-path length from a sample of source nodes.

    Sources are the first PATH_SAMPLE_SIZE nodes in creation order. Only
    reachable (source, target) pairs are counted.
    """
    n = graph.node_count
    if n < 2:
        return 0.0

    total_length = 0
    path_count = 0
    for source in range(min(n, PATH_SAMPLE_SIZE)):
        dist = {source: 0}
        queue = deque([source])
        while queue:
            current = queue.popleft()
            d = dist[current] + 1
            for other in graph.successors(current):
                if other not in dist:
                    dist[other] = d
                    queue.append(other)
                    total_length += d
                    path_count += 1

    if path_count == 0:
        return 0.0
    return total_length / path_count


def _average_degree(graph: CooccurrenceGraph) -> float:
    n = graph.node_count
    if n == 0:
        return 0.0
    return sum(graph.out_degree(v) for v in graph.nodes()) / n


def analyze_graph(graph: CooccurrenceGraph) -> TopologyResult:
    """Compute every topology metric of an already built graph."""
    node_count = graph.node_count
    if node_count == 0:
        return _EMPTY

    edge_count = graph.edge_count
    sizes = _component_sizes(graph)
    lcc_size = max(sizes)
    clustering = _average_clustering(graph)
    path_length = _average_path_length(graph)

    return TopologyResult(
        node_count=node_count,
        edge_count=edge_count,
        density=_density(node_count, edge_count),
        components=len(sizes),
        lcc_size=lcc_size,
        lcc_ratio=lcc_size / node_count,
        clustering_coefficient=clustering,
        avg_path_length=path_length,
        small_world_index=clustering / path_length if path_length > 0.0 else 0.0,
        avg_degree=_average_degree(graph),
    )


def analyze_topology(text: str) -> TopologyResult:
    """Full graph analysis of a text. Empty text gives an all-zero result."""
    tokens = tokenize(text)
    if not tokens:
        return _EMPTY
    return analyze_graph(CooccurrenceGraph.from_tokens(tokens))


def delta_between(topo_a: TopologyResult, topo_b: TopologyResult) -> float:
    """Structure-conservation score of B relative to A, centered on 0.5."""
    lcc_score = topo_b.lcc_ratio - topo_a.lcc_ratio
    clustering_score = (
        topo_b.clustering_coefficient - topo_a.clustering_coefficient
    )
    penalty = (
        FRAGMENTATION_PENALTY
        if topo_b.components > FRAGMENTATION_FACTOR * topo_a.components
        else 0.0
    )
    return (
        lcc_score * LCC_WEIGHT
        + clustering_score * CLUSTERING_WEIGHT
        + penalty
        + DELTA_BASELINE
    )


def topology_delta(text_a: str, text_b: str) -> float:
    """Above 0.5: B's structure improved on A's; below: it degraded."""
    return delta_between(analyze_topology(text_a), analyze_topology(text_b))
