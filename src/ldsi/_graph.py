"""Directed, weighted token co-occurrence graph."""

from __future__ import annotations

from typing import Iterator

# Sliding window width for co-occurrence
WINDOW_SIZE: int = 5


class CooccurrenceGraph:
    """Node arena plus sparse weighted edges.

    Nodes are unique tokens stored in first-seen order; a token's index in
    the arena is its node id. Edges are keyed by (from_id, to_id) and carry
    an integer weight. Per-node successor and predecessor lists keep edge
    insertion order so every traversal is deterministic.
    """

    __slots__ = ("_tokens", "_index", "_weights", "_succ", "_pred")

    def __init__(self) -> None:
        self._tokens: list[str] = []
        self._index: dict[str, int] = {}
        self._weights: dict[tuple[int, int], int] = {}
        self._succ: list[list[int]] = []
        self._pred: list[list[int]] = []

    @classmethod
    def from_tokens(
        cls, tokens: list[str], window_size: int = WINDOW_SIZE
    ) -> CooccurrenceGraph:
        """Build the graph from a token sequence.

        Every contiguous window of min(window_size, len(tokens)) tokens adds
        an edge from each token to every later token in the same window.
        """
        graph = cls()
        ids = [graph.add_node(t) for t in tokens]

        if len(ids) < 2:
            return graph

        width = min(window_size, len(ids))
        for start in range(len(ids) - width + 1):
            window = ids[start : start + width]
            for i in range(width):
                for j in range(i + 1, width):
                    graph.add_edge(window[i], window[j])
        return graph

    # -- Construction --

    def add_node(self, token: str) -> int:
        """Return the node id of token, creating the node if needed."""
        node = self._index.get(token)
        if node is None:
            node = len(self._tokens)
            self._tokens.append(token)
            self._index[token] = node
            self._succ.append([])
            self._pred.append([])
        return node

    def add_edge(self, src: int, dst: int) -> None:
        """Insert edge src -> dst with weight 1, or increment its weight.

        Self loops are ignored.
        """
        if src == dst:
            return
        key = (src, dst)
        weight = self._weights.get(key)
        if weight is None:
            self._weights[key] = 1
            self._succ[src].append(dst)
            self._pred[dst].append(src)
        else:
            self._weights[key] = weight + 1

    # -- Queries --

    @property
    def node_count(self) -> int:
        return len(self._tokens)

    @property
    def edge_count(self) -> int:
        return len(self._weights)

    def nodes(self) -> range:
        return range(len(self._tokens))

    def token(self, node: int) -> str:
        return self._tokens[node]

    def node_id(self, token: str) -> int | None:
        return self._index.get(token)

    def weight(self, src: int, dst: int) -> int:
        """Co-occurrence count of src -> dst, 0 if there is no edge."""
        return self._weights.get((src, dst), 0)

    def has_edge(self, src: int, dst: int) -> bool:
        return (src, dst) in self._weights

    def connected(self, a: int, b: int) -> bool:
        """True if an edge joins a and b in either direction."""
        return (a, b) in self._weights or (b, a) in self._weights

    def successors(self, node: int) -> list[int]:
        return self._succ[node]

    def out_degree(self, node: int) -> int:
        return len(self._succ[node])

    def neighbors_undirected(self, node: int) -> Iterator[int]:
        """Distinct neighbors ignoring direction, successors first."""
        seen: set[int] = set()
        for other in self._succ[node]:
            if other not in seen:
                seen.add(other)
                yield other
        for other in self._pred[node]:
            if other not in seen:
                seen.add(other)
                yield other

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __repr__(self) -> str:
        return (
            f"CooccurrenceGraph(nodes={self.node_count}, "
            f"edges={self.edge_count})"
        )
