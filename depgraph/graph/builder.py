"""
depgraph/graph/builder.py — Graph construction engine.

GraphBuilder accumulates nodes and edges between opaque domain objects,
deduplicates them by a caller-supplied identity function, and hands an
ordered snapshot to a pluggable formatter.

Lifecycle of one builder:
    1. Add phase     — add_node(), add_edge(), add_permanent_edge()
    2. Derive phase  — reduce_edges(), detect_cycles()   (both optional)
    3. Format phase  — format() / str(builder)

Three structures are kept in step during the add phase:
    - Node registry     : id → Node, insertion-ordered (first-seen position)
    - Edge set          : insertion-ordered, deduplicated on all four fields
    - Reachability index: append-only history of parent links

A builder is not safe for concurrent mutation.
"""

import logging
from typing import Any

import networkx as nx

from depgraph.formatters.dot import DotGraphFormatter
from depgraph.graph.cycles import find_cycle, has_cycle
from depgraph.graph.model import Edge, EdgeRenderer, GraphFormatter, Node, NodeRenderer
from depgraph.graph.reachability import ReachabilityMap

logger = logging.getLogger(__name__)


def _empty_node_name(node: Any) -> str:
    return ""


def _empty_edge_label(from_node: Any, to_node: Any) -> str:
    return ""


class GraphBuilder:
    """
    Builds a directed graph and serializes it through a GraphFormatter.

    Args:
        node_id_renderer:     Identity function payload → id. Must be pure;
                              equal ids denote the same logical node. Fixed
                              for the life of the builder.
        graph_name:           Name handed to the formatter (default 'G').
        node_name_renderer:   payload → display name (default: empty string).
        edge_renderer:        (from_payload, to_payload) → edge label
                              (default: empty string).
        formatter:            GraphFormatter (default: DotGraphFormatter()).
        omit_self_references: Drop edges whose endpoint ids are equal.
    """

    def __init__(
        self,
        node_id_renderer: NodeRenderer,
        *,
        graph_name: str = "G",
        node_name_renderer: NodeRenderer | None = None,
        edge_renderer: EdgeRenderer | None = None,
        formatter: GraphFormatter | None = None,
        omit_self_references: bool = False,
    ) -> None:
        self._node_id_renderer = node_id_renderer
        self._node_definitions: dict[str, Node] = {}
        # dict used as an ordered set so formatting order is reproducible.
        self._edges: dict[Edge, None] = {}
        self._reachability = ReachabilityMap()

        self._graph_name = graph_name
        self._node_name_renderer = node_name_renderer or _empty_node_name
        self._edge_renderer = edge_renderer or _empty_edge_label
        self._formatter = formatter or DotGraphFormatter()
        self._omit_self_references = omit_self_references

    # ── Configuration ────────────────────────────────────────────────────────

    def set_graph_name(self, name: str) -> "GraphBuilder":
        self._graph_name = name
        return self

    def use_node_name_renderer(self, node_name_renderer: NodeRenderer) -> "GraphBuilder":
        self._node_name_renderer = node_name_renderer
        return self

    def use_edge_renderer(self, edge_renderer: EdgeRenderer) -> "GraphBuilder":
        self._edge_renderer = edge_renderer
        return self

    def use_formatter(self, formatter: GraphFormatter) -> "GraphBuilder":
        self._formatter = formatter
        return self

    def omit_self_references(self) -> "GraphBuilder":
        self._omit_self_references = True
        return self

    @property
    def graph_name(self) -> str:
        return self._graph_name

    @property
    def omits_self_references(self) -> bool:
        return self._omit_self_references

    # ── Add phase ────────────────────────────────────────────────────────────

    def is_empty(self) -> bool:
        return not self._node_definitions

    def add_node(self, node: Any) -> "GraphBuilder":
        """
        Register a single node.

        Re-adding a node with an existing id replaces the stored record
        (display name and payload) but keeps its original position.
        """
        node_id = self._node_id_renderer(node)
        node_name = self._node_name_renderer(node)
        self._node_definitions[node_id] = Node(node_id, node_name, node)
        return self

    def add_edge(self, from_node: Any, to_node: Any) -> "GraphBuilder":
        return self._add_edge_internal(from_node, to_node, permanent=False)

    def add_permanent_edge(self, from_node: Any, to_node: Any) -> "GraphBuilder":
        return self._add_edge_internal(from_node, to_node, permanent=True)

    def effective_node(self, node: Any) -> Any:
        """
        Return the payload stored under node's id, or node itself if unknown.

        Because add_node() overwrites, this is the payload added *most
        recently* for the id, not the first one.
        """
        stored = self._node_definitions.get(self._node_id_renderer(node))
        if stored is not None:
            return stored.payload
        return node

    # ── Derive phase ─────────────────────────────────────────────────────────

    def reduce_edges(self) -> list[Edge]:
        """
        Remove every non-permanent edge that an older path makes redundant.

        Single pass over a snapshot of the edge set. The reachability index
        is never modified, so a second call removes nothing.

        Returns:
            removed: The removed edges, in edge-set order.
        """
        removed = [
            edge for edge in self._edges
            if not edge.permanent
            and self._reachability.has_older_path(edge.to_node_id, edge.from_node_id)
        ]
        for edge in removed:
            del self._edges[edge]

        logger.debug(
            "Edge reduction complete: %d removed, %d remaining.",
            len(removed),
            len(self._edges),
        )
        return removed

    def detect_cycles(self) -> bool:
        """Return True if the current edge set contains at least one cycle."""
        return has_cycle(self._node_definitions, self._edges)

    def find_cycle(self) -> list[tuple[str, str]]:
        """Return the (from_id, to_id) edges of one cycle, or [] if acyclic."""
        return find_cycle(self._node_definitions, self._edges)

    # ── Format phase ─────────────────────────────────────────────────────────

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._node_definitions.values())

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def to_networkx(self) -> nx.DiGraph:
        """
        Snapshot the graph as a NetworkX DiGraph.

        Node attributes: name, payload. Edge attributes: label, permanent.
        Edges that differ only in label or permanence collapse into one
        DiGraph edge (last one wins).
        """
        G = nx.DiGraph(name=self._graph_name)
        for node in self._node_definitions.values():
            G.add_node(node.node_id, name=node.name, payload=node.payload)
        for edge in self._edges:
            G.add_edge(
                edge.from_node_id,
                edge.to_node_id,
                label=edge.label,
                permanent=edge.permanent,
            )
        return G

    def format(self) -> str:
        return self._formatter.format(self._graph_name, self.nodes, self.edges)

    def __str__(self) -> str:
        return self.format()

    # ── Internals ────────────────────────────────────────────────────────────

    def _add_edge_internal(self, from_node: Any, to_node: Any, permanent: bool) -> "GraphBuilder":
        """
        Register both endpoints and create the edge, unless either is None.

        Nothing at all is added when one or both endpoints are None.
        """
        if from_node is None or to_node is None:
            return self

        self.add_node(from_node)
        self.add_node(to_node)

        from_node_id = self._node_id_renderer(from_node)
        to_node_id = self._node_id_renderer(to_node)
        if self._omit_self_references and from_node_id == to_node_id:
            return self

        edge = Edge(
            from_node_id,
            to_node_id,
            self._edge_renderer(from_node, to_node),
            permanent,
        )
        self._edges.setdefault(edge, None)
        self._reachability.register_edge(from_node_id, to_node_id)
        return self
