"""
depgraph/graph/cycles.py — Cycle Detector (three-color DFS).

Nodes are WHITE until first reached, GRAY while their successors are being
explored, and BLACK once fully explored. Reaching a GRAY node again means the
traversal followed a back-edge: the graph has a cycle.

The traversal keeps its own explicit stack, so depth is bounded by memory
rather than the interpreter's recursion limit, and the color map is local to
each call.
"""

import logging
from enum import Enum
from typing import Iterable

import networkx as nx

from depgraph.graph.model import Edge, GraphContractError

logger = logging.getLogger(__name__)


class Color(Enum):
    WHITE = "unvisited"
    GRAY = "in_progress"
    BLACK = "done"


def build_adjacency(
    node_ids: Iterable[str],
    edges: Iterable[Edge],
) -> dict[str, tuple[str, ...]]:
    """
    Build a from_id → successor ids mapping over the registered node ids.

    Every registered id gets an entry, leaves included (empty tuple).
    Successors keep edge insertion order and are deduplicated (edges that
    differ only in label or permanence share one adjacency link).

    Raises:
        GraphContractError: An edge references an id that is not registered.
    """
    successors: dict[str, dict[str, None]] = {node_id: {} for node_id in node_ids}
    for edge in edges:
        for endpoint in (edge.from_node_id, edge.to_node_id):
            if endpoint not in successors:
                raise GraphContractError(
                    f"Edge {edge.from_node_id!r} -> {edge.to_node_id!r} references "
                    f"unregistered node {endpoint!r}"
                )
        successors[edge.from_node_id][edge.to_node_id] = None

    return {node_id: tuple(targets) for node_id, targets in successors.items()}


def has_cycle(node_ids: Iterable[str], edges: Iterable[Edge]) -> bool:
    """
    Return True if at least one directed cycle exists.

    Roots are tried in registry order; each frame on the stack holds a node
    and an iterator over its remaining successors.
    """
    adjacency = build_adjacency(node_ids, edges)
    colors: dict[str, Color] = {node_id: Color.WHITE for node_id in adjacency}

    for root in adjacency:
        if colors[root] is not Color.WHITE:
            continue

        colors[root] = Color.GRAY
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, remaining = stack[-1]
            for child in remaining:
                color = colors[child]
                if color is Color.GRAY:
                    logger.debug("Back-edge %s -> %s closes a cycle.", node, child)
                    return True
                if color is Color.WHITE:
                    colors[child] = Color.GRAY
                    stack.append((child, iter(adjacency[child])))
                    break
            else:
                colors[node] = Color.BLACK
                stack.pop()

    return False


def find_cycle(node_ids: Iterable[str], edges: Iterable[Edge]) -> list[tuple[str, str]]:
    """
    Return the edges of one cycle as (from_id, to_id) pairs, or [] if acyclic.

    Uses networkx.find_cycle over the same adjacency as has_cycle(), so the
    same contract checks apply.
    """
    adjacency = build_adjacency(node_ids, edges)

    G = nx.DiGraph()
    G.add_nodes_from(adjacency)
    G.add_edges_from(
        (from_id, to_id) for from_id, targets in adjacency.items() for to_id in targets
    )

    try:
        cycle = nx.find_cycle(G)
    except nx.NetworkXNoCycle:
        return []

    logger.debug("Cycle found: %s", " -> ".join(u for u, _ in cycle))
    return [(u, v) for u, v in cycle]


def format_cycle(cycle: list[tuple[str, str]]) -> str:
    """Render cycle edges as 'a -> b -> a'."""
    if not cycle:
        return ""
    return " -> ".join([u for u, _ in cycle] + [cycle[-1][1]])
