"""
depgraph/graph/model.py — Value types and strategy contracts of the graph engine.

Nodes and edges are plain frozen dataclasses. The identity, display-name and
edge-label functions are ordinary callables; a formatter is any object with a
single format() method. No inheritance hierarchy is involved.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Collection, Protocol, Sequence

NodeRenderer = Callable[[Any], str]
EdgeRenderer = Callable[[Any, Any], str]


class GraphContractError(ValueError):
    """Raised when a caller breaks an invariant of the graph engine."""


@dataclass(frozen=True)
class Node:
    """
    A registered graph node.

    Fields:
        node_id: Key produced by the builder's identity function.
        name:    Display name produced by the node name renderer.
        payload: The caller's domain object. Never inspected by the engine
                 and excluded from equality.
    """

    node_id: str
    name: str
    payload: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Edge:
    """
    A directed edge between two registered node ids.

    Two edges are equal iff all four fields match. A permanent edge is never
    removed by transitive reduction.
    """

    from_node_id: str
    to_node_id: str
    label: str = ""
    permanent: bool = False


class GraphFormatter(Protocol):
    """Turns a node/edge snapshot into diagram-description text."""

    def format(
        self,
        graph_name: str,
        nodes: Sequence[Node],
        edges: Collection[Edge],
    ) -> str:
        ...
