"""
depgraph/formatters/puml.py — PlantUML component-diagram emitter.

PlantUML aliases must be plain identifiers, so every node id is mapped to an
alias with non-alphanumeric characters replaced by '_'. Ids that collapse to
the same alias get a numeric suffix in registry order.
"""

import re
from typing import Collection, Sequence

from depgraph.graph.model import Edge, Node

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")

_HEADER = (
    "@startuml",
    "skinparam defaultTextAlignment center",
    "skinparam arrowColor #000000",
)


def _text(value: str) -> str:
    # PlantUML has no quote escape inside "..." labels.
    return value.replace('"', "'").replace("\n", "\\n")


def build_aliases(nodes: Sequence[Node]) -> dict[str, str]:
    """Map each node id to a unique PlantUML alias."""
    aliases: dict[str, str] = {}
    taken: set[str] = set()
    for node in nodes:
        base = _NON_IDENTIFIER.sub("_", node.node_id) or "_"
        if base[0].isdigit():
            base = f"_{base}"
        alias = base
        suffix = 2
        while alias in taken:
            alias = f"{base}_{suffix}"
            suffix += 1
        taken.add(alias)
        aliases[node.node_id] = alias
    return aliases


class PumlGraphFormatter:
    """GraphFormatter producing a PlantUML diagram of rectangles and arrows."""

    def __init__(self, component: str = "rectangle") -> None:
        self.component = component

    def format(
        self,
        graph_name: str,
        nodes: Sequence[Node],
        edges: Collection[Edge],
    ) -> str:
        aliases = build_aliases(nodes)
        lines = list(_HEADER)
        lines.append(f"title {_text(graph_name)}")

        if nodes:
            lines.append("")
            for node in nodes:
                label = node.name or node.node_id
                lines.append(f'{self.component} "{_text(label)}" as {aliases[node.node_id]}')

        if edges:
            lines.append("")
            for edge in edges:
                arrow = f"{aliases[edge.from_node_id]} --> {aliases[edge.to_node_id]}"
                if edge.label:
                    arrow = f"{arrow} : {_text(edge.label)}"
                lines.append(arrow)

        lines.append("@enduml")
        return "\n".join(lines) + "\n"
