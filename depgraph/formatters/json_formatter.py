"""
depgraph/formatters/json_formatter.py — JSON emitter.

    {
      "graphName": "G",
      "artifacts": [{"id": "...", "name": "..."}],
      "dependencies": [{"from": "...", "to": "...", "label": "", "permanent": false}]
    }
"""

import json
from typing import Collection, Sequence

from depgraph.graph.model import Edge, Node


class JsonGraphFormatter:
    """GraphFormatter producing a JSON document. Payloads are not serialized."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def format(
        self,
        graph_name: str,
        nodes: Sequence[Node],
        edges: Collection[Edge],
    ) -> str:
        document = {
            "graphName": graph_name,
            "artifacts": [{"id": node.node_id, "name": node.name} for node in nodes],
            "dependencies": [
                {
                    "from": edge.from_node_id,
                    "to": edge.to_node_id,
                    "label": edge.label,
                    "permanent": edge.permanent,
                }
                for edge in edges
            ],
        }
        return json.dumps(document, indent=self.indent) + "\n"
