"""
depgraph/formatters/dot.py — Graphviz DOT emitter.

Output layout:

    digraph "G" {
      node [shape="box",fontname="Helvetica"]
      edge [fontname="Helvetica",fontsize="10"]

      // Node Definitions:
      "a"[label="A"]

      // Edge Definitions:
      "a" -> "b"[label="test"]
    }

An empty graph keeps the header, the default attribute lines and the closing
brace.
"""

from typing import Collection, Sequence

from depgraph.graph.model import Edge, Node


def escape(value: str) -> str:
    """Escape a string for use inside a double-quoted DOT id or attribute."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


class DotAttributeBuilder:
    """Ordered DOT attribute list, rendered as [key="value",...]."""

    def __init__(self) -> None:
        self._attributes: dict[str, str] = {}

    def add(self, key: str, value: object) -> "DotAttributeBuilder":
        self._attributes[key] = str(value)
        return self

    def label(self, text: str) -> "DotAttributeBuilder":
        return self.add("label", text)

    def shape(self, shape: str) -> "DotAttributeBuilder":
        return self.add("shape", shape)

    def font_name(self, font_name: str) -> "DotAttributeBuilder":
        return self.add("fontname", font_name)

    def font_size(self, font_size: int) -> "DotAttributeBuilder":
        return self.add("fontsize", font_size)

    def style(self, style: str) -> "DotAttributeBuilder":
        return self.add("style", style)

    def color(self, color: str) -> "DotAttributeBuilder":
        return self.add("color", color)

    def is_empty(self) -> bool:
        return not self._attributes

    def __str__(self) -> str:
        if not self._attributes:
            return ""
        body = ",".join(f'{key}="{escape(value)}"' for key, value in self._attributes.items())
        return f"[{body}]"


class DotGraphFormatter:
    """GraphFormatter producing a Graphviz digraph."""

    def __init__(
        self,
        graph_attributes: DotAttributeBuilder | None = None,
        node_attributes: DotAttributeBuilder | None = None,
        edge_attributes: DotAttributeBuilder | None = None,
    ) -> None:
        self.graph_attributes = graph_attributes or DotAttributeBuilder()
        self.node_attributes = node_attributes or (
            DotAttributeBuilder().shape("box").font_name("Helvetica")
        )
        self.edge_attributes = edge_attributes or (
            DotAttributeBuilder().font_name("Helvetica").font_size(10)
        )

    def format(
        self,
        graph_name: str,
        nodes: Sequence[Node],
        edges: Collection[Edge],
    ) -> str:
        lines = [f'digraph "{escape(graph_name)}" {{']
        for keyword, attributes in (
            ("graph", self.graph_attributes),
            ("node", self.node_attributes),
            ("edge", self.edge_attributes),
        ):
            if not attributes.is_empty():
                lines.append(f"  {keyword} {attributes}")

        if nodes:
            lines.append("")
            lines.append("  // Node Definitions:")
            for node in nodes:
                attributes = DotAttributeBuilder()
                if node.name:
                    attributes.label(node.name)
                lines.append(f'  "{escape(node.node_id)}"{attributes}')

        if edges:
            lines.append("")
            lines.append("  // Edge Definitions:")
            for edge in edges:
                attributes = DotAttributeBuilder()
                if edge.label:
                    attributes.label(edge.label)
                lines.append(
                    f'  "{escape(edge.from_node_id)}" -> "{escape(edge.to_node_id)}"{attributes}'
                )

        lines.append("}")
        return "\n".join(lines) + "\n"
