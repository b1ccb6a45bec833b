"""
depgraph/formatters/registry.py — Formatter lookup by output format name.
"""

from depgraph.config import DEFAULT_CONFIG, DepGraphConfig
from depgraph.formatters.dot import DotAttributeBuilder, DotGraphFormatter
from depgraph.formatters.json_formatter import JsonGraphFormatter
from depgraph.formatters.puml import PumlGraphFormatter
from depgraph.graph.model import GraphFormatter

FORMAT_NAMES = ("dot", "puml", "json")


def get_formatter(name: str, config: DepGraphConfig = DEFAULT_CONFIG) -> GraphFormatter:
    """Return a formatter instance for 'dot', 'puml' or 'json'."""
    if name == "dot":
        return DotGraphFormatter(
            node_attributes=DotAttributeBuilder()
            .shape(config.dot_node_shape)
            .font_name(config.dot_font_name),
            edge_attributes=DotAttributeBuilder()
            .font_name(config.dot_font_name)
            .font_size(config.dot_edge_font_size),
        )
    if name == "puml":
        return PumlGraphFormatter()
    if name == "json":
        return JsonGraphFormatter()
    raise ValueError(f"Unknown output format {name!r}; expected one of {', '.join(FORMAT_NAMES)}")
