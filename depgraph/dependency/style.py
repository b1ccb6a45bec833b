"""
depgraph/dependency/style.py — Apply a DepGraphConfig to a GraphBuilder.

Installs the graph name, the display-name and edge-label renderers and the
formatter matching config.output_format.
"""

from depgraph.config import DEFAULT_CONFIG, DepGraphConfig
from depgraph.dependency.renderers import DependencyEdgeRenderer, DependencyNameRenderer
from depgraph.formatters.registry import get_formatter
from depgraph.graph.builder import GraphBuilder

# Label parts are stacked on separate lines in diagrams, joined inline in JSON.
_NAME_SEPARATORS = {"dot": "\n", "puml": "\n", "json": ":"}


def configure_graph_style(
    builder: GraphBuilder,
    config: DepGraphConfig = DEFAULT_CONFIG,
) -> GraphBuilder:
    """
    Configure builder for config.output_format and return it.

    When config.merge_by_group_id is set, nodes are labelled with their group
    id only and edges carry no label, so that every pair of groups is joined
    by at most one edge.

    Raises:
        ValueError: Unknown output format.
    """
    formatter = get_formatter(config.output_format, config)
    separator = _NAME_SEPARATORS[config.output_format]

    if config.merge_by_group_id:
        name_renderer = DependencyNameRenderer(
            show_group_id=True,
            show_artifact_id=False,
            separator=separator,
        )
        builder.use_edge_renderer(lambda from_node, to_node: "")
    else:
        name_renderer = DependencyNameRenderer(
            show_group_id=config.show_group_ids,
            show_artifact_id=config.show_artifact_ids,
            show_type=config.show_types,
            show_classifier=config.show_classifiers,
            show_version=config.show_versions_on_nodes,
            separator=separator,
        )
        builder.use_edge_renderer(DependencyEdgeRenderer(config.show_versions_on_edges))

    builder.set_graph_name(config.graph_name)
    builder.use_node_name_renderer(name_renderer)
    builder.use_formatter(formatter)
    if config.omit_self_references or config.merge_by_group_id:
        builder.omit_self_references()
    return builder
