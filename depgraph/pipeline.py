"""
depgraph/pipeline.py — Single-call build → reduce → detect → format sequence.

Usage:
    from depgraph.dependency.loader import load_trees
    from depgraph.pipeline import render_dependency_graph
    result = render_dependency_graph(trees=load_trees("tree.json"))
    print(result.text)
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

import pandas as pd

from depgraph.config import DEFAULT_CONFIG, DepGraphConfig
from depgraph.dependency.loader import add_edge_frame
from depgraph.dependency.renderers import DependencyIdRenderer, group_id_renderer
from depgraph.dependency.style import configure_graph_style
from depgraph.dependency.tree import TreeNode, add_tree
from depgraph.graph.builder import GraphBuilder
from depgraph.graph.cycles import format_cycle
from depgraph.graph.model import Edge

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """
    Complete output of one rendering run.

    Fields:
        text:          Formatter output.
        node_count:    Registered nodes.
        edge_count:    Edges remaining after reduction.
        removed_edges: Edges removed by reduction ([] when reduction is off).
        has_cycles:    Cycle detection result (False when detection is off).
        cycle:         (from_id, to_id) edges of one cycle, [] if none found.
    """

    text: str
    node_count: int
    edge_count: int
    removed_edges: list[Edge] = field(default_factory=list)
    has_cycles: bool = False
    cycle: list[tuple[str, str]] = field(default_factory=list)


def build_dependency_graph(
    trees: Iterable[TreeNode] = (),
    edge_frame: Optional[pd.DataFrame] = None,
    config: DepGraphConfig = DEFAULT_CONFIG,
) -> GraphBuilder:
    """
    Create a styled GraphBuilder and add every tree and CSV edge to it.

    Node identity is the versionless artifact id, or the group id when
    config.merge_by_group_id is set.
    """
    id_renderer = group_id_renderer if config.merge_by_group_id else DependencyIdRenderer()
    builder = configure_graph_style(GraphBuilder(id_renderer), config)

    for tree in trees:
        add_tree(
            builder,
            tree,
            permanent_direct=config.permanent_direct_edges,
            exclude_scopes=config.exclude_scopes,
            include_optional=config.include_optional,
        )

    if edge_frame is not None:
        add_edge_frame(builder, edge_frame)

    logger.info(
        "Graph construction complete: %d nodes, %d edges.",
        len(builder.nodes),
        len(builder.edges),
    )
    return builder


def render_dependency_graph(
    trees: Iterable[TreeNode] = (),
    edge_frame: Optional[pd.DataFrame] = None,
    config: DepGraphConfig = DEFAULT_CONFIG,
) -> RenderResult:
    """Build the graph, run the derive steps enabled in config, and format it."""
    builder = build_dependency_graph(trees, edge_frame, config)

    removed: list[Edge] = []
    if config.reduce_edges:
        removed = builder.reduce_edges()
        logger.info("Removed %d redundant edges.", len(removed))

    has_cycles = False
    cycle: list[tuple[str, str]] = []
    if config.detect_cycles:
        has_cycles = builder.detect_cycles()
        if has_cycles:
            cycle = builder.find_cycle()
            logger.warning(
                "Dependency cycle detected: %s",
                format_cycle(cycle),
            )

    return RenderResult(
        text=builder.format(),
        node_count=len(builder.nodes),
        edge_count=len(builder.edges),
        removed_edges=removed,
        has_cycles=has_cycles,
        cycle=cycle,
    )
