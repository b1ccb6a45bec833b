"""
depgraph/config.py — All tunable parameters for depgraph.

Every rendering switch, reduction toggle, and DOT styling default lives here
so that a change of output style is a single-file diff.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DepGraphConfig:
    """
    Immutable configuration for building and rendering a dependency graph.

    Override by constructing a new DepGraphConfig with the desired values,
    or with dataclasses.replace(DEFAULT_CONFIG, ...).
    """

    # ── Graph ────────────────────────────────────────────────────────────────
    graph_name: str = "G"
    # Name handed to the formatter (DOT graph id, JSON graphName).

    output_format: str = "dot"
    # One of 'dot', 'puml', 'json'.

    omit_self_references: bool = False
    # Drop edges whose rendered endpoint ids are equal. The nodes themselves
    # are still registered.

    merge_by_group_id: bool = False
    # Collapse all artifacts of a group into one node. Implies
    # omit_self_references (intra-group edges become self loops).

    # ── Derivation ───────────────────────────────────────────────────────────
    reduce_edges: bool = False
    # Remove non-permanent edges already implied by an older path.

    detect_cycles: bool = False
    # Run the three-color DFS and report one cycle if present.

    permanent_direct_edges: bool = True
    # Edges from a tree root to its declared dependencies survive reduction.

    # ── Tree filtering ───────────────────────────────────────────────────────
    exclude_scopes: tuple[str, ...] = ()
    # Dependencies in these scopes are pruned together with their subtree.

    include_optional: bool = True
    # When False, optional dependencies are pruned together with their subtree.

    # ── Node / edge labels ───────────────────────────────────────────────────
    show_group_ids: bool = False
    show_artifact_ids: bool = True
    show_types: bool = False
    show_classifiers: bool = False
    show_versions_on_nodes: bool = False
    show_versions_on_edges: bool = False

    # ── DOT styling ──────────────────────────────────────────────────────────
    dot_node_shape: str = "box"
    dot_font_name: str = "Helvetica"
    dot_edge_font_size: int = 10


# Singleton default — import this everywhere instead of constructing anew.
DEFAULT_CONFIG = DepGraphConfig()
