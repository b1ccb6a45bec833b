"""
depgraph.dependency — Feeds resolved dependency trees into the graph engine.

Modules:
    model      — DependencyNode: artifact coordinates used as graph payloads.
    renderers  — Identity, display-name and edge-label functions.
    style      — configure_graph_style(): apply a DepGraphConfig to a builder.
    tree       — TreeNode, parse_tree(), add_tree().
    loader     — JSON tree and CSV edge-list loaders (pandas).
"""
