"""
depgraph.formatters — Diagram-description emitters.

Modules:
    dot             — Graphviz DOT (default formatter of GraphBuilder).
    puml            — PlantUML component diagram.
    json_formatter  — Plain JSON document.
    registry        — get_formatter(): lookup by output format name.

Every formatter is a small class with a single
format(graph_name, nodes, edges) -> str method.
"""
