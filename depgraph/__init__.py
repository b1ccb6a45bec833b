"""
depgraph — Dependency graph construction and rendering.

Accumulates nodes and edges between opaque domain objects, removes edges
made redundant by older paths, detects cycles, and renders the result as
Graphviz DOT, PlantUML or JSON.

Packages:
- depgraph.graph       — the generic engine (GraphBuilder)
- depgraph.formatters  — diagram-description emitters
- depgraph.dependency  — artifact model, renderers, tree walking and loaders
"""

__version__ = "0.1.0"
