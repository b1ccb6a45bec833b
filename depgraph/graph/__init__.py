"""
depgraph.graph — Generic directed-graph construction engine.

Modules:
    model         — Node, Edge, renderer and formatter contracts.
    reachability  — Append-only, insertion-ordered parent index.
    cycles        — Three-color DFS cycle detection (explicit stack).
    builder       — GraphBuilder: registries, reduction, cycle detection, formatting.

Payloads are opaque: the engine only ever sees them through the identity,
display-name and edge-label functions supplied by the caller.
"""
