"""
depgraph/dependency/renderers.py — Identity, display-name and edge-label
functions for DependencyNode payloads.

Each renderer is a small callable object so its switches can be configured
once and then handed to GraphBuilder as a plain function.
"""

from depgraph.dependency.model import DEFAULT_SCOPE, DependencyNode


class DependencyIdRenderer:
    """
    Node identity: 'group:artifact:type[:classifier][:version][:scope]'.

    The default (versionless, scopeless) identity merges every occurrence of
    an artifact into one node regardless of the version or scope it was
    resolved with.
    """

    def __init__(self, with_version: bool = False, with_scope: bool = False) -> None:
        self.with_version = with_version
        self.with_scope = with_scope

    def __call__(self, node: DependencyNode) -> str:
        parts = [node.group_id, node.artifact_id, node.type]
        if node.classifier:
            parts.append(node.classifier)
        if self.with_version:
            parts.append(node.version)
        if self.with_scope:
            parts.append(node.scope)
        return ":".join(parts)


def group_id_renderer(node: DependencyNode) -> str:
    """Node identity for graphs aggregated by group id."""
    return node.group_id


class DependencyNameRenderer:
    """Display name built from the selected coordinate parts, joined by separator."""

    def __init__(
        self,
        show_group_id: bool = False,
        show_artifact_id: bool = True,
        show_type: bool = False,
        show_classifier: bool = False,
        show_version: bool = False,
        separator: str = "\n",
    ) -> None:
        self.show_group_id = show_group_id
        self.show_artifact_id = show_artifact_id
        self.show_type = show_type
        self.show_classifier = show_classifier
        self.show_version = show_version
        self.separator = separator

    def __call__(self, node: DependencyNode) -> str:
        parts = []
        if self.show_group_id:
            parts.append(node.group_id)
        if self.show_artifact_id:
            parts.append(node.artifact_id)
        if self.show_type:
            parts.append(node.type)
        if self.show_classifier and node.classifier:
            parts.append(node.classifier)
        if self.show_version and node.version:
            parts.append(node.version)
        return self.separator.join(parts)


class DependencyEdgeRenderer:
    """
    Edge label describing how 'to' is reached from 'from'.

    Shows the target's version (when enabled), its scope unless it is the
    default 'compile' scope, and 'optional' for optional dependencies.
    """

    def __init__(self, show_version: bool = False) -> None:
        self.show_version = show_version

    def __call__(self, from_node: DependencyNode, to_node: DependencyNode) -> str:
        parts = []
        if self.show_version and to_node.version:
            parts.append(to_node.version)
        if to_node.scope and to_node.scope != DEFAULT_SCOPE:
            parts.append(to_node.scope)
        if to_node.optional:
            parts.append("optional")
        return " ".join(parts)
