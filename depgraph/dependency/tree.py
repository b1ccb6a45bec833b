"""
depgraph/dependency/tree.py — Walk a resolved dependency tree into a GraphBuilder.

A tree is the nested structure a build tool prints for one project: the
project artifact at the root, its declared dependencies as children, and
their transitive dependencies below them.

Input mapping format (camelCase keys, as produced by build tools):

    {
      "groupId": "com.example", "artifactId": "app", "version": "1.0",
      "children": [
        {"groupId": "com.google.guava", "artifactId": "guava",
         "version": "33.0.0-jre", "scope": "compile", "children": []}
      ]
    }
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from depgraph.dependency.model import DEFAULT_SCOPE, DEFAULT_TYPE, DependencyNode
from depgraph.graph.builder import GraphBuilder

logger = logging.getLogger(__name__)


@dataclass
class TreeNode:
    node: DependencyNode
    children: list["TreeNode"] = field(default_factory=list)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def parse_tree(data: Mapping[str, Any]) -> TreeNode:
    """
    Build a TreeNode from its mapping representation.

    Raises:
        ValueError: A node is not a mapping, lacks groupId or artifactId,
            or its children is not a list.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Tree node must be an object, got {data!r}")

    group_id = str(data.get("groupId", "")).strip()
    artifact_id = str(data.get("artifactId", "")).strip()
    if not group_id or not artifact_id:
        raise ValueError(f"Tree node without groupId/artifactId: {dict(data)!r}")

    children = data.get("children", [])
    if not isinstance(children, list):
        raise ValueError(f"'children' of {group_id}:{artifact_id} must be a list")

    node = DependencyNode(
        group_id=group_id,
        artifact_id=artifact_id,
        version=str(data.get("version") or ""),
        scope=str(data.get("scope") or DEFAULT_SCOPE),
        type=str(data.get("type") or DEFAULT_TYPE),
        classifier=str(data.get("classifier") or ""),
        optional=_as_bool(data.get("optional", False)),
    )
    return TreeNode(node, [parse_tree(child) for child in children])


def add_tree(
    builder: GraphBuilder,
    tree: TreeNode,
    *,
    permanent_direct: bool = True,
    exclude_scopes: Iterable[str] = (),
    include_optional: bool = True,
) -> int:
    """
    Add every parent → child relationship of tree to builder.

    Algorithm (pre-order, explicit stack):
        1. Register the root, so a tree without children still yields a node.
        2. For each visited node, canonicalize it with builder.effective_node()
           and add one edge per retained child, in declaration order.
        3. Children in an excluded scope, or optional children when
           include_optional is False, are pruned with their whole subtree.

    Args:
        builder:          Target GraphBuilder.
        tree:             Root of the dependency tree.
        permanent_direct: Add root → declared dependency edges as permanent
                          so that transitive reduction never removes them.
        exclude_scopes:   Scopes to prune.
        include_optional: Keep optional dependencies.

    Returns:
        Number of edge requests made.
    """
    excluded = set(exclude_scopes)
    builder.add_node(tree.node)

    requests = 0
    stack: list[tuple[TreeNode, bool]] = [(tree, True)]
    while stack:
        current, is_root = stack.pop()
        parent = builder.effective_node(current.node)

        retained = [
            child for child in current.children
            if child.node.scope not in excluded
            and (include_optional or not child.node.optional)
        ]
        for child in retained:
            if is_root and permanent_direct:
                builder.add_permanent_edge(parent, child.node)
            else:
                builder.add_edge(parent, child.node)
            requests += 1

        stack.extend((child, False) for child in reversed(retained))

    logger.debug(
        "Added tree %s: %d edge requests.",
        tree.node.coordinates,
        requests,
    )
    return requests
