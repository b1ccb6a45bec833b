"""
depgraph/tests/conftest.py — Shared pytest fixtures for the depgraph test suite.

Fixtures:
    string_builder   — GraphBuilder over plain string payloads (identity = the string).
    recording_formatter — Formatter that records the snapshot it was given.
    tree_documents   — Two module trees (mappings) sharing transitive dependencies.
    sample_trees     — The same trees parsed into TreeNode objects.
    write_json       — Writes a JSON document to tmp_path, returns its path.
    write_csv        — Writes CSV text to tmp_path, returns its path.
"""

import json

import pytest

from depgraph.dependency.tree import parse_tree
from depgraph.graph.builder import GraphBuilder


class RecordingFormatter:
    """GraphFormatter that records the snapshot it receives."""

    def __init__(self):
        self.calls = []

    def format(self, graph_name, nodes, edges):
        self.calls.append((graph_name, list(nodes), list(edges)))
        return f"{graph_name}:{len(nodes)}:{len(edges)}"


def _tree(group, artifact, version="1.0", scope=None, optional=False, children=()):
    data = {"groupId": group, "artifactId": artifact, "version": version, "children": list(children)}
    if scope:
        data["scope"] = scope
    if optional:
        data["optional"] = True
    return data


# Module 'core' depends on guava (which pulls failureaccess) and junit (test).
CORE_TREE = _tree(
    "com.example", "core", children=[
        _tree("com.google.guava", "guava", "33.0.0-jre", children=[
            _tree("com.google.guava", "failureaccess", "1.0.2"),
        ]),
        _tree("junit", "junit", "4.13.2", scope="test", children=[
            _tree("org.hamcrest", "hamcrest-core", "1.3", scope="test"),
        ]),
    ],
)

# Module 'web' depends on core and, directly, on failureaccess again.
WEB_TREE = _tree(
    "com.example", "web", children=[
        _tree("com.example", "core", children=[
            _tree("com.google.guava", "guava", "33.0.0-jre", children=[
                _tree("com.google.guava", "failureaccess", "1.0.2"),
            ]),
        ]),
        _tree("com.google.guava", "failureaccess", "1.0.2"),
        _tree("com.google.code.findbugs", "jsr305", "3.0.2", optional=True),
    ],
)


@pytest.fixture
def string_builder() -> GraphBuilder:
    return GraphBuilder(lambda node: node)


@pytest.fixture
def recording_formatter() -> RecordingFormatter:
    return RecordingFormatter()


@pytest.fixture
def tree_documents() -> list[dict]:
    return [CORE_TREE, WEB_TREE]


@pytest.fixture
def sample_trees(tree_documents):
    return [parse_tree(d) for d in tree_documents]


@pytest.fixture
def write_json(tmp_path):
    def _write(document, name="tree.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="edges.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
