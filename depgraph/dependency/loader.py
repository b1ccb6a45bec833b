"""
depgraph/dependency/loader.py — Read dependency trees (JSON) and edge lists (CSV).

JSON input: one tree mapping, or a list of them (one per project module).
See depgraph.dependency.tree for the mapping format.

CSV input: one edge per row.
    from        (required)  coordinates of the depending artifact
    to          (required)  coordinates of the dependency
    scope       (optional)  scope of 'to', default 'compile'
    optional    (optional)  true/false, default false
    permanent   (optional)  true/false, default false — exempt from reduction

Coordinates use the 'group:artifact[:type[:classifier]]:version' form.
"""

import json
import logging
import os

import pandas as pd

from depgraph.dependency.model import DEFAULT_SCOPE, DependencyNode
from depgraph.dependency.tree import TreeNode, parse_tree
from depgraph.graph.builder import GraphBuilder

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("from", "to")
_TRUE_VALUES = ("true", "1", "yes")


def load_trees(path: str | os.PathLike) -> list[TreeNode]:
    """
    Load one or more dependency trees from a JSON file.

    Raises:
        ValueError: The document is neither an object nor a list of objects.
        OSError:    The file cannot be read.
    """
    logger.info("Loading dependency trees from: %s", path)
    with open(path, encoding="utf-8") as fh:
        document = json.load(fh)

    if isinstance(document, dict):
        document = [document]
    if not isinstance(document, list) or not all(isinstance(d, dict) for d in document):
        raise ValueError(f"{path}: expected a tree object or a list of tree objects")

    trees = [parse_tree(d) for d in document]
    logger.info("Loaded %d dependency tree(s).", len(trees))
    return trees


def load_edge_frame(path: str | os.PathLike) -> pd.DataFrame:
    """
    Load an edge list CSV and normalize its optional columns.

    Returns:
        DataFrame with columns from, to, scope, optional, permanent
        ('optional' and 'permanent' as bool).

    Raises:
        ValueError: A required column is missing.
    """
    logger.info("Loading dependency edges from: %s", path)
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing required column(s): {', '.join(missing)}")

    if "scope" not in df.columns:
        df["scope"] = DEFAULT_SCOPE
    df["scope"] = df["scope"].str.strip().replace("", DEFAULT_SCOPE)
    for column in ("optional", "permanent"):
        if column not in df.columns:
            df[column] = "false"
        df[column] = df[column].str.strip().str.lower().isin(_TRUE_VALUES)

    logger.info("Loaded %d edge rows.", len(df))
    return df[["from", "to", "scope", "optional", "permanent"]]


def add_edge_frame(builder: GraphBuilder, frame: pd.DataFrame) -> int:
    """
    Add one edge per row of frame (as returned by load_edge_frame).

    Rows with malformed coordinates are skipped with a warning. The 'from'
    artifact is canonicalized with builder.effective_node() so that it keeps
    the scope it was first seen with as a dependency.

    Returns:
        Number of rows added.
    """
    added = 0
    for index, row in frame.iterrows():
        try:
            from_node = DependencyNode.from_coordinates(row["from"])
            to_node = DependencyNode.from_coordinates(
                row["to"],
                scope=row["scope"],
                optional=bool(row["optional"]),
            )
        except ValueError as exc:
            logger.warning("Skipping edge row %s: %s", index, exc)
            continue

        from_node = builder.effective_node(from_node)
        if row["permanent"]:
            builder.add_permanent_edge(from_node, to_node)
        else:
            builder.add_edge(from_node, to_node)
        added += 1

    logger.info("Added %d of %d edge rows.", added, len(frame))
    return added
