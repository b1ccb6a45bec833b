"""
depgraph/graph/reachability.py — Insertion-order-aware Reachability Index.

When an edge 'A -> B' is registered, 'A' is appended to the ordered parent
set of 'B'. To find out whether 'Y' is reachable from 'X' we walk the parents
of 'Y' looking for 'X'.

The index is append-only: it records the history of edge registration, not
the current topology. Removing an edge from the graph never touches it, which
is what makes transitive reduction idempotent.

The redundancy question asked by reduction is "was 'target' already reachable
from 'source' through some *older* path when the direct edge
'source -> target' was registered?". Only the first hop is restricted to the
parents of 'target' registered strictly before 'source'; that excludes the
edge under test and everything that was only added after it. From the second
hop onwards full parent sets are used.
"""

from itertools import takewhile


class ReachabilityMap:
    """Append-only map of child id → insertion-ordered parent ids."""

    def __init__(self) -> None:
        # dict used as an ordered set: keys keep first-insertion order.
        self._parent_index: dict[str, dict[str, None]] = {}

    def register_edge(self, from_id: str, to_id: str) -> None:
        """Record 'from_id' as a parent of 'to_id'. Re-registration keeps the original position."""
        self._parent_index.setdefault(to_id, {}).setdefault(from_id, None)

    def parents(self, node_id: str) -> tuple[str, ...]:
        """All parents ever registered for node_id, oldest first."""
        return tuple(self._parent_index.get(node_id, ()))

    def older_parents(self, target: str, source: str) -> tuple[str, ...]:
        """Parents of target registered strictly before source (all of them if source is no parent)."""
        return tuple(takewhile(lambda parent: parent != source, self.parents(target)))

    def has_older_path(self, target: str, source: str) -> bool:
        """
        Return True if target was reachable from source before the direct
        edge 'source -> target' was registered.

        Algorithm (iterative DFS over parent links, O(V + E)):
            1. Restrict the first hop to older_parents(target, source).
               If source is among them, the answer is True.
            2. Otherwise walk ancestors of those parents using full parent
               sets. A node whose parents contain source ends the search.
            3. Every node is expanded at most once; target is marked visited
               up front so a cycle cannot re-enter it with its full parents.
        """
        first_hop = self.older_parents(target, source)
        if source in first_hop:
            return True

        visited: set[str] = {target}
        stack: list[str] = list(reversed(first_hop))
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)

            parents = self._parent_index.get(node, {})
            if source in parents:
                return True
            stack.extend(p for p in reversed(parents) if p not in visited)

        return False

    def __len__(self) -> int:
        return len(self._parent_index)
