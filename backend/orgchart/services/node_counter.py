from __future__ import annotations

from orgchart.models.hierarchy import HierarchyNode


def count_nodes(node: HierarchyNode | None) -> int:
    """Number of members in the tree, root included."""
    if node is None:
        return 0

    total = 0
    stack = [node]
    while stack:
        current = stack.pop()
        total += 1
        stack.extend(current.children)
    return total
