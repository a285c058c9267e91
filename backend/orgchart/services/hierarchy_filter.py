"""Search filtering that keeps the reporting chain above every match."""

from __future__ import annotations

from orgchart.models.hierarchy import HierarchyNode


def normalize_query(query: str | None) -> str:
    return (query or "").casefold()


def node_matches(node: HierarchyNode, query: str) -> bool:
    """Case-insensitive substring match on name or designation."""
    needle = normalize_query(query)
    if not needle:
        return True
    return any(needle in value.casefold() for value in (node.name, node.designation) if value)


def filter_hierarchy(node: HierarchyNode | None, query: str | None) -> HierarchyNode | None:
    """Prune ``node`` to the members matching ``query`` and their managers.

    A node survives when it matches or when any of its children survives,
    so every match stays reachable from the root. Returns ``None`` when
    nothing in the tree survives. An empty query returns ``node`` itself.
    """
    if node is None:
        return None

    needle = normalize_query(query)
    if not needle:
        return node

    return _prune(node, needle)


def _prune(root: HierarchyNode, needle: str) -> HierarchyNode | None:
    # Post-order walk on an explicit stack; each frame collects the
    # surviving children of its node before the node itself is decided.
    stack: list[tuple[HierarchyNode, int, list[HierarchyNode]]] = [(root, 0, [])]
    result: HierarchyNode | None = None

    while stack:
        node, index, survivors = stack[-1]
        if index < len(node.children):
            stack[-1] = (node, index + 1, survivors)
            stack.append((node.children[index], 0, []))
            continue

        stack.pop()
        if survivors or node_matches(node, needle):
            kept: HierarchyNode | None = node.model_copy(update={"children": tuple(survivors)})
        else:
            kept = None

        if stack:
            if kept is not None:
                stack[-1][2].append(kept)
        else:
            result = kept

    return result
