"""Expanded/collapsed view state, keyed by node identifier.

The state never references tree objects, only identifiers, so a rebuilt
tree keeps whatever the viewer had open. Identifiers that disappear from a
newer snapshot stay in the set and simply have no effect.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from collections.abc import Iterable, Iterator

from orgchart.core.config import settings
from orgchart.models.hierarchy import HierarchyNode

logger = logging.getLogger(__name__)


class ExpansionState:
    """Immutable set of expanded node identifiers."""

    __slots__ = ("_expanded",)

    def __init__(self, expanded: Iterable[str] = ()) -> None:
        self._expanded: frozenset[str] = frozenset(str(node_id) for node_id in expanded)

    @classmethod
    def for_root(cls, node: HierarchyNode) -> ExpansionState:
        return cls((node.id,))

    def contains(self, node_id: str) -> bool:
        return str(node_id) in self._expanded

    def toggle(self, node_id: str) -> ExpansionState:
        node_id = str(node_id)
        if node_id in self._expanded:
            return ExpansionState(self._expanded - {node_id})
        return ExpansionState(self._expanded | {node_id})

    def expand_all(self, node: HierarchyNode) -> ExpansionState:
        return ExpansionState(iter_node_ids(node))

    def collapse_all(self, node: HierarchyNode) -> ExpansionState:
        return ExpansionState.for_root(node)

    def __contains__(self, node_id: object) -> bool:
        return str(node_id) in self._expanded

    def __iter__(self) -> Iterator[str]:
        return iter(self._expanded)

    def __len__(self) -> int:
        return len(self._expanded)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpansionState):
            return NotImplemented
        return self._expanded == other._expanded

    def __hash__(self) -> int:
        return hash(self._expanded)

    def __repr__(self) -> str:
        return f"ExpansionState({sorted(self._expanded)!r})"


def iter_node_ids(node: HierarchyNode) -> Iterator[str]:
    """Depth-first, pre-order identifiers of ``node`` and its subtree."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current.id
        stack.extend(reversed(current.children))


class ExpansionStore:
    """Per-session expansion state with serialized updates.

    Every read-modify-write runs under one lock, so concurrent toggles for
    the same session cannot overwrite each other. Once ``max_sessions`` is
    reached the least recently used session is dropped.
    """

    def __init__(self, max_sessions: int = 1000) -> None:
        self.max_sessions = max_sessions
        self._states: OrderedDict[str, ExpansionState] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_id: str) -> ExpansionState:
        with self._lock:
            state = self._states.get(session_id)
            if state is None:
                return ExpansionState()
            self._states.move_to_end(session_id)
            return state

    def toggle(self, session_id: str, node_id: str) -> ExpansionState:
        with self._lock:
            state = self._states.get(session_id, ExpansionState()).toggle(node_id)
            self._store(session_id, state)
            return state

    def expand_all(self, session_id: str, node: HierarchyNode) -> ExpansionState:
        with self._lock:
            state = self._states.get(session_id, ExpansionState()).expand_all(node)
            self._store(session_id, state)
            return state

    def collapse_all(self, session_id: str, node: HierarchyNode) -> ExpansionState:
        with self._lock:
            state = self._states.get(session_id, ExpansionState()).collapse_all(node)
            self._store(session_id, state)
            return state

    def reset(self, session_id: str) -> None:
        with self._lock:
            self._states.pop(session_id, None)

    def clear(self) -> None:
        with self._lock:
            self._states.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)

    def _store(self, session_id: str, state: ExpansionState) -> None:
        self._states[session_id] = state
        self._states.move_to_end(session_id)
        while len(self._states) > self.max_sessions:
            evicted, _ = self._states.popitem(last=False)
            logger.debug("Evicted expansion state for session %s", evicted)


expansion_store = ExpansionStore(max_sessions=settings.EXPANSION_SESSION_LIMIT)
