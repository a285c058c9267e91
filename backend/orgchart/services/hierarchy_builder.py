"""Reporting-line tree construction from flat employee records."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator

from orgchart.models.employee import EmployeeRecord
from orgchart.models.hierarchy import HierarchyNode

logger = logging.getLogger(__name__)


class HierarchyError(Exception):
    pass


class RootNotFoundError(HierarchyError):
    def __init__(self, root_id: str) -> None:
        super().__init__(f"Root employee '{root_id}' not found")
        self.root_id = root_id


def _index_by_manager(records: list[EmployeeRecord]) -> dict[str | None, list[EmployeeRecord]]:
    reports: dict[str | None, list[EmployeeRecord]] = defaultdict(list)
    for record in records:
        reports[record.manager_id].append(record)
    return reports


def build_hierarchy(records: Iterable[EmployeeRecord], root_id: str) -> HierarchyNode:
    """Build the tree of everyone reporting (transitively) to ``root_id``.

    Children keep the order in which records were supplied. Manager
    references that loop back onto the current path are dropped instead of
    failing the whole build, so dirty directory data still yields a tree.

    Raises:
        RootNotFoundError: no record has ``root_id`` as its identifier.
    """
    snapshot = list(records)
    root_id = str(root_id)

    root = next((record for record in snapshot if record.id == root_id), None)
    if root is None:
        raise RootNotFoundError(root_id)

    reports = _index_by_manager(snapshot)
    path: set[str] = {root.id}

    # Depth-first on an explicit stack of (record, pending reports, built
    # children) frames; a node is assembled once all its reports are done.
    stack: list[tuple[EmployeeRecord, Iterator[EmployeeRecord], list[HierarchyNode]]] = [
        (root, iter(reports.get(root.id, [])), []),
    ]
    tree: HierarchyNode | None = None

    while stack:
        record, pending, children = stack[-1]
        report = next(pending, None)

        if report is None:
            stack.pop()
            path.discard(record.id)
            node = HierarchyNode.from_record(record, tuple(children))
            if stack:
                stack[-1][2].append(node)
            else:
                tree = node
            continue

        if report.id == record.id:
            continue
        if report.id in path:
            logger.warning(
                "Cyclic manager reference: %s reports to %s but is already on the path from %s",
                report.id,
                record.id,
                root_id,
            )
            continue

        path.add(report.id)
        stack.append((report, iter(reports.get(report.id, [])), []))

    assert tree is not None
    return tree
