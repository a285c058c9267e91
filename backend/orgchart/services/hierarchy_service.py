"""Reporting-line queries over the employee directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from orgchart.models.employee import EmployeeRecord
from orgchart.models.hierarchy import HierarchyResult, HierarchySearchResult
from orgchart.services.employee_service import EmployeeService, employee_service
from orgchart.services.hierarchy_builder import build_hierarchy
from orgchart.services.hierarchy_filter import filter_hierarchy
from orgchart.services.node_counter import count_nodes

logger = logging.getLogger(__name__)


class HierarchyService:
    def __init__(self, directory: EmployeeService) -> None:
        self.directory = directory

    async def get_hierarchy(self, root_id: str) -> HierarchyResult:
        """Build the tree under ``root_id`` from a fresh directory snapshot.

        Raises ``RootNotFoundError`` for an unknown root and lets
        ``EmployeeDirectoryError`` from the directory propagate untouched.
        """
        records = await self.directory.fetch_employees()
        return self.build_result(records, root_id)

    async def search(self, root_id: str, query: str) -> HierarchySearchResult:
        result = await self.get_hierarchy(root_id)
        return self.search_result(result, query)

    @staticmethod
    def build_result(records: Iterable[EmployeeRecord], root_id: str) -> HierarchyResult:
        tree = build_hierarchy(records, root_id)
        total_count = count_nodes(tree)
        logger.debug("Built hierarchy for %s with %d members", root_id, total_count)
        return HierarchyResult(tree=tree, total_count=total_count)

    @staticmethod
    def search_result(result: HierarchyResult, query: str) -> HierarchySearchResult:
        filtered = filter_hierarchy(result.tree, query)
        return HierarchySearchResult(
            tree=filtered,
            total_count=result.total_count,
            visible_count=count_nodes(filtered),
            query=query,
        )


hierarchy_service = HierarchyService(employee_service)
