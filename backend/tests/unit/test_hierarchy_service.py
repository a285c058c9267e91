from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from orgchart.services.employee_service import EmployeeDirectoryError
from orgchart.services.hierarchy_builder import RootNotFoundError
from orgchart.services.hierarchy_service import HierarchyService


def _make_service(records=None, error: Exception | None = None) -> HierarchyService:
    directory = MagicMock()
    if error is not None:
        directory.fetch_employees = AsyncMock(side_effect=error)
    else:
        directory.fetch_employees = AsyncMock(return_value=records or [])
    return HierarchyService(directory)


def test_build_result_returns_tree_and_count(scenario_records):
    result = HierarchyService.build_result(scenario_records, "1")

    assert result.tree.id == "1"
    assert result.total_count == 4


@pytest.mark.anyio
async def test_get_hierarchy_uses_fresh_snapshot(scenario_records, record_factory):
    service = _make_service(scenario_records)

    first = await service.get_hierarchy("1")
    service.directory.fetch_employees.return_value = [
        *scenario_records,
        record_factory("5", manager_id="3"),
    ]
    second = await service.get_hierarchy("1")

    assert first.total_count == 4
    assert second.total_count == 5
    assert service.directory.fetch_employees.await_count == 2


@pytest.mark.anyio
async def test_get_hierarchy_root_not_found(scenario_records):
    service = _make_service(scenario_records)

    with pytest.raises(RootNotFoundError):
        await service.get_hierarchy("99")


@pytest.mark.anyio
async def test_get_hierarchy_empty_directory_is_root_not_found():
    service = _make_service([])

    with pytest.raises(RootNotFoundError):
        await service.get_hierarchy("1")


@pytest.mark.anyio
async def test_get_hierarchy_propagates_directory_failure():
    service = _make_service(error=EmployeeDirectoryError("down"))

    with pytest.raises(EmployeeDirectoryError, match="down"):
        await service.get_hierarchy("1")


@pytest.mark.anyio
async def test_search_reports_visible_and_total_counts(search_records):
    service = _make_service(search_records)

    result = await service.search("root", "smith")

    assert result.tree is not None
    assert result.total_count == 6
    assert result.visible_count == 4
    assert result.query == "smith"


@pytest.mark.anyio
async def test_search_without_matches(search_records):
    service = _make_service(search_records)

    result = await service.search("root", "zzz")

    assert result.tree is None
    assert result.visible_count == 0
    assert result.total_count == 6


@pytest.mark.anyio
async def test_search_empty_query_returns_full_tree(search_records):
    service = _make_service(search_records)

    result = await service.search("root", "")

    assert result.visible_count == result.total_count == 6
