from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from orgchart.main import app
from orgchart.models.employee import EmployeeRecord
from orgchart.services.expansion_state import expansion_store


@pytest.fixture(autouse=True)
def _clear_expansion_store():
    yield
    expansion_store.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def make_record(
    record_id: str,
    manager_id: str | None = None,
    name: str | None = None,
    designation: str | None = None,
    branch: str | None = None,
) -> EmployeeRecord:
    return EmployeeRecord(
        id=record_id,
        name=name if name is not None else f"Employee {record_id}",
        designation=designation,
        branch=branch,
        manager_id=manager_id,
    )


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def scenario_records() -> list[EmployeeRecord]:
    return [
        make_record("1"),
        make_record("2", manager_id="1"),
        make_record("3", manager_id="1"),
        make_record("4", manager_id="2"),
    ]


@pytest.fixture
def search_records() -> list[EmployeeRecord]:
    return [
        make_record("root", name="Priya Raman", designation="Director"),
        make_record("x", manager_id="root", name="Anna Smith", designation="Sales Lead"),
        make_record("y", manager_id="root", name="Ravi Kumar", designation="Branch Head"),
        make_record("z", manager_id="y", name="Tom Goldsmith", designation="Executive"),
        make_record("w", manager_id="root", name="Meera Iyer", designation="Accountant"),
        make_record("w1", manager_id="w", name="Kiran Das", designation="Clerk"),
    ]
