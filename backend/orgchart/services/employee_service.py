"""Cosmos DB employee directory (read-only)."""

from __future__ import annotations

import logging
from typing import Any

from azure.cosmos.aio import CosmosClient
from azure.cosmos.exceptions import CosmosHttpResponseError

from orgchart.core.config import Settings
from orgchart.models.employee import EmployeeRecord

logger = logging.getLogger(__name__)

# Cosmos DB document keys → EmployeeRecord attribute names
_FIELD_MAP: list[tuple[str, str]] = [
    ("name", "name"),
    ("designation", "designation"),
    ("branch", "branch"),
    ("manager_id", "managerId"),
    ("profile_id", "employeeProfileId"),
]


class EmployeeDirectoryError(Exception):
    pass


class EmployeeService:
    def __init__(self) -> None:
        self.client: CosmosClient | None = None
        self.container: Any = None
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        endpoint = settings.COSMOS_DB_ENDPOINT
        key = settings.COSMOS_DB_KEY
        database_name = settings.COSMOS_DB_DATABASE
        container_name = settings.COSMOS_DB_EMPLOYEES_CONTAINER

        if not endpoint or not key:
            logger.warning("Cosmos DB credentials missing — employee directory not initialized")
            return

        self.client = CosmosClient(endpoint, key)
        db = self.client.get_database_client(database_name)
        self.container = db.get_container_client(container_name)
        self.initialized = True
        logger.info("EmployeeService initialized (container=%s)", container_name)

    async def close(self) -> None:
        if self.client:
            await self.client.close()
            self.client = None
            self.container = None
            self.initialized = False

    async def fetch_employees(self) -> list[EmployeeRecord]:
        """Return a full directory snapshot in container iteration order."""
        if not self.container:
            raise EmployeeDirectoryError("Employee directory not initialized")

        records: list[EmployeeRecord] = []
        try:
            async for item in self.container.read_all_items():
                records.append(self._transform_employee(item))
        except CosmosHttpResponseError as err:
            raise EmployeeDirectoryError(f"Failed to read employee directory: {err.message}") from err

        logger.debug("Fetched %d employee records", len(records))
        return records

    async def get_employee(self, employee_id: str) -> EmployeeRecord | None:
        if not self.container:
            raise EmployeeDirectoryError("Employee directory not initialized")

        query = "SELECT * FROM c WHERE c.id = @id"
        params: list[dict[str, str]] = [{"name": "@id", "value": employee_id}]

        items: list[dict[str, Any]] = []
        try:
            async for item in self.container.query_items(
                query=query,
                parameters=params,
                enable_cross_partition_query=True,
            ):
                items.append(item)
        except CosmosHttpResponseError as err:
            raise EmployeeDirectoryError(f"Failed to read employee {employee_id}: {err.message}") from err

        if not items:
            return None

        return self._transform_employee(items[0])

    async def check_connection(self) -> bool:
        if not self.container:
            return False
        try:
            query = "SELECT VALUE COUNT(1) FROM c"
            async for _ in self.container.query_items(
                query=query,
                enable_cross_partition_query=True,
            ):
                return True
            return True
        except Exception:
            logger.exception("Cosmos DB connection check failed")
            return False

    def _transform_employee(self, raw: dict[str, Any]) -> EmployeeRecord:
        data: dict[str, Any] = {"id": raw.get("id") or raw.get("_id") or "unknown"}

        for python_key, cosmos_key in _FIELD_MAP:
            data[python_key] = raw.get(cosmos_key)

        # Fall back to the profile id when the display name is empty
        if not data.get("name"):
            data["name"] = raw.get("employeeProfileId")

        return EmployeeRecord(**data)


employee_service = EmployeeService()
