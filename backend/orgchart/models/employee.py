"""Employee directory records as read from Cosmos DB."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class EmployeeRecord(BaseModel):
    """One row of the employee directory, pointing at its manager."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    designation: str | None = None
    branch: str | None = None
    manager_id: str | None = None
    profile_id: str | None = None

    @field_validator("id", "manager_id", "profile_id", mode="before")
    @classmethod
    def _normalize_identifier(cls, value: object) -> object:
        # Directory ids may arrive as ints or ObjectId-like values
        if value is None or value == "":
            return None
        return str(value)
