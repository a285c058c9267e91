"""Reporting-line tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from orgchart.models.employee import EmployeeRecord


class HierarchyNode(BaseModel):
    """Immutable node of a reporting-line tree."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    designation: str | None = None
    branch: str | None = None
    manager_id: str | None = None
    profile_id: str | None = None
    children: tuple[HierarchyNode, ...] = ()

    @classmethod
    def from_record(
        cls,
        record: EmployeeRecord,
        children: tuple[HierarchyNode, ...] = (),
    ) -> HierarchyNode:
        return cls(
            id=record.id,
            name=record.name,
            designation=record.designation,
            branch=record.branch,
            manager_id=record.manager_id,
            profile_id=record.profile_id,
            children=children,
        )


class HierarchyResult(BaseModel):
    """A tree and its member count, computed from the same snapshot."""

    model_config = ConfigDict(frozen=True)

    tree: HierarchyNode
    total_count: int


class HierarchySearchResult(BaseModel):
    tree: HierarchyNode | None = None
    total_count: int
    visible_count: int
    query: str


class ExpansionStateResponse(BaseModel):
    session_id: str
    expanded: list[str]
