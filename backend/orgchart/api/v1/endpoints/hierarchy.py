from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from orgchart.models.hierarchy import (
    ExpansionStateResponse,
    HierarchyResult,
    HierarchySearchResult,
)
from orgchart.services.employee_service import EmployeeDirectoryError
from orgchart.services.expansion_state import ExpansionState, expansion_store
from orgchart.services.hierarchy_builder import RootNotFoundError
from orgchart.services.hierarchy_service import hierarchy_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hierarchy", tags=["hierarchy"])


async def _load_hierarchy(root_id: str) -> HierarchyResult:
    try:
        return await hierarchy_service.get_hierarchy(root_id)
    except RootNotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Manager '{root_id}' not found",
        ) from err
    except EmployeeDirectoryError as err:
        logger.error("Employee directory unavailable: %s", err)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee directory unavailable",
        ) from err
    except Exception as err:
        logger.exception("Failed to build hierarchy for %s", root_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch hierarchy",
        ) from err


def _expansion_response(session_id: str, state: ExpansionState) -> ExpansionStateResponse:
    return ExpansionStateResponse(session_id=session_id, expanded=sorted(state))


@router.get("/{root_id}", response_model=HierarchySearchResult)
async def get_hierarchy(root_id: str, search: str = ""):
    result = await _load_hierarchy(root_id)
    return hierarchy_service.search_result(result, search)


@router.get("/sessions/{session_id}/expanded", response_model=ExpansionStateResponse)
async def get_expanded(session_id: str):
    return _expansion_response(session_id, expansion_store.get(session_id))


@router.post("/sessions/{session_id}/toggle/{node_id}", response_model=ExpansionStateResponse)
async def toggle_node(session_id: str, node_id: str):
    state = expansion_store.toggle(session_id, node_id)
    return _expansion_response(session_id, state)


@router.post("/sessions/{session_id}/expand-all/{root_id}", response_model=ExpansionStateResponse)
async def expand_all(session_id: str, root_id: str, search: str = ""):
    result = await _load_hierarchy(root_id)
    tree = hierarchy_service.search_result(result, search).tree
    if tree is None:
        return _expansion_response(session_id, expansion_store.get(session_id))
    state = expansion_store.expand_all(session_id, tree)
    return _expansion_response(session_id, state)


@router.post("/sessions/{session_id}/collapse-all/{root_id}", response_model=ExpansionStateResponse)
async def collapse_all(session_id: str, root_id: str):
    result = await _load_hierarchy(root_id)
    state = expansion_store.collapse_all(session_id, result.tree)
    return _expansion_response(session_id, state)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def reset_session(session_id: str):
    expansion_store.reset(session_id)
