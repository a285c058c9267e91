from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from orgchart.models.employee import EmployeeRecord
from orgchart.services.employee_service import EmployeeDirectoryError, employee_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeRecord])
async def list_employees(
    skip: int = Query(0, ge=0),  # noqa: B008
    limit: int = Query(50, ge=1),  # noqa: B008
):
    try:
        records = await employee_service.fetch_employees()
    except EmployeeDirectoryError as err:
        logger.error("Employee directory unavailable: %s", err)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee directory unavailable",
        ) from err
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err

    return records[skip : skip + limit]


@router.get("/{employee_id}", response_model=EmployeeRecord)
async def get_employee(employee_id: str):
    try:
        employee = await employee_service.get_employee(employee_id)
    except EmployeeDirectoryError as err:
        logger.error("Employee directory unavailable: %s", err)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee directory unavailable",
        ) from err
    except Exception as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employee",
        ) from err

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        )

    return employee
