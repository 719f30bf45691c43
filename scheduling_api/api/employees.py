"""직원 라우터 — 직원(협력자) CRUD 엔드포인트.

Employee Router — CRUD endpoints for employees (collaborators).

Routes:
    - /employee, /employee/all, /employee/{id}: 직원 관리 (Employee management)
    - /employees/{username}: 아이디로 조회 (Lookup by username)

/employee/all is declared before /employee/{id} so that "all" is never
parsed as an id.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.database import get_db
from scheduling_api.schemas.common import MessageResponse
from scheduling_api.schemas.employee import (
    EmployeeCreate,
    EmployeeDetail,
    EmployeeListItem,
    EmployeeResponse,
    EmployeeSummary,
    EmployeeUpdate,
)
from scheduling_api.services.employee_service import employee_service
from scheduling_api.utils.pagination import TOTAL_COUNT_HEADER, PageParams, page_params

router: APIRouter = APIRouter()


@router.post("/employee", response_model=EmployeeResponse, status_code=201)
async def create_employee(
    data: EmployeeCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeResponse:
    """새 직원을 생성합니다.

    Create a new employee (password is bcrypt-hashed).
    """
    result: EmployeeResponse = await employee_service.create_employee(db, data)
    await db.commit()
    return result


@router.get("/employee", response_model=list[EmployeeListItem])
async def list_employees(
    response: Response,
    params: Annotated[PageParams, Depends(page_params)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[EmployeeListItem]:
    """직원 목록을 조회합니다 — 이름/아이디 검색.

    List employees with paging and name/username search.
    """
    items, total = await employee_service.list_employees(db, params)
    response.headers[TOTAL_COUNT_HEADER] = str(total)
    return items


@router.get("/employee/all", response_model=list[EmployeeSummary])
async def list_all_employees(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[EmployeeSummary]:
    """모든 직원을 요약 형태로 조회합니다.

    List every employee with department names, unpaginated.
    """
    return await employee_service.list_all_employees(db)


@router.get("/employees/{username}", response_model=EmployeeSummary)
async def get_employee_by_username(
    username: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeSummary:
    """아이디로 직원을 조회합니다."""
    return await employee_service.get_by_username(db, username)


@router.get("/employee/{employee_id}", response_model=EmployeeDetail)
async def get_employee(
    employee_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeDetail:
    """직원 상세를 조회합니다."""
    return await employee_service.get_employee(db, employee_id)


@router.put("/employee/{employee_id}", response_model=MessageResponse)
async def update_employee(
    employee_id: int,
    data: EmployeeUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """직원 정보를 수정합니다.

    Update an employee; a departments list replaces the whole association.
    """
    await employee_service.update_employee(db, employee_id, data)
    await db.commit()
    return MessageResponse(message="Employee updated successfully")


@router.delete("/employee/{employee_id}", status_code=204)
async def delete_employee(
    employee_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """직원을 삭제합니다 — 부서 매핑과 오더 배정도 함께 삭제.

    Delete an employee with their department links and service order assignments.
    """
    await employee_service.delete_employee(db, employee_id)
    await db.commit()
