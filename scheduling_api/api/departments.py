"""부서 라우터 — 부서 CRUD 엔드포인트.

Department Router — CRUD endpoints for departments.
Lists are ordered by production order and carry the total count in
the X-Total-Count header.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.database import get_db
from scheduling_api.schemas.common import MessageResponse
from scheduling_api.schemas.department import DepartmentCreate, DepartmentResponse, DepartmentUpdate
from scheduling_api.services.department_service import department_service
from scheduling_api.utils.pagination import TOTAL_COUNT_HEADER, PageParams, page_params

router: APIRouter = APIRouter()


@router.post("", response_model=DepartmentResponse, status_code=201)
async def create_department(
    data: DepartmentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DepartmentResponse:
    """새 부서를 생성합니다.

    Create a new department.
    """
    result: DepartmentResponse = await department_service.create_department(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[DepartmentResponse])
async def list_departments(
    response: Response,
    params: Annotated[PageParams, Depends(page_params)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[DepartmentResponse]:
    """부서 목록을 생산 순서로 조회합니다.

    List departments ordered by production order.
    """
    items, total = await department_service.list_departments(db, params)
    response.headers[TOTAL_COUNT_HEADER] = str(total)
    return items


@router.get("/{department_id}", response_model=DepartmentResponse)
async def get_department(
    department_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DepartmentResponse:
    """부서 상세를 조회합니다."""
    return await department_service.get_department(db, department_id)


@router.put("/{department_id}", response_model=MessageResponse)
async def update_department(
    department_id: int,
    data: DepartmentUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """부서 정보를 수정합니다.

    Update a department's name and/or production order.
    """
    await department_service.update_department(db, department_id, data)
    await db.commit()
    return MessageResponse(message="Department updated successfully")


@router.delete("/{department_id}", status_code=204)
async def delete_department(
    department_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """부서를 삭제합니다. 직원/오더가 연결되어 있으면 400.

    Delete a department. Refused while employees or service orders reference it.
    """
    await department_service.delete_department(db, department_id)
    await db.commit()
