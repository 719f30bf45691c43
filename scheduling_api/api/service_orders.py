"""서비스 오더 라우터 — 오더 CRUD 엔드포인트.

Service Order Router — CRUD endpoints for service orders.
Each write endpoint runs as one transaction: the service stages all rows
and the router commits only when every step succeeded.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.database import get_db
from scheduling_api.schemas.common import MessageResponse
from scheduling_api.schemas.service_order import (
    ServiceOrderCreate,
    ServiceOrderResponse,
    ServiceOrderUpdate,
)
from scheduling_api.services.service_order_service import service_order_service
from scheduling_api.utils.pagination import TOTAL_COUNT_HEADER, PageParams, page_params

router: APIRouter = APIRouter()


@router.post("", response_model=ServiceOrderResponse, status_code=201)
async def create_service_order(
    data: ServiceOrderCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ServiceOrderResponse:
    """서비스 오더를 생성합니다 — 요일, 부서 항목, 배정 직원 포함.

    Create a service order with its days, department entries and collaborators.
    """
    result: ServiceOrderResponse = await service_order_service.create_service_order(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[ServiceOrderResponse])
async def list_service_orders(
    response: Response,
    params: Annotated[PageParams, Depends(page_params)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ServiceOrderResponse]:
    """서비스 오더 목록을 조회합니다 — 오더 번호 검색.

    List service orders with details, paging and os_number search.
    """
    items, total = await service_order_service.list_service_orders(db, params)
    response.headers[TOTAL_COUNT_HEADER] = str(total)
    return items


@router.get("/{os_id}", response_model=ServiceOrderResponse)
async def get_service_order(
    os_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ServiceOrderResponse:
    """서비스 오더 상세를 조회합니다."""
    return await service_order_service.get_service_order(db, os_id)


@router.put("/{os_id}", response_model=ServiceOrderResponse)
async def update_service_order(
    os_id: int,
    data: ServiceOrderUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ServiceOrderResponse:
    """서비스 오더를 수정합니다.

    Update a service order; provided days or departments replace the existing ones.
    """
    result: ServiceOrderResponse = await service_order_service.update_service_order(db, os_id, data)
    await db.commit()
    return result


@router.delete("/{os_id}", response_model=MessageResponse)
async def delete_service_order(
    os_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """서비스 오더와 모든 하위 레코드를 삭제합니다."""
    await service_order_service.delete_service_order(db, os_id)
    await db.commit()
    return MessageResponse(message="Service order deleted successfully")
