"""서비스 오더 서비스 — 오더 생성/수정/삭제 트랜잭션 워크플로.

Service Order Service — Transactional workflow for service orders.

Create/Update Flow:
    1. 요청 값 검증 — 오더 번호, 요일(0~6), 부서 항목 존재
       (Validate order number, days 0-6, at least one department entry)
    2. 오더 번호 중복 확인 (Reject a taken os_number with 409)
    3. 부모 레코드 삽입/수정 후 요일 행 삽입
       (Insert or update the parent, then insert the day rows)
    4. 부서 항목마다 시각 형식, 부서 존재, 직원 존재를 확인하고 삽입
       (Per department entry: check times, department and collaborators, then insert)
    5. 라우터가 커밋 — 중간에 예외가 나면 요청 트랜잭션 전체가 롤백
       (The router commits; any exception rolls the whole request transaction back)
"""

from datetime import datetime, time, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.models.service_order import ServiceOrder, ServiceOrderDepartment
from scheduling_api.repositories.department_repository import department_repository
from scheduling_api.repositories.employee_repository import employee_repository
from scheduling_api.repositories.service_order_repository import service_order_repository
from scheduling_api.schemas.service_order import (
    ServiceOrderCreate,
    ServiceOrderDepartmentInput,
    ServiceOrderDepartmentResponse,
    ServiceOrderResponse,
    ServiceOrderUpdate,
)
from scheduling_api.utils.exceptions import BadRequestError, DuplicateError, NotFoundError
from scheduling_api.utils.pagination import PageParams
from scheduling_api.utils.time_format import format_hhmm, parse_hhmm


class ServiceOrderService:
    """서비스 오더 관련 비즈니스 로직을 처리하는 서비스.

    Service handling the service order workflow. Every write method only
    flushes; the caller's session holds the single transaction.
    """

    def _to_response(self, order: ServiceOrder) -> ServiceOrderResponse:
        """하위 레코드가 로드된 오더를 응답 스키마로 변환합니다.

        Convert a service order with children loaded to its response schema.
        """
        return ServiceOrderResponse(
            id=order.id,
            os_number=order.os_number,
            created_at=order.created_at,
            service_days=sorted(d.day_of_week for d in order.service_days),
            departments=[self._entry_to_response(entry) for entry in order.departments],
        )

    def _entry_to_response(self, entry: ServiceOrderDepartment) -> ServiceOrderDepartmentResponse:
        return ServiceOrderDepartmentResponse(
            id=entry.id,
            department_id=entry.department_id,
            department_name=entry.department.name,
            execution_start=format_hhmm(entry.execution_start),
            execution_end=format_hhmm(entry.execution_end),
            collaborators=[c.collaborator_id for c in entry.collaborators],
        )

    def _validate_days(self, service_days: list[int]) -> list[int]:
        """실행 요일을 검증하고 중복 제거된 정렬 목록을 반환합니다.

        Raises:
            BadRequestError: 0~6 범위를 벗어난 요일 (Day outside 0-6)
        """
        if any(day < 0 or day > 6 for day in service_days):
            raise BadRequestError("Service days must be between 0 (Sunday) and 6 (Saturday)")
        return sorted(set(service_days))

    async def _ensure_number_available(
        self,
        db: AsyncSession,
        os_number: str,
        exclude_id: int | None = None,
    ) -> None:
        if await service_order_repository.exists(db, {"os_number": os_number}, exclude_id=exclude_id):
            raise DuplicateError("Service order number already exists")

    async def _insert_department_entries(
        self,
        db: AsyncSession,
        os_id: int,
        entries: list[ServiceOrderDepartmentInput],
    ) -> None:
        """부서 항목과 배정 직원을 순서대로 검증하고 삽입합니다.

        Validate and insert each department entry with its collaborators.
        Rows inserted before a failing entry are discarded by the
        request transaction rollback.

        Raises:
            BadRequestError: 시각 형식 오류, 존재하지 않는 부서 또는 직원
                             (Bad HH:MM time, unknown department, unknown collaborator)
        """
        for entry in entries:
            start: time | None = parse_hhmm(entry.execution_start)
            end: time | None = parse_hhmm(entry.execution_end)
            if start is None or end is None:
                raise BadRequestError("Invalid time format (use HH:MM)")

            if await department_repository.get_by_id(db, entry.department_id) is None:
                raise BadRequestError(f"Department {entry.department_id} does not exist")

            created: ServiceOrderDepartment = await service_order_repository.add_department_entry(
                db, os_id, entry.department_id, start, end
            )

            collaborator_ids: list[int] = list(dict.fromkeys(entry.collaborator_ids))
            if not collaborator_ids:
                continue

            found: set[int] = await employee_repository.existing_ids(db, collaborator_ids)
            if len(found) != len(collaborator_ids):
                missing = sorted(set(collaborator_ids) - found)
                raise BadRequestError(f"Invalid collaborator(s): {', '.join(map(str, missing))}")

            await service_order_repository.add_collaborators(db, created.id, collaborator_ids)

    async def _load_response(self, db: AsyncSession, os_id: int) -> ServiceOrderResponse:
        order: ServiceOrder | None = await service_order_repository.get_detail(db, os_id)
        if order is None:
            raise NotFoundError("Service order not found")
        return self._to_response(order)

    async def list_service_orders(
        self,
        db: AsyncSession,
        params: PageParams,
    ) -> tuple[list[ServiceOrderResponse], int]:
        """서비스 오더 목록을 상세 정보와 함께 조회합니다.

        Returns:
            tuple[list[ServiceOrderResponse], int]: (오더 목록, 전체 개수)
        """
        query = service_order_repository.build_list_query(params.search)
        orders, total = await service_order_repository.get_paginated(db, query, params.page, params.limit)
        return [self._to_response(o) for o in orders], total

    async def get_service_order(self, db: AsyncSession, os_id: int) -> ServiceOrderResponse:
        """서비스 오더 상세를 조회합니다.

        Raises:
            NotFoundError: 오더를 찾을 수 없을 때 (Service order not found)
        """
        return await self._load_response(db, os_id)

    async def create_service_order(
        self,
        db: AsyncSession,
        data: ServiceOrderCreate,
    ) -> ServiceOrderResponse:
        """서비스 오더를 생성합니다.

        Create a service order with its days, department entries and
        collaborators as one unit of work.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 오더 생성 데이터 (Service order creation data)

        Returns:
            ServiceOrderResponse: 생성된 오더 상세 (Created service order with details)

        Raises:
            BadRequestError: 필수 값 누락, 잘못된 요일/시각/부서/직원
                             (Missing values or invalid day, time, department, collaborator)
            DuplicateError: 오더 번호 중복 (os_number already taken)
        """
        os_number: str = data.os_number.strip()
        if not os_number or not data.service_days:
            raise BadRequestError("Service order number and service days are required")

        days: list[int] = self._validate_days(data.service_days)

        if not data.departments:
            raise BadRequestError("At least one department is required")

        await self._ensure_number_available(db, os_number)

        order: ServiceOrder = await service_order_repository.create(db, {"os_number": os_number})
        await service_order_repository.add_service_days(db, order.id, days)
        await self._insert_department_entries(db, order.id, data.departments)

        return await self._load_response(db, order.id)

    async def update_service_order(
        self,
        db: AsyncSession,
        os_id: int,
        data: ServiceOrderUpdate,
    ) -> ServiceOrderResponse:
        """서비스 오더를 수정합니다.

        Update a service order. Provided service_days or departments
        replace the existing rows, with the same validation as creation.

        Raises:
            NotFoundError: 오더를 찾을 수 없을 때 (Service order not found)
            BadRequestError: 빈 값, 잘못된 요일/시각/부서/직원
                             (Blank values or invalid day, time, department, collaborator)
            DuplicateError: 다른 오더와 번호 중복 (os_number taken by another order)
        """
        order: ServiceOrder | None = await service_order_repository.get_by_id(db, os_id)
        if order is None:
            raise NotFoundError("Service order not found")

        if data.os_number is not None:
            os_number: str = data.os_number.strip()
            if not os_number:
                raise BadRequestError("Service order number cannot be empty")
            if os_number != order.os_number:
                await self._ensure_number_available(db, os_number, exclude_id=os_id)
                await service_order_repository.update(db, order, {"os_number": os_number})

        children_rewritten: bool = False

        if data.service_days is not None:
            if not data.service_days:
                raise BadRequestError("At least one service day is required")
            days: list[int] = self._validate_days(data.service_days)
            await service_order_repository.delete_service_days(db, os_id)
            await service_order_repository.add_service_days(db, os_id, days)
            children_rewritten = True

        if data.departments is not None:
            if not data.departments:
                raise BadRequestError("At least one department is required")
            await service_order_repository.delete_department_entries(db, os_id)
            await self._insert_department_entries(db, os_id, data.departments)
            children_rewritten = True

        # 하위 레코드만 바뀌면 onupdate가 동작하지 않으므로 직접 갱신
        if children_rewritten:
            await service_order_repository.update(db, order, {"updated_at": datetime.now(timezone.utc)})

        return await self._load_response(db, os_id)

    async def delete_service_order(self, db: AsyncSession, os_id: int) -> None:
        """서비스 오더와 모든 하위 레코드를 삭제합니다.

        Raises:
            NotFoundError: 오더를 찾을 수 없을 때 (Service order not found)
        """
        order: ServiceOrder | None = await service_order_repository.get_by_id(db, os_id)
        if order is None:
            raise NotFoundError("Service order not found")

        await service_order_repository.delete_order(db, os_id)


# 싱글턴 인스턴스 — Singleton instance
service_order_service: ServiceOrderService = ServiceOrderService()
