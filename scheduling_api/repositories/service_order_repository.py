"""서비스 오더 레포지토리 — 오더 및 하위 레코드 쿼리.

Service Order Repository — Queries for service orders and their child
records (service days, department entries, collaborators).
Child rows are inserted and removed with explicit statements so that the
whole tree can be rewritten inside the caller's transaction.
"""

from datetime import time
from typing import Sequence

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from scheduling_api.models.service_order import (
    ServiceOrder,
    ServiceOrderCollaborator,
    ServiceOrderDay,
    ServiceOrderDepartment,
)
from scheduling_api.repositories.base import BaseRepository


class ServiceOrderRepository(BaseRepository[ServiceOrder]):
    """서비스 오더 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for service orders and their children.
    """

    def __init__(self) -> None:
        super().__init__(ServiceOrder)

    def _with_details(self, query: Select) -> Select:
        """상세 조회용 eager loading 옵션을 적용합니다.

        Attach eager loaders for days, department entries (with the
        department row) and collaborators. populate_existing refreshes
        objects already in the identity map after child rows were rewritten.
        """
        return query.options(
            selectinload(ServiceOrder.service_days),
            selectinload(ServiceOrder.departments).selectinload(ServiceOrderDepartment.department),
            selectinload(ServiceOrder.departments).selectinload(ServiceOrderDepartment.collaborators),
        ).execution_options(populate_existing=True)

    async def get_detail(self, db: AsyncSession, os_id: int) -> ServiceOrder | None:
        """서비스 오더를 하위 레코드와 함께 조회합니다.

        Retrieve a service order with all child records loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            os_id: 서비스 오더 ID (Service order id)

        Returns:
            ServiceOrder | None: 오더 또는 None (Service order or None)
        """
        query: Select = self._with_details(select(ServiceOrder).where(ServiceOrder.id == os_id))
        result = await db.execute(query)
        return result.scalar_one_or_none()

    def build_list_query(self, search: str | None = None) -> Select:
        """서비스 오더 목록 쿼리를 생성합니다 — 오더 번호 검색.

        Build the service order list query, newest id last, optionally
        filtered by a case-insensitive match on os_number.
        """
        query: Select = select(ServiceOrder)
        if search:
            query = query.where(ServiceOrder.os_number.ilike(f"%{search}%"))
        return self._with_details(query.order_by(ServiceOrder.id.asc()))

    async def add_service_days(self, db: AsyncSession, os_id: int, days: Sequence[int]) -> None:
        """실행 요일 행을 삽입합니다 (Insert one row per day of week)."""
        db.add_all([ServiceOrderDay(os_id=os_id, day_of_week=day) for day in days])
        await db.flush()

    async def add_department_entry(
        self,
        db: AsyncSession,
        os_id: int,
        department_id: int,
        execution_start: time,
        execution_end: time,
    ) -> ServiceOrderDepartment:
        """부서 항목을 삽입하고 생성된 행을 반환합니다.

        Insert a department entry and flush so its id can be referenced
        by collaborator rows.
        """
        entry = ServiceOrderDepartment(
            os_id=os_id,
            department_id=department_id,
            execution_start=execution_start,
            execution_end=execution_end,
        )
        db.add(entry)
        await db.flush()
        return entry

    async def add_collaborators(
        self,
        db: AsyncSession,
        os_department_id: int,
        collaborator_ids: Sequence[int],
    ) -> None:
        """부서 항목에 배정 직원 행을 삽입합니다."""
        db.add_all([
            ServiceOrderCollaborator(os_department_id=os_department_id, collaborator_id=collaborator_id)
            for collaborator_id in collaborator_ids
        ])
        await db.flush()

    async def delete_service_days(self, db: AsyncSession, os_id: int) -> None:
        """오더의 실행 요일 행을 모두 삭제합니다."""
        await db.execute(delete(ServiceOrderDay).where(ServiceOrderDay.os_id == os_id))

    async def delete_department_entries(self, db: AsyncSession, os_id: int) -> None:
        """오더의 부서 항목과 배정 직원을 모두 삭제합니다.

        Delete collaborators first, then the department entries they reference.
        """
        entry_ids = select(ServiceOrderDepartment.id).where(ServiceOrderDepartment.os_id == os_id)
        await db.execute(
            delete(ServiceOrderCollaborator).where(ServiceOrderCollaborator.os_department_id.in_(entry_ids))
        )
        await db.execute(delete(ServiceOrderDepartment).where(ServiceOrderDepartment.os_id == os_id))

    async def delete_order(self, db: AsyncSession, os_id: int) -> None:
        """오더와 모든 하위 레코드를 삭제합니다 (Children first, then the parent)."""
        await self.delete_department_entries(db, os_id)
        await self.delete_service_days(db, os_id)
        await db.execute(delete(ServiceOrder).where(ServiceOrder.id == os_id))


# 싱글턴 인스턴스 — Singleton instance
service_order_repository: ServiceOrderRepository = ServiceOrderRepository()
