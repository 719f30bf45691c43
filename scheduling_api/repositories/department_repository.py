"""부서 레포지토리 — 부서 CRUD 및 연결 확인 쿼리.

Department Repository — CRUD queries for departments, plus the
conflict and dependency lookups used before writes and deletions.
"""

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.models.department import Department
from scheduling_api.models.employee import EmployeeDepartment
from scheduling_api.models.service_order import ServiceOrderDepartment
from scheduling_api.repositories.base import BaseRepository


class DepartmentRepository(BaseRepository[Department]):
    """부서 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the departments table.
    """

    def __init__(self) -> None:
        super().__init__(Department)

    def build_list_query(self, search: str | None = None) -> Select:
        """부서 목록 쿼리를 생성합니다 — 생산 순서 오름차순.

        Build the department list query ordered by production_order,
        optionally filtered by a case-insensitive name match.
        """
        query: Select = select(Department)
        if search:
            query = query.where(Department.name.ilike(f"%{search}%"))
        return query.order_by(Department.production_order.asc(), Department.id.asc())

    async def find_conflicts(
        self,
        db: AsyncSession,
        name: str | None,
        production_order: int | None,
        exclude_id: int | None = None,
    ) -> list[Department]:
        """이름 또는 생산 순서가 겹치는 다른 부서를 조회합니다.

        Return departments (other than exclude_id) sharing the given name
        or production order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 확인할 이름 (Name to check, None to skip)
            production_order: 확인할 생산 순서 (Order to check, None to skip)
            exclude_id: 제외할 부서 ID — 수정 시 자기 자신 (Department to ignore)

        Returns:
            list[Department]: 충돌하는 부서 목록 (Conflicting departments)
        """
        conditions = []
        if name is not None:
            conditions.append(Department.name == name)
        if production_order is not None:
            conditions.append(Department.production_order == production_order)
        if not conditions:
            return []

        query: Select = select(Department).where(or_(*conditions))
        if exclude_id is not None:
            query = query.where(Department.id != exclude_id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_ids(self, db: AsyncSession, department_ids: list[int]) -> list[Department]:
        """ID 목록으로 부서를 조회합니다 (생산 순서 정렬)."""
        if not department_ids:
            return []
        result = await db.execute(
            select(Department)
            .where(Department.id.in_(set(department_ids)))
            .order_by(Department.production_order)
        )
        return list(result.scalars().all())

    async def has_employees(self, db: AsyncSession, department_id: int) -> bool:
        """부서에 소속된 직원이 있는지 확인합니다."""
        result = await db.execute(
            select(EmployeeDepartment.employee_id)
            .where(EmployeeDepartment.department_id == department_id)
            .limit(1)
        )
        return result.first() is not None

    async def has_service_orders(self, db: AsyncSession, department_id: int) -> bool:
        """부서를 참조하는 서비스 오더가 있는지 확인합니다."""
        result = await db.execute(
            select(ServiceOrderDepartment.id)
            .where(ServiceOrderDepartment.department_id == department_id)
            .limit(1)
        )
        return result.first() is not None


# 싱글턴 인스턴스 — Singleton instance
department_repository: DepartmentRepository = DepartmentRepository()
