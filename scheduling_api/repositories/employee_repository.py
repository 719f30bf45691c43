"""직원 레포지토리 — 직원 CRUD 및 부서 매핑 쿼리.

Employee Repository — CRUD and department mapping queries for employees.
Extends BaseRepository with username lookups, searchable listing and
cleanup of service order assignments on deletion.
"""

from sqlalchemy import Select, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.models.employee import Employee
from scheduling_api.models.service_order import ServiceOrderCollaborator
from scheduling_api.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """직원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the employees table.
    Departments are eager-loaded through the relationship's selectin loader.
    """

    def __init__(self) -> None:
        super().__init__(Employee)

    async def get_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> Employee | None:
        """로그인 아이디로 직원을 조회합니다.

        Retrieve an employee by exact username.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 로그인 아이디 (Login username)

        Returns:
            Employee | None: 직원 또는 None (Employee or None)
        """
        result = await db.execute(select(Employee).where(Employee.username == username))
        return result.scalar_one_or_none()

    def build_list_query(self, search: str | None = None) -> Select:
        """직원 목록 쿼리를 생성합니다 — 이름/아이디 검색.

        Build the employee list query ordered by id, optionally filtered
        by a case-insensitive match on name or username.
        """
        query: Select = select(Employee)
        if search:
            pattern: str = f"%{search}%"
            query = query.where(or_(Employee.name.ilike(pattern), Employee.username.ilike(pattern)))
        return query.order_by(Employee.id.asc())

    async def get_all(self, db: AsyncSession) -> list[Employee]:
        """모든 직원을 ID 순으로 조회합니다."""
        result = await db.execute(select(Employee).order_by(Employee.id.asc()))
        return list(result.scalars().all())

    async def delete_assignments(self, db: AsyncSession, employee_id: int) -> None:
        """직원의 서비스 오더 배정을 모두 삭제합니다.

        Remove every service order assignment of the employee.
        """
        await db.execute(
            delete(ServiceOrderCollaborator).where(ServiceOrderCollaborator.collaborator_id == employee_id)
        )


# 싱글턴 인스턴스 — Singleton instance
employee_repository: EmployeeRepository = EmployeeRepository()
