"""부서 서비스 — 부서 CRUD 비즈니스 로직.

Department Service — Business logic for department CRUD operations.
Enforces unique names and production orders, and refuses to delete a
department that employees or service orders still reference.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.models.department import Department
from scheduling_api.repositories.department_repository import department_repository
from scheduling_api.schemas.department import DepartmentCreate, DepartmentResponse, DepartmentUpdate
from scheduling_api.utils.exceptions import BadRequestError, DuplicateError, NotFoundError
from scheduling_api.utils.pagination import PageParams


class DepartmentService:
    """부서 관련 비즈니스 로직을 처리하는 서비스.

    Service handling department business logic.
    """

    def _to_response(self, department: Department) -> DepartmentResponse:
        """부서 모델을 응답 스키마로 변환합니다."""
        return DepartmentResponse(
            id=department.id,
            name=department.name,
            production_order=department.production_order,
        )

    async def _check_conflicts(
        self,
        db: AsyncSession,
        name: str | None,
        production_order: int | None,
        exclude_id: int | None = None,
    ) -> None:
        """이름/생산 순서 충돌을 확인합니다.

        Raise DuplicateError naming every conflicting field, e.g.
        "Conflict in: name, production order".

        Raises:
            DuplicateError: 다른 부서와 이름 또는 순서가 겹칠 때
                            (Name or production order already used by another department)
        """
        existing: list[Department] = await department_repository.find_conflicts(
            db, name, production_order, exclude_id
        )
        if not existing:
            return

        conflicts: list[str] = []
        if name is not None and any(d.name == name for d in existing):
            conflicts.append("name")
        if production_order is not None and any(d.production_order == production_order for d in existing):
            conflicts.append("production order")
        raise DuplicateError(f"Conflict in: {', '.join(conflicts)}")

    async def list_departments(
        self,
        db: AsyncSession,
        params: PageParams,
    ) -> tuple[list[DepartmentResponse], int]:
        """부서 목록을 생산 순서로 조회합니다.

        List departments ordered by production order, with search and paging.

        Returns:
            tuple[list[DepartmentResponse], int]: (부서 목록, 전체 개수)
        """
        query = department_repository.build_list_query(params.search)
        departments, total = await department_repository.get_paginated(
            db, query, params.page, params.limit
        )
        return [self._to_response(d) for d in departments], total

    async def get_department(self, db: AsyncSession, department_id: int) -> DepartmentResponse:
        """부서 상세를 조회합니다.

        Raises:
            NotFoundError: 부서를 찾을 수 없을 때 (Department not found)
        """
        department: Department | None = await department_repository.get_by_id(db, department_id)
        if department is None:
            raise NotFoundError("Department not found")
        return self._to_response(department)

    async def create_department(
        self,
        db: AsyncSession,
        data: DepartmentCreate,
    ) -> DepartmentResponse:
        """새 부서를 생성합니다.

        Create a new department.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 부서 생성 데이터 (Department creation data)

        Returns:
            DepartmentResponse: 생성된 부서 (Created department)

        Raises:
            BadRequestError: 이름이 비어 있을 때 (Blank name)
            DuplicateError: 이름 또는 생산 순서 중복 (Name or order already taken)
        """
        name: str = data.name.strip()
        if not name:
            raise BadRequestError("Name and production order are required")

        await self._check_conflicts(db, name, data.production_order)

        department: Department = await department_repository.create(
            db, {"name": name, "production_order": data.production_order}
        )
        return self._to_response(department)

    async def update_department(
        self,
        db: AsyncSession,
        department_id: int,
        data: DepartmentUpdate,
    ) -> None:
        """부서 정보를 수정합니다.

        Update a department. Conflicts are checked against other departments only.

        Raises:
            NotFoundError: 부서를 찾을 수 없을 때 (Department not found)
            BadRequestError: 이름이 비어 있을 때 (Blank name)
            DuplicateError: 다른 부서와 충돌할 때 (Conflict with another department)
        """
        department: Department | None = await department_repository.get_by_id(db, department_id)
        if department is None:
            raise NotFoundError("Department not found")

        update_data: dict = data.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in update_data:
            update_data["name"] = update_data["name"].strip()
            if not update_data["name"]:
                raise BadRequestError("Department name cannot be empty")

        await self._check_conflicts(
            db,
            update_data.get("name"),
            update_data.get("production_order"),
            exclude_id=department_id,
        )
        await department_repository.update(db, department, update_data)

    async def delete_department(self, db: AsyncSession, department_id: int) -> None:
        """부서를 삭제합니다.

        Delete a department that nothing references.

        Raises:
            NotFoundError: 부서를 찾을 수 없을 때 (Department not found)
            BadRequestError: 직원 또는 서비스 오더가 연결되어 있을 때
                             (Department still linked to employees or service orders)
        """
        department: Department | None = await department_repository.get_by_id(db, department_id)
        if department is None:
            raise NotFoundError("Department not found")

        if await department_repository.has_employees(db, department_id) or \
                await department_repository.has_service_orders(db, department_id):
            raise BadRequestError("Department is linked to employees or service orders")

        await department_repository.delete(db, department)


# 싱글턴 인스턴스 — Singleton instance
department_service: DepartmentService = DepartmentService()
