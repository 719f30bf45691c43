"""직원 서비스 — 직원 CRUD, 부서 배정, 근무표 비즈니스 로직.

Employee Service — Business logic for employee CRUD, department
association and weekly work schedules.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.models.department import Department
from scheduling_api.models.employee import Employee
from scheduling_api.repositories.department_repository import department_repository
from scheduling_api.repositories.employee_repository import employee_repository
from scheduling_api.schemas.employee import (
    EmployeeCreate,
    EmployeeDetail,
    EmployeeListItem,
    EmployeeResponse,
    EmployeeSummary,
    EmployeeUpdate,
)
from scheduling_api.utils.exceptions import BadRequestError, DuplicateError, NotFoundError
from scheduling_api.utils.pagination import PageParams
from scheduling_api.utils.password import hash_password
from scheduling_api.utils.time_format import format_hhmm, parse_hhmm


def normalize_work_schedule(schedule: dict[int, list[str]]) -> dict[str, list[str]]:
    """주간 근무표를 검증하고 정규화합니다.

    Validate a weekly work schedule and return its stored form.
    Keys become day strings ("0" = Sunday), intervals are deduplicated
    and sorted, and days without intervals are dropped.

    Args:
        schedule: 요일별 근무 구간 {0-6: ["HH:MM-HH:MM", ...]}

    Returns:
        dict[str, list[str]]: 정규화된 근무표 (Normalized schedule)

    Raises:
        BadRequestError: 요일 범위, 구간 형식, 구간 겹침 오류
                         (Day out of range, malformed interval, or overlap)
    """
    normalized: dict[str, list[str]] = {}
    for day, intervals in sorted(schedule.items()):
        if day < 0 or day > 6:
            raise BadRequestError("Work schedule days must be between 0 (Sunday) and 6 (Saturday)")

        windows = []
        for interval in set(intervals):
            start_raw, _, end_raw = interval.partition("-")
            start, end = parse_hhmm(start_raw.strip()), parse_hhmm(end_raw.strip())
            if start is None or end is None or start >= end:
                raise BadRequestError(f"Invalid work schedule interval '{interval}' (use HH:MM-HH:MM)")
            windows.append((start, end))

        windows.sort()
        for (_, previous_end), (next_start, _) in zip(windows, windows[1:]):
            if next_start < previous_end:
                raise BadRequestError(f"Overlapping work schedule intervals on day {day}")

        if windows:
            normalized[str(day)] = [f"{format_hhmm(s)}-{format_hhmm(e)}" for s, e in windows]
    return normalized


class EmployeeService:
    """직원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling employee business logic.
    """

    def _department_names(self, employee: Employee) -> list[str]:
        return [d.name for d in employee.departments]

    async def _resolve_departments(
        self,
        db: AsyncSession,
        department_ids: list[int],
    ) -> list[Department]:
        """부서 ID 목록을 검증하고 부서 모델로 변환합니다.

        Resolve department ids, failing if any of them does not exist.

        Raises:
            BadRequestError: 존재하지 않는 부서가 포함될 때 (Unknown department id)
        """
        departments: list[Department] = await department_repository.get_by_ids(db, department_ids)
        if len(departments) != len(set(department_ids)):
            raise BadRequestError("Invalid departments")
        return departments

    async def list_employees(
        self,
        db: AsyncSession,
        params: PageParams,
    ) -> tuple[list[EmployeeListItem], int]:
        """직원 목록을 검색/페이지 조건으로 조회합니다.

        Returns:
            tuple[list[EmployeeListItem], int]: (직원 목록, 전체 개수)
        """
        query = employee_repository.build_list_query(params.search)
        employees, total = await employee_repository.get_paginated(db, query, params.page, params.limit)
        items = [
            EmployeeListItem(
                id=e.id,
                name=e.name,
                username=e.username,
                departments=self._department_names(e),
            )
            for e in employees
        ]
        return items, total

    async def list_all_employees(self, db: AsyncSession) -> list[EmployeeSummary]:
        """모든 직원을 요약 형태로 조회합니다 (List every employee, abbreviated)."""
        employees: list[Employee] = await employee_repository.get_all(db)
        return [
            EmployeeSummary(id=e.id, name=e.name, departments=self._department_names(e))
            for e in employees
        ]

    async def get_by_username(self, db: AsyncSession, username: str) -> EmployeeSummary:
        """로그인 아이디로 직원 요약을 조회합니다.

        Raises:
            NotFoundError: 직원을 찾을 수 없을 때 (Employee not found)
        """
        employee: Employee | None = await employee_repository.get_by_username(db, username)
        if employee is None:
            raise NotFoundError("Employee not found")
        return EmployeeSummary(id=employee.id, name=employee.name, departments=self._department_names(employee))

    async def get_employee(self, db: AsyncSession, employee_id: int) -> EmployeeDetail:
        """직원 상세를 조회합니다.

        Raises:
            NotFoundError: 직원을 찾을 수 없을 때 (Employee not found)
        """
        employee: Employee | None = await employee_repository.get_by_id(db, employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")
        return EmployeeDetail(
            id=employee.id,
            name=employee.name,
            username=employee.username,
            work_schedule=employee.work_schedule,
        )

    async def create_employee(
        self,
        db: AsyncSession,
        data: EmployeeCreate,
    ) -> EmployeeResponse:
        """새 직원을 생성합니다.

        Create a new employee with a hashed password and optional
        departments and work schedule.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 직원 생성 데이터 (Employee creation data)

        Returns:
            EmployeeResponse: 생성된 직원 (Created employee)

        Raises:
            BadRequestError: 필수 값 누락, 잘못된 부서 또는 근무표
                             (Missing fields, unknown departments, invalid schedule)
            DuplicateError: 아이디가 이미 사용 중일 때 (Username already in use)
        """
        name: str = data.name.strip()
        username: str = data.username.strip()
        if not name or not username or not data.password:
            raise BadRequestError("Missing required fields")

        if await employee_repository.exists(db, {"username": username}):
            raise DuplicateError("Username is already in use")

        schedule = normalize_work_schedule(data.work_schedule) if data.work_schedule else None
        departments: list[Department] = await self._resolve_departments(db, data.departments or [])

        employee: Employee = await employee_repository.create(
            db,
            {
                "name": name,
                "username": username,
                "password_hash": hash_password(data.password),
                "work_schedule": schedule,
                "departments": departments,
            },
        )
        return EmployeeResponse(
            id=employee.id,
            name=employee.name,
            username=employee.username,
            departments=[d.name for d in departments],
            work_schedule=employee.work_schedule,
        )

    async def update_employee(
        self,
        db: AsyncSession,
        employee_id: int,
        data: EmployeeUpdate,
    ) -> None:
        """직원 정보를 수정합니다.

        Update an employee. A provided departments list replaces the
        whole association; any invalid department aborts the update.

        Raises:
            NotFoundError: 직원을 찾을 수 없을 때 (Employee not found)
            BadRequestError: 빈 값, 잘못된 부서 또는 근무표
                             (Blank values, unknown departments, invalid schedule)
            DuplicateError: 아이디가 다른 직원과 겹칠 때 (Username taken by another employee)
        """
        employee: Employee | None = await employee_repository.get_by_id(db, employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")

        provided: dict = data.model_dump(exclude_unset=True)
        update_data: dict = {}

        for field in ("name", "username"):
            if provided.get(field) is not None:
                value: str = provided[field].strip()
                if not value:
                    raise BadRequestError(f"Employee {field} cannot be empty")
                update_data[field] = value

        if "username" in update_data and await employee_repository.exists(
            db, {"username": update_data["username"]}, exclude_id=employee_id
        ):
            raise DuplicateError("Username is already in use")

        if "work_schedule" in provided:
            schedule = provided["work_schedule"]
            update_data["work_schedule"] = normalize_work_schedule(schedule) if schedule else None

        if provided.get("departments") is not None:
            update_data["departments"] = await self._resolve_departments(db, provided["departments"])

        if provided.get("password"):
            update_data["password_hash"] = hash_password(provided["password"])

        await employee_repository.update(db, employee, update_data)

    async def delete_employee(self, db: AsyncSession, employee_id: int) -> None:
        """직원을 삭제합니다.

        Delete an employee together with their department links and
        service order assignments.

        Raises:
            NotFoundError: 직원을 찾을 수 없을 때 (Employee not found)
        """
        employee: Employee | None = await employee_repository.get_by_id(db, employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")

        await employee_repository.delete_assignments(db, employee_id)
        await employee_repository.delete(db, employee)


# 싱글턴 인스턴스 — Singleton instance
employee_service: EmployeeService = EmployeeService()
