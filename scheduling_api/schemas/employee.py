"""직원(협력자) 관련 Pydantic 요청/응답 스키마 정의.

Employee (collaborator) Pydantic request/response schema definitions.
Password hashes never appear in any response schema.
"""

from pydantic import BaseModel


class EmployeeCreate(BaseModel):
    """직원 생성 요청 스키마.

    Employee creation request schema.

    Attributes:
        name: 이름 (Display name)
        username: 로그인 아이디 (Login username, unique)
        password: 비밀번호 (Plain text, bcrypt-hashed on the server)
        work_schedule: 주간 근무표 (Weekly schedule {day 0-6: ["HH:MM-HH:MM"]}, optional)
        departments: 소속 부서 ID 목록 (Department ids to link, optional)
    """

    name: str  # 이름 (Display name)
    username: str  # 로그인 아이디 — 전체 고유 (Login ID, globally unique)
    password: str  # 비밀번호 — 평문, 서버에서 해싱 (Plain text, hashed server-side)
    work_schedule: dict[int, list[str]] | None = None  # 요일(0=일)별 근무 구간 (Intervals per day of week)
    departments: list[int] | None = None  # 소속 부서 ID 목록 (Department ids)


class EmployeeUpdate(BaseModel):
    """직원 수정 요청 스키마 (부분 업데이트).

    Employee update request schema (partial update).
    Only provided fields are updated. A provided departments list
    replaces the employee's whole department association.
    """

    name: str | None = None
    username: str | None = None
    password: str | None = None
    work_schedule: dict[int, list[str]] | None = None
    departments: list[int] | None = None


class EmployeeResponse(BaseModel):
    """직원 생성 응답 스키마.

    Employee response returned after creation.

    Attributes:
        id: 직원 ID (Employee identifier)
        name: 이름 (Display name)
        username: 로그인 아이디 (Login username)
        departments: 소속 부서 이름 목록 (Department names, production order)
        work_schedule: 주간 근무표 (Weekly schedule, nullable)
    """

    id: int
    name: str
    username: str
    departments: list[str] = []
    work_schedule: dict[str, list[str]] | None = None


class EmployeeListItem(BaseModel):
    """직원 목록 항목 스키마 (GET /employee)."""

    id: int
    name: str
    username: str
    departments: list[str]  # 소속 부서 이름 (Department names)


class EmployeeSummary(BaseModel):
    """직원 요약 스키마 (GET /employee/all, GET /employees/{username}).

    Abbreviated employee view used by scheduling screens to pick collaborators.
    """

    id: int
    name: str
    departments: list[str]


class EmployeeDetail(BaseModel):
    """직원 상세 스키마 (GET /employee/{id})."""

    id: int
    name: str
    username: str
    work_schedule: dict[str, list[str]] | None = None
