"""서비스 오더 관련 Pydantic 요청/응답 스키마 정의.

Service order Pydantic request/response schema definitions.
Request bodies stay loosely typed (days as ints, times as strings) so
that the service can reject bad values inside the write transaction
with 400 responses.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ServiceOrderDepartmentInput(BaseModel):
    """서비스 오더 부서 항목 입력 스키마.

    Department entry of a service order request.

    Attributes:
        department_id: 부서 ID (Department where the work executes)
        execution_start: 시작 시각 "HH:MM" (Execution window start)
        execution_end: 종료 시각 "HH:MM" (Execution window end)
        collaborator_ids: 배정 직원 ID 목록 (Employees assigned to this entry)
    """

    department_id: int
    execution_start: str
    execution_end: str
    collaborator_ids: list[int] = Field(default_factory=list)


class ServiceOrderCreate(BaseModel):
    """서비스 오더 생성 요청 스키마.

    Attributes:
        os_number: 오더 번호 (Business order number, unique)
        service_days: 실행 요일 (Days of week, 0=Sunday .. 6=Saturday)
        departments: 부서 항목 목록 (At least one department entry)
    """

    os_number: str
    service_days: list[int] = Field(default_factory=list)
    departments: list[ServiceOrderDepartmentInput] = Field(default_factory=list)


class ServiceOrderUpdate(BaseModel):
    """서비스 오더 수정 요청 스키마 (부분 업데이트).

    Omitted fields are left unchanged. Provided service_days or
    departments replace the existing set.
    """

    os_number: str | None = None
    service_days: list[int] | None = None
    departments: list[ServiceOrderDepartmentInput] | None = None


class ServiceOrderDepartmentResponse(BaseModel):
    """서비스 오더 부서 항목 응답 스키마."""

    id: int
    department_id: int
    department_name: str
    execution_start: str  # "HH:MM"
    execution_end: str  # "HH:MM"
    collaborators: list[int]  # 배정 직원 ID (Assigned employee ids)


class ServiceOrderResponse(BaseModel):
    """서비스 오더 상세 응답 스키마.

    Attributes:
        id: 오더 ID (Service order identifier)
        os_number: 오더 번호 (Business order number)
        created_at: 생성 일시 (Creation timestamp)
        service_days: 실행 요일, 오름차순 (Days of week, ascending)
        departments: 부서 항목 (Department entries with collaborators)
    """

    id: int
    os_number: str
    created_at: datetime
    service_days: list[int]
    departments: list[ServiceOrderDepartmentResponse]
