"""부서 관련 Pydantic 요청/응답 스키마 정의.

Department Pydantic request/response schema definitions.
"""

from pydantic import BaseModel


class DepartmentCreate(BaseModel):
    """부서 생성 요청 스키마.

    Attributes:
        name: 부서 이름 (Department name, unique)
        production_order: 생산 순서 (Production-order ranking, unique)
    """

    name: str  # 부서 이름 (Department name)
    production_order: int  # 생산 순서 — 낮을수록 먼저 (Lower = earlier in production)


class DepartmentUpdate(BaseModel):
    """부서 수정 요청 스키마 (부분 업데이트)."""

    name: str | None = None
    production_order: int | None = None


class DepartmentResponse(BaseModel):
    """부서 응답 스키마."""

    id: int
    name: str
    production_order: int
