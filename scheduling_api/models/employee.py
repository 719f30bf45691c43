"""직원(협력자) 관련 SQLAlchemy ORM 모델 정의.

Employee (collaborator) SQLAlchemy ORM model definitions.
Employees log in with username/password and may belong to several
departments through the employee_departments association table.

Tables:
    - employees: 직원 계정 (Employee accounts with bcrypt password hash)
    - employee_departments: 직원-부서 매핑 (Employee-Department association)
"""

from datetime import datetime, timezone
from typing import Any
from sqlalchemy import JSON, String, DateTime, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from scheduling_api.database import Base
from scheduling_api.models.department import Department


class EmployeeDepartment(Base):
    """직원-부서 매핑 모델 — 다대다 연결 테이블.

    Employee-Department association model (many-to-many link).

    Attributes:
        employee_id: 직원 FK (Employee foreign key, part of composite PK)
        department_id: 부서 FK (Department foreign key, part of composite PK)
    """

    __tablename__ = "employee_departments"

    # 직원 FK — CASCADE: 직원 삭제 시 매핑도 삭제
    employee_id: Mapped[int] = mapped_column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True)
    # 부서 FK — 매핑이 남아 있으면 부서 삭제 불가 (Blocks department deletion while linked)
    department_id: Mapped[int] = mapped_column(Integer, ForeignKey("departments.id"), primary_key=True)


class Employee(Base):
    """직원 모델 — 시스템 로그인 계정이자 작업 배정 대상.

    Employee model — Login account and assignable collaborator.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        name: 이름 (Display name)
        username: 로그인 아이디 (Login username, unique)
        password_hash: bcrypt 해시 (Bcrypt password hash, never returned)
        work_schedule: 주간 근무표 (Weekly schedule {day: ["HH:MM-HH:MM"]}, optional)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        departments: 소속 부서 목록 (Departments the employee belongs to)
    """

    __tablename__ = "employees"

    # 직원 고유 식별자 — Employee identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 이름 — Display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 로그인 아이디 — Unique login username
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    # 비밀번호 해시 — Bcrypt hash
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # 주간 근무표 — Weekly work schedule keyed by day-of-week (0=Sunday)
    work_schedule: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    departments: Mapped[list[Department]] = relationship(
        secondary="employee_departments",
        order_by=Department.production_order,
        lazy="selectin",
    )
