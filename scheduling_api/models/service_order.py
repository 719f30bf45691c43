"""서비스 오더(OS) 관련 SQLAlchemy ORM 모델 정의.

Service order SQLAlchemy ORM model definitions.
A service order is a unit of scheduled work. It runs on a set of
days of the week and in one or more departments, each with its own
execution window and assigned collaborators.

Tables:
    - service_orders: 서비스 오더 (Parent record, unique os_number)
    - os_service_days: 실행 요일 (Days of week the order runs, 0=Sunday..6=Saturday)
    - os_departments: 부서별 실행 구간 (Department entries with execution window)
    - os_collaborators: 배정 직원 (Collaborators assigned to a department entry)
"""

from datetime import datetime, time, timezone
from sqlalchemy import String, DateTime, Integer, SmallInteger, Time, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from scheduling_api.database import Base
from scheduling_api.models.department import Department


class ServiceOrder(Base):
    """서비스 오더 모델 — 예약 작업 단위.

    Service order model — Unit of scheduled work.
    Parent of service days and department entries; the whole tree is
    written in a single transaction.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        os_number: 오더 번호 (Business order number, unique)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        service_days: 실행 요일 (Days of week, cascade delete)
        departments: 부서별 실행 구간 (Department entries, cascade delete)
    """

    __tablename__ = "service_orders"

    # 오더 고유 식별자 — Service order identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 오더 번호 — Business order number (unique)
    os_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    service_days: Mapped[list["ServiceOrderDay"]] = relationship(
        back_populates="service_order",
        cascade="all, delete-orphan",
        order_by="ServiceOrderDay.day_of_week",
    )
    departments: Mapped[list["ServiceOrderDepartment"]] = relationship(
        back_populates="service_order",
        cascade="all, delete-orphan",
        order_by="ServiceOrderDepartment.id",
    )


class ServiceOrderDay(Base):
    """서비스 오더 실행 요일 모델.

    Day-of-week on which a service order runs (0=Sunday .. 6=Saturday).

    Constraints:
        uq_os_service_day: 오더별 요일 중복 방지 (One row per order and day)
    """

    __tablename__ = "os_service_days"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 서비스 오더 FK — CASCADE: 오더 삭제 시 요일도 삭제
    os_id: Mapped[int] = mapped_column(Integer, ForeignKey("service_orders.id", ondelete="CASCADE"), nullable=False)
    # 요일 — 0(일)~6(토) (Day of week, 0=Sunday)
    day_of_week: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("os_id", "day_of_week", name="uq_os_service_day"),
    )

    service_order: Mapped[ServiceOrder] = relationship(back_populates="service_days")


class ServiceOrderDepartment(Base):
    """서비스 오더 부서 항목 모델 — 부서별 실행 시간대.

    Department entry of a service order, with its execution window.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        os_id: 서비스 오더 FK (Parent service order)
        department_id: 부서 FK (Department where the work executes)
        execution_start: 시작 시각 (Execution window start)
        execution_end: 종료 시각 (Execution window end)

    Relationships:
        department: 부서 (Referenced department, eager-loaded for names)
        collaborators: 배정 직원 (Assigned collaborators, cascade delete)
    """

    __tablename__ = "os_departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 서비스 오더 FK — CASCADE: 오더 삭제 시 부서 항목도 삭제
    os_id: Mapped[int] = mapped_column(Integer, ForeignKey("service_orders.id", ondelete="CASCADE"), nullable=False)
    # 부서 FK — 연결된 오더가 있으면 부서 삭제 불가 (Blocks department deletion while referenced)
    department_id: Mapped[int] = mapped_column(Integer, ForeignKey("departments.id"), nullable=False)
    # 실행 시작/종료 시각 — Execution window (HH:MM)
    execution_start: Mapped[time] = mapped_column(Time, nullable=False)
    execution_end: Mapped[time] = mapped_column(Time, nullable=False)

    __table_args__ = (
        Index("ix_os_departments_os_id", "os_id"),
        Index("ix_os_departments_department_id", "department_id"),
    )

    service_order: Mapped[ServiceOrder] = relationship(back_populates="departments")
    department: Mapped[Department] = relationship()
    collaborators: Mapped[list["ServiceOrderCollaborator"]] = relationship(
        back_populates="os_department",
        cascade="all, delete-orphan",
        order_by="ServiceOrderCollaborator.collaborator_id",
    )


class ServiceOrderCollaborator(Base):
    """서비스 오더 배정 직원 모델.

    Collaborator assigned to a service order department entry.
    """

    __tablename__ = "os_collaborators"

    # 부서 항목 FK — CASCADE: 부서 항목 삭제 시 배정도 삭제
    os_department_id: Mapped[int] = mapped_column(Integer, ForeignKey("os_departments.id", ondelete="CASCADE"), primary_key=True)
    # 직원 FK — CASCADE: 직원 삭제 시 배정도 삭제
    collaborator_id: Mapped[int] = mapped_column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True)

    __table_args__ = (
        Index("ix_os_collaborators_collaborator_id", "collaborator_id"),
    )

    os_department: Mapped[ServiceOrderDepartment] = relationship(back_populates="collaborators")
