"""부서 관련 SQLAlchemy ORM 모델 정의.

Department SQLAlchemy ORM model definition.
A department is an organizational unit ranked by production order;
employees belong to departments and service orders execute in them.

Tables:
    - departments: 부서 (Departments with production-order ranking)
"""

from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from scheduling_api.database import Base


class Department(Base):
    """부서 모델 — 생산 순서를 가진 조직 단위.

    Department model — Organizational unit with a production-order ranking.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        name: 부서 이름 (Department name, unique)
        production_order: 생산 순서 (Position in the production flow, unique)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)
        updated_at: 수정 일시 UTC (Last update timestamp in UTC)
    """

    __tablename__ = "departments"

    # 부서 고유 식별자 — Department identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 부서 이름 — Department display name (unique)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    # 생산 순서 — Production-order ranking (lower = earlier in the flow, unique)
    production_order: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
