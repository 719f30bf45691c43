"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    department: 부서 (Departments with production-order ranking)
    employee: 직원 및 직원-부서 매핑 (Employees and employee-department links)
    service_order: 서비스 오더, 요일, 부서 항목, 배정 직원
                   (Service orders, service days, department entries, collaborators)
"""

from scheduling_api.models.department import Department
from scheduling_api.models.employee import Employee, EmployeeDepartment
from scheduling_api.models.service_order import (
    ServiceOrder,
    ServiceOrderCollaborator,
    ServiceOrderDay,
    ServiceOrderDepartment,
)

__all__ = [
    "Department",
    "Employee", "EmployeeDepartment",
    "ServiceOrder", "ServiceOrderDay", "ServiceOrderDepartment", "ServiceOrderCollaborator",
]
