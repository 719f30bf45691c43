"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates all endpoints into a single router
for inclusion in the FastAPI application under /api.

Included routers:
    - auth: 로그인 및 내 정보 (Login and current employee)
    - employees: 직원 관리 (Employee management)
    - departments: 부서 관리 (Department management)
    - service_orders: 서비스 오더 관리 (Service order management)

로그인을 제외한 모든 라우터는 JWT 인증이 필요합니다.
(Every router except login requires a valid JWT.)
"""

from fastapi import APIRouter, Depends

from scheduling_api.api.auth import router as auth_router
from scheduling_api.api.deps import get_current_employee
from scheduling_api.api.departments import router as departments_router
from scheduling_api.api.employees import router as employees_router
from scheduling_api.api.service_orders import router as service_orders_router

api_router: APIRouter = APIRouter()

# 인증: /auth/login은 공개, /auth/me는 자체적으로 토큰 검증
api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])

# ---------------------------------------------------------------------------
# 보호된 라우터 등록 — Register protected routers
# ---------------------------------------------------------------------------
_protected = [Depends(get_current_employee)]

# 직원: /employee, /employee/all, /employee/{id}, /employees/{username}
api_router.include_router(employees_router, tags=["Employees"], dependencies=_protected)
api_router.include_router(departments_router, prefix="/departments", tags=["Departments"], dependencies=_protected)
api_router.include_router(
    service_orders_router, prefix="/service-orders", tags=["Service Orders"], dependencies=_protected
)
