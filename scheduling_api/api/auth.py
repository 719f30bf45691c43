"""인증 라우터 — 로그인 및 현재 직원 조회.

Auth Router — Employee login and current-employee endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.api.deps import get_current_employee
from scheduling_api.database import get_db
from scheduling_api.models.employee import Employee
from scheduling_api.schemas.auth import EmployeeMeResponse, LoginRequest, TokenResponse
from scheduling_api.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """로그인 — 아이디/비밀번호로 액세스 토큰 발급.

    Login endpoint. Issues an access token for valid credentials.
    """
    return await auth_service.login(db, data)


@router.get("/me", response_model=EmployeeMeResponse)
async def get_me(
    current_employee: Annotated[Employee, Depends(get_current_employee)],
) -> EmployeeMeResponse:
    """현재 직원 프로필 조회.

    Get the profile of the currently authenticated employee.
    """
    return await auth_service.get_me(current_employee)
