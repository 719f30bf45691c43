"""FastAPI 의존성 주입 모듈 — 인증.

FastAPI dependency injection module — Authentication.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 — 헤더가 없으면 401 "Unauthorized access"
       (HTTPBearer extracts the token; a missing header is rejected with 401)
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    4. 페이로드의 "sub" 필드로 DB에서 직원을 조회
       (Employee is fetched from DB using payload "sub" field)
"""

from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.database import get_db
from scheduling_api.models.employee import Employee
from scheduling_api.repositories.employee_repository import employee_repository
from scheduling_api.utils.exceptions import UnauthorizedError
from scheduling_api.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — auto_error=False로 누락 시 401을 직접 반환
# (Extracts the Bearer token; missing headers are answered with our own 401)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_employee(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Employee:
    """JWT 토큰에서 현재 인증된 직원을 추출합니다.

    Decode JWT from the Authorization header and return the authenticated employee.

    Args:
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer token credentials from header)
        db: 비동기 DB 세션 (Async database session)

    Returns:
        Employee: 인증된 직원 ORM 인스턴스 (Authenticated employee ORM instance)

    Raises:
        UnauthorizedError: 토큰 누락 (Missing token)
        UnauthorizedError: 토큰이 유효하지 않거나 만료됨, 직원 없음
                           (Invalid or expired token, or employee no longer exists)
    """
    if credentials is None:
        raise UnauthorizedError("Unauthorized access")

    try:
        payload: dict = decode_token(credentials.credentials)
        if payload.get("type") != "access":
            raise UnauthorizedError("Invalid token")
        employee_id: int = int(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, TypeError, ValueError):
        raise UnauthorizedError("Invalid token")

    employee: Employee | None = await employee_repository.get_by_id(db, employee_id)
    if employee is None:
        raise UnauthorizedError("Invalid token")

    return employee

