"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers employee login, token issuance and current employee info.
"""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """직원 로그인 요청 스키마.

    Login request schema for employee authentication.

    Attributes:
        username: 로그인 아이디 (Employee login identifier)
        password: 비밀번호 (Plain text password, verified against bcrypt hash)
    """

    username: str  # 로그인 아이디 (Employee login identifier)
    password: str  # 비밀번호 — 평문, 서버에서 bcrypt 해시와 비교 (Plain text, compared to bcrypt hash)


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    JWT token issuance response schema returned after a successful login.

    Attributes:
        token: JWT 액세스 토큰 (Access token for the Authorization header)
        token_type: 토큰 유형 (Always "bearer")
        expires_in: 만료까지 남은 초 (Seconds until the token expires)
    """

    token: str
    token_type: str = "bearer"
    expires_in: int


class EmployeeMeResponse(BaseModel):
    """현재 직원 정보 응답 스키마 (GET /auth/me)."""

    id: int
    name: str
    username: str
    role: str
    departments: list[str]
