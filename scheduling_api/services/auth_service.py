"""인증 서비스 — 직원 로그인 및 현재 사용자 조회 비즈니스 로직.

Auth Service — Business logic for employee login and current-employee lookup.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.config import settings
from scheduling_api.models.employee import Employee
from scheduling_api.repositories.employee_repository import employee_repository
from scheduling_api.schemas.auth import EmployeeMeResponse, LoginRequest, TokenResponse
from scheduling_api.utils.exceptions import UnauthorizedError
from scheduling_api.utils.jwt import create_access_token
from scheduling_api.utils.password import verify_password

# 토큰에 담기는 역할 — every employee logs in as a collaborator
COLLABORATOR_ROLE: str = "colab"


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    """

    def _build_jwt_payload(self, employee: Employee) -> dict[str, str]:
        """JWT 토큰 페이로드를 생성합니다.

        Build the JWT payload; "sub" carries the employee id as a string.
        """
        return {
            "sub": str(employee.id),
            "username": employee.username,
            "role": COLLABORATOR_ROLE,
        }

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """직원 로그인을 처리합니다.

        Verify credentials and issue an access token.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 데이터 (Login request data)

        Returns:
            TokenResponse: 토큰 응답 (Token response)

        Raises:
            UnauthorizedError: 잘못된 인증 정보일 때 (Unknown user or wrong password)
        """
        employee: Employee | None = await employee_repository.get_by_username(db, data.username)
        if employee is None or not verify_password(data.password, employee.password_hash):
            raise UnauthorizedError("Invalid credentials")

        return TokenResponse(
            token=create_access_token(self._build_jwt_payload(employee)),
            expires_in=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )

    async def get_me(self, employee: Employee) -> EmployeeMeResponse:
        """현재 인증된 직원 정보를 반환합니다."""
        return EmployeeMeResponse(
            id=employee.id,
            name=employee.name,
            username=employee.username,
            role=COLLABORATOR_ROLE,
            departments=[d.name for d in employee.departments],
        )


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
