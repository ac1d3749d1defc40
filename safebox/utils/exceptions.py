"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the auth error kinds.
Services raise these directly; the exception handlers in safebox.main render
them into the {"success": false, "error": ...} envelope.

Usage:
    from safebox.utils.exceptions import UserExistsError, TokenNotFoundError
    raise UserExistsError()
    raise TokenNotFoundError()
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when creating a resource would violate a uniqueness constraint.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when authentication is missing, invalid, or expired.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class UserExistsError(DuplicateError):
    """이미 같은 이메일의 사용자가 있음 (409)."""

    def __init__(self) -> None:
        super().__init__("User already exists with this email")


class InvalidCredentialsError(UnauthorizedError):
    """이메일 또는 비밀번호 불일치 (401).

    Same message for unknown email and wrong password.
    """

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InvalidOrExpiredTokenError(UnauthorizedError):
    """리프레시 토큰이 유효하지 않거나 만료됨 (401)."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired refresh token")


class TokenNotFoundError(NotFoundError):
    """저장된 세션에 해당 리프레시 토큰이 없음 (404)."""

    def __init__(self) -> None:
        super().__init__("Refresh token not found")
