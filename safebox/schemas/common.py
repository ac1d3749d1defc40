"""공통 응답 봉투 스키마 정의.

Common response envelope schemas.
Every endpoint answers with {"success": true, "data": ...},
{"success": true, "message": ...} or
{"success": false, "error": "...", "details": "..."}.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """성공 응답 봉투 (Success envelope carrying data)."""

    success: bool = True
    data: DataT


class MessageResponse(BaseModel):
    """데이터 없는 성공 응답 (Success envelope carrying only a message)."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """실패 응답 봉투 (Failure envelope).

    details는 검증 실패에만 채워짐 (details is only set for validation failures).
    """

    success: bool = False
    error: str
    details: str | None = None
