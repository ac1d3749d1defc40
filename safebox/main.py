"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 처리기, 라우터 등록.

FastAPI application entry point — Middleware, exception handlers and routers.
All errors are rendered into the {"success": false, "error": ...} envelope.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from safebox.api.auth import router as auth_router
from safebox.config import settings
from safebox.middleware.request_logging import RequestLoggingMiddleware
from safebox.schemas.common import ErrorResponse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("safebox")

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="REST API for managing and storing personal data",
    docs_url="/docs",
    redoc_url="/redoc",
)

# 요청 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
# Registered before CORS to capture all requests
app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# 예외 처리기 — Exception handlers
# ---------------------------------------------------------------------------


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패 — 400, 첫 번째 오류를 details로 반환.

    Report the first validation error as 400 with a readable detail.
    """
    errors = exc.errors()
    details: str | None = None
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        details = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return _error_response(400, "Validation error", details)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """서비스/프레임워크 HTTP 예외를 오류 봉투로 변환.

    Render service-raised and framework HTTP exceptions into the envelope.
    """
    response = _error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """예상하지 못한 오류 — 500, 내부 정보는 로그에만 기록.

    Unexpected failures are logged with traceback and never echoed.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal server error")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


app.include_router(auth_router, prefix="/auth", tags=["Auth"])
