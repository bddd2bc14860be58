"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gas_safe.api import health_router, scrape_router
from gas_safe.core.config import settings
from gas_safe.core.exceptions import GasSafeException, ValidationException
from gas_safe.core.logging import logger
from gas_safe.core.security import log_request


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    logger.info(f"Scrape mode: {settings.scrape_mode}, auth: {'on' if settings.api_key else 'off'}")
    yield
    logger.info("Shutting down application...")


def _error_body(error: str, message: str | None = None) -> dict:
    body = {"success": False, "error": error}
    if message:
        body["message"] = message
    return body


async def handle_gas_safe_exception(request: Request, exc: GasSafeException) -> JSONResponse:
    if exc.status_code == 500:
        logger.error(f"[API] {request.method} {request.url.path} failed: {exc}")
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body("Internal server error", exc.message),
        )
    if exc.status_code > 500:
        logger.error(f"[API] {request.method} {request.url.path} unavailable: {exc}")
    else:
        logger.warning(f"[API] {request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    reason = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
    logger.warning(f"[API] Input validation failed: {reason}")
    return JSONResponse(
        status_code=ValidationException.status_code,
        content=_error_body(f"Invalid request: {reason}"),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"[API] Unhandled error on {request.url.path}: {type(exc).__name__}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", str(exc) or type(exc).__name__),
    )


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging(request: Request, call_next):
        await log_request(request)
        return await call_next(request)

    app.add_exception_handler(GasSafeException, handle_gas_safe_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(scrape_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
