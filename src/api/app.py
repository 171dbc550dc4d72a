import asyncio
import contextlib
import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.adapter.services.background_tasks import BackgroundTaskRunner
from src.adapter.services.smtp_mailer import SmtpMailer
from src.api.middleware import (
    BodySizeLimitMiddleware,
    RateLimiter,
    RateLimitMiddleware,
    RecoverMiddleware,
    run_reaper,
)
from src.api.middleware.recover import SERVER_ERROR_MESSAGE
from src.api.utils.context import get_request_user
from src.libs.jsonlog import configure_logging
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "the requested resource could not be found"


def error_response(status_code: int, code: str, message: str, fields=None, headers=None) -> JSONResponse:
    error_dict = {"code": code, "message": message}
    if fields:
        error_dict["fields"] = fields
    return JSONResponse(status_code=status_code, content={"error": error_dict}, headers=headers)


async def handle_client_error(request: Request, exc: ClientError):
    details = exc.base_error.details or {}
    logger.warning(
        f"Client error: {exc.base_error.code}",
        extra={
            "properties": {
                "method": request.method,
                "url": str(request.url.path),
                "user_id": get_request_user(request).id,
            }
        },
    )
    return error_response(
        exc.status_code,
        exc.base_error.code,
        exc.base_error.message,
        fields=details or None,
        headers=exc.headers,
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(
        f"Server error: {exc.base_error.code}: {exc.base_error.message}",
        extra={"properties": {"method": request.method, "url": str(request.url.path)}},
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "SERVER_ERROR", SERVER_ERROR_MESSAGE
    )


def _field_name(loc) -> str:
    return ".".join(str(part) for part in loc[1:]) or str(loc[0])


def _body_error_message(error: dict) -> str:
    error_type = error.get("type", "")
    loc = error.get("loc", ())

    if error_type == "json_invalid":
        ctx_error = str((error.get("ctx") or {}).get("error", ""))
        if ctx_error.startswith("Extra data"):
            return "body must only contain a single JSON value"
        return "body contains badly-formed JSON"
    if error_type == "missing" and tuple(loc) == ("body",):
        return "body must not be empty"
    if error_type == "extra_forbidden":
        return f"body contains unknown key \"{_field_name(loc)}\""
    if len(loc) > 1:
        return f"body contains incorrect JSON type for field \"{_field_name(loc)}\""
    return "body contains incorrect JSON type"


def _parameter_error_message(error: dict) -> str:
    error_type = error.get("type", "")
    if error_type == "int_parsing":
        return "must be an integer value"
    if error_type.startswith("date"):
        return "must be a valid date (YYYY-MM-DD)"
    return error.get("msg", "is invalid")


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """
    Turn framework validation errors into the error envelope.

    Body problems are 400s with a single message. Malformed path parameters
    mean the resource cannot exist (404). Query parameter problems are
    reported per field (422).
    """
    errors = exc.errors()

    body_errors = [e for e in errors if e.get("loc", ("",))[0] == "body"]
    if body_errors:
        message = _body_error_message(body_errors[0])
        logger.warning(f"Bad request: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, "BAD_REQUEST", message)

    if any(e.get("loc", ("",))[0] == "path" for e in errors):
        return error_response(status.HTTP_404_NOT_FOUND, "NOT_FOUND", NOT_FOUND_MESSAGE)

    fields = {}
    for error in errors:
        fields.setdefault(_field_name(error.get("loc", ())), _parameter_error_message(error))
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_FAILED",
        "one or more fields failed validation",
        fields=fields,
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response(exc.status_code, "NOT_FOUND", NOT_FOUND_MESSAGE)
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return error_response(
            exc.status_code,
            "METHOD_NOT_ALLOWED",
            f"the {request.method} method is not supported for this resource",
            headers=getattr(exc, "headers", None),
        )
    return error_response(exc.status_code, "BAD_REQUEST", str(exc.detail), headers=getattr(exc, "headers", None))


def create_app(ApplicationConfig) -> FastAPI:
    configure_logging(ApplicationConfig.LOG_LEVEL, ApplicationConfig.LOG_JSON)

    from src.depends import authenticate, engine

    rate_limiter = RateLimiter(ApplicationConfig.LIMITER_RPS, ApplicationConfig.LIMITER_BURST)
    background_tasks = BackgroundTaskRunner()

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.DB_CREATE_TABLES:
            import src.domain.entities  # noqa: F401

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)

        reaper = None
        if ApplicationConfig.LIMITER_ENABLED:
            reaper = asyncio.create_task(
                run_reaper(
                    rate_limiter,
                    ApplicationConfig.LIMITER_SWEEP_INTERVAL,
                    ApplicationConfig.LIMITER_IDLE_TIMEOUT,
                )
            )

        logger.info(
            "Starting server",
            extra={"properties": {"env": ApplicationConfig.ENV, "version": ApplicationConfig.VERSION}},
        )
        yield

        logger.info("Shutting down server")
        if reaper is not None:
            reaper.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await reaper
        await background_tasks.wait(ApplicationConfig.SHUTDOWN_TIMEOUT)
        await engine.dispose()
        logger.info("Stopped server")

    app = FastAPI(
        title="Fitness API",
        version=ApplicationConfig.VERSION,
        dependencies=[Depends(authenticate)],
        lifespan=lifespan,
    )

    app.state.rate_limiter = rate_limiter
    app.state.admin_api_key = ApplicationConfig.ADMIN_API_KEY
    app.state.background_tasks = background_tasks
    app.state.mailer = SmtpMailer(
        host=ApplicationConfig.SMTP_HOST,
        port=ApplicationConfig.SMTP_PORT,
        username=ApplicationConfig.SMTP_USERNAME,
        password=ApplicationConfig.SMTP_PASSWORD,
        sender=ApplicationConfig.SMTP_SENDER,
        timeout=ApplicationConfig.SMTP_TIMEOUT,
    )

    # Starlette runs the last added middleware first
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=ApplicationConfig.MAX_BODY_BYTES)
    app.add_middleware(
        RateLimitMiddleware, limiter=rate_limiter, enabled=ApplicationConfig.LIMITER_ENABLED
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RecoverMiddleware)

    from src.api.routes import admin, fitness, health_check, tokens, users

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix)
    app.include_router(users.router, prefix=prefix)
    app.include_router(tokens.router, prefix=prefix)
    app.include_router(fitness.router, prefix=prefix)
    app.include_router(admin.router, prefix=prefix)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)

    return app
