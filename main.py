import logging
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import Settings
from core.exceptions import InterviewPrepError
from core.logging_config import setup_logging, mask_secret
from routers import ai, dashboard, health, mcqs, problems, reviews
from services.interview_ai import InterviewAI
from services.rate_limiter import RateLimitMiddleware, create_limiter
from services.review_cache import ReviewCache
from services.store import SampleDataStore

logger = logging.getLogger(__name__)


def _error_body(message: str, status_code: int, stack: Optional[str] = None) -> dict:
    body = {"error": message, "status": "error", "statusCode": status_code}
    if stack:
        body["stack"] = stack
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """Every failure is returned as {error, status: "error", statusCode[, stack]}"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = "Invalid request"
        if errors:
            location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
            message = f"Invalid request: {location} {errors[0].get('msg', '')}".strip()
        return JSONResponse(status_code=400, content=_error_body(message, 400))

    @app.exception_handler(InterviewPrepError)
    async def interview_prep_error_handler(request: Request, exc: InterviewPrepError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.status_code))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        settings = request.app.state.settings
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        stack = None
        if not settings.is_production:
            stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return JSONResponse(status_code=500, content=_error_body("Internal Server Error", 500, stack))


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[SampleDataStore] = None,
    cache: Optional[ReviewCache] = None,
    ai_service: Optional[InterviewAI] = None,
) -> FastAPI:
    """Build an app with its own store, cache, AI adapter and rate limiter"""
    settings = settings or Settings.from_env()
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"API Key loaded: {mask_secret(settings.api_key)}")
        logger.info(f"OpenAI API Key loaded: {mask_secret(settings.openai_key)}")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"CORS enabled for origin: {settings.cors_origin}")
        yield

    app = FastAPI(title="Interview Prep API", lifespan=lifespan)

    app.state.settings = settings
    if ai_service is None:
        ai_service = InterviewAI(settings.openai_key, model=settings.openai_model)

    app.state.store = store if store is not None else SampleDataStore()
    app.state.review_cache = cache if cache is not None else ReviewCache()
    app.state.ai = ai_service

    app.state.limiter = create_limiter(settings)
    app.add_middleware(RateLimitMiddleware)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        log = logger.debug if settings.is_production else logger.info
        log(f"{request.method} {request.url.path}")
        return await call_next(request)

    # Enable CORS for the frontend; added last so it also wraps 429 responses
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With", "X-API-Key"],
        expose_headers=["Content-Range", "X-Total-Count"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(reviews.router)
    app.include_router(problems.router)
    app.include_router(mcqs.router)
    app.include_router(dashboard.router)
    app.include_router(ai.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
