import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from articles import router as articles_router
from auth import router as auth_router
from comments import router as comments_router
from core import db
from core.config import Settings
from core.errors import ApiError
from topics import router as topics_router
from users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.settings is None:
        app.state.settings = Settings.from_env()
    settings: Settings = app.state.settings
    logging.basicConfig(level=settings.log_level)

    # Initialize the DB pool once per process.
    await db.init_pool(
        settings.database_url,
        min_size=settings.db_pool_min,
        max_size=settings.db_pool_max,
    )
    try:
        yield
    finally:
        await db.close_pool()


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    logger.info(
        "request_rejected status=%s error=%s details=%s",
        exc.status_code,
        exc.error,
        exc.details,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        return JSONResponse(status_code=400, content={"error": "Invalid json"})

    validation = [
        {"field": str(err.get("loc", ["body"])[-1]), "message": str(err.get("msg", "Invalid value"))}
        for err in errors
    ]
    return JSONResponse(status_code=400, content={"error": "Validation error", "validation": validation})


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


async def unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(auth_router.router, tags=["auth"])
    app.include_router(articles_router.router, tags=["articles"])
    app.include_router(comments_router.router, tags=["comments"])
    app.include_router(topics_router.router, tags=["topics"])
    app.include_router(users_router.router, tags=["users"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {
            "authentication": {
                "register": "/register",
                "login": "/login",
            },
            "articles": {
                "articles": "/articles?search={query}",
                "article": "/articles/{id}",
                "article_comments": "/articles/{id}/comments",
                "article_likes": "/articles/{id}/likes",
            },
            "comments": {
                "comment_likes": "/comments/{id}/likes",
            },
            "topics": {
                "topics": "/topics",
            },
            "users": {
                "users": "/users?search={query}",
                "user": "/users/{id}",
                "me": "/users/me",
                "user_articles": "/users/{id}/articles",
                "user_comments": "/users/{id}/comments",
            },
        }

    return app


app = create_app()
