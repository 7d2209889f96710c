import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from giftbox.core.config import Settings, get_settings
from giftbox.core.logging_config import setup_logging
from giftbox.core.principal import PRINCIPAL_HEADER, principal_scope
from giftbox.routers import gifts as gifts_router
from giftbox.services.gift_service import GiftError, GiftStore, build_gift_store

logger = logging.getLogger(__name__)


class PrincipalMiddleware(BaseHTTPMiddleware):
    """Bind the X-Principal header as the audit identity for the request."""

    async def dispatch(self, request, call_next):
        with principal_scope(request.headers.get(PRINCIPAL_HEADER)):
            return await call_next(request)


async def gift_error_handler(request: Request, exc: GiftError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


def create_app(settings: Settings | None = None, store: GiftStore | None = None) -> FastAPI:
    """Factory compatible with uvicorn --factory/gunicorn."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title="Gift API")
    app.add_middleware(PrincipalMiddleware)
    app.add_exception_handler(GiftError, gift_error_handler)

    # single writer at startup: the store is built and seeded before any request
    gift_store = store or build_gift_store(settings)
    gift_store.load()
    app.state.settings = settings
    app.state.gift_store = gift_store

    app.include_router(gifts_router.router)
    logger.info("gift API ready (%s storage, persistent=%s)", settings.storage_backend, gift_store.persistent)
    return app
