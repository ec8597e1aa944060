from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .error_handlers import http_exception_handler, validation_exception_handler
from .routes.receipts import router as receipts_router
from .services.store import ReceiptStore
from .utils.logging import configure_logging, logger

def create_app(store: ReceiptStore | None = None) -> FastAPI:
    """Builds the app; each app owns exactly one receipt store."""
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME,
                  description="Receipt processing and points scoring",
        version="0.1.0",
        docs_url=None,      # only the two receipt endpoints are served
        redoc_url=None,
        openapi_url=None)

    app.state.store = store if store is not None else ReceiptStore()

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.include_router(receipts_router)
    return app

app = create_app()

def run() -> None:
    import uvicorn

    configure_logging(settings.LOG_LEVEL)
    logger.info("Server starting on %s:%s (env=%s)", settings.HOST, settings.PORT, settings.ENV)
    # uvicorn logs the bind error and exits non-zero if the port is unavailable
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
