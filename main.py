from typing import Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import logging
from settings.config import settings
from settings.db import init_db, close_db
from settings.logging_config import configure_logging
from repositories.record_repo import StorageError
from transactions.transaction_routes import router as transaction_router
from budgets.budget_routes import router as budget_router
from analysis_service.analysis_routes import router as analysis_router

logger = logging.getLogger(__name__)


def get_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting Finance Tracker API")
    app = FastAPI(title="Finance Tracker API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # DB lifecycle
    @app.on_event("startup")
    async def on_startup() -> None:
        logger.info("Initializing database")
        await init_db()

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        logger.info("Closing database")
        await close_db()

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Storage unavailable"})

    # Routers
    app.include_router(transaction_router, prefix=settings.API_PREFIX)
    app.include_router(budget_router, prefix=settings.API_PREFIX)
    app.include_router(analysis_router, prefix=settings.API_PREFIX)
    logger.info("Routers initialized successfully")

    # Health
    @app.get("/health")
    async def health_check() -> Dict[str, str]:
        return {"status": "ok"}

    return app


# ASGI app instance
app = get_app()
