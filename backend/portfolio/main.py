# portfolio/main.py

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.core.config import Settings, get_settings
from portfolio.core.error_handlers import (
    generic_exception_handler,
    http_exception_handler,
    portfolio_exception_handler,
    validation_exception_handler,
)
from portfolio.core.exceptions import PortfolioError
from portfolio.core.logging_config import mask_url, setup_logging
from portfolio.db.database import create_client

# Routers
from portfolio.routes.contact import contact_router
from portfolio.routes.profile import profile_router
from portfolio.routes.projects import project_router
from portfolio.routes.services import service_router
from portfolio.routes.technologies import technology_router

logger = logging.getLogger(__name__)


# ------------------------
# MongoDB lifecycle
# ------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("MongoDB target: %s", mask_url(settings.MONGO_URL))

    client = create_client(settings)
    app.state.db = client[settings.MONGO_DB_NAME]
    try:
        # Bounded so a missing database does not block startup
        await asyncio.wait_for(client.admin.command("ping"), timeout=settings.MONGO_TIMEOUT_MS / 1000)
        logger.info("✅ MongoDB connected successfully.")
    except Exception as e:
        logger.error("❌ MongoDB connection failed: %s", e)

    logger.info("Docs available at %s/docs", settings.base_url)
    yield
    client.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Portfolio API",
        version="2.0.0",
        description="API for a personal portfolio: profile, projects, services, technologies and contact form",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ------------------------
    # CORS
    # ------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # ------------------------
    # Routes
    # ------------------------
    app.include_router(profile_router, prefix="/api")
    app.include_router(project_router, prefix="/api")
    app.include_router(service_router, prefix="/api")
    app.include_router(technology_router, prefix="/api")
    app.include_router(contact_router, prefix="/api")

    # ------------------------
    # Exception handlers
    # ------------------------
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PortfolioError, portfolio_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ------------------------
    # Health & root
    # ------------------------
    @app.get("/", tags=["meta"])
    async def root():
        return {"message": "Portfolio API is running", "docs": f"{settings.base_url}/docs"}

    @app.get("/health", tags=["meta"])
    async def health():
        return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().PORT)
