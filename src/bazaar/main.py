"""
Application factory and entry point.

    uvicorn bazaar.main:create_app --factory
or
    bazaar            # console script, uses HOST/PORT from settings
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from bazaar.api.v1 import api_router
from bazaar.api.v1.error_handlers import register_exception_handlers, unhandled_error_handler
from bazaar.config.settings import Settings, get_settings
from bazaar.core.logging import RequestIDMiddleware, setup_logging
from bazaar.database.base import Base
from bazaar.database.session import build_engine, build_session_maker
from bazaar.utils.logging import get_project_version
from bazaar.web import router as pages_router
import bazaar.models  # noqa: F401 – registers models with Base.metadata

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.DB_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        logger.info("app.startup", extra={"env": settings.ENV})
        yield
        await engine.dispose()
        logger.info("app.shutdown")

    app = FastAPI(
        title=settings.APP_NAME,
        description="User management API and storefront shell",
        version=get_project_version(),
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = build_session_maker(engine)

    app.add_middleware(RequestIDMiddleware, error_handler=unhandled_error_handler)
    register_exception_handlers(app)

    app.include_router(api_router)
    app.include_router(pages_router)

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "bazaar.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,  # keep the dictConfig installed by create_app
    )


if __name__ == "__main__":
    run()
