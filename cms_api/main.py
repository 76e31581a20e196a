import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cms_api.api.errors import register_exception_handlers
from cms_api.api.router import api_router
from cms_api.core.config import Settings, get_settings
from cms_api.core.logging_config import configure_logging
from cms_api.core.security import TokenIssuer
from cms_api.db.session import Database

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    database = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if settings.auto_create_schema:
            database.create_schema()
        logger.info("%s started (env=%s).", settings.app_name, settings.app_env)
        try:
            yield
        finally:
            database.dispose()
            logger.info("%s stopped.", settings.app_name)

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.tokens = TokenIssuer.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()
