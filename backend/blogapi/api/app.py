"""
FastAPI application factory for the blog API.

create_app() wires:
- Lifespan management (store selection, MongoDB connect/close)
- CORS for browser clients
- Logfire observability
- Error handlers and routers
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogapi import __version__
from blogapi.api.errors import register_exception_handlers
from blogapi.api.routes import health_router, posts_router
from blogapi.config import Settings, get_settings
from blogapi.database import (
    check_db_connection,
    close_db,
    get_collection,
    get_db_info,
    init_db,
)
from blogapi.observability import initialize_logfire
from blogapi.storage import InMemoryPostStore, MongoPostStore, PostStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[PostStore] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use; defaults to get_settings()
        store: Pre-built store. When given, the lifespan leaves the
            database untouched and serves from this store.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Starting Blog API (environment={settings.environment}, "
            f"store={'injected' if store else settings.store})"
        )

        connected_mongo = False
        if app.state.store is None:
            if settings.store == "memory":
                app.state.store = InMemoryPostStore()
            else:
                await init_db(settings)
                connected_mongo = True
                db_info = get_db_info()
                if await check_db_connection():
                    logger.info(
                        f"MongoDB connection successful "
                        f"(url={db_info['url']}, database={db_info['database']})"
                    )
                else:
                    logger.error(
                        f"MongoDB connection failed "
                        f"(url={db_info['url']}, database={db_info['database']})"
                    )
                app.state.store = MongoPostStore(get_collection())

        logger.info("Blog API startup complete")

        yield

        logger.info("Shutting down Blog API")
        await app.state.store.close()
        if connected_mongo:
            await close_db()
            app.state.store = None

    app = FastAPI(
        title="Blog API",
        description="CRUD REST API for blog posts",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(posts_router)

    initialize_logfire(settings, app)

    return app
