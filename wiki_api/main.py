from contextlib import asynccontextmanager
from typing import Optional

import logging

from fastapi import FastAPI

from wiki_api.api import articles
from wiki_api.config import LOG_LEVEL, ROOT_PATH
from wiki_api.core.errors import register_error_handlers
from wiki_api.db.mongo import ArticleStore


def create_app(store: Optional[ArticleStore] = None) -> FastAPI:
    """Build the API. A passed ``store`` is used as is and left open on shutdown."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = store is None
        app.state.store = ArticleStore.connect() if owned else store
        try:
            yield
        finally:
            if owned:
                await app.state.store.close()

    app = FastAPI(
        title="Wiki API",
        lifespan=lifespan,
        root_path=ROOT_PATH,
    )
    register_error_handlers(app)
    app.include_router(articles.router)
    return app


app = create_app()

# Basic logging configuration (can be overridden by server config)
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
