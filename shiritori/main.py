# shiritori/main.py
from __future__ import annotations

import logging

from fastapi import FastAPI
from redis.asyncio import Redis

from shiritori.settings import get_settings
from shiritori.store.connection import close_store, open_store


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings

    @app.on_event("startup")
    async def _startup() -> None:
        app.state.redis = await open_store(settings)

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        r: Redis = app.state.redis
        await close_store(r)

    @app.get("/health")
    async def health():
        r: Redis = app.state.redis
        pong = await r.ping()
        return {"ok": True, "redis": str(pong), "environment": settings.API_DEPLOYMENT_ENVIRONMENT}

    return app
