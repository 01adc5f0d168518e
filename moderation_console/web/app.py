from __future__ import annotations

import random
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import structlog
from fastapi import FastAPI

from moderation_console.client import AdminApiClient
from moderation_console.config import Settings, get_settings
from moderation_console.services.console import ReviewConsole
from moderation_console.web.routes import router

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = AdminApiClient(settings, transport=transport)
        console = ReviewConsole(settings, client, rng=rng)
        app.state.console = console
        logger.info(
            "console_starting",
            api_base_url=settings.api_base_url,
            browse_mode=settings.browse_mode.value,
            credential_pool=len(settings.credentials),
        )
        try:
            await console.start()
            yield
        finally:
            await client.aclose()
            logger.info("console_stopped")

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.include_router(router)
    return app
