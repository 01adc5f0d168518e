from __future__ import annotations

import uvicorn

from moderation_console.config import get_settings
from moderation_console.config.logging import configure_logging
from moderation_console.web.app import create_app

settings = get_settings()
configure_logging(settings.log_level, json_logs=not settings.is_development)

app = create_app(settings)


def run() -> None:
    uvicorn.run("moderation_console.main:app", host=settings.server_host, port=settings.server_port)
