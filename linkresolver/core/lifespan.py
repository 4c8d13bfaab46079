"""Application lifespan: startup and shutdown.

Startup: logging, telemetry (when enabled), resolver cache. Shutdown runs
in reverse: cache, telemetry, SQL engine. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from linkresolver.core.config import Settings, get_settings
from linkresolver.infrastructure.cache import RedisCacheStore, build_cache_store
from linkresolver.infrastructure.persistence import database
from linkresolver.shared.telemetry import TelemetryConfig, set_telemetry, setup_logging

logger = logging.getLogger(__name__)


def _start_telemetry(app: FastAPI, settings: Settings) -> TelemetryConfig | None:
    """Set up tracing and instrument FastAPI, the SQL engine and Redis."""
    if not settings.telemetry_enabled:
        return None
    telemetry = TelemetryConfig.from_settings(settings)
    if telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    ) is None:
        return None
    database._ensure_engine()
    telemetry.instrument(
        app=app, engine=database.engine, redis_enabled=settings.redis_enabled
    )
    set_telemetry(telemetry)
    return telemetry


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build app.state.cache (and telemetry) on startup; release them on shutdown."""
    settings = get_settings()
    setup_logging()

    telemetry = _start_telemetry(app, settings)
    app.state.cache = await build_cache_store(settings)
    logger.info(
        "%s %s started (resolver cache: %s)",
        settings.app_name,
        settings.app_version,
        type(app.state.cache).__name__,
    )

    yield

    if isinstance(app.state.cache, RedisCacheStore):
        await app.state.cache.disconnect()
    app.state.cache = None

    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)

    await database.dispose_engine()
    logger.info("%s stopped", settings.app_name)
