"""OpenTelemetry tracing setup for the link resolver service.

Exporters: console (development), otlp (gRPC collector), or none.
Instrumentation covers FastAPI requests, SQLAlchemy queries and Redis
commands, so a resolver span shows its store round trips as children.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

from linkresolver.core.config import Settings

logger = logging.getLogger(__name__)

# Liveness probes would otherwise dominate the trace volume.
_EXCLUDED_URLS = "/api/v1/health"


def _otlp_exporter(endpoint: str | None) -> SpanExporter | None:
    if not endpoint:
        logger.warning("OTLP exporter selected without TELEMETRY_OTLP_ENDPOINT")
        return None
    return OTLPSpanExporter(endpoint=endpoint, insecure=endpoint.startswith("http://"))


def _console_exporter(endpoint: str | None) -> SpanExporter:
    return ConsoleSpanExporter()


def _no_exporter(endpoint: str | None) -> None:
    return None


_EXPORTER_FACTORIES: dict[str, Callable[[str | None], SpanExporter | None]] = {
    "otlp": _otlp_exporter,
    "console": _console_exporter,
    "none": _no_exporter,
}


class TelemetryConfig:
    """Tracer provider lifecycle and library instrumentation for one process."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> TelemetryConfig:
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=settings.telemetry_enabled,
            environment=settings.telemetry_environment,
        )

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and register it globally.

        Args:
            exporter_type: "console", "otlp", or "none" (unknown values fall back to console).
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317).
            sample_rate: Fraction of traces kept, 0.0-1.0.

        Returns:
            TracerProvider, or None when disabled or setup failed.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        factory = _EXPORTER_FACTORIES.get(exporter_type)
        if factory is None:
            logger.warning("Unknown exporter type '%s', using console", exporter_type)
            factory = _console_exporter
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=TraceIdRatioBased(sample_rate),
            )
            exporter = factory(otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, exporter=%s, sample_rate=%s",
            self.service_name,
            exporter_type if exporter is not None else "none",
            sample_rate,
        )
        return provider

    def instrument(
        self,
        app: FastAPI | None = None,
        engine: AsyncEngine | None = None,
        redis_enabled: bool = False,
    ) -> list[str]:
        """Instrument the given libraries. Returns the names that were instrumented.

        A failing instrumentation is logged and skipped; the others still run.
        """
        if not self.enabled or self.tracer_provider is None:
            return []
        provider = self.tracer_provider
        steps: list[tuple[str, Callable[[], None]]] = []
        if app is not None:
            steps.append(
                (
                    "fastapi",
                    lambda: FastAPIInstrumentor.instrument_app(
                        app, tracer_provider=provider, excluded_urls=_EXCLUDED_URLS
                    ),
                )
            )
        if engine is not None:
            steps.append(
                (
                    "sqlalchemy",
                    lambda: SQLAlchemyInstrumentor().instrument(
                        engine=engine.sync_engine, tracer_provider=provider
                    ),
                )
            )
        if redis_enabled:
            steps.append(
                ("redis", lambda: RedisInstrumentor().instrument(tracer_provider=provider))
            )

        instrumented: list[str] = []
        for name, step in steps:
            try:
                step()
            except Exception as e:
                logger.exception("Failed to instrument %s: %s", name, e)
                continue
            instrumented.append(name)
        if instrumented:
            logger.info("Instrumented: %s", ", ".join(instrumented))
        return instrumented

    def shutdown(self) -> None:
        """Flush pending spans and shut the provider down."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception as e:
            logger.exception("Error during telemetry shutdown: %s", e)
        self.tracer_provider = None


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the process-wide telemetry instance, if startup created one."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Install (or clear, with None) the process-wide telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
