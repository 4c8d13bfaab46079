"""Tracing helper and TelemetryConfig tests (in-memory span exporter)."""

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from linkresolver.core.config import Settings
from linkresolver.shared.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
    traced,
)
from linkresolver.shared.telemetry import tracing


@pytest.fixture
def exporter(monkeypatch: pytest.MonkeyPatch) -> InMemorySpanExporter:
    """Route traced() spans to an in-memory exporter."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(
        tracing.trace, "get_tracer", lambda name: provider.get_tracer(name)
    )
    return exporter


class TestTraced:
    """Spans record allow-listed arguments and the error status on failure."""

    async def test_span_with_allowlisted_kwargs(self, exporter) -> None:
        @traced("resolver.op")
        async def op(expression: str, language_id: int) -> str:
            return "ok"

        assert await op(expression="product:42", language_id=2) == "ok"
        (span,) = exporter.get_finished_spans()
        assert span.name == "resolver.op"
        assert span.attributes["arg.language_id"] == "2"
        assert "arg.expression" not in span.attributes
        assert span.status.status_code == StatusCode.OK

    async def test_error_status_and_reraise(self, exporter) -> None:
        @traced()
        async def failing() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await failing()
        (span,) = exporter.get_finished_spans()
        assert span.status.status_code == StatusCode.ERROR
        assert span.events[0].name == "exception"


class TestTelemetryConfig:
    """Disabled or unconfigured telemetry never installs anything."""

    def test_disabled_returns_none(self) -> None:
        config = TelemetryConfig("linkresolver", "1.0.0", enabled=False)
        assert config.setup_telemetry() is None
        assert config.tracer_provider is None

    def test_global_instance(self) -> None:
        config = TelemetryConfig("linkresolver", "1.0.0")
        set_telemetry(config)
        try:
            assert get_telemetry() is config
        finally:
            set_telemetry(None)
        assert get_telemetry() is None

    def test_from_settings(self) -> None:
        config = TelemetryConfig.from_settings(
            Settings(telemetry_enabled=True, telemetry_environment="staging")
        )
        assert config.enabled is True
        assert config.service_name == "linkresolver"
        assert config.environment == "staging"

    def test_instrument_without_provider_is_noop(self) -> None:
        config = TelemetryConfig("linkresolver", "1.0.0")
        assert config.instrument(redis_enabled=True) == []
