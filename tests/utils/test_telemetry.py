"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from opentelemetry import trace

from arctl.utils.telemetry import (
    ATTR_AGENT_IMAGE,
    ATTR_AGENT_NAME,
    ATTR_MODEL_PROVIDER,
    ATTR_NEEDS_REGISTRY,
    configure_telemetry,
    get_tracer,
)


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        tracer = get_tracer("test.module")
        assert isinstance(tracer, trace.Tracer)

    def test_default_name(self) -> None:
        assert isinstance(get_tracer(), trace.Tracer)

    def test_noop_span(self) -> None:
        tracer = get_tracer("test.noop")
        with tracer.start_as_current_span("test") as span:
            span.set_attribute(ATTR_AGENT_NAME, "myagent")


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry()

    def test_otlp_raises_without_exporter(self) -> None:
        pytest.importorskip("opentelemetry.sdk.trace")

        with patch.dict(
            "sys.modules",
            {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
        ), patch.object(trace, "set_tracer_provider") as set_provider:
            with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                configure_telemetry(
                    export_to_console=False,
                    otlp_endpoint="http://localhost:4317",
                )
        set_provider.assert_not_called()

    def test_installs_provider(self) -> None:
        sdk_trace = pytest.importorskip("opentelemetry.sdk.trace")

        with patch.object(trace, "set_tracer_provider") as set_provider:
            configure_telemetry(service_name="test-svc", export_to_console=False)

        (provider,), _ = set_provider.call_args
        assert isinstance(provider, sdk_trace.TracerProvider)
        assert provider.resource.attributes["service.name"] == "test-svc"


class TestAttributeConstants:
    @pytest.mark.parametrize(
        "attr", [ATTR_AGENT_NAME, ATTR_AGENT_IMAGE, ATTR_MODEL_PROVIDER, ATTR_NEEDS_REGISTRY]
    )
    def test_namespaced(self, attr: str) -> None:
        assert attr.startswith("arctl.")
