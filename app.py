import os
import logging
import streamlit as st

# --- OTel & Observability Imports ---
from opentelemetry import trace
from opentelemetry._logs import set_logger_provider
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource

# --- OTel Logging Imports ---
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter

# --- Prometheus Import ---
from prometheus_client import start_http_server

# --- Application Imports ---
from src.config import AppConfig, Screen
from src.converter.presentation.viewmodel import ConverterViewModel
from src.login.presentation.viewmodel import LoginViewModel
from src.presentation.renderer import StreamlitRenderer
from src.presentation.views import components
from src.shared.state_provider import StreamlitStateProvider
from src.storefront.presentation.viewmodel import StorefrontViewModel

logger = logging.getLogger(__name__)


# --- 1. Configure Observability ---
def configure_observability():
    """
    Sends Traces and Logs via OTLP when the endpoint is configured.
    Starts a background Prometheus server for Metrics.
    """
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    headers = os.getenv("OTEL_EXPORTER_OTLP_HEADERS")

    if endpoint and headers:
        resource = Resource.create({"service.name": "mobile-screens-app"})

        # --- A. TRACING ---
        trace_provider = TracerProvider(resource=resource)
        trace_provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, headers=headers))
        )
        trace.set_tracer_provider(trace_provider)

        # --- B. LOGGING ---
        logger_provider = LoggerProvider(resource=resource)
        logger_provider.add_log_record_processor(
            BatchLogRecordProcessor(OTLPLogExporter(endpoint=endpoint, headers=headers))
        )
        set_logger_provider(logger_provider)

        # Root logger handler captures every Telemetry logger too
        handler = LoggingHandler(level=logging.INFO, logger_provider=logger_provider)
        logging.getLogger().addHandler(handler)
    else:
        logger.warning("⚠️ OTEL env vars not set. Telemetry stays local.")

    # --- C. METRICS ---
    try:
        start_http_server(AppConfig.METRICS_PORT)
        logger.info(f"✅ Prometheus metrics on port {AppConfig.METRICS_PORT}")
    except OSError:
        logger.warning(
            f"⚠️ Port {AppConfig.METRICS_PORT} in use (likely Streamlit reload). Skipping."
        )


# --- 2. Bootstrap ---
if "observability_configured" not in st.session_state:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    configure_observability()
    st.session_state.observability_configured = True


def main():
    st.set_page_config(page_title=AppConfig.APP_TITLE, layout="centered")
    components.apply_styles()

    # --- 3. Wiring (Composition Root) ---
    app_state = StreamlitStateProvider("app")
    renderer = StreamlitRenderer(
        converter_vm=ConverterViewModel(StreamlitStateProvider("converter")),
        login_vm=LoginViewModel(StreamlitStateProvider("login")),
        storefront_vm=StorefrontViewModel(StreamlitStateProvider("storefront")),
    )

    # --- 4. Screen Switcher ---
    current = app_state.get("screen", AppConfig.DEFAULT_SCREEN)
    selected = components.render_sidebar(current)
    if selected != current:
        app_state.set("screen", selected)
        st.rerun()

    # --- 5. Render ---
    renderer.render(selected)
    components.render_trace_panel()


if __name__ == "__main__":
    main()
