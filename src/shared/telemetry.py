import logging
import sys
import time
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

from prometheus_client import REGISTRY, Counter, Histogram

# --- Context for Correlation IDs ---
correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="system")

# --- Prometheus Metric Definitions ---
DURATION_METRIC = "screen_action_duration_seconds"
ACTIONS_METRIC = "screen_actions"

ACTION_DURATION: Histogram
ACTION_COUNT: Counter


def _registered(name: str) -> Any:
    # Streamlit re-imports modules on rerun; the registry outlives them.
    return REGISTRY._names_to_collectors[name]


try:
    ACTION_DURATION = Histogram(
        DURATION_METRIC, "Time spent handling a screen action", ["screen", "action"]
    )
except ValueError:
    ACTION_DURATION = cast(Histogram, _registered(DURATION_METRIC))

try:
    ACTION_COUNT = Counter(
        ACTIONS_METRIC, "Screen actions by outcome", ["screen", "action", "outcome"]
    )
except ValueError:
    ACTION_COUNT = cast(Counter, _registered(ACTIONS_METRIC))

P = ParamSpec("P")
R = TypeVar("R")


def measure_time(action_name: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator for timing view-model actions + logging.
    Expects an instance method; the owner's class name is the metric's screen label.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start = time.perf_counter()
            self_obj: Any = args[0] if args else None
            screen = self_obj.__class__.__name__ if self_obj else "Unknown"
            telemetry = getattr(self_obj, "telemetry", None)

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.perf_counter() - start
                ACTION_DURATION.labels(screen=screen, action=action_name).observe(
                    duration
                )
                ACTION_COUNT.labels(
                    screen=screen, action=action_name, outcome="error"
                ).inc()
                if telemetry:
                    telemetry.log_error(
                        f"💥 Failed: {action_name}",
                        e,
                        duration_ms=round(duration * 1000, 2),
                    )
                raise

            duration = time.perf_counter() - start
            ACTION_DURATION.labels(screen=screen, action=action_name).observe(duration)
            ACTION_COUNT.labels(screen=screen, action=action_name, outcome="ok").inc()
            if telemetry:
                telemetry.log_info(
                    f"⏱️ {action_name}", duration_ms=round(duration * 1000, 2)
                )
            return result

        return wrapper

    return decorator


class Telemetry:
    """
    Facade for Logs, Metrics, and Tracing.
    """

    def __init__(self, component_name: str) -> None:
        self.component = component_name
        self.logger: logging.Logger
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Initializes the logger. Safe to call multiple times."""
        self.logger = logging.getLogger(self.component)

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def __getstate__(self) -> dict[str, Any]:
        """Pickling: Save everything EXCEPT the logger."""
        state = self.__dict__.copy()
        state.pop("logger", None)
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._setup_logger()

    @staticmethod
    def start_trace() -> str:
        c_id = str(uuid.uuid4())[:8]
        correlation_id_ctx.set(c_id)
        return c_id

    @staticmethod
    def get_trace_id() -> str:
        return correlation_id_ctx.get()

    def log_info(self, event: str, **kwargs: Any) -> None:
        self.logger.info(f"[{self.get_trace_id()}] {event} | {kwargs}")

    def log_error(self, event: str, error: Exception, **kwargs: Any) -> None:
        self.logger.error(
            f"[{self.get_trace_id()}] ❌ {event} | Error: {error} | {kwargs}",
            exc_info=True,
        )
