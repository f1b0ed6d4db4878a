"""
Structured logging for the payment decider.

The decision core is pure and never logs. Logging happens at the edges:
the command handler façade and the CLI. Provides correlation IDs, context
propagation, and JSON output for production.
"""

import contextvars
import logging
import os
import secrets
import sys
import time
from typing import Any, TextIO

import structlog

# Context variable for correlation ID (thread-safe)
correlation_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)


def generate_correlation_id() -> str:
    """Generate a new 22-character URL-safe correlation ID (128 bits)."""
    return secrets.token_urlsafe(16)


def get_correlation_id() -> str:
    """Get the current correlation ID, or generate a new one if not set."""
    cid = correlation_id_var.get()
    if not cid:
        cid = generate_correlation_id()
        correlation_id_var.set(cid)
    return cid


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    correlation_id_var.set(correlation_id)


def add_correlation_id(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add correlation ID to log event."""
    event_dict["correlation_id"] = get_correlation_id()
    return event_dict


def configure_logging(
    *,
    json_output: bool = False,
    log_level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        json_output: If True, output JSON logs (for production).
                    If False, output human-readable console logs (for development).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Where log lines go (defaults to stderr so stdout stays clean
                for command output)
    """
    level = getattr(logging, log_level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=level,
        force=True,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_correlation_id,
    ]

    if json_output:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.ExceptionRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


def is_production() -> bool:
    """True when the ENVIRONMENT variable is 'production' (default: development)."""
    return os.getenv("ENVIRONMENT", "development").lower() == "production"


# Financial and secret fields kept out of log output
REDACTED_FIELDS = {
    "amount",
    "refunded_amount",
    "password",
    "token",
    "secret",
    "api_key",
}


def redact_context(context: dict[str, Any]) -> dict[str, Any]:
    """
    Redact sensitive fields from log context.

    Example:
        >>> redact_context({"amount": 100, "command_type": "RefundPayment"})
        {"amount": "***REDACTED***", "command_type": "RefundPayment"}
    """
    return {
        k: "***REDACTED***" if k in REDACTED_FIELDS else v
        for k, v in context.items()
    }


class LogOperation:
    """Context manager for logging operations with automatic timing."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        operation: str,
        expected: tuple[type[BaseException], ...] = (),
        **context: Any,
    ):
        """
        Initialize operation logger.

        Args:
            logger: Structured logger instance
            operation: Operation name (e.g., "handle_command")
            expected: Exception types that are normal outcomes of the
                      operation; logged as a warning without a stack trace
            **context: Additional context to include in logs
        """
        self.logger = logger
        self.operation = operation
        self.expected = expected
        self.context = context
        self.start_time: float = 0.0

    def __enter__(self) -> "LogOperation":
        self.start_time = time.perf_counter()
        self.logger.debug(
            f"{self.operation} started",
            operation=self.operation,
            **redact_context(self.context),
        )
        return self

    def add_context(self, **context: Any) -> None:
        """Attach context learned inside the block to the closing log line"""
        self.context.update(context)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        duration_ms = round((time.perf_counter() - self.start_time) * 1000, 2)
        redacted = redact_context(self.context)

        if exc_type is None:
            self.logger.info(
                f"{self.operation} completed",
                operation=self.operation,
                duration_ms=duration_ms,
                **redacted,
            )
        elif self.expected and issubclass(exc_type, self.expected):
            self.logger.warning(
                f"{self.operation} rejected",
                operation=self.operation,
                duration_ms=duration_ms,
                error=str(exc_val),
                **redacted,
            )
        else:
            # Stack traces only outside production
            self.logger.error(
                f"{self.operation} failed",
                operation=self.operation,
                duration_ms=duration_ms,
                error=str(exc_val),
                exc_info=not is_production(),
                **redacted,
            )
