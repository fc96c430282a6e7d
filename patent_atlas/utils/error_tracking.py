"""Sentry error tracking configuration."""

import logging
import os
from typing import Any, Dict, Optional

import sentry_sdk
import structlog
from sentry_sdk.integrations.logging import LoggingIntegration

logger = structlog.get_logger(__name__)

_SENSITIVE_HEADERS = ("authorization", "cookie", "x-api-key", "x-auth-token")
_SENSITIVE_KEYS = ("password", "token", "secret", "key")


def setup_sentry(
    dsn: Optional[str] = None,
    environment: str = "development",
    service_name: str = "patent-atlas",
    service_version: str = "1.0.0",
    traces_sample_rate: float = 0.0,
) -> bool:
    """Setup Sentry error tracking. Returns whether tracking is enabled."""
    if not dsn:
        dsn = os.getenv("SENTRY_DSN")

    if not dsn:
        logger.warning("Sentry DSN not provided, error tracking disabled")
        return False

    try:
        sentry_sdk.init(
            dsn=dsn,
            environment=environment,
            release=f"{service_name}@{service_version}",
            traces_sample_rate=traces_sample_rate,
            integrations=[
                LoggingIntegration(
                    level=logging.INFO,
                    event_level=logging.ERROR
                ),
            ],
            before_send=filter_sensitive_data,
            debug=environment == "development"
        )

        logger.info("Sentry error tracking initialized",
                    environment=environment,
                    service_name=service_name)
        return True

    except Exception as e:
        logger.error("Failed to setup Sentry", error=str(e))
        return False


def filter_sensitive_data(event: Dict[str, Any], hint: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Filter sensitive data from Sentry events."""
    request = event.get("request") or {}
    headers = request.get("headers") or {}
    for header in list(headers):
        if header.lower() in _SENSITIVE_HEADERS:
            headers[header] = "[REDACTED]"

    extra = event.get("extra") or {}
    for key in list(extra):
        if any(marker in key.lower() for marker in _SENSITIVE_KEYS):
            extra[key] = "[REDACTED]"

    return event


def capture_exception(error: Exception, context: Optional[Dict[str, Any]] = None):
    """Capture an exception with additional context."""
    try:
        if context:
            with sentry_sdk.new_scope() as scope:
                for key, value in context.items():
                    scope.set_tag(key, value)
                sentry_sdk.capture_exception(error)
        else:
            sentry_sdk.capture_exception(error)

        logger.debug("Exception captured in Sentry",
                     error_type=type(error).__name__,
                     error_message=str(error))

    except Exception as e:
        logger.error("Failed to capture exception in Sentry", error=str(e))
