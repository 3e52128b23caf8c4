"""
Task Manager API - Security Validation

Startup checks for insecure configuration. Problems are reported as
UserWarnings; none of them stop the service.
"""

import logging
import warnings
from typing import Optional

from taskapi.config import DEFAULT_JWT_SECRET, Settings, settings

logger = logging.getLogger(__name__)

MIN_PRODUCTION_SECRET_LENGTH = 32


def _warn(message: str) -> None:
    logger.warning(message)
    warnings.warn(f"SECURITY WARNING: {message}", UserWarning, stacklevel=3)


def validate_security_config(config: Optional[Settings] = None) -> None:
    """
    Validate security configuration on startup.

    Args:
        config: settings to check, defaults to the process-wide settings
    """
    config = config or settings

    if config.JWT_SECRET_FROM_LEGACY_ENV:
        _warn("JWT secret read from legacy SECRET_KEY. Rename it to JWT_SECRET_KEY.")

    if "*" in config.CORS_ORIGINS:
        _warn(
            "CORS wildcard (*) detected. Browsers refuse it for credentialed requests; "
            "set specific origins via CORS_ORIGINS."
        )

    if not config.is_production:
        return

    if config.JWT_SECRET_KEY == DEFAULT_JWT_SECRET:
        _warn("Using the default JWT secret in production. Set JWT_SECRET_KEY to a strong secret.")
    elif len(config.JWT_SECRET_KEY) < MIN_PRODUCTION_SECRET_LENGTH:
        _warn(f"JWT_SECRET_KEY is shorter than {MIN_PRODUCTION_SECRET_LENGTH} characters.")

    if config.DOCS_ENABLED:
        _warn("API docs are served in production. Set DOCS_ENABLED=false to hide them.")
