"""Sonobi adapter configuration."""

from .adapter_config import (
    DEFAULT_ENDPOINT,
    ENDPOINT_ENV_VAR,
    AdapterConfig,
    validate_endpoint,
)

__all__ = [
    "AdapterConfig",
    "DEFAULT_ENDPOINT",
    "ENDPOINT_ENV_VAR",
    "validate_endpoint",
]
