"""
Sonobi adapter configuration.

The adapter has a single setting, the exchange endpoint. It can come
from the environment (``SONOBI_ENDPOINT``) or from a YAML file laid
out like a host config:

    adapters:
      sonobi:
        endpoint: https://apex.go.sonobi.com/prebid?partnerid=71d9d3d8af
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import yaml

from ..errors import ConfigurationError

DEFAULT_ENDPOINT = "https://apex.go.sonobi.com/prebid?partnerid=71d9d3d8af"
ENDPOINT_ENV_VAR = "SONOBI_ENDPOINT"

_URL_PATTERN = re.compile(
    r"^https?://[a-zA-Z0-9][-a-zA-Z0-9]*(\.[a-zA-Z0-9][-a-zA-Z0-9]*)*(:\d+)?"
    r"[/a-zA-Z0-9._~:/?#\[\]@!$&'()*+,;=%-]*$"
)


def validate_endpoint(url: Any) -> bool:
    """Check that an endpoint is an http(s) URL with a host."""
    if not url or not isinstance(url, str):
        return False
    if not url.startswith(("https://", "http://")):
        return False
    return bool(_URL_PATTERN.match(url))


@dataclass(frozen=True)
class AdapterConfig:
    """
    Configuration for the Sonobi adapter.

    Attributes:
        endpoint: Exchange URI all requests are posted to
    """

    endpoint: str = DEFAULT_ENDPOINT

    def __post_init__(self):
        if not validate_endpoint(self.endpoint):
            raise ConfigurationError(f"Invalid endpoint URL: {self.endpoint!r}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"endpoint": self.endpoint}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AdapterConfig":
        """Create from dictionary."""
        return cls(endpoint=data.get("endpoint") or DEFAULT_ENDPOINT)

    @classmethod
    def from_env(cls) -> "AdapterConfig":
        """Create from the SONOBI_ENDPOINT environment variable."""
        return cls(endpoint=os.environ.get(ENDPOINT_ENV_VAR, DEFAULT_ENDPOINT))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "AdapterConfig":
        """
        Load from a YAML host config (``adapters.sonobi.endpoint``).

        Raises:
            ConfigurationError: If the file is missing or not valid YAML
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"YAML error in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must hold a mapping")

        adapters = data.get("adapters") or {}
        if not isinstance(adapters, dict):
            raise ConfigurationError(f"adapters in {path} must be a mapping")
        sonobi = adapters.get("sonobi") or {}
        if not isinstance(sonobi, dict):
            raise ConfigurationError(f"adapters.sonobi in {path} must be a mapping")
        return cls.from_dict(sonobi)
