"""Stream API configuration classes for dependency injection."""
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from stream_client.credentials import BasicAuth

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_REDIRECTS = 5


@dataclass
class StreamConfig:
    """Stream API client configuration."""

    api_key: Optional[str]
    api_secret: Optional[str]
    timeout: float = DEFAULT_TIMEOUT
    max_redirects: int = DEFAULT_MAX_REDIRECTS

    def get_credentials(self) -> BasicAuth:
        """Build basic auth credentials from the configured key and secret."""
        if not self.api_key or not self.api_secret:
            raise ValueError("Stream API key and secret must both be configured")
        return BasicAuth(key=self.api_key, secret=self.api_secret)


class StreamConfigProvider(ABC):
    """Abstract base class for Stream configuration providers."""

    @abstractmethod
    def get_config(self) -> StreamConfig:
        """Get Stream configuration."""
        pass


class EnvironmentStreamConfigProvider(StreamConfigProvider):
    """Stream configuration provider that reads from environment variables."""

    def get_config(self) -> StreamConfig:
        """Get Stream configuration from environment variables."""
        api_key = os.getenv("STREAM_API_KEY", "")
        api_secret = os.getenv("STREAM_API_SECRET", "")
        timeout = float(os.getenv("STREAM_TIMEOUT", str(DEFAULT_TIMEOUT)))
        max_redirects = int(
            os.getenv("STREAM_MAX_REDIRECTS", str(DEFAULT_MAX_REDIRECTS))
        )

        return StreamConfig(
            api_key=api_key or None,
            api_secret=api_secret or None,
            timeout=timeout,
            max_redirects=max_redirects,
        )


class YamlStreamConfigProvider(StreamConfigProvider):
    """Stream configuration provider that reads the ``stream`` section of a YAML file."""

    def __init__(self, config_path: str):
        """Initialize with the path of the YAML file."""
        self.config_path = config_path

    def _load_section(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, "r") as f:
                config = yaml.safe_load(f)
                if not config or "stream" not in config:
                    raise ValueError("Invalid config format: missing stream section")
                return config["stream"] or {}
        except (OSError, yaml.YAMLError, ValueError) as e:
            raise ValueError(f"Error loading stream config: {str(e)}") from e

    def get_config(self) -> StreamConfig:
        """Get Stream configuration from the YAML file."""
        section = self._load_section()
        return StreamConfig(
            api_key=section.get("api_key"),
            api_secret=section.get("api_secret"),
            timeout=float(section.get("timeout", DEFAULT_TIMEOUT)),
            max_redirects=int(section.get("max_redirects", DEFAULT_MAX_REDIRECTS)),
        )


class StaticStreamConfigProvider(StreamConfigProvider):
    """Stream configuration provider for testing with explicit values."""

    def __init__(self, config: StreamConfig):
        """Initialize with explicit configuration."""
        self._config = config

    def get_config(self) -> StreamConfig:
        """Get the explicit Stream configuration."""
        return self._config
