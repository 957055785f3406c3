"""Configuration for the stream client."""
from stream_client.config.logging_config import setup_logging
from stream_client.config.stream_config import (
    EnvironmentStreamConfigProvider,
    StaticStreamConfigProvider,
    StreamConfig,
    StreamConfigProvider,
    YamlStreamConfigProvider,
)

__all__ = [
    "EnvironmentStreamConfigProvider",
    "StaticStreamConfigProvider",
    "StreamConfig",
    "StreamConfigProvider",
    "YamlStreamConfigProvider",
    "setup_logging",
]
