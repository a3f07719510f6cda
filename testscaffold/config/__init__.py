"""Configuration management for testscaffold."""

from .loader import ConfigLoader, ConfigurationError, load_config
from .models import DiscoveryConfig, GenerationConfig, LoggingConfig, ScaffoldConfig

__all__ = [
    "ScaffoldConfig",
    "GenerationConfig",
    "DiscoveryConfig",
    "LoggingConfig",
    "ConfigLoader",
    "ConfigurationError",
    "load_config",
]
