"""
Configuration loading for testscaffold.

Settings come from three layers, later layers winning: a TOML or YAML
config file, ``TESTSCAFFOLD_*`` environment variables, and overrides passed
by the CLI. The merged result is validated into a ScaffoldConfig.
"""

import logging
import os
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..domain.models import ScaffoldError
from .models import ScaffoldConfig

logger = logging.getLogger(__name__)


class ConfigurationError(ScaffoldError):
    """Raised when configuration loading or validation fails."""

    pass


def _parse_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e


def _parse_yaml(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e


_PARSERS: dict[str, Callable[[Path], Any]] = {
    ".toml": _parse_toml,
    ".yml": _parse_yaml,
    ".yaml": _parse_yaml,
}


def merge_settings(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Merge nested setting tables, values in ``overrides`` winning."""
    merged = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = value
    return merged


def coerce_env_value(raw: str) -> Any:
    """Booleans and comma-separated lists; anything else stays a string."""
    lowered = raw.strip().lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    if "," in raw:
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


class ConfigLoader:
    """Builds the validated configuration from file, environment and CLI layers."""

    SEARCH_NAMES = (
        ".testscaffold.toml",
        ".testscaffold.yml",
        ".testscaffold.yaml",
        "testscaffold.toml",
        "testscaffold.yml",
        "testscaffold.yaml",
    )

    ENV_PREFIX = "TESTSCAFFOLD_"
    ENV_NESTING = "__"

    # Read directly by the logging setup, not part of ScaffoldConfig
    RESERVED_ENV = frozenset({"TESTSCAFFOLD_QUIET", "TESTSCAFFOLD_UI"})

    def __init__(self, config_file: str | Path | None = None):
        """
        Args:
            config_file: Explicit config file. When None the working
                directory is searched for one of SEARCH_NAMES.
        """
        self.config_file = Path(config_file) if config_file else None
        self._cached: ScaffoldConfig | None = None

    def load_config(
        self,
        env_overrides: dict[str, Any] | None = None,
        cli_overrides: dict[str, Any] | None = None,
        reload: bool = False,
    ) -> ScaffoldConfig:
        """
        Load and validate the configuration, caching the result.

        Args:
            env_overrides: Settings used instead of reading the environment
            cli_overrides: Settings from CLI arguments, applied last
            reload: Ignore the cached configuration

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a source cannot be read or validation fails
        """
        if self._cached is not None and not reload:
            return self._cached

        layers = [
            ("config file", self.read_file_settings()),
            (
                "environment",
                env_overrides if env_overrides is not None else self.read_env_settings(),
            ),
            ("CLI", cli_overrides or {}),
        ]

        settings: dict[str, Any] = {}
        for label, layer in layers:
            if layer:
                logger.debug(f"Applying {label} settings: {sorted(layer)}")
                settings = merge_settings(settings, layer)

        try:
            self._cached = ScaffoldConfig.model_validate(settings)
        except ValidationError as e:
            error_msg = f"Configuration validation failed: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

        return self._cached

    def find_config_file(self) -> Path | None:
        """The explicit config file, else the first default name that exists."""
        if self.config_file:
            return self.config_file
        return next((Path(name) for name in self.SEARCH_NAMES if Path(name).exists()), None)

    def read_file_settings(self) -> dict[str, Any]:
        """Settings from the config file, empty when there is none."""
        path = self.find_config_file()
        if path is None:
            logger.debug("No configuration file found, using defaults")
            return {}

        parser = _PARSERS.get(path.suffix.lower())
        if parser is None:
            logger.warning(f"Unknown configuration file type: {path}")
            return {}

        try:
            content = parser(path)
        except OSError as e:
            raise ConfigurationError(f"Failed to read {path}: {e}") from e

        if not content:
            logger.warning(f"Configuration file {path} is empty")
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(f"Configuration file {path} must hold a table of settings")

        logger.debug(f"Loaded configuration from {path}")
        return content

    def read_env_settings(self, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
        """
        Settings from ``TESTSCAFFOLD_*`` variables.

        ``TESTSCAFFOLD_GENERATION__OUTPUT_DIR_NAME`` sets
        ``generation.output_dir_name``.
        """
        environ = os.environ if environ is None else environ
        settings: dict[str, Any] = {}

        for key, raw in environ.items():
            if not key.startswith(self.ENV_PREFIX) or key in self.RESERVED_ENV:
                continue
            *sections, field = key[len(self.ENV_PREFIX) :].lower().split(self.ENV_NESTING)
            table = settings
            for section in sections:
                table = table.setdefault(section, {})
                if not isinstance(table, dict):
                    raise ConfigurationError(
                        f"Environment variable {key} conflicts with {section} set as a value"
                    )
            table[field] = coerce_env_value(raw)

        return settings


def load_config(
    config_file: str | Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ScaffoldConfig:
    """Convenience wrapper around ConfigLoader."""
    return ConfigLoader(config_file).load_config(cli_overrides=cli_overrides)
