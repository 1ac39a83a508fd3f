"""
Configuration Loader.

Reads javalens settings from a YAML file, expands ${VAR} references,
applies JAVALENS_* environment overrides and validates the result.

Values stay strings until validation; the pydantic models convert each
field to its declared type.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from javalens.analysis.errors import JavalensError
from javalens.config.environment import load_environment
from javalens.config.models import JavalensConfig

# Default configuration file locations
DEFAULT_CONFIG_PATHS = [
    "javalens.yaml",
    "javalens.yml",
    ".javalens.yaml",
    ".javalens.yml",
]

# Environment variable for config path
CONFIG_ENV_VAR = "JAVALENS_CONFIG"

# Maps env var name to config path (dot-separated)
ENV_VAR_OVERRIDES = {
    "JAVALENS_ANALYSIS_LEVEL": "analysis.level",
    "JAVALENS_ANALYSIS_FILE": "analysis.analysis_file",
    "JAVALENS_LOG_LEVEL": "logging.level",
    "JAVALENS_LOG_FILE": "logging.file",
    "JAVALENS_DEBUG": "debug",
}

# ${NAME}, ${NAME:-fallback} or ${NAME:fallback}
ENV_REFERENCE = re.compile(r"\$\{(?P<name>\w+)(?::-?(?P<fallback>[^}]*))?\}")


class ConfigurationError(JavalensError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        path: Path | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            errors: Validation errors (from Pydantic)
            path: Config file that caused the error
        """
        super().__init__(message)
        self.errors = errors or []
        self.path = path

    def __str__(self) -> str:
        headline = super().__str__()
        if self.path:
            headline = f"{headline} (file: {self.path})"
        return "\n".join([headline, *self.describe_errors(self.errors)])


def expand_env_references(value: Any) -> Any:
    """Replace ${VAR} references in every string of a YAML tree.

    A reference to an unset variable falls back to its inline default,
    or stays as written when it has none. A value that expands to an
    empty string becomes None so the field default applies.
    """
    if isinstance(value, dict):
        return {key: expand_env_references(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_references(item) for item in value]
    if not isinstance(value, str):
        return value

    def resolve(match: re.Match[str]) -> str:
        found = os.environ.get(match["name"])
        if found is not None:
            return found
        return match["fallback"] if match["fallback"] is not None else match[0]

    expanded = ENV_REFERENCE.sub(resolve, value)
    return expanded if expanded or not value else None


def drop_empty(value: Any) -> Any:
    """Remove None entries from nested mappings (YAML's empty sections)."""
    if isinstance(value, dict):
        return {key: drop_empty(item) for key, item in value.items() if item is not None}
    return value


class ConfigLoader:
    """Loads configuration from YAML files.

    Usage:
        # Load from specific file
        config = ConfigLoader("javalens.yaml").load()

        # Load from JAVALENS_CONFIG or default locations
        config = ConfigLoader().load_from_env()
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        env_file: str = ".env",
    ) -> None:
        """Initialize the config loader.

        Args:
            config_path: Path to YAML config file (optional)
            env_file: Path to .env file for environment loading
        """
        self._config_path = Path(config_path) if config_path else None
        self._env_file = env_file
        self._config: JavalensConfig | None = None

    @property
    def config_path(self) -> Path | None:
        """Get config file path."""
        return self._config_path

    @property
    def config(self) -> JavalensConfig | None:
        """Get loaded configuration, or None if not loaded yet."""
        return self._config

    def load(self) -> JavalensConfig:
        """Load and validate configuration.

        Without a config path only defaults and environment overrides
        apply.

        Raises:
            ConfigurationError: If config is invalid
            FileNotFoundError: If config file not found
        """
        load_environment(self._env_file)

        settings = expand_env_references(self._read_file()) if self._config_path else {}
        settings = drop_empty(self._with_overrides(settings))

        try:
            self._config = JavalensConfig.model_validate(settings)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e.error_count()} errors",
                errors=e.errors(include_url=False),
                path=self._config_path,
            ) from e
        return self._config

    def load_from_env(self) -> JavalensConfig:
        """Load configuration from JAVALENS_CONFIG or default locations.

        Falls back to defaults when no config file exists.

        Raises:
            ConfigurationError: If config is invalid
            FileNotFoundError: If JAVALENS_CONFIG names a missing file
        """
        load_environment(self._env_file)

        explicit = os.environ.get(CONFIG_ENV_VAR)
        if explicit:
            if not Path(explicit).exists():
                raise FileNotFoundError(
                    f"Config file specified by {CONFIG_ENV_VAR} not found: {explicit}"
                )
            self._config_path = Path(explicit)
        else:
            self._config_path = next(
                (Path(name) for name in DEFAULT_CONFIG_PATHS if Path(name).exists()),
                None,
            )
        return self.load()

    def _read_file(self) -> dict[str, Any]:
        """Parse the YAML config file into a mapping.

        Raises:
            FileNotFoundError: If file doesn't exist
            ConfigurationError: If YAML is invalid or not a mapping
        """
        if not self._config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self._config_path}")

        try:
            data = yaml.safe_load(self._config_path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", path=self._config_path) from e

        if not isinstance(data, dict):
            raise ConfigurationError("Config root must be a mapping", path=self._config_path)
        return data

    def _with_overrides(self, settings: dict[str, Any]) -> dict[str, Any]:
        """Apply JAVALENS_* environment overrides; empty variables are ignored."""
        for env_var, dotted in ENV_VAR_OVERRIDES.items():
            value = os.environ.get(env_var)
            if not value:
                continue
            *sections, field = dotted.split(".")
            target = settings
            for section in sections:
                if not isinstance(target.get(section), dict):
                    target[section] = {}
                target = target[section]
            target[field] = value
        return settings


def load_config(
    config_path: str | Path | None = None,
    env_file: str = ".env",
) -> JavalensConfig:
    """Load configuration from a file, or from JAVALENS_CONFIG and defaults.

    Args:
        config_path: Path to YAML config file; searched for when None
        env_file: Path to .env file

    Raises:
        ConfigurationError: If config validation fails
        FileNotFoundError: If config file not found
    """
    loader = ConfigLoader(config_path, env_file)
    if config_path is None:
        return loader.load_from_env()
    return loader.load()
