"""kf configuration models and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from kf_cli.core.exceptions import ConfigurationError

logger = structlog.get_logger()

# Process-wide fallback namespace, passed explicitly into executors
DEFAULT_NAMESPACE = "default"

DEFAULT_CONFIG_PATH = Path.home() / ".kf" / "config.yaml"


class KfConfig(BaseModel):
    """Settings read from the kf config file and environment."""

    model_config = ConfigDict(extra="forbid")

    namespace: str = DEFAULT_NAMESPACE
    context: str | None = None
    kubeconfig: str | None = None
    timeout: int | None = None
    output_format: Literal["table", "json", "yaml"] = "table"

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int | None) -> int | None:
        """Validate timeout is positive."""
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str | None) -> str | None:
        """Expand ~ in kubeconfig path."""
        return str(Path(v).expanduser()) if v else v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> KfConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            KF_NAMESPACE: Default namespace for operations
            KF_CONTEXT: Kubeconfig context to use
            KF_KUBECONFIG: Kubeconfig path
            KF_TIMEOUT: Request timeout in seconds
            KF_OUTPUT: Output format (table, json, yaml)
        """
        config_dict = base_config.copy() if base_config else {}

        if (namespace := os.environ.get("KF_NAMESPACE")) is not None:
            config_dict["namespace"] = namespace
        if context := os.environ.get("KF_CONTEXT"):
            config_dict["context"] = context
        if kubeconfig := os.environ.get("KF_KUBECONFIG"):
            config_dict["kubeconfig"] = kubeconfig
        if timeout := os.environ.get("KF_TIMEOUT"):
            config_dict["timeout"] = timeout
        if output_format := os.environ.get("KF_OUTPUT"):
            config_dict["output_format"] = output_format

        try:
            return cls.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"invalid kf configuration: {e}") from e


class KfParams(BaseModel):
    """Runtime parameters shared by every command in one invocation.

    Filled in by the root CLI callback before any command runs.
    """

    namespace: str = DEFAULT_NAMESPACE
    config: KfConfig = KfConfig()


def load_raw_config(path: Path | None = None) -> dict[str, Any]:
    """Read the raw YAML config document.

    Args:
        path: Config file path. Defaults to ``KF_CONFIG`` or ~/.kf/config.yaml.

    Returns:
        The parsed document, or an empty dict when the file does not exist.

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping.
    """
    if path is None:
        env_path = os.environ.get("KF_CONFIG")
        path = Path(env_path).expanduser() if env_path else DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.debug("config_file_missing", path=str(path))
        return {}

    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"couldn't load config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file {path} must contain a mapping")
    logger.debug("loaded_config_file", path=str(path))
    return data


def load_config(path: Path | None = None) -> KfConfig:
    """Load the kf configuration from file with environment overrides."""
    return KfConfig.from_env(load_raw_config(path))
