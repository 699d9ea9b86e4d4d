"""Configuration management with Pydantic validation."""

from kf_cli.core.config.models import (
    DEFAULT_NAMESPACE,
    KfConfig,
    KfParams,
    load_config,
    load_raw_config,
)

__all__ = [
    "DEFAULT_NAMESPACE",
    "KfConfig",
    "KfParams",
    "load_config",
    "load_raw_config",
]
