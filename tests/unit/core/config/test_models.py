"""Unit tests for kf configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from kf_cli.core.config import (
    DEFAULT_NAMESPACE,
    KfConfig,
    KfParams,
    load_config,
    load_raw_config,
)
from kf_cli.core.exceptions import ConfigurationError


@pytest.mark.unit
class TestKfConfig:
    """Tests for the KfConfig model."""

    def test_defaults(self) -> None:
        config = KfConfig()

        assert config.namespace == DEFAULT_NAMESPACE
        assert config.context is None
        assert config.timeout is None
        assert config.output_format == "table"

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError, match="timeout must be positive"):
            KfConfig(timeout=0)

    def test_expands_kubeconfig_home(self) -> None:
        config = KfConfig(kubeconfig="~/kube/config")

        assert config.kubeconfig == str(Path.home() / "kube" / "config")

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValueError):
            KfConfig.model_validate({"namespce": "typo"})


@pytest.mark.unit
class TestFromEnv:
    """Tests for environment variable overrides."""

    def test_env_overrides_base(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KF_NAMESPACE", "from-env")
        monkeypatch.setenv("KF_TIMEOUT", "15")
        monkeypatch.setenv("KF_OUTPUT", "json")

        config = KfConfig.from_env({"namespace": "from-file", "context": "staging"})

        assert config.namespace == "from-env"
        assert config.context == "staging"
        assert config.timeout == 15
        assert config.output_format == "json"

    def test_empty_namespace_env_is_kept(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicitly empty KF_NAMESPACE clears the namespace."""
        monkeypatch.setenv("KF_NAMESPACE", "")

        assert KfConfig.from_env({"namespace": "from-file"}).namespace == ""

    def test_invalid_env_raises_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("KF_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError, match="invalid kf configuration"):
            KfConfig.from_env()


@pytest.mark.unit
class TestLoadConfig:
    """Tests for reading the YAML config file."""

    def test_missing_file_returns_empty(self, tmp_path: Path) -> None:
        assert load_raw_config(tmp_path / "nope.yaml") == {}

    def test_reads_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("namespace: team-a\ntimeout: 30\n")

        config = load_config(path)

        assert config.namespace == "team-a"
        assert config.timeout == 30

    def test_uses_kf_config_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("context: prod-cluster\n")
        monkeypatch.setenv("KF_CONFIG", str(path))

        assert load_config().context == "prod-cluster"

    def test_empty_file_returns_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_raw_config(path) == {}

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("namespace: [unclosed\n")

        with pytest.raises(ConfigurationError, match="couldn't load config file"):
            load_raw_config(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_raw_config(path)


@pytest.mark.unit
def test_params_defaults() -> None:
    """KfParams starts out targeting the default namespace."""
    params = KfParams()

    assert params.namespace == DEFAULT_NAMESPACE
    assert params.config == KfConfig()
