"""Unit tests for production client factories."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from kf_cli.cli.factories import (
    catalog_client_factory,
    make_app_lister,
    make_deleter,
    make_instances_manager,
    make_secrets_manager,
    secrets_client_factory,
    serving_client_factory,
)
from kf_cli.core.config import KfConfig, KfParams
from kf_cli.integrations.kubernetes import KubernetesConnectionError
from kf_cli.integrations.kubernetes.catalog import KubernetesServiceCatalogClient
from kf_cli.integrations.kubernetes.resources import (
    KNATIVE_SERVICE,
    CustomResourceClient,
    SecretResourceClient,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestFactories:
    """Tests for the client factories."""

    def test_client_built_lazily_with_current_config(self) -> None:
        params = KfParams()
        factory = serving_client_factory(params)
        params.config = KfConfig(context="staging")

        with patch("kf_cli.cli.factories.KubernetesClient") as client_cls:
            client = factory()

        client_cls.assert_called_once_with(params.config)
        assert isinstance(client, CustomResourceClient)
        assert client.kind == KNATIVE_SERVICE

    def test_catalog_factory(self) -> None:
        with patch("kf_cli.cli.factories.KubernetesClient"):
            client = catalog_client_factory(KfParams())("prod")

        assert isinstance(client, KubernetesServiceCatalogClient)

    def test_secrets_factory(self) -> None:
        with patch("kf_cli.cli.factories.KubernetesClient"):
            client = secrets_client_factory(KfParams())("prod")

        assert isinstance(client, SecretResourceClient)

    def test_construction_error_surfaces_on_use(self) -> None:
        deleter = make_deleter(KfParams())

        with (
            patch(
                "kf_cli.cli.factories.KubernetesClient",
                side_effect=KubernetesConnectionError(),
            ),
            pytest.raises(KubernetesConnectionError),
        ):
            deleter.delete("my-app")

    def test_operations_use_params_namespace(self) -> None:
        params = KfParams(namespace="team-a")

        assert make_deleter(params).default_namespace == "team-a"
        assert make_app_lister(params).default_namespace == "team-a"
        assert make_instances_manager(params).default_namespace == "team-a"
        assert make_secrets_manager(params).default_namespace == "team-a"

    def test_delete_goes_through_knative_client(self) -> None:
        k8s = MagicMock()
        k8s.timeout = None

        with patch("kf_cli.cli.factories.KubernetesClient", return_value=k8s):
            make_deleter(KfParams(namespace="prod")).delete("my-app")

        k8s.custom_objects.delete_namespaced_custom_object.assert_called_once_with(
            "serving.knative.dev", "v1", "prod", "services", "my-app"
        )
