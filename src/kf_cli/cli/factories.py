"""Production client factories and operation builders for the CLI.

Factories read ``params.config`` when called, not when built, so the root
callback can finish loading configuration before any client exists.
"""

from __future__ import annotations

from collections.abc import Callable

from kf_cli.core.config import KfParams
from kf_cli.integrations.kubernetes import KubernetesClient
from kf_cli.integrations.kubernetes.catalog import KubernetesServiceCatalogClient
from kf_cli.integrations.kubernetes.resources import (
    KNATIVE_SERVICE,
    SERVICE_INSTANCE,
    CustomResourceClient,
    SecretResourceClient,
)
from kf_cli.services import AppLister, Deleter, SecretsManager, ServiceInstancesManager


def serving_client_factory(params: KfParams) -> Callable[[], CustomResourceClient]:
    """Build a zero-argument factory for the Knative serving client."""

    def factory() -> CustomResourceClient:
        return CustomResourceClient(KubernetesClient(params.config), KNATIVE_SERVICE)

    return factory


def apps_client_factory(params: KfParams) -> Callable[[str], CustomResourceClient]:
    """Build a namespaced factory for listing Knative services."""

    def factory(_namespace: str) -> CustomResourceClient:
        return CustomResourceClient(KubernetesClient(params.config), KNATIVE_SERVICE)

    return factory


def catalog_client_factory(params: KfParams) -> Callable[[str], KubernetesServiceCatalogClient]:
    """Build a namespaced factory for the service catalog client."""

    def factory(_namespace: str) -> KubernetesServiceCatalogClient:
        instances = CustomResourceClient(KubernetesClient(params.config), SERVICE_INSTANCE)
        return KubernetesServiceCatalogClient(instances)

    return factory


def secrets_client_factory(params: KfParams) -> Callable[[str], SecretResourceClient]:
    """Build a namespaced factory for the secrets client."""

    def factory(_namespace: str) -> SecretResourceClient:
        return SecretResourceClient(KubernetesClient(params.config))

    return factory


def make_deleter(params: KfParams) -> Deleter:
    return Deleter(serving_client_factory(params), default_namespace=params.namespace)


def make_app_lister(params: KfParams) -> AppLister:
    return AppLister(apps_client_factory(params), default_namespace=params.namespace)


def make_instances_manager(params: KfParams) -> ServiceInstancesManager:
    return ServiceInstancesManager(
        catalog_client_factory(params), default_namespace=params.namespace
    )


def make_secrets_manager(params: KfParams) -> SecretsManager:
    return SecretsManager(secrets_client_factory(params), default_namespace=params.namespace)
