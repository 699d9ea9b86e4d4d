"""Managed-service instance operations.

Creates, deletes and lists service catalog instances through an injected
``ServiceCatalogClient``. Remote errors reach the caller exactly as the
catalog client raised them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from kf_cli.integrations.kubernetes.catalog import ProvisionOptions
from kf_cli.integrations.kubernetes.models import ServiceInstanceSummary
from kf_cli.services.base import ResourceOperation
from kf_cli.services.instances.options import (
    CreateServiceConfig,
    DeleteServiceConfig,
    ListServicesConfig,
    create_service_option_defaults,
    delete_service_option_defaults,
    list_services_option_defaults,
)

if TYPE_CHECKING:
    from kf_cli.core.options import Option
    from kf_cli.integrations.kubernetes.catalog import ServiceCatalogClient

CatalogClientFactory = Callable[[str], "ServiceCatalogClient"]


class ServiceInstancesManager(ResourceOperation[CatalogClientFactory]):
    """Manager for managed-service instances.

    The catalog client factory is called with the resolved namespace once
    per operation.
    """

    _entity_name = "service_instance"

    def create_service(
        self,
        service_class: str,
        plan: str,
        instance_name: str,
        *options: Option[CreateServiceConfig],
    ) -> ServiceInstanceSummary:
        """Provision a new service instance.

        Args:
            service_class: Service class external name (e.g. "db-service").
            plan: Plan external name within the class (e.g. "free").
            instance_name: Name of the instance to create.
            *options: Overrides applied after the create defaults.

        Returns:
            Summary of the provisioned instance.

        Raises:
            KfValidationError: If any identifier is empty.
        """
        self._require(service_class, "service class")
        self._require(plan, "plan")
        self._require(instance_name, "instance name")

        cfg = create_service_option_defaults(self.default_namespace).extend(options).to_config()
        namespace = self._resolve_namespace(cfg.namespace)

        client = self._client_factory(namespace)

        self._log.info(
            "provisioning_service",
            name=instance_name,
            service_class=service_class,
            plan=plan,
            namespace=namespace,
        )
        result = client.provision(
            instance_name,
            service_class,
            plan,
            ProvisionOptions(namespace=namespace, params=cfg.params, timeout=cfg.timeout),
        )
        self._log.info("provisioned_service", name=instance_name, namespace=namespace)
        return ServiceInstanceSummary.from_k8s_object(result)

    def delete_service(self, instance_name: str, *options: Option[DeleteServiceConfig]) -> None:
        """Deprovision a service instance.

        Args:
            instance_name: Name of the instance to delete.
            *options: Overrides applied after the delete defaults.
        """
        self._require(instance_name, "instance name")

        cfg = delete_service_option_defaults(self.default_namespace).extend(options).to_config()
        namespace = self._resolve_namespace(cfg.namespace)

        client = self._client_factory(namespace)

        self._log.info("deprovisioning_service", name=instance_name, namespace=namespace)
        client.deprovision(instance_name, namespace, timeout=cfg.timeout)
        self._log.info("deprovisioned_service", name=instance_name, namespace=namespace)

    def list_services(self, *options: Option[ListServicesConfig]) -> list[ServiceInstanceSummary]:
        """List service instances.

        Args:
            *options: Overrides applied after the list defaults.

        Returns:
            Summaries of the instances in the resolved namespace.
        """
        cfg = list_services_option_defaults(self.default_namespace).extend(options).to_config()
        namespace = self._resolve_namespace(cfg.namespace)

        client = self._client_factory(namespace)

        self._log.debug("listing_services", namespace=namespace)
        items = client.list_instances(
            namespace,
            label_selector=cfg.label_selector or None,
            timeout=cfg.timeout,
        )
        instances = [ServiceInstanceSummary.from_k8s_object(item) for item in items]
        self._log.debug("listed_services", count=len(instances), namespace=namespace)
        return instances
