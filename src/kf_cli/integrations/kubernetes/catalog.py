"""Service catalog client.

Provisions and deprovisions ``ServiceInstance`` resources from the
Kubernetes service catalog. Instances name their class and plan by
external name; the catalog controller resolves them.
"""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import BaseModel, Field

from kf_cli.integrations.kubernetes.resources import SERVICE_INSTANCE, ResourceClient


class ProvisionOptions(BaseModel):
    """Arguments for a single provision call."""

    namespace: str
    params: dict[str, Any] = Field(default_factory=dict)
    timeout: float | None = None


class ServiceCatalogClient(Protocol):
    """Capability set used by the managed-service operations."""

    def provision(
        self,
        instance_name: str,
        class_name: str,
        plan_name: str,
        options: ProvisionOptions,
    ) -> dict[str, Any]: ...

    def deprovision(
        self, instance_name: str, namespace: str, *, timeout: float | None = None
    ) -> None: ...

    def list_instances(
        self,
        namespace: str,
        *,
        label_selector: str | None = None,
        timeout: float | None = None,
    ) -> list[dict[str, Any]]: ...


def build_service_instance(
    instance_name: str,
    class_name: str,
    plan_name: str,
    options: ProvisionOptions,
) -> dict[str, Any]:
    """Build the ServiceInstance manifest for a provision request."""
    spec: dict[str, Any] = {
        "clusterServiceClassExternalName": class_name,
        "clusterServicePlanExternalName": plan_name,
    }
    if options.params:
        spec["parameters"] = options.params

    return {
        "apiVersion": SERVICE_INSTANCE.api_version,
        "kind": SERVICE_INSTANCE.kind,
        "metadata": {"name": instance_name, "namespace": options.namespace},
        "spec": spec,
    }


class KubernetesServiceCatalogClient:
    """``ServiceCatalogClient`` backed by a ``ResourceClient`` for instances."""

    def __init__(self, instances: ResourceClient) -> None:
        self._instances = instances

    def provision(
        self,
        instance_name: str,
        class_name: str,
        plan_name: str,
        options: ProvisionOptions,
    ) -> dict[str, Any]:
        body = build_service_instance(instance_name, class_name, plan_name, options)
        result: dict[str, Any] = self._instances.create(
            options.namespace, body, timeout=options.timeout
        )
        return result

    def deprovision(
        self, instance_name: str, namespace: str, *, timeout: float | None = None
    ) -> None:
        self._instances.delete(namespace, instance_name, timeout=timeout)

    def list_instances(
        self,
        namespace: str,
        *,
        label_selector: str | None = None,
        timeout: float | None = None,
    ) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = self._instances.list(
            namespace, label_selector=label_selector, timeout=timeout
        )
        return items
