"""Managed-service instance display models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from kf_cli.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _dict_get,
    _get_timestamp,
    _ready_condition,
)


class ServiceInstanceSummary(K8sEntityBase):
    """Service catalog ``ServiceInstance`` display model."""

    _entity_name: ClassVar[str] = "service_instance"

    class_name: str = Field(default="", description="Service class external name")
    plan_name: str = Field(default="", description="Service plan external name")
    parameters: dict[str, Any] = Field(default_factory=dict, description="Provision parameters")
    status: str = Field(default="Provisioning", description="Ready condition reason")
    ready: bool = Field(default=False, description="Whether the instance is ready")

    @classmethod
    def from_k8s_object(cls, obj: dict[str, Any]) -> ServiceInstanceSummary:
        """Create from a ServiceInstance dict."""
        spec: dict[str, Any] = obj.get("spec") or {}
        ready = _ready_condition(_dict_get(obj, "status", "conditions"))

        return cls(
            name=_dict_get(obj, "metadata", "name", default=""),
            namespace=_dict_get(obj, "metadata", "namespace"),
            uid=_dict_get(obj, "metadata", "uid"),
            creation_timestamp=_get_timestamp(_dict_get(obj, "metadata", "creationTimestamp")),
            labels=_dict_get(obj, "metadata", "labels") or None,
            class_name=spec.get("clusterServiceClassExternalName")
            or spec.get("serviceClassExternalName", ""),
            plan_name=spec.get("clusterServicePlanExternalName")
            or spec.get("servicePlanExternalName", ""),
            parameters=spec.get("parameters") or {},
            status=ready.get("reason") or "Provisioning",
            ready=ready.get("status") == "True",
        )
