"""App display models.

Apps are Knative serving ``Service`` resources, read through
``CustomObjectsApi`` as raw dicts.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from kf_cli.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _dict_get,
    _get_timestamp,
    _ready_condition,
)


class AppSummary(K8sEntityBase):
    """App display model."""

    _entity_name: ClassVar[str] = "app"

    url: str | None = Field(default=None, description="Public URL once routed")
    image: str | None = Field(default=None, description="Container image of the latest template")
    ready: bool = Field(default=False, description="Whether the Ready condition is True")
    reason: str | None = Field(default=None, description="Reason when not ready")
    latest_ready_revision: str | None = Field(default=None, description="Latest ready revision")

    @classmethod
    def from_k8s_object(cls, obj: dict[str, Any]) -> AppSummary:
        """Create from a Knative Service dict."""
        containers = _dict_get(obj, "spec", "template", "spec", "containers", default=[])
        ready = _ready_condition(_dict_get(obj, "status", "conditions"))

        return cls(
            name=_dict_get(obj, "metadata", "name", default=""),
            namespace=_dict_get(obj, "metadata", "namespace"),
            uid=_dict_get(obj, "metadata", "uid"),
            creation_timestamp=_get_timestamp(_dict_get(obj, "metadata", "creationTimestamp")),
            labels=_dict_get(obj, "metadata", "labels") or None,
            url=_dict_get(obj, "status", "url"),
            image=containers[0].get("image") if containers else None,
            ready=ready.get("status") == "True",
            reason=ready.get("reason"),
            latest_ready_revision=_dict_get(obj, "status", "latestReadyRevisionName"),
        )
