"""Secret display models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from kf_cli.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _get_timestamp,
    _safe_get,
)


class SecretSummary(K8sEntityBase):
    """Secret display model.

    SECURITY: Never includes actual secret data values. Only key names are exposed.
    """

    _entity_name: ClassVar[str] = "secret"

    type: str = Field(default="Opaque", description="Secret type")
    data_keys: list[str] = Field(default_factory=list, description="Data key names (values hidden)")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> SecretSummary:
        """Create from a kubernetes V1Secret object."""
        data = getattr(obj, "data", None) or {}
        labels = _safe_get(obj, "metadata", "labels")

        return cls(
            name=_safe_get(obj, "metadata", "name", default=""),
            namespace=_safe_get(obj, "metadata", "namespace"),
            uid=_safe_get(obj, "metadata", "uid"),
            creation_timestamp=_get_timestamp(_safe_get(obj, "metadata", "creation_timestamp")),
            labels=dict(labels) if labels else None,
            type=getattr(obj, "type", None) or "Opaque",
            data_keys=sorted(data.keys()),
        )
