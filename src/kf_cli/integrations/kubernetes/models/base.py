"""Base models for Kubernetes resource display."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class K8sEntityBase(BaseModel):
    """Base class for all Kubernetes display models."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(description="Resource name")
    namespace: str | None = Field(default=None, description="Resource namespace")
    uid: str | None = Field(default=None, description="Kubernetes UID")
    creation_timestamp: str | None = Field(default=None, description="Creation time")
    labels: dict[str, str] | None = Field(default=None, description="Resource labels")

    _entity_name: ClassVar[str] = "entity"

    @property
    def age(self) -> str:
        """Human-readable age string."""
        if not self.creation_timestamp:
            return "Unknown"
        try:
            created = datetime.fromisoformat(self.creation_timestamp.replace("Z", "+00:00"))
        except (ValueError, TypeError):
            return "Unknown"
        delta = datetime.now(UTC) - created
        hours, remainder = divmod(delta.seconds, 3600)
        if delta.days > 0:
            return f"{delta.days}d"
        if hours > 0:
            return f"{hours}h"
        return f"{remainder // 60}m"


def _safe_get(obj: Any, *attrs: str, default: Any = None) -> Any:
    """Safely traverse nested attributes on kubernetes SDK objects."""
    current = obj
    for attr in attrs:
        if current is None:
            return default
        current = getattr(current, attr, None)
    return current if current is not None else default


def _dict_get(obj: dict[str, Any] | None, *keys: str, default: Any = None) -> Any:
    """Safely traverse nested keys on raw custom-object dicts."""
    current: Any = obj
    for key in keys:
        if not isinstance(current, dict):
            return default
        current = current.get(key)
    return current if current is not None else default


def _get_timestamp(obj: Any) -> str | None:
    """Extract ISO timestamp string from a datetime or string."""
    if obj is None:
        return None
    if isinstance(obj, datetime):
        return obj.isoformat()
    return str(obj)


def _ready_condition(conditions: list[dict[str, Any]] | None) -> dict[str, Any]:
    """Return the ``Ready`` condition from a status conditions list, or {}."""
    for condition in conditions or []:
        if condition.get("type") == "Ready":
            return condition
    return {}
