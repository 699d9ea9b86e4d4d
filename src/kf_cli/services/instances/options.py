"""Options for managed-service instance operations."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from kf_cli.core.config import DEFAULT_NAMESPACE
from kf_cli.core.options import FieldOption, Options


class CreateServiceConfig(BaseModel):
    namespace: str = Field(default="", description="Kubernetes namespace to use")
    params: dict[str, Any] = Field(
        default_factory=dict, description="Parameters passed to the service broker"
    )
    timeout: float | None = Field(default=None, description="Request timeout in seconds")


class CreateServiceOptions(Options[CreateServiceConfig]):
    """Configuration set for ``ServiceInstancesManager.create_service``."""

    config_class = CreateServiceConfig

    @property
    def namespace(self) -> str:
        return self.to_config().namespace

    @property
    def params(self) -> dict[str, Any]:
        return self.to_config().params

    @property
    def timeout(self) -> float | None:
        return self.to_config().timeout


def with_create_service_namespace(val: str) -> FieldOption[CreateServiceConfig]:
    """Set the Kubernetes namespace to use."""
    return FieldOption("namespace", val)


def with_create_service_params(val: dict[str, Any]) -> FieldOption[CreateServiceConfig]:
    """Set the parameters passed to the service broker."""
    return FieldOption("params", val)


def with_create_service_timeout(val: float) -> FieldOption[CreateServiceConfig]:
    """Set the request timeout in seconds."""
    return FieldOption("timeout", val)


def create_service_option_defaults(namespace: str = DEFAULT_NAMESPACE) -> CreateServiceOptions:
    """Default values for CreateService."""
    return CreateServiceOptions(with_create_service_namespace(namespace))


class DeleteServiceConfig(BaseModel):
    namespace: str = Field(default="", description="Kubernetes namespace to use")
    timeout: float | None = Field(default=None, description="Request timeout in seconds")


class DeleteServiceOptions(Options[DeleteServiceConfig]):
    """Configuration set for ``ServiceInstancesManager.delete_service``."""

    config_class = DeleteServiceConfig

    @property
    def namespace(self) -> str:
        return self.to_config().namespace

    @property
    def timeout(self) -> float | None:
        return self.to_config().timeout


def with_delete_service_namespace(val: str) -> FieldOption[DeleteServiceConfig]:
    """Set the Kubernetes namespace to use."""
    return FieldOption("namespace", val)


def with_delete_service_timeout(val: float) -> FieldOption[DeleteServiceConfig]:
    """Set the request timeout in seconds."""
    return FieldOption("timeout", val)


def delete_service_option_defaults(namespace: str = DEFAULT_NAMESPACE) -> DeleteServiceOptions:
    """Default values for DeleteService."""
    return DeleteServiceOptions(with_delete_service_namespace(namespace))


class ListServicesConfig(BaseModel):
    namespace: str = Field(default="", description="Kubernetes namespace to use")
    label_selector: str = Field(
        default="", description="Only list instances matching this selector"
    )
    timeout: float | None = Field(default=None, description="Request timeout in seconds")


class ListServicesOptions(Options[ListServicesConfig]):
    """Configuration set for ``ServiceInstancesManager.list_services``."""

    config_class = ListServicesConfig

    @property
    def namespace(self) -> str:
        return self.to_config().namespace

    @property
    def label_selector(self) -> str:
        return self.to_config().label_selector

    @property
    def timeout(self) -> float | None:
        return self.to_config().timeout


def with_list_services_namespace(val: str) -> FieldOption[ListServicesConfig]:
    """Set the Kubernetes namespace to use."""
    return FieldOption("namespace", val)


def with_list_services_label_selector(val: str) -> FieldOption[ListServicesConfig]:
    """Filter results to instances whose labels match the selector."""
    return FieldOption("label_selector", val)


def with_list_services_timeout(val: float) -> FieldOption[ListServicesConfig]:
    """Set the request timeout in seconds."""
    return FieldOption("timeout", val)


def list_services_option_defaults(namespace: str = DEFAULT_NAMESPACE) -> ListServicesOptions:
    """Default values for ListServices."""
    return ListServicesOptions(with_list_services_namespace(namespace))
