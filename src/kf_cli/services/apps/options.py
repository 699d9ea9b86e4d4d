"""Options for app operations."""

from __future__ import annotations

from pydantic import BaseModel, Field

from kf_cli.core.config import DEFAULT_NAMESPACE
from kf_cli.core.options import FieldOption, Options


class DeleteConfig(BaseModel):
    namespace: str = Field(default="", description="Kubernetes namespace to use")
    timeout: float | None = Field(default=None, description="Request timeout in seconds")


class DeleteOptions(Options[DeleteConfig]):
    """Configuration set for ``Deleter.delete``."""

    config_class = DeleteConfig

    @property
    def namespace(self) -> str:
        """The last set namespace, or the empty value if not set."""
        return self.to_config().namespace

    @property
    def timeout(self) -> float | None:
        """The last set timeout, or None if not set."""
        return self.to_config().timeout


def with_delete_namespace(val: str) -> FieldOption[DeleteConfig]:
    """Set the Kubernetes namespace to use."""
    return FieldOption("namespace", val)


def with_delete_timeout(val: float) -> FieldOption[DeleteConfig]:
    """Set the request timeout in seconds."""
    return FieldOption("timeout", val)


def delete_option_defaults(namespace: str = DEFAULT_NAMESPACE) -> DeleteOptions:
    """Default values for Delete."""
    return DeleteOptions(with_delete_namespace(namespace))


class ListConfig(BaseModel):
    namespace: str = Field(default="", description="Kubernetes namespace to use")
    label_selector: str = Field(default="", description="Only list apps matching this selector")
    app_name: str = Field(default="", description="Only list the app with this name")
    timeout: float | None = Field(default=None, description="Request timeout in seconds")


class ListOptions(Options[ListConfig]):
    """Configuration set for ``AppLister.list``."""

    config_class = ListConfig

    @property
    def namespace(self) -> str:
        return self.to_config().namespace

    @property
    def label_selector(self) -> str:
        return self.to_config().label_selector

    @property
    def app_name(self) -> str:
        return self.to_config().app_name

    @property
    def timeout(self) -> float | None:
        return self.to_config().timeout


def with_list_namespace(val: str) -> FieldOption[ListConfig]:
    """Set the Kubernetes namespace to use."""
    return FieldOption("namespace", val)


def with_list_label_selector(val: str) -> FieldOption[ListConfig]:
    """Filter results to apps whose labels match the selector."""
    return FieldOption("label_selector", val)


def with_list_app_name(val: str) -> FieldOption[ListConfig]:
    """Filter results to the app with this name."""
    return FieldOption("app_name", val)


def with_list_timeout(val: float) -> FieldOption[ListConfig]:
    """Set the request timeout in seconds."""
    return FieldOption("timeout", val)


def list_option_defaults(namespace: str = DEFAULT_NAMESPACE) -> ListOptions:
    """Default values for List."""
    return ListOptions(with_list_namespace(namespace))
