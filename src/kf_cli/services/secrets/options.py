"""Options for secret operations."""

from __future__ import annotations

from pydantic import BaseModel, Field

from kf_cli.core.config import DEFAULT_NAMESPACE
from kf_cli.core.options import FieldOption, Options

# =============================================================================
# List
# =============================================================================


class ListConfig(BaseModel):
    label_selector: str = Field(
        default="", description="Filters results to only labels matching the filter"
    )
    namespace: str = Field(default="", description="Kubernetes namespace to use")
    timeout: float | None = Field(default=None, description="Request timeout in seconds")


class ListOptions(Options[ListConfig]):
    """Configuration set for ``SecretsManager.list_secrets``."""

    config_class = ListConfig

    @property
    def label_selector(self) -> str:
        """The last set label selector, or the empty value if not set."""
        return self.to_config().label_selector

    @property
    def namespace(self) -> str:
        """The last set namespace, or the empty value if not set."""
        return self.to_config().namespace

    @property
    def timeout(self) -> float | None:
        return self.to_config().timeout


def with_list_label_selector(val: str) -> FieldOption[ListConfig]:
    """Filter results to only labels matching the filter."""
    return FieldOption("label_selector", val)


def with_list_namespace(val: str) -> FieldOption[ListConfig]:
    """Set the Kubernetes namespace to use."""
    return FieldOption("namespace", val)


def with_list_timeout(val: float) -> FieldOption[ListConfig]:
    return FieldOption("timeout", val)


def list_option_defaults(namespace: str = DEFAULT_NAMESPACE) -> ListOptions:
    """Default values for List."""
    return ListOptions(with_list_namespace(namespace))


# =============================================================================
# Get / Delete
# =============================================================================


class GetConfig(BaseModel):
    namespace: str = Field(default="", description="Kubernetes namespace to use")
    timeout: float | None = Field(default=None, description="Request timeout in seconds")


class GetOptions(Options[GetConfig]):
    """Configuration set for ``SecretsManager.get_secret``."""

    config_class = GetConfig

    @property
    def namespace(self) -> str:
        return self.to_config().namespace


def with_get_namespace(val: str) -> FieldOption[GetConfig]:
    return FieldOption("namespace", val)


def with_get_timeout(val: float) -> FieldOption[GetConfig]:
    return FieldOption("timeout", val)


def get_option_defaults(namespace: str = DEFAULT_NAMESPACE) -> GetOptions:
    """Default values for Get."""
    return GetOptions(with_get_namespace(namespace))


class DeleteConfig(BaseModel):
    namespace: str = Field(default="", description="Kubernetes namespace to use")
    timeout: float | None = Field(default=None, description="Request timeout in seconds")


class DeleteOptions(Options[DeleteConfig]):
    """Configuration set for ``SecretsManager.delete_secret``."""

    config_class = DeleteConfig

    @property
    def namespace(self) -> str:
        return self.to_config().namespace


def with_delete_namespace(val: str) -> FieldOption[DeleteConfig]:
    return FieldOption("namespace", val)


def with_delete_timeout(val: float) -> FieldOption[DeleteConfig]:
    return FieldOption("timeout", val)


def delete_option_defaults(namespace: str = DEFAULT_NAMESPACE) -> DeleteOptions:
    """Default values for Delete."""
    return DeleteOptions(with_delete_namespace(namespace))


# =============================================================================
# Create
# =============================================================================


class CreateConfig(BaseModel):
    namespace: str = Field(default="", description="Kubernetes namespace to use")
    string_data: dict[str, str] = Field(
        default_factory=dict, description="Plain-text data, encoded by the API server"
    )
    data: dict[str, bytes] = Field(
        default_factory=dict, description="Binary data, base64 encoded on write"
    )
    labels: dict[str, str] = Field(default_factory=dict, description="Labels on the secret")
    timeout: float | None = Field(default=None, description="Request timeout in seconds")


class CreateOptions(Options[CreateConfig]):
    """Configuration set for ``SecretsManager.create_secret``."""

    config_class = CreateConfig

    @property
    def namespace(self) -> str:
        return self.to_config().namespace

    @property
    def string_data(self) -> dict[str, str]:
        return self.to_config().string_data

    @property
    def data(self) -> dict[str, bytes]:
        return self.to_config().data

    @property
    def labels(self) -> dict[str, str]:
        return self.to_config().labels


def with_create_namespace(val: str) -> FieldOption[CreateConfig]:
    return FieldOption("namespace", val)


def with_create_string_data(val: dict[str, str]) -> FieldOption[CreateConfig]:
    return FieldOption("string_data", val)


def with_create_data(val: dict[str, bytes]) -> FieldOption[CreateConfig]:
    return FieldOption("data", val)


def with_create_labels(val: dict[str, str]) -> FieldOption[CreateConfig]:
    return FieldOption("labels", val)


def with_create_timeout(val: float) -> FieldOption[CreateConfig]:
    return FieldOption("timeout", val)


def create_option_defaults(namespace: str = DEFAULT_NAMESPACE) -> CreateOptions:
    """Default values for Create."""
    return CreateOptions(with_create_namespace(namespace))
