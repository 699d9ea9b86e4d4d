"""Secret operations."""

from kf_cli.services.secrets.manager import SecretsManager
from kf_cli.services.secrets.options import (
    CreateOptions,
    DeleteOptions,
    GetOptions,
    ListOptions,
    create_option_defaults,
    delete_option_defaults,
    get_option_defaults,
    list_option_defaults,
    with_create_data,
    with_create_labels,
    with_create_namespace,
    with_create_string_data,
    with_create_timeout,
    with_delete_namespace,
    with_delete_timeout,
    with_get_namespace,
    with_get_timeout,
    with_list_label_selector,
    with_list_namespace,
    with_list_timeout,
)

__all__ = [
    "CreateOptions",
    "DeleteOptions",
    "GetOptions",
    "ListOptions",
    "SecretsManager",
    "create_option_defaults",
    "delete_option_defaults",
    "get_option_defaults",
    "list_option_defaults",
    "with_create_data",
    "with_create_labels",
    "with_create_namespace",
    "with_create_string_data",
    "with_create_timeout",
    "with_delete_namespace",
    "with_delete_timeout",
    "with_get_namespace",
    "with_get_timeout",
    "with_list_label_selector",
    "with_list_namespace",
    "with_list_timeout",
]
