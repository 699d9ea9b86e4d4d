"""App operations."""

from kf_cli.services.apps.deleter import Deleter
from kf_cli.services.apps.lister import AppLister
from kf_cli.services.apps.options import (
    DeleteOptions,
    ListOptions,
    delete_option_defaults,
    list_option_defaults,
    with_delete_namespace,
    with_delete_timeout,
    with_list_app_name,
    with_list_label_selector,
    with_list_namespace,
    with_list_timeout,
)

__all__ = [
    "AppLister",
    "DeleteOptions",
    "Deleter",
    "ListOptions",
    "delete_option_defaults",
    "list_option_defaults",
    "with_delete_namespace",
    "with_delete_timeout",
    "with_list_app_name",
    "with_list_label_selector",
    "with_list_namespace",
    "with_list_timeout",
]
