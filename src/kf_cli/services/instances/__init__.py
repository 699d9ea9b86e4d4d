"""Managed-service instance operations."""

from kf_cli.services.instances.manager import ServiceInstancesManager
from kf_cli.services.instances.options import (
    CreateServiceOptions,
    DeleteServiceOptions,
    ListServicesOptions,
    create_service_option_defaults,
    delete_service_option_defaults,
    list_services_option_defaults,
    with_create_service_namespace,
    with_create_service_params,
    with_create_service_timeout,
    with_delete_service_namespace,
    with_delete_service_timeout,
    with_list_services_label_selector,
    with_list_services_namespace,
    with_list_services_timeout,
)

__all__ = [
    "CreateServiceOptions",
    "DeleteServiceOptions",
    "ListServicesOptions",
    "ServiceInstancesManager",
    "create_service_option_defaults",
    "delete_service_option_defaults",
    "list_services_option_defaults",
    "with_create_service_namespace",
    "with_create_service_params",
    "with_create_service_timeout",
    "with_delete_service_namespace",
    "with_delete_service_timeout",
    "with_list_services_label_selector",
    "with_list_services_namespace",
    "with_list_services_timeout",
]
