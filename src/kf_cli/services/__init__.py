"""Resource operations: apps, managed-service instances and secrets."""

from kf_cli.services.apps import AppLister, Deleter
from kf_cli.services.instances import ServiceInstancesManager
from kf_cli.services.secrets import SecretsManager

__all__ = [
    "AppLister",
    "Deleter",
    "SecretsManager",
    "ServiceInstancesManager",
]
