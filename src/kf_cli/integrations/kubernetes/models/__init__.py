"""Display models for Kubernetes resources."""

from kf_cli.integrations.kubernetes.models.apps import AppSummary
from kf_cli.integrations.kubernetes.models.base import K8sEntityBase
from kf_cli.integrations.kubernetes.models.secrets import SecretSummary
from kf_cli.integrations.kubernetes.models.services import ServiceInstanceSummary

__all__ = [
    "AppSummary",
    "K8sEntityBase",
    "SecretSummary",
    "ServiceInstanceSummary",
]
