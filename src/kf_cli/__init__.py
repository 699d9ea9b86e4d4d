"""kf: manage managed-service instances and apps on Kubernetes."""

__version__ = "0.1.0"
