"""Desired state and drift detection for the hub's Helm repo."""

from .hub_spec import HubSpec, CacheSpec, MongoSpec, load_cache_spec
from .manifests import deployment, service, image, replica_count
from .reconciler import validate_deployment
from .utils import configure_logging

__all__ = [
    "HubSpec",
    "CacheSpec",
    "MongoSpec",
    "load_cache_spec",
    "deployment",
    "service",
    "image",
    "replica_count",
    "validate_deployment",
    "configure_logging",
]
