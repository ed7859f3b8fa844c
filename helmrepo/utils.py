"""Utility functions for building and comparing manifests."""

import logging
from typing import Dict, List, Optional

from kubernetes import client

from .config import (
    CRD_GROUP,
    CRD_VERSION,
    CRD_KIND,
    DEFAULT_REPLICAS,
    LOG_FORMAT,
    LOG_DATE_FORMAT,
)
from .hub_spec import HubSpec


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for processes embedding the controller core."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )


def owner_reference(hub: HubSpec) -> client.V1OwnerReference:
    """
    Build a controller reference pointing back at the hub.

    Only the hub's identity is copied; the child's namespace carries the
    hub namespace.
    """
    return client.V1OwnerReference(
        api_version=f"{CRD_GROUP}/{CRD_VERSION}",
        kind=CRD_KIND,
        name=hub.name,
        uid=hub.uid,
        controller=True,
        block_owner_deletion=True
    )


def effective_replicas(replicas: Optional[int]) -> int:
    """Return the replica count the cluster would run for a possibly unset value."""
    return DEFAULT_REPLICAS if replicas is None else replicas


def pull_secrets_match(
    actual: Optional[List[client.V1LocalObjectReference]],
    desired: Optional[List[client.V1LocalObjectReference]]
) -> bool:
    """Compare pull secret lists by name. A missing list deliberately equals an empty one."""
    actual_names = [secret.name for secret in actual or []]
    desired_names = [secret.name for secret in desired or []]
    return actual_names == desired_names


def selectors_match(
    actual: Optional[Dict[str, str]],
    desired: Optional[Dict[str, str]]
) -> bool:
    """Compare node selectors. A missing selector deliberately equals an empty one."""
    return (actual or {}) == (desired or {})


def distribute_pods(key: str, value: str) -> client.V1Affinity:
    """Prefer spreading pods labelled key=value across hosts and zones."""
    selector = client.V1LabelSelector(
        match_expressions=[
            client.V1LabelSelectorRequirement(key=key, operator="In", values=[value])
        ]
    )
    return client.V1Affinity(
        pod_anti_affinity=client.V1PodAntiAffinity(
            preferred_during_scheduling_ignored_during_execution=[
                client.V1WeightedPodAffinityTerm(
                    weight=35,
                    pod_affinity_term=client.V1PodAffinityTerm(
                        topology_key="topology.kubernetes.io/zone",
                        label_selector=selector
                    )
                ),
                client.V1WeightedPodAffinityTerm(
                    weight=70,
                    pod_affinity_term=client.V1PodAffinityTerm(
                        topology_key="kubernetes.io/hostname",
                        label_selector=selector
                    )
                ),
            ]
        )
    )
