"""Drift detection for the Helm repo deployment."""

import copy
import logging
from typing import Tuple

from kubernetes import client

from .hub_spec import HubSpec, CacheSpec
from .manifests import deployment
from .utils import effective_replicas, pull_secrets_match, selectors_match

logger = logging.getLogger(__name__)


def validate_deployment(
    hub: HubSpec,
    cache: CacheSpec,
    dep: client.V1Deployment
) -> Tuple[client.V1Deployment, bool]:
    """
    Check a live deployment against the one the hub asks for.

    Only pull secrets, image, pull policy, node selector and replica count
    are compared. Everything else on the live object is left as found.

    Args:
        hub: The hub specification
        cache: Image digests and ingress domain
        dep: The deployment observed in the cluster

    Returns:
        Tuple of the corrected deployment and whether anything changed.
        When nothing changed the observed deployment itself is returned.
    """
    desired = deployment(hub, cache)
    desired_pod = desired.spec.template.spec
    desired_container = desired_pod.containers[0]

    found = copy.deepcopy(dep)
    pod = found.spec.template.spec
    container = pod.containers[0]
    name = f"{desired.metadata.namespace}/{desired.metadata.name}"
    needs_update = False

    # verify image pull secret
    if not pull_secrets_match(pod.image_pull_secrets, desired_pod.image_pull_secrets):
        logger.info(f"Enforcing imagePullSecret from CR spec on {name}")
        pod.image_pull_secrets = desired_pod.image_pull_secrets
        needs_update = True

    # verify image repository and suffix
    if container.image != desired_container.image:
        logger.info(f"Enforcing image repo and suffix from CR spec on {name}")
        container.image = desired_container.image
        needs_update = True

    # verify image pull policy
    if container.image_pull_policy != desired_container.image_pull_policy:
        logger.info(f"Enforcing imagePullPolicy from CR spec on {name}")
        container.image_pull_policy = desired_container.image_pull_policy
        needs_update = True

    # verify node selectors
    if not selectors_match(pod.node_selector, desired_pod.node_selector):
        logger.info(f"Enforcing node selectors from CR spec on {name}")
        pod.node_selector = desired_pod.node_selector
        needs_update = True

    # verify replica count
    if effective_replicas(found.spec.replicas) != desired.spec.replicas:
        logger.info(f"Enforcing replicaCount from CR spec on {name}")
        found.spec.replicas = desired.spec.replicas
        needs_update = True

    if not needs_update:
        logger.debug(f"Deployment {name} matches CR spec")
        return dep, False

    return found, True
