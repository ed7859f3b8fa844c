"""Desired manifests for the Helm repo component."""

from typing import Dict

from kubernetes import client

from .config import (
    HELM_REPO_NAME,
    IMAGE_NAME,
    APP_LABEL,
    SERVICE_ACCOUNT_NAME,
    PORT,
    LIVENESS_PATH,
    READINESS_PATH,
    PROBE_INITIAL_DELAY_SECONDS,
    PROBE_PERIOD_SECONDS,
    DEFAULT_CPU_REQUEST,
    DEFAULT_MEMORY_REQUEST,
    DEFAULT_CPU_LIMIT,
    DEFAULT_MEMORY_LIMIT,
)
from .hub_spec import HubSpec, CacheSpec
from .utils import owner_reference, effective_replicas, distribute_pods


def labels() -> Dict[str, str]:
    """Labels identifying the Helm repo pods."""
    return {APP_LABEL: HELM_REPO_NAME}


def image(hub: HubSpec, cache: CacheSpec) -> str:
    """
    Resolve the Helm repo image reference.

    A digest recorded in the cache for "<repository>/<image name>" takes
    precedence over the version tag.

    Examples:
        digest known -> "quay.io/org/multiclusterhub-repo@sha256:abc"
        no suffix    -> "quay.io/org/multiclusterhub-repo:1.0.0"
        suffix       -> "quay.io/org/multiclusterhub-repo:1.0.0-SNAPSHOT"
    """
    image_name = f"{hub.image_repository}/{IMAGE_NAME}"

    if image_name in cache.image_sha_digests:
        return f"{image_name}@{cache.image_sha_digests[image_name]}"

    tag = hub.version
    if hub.image_tag_suffix:
        tag = f"{tag}-{hub.image_tag_suffix}"
    return f"{image_name}:{tag}"


def replica_count(hub: HubSpec) -> int:
    """Replica count requested by the hub, or the default when unset."""
    return effective_replicas(hub.replica_count)


def pull_secrets(hub: HubSpec):
    """Pull secret references for the hub, or None when no secret is set."""
    if not hub.image_pull_secret:
        return None
    return [client.V1LocalObjectReference(name=hub.image_pull_secret)]


def _probe(path: str) -> client.V1Probe:
    return client.V1Probe(
        http_get=client.V1HTTPGetAction(path=path, port=PORT),
        initial_delay_seconds=PROBE_INITIAL_DELAY_SECONDS,
        period_seconds=PROBE_PERIOD_SECONDS
    )


def deployment(hub: HubSpec, cache: CacheSpec) -> client.V1Deployment:
    """
    Build the Helm repo deployment the hub asks for.

    Never fails on empty hub fields; they produce empty values in the
    manifest.

    Args:
        hub: The hub specification
        cache: Image digests and ingress domain

    Returns:
        New V1Deployment object
    """
    node_selector = dict(hub.node_selector) if hub.node_selector is not None else None

    container = client.V1Container(
        name=HELM_REPO_NAME,
        image=image(hub, cache),
        image_pull_policy=hub.image_pull_policy,
        ports=[client.V1ContainerPort(container_port=PORT, protocol="TCP")],
        env=[
            client.V1EnvVar(
                name="POD_NAMESPACE",
                value_from=client.V1EnvVarSource(
                    field_ref=client.V1ObjectFieldSelector(field_path="metadata.namespace")
                )
            )
        ],
        liveness_probe=_probe(LIVENESS_PATH),
        readiness_probe=_probe(READINESS_PATH),
        resources=client.V1ResourceRequirements(
            requests={"cpu": DEFAULT_CPU_REQUEST, "memory": DEFAULT_MEMORY_REQUEST},
            limits={"cpu": DEFAULT_CPU_LIMIT, "memory": DEFAULT_MEMORY_LIMIT}
        )
    )

    return client.V1Deployment(
        api_version="apps/v1",
        kind="Deployment",
        metadata=client.V1ObjectMeta(
            name=HELM_REPO_NAME,
            namespace=hub.namespace,
            labels=labels(),
            owner_references=[owner_reference(hub)]
        ),
        spec=client.V1DeploymentSpec(
            replicas=replica_count(hub),
            selector=client.V1LabelSelector(match_labels=labels()),
            template=client.V1PodTemplateSpec(
                metadata=client.V1ObjectMeta(labels=labels()),
                spec=client.V1PodSpec(
                    service_account_name=SERVICE_ACCOUNT_NAME,
                    image_pull_secrets=pull_secrets(hub),
                    node_selector=node_selector,
                    affinity=distribute_pods(APP_LABEL, HELM_REPO_NAME),
                    containers=[container]
                )
            )
        )
    )


def service(hub: HubSpec) -> client.V1Service:
    """Build the service exposing the Helm repo inside the hub namespace."""
    return client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=client.V1ObjectMeta(
            name=HELM_REPO_NAME,
            namespace=hub.namespace,
            labels=labels(),
            owner_references=[owner_reference(hub)]
        ),
        spec=client.V1ServiceSpec(
            selector=labels(),
            ports=[
                client.V1ServicePort(
                    port=PORT,
                    target_port=PORT,
                    protocol="TCP"
                )
            ]
        )
    )
