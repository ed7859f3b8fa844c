"""
Pytest configuration and fixtures for Helm repo tests.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from helmrepo.hub_spec import HubSpec, CacheSpec, MongoSpec


@pytest.fixture
def empty_cache():
    """Cache with no ingress domain and no digests."""
    return CacheSpec(ingress_domain="", image_sha_digests={})


@pytest.fixture
def hub():
    """A fully populated hub."""
    return HubSpec(
        name="multiclusterhub",
        namespace="test",
        uid="1234-abcd",
        version="1.0.0",
        image_repository="quay.io/open-cluster-management",
        image_pull_policy="Always",
        image_pull_secret="test",
        mongo=MongoSpec(),
        replica_count=1,
        node_selector={"test": "test"},
    )


@pytest.fixture
def cache():
    """Cache as computed for a cluster with an ingress domain."""
    return CacheSpec(ingress_domain="testIngress", image_sha_digests={})
