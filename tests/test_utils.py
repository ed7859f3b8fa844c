"""
Tests for manifest comparison helpers.
"""

import logging
from unittest.mock import patch

from kubernetes import client

from helmrepo.config import DEFAULT_REPLICAS, LOG_FORMAT, LOG_DATE_FORMAT
from helmrepo.utils import (
    configure_logging,
    effective_replicas,
    pull_secrets_match,
    selectors_match,
    distribute_pods,
)


def _secrets(*names):
    return [client.V1LocalObjectReference(name=name) for name in names]


class TestComparisons:
    """Tests for the field comparison helpers."""

    def test_effective_replicas(self):
        assert effective_replicas(None) == DEFAULT_REPLICAS
        assert effective_replicas(0) == 0
        assert effective_replicas(3) == 3

    def test_pull_secrets_match(self):
        assert pull_secrets_match(None, [])
        assert pull_secrets_match(_secrets("a"), _secrets("a"))
        assert not pull_secrets_match(None, _secrets("a"))
        assert not pull_secrets_match(_secrets("a", "b"), _secrets("a"))

    def test_selectors_match(self):
        assert selectors_match(None, {})
        assert selectors_match({"a": "1", "b": "2"}, {"b": "2", "a": "1"})
        assert not selectors_match({"a": "1"}, {"a": "2"})
        assert not selectors_match({"a": "1"}, None)


class TestAffinity:
    def test_distribute_pods(self):
        affinity = distribute_pods("app", "multiclusterhub-repo")
        terms = affinity.pod_anti_affinity.preferred_during_scheduling_ignored_during_execution

        assert {t.pod_affinity_term.topology_key for t in terms} == {
            "kubernetes.io/hostname",
            "topology.kubernetes.io/zone",
        }


class TestConfigureLogging:
    def test_verbose_sets_debug(self):
        with patch("helmrepo.utils.logging.basicConfig") as basic_config:
            configure_logging(verbose=True)
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_default_info(self):
        with patch("helmrepo.utils.logging.basicConfig") as basic_config:
            configure_logging()
        assert basic_config.call_args.kwargs["level"] == logging.INFO

    def test_format(self):
        with patch("helmrepo.utils.logging.basicConfig") as basic_config:
            configure_logging()
        assert basic_config.call_args.kwargs["format"] == LOG_FORMAT
        assert basic_config.call_args.kwargs["datefmt"] == LOG_DATE_FORMAT
        assert LOG_FORMAT == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        assert LOG_DATE_FORMAT == "%Y-%m-%d %H:%M:%S"
