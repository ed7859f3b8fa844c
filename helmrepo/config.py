"""Configuration settings for the Helm repo component."""

# CRD Settings
CRD_GROUP = "operators.open-cluster-management.io"
CRD_VERSION = "v1beta1"
CRD_KIND = "MultiClusterHub"

# Component identity
HELM_REPO_NAME = "multiclusterhub-repo"
IMAGE_NAME = "multiclusterhub-repo"
APP_LABEL = "app"
SERVICE_ACCOUNT_NAME = "multiclusterhub-operator"
PORT = 3000

# Replicas used when the hub does not set a replica count
DEFAULT_REPLICAS = 1

# Probe settings
LIVENESS_PATH = "/liveness"
READINESS_PATH = "/readiness"
PROBE_INITIAL_DELAY_SECONDS = 15
PROBE_PERIOD_SECONDS = 15

# Container resources
DEFAULT_CPU_REQUEST = "50m"
DEFAULT_MEMORY_REQUEST = "64Mi"
DEFAULT_CPU_LIMIT = "100m"
DEFAULT_MEMORY_LIMIT = "256Mi"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
