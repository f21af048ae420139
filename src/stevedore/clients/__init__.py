"""Adapters for external services."""

from .cluster import KubernetesClusterClient, decode_secret_data
from .codefresh import CodefreshClient, build_payload

__all__ = [
    "KubernetesClusterClient",
    "decode_secret_data",
    "CodefreshClient",
    "build_payload",
]
