"""Kubernetes cluster client.

Wraps CoreV1Api and converts API objects into stevedore models. Secret
data is base64-decoded here so the extractor only deals with bytes.
"""

from __future__ import annotations

import base64
import binascii

from kubernetes import client
from kubernetes.client.rest import ApiException
from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from stevedore.models import Secret, SecretReference, ServiceAccount
from stevedore.observability import get_logger

logger = get_logger(__name__)


class KubernetesClusterClient:
    """ClusterClient backed by the official kubernetes client."""

    def __init__(self, core_api: client.CoreV1Api):
        self.core = core_api

    @classmethod
    def from_configuration(cls, configuration: client.Configuration) -> KubernetesClusterClient:
        """Create a client bound to its own ApiClient.

        Raises:
            ValueError: the configured host is not an absolute URL
        """
        validate_host(configuration.host)
        api_client = client.ApiClient(configuration=configuration)
        return cls(client.CoreV1Api(api_client=api_client))

    def get_service_account(self, namespace: str, name: str) -> ServiceAccount | None:
        try:
            sa = self.core.read_namespaced_service_account(name=name, namespace=namespace)
        except ApiException as e:
            if e.status == 404:
                return None
            raise

        if sa is None:
            return None

        refs = [
            SecretReference(name=ref.name, namespace=ref.namespace)
            for ref in (sa.secrets or [])
            if ref.name
        ]
        return ServiceAccount(
            name=sa.metadata.name,
            namespace=sa.metadata.namespace or namespace,
            secrets=refs,
        )

    def get_secret(self, namespace: str, name: str) -> Secret | None:
        try:
            secret = self.core.read_namespaced_secret(name=name, namespace=namespace)
        except ApiException as e:
            if e.status == 404:
                return None
            raise

        if secret is None:
            return None

        return Secret(
            name=secret.metadata.name,
            namespace=secret.metadata.namespace or namespace,
            data=decode_secret_data(secret.data),
        )


def decode_secret_data(data: dict[str, str] | None) -> dict[str, bytes]:
    """Decode the base64 values of a secret's data map."""
    decoded: dict[str, bytes] = {}
    for key, value in (data or {}).items():
        if value is None:
            continue
        try:
            decoded[key] = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("Skipping undecodable secret key", key=key)
    return decoded


def validate_host(host: str | None) -> None:
    """Reject an API server address that has no scheme or host."""
    try:
        url = parse_url(host or "")
    except LocationParseError as e:
        raise ValueError(f"Invalid cluster host {host!r}: {e}") from e
    if not url.scheme or not url.host:
        raise ValueError(f"Invalid cluster host {host!r}: scheme and host are required")
