"""Service account credential extraction.

Reads the token and CA certificate bound to a service account:

1. Build a cluster client from the resolved configuration
2. Read the service account
3. Follow its first secret reference
4. Read token and ca.crt from the secret

The pipeline stops at the first failure and never retries.
"""

from __future__ import annotations

from typing import Callable

import structlog
from kubernetes import client

from stevedore.clients import KubernetesClusterClient
from stevedore.exceptions import (
    ClientCreationFailed,
    NoSecretBound,
    SecretFetchFailed,
    ServiceAccountNotFound,
)
from stevedore.interfaces import ClusterClient
from stevedore.models import (
    CA_CERT_KEY,
    TOKEN_KEY,
    ResolvedCredentials,
    ServiceAccount,
    ServiceAccountReference,
)
from stevedore.observability import get_logger

ClientFactory = Callable[[client.Configuration], ClusterClient]


class CredentialExtractor:
    """Extracts (host, token, CA) from a cluster's service account."""

    def __init__(
        self,
        client_factory: ClientFactory | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self.client_factory = client_factory or KubernetesClusterClient.from_configuration
        self.logger = logger or get_logger(__name__)

    def extract(
        self,
        client_config: client.Configuration,
        namespace: str,
        service_account: str,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> ResolvedCredentials:
        """Extract credentials for one service account.

        Raises:
            ClientCreationFailed: the configuration is unusable
            ServiceAccountNotFound: the service account is missing or unreadable
            NoSecretBound: the service account has no secret reference
            SecretFetchFailed: the referenced secret is missing or unreadable
        """
        log = logger or self.logger

        log.info("Creating rest client")
        try:
            cluster = self.client_factory(client_config)
        except Exception as e:
            log.warning("Failed to create kubernetes client", error=str(e))
            raise ClientCreationFailed(e) from e

        host = client_config.host

        log.info("Fetching service account from cluster")
        sa = self._read_service_account(cluster, namespace, service_account, log)
        ref = self._secret_reference(sa, namespace)
        log.info(
            "Found service account associated with secret",
            secret_name=ref.secret_name,
            secret_namespace=ref.namespace,
        )

        log.info("Fetching secret from cluster")
        try:
            secret = cluster.get_secret(ref.namespace, ref.secret_name)
        except Exception as e:
            log.warning("Failed to get secret", error=str(e))
            raise SecretFetchFailed(ref.namespace, ref.secret_name, e) from e
        if secret is None:
            log.warning("Secret not found", secret_name=ref.secret_name)
            raise SecretFetchFailed(ref.namespace, ref.secret_name)

        # Missing keys yield empty bytes rather than an error
        token = secret.data.get(TOKEN_KEY, b"")
        ca = secret.data.get(CA_CERT_KEY, b"")
        missing = [k for k in (TOKEN_KEY, CA_CERT_KEY) if k not in secret.data]
        if missing:
            log.warning("Secret is missing keys", missing=missing)
        log.info("Found secret")

        return ResolvedCredentials(host=host, token=token, ca=ca)

    def _read_service_account(
        self,
        cluster: ClusterClient,
        namespace: str,
        name: str,
        log: structlog.stdlib.BoundLogger,
    ) -> ServiceAccount:
        try:
            sa = cluster.get_service_account(namespace, name)
        except Exception as e:
            log.warning("Failed to get service account", error=str(e))
            raise ServiceAccountNotFound(namespace, name, e) from e
        if sa is None:
            log.warning("Service account not found", service_account=name, namespace=namespace)
            raise ServiceAccountNotFound(namespace, name)
        if not sa.secrets:
            log.warning("Service account has no secret configured", service_account=name)
            raise NoSecretBound(name)
        return sa

    def _secret_reference(self, sa: ServiceAccount, namespace: str) -> ServiceAccountReference:
        """Only the first bound secret is used."""
        first = sa.secrets[0]
        return ServiceAccountReference(
            secret_name=first.name,
            namespace=first.namespace or sa.namespace or namespace,
        )
