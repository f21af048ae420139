"""Cluster credential models.

Covers the service account and secret views read from a target cluster,
the per-context request, and the credentials handed to registration.
"""

from pydantic import Field

from .base import FrozenModel
from .kubeconfig import OverridePolicy, default_override

TOKEN_KEY = "token"
CA_CERT_KEY = "ca.crt"


class SecretReference(FrozenModel):
    """Secret bound to a service account."""

    name: str
    namespace: str | None = None


class ServiceAccount(FrozenModel):
    """Service account as reported by the cluster."""

    name: str
    namespace: str
    secrets: list[SecretReference] = Field(default_factory=list)


class Secret(FrozenModel):
    """Secret with its data already base64-decoded."""

    name: str
    namespace: str
    data: dict[str, bytes] = Field(default_factory=dict)


class ServiceAccountReference(FrozenModel):
    """Where the service account's token secret lives."""

    secret_name: str
    namespace: str


class ResolvedCredentials(FrozenModel):
    """Host, bearer token and CA certificate of one cluster."""

    host: str
    token: bytes = b""
    ca: bytes = b""


class ResolutionRequest(FrozenModel):
    """Everything needed to process one kubeconfig context."""

    context_name: str
    namespace: str = ""
    service_account: str = ""
    behind_firewall: bool = False
    display_name: str = ""
    override: OverridePolicy = Field(default_factory=default_override)

    @property
    def registration_name(self) -> str:
        """Name to register under, falling back to the context name."""
        return self.display_name or self.context_name
