"""Capability interfaces the core depends on.

Concrete implementations live in stevedore.clients and stevedore.services;
tests substitute in-memory fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from stevedore.models import (
    ClusterContext,
    OutcomeStatus,
    OverridePolicy,
    RawConfig,
    Secret,
    ServiceAccount,
)


@runtime_checkable
class ConfigStore(Protocol):
    """Parsed multi-context kubeconfig."""

    base_path: Path | None

    def context_names(self) -> list[str]: ...

    def get_context(self, name: str) -> ClusterContext | None: ...

    def raw_config(self, override: OverridePolicy) -> RawConfig:
        """Return the raw view; raises RawConfigUnavailable."""
        ...

    def as_dict(self) -> dict[str, Any]: ...


@runtime_checkable
class ClusterClient(Protocol):
    """Read access to one cluster's service accounts and secrets.

    Both methods return None when the object does not exist and raise on
    any other failure.
    """

    def get_service_account(self, namespace: str, name: str) -> ServiceAccount | None: ...

    def get_secret(self, namespace: str, name: str) -> Secret | None: ...


@runtime_checkable
class RegistrationGateway(Protocol):
    """Remote service that clusters are registered with."""

    def register(
        self,
        host: str,
        display_name: str,
        token: bytes,
        ca: bytes,
        behind_firewall: bool,
    ) -> str:
        """Register a cluster; raises RegistrationFailed."""
        ...


@runtime_checkable
class Reporter(Protocol):
    """Append-only sink of per-context outcomes."""

    def record(self, context_name: str, status: OutcomeStatus, message: str) -> None: ...
