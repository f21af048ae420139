"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
import yaml

# Set test environment before importing settings
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "text"

from stevedore.exceptions import RegistrationFailed  # noqa: E402
from stevedore.models import Secret, SecretReference, ServiceAccount  # noqa: E402
from stevedore.services import KubeConfigStore, Reporter  # noqa: E402


class FakeClusterClient:
    """In-memory ClusterClient keyed by (namespace, name)."""

    def __init__(
        self,
        service_accounts: dict[tuple[str, str], ServiceAccount] | None = None,
        secrets: dict[tuple[str, str], Secret] | None = None,
    ):
        self.service_accounts = service_accounts or {}
        self.secrets = secrets or {}
        self.calls: list[tuple[str, str, str]] = []

    def get_service_account(self, namespace: str, name: str) -> ServiceAccount | None:
        self.calls.append(("service_account", namespace, name))
        return self.service_accounts.get((namespace, name))

    def get_secret(self, namespace: str, name: str) -> Secret | None:
        self.calls.append(("secret", namespace, name))
        return self.secrets.get((namespace, name))


class FakeGateway:
    """RegistrationGateway that records calls and returns a fixed payload."""

    def __init__(self, result: str = "cluster-id-123", fail_for: set[str] | None = None):
        self.result = result
        self.fail_for = fail_for or set()
        self.calls: list[dict[str, Any]] = []

    def register(self, host, display_name, token, ca, behind_firewall) -> str:
        self.calls.append(
            {
                "host": host,
                "display_name": display_name,
                "token": token,
                "ca": ca,
                "behind_firewall": behind_firewall,
            }
        )
        if display_name in self.fail_for:
            raise RegistrationFailed("status 500: internal error", status_code=500)
        return self.result


def make_kubeconfig(
    contexts: list[str],
    current_context: str | None = None,
    server: str = "https://{name}.example.com:6443",
) -> dict[str, Any]:
    """Build a kubeconfig dict with one token-authenticated cluster per context."""
    config: dict[str, Any] = {
        "apiVersion": "v1",
        "kind": "Config",
        "clusters": [
            {
                "name": f"{name}-cluster",
                "cluster": {
                    "server": server.format(name=name),
                    "insecure-skip-tls-verify": True,
                },
            }
            for name in contexts
        ],
        "users": [
            {"name": f"{name}-user", "user": {"token": f"{name}-user-token"}}
            for name in contexts
        ],
        "contexts": [
            {
                "name": name,
                "context": {"cluster": f"{name}-cluster", "user": f"{name}-user"},
            }
            for name in contexts
        ],
    }
    if current_context is not None:
        config["current-context"] = current_context
    return config


@pytest.fixture
def kubeconfig_dict() -> dict[str, Any]:
    """Kubeconfig with three contexts, ctx-a current."""
    return make_kubeconfig(["ctx-a", "ctx-b", "ctx-c"], current_context="ctx-a")


@pytest.fixture
def kubeconfig_file(tmp_path: Path, kubeconfig_dict: dict[str, Any]) -> Path:
    path = tmp_path / "config"
    path.write_text(yaml.safe_dump(kubeconfig_dict), encoding="utf-8")
    return path


@pytest.fixture
def config_store(kubeconfig_dict: dict[str, Any], tmp_path: Path) -> KubeConfigStore:
    return KubeConfigStore(kubeconfig_dict, base_path=tmp_path)


@pytest.fixture
def reporter() -> Reporter:
    return Reporter()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def codefresh_service_account() -> ServiceAccount:
    return ServiceAccount(
        name="codefresh",
        namespace="default",
        secrets=[SecretReference(name="codefresh-token-xyz")],
    )


@pytest.fixture
def codefresh_secret() -> Secret:
    return Secret(
        name="codefresh-token-xyz",
        namespace="default",
        data={"token": b"abc", "ca.crt": b"ca-bytes"},
    )


@pytest.fixture
def cluster_client(codefresh_service_account, codefresh_secret) -> FakeClusterClient:
    return FakeClusterClient(
        service_accounts={("default", "codefresh"): codefresh_service_account},
        secrets={("default", "codefresh-token-xyz"): codefresh_secret},
    )


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")


@pytest.fixture(autouse=True)
def no_incluster_config():
    """Tests never run with an ambient in-cluster identity."""
    from kubernetes.config import ConfigException

    with patch(
        "stevedore.services.context_resolver.config.load_incluster_config",
        side_effect=ConfigException("Service host/port is not set."),
    ) as mock:
        yield mock
