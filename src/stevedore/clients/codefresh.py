"""Codefresh API client.

Registers a cluster with Codefresh using a service account token and CA
certificate. Calls are synchronous and never retried.
"""

from __future__ import annotations

import base64
import time
from typing import Any

import httpx

from stevedore.config import CodefreshSettings
from stevedore.exceptions import RegistrationFailed
from stevedore.observability import get_logger, log_external_call_end, log_external_call_start

logger = get_logger(__name__)

CLUSTERS_PATH = "/api/clusters/local/cluster"
CLUSTER_TYPE = "sat"


class CodefreshClient:
    """RegistrationGateway for the Codefresh clusters API."""

    def __init__(
        self,
        base_url: str,
        api_token: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.Client(
            base_url=self.base_url,
            headers={"Authorization": api_token},
            timeout=httpx.Timeout(timeout, connect=5.0),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: CodefreshSettings) -> CodefreshClient:
        return cls(
            base_url=settings.api_url,
            api_token=settings.api_token,
            timeout=settings.timeout_seconds,
        )

    def register(
        self,
        host: str,
        display_name: str,
        token: bytes,
        ca: bytes,
        behind_firewall: bool,
    ) -> str:
        """Create the cluster in Codefresh.

        Returns:
            Response body, treated as an opaque payload

        Raises:
            RegistrationFailed: on transport errors or a non-2xx response
        """
        payload = build_payload(host, display_name, token, ca, behind_firewall)

        log_external_call_start(logger, "codefresh", "create_cluster")
        start = time.perf_counter()
        try:
            response = self.client.post(CLUSTERS_PATH, json=payload)
        except httpx.HTTPError as e:
            duration_ms = (time.perf_counter() - start) * 1000
            log_external_call_end(logger, "codefresh", "create_cluster", False, duration_ms, str(e))
            raise RegistrationFailed(str(e)) from e

        duration_ms = (time.perf_counter() - start) * 1000
        if not response.is_success:
            log_external_call_end(
                logger,
                "codefresh",
                "create_cluster",
                False,
                duration_ms,
                f"status {response.status_code}",
            )
            raise RegistrationFailed(
                f"status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        log_external_call_end(logger, "codefresh", "create_cluster", True, duration_ms)
        return response.text

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> CodefreshClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def build_payload(
    host: str,
    display_name: str,
    token: bytes,
    ca: bytes,
    behind_firewall: bool,
) -> dict[str, Any]:
    """Build the cluster creation body; token and CA are base64-encoded."""
    return {
        "type": CLUSTER_TYPE,
        "selector": display_name,
        "host": host,
        "clientCa": base64.b64encode(ca).decode(),
        "serviceAccountToken": base64.b64encode(token).decode(),
        "behindFirewall": behind_firewall,
    }
