"""Context resolution.

Turns a kubeconfig context name into a kubernetes client Configuration.
When the named context cannot be loaded, in-cluster configuration is tried
before giving up. No network calls happen here.
"""

from __future__ import annotations

import structlog
from kubernetes import client, config
from kubernetes.config import kube_config

from stevedore.exceptions import ConfigUnavailable
from stevedore.interfaces import ConfigStore
from stevedore.models import OverridePolicy, default_override
from stevedore.observability import get_logger


class ContextResolver:
    """Builds client configurations from a config store."""

    def __init__(
        self,
        store: ConfigStore,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self.store = store
        self.logger = logger or get_logger(__name__)

    def resolve(
        self,
        context_name: str,
        override: OverridePolicy | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> client.Configuration:
        """Resolve a context into a client configuration.

        Args:
            context_name: Kubeconfig context to load
            override: Overrides applied after loading (defaults to clearing
                the server override)
            logger: Logger bound to the caller's context

        Returns:
            A fresh Configuration; the process-wide default is never touched

        Raises:
            ConfigUnavailable: if both the context and in-cluster loading fail
        """
        log = logger or self.logger
        override = override or default_override()

        try:
            configuration = self._from_context(context_name)
        except Exception as primary_error:
            log.warning("Failed to create config", error=str(primary_error))
            try:
                configuration = self._from_cluster()
            except Exception as fallback_error:
                log.warning("Failed to create in cluster config", error=str(fallback_error))
                raise ConfigUnavailable(context_name, primary_error, fallback_error) from fallback_error
            log.info("Using in cluster config")

        if override.overrides_server:
            configuration.host = override.server

        log.info("Created config for context", host=configuration.host)
        return configuration

    def _from_context(self, context_name: str) -> client.Configuration:
        configuration = client.Configuration()
        base_path = str(self.store.base_path) if self.store.base_path else ""
        loader = kube_config.KubeConfigLoader(
            config_dict=self.store.as_dict(),
            active_context=context_name,
            config_base_path=base_path,
        )
        loader.load_and_set(configuration)
        return configuration

    def _from_cluster(self) -> client.Configuration:
        configuration = client.Configuration()
        config.load_incluster_config(client_configuration=configuration)
        return configuration
