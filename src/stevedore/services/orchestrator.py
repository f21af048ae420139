"""Context orchestration.

Drives resolution, extraction and registration for all contexts, one named
context, or the current context. Each processed context ends in exactly
one outcome; errors never escape to the caller.
"""

from __future__ import annotations

import structlog

from stevedore.exceptions import CURRENT_CONTEXT_LABEL, RawConfigUnavailable, StevedoreError
from stevedore.interfaces import ConfigStore, RegistrationGateway, Reporter
from stevedore.models import OutcomeStatus, ResolutionRequest, default_override
from stevedore.observability import get_logger

from .context_resolver import ContextResolver
from .credential_extractor import CredentialExtractor


class Orchestrator:
    """Registers kubeconfig contexts with a registration gateway."""

    def __init__(
        self,
        store: ConfigStore,
        gateway: RegistrationGateway,
        reporter: Reporter,
        resolver: ContextResolver | None = None,
        extractor: CredentialExtractor | None = None,
        default_namespace: str = "",
        default_service_account: str = "",
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self.store = store
        self.gateway = gateway
        self.reporter = reporter
        self.resolver = resolver or ContextResolver(store)
        self.extractor = extractor or CredentialExtractor()
        self.default_namespace = default_namespace
        self.default_service_account = default_service_account
        self.logger = logger or get_logger(__name__)

    def go_over_all_contexts(self) -> None:
        """Process every context in the store's order."""
        for context_name in self.store.context_names():
            request = ResolutionRequest(
                context_name=context_name,
                namespace=self.default_namespace,
                service_account=self.default_service_account,
                behind_firewall=False,
                display_name=context_name,
            )
            self.process_context(request)

    def go_over_context_by_name(
        self,
        context_name: str,
        namespace: str,
        service_account: str,
        behind_firewall: bool,
        display_name: str,
    ) -> None:
        """Process one explicitly named context."""
        request = ResolutionRequest(
            context_name=context_name,
            namespace=namespace,
            service_account=service_account,
            behind_firewall=behind_firewall,
            display_name=display_name,
        )
        self.process_context(request)

    def go_over_current_context(self) -> None:
        """Process the kubeconfig's current context.

        If the current-context pointer cannot be read, a single failure is
        recorded under "current-context" and nothing else is attempted.
        """
        override = default_override()
        try:
            raw = self.store.raw_config(override)
        except RawConfigUnavailable as e:
            self.logger.warning("Failed to read current context", error=str(e))
            self.reporter.record(CURRENT_CONTEXT_LABEL, OutcomeStatus.FAILED, str(e))
            return
        except Exception as e:
            self.logger.exception("Unexpected error while reading current context")
            self.reporter.record(
                CURRENT_CONTEXT_LABEL,
                OutcomeStatus.FAILED,
                f"Unexpected error: {e}",
            )
            return

        request = ResolutionRequest(
            context_name=raw.current_context,
            namespace=self.default_namespace,
            service_account=self.default_service_account,
            behind_firewall=False,
            display_name=raw.current_context,
            override=override,
        )
        self.process_context(request)

    def process_context(self, request: ResolutionRequest) -> None:
        """Resolve, extract and register one context; record one outcome."""
        log = self.logger.bind(
            context_name=request.context_name,
            namespace=request.namespace,
            service_account=request.service_account,
            behind_firewall=request.behind_firewall,
            name=request.registration_name,
        )
        try:
            log = self._bind_context(log, request.context_name)
            log.info("Working on context")
            result = self._register(request, log)
        except StevedoreError as e:
            log.error("Context failed", error=str(e))
            self.reporter.record(request.context_name, OutcomeStatus.FAILED, str(e))
            return
        except Exception as e:
            log.exception("Unexpected error while processing context")
            self.reporter.record(
                request.context_name,
                OutcomeStatus.FAILED,
                f"Unexpected error: {e}",
            )
            return

        self.reporter.record(request.context_name, OutcomeStatus.SUCCESS, result)
        log.info("Cluster added!")

    def _bind_context(
        self,
        log: structlog.stdlib.BoundLogger,
        context_name: str,
    ) -> structlog.stdlib.BoundLogger:
        """Add the kubeconfig entry's cluster and user to the log context."""
        context = self.store.get_context(context_name)
        if context is None:
            log.debug("Context not listed in kubeconfig")
            return log
        return log.bind(cluster=context.cluster, user=context.user)

    def _register(
        self,
        request: ResolutionRequest,
        log: structlog.stdlib.BoundLogger,
    ) -> str:
        client_config = self.resolver.resolve(request.context_name, request.override, logger=log)
        credentials = self.extractor.extract(
            client_config,
            request.namespace,
            request.service_account,
            logger=log,
        )

        log.info("Creating cluster in Codefresh", host=credentials.host)
        return self.gateway.register(
            credentials.host,
            request.registration_name,
            credentials.token,
            credentials.ca,
            request.behind_firewall,
        )
