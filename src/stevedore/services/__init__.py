"""Stevedore services."""

from .config_store import KubeConfigStore
from .context_resolver import ContextResolver
from .credential_extractor import ClientFactory, CredentialExtractor
from .orchestrator import Orchestrator
from .reporter import Reporter

__all__ = [
    "KubeConfigStore",
    "ContextResolver",
    "ClientFactory",
    "CredentialExtractor",
    "Orchestrator",
    "Reporter",
]
