"""Pydantic models for stevedore."""

from .base import FrozenModel, StevedoreBaseModel
from .cluster import (
    CA_CERT_KEY,
    TOKEN_KEY,
    ResolutionRequest,
    ResolvedCredentials,
    Secret,
    SecretReference,
    ServiceAccount,
    ServiceAccountReference,
)
from .kubeconfig import ClusterContext, OverridePolicy, RawConfig, default_override
from .report import Outcome, OutcomeStatus

__all__ = [
    # Base
    "StevedoreBaseModel",
    "FrozenModel",
    # Kubeconfig
    "ClusterContext",
    "RawConfig",
    "OverridePolicy",
    "default_override",
    # Cluster
    "TOKEN_KEY",
    "CA_CERT_KEY",
    "SecretReference",
    "ServiceAccount",
    "Secret",
    "ServiceAccountReference",
    "ResolvedCredentials",
    "ResolutionRequest",
    # Report
    "OutcomeStatus",
    "Outcome",
]
