"""Error taxonomy.

Every error raised while processing a single context derives from
StevedoreError and is turned into one FAILED outcome by the orchestrator.
ConfigLoadError is the only one that aborts a whole run.
"""

from __future__ import annotations

CURRENT_CONTEXT_LABEL = "current-context"


class StevedoreError(Exception):
    """Base class for all stevedore errors."""

    pass


class ConfigLoadError(StevedoreError):
    """Raised when the kubeconfig file cannot be read or parsed."""

    def __init__(self, path: str, cause: Exception | str):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to load kubeconfig {path}: {cause}")


class RawConfigUnavailable(StevedoreError):
    """Raised when the current-context pointer cannot be read."""

    pass


class ResolutionError(StevedoreError):
    """Raised when a context cannot be turned into a client configuration."""

    pass


class ConfigUnavailable(ResolutionError):
    """Neither the named context nor in-cluster configuration could be loaded."""

    def __init__(
        self,
        context_name: str,
        primary_error: Exception,
        fallback_error: Exception,
    ):
        self.context_name = context_name
        self.primary_error = primary_error
        self.fallback_error = fallback_error
        super().__init__(
            f"Failed to create config for context {context_name!r}: {primary_error}; "
            f"failed to create in cluster config: {fallback_error}"
        )


class ExtractionError(StevedoreError):
    """Raised when credentials cannot be read from the target cluster."""

    pass


class ClientCreationFailed(ExtractionError):
    """A resolved configuration could not be turned into a cluster client."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to create kubernetes client: {cause}")


class ServiceAccountNotFound(ExtractionError):
    """The service account does not exist or could not be read."""

    def __init__(self, namespace: str, name: str, cause: Exception | None = None):
        self.namespace = namespace
        self.name = name
        self.cause = cause
        if cause is None:
            message = f"Service account: {name} not found in namespace: {namespace}"
        else:
            message = (
                f"Failed to get service account: {name} in namespace: {namespace}: {cause}"
            )
        super().__init__(message)


class NoSecretBound(ExtractionError):
    """The service account has no secret reference."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Service account has no secret configured: {name}")


class SecretFetchFailed(ExtractionError):
    """The referenced secret does not exist or could not be read."""

    def __init__(self, namespace: str, name: str, cause: Exception | None = None):
        self.namespace = namespace
        self.name = name
        self.cause = cause
        message = f"Failed to get secret {name} in namespace: {namespace}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)


class RegistrationFailed(StevedoreError):
    """The registration call returned an error."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(f"Failed to add cluster: {message}")
