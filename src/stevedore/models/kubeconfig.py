"""Kubeconfig domain models."""

from pydantic import Field

from .base import FrozenModel


class ClusterContext(FrozenModel):
    """One context entry of a kubeconfig file."""

    name: str
    cluster: str | None = Field(default=None, description="Referenced cluster name")
    user: str | None = Field(default=None, description="Referenced user name")
    namespace: str | None = None


class RawConfig(FrozenModel):
    """Unresolved view of the kubeconfig used for current-context lookup."""

    current_context: str


class OverridePolicy(FrozenModel):
    """Overrides applied on top of a context's own configuration.

    An empty server clears any endpoint override, so the host always comes
    from the context's cluster record.
    """

    server: str = Field(default="", description="API server URL override")

    @property
    def overrides_server(self) -> bool:
        return bool(self.server)


def default_override() -> OverridePolicy:
    """Policy used by every orchestrator entry point."""
    return OverridePolicy(server="")
