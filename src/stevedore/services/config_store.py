"""Kubeconfig file store.

Loads a kubeconfig file once and exposes its contexts. Building per-context
client configurations is left to the context resolver.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from stevedore.exceptions import ConfigLoadError, RawConfigUnavailable
from stevedore.models import ClusterContext, OverridePolicy, RawConfig
from stevedore.observability import get_logger

logger = get_logger(__name__)


class KubeConfigStore:
    """In-memory view of one parsed kubeconfig."""

    def __init__(self, config: dict[str, Any], base_path: Path | None = None):
        self._config = config
        self.base_path = base_path

    @classmethod
    def from_file(cls, path: str | Path) -> KubeConfigStore:
        """Load a kubeconfig file.

        Raises:
            ConfigLoadError: if the file is missing or not a kubeconfig mapping
        """
        path = Path(path).expanduser()
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(str(path), e) from e

        if not isinstance(data, dict):
            raise ConfigLoadError(str(path), "file does not contain a kubeconfig mapping")

        logger.debug("Loaded kubeconfig", path=str(path), contexts=len(data.get("contexts") or []))
        return cls(data, base_path=path.parent)

    def _context_entries(self) -> list[dict[str, Any]]:
        entries = self._config.get("contexts") or []
        if not isinstance(entries, list):
            return []
        return [e for e in entries if isinstance(e, dict) and e.get("name")]

    def context_names(self) -> list[str]:
        """Unique context names in first-seen file order."""
        return list(dict.fromkeys(str(e["name"]) for e in self._context_entries()))

    def get_context(self, name: str) -> ClusterContext | None:
        for entry in self._context_entries():
            if entry["name"] != name:
                continue
            details = entry.get("context") or {}
            return ClusterContext(
                name=str(entry["name"]),
                cluster=details.get("cluster"),
                user=details.get("user"),
                namespace=details.get("namespace"),
            )
        return None

    def raw_config(self, override: OverridePolicy) -> RawConfig:
        """Return the unresolved current-context view.

        The override only affects endpoint resolution, which happens later;
        it is accepted so callers resolve raw and client configs alike.

        Raises:
            RawConfigUnavailable: if contexts are malformed or no current
                context is set
        """
        contexts = self._config.get("contexts")
        if contexts is not None and not isinstance(contexts, list):
            raise RawConfigUnavailable("Invalid kubeconfig: contexts must be a list")

        current = self._config.get("current-context")
        if not current or not isinstance(current, str):
            raise RawConfigUnavailable("Invalid kubeconfig: current-context is not set")

        return RawConfig(current_context=current)

    def as_dict(self) -> dict[str, Any]:
        return self._config
