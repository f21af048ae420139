"""Stevedore: register kubeconfig clusters with Codefresh.

This package contains:
- config: Settings loaded from the environment
- observability: Structured logging
- models: Pydantic value objects (requests, credentials, outcomes)
- clients: Kubernetes and Codefresh adapters
- services: Context resolution, credential extraction, orchestration
- cli: The `stevedore` command line
"""

__version__ = "0.1.0"
