"""Stevedore CLI - Main entry point"""

from __future__ import annotations

import click
from rich.console import Console

from stevedore import __version__
from stevedore.clients import CodefreshClient
from stevedore.config import LogLevel, get_settings
from stevedore.exceptions import ConfigLoadError
from stevedore.observability import get_logger, setup_logging
from stevedore.services import KubeConfigStore, Orchestrator, Reporter

console = Console()


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    Stevedore - register kubeconfig clusters with Codefresh.

    \b
    Quick Start:
      stevedore create --token $TOKEN            # Current context
      stevedore create --token $TOKEN --all      # Every context
      stevedore create --token $TOKEN --context prod --name prod-eu
    """


@cli.command()
@click.option("--config", "kubeconfig", type=click.Path(dir_okay=False), help="Path to kubeconfig file")
@click.option("--token", envvar="CODEFRESH_API_TOKEN", help="Codefresh API token")
@click.option("--api-host", envvar="CODEFRESH_API_URL", help="Codefresh API URL")
@click.option("--all", "all_contexts", is_flag=True, help="Register every context")
@click.option("--context", "context_name", help="Register one context by name")
@click.option("--namespace", help="Namespace of the service account")
@click.option("--serviceaccount", "service_account", help="Service account to read the token from")
@click.option("--behind-firewall", is_flag=True, help="Mark the cluster as behind a firewall (with --context)")
@click.option("--name", "display_name", default="", help="Name to register the context under (with --context)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def create(
    kubeconfig,
    token,
    api_host,
    all_contexts,
    context_name,
    namespace,
    service_account,
    behind_firewall,
    display_name,
    verbose,
):
    """
    Register clusters from kubeconfig with Codefresh

    Without --all or --context the current context is used.
    """
    settings = get_settings()
    setup_logging(log_level=LogLevel.DEBUG if verbose else None)
    logger = get_logger(__name__)

    if all_contexts and context_name:
        raise click.UsageError("--all and --context are mutually exclusive")

    codefresh_settings = settings.codefresh.model_copy(
        update={
            k: v
            for k, v in {"api_token": token, "api_url": api_host}.items()
            if v
        }
    )
    if not codefresh_settings.api_token:
        raise click.UsageError("A Codefresh API token is required (--token or CODEFRESH_API_TOKEN)")

    path = kubeconfig or str(settings.kubeconfig)
    try:
        store = KubeConfigStore.from_file(path)
    except ConfigLoadError as e:
        logger.error("Failed to load kubeconfig", path=path, error=str(e.cause))
        raise click.ClickException(str(e)) from e

    reporter = Reporter()
    with CodefreshClient.from_settings(codefresh_settings) as gateway:
        orchestrator = Orchestrator(
            store=store,
            gateway=gateway,
            reporter=reporter,
            default_namespace=namespace or settings.default_namespace,
            default_service_account=service_account or settings.default_service_account,
        )

        if all_contexts:
            orchestrator.go_over_all_contexts()
        elif context_name:
            orchestrator.go_over_context_by_name(
                context_name,
                namespace or settings.default_namespace,
                service_account or settings.default_service_account,
                behind_firewall,
                display_name or context_name,
            )
        else:
            orchestrator.go_over_current_context()

    reporter.print(console)
    if reporter.has_failures:
        raise SystemExit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
