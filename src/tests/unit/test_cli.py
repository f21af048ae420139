"""Tests for the stevedore CLI."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from stevedore.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep logging bound to the real stderr, not the runner's capture."""
    with patch("stevedore.cli.setup_logging"):
        yield


class TestCreate:
    def test_missing_kubeconfig_exits(self, runner, tmp_path):
        """Test an unreadable kubeconfig aborts the run."""
        result = runner.invoke(
            cli,
            ["create", "--token", "t", "--config", str(tmp_path / "nope")],
        )

        assert result.exit_code == 1
        assert "Failed to load kubeconfig" in result.output

    def test_token_required(self, runner, kubeconfig_file, monkeypatch):
        monkeypatch.delenv("CODEFRESH_API_TOKEN", raising=False)

        with patch("stevedore.cli.get_settings") as get_settings:
            get_settings.return_value.codefresh.model_copy.return_value.api_token = ""
            result = runner.invoke(cli, ["create", "--config", str(kubeconfig_file)])

        assert result.exit_code == 2
        assert "token" in result.output

    def test_all_and_context_are_exclusive(self, runner, kubeconfig_file):
        result = runner.invoke(
            cli,
            ["create", "--token", "t", "--config", str(kubeconfig_file), "--all", "--context", "ctx-a"],
        )

        assert result.exit_code == 2

    def test_all_contexts_run(self, runner, kubeconfig_file, gateway, cluster_client):
        """Test --all registers every context and prints the report."""
        with (
            patch("stevedore.cli.CodefreshClient") as codefresh,
            patch("stevedore.services.credential_extractor.KubernetesClusterClient") as kube,
        ):
            codefresh.from_settings.return_value.__enter__.return_value = gateway
            kube.from_configuration.return_value = cluster_client
            result = runner.invoke(
                cli,
                [
                    "create",
                    "--token",
                    "t",
                    "--config",
                    str(kubeconfig_file),
                    "--all",
                    "--serviceaccount",
                    "codefresh",
                ],
            )

        assert result.exit_code == 0, result.output
        for name in ("ctx-a", "ctx-b", "ctx-c"):
            assert name in result.output
        assert len(gateway.calls) == 3

    def test_failed_context_sets_exit_code(self, runner, kubeconfig_file, gateway, cluster_client):
        """Test a failing context makes the command exit with 1."""
        cluster_client.service_accounts = {}
        with (
            patch("stevedore.cli.CodefreshClient") as codefresh,
            patch("stevedore.services.credential_extractor.KubernetesClusterClient") as kube,
        ):
            codefresh.from_settings.return_value.__enter__.return_value = gateway
            kube.from_configuration.return_value = cluster_client
            result = runner.invoke(
                cli,
                ["create", "--token", "t", "--config", str(kubeconfig_file), "--context", "ctx-b"],
            )

        assert result.exit_code == 1
        assert "ctx-b" in result.output
        assert "FAILED" in result.output
