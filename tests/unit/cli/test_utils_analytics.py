"""
Unit tests for the CLI analytics middleware.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import click
import pytest
from click.testing import CliRunner

from farmapp.cli.utils_analytics import AnalyticsGroup, build_analytics
from farmapp.config import AnalyticsSettings, Settings


class TestAnalyticsGroup:
    """Test the AnalyticsGroup middleware."""

    @pytest.fixture
    def analytics(self):
        return MagicMock()

    @pytest.fixture
    def cli(self, analytics):
        @click.group(cls=AnalyticsGroup)
        @click.pass_context
        def cli(ctx):
            ctx.obj = SimpleNamespace(analytics=analytics)

        @cli.command()
        def hello():
            click.echo("Hello")

        @cli.command()
        def fail():
            raise click.ClickException("nope")

        @cli.command()
        def crash():
            raise RuntimeError("kaboom")

        return cli

    def test_successful_command_tracking(self, cli, analytics):
        result = CliRunner().invoke(cli, ["hello"])

        assert result.exit_code == 0
        assert "Hello" in result.output

        name, props = analytics.track_event.call_args.args
        assert name == "command_run"
        assert props["command"] == "hello"
        assert props["success"] is True
        assert props["exit_code"] == 0
        assert props["error_type"] is None
        assert props["duration_ms"] >= 0

    def test_failed_command_tracking(self, cli, analytics):
        result = CliRunner().invoke(cli, ["crash"])

        assert result.exit_code == 1
        _, props = analytics.track_event.call_args.args
        assert props["success"] is False
        assert props["error_type"] == "RuntimeError"

    def test_click_exception_tracking(self, cli, analytics):
        result = CliRunner().invoke(cli, ["fail"])

        assert result.exit_code == 1
        _, props = analytics.track_event.call_args.args
        assert props["command"] == "fail"
        assert props["error_type"] == "ClickException"

    def test_no_analytics_object(self):
        @click.group(cls=AnalyticsGroup)
        def cli():
            pass

        @cli.command()
        def hello():
            click.echo("Hello")

        result = CliRunner().invoke(cli, ["hello"])
        assert result.exit_code == 0


class TestBuildAnalytics:

    def test_disabled(self):
        service = build_analytics(Settings())
        assert service.is_initialized is False

    def test_enabled(self):
        settings = Settings(analytics=AnalyticsSettings(enabled=True, provider="mixpanel", key="k"))
        service = build_analytics(settings)
        assert service.is_initialized is True
        assert service.backend.name == "Mixpanel"

    def test_unknown_provider_is_logged(self, caplog):
        settings = Settings(analytics=AnalyticsSettings(enabled=True, provider="segment"))
        service = build_analytics(settings)
        assert service.is_initialized is False
        assert "Analytics disabled" in caplog.text
