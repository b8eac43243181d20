"""
Unit tests for the 'init' command.
"""

from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from farmapp.cli.commands.initialize import init
from farmapp.core.storage import SQLiteActionPlanRepository


class TestInitCommand:
    """Test the init command."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def mock_cwd(self, tmp_path):
        """Mock current working directory to a temp path."""
        with patch("pathlib.Path.cwd", return_value=tmp_path):
            yield tmp_path

    @patch("farmapp.cli.commands.initialize.Confirm.ask", return_value=False)
    def test_creates_config(self, mock_confirm, runner, mock_cwd):
        result = runner.invoke(init)

        assert result.exit_code == 0
        assert "Initialized successfully" in result.output

        config_path = mock_cwd / ".farmapp/config.yaml"
        config = yaml.safe_load(config_path.read_text())
        assert config["project_name"] == mock_cwd.name
        assert config["analytics"]["enabled"] is False
        assert config["db_path"] == ".farmapp/farmapp.db"

    @patch("farmapp.cli.commands.initialize.Prompt.ask", return_value="mixpanel")
    @patch("farmapp.cli.commands.initialize.Confirm.ask", return_value=True)
    def test_analytics_opt_in(self, mock_confirm, mock_prompt, runner, mock_cwd):
        runner.invoke(init)

        config = yaml.safe_load((mock_cwd / ".farmapp/config.yaml").read_text())
        assert config["analytics"]["enabled"] is True
        assert config["analytics"]["provider"] == "mixpanel"

    @patch("farmapp.cli.commands.initialize.Confirm.ask", return_value=False)
    def test_seeds_plan_database(self, mock_confirm, runner, mock_cwd):
        runner.invoke(init)
        assert SQLiteActionPlanRepository(mock_cwd / ".farmapp/farmapp.db").count() == 12

    @patch("farmapp.cli.commands.initialize.Confirm.ask", return_value=False)
    def test_gitignore(self, mock_confirm, runner, mock_cwd):
        (mock_cwd / ".gitignore").write_text("node_modules/\n")
        runner.invoke(init)

        content = (mock_cwd / ".gitignore").read_text()
        assert "node_modules/" in content
        assert ".farmapp/" in content

    @patch("farmapp.cli.commands.initialize.Confirm.ask")
    def test_existing_config_aborts(self, mock_confirm, runner, mock_cwd):
        config_dir = mock_cwd / ".farmapp"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("project_name: keep-me\n")
        mock_confirm.return_value = False

        result = runner.invoke(init)

        assert "Aborted" in result.output
        assert "keep-me" in (config_dir / "config.yaml").read_text()
