"""Tests for codeoutline grammars command."""

from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from codeoutline.cli.main import cli

runner = CliRunner()

_MODULE = "codeoutline.cli.grammars"


class TestGrammarsCommand:
    """Tests for grammars command."""

    @patch(f"{_MODULE}.is_grammar_installed", return_value=True)
    @patch(f"{_MODULE}.get_missing_grammars", return_value=[])
    def test_given_all_installed_when_listed_then_table_only(
        self, _missing: MagicMock, _installed: MagicMock
    ) -> None:
        result = runner.invoke(cli, ["grammars"])

        assert result.exit_code == 0, result.output
        assert "tree-sitter-python" in result.output
        assert "installed" in result.output
        assert "missing" not in result.output

    @patch(f"{_MODULE}.install_grammars")
    @patch(f"{_MODULE}.get_missing_grammars", return_value=[("tree-sitter-rescript", "0.1.0")])
    def test_given_missing_without_install_then_hint_shown(
        self, _missing: MagicMock, mock_install: MagicMock
    ) -> None:
        result = runner.invoke(cli, ["grammars"])

        assert result.exit_code == 0
        assert "1 grammar package(s) missing" in result.output
        mock_install.assert_not_called()

    @patch(f"{_MODULE}.install_grammars", return_value=True)
    @patch(f"{_MODULE}.get_missing_grammars", return_value=[("tree-sitter-rescript", "0.1.0")])
    def test_given_install_flag_when_missing_then_installs(
        self, _missing: MagicMock, mock_install: MagicMock
    ) -> None:
        result = runner.invoke(cli, ["grammars", "--install"])

        assert result.exit_code == 0, result.output
        assert mock_install.call_args[0][0] == [("tree-sitter-rescript", "0.1.0")]
        assert "Grammars installed" in result.output

    @patch(f"{_MODULE}.install_grammars", return_value=False)
    @patch(f"{_MODULE}.get_missing_grammars", return_value=[("tree-sitter-rescript", "0.1.0")])
    def test_given_install_failure_then_exit_one(
        self, _missing: MagicMock, _install: MagicMock
    ) -> None:
        result = runner.invoke(cli, ["grammars", "--install"])

        assert result.exit_code == 1
        assert "Grammar installation failed" in result.output
