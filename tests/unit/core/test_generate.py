"""Unit tests for the capture pipeline."""

from unittest.mock import MagicMock, patch

import pytest
from frontier.core.config import parse_config
from frontier.core.generate import (
    capture_installed,
    format_args_field,
    format_install_field,
    generate_config,
    quote_toml_string,
    render_config,
    split_package_list,
)
from frontier.exceptions import SpawnError
from frontier.managers.registry import MANAGERS
from frontier.utils.shell import CommandResult


class TestSplitPackageList:
    """Tests for split_package_list function."""

    def test_drops_trailing_empty_line(self) -> None:
        """The segment after the final newline is dropped."""
        assert split_package_list("vim\ngit\n") == ["vim", "git"]

    def test_without_trailing_newline(self) -> None:
        """Output without a final newline keeps its last line."""
        assert split_package_list("vim\ngit") == ["vim", "git"]

    def test_empty_output(self) -> None:
        """Empty output yields no packages."""
        assert split_package_list("") == []

    def test_strips_carriage_returns(self) -> None:
        """CRLF line endings are handled."""
        assert split_package_list("vim\r\ngit\r\n") == ["vim", "git"]

    def test_keeps_interior_blank_lines(self) -> None:
        """Only the final empty segment is dropped."""
        assert split_package_list("vim\n\ngit\n") == ["vim", "", "git"]


class TestQuoteTomlString:
    """Tests for quote_toml_string function."""

    def test_plain(self) -> None:
        """Plain names are wrapped in double quotes."""
        assert quote_toml_string("vim") == '"vim"'

    def test_escapes_quotes_and_backslashes(self) -> None:
        """Quotes and backslashes are escaped."""
        assert quote_toml_string('a"b\\c') == '"a\\"b\\\\c"'

    def test_escapes_control_characters(self) -> None:
        """Control characters use TOML escapes."""
        assert quote_toml_string("a\tb\x01") == '"a\\tb\\u0001"'


class TestFormatting:
    """Tests for the field formatters and render_config."""

    def test_install_field(self) -> None:
        """Each package is on its own tab-indented line."""
        assert format_install_field(["vim", "git"]) == 'install = [\n\t"vim",\n\t"git",\n]'

    def test_empty_install_field(self) -> None:
        """An empty list still forms a valid array."""
        assert format_install_field([]) == "install = [\n]"

    def test_args_field(self) -> None:
        """Args are quoted and comma-separated on one line."""
        assert format_args_field(["--noconfirm", "-S"]) == 'args = ["--noconfirm", "-S"]'

    def test_render_yay(self) -> None:
        """Rendered yay config has name, args and install sections."""
        text = render_config(MANAGERS["yay"], ["vim", "git"])

        assert text == (
            "[packageManager]\n"
            'name = "yay"\n'
            'args = ["--noconfirm"]\n'
            "\n"
            "[pkgs]\n"
            'install = [\n\t"vim",\n\t"git",\n]\n'
        )

    def test_render_omits_args_without_confirm_flag(self) -> None:
        """brew has no confirm flag, so no args line is written."""
        text = render_config(MANAGERS["brew"], ["wget"])

        assert "args" not in text
        assert 'name = "brew"' in text


class TestCaptureInstalled:
    """Tests for capture_installed and generate_config."""

    @patch("frontier.core.generate.run_command")
    def test_runs_list_command(self, mock_run: MagicMock, mock_pacman_output: str) -> None:
        """capture_installed runs the descriptor's list command."""
        mock_run.return_value = CommandResult(stdout=mock_pacman_output, stderr="", returncode=0)

        packages = capture_installed(MANAGERS["pacman"])

        mock_run.assert_called_once_with(["pacman", "-Qeq"])
        assert packages == ["base", "base-devel", "git", "linux", "neovim"]

    @patch("frontier.core.generate.run_command")
    def test_apt_uses_apt_mark(self, mock_run: MagicMock, mock_apt_mark_output: str) -> None:
        """apt packages are listed with apt-mark showmanual."""
        mock_run.return_value = CommandResult(stdout=mock_apt_mark_output, stderr="", returncode=0)

        packages = capture_installed(MANAGERS["apt"])

        mock_run.assert_called_once_with(["apt-mark", "showmanual"])
        assert packages == ["curl", "firefox", "htop"]

    @patch("frontier.core.generate.run_command")
    def test_nonzero_exit_output_is_used(self, mock_run: MagicMock) -> None:
        """Output is used even when the list command fails."""
        mock_run.return_value = CommandResult(stdout="vim\n", stderr="partial", returncode=1)

        assert capture_installed(MANAGERS["yay"]) == ["vim"]

    @patch("frontier.core.generate.run_command")
    def test_spawn_error_propagates(self, mock_run: MagicMock) -> None:
        """A missing list executable propagates as SpawnError."""
        mock_run.side_effect = SpawnError("unable to spawn child process 'paru'")

        with pytest.raises(SpawnError):
            generate_config(MANAGERS["paru"])

    @patch("frontier.core.generate.run_command")
    def test_generated_yay_text(self, mock_run: MagicMock) -> None:
        """Captured yay output becomes the install array."""
        mock_run.return_value = CommandResult(stdout="vim\ngit\n", stderr="", returncode=0)

        text = generate_config(MANAGERS["yay"])

        assert 'install = [\n\t"vim",\n\t"git",\n]' in text
        assert 'name = "yay"' in text

    @pytest.mark.parametrize("key", ["apt", "brew", "pacman", "paru", "yay"])
    @patch("frontier.core.generate.run_command")
    def test_generated_text_parses_back(
        self, mock_run: MagicMock, key: str, mock_pacman_output: str
    ) -> None:
        """Generated text parses to the captured packages and manager."""
        output = mock_pacman_output + 'odd"name\\x\n'
        mock_run.return_value = CommandResult(stdout=output, stderr="", returncode=0)

        config = parse_config(generate_config(MANAGERS[key]))

        assert config.pkgs_to_install() == split_package_list(output)
        assert config.pkg_mgr_name() == key
        assert config.pkg_mgr() is MANAGERS[key]
        assert config.args_to_pkg_mgr() == MANAGERS[key].config_args
