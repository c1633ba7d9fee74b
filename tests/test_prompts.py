"""Unit tests for interactive prompt functions."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from create_expo_module.cli._prompts import (
    confirm_target_dir,
    prompt_package_manager,
    prompt_slug,
    prompt_substitution_data,
)
from create_expo_module.cli._types import CommandOptions, PackageManager
from create_expo_module.errors import ConfigError, PromptCancelled


class TestPromptSlug:
    @patch("builtins.input", return_value="")
    def test_default_is_initial(self, mock_input: MagicMock) -> None:
        assert prompt_slug("my-module") == "my-module"
        mock_input.assert_called_once()

    @patch("builtins.input", return_value="expo-widget")
    def test_returns_answer(self, mock_input: MagicMock) -> None:
        assert prompt_slug("my-module") == "expo-widget"

    @patch("builtins.input", side_effect=["Not Valid", "valid-slug"])
    def test_reprompts_on_invalid_slug(self, mock_input: MagicMock) -> None:
        assert prompt_slug("my-module") == "valid-slug"
        assert mock_input.call_count == 2

    @patch("builtins.input", side_effect=KeyboardInterrupt)
    def test_interrupt_cancels(self, mock_input: MagicMock) -> None:
        with pytest.raises(PromptCancelled):
            prompt_slug("my-module")

    @patch("builtins.input", side_effect=EOFError)
    def test_eof_cancels(self, mock_input: MagicMock) -> None:
        with pytest.raises(PromptCancelled):
            prompt_slug("my-module")


class TestConfirmTargetDir:
    @patch("builtins.input", return_value="")
    def test_default_yes(self, mock_input: MagicMock, tmp_path: Path) -> None:
        assert confirm_target_dir(tmp_path) is True

    @patch("builtins.input", return_value="n")
    def test_explicit_no(self, mock_input: MagicMock, tmp_path: Path) -> None:
        assert confirm_target_dir(tmp_path) is False

    @patch("builtins.input", side_effect=KeyboardInterrupt)
    def test_cancel_declines(self, mock_input: MagicMock, tmp_path: Path) -> None:
        assert confirm_target_dir(tmp_path) is False


class TestPromptPackageManager:
    @patch("create_expo_module.cli._prompts.TerminalMenu")
    def test_returns_selected_manager(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 1

        result = prompt_package_manager([PackageManager.YARN, PackageManager.NPM])
        assert result is PackageManager.NPM

    @patch("create_expo_module.cli._prompts.TerminalMenu")
    def test_cancel_on_none(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = None

        with pytest.raises(PromptCancelled):
            prompt_package_manager([PackageManager.YARN, PackageManager.NPM])


class TestPromptSubstitutionData:
    @patch("builtins.input", side_effect=AssertionError("no prompt expected"))
    @patch("create_expo_module.cli._defaults.find_github_user")
    def test_uses_supplied_values(
        self, mock_lookup: MagicMock, mock_input: MagicMock, full_options: CommandOptions
    ) -> None:
        data = prompt_substitution_data("acme-widget", full_options)

        assert data.project.slug == "acme-widget"
        assert data.project.name == "AcmeWidget"
        assert data.project.version == "0.1.0"
        assert data.project.package == "com.acme.widget"
        assert data.author == "Jane Doe <jane@acme.dev> (https://github.com/jane)"
        assert data.license == "MIT"
        assert data.repo == "https://github.com/jane/acme-widget"
        mock_lookup.assert_not_called()

    @patch("builtins.input", return_value="")
    @patch("create_expo_module.cli._defaults.find_github_user", return_value="jane")
    @patch(
        "create_expo_module.cli._defaults.git_config",
        side_effect={"user.name": "Jane Doe", "user.email": "jane@acme.dev"}.get,
    )
    def test_accepting_defaults(
        self, mock_git: MagicMock, mock_lookup: MagicMock, mock_input: MagicMock
    ) -> None:
        data = prompt_substitution_data("expo-fancy-widget", CommandOptions())

        assert data.project.name == "ExpoFancyWidget"
        assert data.project.description == "My new module"
        assert data.project.package == "expo.modules.expofancywidget"
        assert data.author == "Jane Doe <jane@acme.dev> (https://github.com/jane)"
        assert data.repo == "https://github.com/jane/expo-fancy-widget"
        mock_lookup.assert_called_once_with("jane@acme.dev")
        assert mock_input.call_count == 7

    @patch("create_expo_module.cli._defaults.find_github_user", return_value=None)
    @patch("create_expo_module.cli._defaults.git_config", return_value=None)
    def test_only_missing_values_are_prompted(
        self, mock_git: MagicMock, mock_lookup: MagicMock
    ) -> None:
        options = CommandOptions(
            name="Widget",
            description="desc",
            package="com.acme.widget",
            author_name="Jane",
            author_email="jane@acme.dev",
        )
        answers = ["not-a-url", "https://jane.dev", "https://github.com/acme/widget"]
        with patch("builtins.input", side_effect=answers) as mock_input:
            data = prompt_substitution_data("widget", options)

        assert data.author == "Jane <jane@acme.dev> (https://jane.dev)"
        assert data.repo == "https://github.com/acme/widget"
        assert mock_input.call_count == 3

    @patch("builtins.input", side_effect=KeyboardInterrupt)
    @patch("create_expo_module.cli._defaults.git_config", return_value=None)
    def test_interrupt_cancels(self, mock_git: MagicMock, mock_input: MagicMock) -> None:
        with pytest.raises(PromptCancelled):
            prompt_substitution_data("widget", CommandOptions())

    @pytest.mark.parametrize(
        ("field", "value", "flag"),
        [
            ("package", "Com..Acme", "--package"),
            ("author_email", "jane", "--author-email"),
            ("author_url", "github.com/jane", "--author-url"),
            ("repo", "jane/acme-widget", "--repo"),
            ("name", "  ", "--name"),
        ],
    )
    @patch("builtins.input", side_effect=AssertionError("no prompt expected"))
    @patch("create_expo_module.cli._defaults.find_github_user", return_value=None)
    def test_invalid_supplied_value_raises(
        self,
        mock_lookup: MagicMock,
        mock_input: MagicMock,
        full_options: CommandOptions,
        field: str,
        value: str,
        flag: str,
    ) -> None:
        setattr(full_options, field, value)

        with pytest.raises(ConfigError, match=flag):
            prompt_substitution_data("acme-widget", full_options)
