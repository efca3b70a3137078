"""Unit tests for Config and related Pydantic models (vitestrap.config).

Tests cover:
- CommandConfig defaults and the {folder} placeholder check
- EditorConfig / SpinnerConfig defaults and validation
- Config.scaffold_command
- Config.from_env
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from vitestrap.config import (
    SPINNER_FRAMES,
    CommandConfig,
    Config,
    EditorConfig,
    SpinnerConfig,
)

pytestmark = pytest.mark.unit

_ENV_VARS = (
    "VITESTRAP_BASE_DIR",
    "VITESTRAP_SCAFFOLD_COMMAND",
    "VITESTRAP_INSTALL_COMMAND",
    "VITESTRAP_DEV_COMMAND",
    "VITESTRAP_EDITOR",
    "VITESTRAP_SPINNER_INTERVAL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# CommandConfig
# ---------------------------------------------------------------------------


class TestCommandConfig:
    def test_defaults(self):
        commands = CommandConfig()
        assert commands.runtime == "node"
        assert commands.package_manager == "npm"
        assert commands.scaffold == "npm create vite@latest {folder} -- --template react -y"
        assert commands.install == "npm install tailwindcss @tailwindcss/vite"
        assert commands.dev == "npm run dev"

    def test_scaffold_requires_placeholder(self):
        with pytest.raises(ValidationError):
            CommandConfig(scaffold="npm create vite@latest my-app")

    def test_custom_scaffold_accepted(self):
        commands = CommandConfig(scaffold="pnpm create vite {folder}")
        assert commands.scaffold == "pnpm create vite {folder}"


# ---------------------------------------------------------------------------
# EditorConfig / SpinnerConfig
# ---------------------------------------------------------------------------


class TestEditorConfig:
    def test_defaults(self):
        editor = EditorConfig()
        assert editor.binary == "code"
        assert editor.entry_file == "src/App.jsx"


class TestSpinnerConfig:
    def test_defaults(self):
        spinner = SpinnerConfig()
        assert spinner.frames == SPINNER_FRAMES
        assert len(spinner.frames) == 10
        assert spinner.interval == 0.1

    def test_zero_interval_rejected(self):
        with pytest.raises(ValidationError):
            SpinnerConfig(interval=0)

    def test_negative_interval_rejected(self):
        with pytest.raises(ValidationError):
            SpinnerConfig(interval=-1.0)

    def test_empty_frames_rejected(self):
        with pytest.raises(ValidationError):
            SpinnerConfig(frames=())

    def test_custom_frames(self):
        spinner = SpinnerConfig(frames=("-", "\\", "|", "/"))
        assert spinner.frames == ("-", "\\", "|", "/")


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.base_dir == Path(".")
        assert isinstance(config.commands, CommandConfig)
        assert isinstance(config.editor, EditorConfig)
        assert isinstance(config.spinner, SpinnerConfig)

    def test_scaffold_command_substitutes_folder(self):
        config = Config()
        assert (
            config.scaffold_command("my-app")
            == "npm create vite@latest my-app -- --template react -y"
        )

    def test_scaffold_command_keeps_other_braces(self):
        config = Config(commands=CommandConfig(scaffold="echo {folder} {x}"))
        assert config.scaffold_command("demo") == "echo demo {x}"


class TestFromEnv:
    def test_no_env_gives_defaults(self, clean_env):
        config = Config.from_env()
        assert config == Config()

    def test_overrides(self, clean_env, tmp_path: Path):
        clean_env.setenv("VITESTRAP_BASE_DIR", str(tmp_path))
        clean_env.setenv("VITESTRAP_SCAFFOLD_COMMAND", "yarn create vite {folder}")
        clean_env.setenv("VITESTRAP_INSTALL_COMMAND", "yarn add tailwindcss")
        clean_env.setenv("VITESTRAP_DEV_COMMAND", "yarn dev")
        clean_env.setenv("VITESTRAP_EDITOR", "codium")
        clean_env.setenv("VITESTRAP_SPINNER_INTERVAL", "0.25")

        config = Config.from_env()

        assert config.base_dir == tmp_path
        assert config.commands.scaffold == "yarn create vite {folder}"
        assert config.commands.install == "yarn add tailwindcss"
        assert config.commands.dev == "yarn dev"
        assert config.editor.binary == "codium"
        assert config.spinner.interval == 0.25

    def test_empty_values_ignored(self, clean_env):
        clean_env.setenv("VITESTRAP_DEV_COMMAND", "")
        assert Config.from_env().commands.dev == "npm run dev"

    def test_invalid_scaffold_rejected(self, clean_env):
        clean_env.setenv("VITESTRAP_SCAFFOLD_COMMAND", "npm create vite")
        with pytest.raises(ValidationError):
            Config.from_env()

    @pytest.mark.parametrize("value", ["fast", "0", "-0.5"])
    def test_invalid_spinner_interval_rejected(self, clean_env, value):
        clean_env.setenv("VITESTRAP_SPINNER_INTERVAL", value)
        with pytest.raises(ValidationError):
            Config.from_env()
