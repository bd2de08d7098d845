# tests/test_config.py
"""Tests for TemplateSettings and TOML configuration loading."""

from pathlib import Path

import jinja2
import pytest

from sparsetpl.config.loader import find_config_file, load_settings, settings_from_mapping
from sparsetpl.config.settings import TemplateSettings, UndefinedPolicy
from sparsetpl.core.environment import create_environment, default_environment
from sparsetpl.exceptions import ConfigError


class TestUndefinedPolicy:

    def test_from_string_is_case_insensitive(self):
        assert UndefinedPolicy.from_string("STRICT") == UndefinedPolicy.STRICT

    def test_invalid_value_falls_back_to_default(self):
        assert UndefinedPolicy.from_string("bogus") == UndefinedPolicy.DEFAULT

    def test_empty_value_is_default(self):
        assert UndefinedPolicy.from_string(None) == UndefinedPolicy.DEFAULT


class TestLoadSettings:
    """Config file discovery and parsing."""

    def test_defaults_without_config_file(self, tmp_path):
        assert load_settings(tmp_path) == TemplateSettings()

    def test_reads_tool_table_from_pyproject(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "demo"\n\n[tool.sparsetpl]\nundefined = "strict"\nautoescape = true\n'
        )
        settings = load_settings(tmp_path)
        assert settings.undefined == UndefinedPolicy.STRICT
        assert settings.autoescape is True
        assert settings.strip is True

    def test_dedicated_file_takes_precedence(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.sparsetpl]\nencoding = "latin-1"\n')
        (tmp_path / ".sparsetpl.toml").write_text('encoding = "utf-16"\nstrip = false\n')
        assert find_config_file(tmp_path) == tmp_path / ".sparsetpl.toml"
        settings = load_settings(tmp_path)
        assert settings.encoding == "utf-16"
        assert settings.strip is False

    def test_unknown_keys_are_ignored(self, tmp_path):
        (tmp_path / "sparsetpl.toml").write_text('colour = "blue"\nencoding = "ascii"\n')
        assert load_settings(tmp_path) == TemplateSettings(encoding="ascii")

    def test_malformed_toml_raises_config_error(self, tmp_path):
        (tmp_path / "sparsetpl.toml").write_text("strip = = true\n")
        with pytest.raises(ConfigError):
            load_settings(tmp_path)

    def test_wrong_value_type_raises_config_error(self):
        with pytest.raises(ConfigError, match="strip"):
            settings_from_mapping({"strip": "yes"})

    def test_uses_cwd_by_default(self, tmp_path, monkeypatch):
        (tmp_path / "sparsetpl.toml").write_text("autoescape = true\n")
        monkeypatch.chdir(tmp_path)
        assert load_settings().autoescape is True


class TestEnvironment:
    """Settings flow into the Jinja2 environment."""

    def test_strict_policy_selects_strict_undefined(self):
        env = create_environment(TemplateSettings(undefined=UndefinedPolicy.STRICT))
        assert env.undefined is jinja2.StrictUndefined

    def test_last_is_registered(self):
        assert "last" in create_environment().globals

    def test_default_environment_is_shared_per_settings(self):
        assert default_environment() is default_environment(TemplateSettings())
        assert default_environment(TemplateSettings(autoescape=True)) is not default_environment()

    def test_autoescape(self):
        env = create_environment(TemplateSettings(autoescape=True))
        assert env.from_string("{{ data }}").render(data="<b>") == "&lt;b&gt;"
