"""Tests for vcardctl/core/config.py - Configuration loading."""

import logging

import pytest

pytestmark = pytest.mark.unit


class TestConfig:
    """Test Config dataclass."""

    def test_config_default_values(self):
        """Config has sensible defaults."""
        from vcardctl.core.config import Config

        config = Config()
        assert config.output.format == "table"
        assert config.check.fail_fast is False
        assert config.check.skip_delimiters is True
        assert config.source_path is None

    def test_config_from_dict_empty(self):
        """Config.from_dict handles empty dict."""
        from vcardctl.core.config import Config

        config = Config.from_dict({})
        assert config.output.format == "table"

    def test_config_from_dict_output(self):
        """Config.from_dict parses output section."""
        from vcardctl.core.config import Config

        config = Config.from_dict({"output": {"format": "JSON"}})
        assert config.output.format == "json"

    def test_config_from_dict_unknown_format(self, caplog):
        """Unknown output formats are ignored with a warning."""
        from vcardctl.core.config import Config

        with caplog.at_level(logging.WARNING, logger="vcardctl.core.config"):
            config = Config.from_dict({"output": {"format": "xml"}})
        assert config.output.format == "table"
        assert "xml" in caplog.text

    def test_config_from_dict_check(self):
        """Config.from_dict parses check section."""
        from vcardctl.core.config import Config

        config = Config.from_dict({"check": {"fail_fast": True, "skip_delimiters": False}})
        assert config.check.fail_fast is True
        assert config.check.skip_delimiters is False

    def test_config_from_dict_ignores_non_dict_sections(self):
        from vcardctl.core.config import Config

        config = Config.from_dict({"output": "json", "check": ["fail_fast"]})
        assert config.output.format == "table"
        assert config.check.fail_fast is False

    def test_config_from_dict_stores_source_path(self, tmp_path):
        """Config.from_dict stores source path."""
        from vcardctl.core.config import Config

        path = tmp_path / ".vcardctl.yaml"
        config = Config.from_dict({}, source_path=path)
        assert config.source_path == path


class TestLoadConfig:
    """Test load_config function."""

    def test_load_config_returns_defaults_when_no_file(self, tmp_path):
        """load_config returns defaults when no config file found."""
        from vcardctl.core.config import load_config

        config = load_config(use_cache=False)
        assert config.source_path is None
        assert config.output.format == "table"

    def test_load_config_from_cwd(self, tmp_path):
        """load_config finds .vcardctl.yaml in current directory."""
        from vcardctl.core.config import load_config

        (tmp_path / ".vcardctl.yaml").write_text("output:\n  format: json\n")
        config = load_config(use_cache=False)
        assert config.output.format == "json"
        assert config.source_path == tmp_path / ".vcardctl.yaml"

    def test_load_config_from_explicit_path(self, tmp_path):
        """load_config uses explicit path when provided."""
        from vcardctl.core.config import load_config

        path = tmp_path / "custom.yaml"
        path.write_text("check:\n  fail_fast: true\n")
        config = load_config(path=path, use_cache=False)
        assert config.check.fail_fast is True

    def test_load_config_searches_parent_dirs(self, tmp_path, monkeypatch):
        """load_config searches parent directories."""
        from vcardctl.core.config import load_config

        (tmp_path / ".vcardctl.yaml").write_text("output:\n  format: json\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert load_config(use_cache=False).output.format == "json"

    def test_load_config_stops_at_git_root(self, tmp_path, monkeypatch):
        """load_config stops searching at git root."""
        from vcardctl.core.config import load_config

        (tmp_path / ".vcardctl.yaml").write_text("output:\n  format: json\n")
        repo = tmp_path / "repo"
        (repo / ".git").mkdir(parents=True)
        monkeypatch.chdir(repo)
        monkeypatch.setenv("HOME", str(tmp_path / "nohome"))
        assert load_config(use_cache=False).source_path is None

    def test_load_config_falls_back_to_home(self, tmp_path, monkeypatch):
        from vcardctl.core.config import load_config

        home = tmp_path / "home"
        home.mkdir()
        (home / ".vcardctl.yaml").write_text("check:\n  fail_fast: true\n")
        work = tmp_path / "work"
        (work / ".git").mkdir(parents=True)
        monkeypatch.chdir(work)
        monkeypatch.setenv("HOME", str(home))
        assert load_config(use_cache=False).check.fail_fast is True

    def test_load_config_caching(self, tmp_path):
        """load_config caches result."""
        from vcardctl.core.config import load_config

        config_file = tmp_path / ".vcardctl.yaml"
        config_file.write_text("output:\n  format: json\n")
        first = load_config()
        config_file.write_text("output:\n  format: table\n")
        assert load_config() is first
        assert load_config().output.format == "json"

    def test_clear_config_cache(self, tmp_path):
        from vcardctl.core.config import clear_config_cache, load_config

        config_file = tmp_path / ".vcardctl.yaml"
        config_file.write_text("output:\n  format: json\n")
        load_config()
        config_file.write_text("output:\n  format: table\n")
        clear_config_cache()
        assert load_config().output.format == "table"

    def test_load_config_handles_yaml_error(self, tmp_path):
        """load_config returns defaults on YAML parse error."""
        from vcardctl.core.config import load_config

        (tmp_path / ".vcardctl.yaml").write_text("output: [unclosed\n")
        config = load_config(use_cache=False)
        assert config.output.format == "table"

    def test_load_config_handles_scalar_yaml(self, tmp_path):
        from vcardctl.core.config import load_config

        (tmp_path / ".vcardctl.yaml").write_text("just a string\n")
        config = load_config(use_cache=False)
        assert config.output.format == "table"
        assert config.source_path == tmp_path / ".vcardctl.yaml"
