"""
Tests for resumed.config module.
"""

from pathlib import Path

import pytest

from resumed.config import (
    Config,
    LoggingConfig,
    RenderConfig,
    find_config_file,
    load_config,
)
from resumed.errors import ConfigurationError


class TestConfigDataclasses:
    """Tests for config dataclass structures."""

    def test_default_config(self):
        config = Config()

        assert config.render.output == "resume.html"
        assert config.render.browser_bin is None
        assert config.render.timeout == 30.0
        assert config.logging.level == "WARNING"
        assert config.logging.log_file is None
        assert config.config_path is None

    def test_config_from_dict(self):
        config = Config.from_dict(
            {
                "render": {"output": "cv.pdf", "browser_bin": "/opt/chrome", "timeout": 5},
                "logging": {"level": "DEBUG", "log_file": "resumed.log"},
            }
        )

        assert config.render == RenderConfig(output="cv.pdf", browser_bin="/opt/chrome", timeout=5.0)
        assert config.logging == LoggingConfig(level="DEBUG", log_file="resumed.log")

    def test_blank_browser_bin_means_default(self):
        config = Config.from_dict({"render": {"browser_bin": ""}})
        assert config.render.browser_bin is None

    @pytest.mark.parametrize("timeout", [-1, "soon", True])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ConfigurationError):
            Config.from_dict({"render": {"timeout": timeout}})

    @pytest.mark.parametrize(
        "data",
        [
            {"render": "x"},
            {"logging": 3},
            {"render": {"output": 5}},
            {"render": {"browser_bin": 1}},
            {"logging": {"level": 10}},
            {"logging": {"log_file": True}},
        ],
    )
    def test_wrong_types_rejected(self, data):
        with pytest.raises(ConfigurationError):
            Config.from_dict(data)


class TestFindConfigFile:
    def test_none_found(self, workdir: Path):
        assert find_config_file() is None

    def test_found_in_cwd(self, workdir: Path):
        (workdir / "resumed.toml").write_text("", encoding="utf-8")
        assert find_config_file() == workdir / "resumed.toml"

    def test_explicit_missing(self, workdir: Path):
        with pytest.raises(ConfigurationError):
            find_config_file(workdir / "missing.toml")


class TestLoadConfig:
    def test_defaults_without_file(self, workdir: Path):
        assert load_config() == Config()

    def test_loads_toml(self, workdir: Path):
        path = workdir / "custom.toml"
        path.write_text('[render]\noutput = "out.pdf"\n\n[logging]\nlevel = "INFO"\n', encoding="utf-8")

        config = load_config(path)

        assert config.render.output == "out.pdf"
        assert config.logging.level == "INFO"
        assert config.config_path == path

    def test_invalid_toml(self, workdir: Path):
        path = workdir / "resumed.toml"
        path.write_text("render = [", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config()
        assert exc_info.value.exit_code == 2
