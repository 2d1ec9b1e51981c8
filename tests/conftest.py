"""Test configuration and fixtures for resumed tests."""

import json
import logging
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add src to path for development testing
_src_dir = Path(__file__).parent.parent / "src"
if _src_dir.exists():
    sys.path.insert(0, str(_src_dir))

from resumed.themes import register_theme, reset_default_registry  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"

FIXED_MARKUP = "<html></html>"


def load_json_fixture(name: str) -> dict:
    """Load a JSON fixture file."""
    with open(FIXTURES_DIR / name, "r", encoding="utf-8") as f:
        return json.load(f)


def write_resume(path: Path, data: dict) -> Path:
    """Write a resume document for a test."""
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ==============================================================================
# Shared pytest fixtures
# ==============================================================================

@pytest.fixture(autouse=True)
def fresh_registry():
    """Give every test its own default theme registry."""
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the handlers main() installs on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fixed_theme():
    """A theme named ``t`` that always renders ``<html></html>``."""
    theme = SimpleNamespace(render=lambda resume: FIXED_MARKUP)
    register_theme("t", theme)
    return theme


@pytest.fixture
def sample_resume() -> dict:
    """Return a small resume that conforms to the schema."""
    return load_json_fixture("valid.json")


@pytest.fixture
def invalid_resume() -> dict:
    """Return a resume with two schema violations."""
    return load_json_fixture("invalid.json")
