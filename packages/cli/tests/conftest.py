"""Pytest configuration and fixtures for CLI tests."""
import pytest
from typer.testing import CliRunner

from scaffoldr_common import get_settings


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every command with default settings."""
    for var in (
        "SCAFFOLDR_LOG_LEVEL",
        "SCAFFOLDR_LOG_JSON",
        "SCAFFOLDR_TEMPLATE_DIR",
        "SCAFFOLDR_DEFAULT_JAVA_VERSION",
        "SCAFFOLDR_DEFAULT_BOOT_VERSION",
        "SCAFFOLDR_DEFAULT_DSL",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_descriptor(tmp_path, monkeypatch):
    """Write scaffold.yaml into a fresh working directory."""
    monkeypatch.chdir(tmp_path)
    content = """language_version: 21
framework_version: "3.2.0"
dependencies:
  - web: compile
  - test: test
test_platform: junit
"""
    path = tmp_path / "scaffold.yaml"
    path.write_text(content)
    return "scaffold.yaml"

