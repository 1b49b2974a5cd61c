"""Pytest configuration and fixtures for SDK tests."""
import pytest

from scaffoldr_common import get_settings
from scaffoldr_schema import BuildDescriptor


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep SCAFFOLDR_* variables from the outer environment out of the tests."""
    monkeypatch.delenv("SCAFFOLDR_TEMPLATE_DIR", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def web_descriptor():
    """Java 21 / Spring Boot 3.2.0 web service with JUnit 5"""
    return BuildDescriptor(
        language_version=21,
        framework_version="3.2.0",
        dependencies=[{"web": "compile"}, {"test": "test"}],
        test_platform="junit",
    )


@pytest.fixture
def plain_descriptor():
    """Plain Java 17 project without the framework plugin"""
    return BuildDescriptor(language_version=17)


@pytest.fixture
def full_descriptor():
    """Descriptor exercising every scope and optional section"""
    return BuildDescriptor(
        language_version=17,
        framework_version="3.3.0",
        dependencies=[
            "web",
            {"org.postgresql:postgresql": "runtime"},
            {"org.projectlombok:lombok:1.18.30": "compile_only"},
            {"test": "test"},
        ],
        test_platform="testng",
        project={"group": "com.example", "version": "0.0.1-SNAPSHOT", "description": "Demo project"},
        docker={"port": 9090, "build_tool": "maven"},
    )


@pytest.fixture
def sample_descriptor_file(tmp_path):
    """Create a sample scaffold.yaml for testing."""
    content = """
language_version: 21
framework_version: "3.2.0"
dependencies:
  - web: compile
  - test: test
test_platform: junit
"""
    path = tmp_path / "scaffold.yaml"
    path.write_text(content.strip() + "\n")
    return str(path)


@pytest.fixture
def descriptor_with_env_vars(tmp_path):
    """Create a scaffold.yaml that references environment variables."""
    content = """
language_version: ${JAVA_VERSION}
framework_version: ${BOOT_VERSION:-3.2.0}
dependencies:
  - web: compile
"""
    path = tmp_path / "scaffold.yaml"
    path.write_text(content.strip() + "\n")
    return str(path)
