"""Pytest configuration and fixtures for schema tests."""
import pytest


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def minimal_descriptor_data():
    """Plain Java project: no framework, no dependencies"""
    return {"language_version": 17}


@pytest.fixture
def spring_descriptor_data():
    """Typical Spring Boot web service descriptor"""
    return {
        "language_version": 21,
        "framework_version": "3.2.0",
        "dependencies": [{"web": "compile"}, {"test": "test"}],
        "test_platform": "junit",
    }


@pytest.fixture
def full_descriptor_data():
    """Descriptor with every optional section"""
    return {
        "language_version": 17,
        "framework_version": "3.3.0",
        "dependencies": [
            "web",
            {"data-jpa": "compile"},
            {"coordinate": "org.postgresql:postgresql", "scope": "runtime"},
            {"org.projectlombok:lombok:1.18.30": "compile_only"},
            {"test": "test"},
        ],
        "test_platform": "testng",
        "dsl": "groovy",
        "project": {
            "group": "com.example",
            "version": "0.0.1-SNAPSHOT",
            "description": "Demo project",
        },
        "docker": {"port": 9090, "build_tool": "maven"},
    }
