"""Tests for init command."""

from pathlib import Path

import yaml
from typer.testing import CliRunner

from scaffoldr_cli.main import app

runner = CliRunner()


def flat(output):
    return " ".join(output.split())


# =============================================================================
# Basic Functionality Tests
# =============================================================================


def test_init_creates_descriptor(tmp_path, monkeypatch):
    """Test init command creates scaffold.yaml with defaults."""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0
    data = yaml.safe_load(Path("scaffold.yaml").read_text())
    assert data == {
        "language_version": 21,
        "framework_version": "3.2.0",
        "dependencies": [{"web": "compile"}, {"test": "test"}],
        "test_platform": "junit",
        "dsl": "kotlin",
    }
    assert "Created scaffold.yaml" in result.stdout
    assert "Next steps" in result.stdout


def test_init_with_custom_output(tmp_path, monkeypatch):
    """Test init with custom output path."""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init", "--output", "custom.yaml"])
    assert result.exit_code == 0
    assert Path("custom.yaml").exists()


def test_init_with_options(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(
        app,
        [
            "init",
            "--java", "17",
            "--boot", "3.3.0",
            "--dep", "data-jpa",
            "--dep", "org.postgresql:postgresql",
            "--test-dep", "test",
            "--test-platform", "testng",
            "--dsl", "groovy",
            "--group", "com.example",
        ],
    )
    assert result.exit_code == 0
    data = yaml.safe_load(Path("scaffold.yaml").read_text())
    assert data["language_version"] == 17
    assert data["framework_version"] == "3.3.0"
    assert data["dependencies"] == [
        {"data-jpa": "compile"},
        {"org.postgresql:postgresql": "compile"},
        {"test": "test"},
    ]
    assert data["test_platform"] == "testng"
    assert data["dsl"] == "groovy"
    assert data["project"] == {"group": "com.example", "version": "0.0.1-SNAPSHOT"}


def test_init_plain_project(tmp_path, monkeypatch):
    """A plain project has no framework and no dependencies."""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init", "--plain", "--dep", "web"])
    assert result.exit_code == 0
    data = yaml.safe_load(Path("scaffold.yaml").read_text())
    assert "framework_version" not in data
    assert data["dependencies"] == []


def test_init_defaults_from_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SCAFFOLDR_DEFAULT_JAVA_VERSION", "17")
    monkeypatch.setenv("SCAFFOLDR_DEFAULT_DSL", "groovy")
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0
    data = yaml.safe_load(Path("scaffold.yaml").read_text())
    assert data["language_version"] == 17
    assert data["dsl"] == "groovy"


# =============================================================================
# Overwrite Handling
# =============================================================================


def test_init_existing_file_no_force(tmp_path, monkeypatch):
    """Test init with existing file without force."""
    monkeypatch.chdir(tmp_path)
    Path("scaffold.yaml").write_text("existing")
    result = runner.invoke(app, ["init"], input="n\n")
    assert result.exit_code == 0
    assert Path("scaffold.yaml").read_text() == "existing"
    assert "Cancelled" in result.stdout


def test_init_existing_file_confirmed(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path("scaffold.yaml").write_text("existing")
    result = runner.invoke(app, ["init"], input="y\n")
    assert result.exit_code == 0
    assert "language_version" in Path("scaffold.yaml").read_text()


def test_init_with_force(tmp_path, monkeypatch):
    """Test init with force flag."""
    monkeypatch.chdir(tmp_path)
    Path("scaffold.yaml").write_text("existing")
    result = runner.invoke(app, ["init", "--force"])
    assert result.exit_code == 0
    assert "language_version" in Path("scaffold.yaml").read_text()


# =============================================================================
# Error Handling
# =============================================================================


def test_init_unsupported_java_version(tmp_path, monkeypatch):
    """Nothing is written when the descriptor could not be rendered."""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init", "--java", "9"])
    assert result.exit_code == 1
    assert "language_version" in flat(result.stdout)
    assert not Path("scaffold.yaml").exists()


def test_init_unsupported_test_platform(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init", "--test-platform", "spock"])
    assert result.exit_code == 1
    assert "Invalid option 'test platform'" in flat(result.stdout)
    assert not Path("scaffold.yaml").exists()


def test_init_invalid_dependency(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init", "--dep", "not a dep"])
    assert result.exit_code == 1
    assert "Invalid dependency coordinate" in flat(result.stdout)


def test_init_old_java_warns(tmp_path, monkeypatch):
    """Spring Boot 3 on Java 11 is written but flagged."""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init", "--java", "11"])
    assert result.exit_code == 0
    assert "requires Java 17" in flat(result.stdout)
