"""Tests for render command."""
from pathlib import Path

from typer.testing import CliRunner

from scaffoldr_cli.main import app

runner = CliRunner()

EXPECTED_BUILD = """plugins {
    java
    id("org.springframework.boot") version "3.2.0"
}

java {
    sourceCompatibility = JavaVersion.VERSION_21
}

dependencies {
    implementation("org.springframework.boot:spring-boot-starter-web")
    testImplementation("org.springframework.boot:spring-boot-starter-test")
}

tasks.test {
    useJUnitPlatform()
}
"""


def flat(output):
    return " ".join(output.split())


def test_render_writes_build_script(sample_descriptor):
    result = runner.invoke(app, ["render"])
    assert result.exit_code == 0
    assert Path("build.gradle.kts").read_text() == EXPECTED_BUILD
    assert "Wrote build.gradle.kts" in flat(result.stdout)
    assert not Path("settings.gradle.kts").exists()


def test_render_stdout(sample_descriptor):
    """--stdout prints the build script without writing files."""
    result = runner.invoke(app, ["render", sample_descriptor, "--stdout"])
    assert result.exit_code == 0
    assert result.stdout == EXPECTED_BUILD
    assert not Path("build.gradle.kts").exists()


def test_render_all_artifacts(sample_descriptor):
    result = runner.invoke(
        app, ["render", "-o", "out", "--name", "demo", "--dockerfile"]
    )
    assert result.exit_code == 0
    assert Path("out/build.gradle.kts").read_text() == EXPECTED_BUILD
    assert Path("out/settings.gradle.kts").read_text() == 'rootProject.name = "demo"\n'
    assert Path("out/Dockerfile").read_text().startswith("FROM eclipse-temurin:21-jdk AS builder\n")


def test_render_existing_file_cancelled(sample_descriptor):
    Path("build.gradle.kts").write_text("// keep me\n")
    result = runner.invoke(app, ["render"], input="n\n")
    assert result.exit_code == 0
    assert "Cancelled" in result.stdout
    assert Path("build.gradle.kts").read_text() == "// keep me\n"


def test_render_existing_file_force(sample_descriptor):
    Path("build.gradle.kts").write_text("// keep me\n")
    result = runner.invoke(app, ["render", "--force"])
    assert result.exit_code == 0
    assert Path("build.gradle.kts").read_text() == EXPECTED_BUILD


def test_render_unsupported_java_version(tmp_path, monkeypatch):
    """An unsupported version fails without writing anything."""
    monkeypatch.chdir(tmp_path)
    Path("scaffold.yaml").write_text("language_version: 9\n")
    result = runner.invoke(app, ["render"])
    assert result.exit_code == 1
    assert "Invalid option 'language_version'" in flat(result.stdout)
    assert not Path("build.gradle.kts").exists()


def test_render_file_not_found(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["render", "missing.yaml"])
    assert result.exit_code == 1
    assert "not found" in flat(result.stdout)


def test_render_invalid_project_name(sample_descriptor):
    result = runner.invoke(app, ["render", "--name", "Demo_App"])
    assert result.exit_code == 1
    assert "Invalid project name" in flat(result.stdout)
    assert not Path("build.gradle.kts").exists()


def test_render_dockerfile_requires_framework(tmp_path, monkeypatch):
    """A plain java build cannot be packaged into the container image."""
    monkeypatch.chdir(tmp_path)
    Path("scaffold.yaml").write_text("language_version: 21\n")
    result = runner.invoke(app, ["render", "--dockerfile"])
    assert result.exit_code == 1
    assert "Invalid option 'docker'" in flat(result.stdout)
    assert not Path("build.gradle.kts").exists()
    assert not Path("Dockerfile").exists()
