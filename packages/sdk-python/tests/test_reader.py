"""Tests for reading rendered build scripts back into descriptors."""
import pytest

from scaffoldr_common import ParseError
from scaffoldr_schema import BuildDescriptor, BuildDsl, DependencyScope, TestPlatform
from scaffoldr_sdk import TemplateRenderer, detect_dsl, read_build_script


@pytest.fixture
def renderer():
    return TemplateRenderer()


class TestRoundTrip:
    def test_web_service(self, renderer, web_descriptor):
        descriptor = read_build_script(renderer.render_build_script(web_descriptor))
        assert descriptor.language_version == 21
        assert descriptor.framework_version == "3.2.0"
        assert descriptor.test_platform == TestPlatform.JUNIT
        assert descriptor.dsl == BuildDsl.KOTLIN
        assert [(d.coordinate, d.scope) for d in descriptor.dependencies] == [
            ("org.springframework.boot:spring-boot-starter-web", DependencyScope.COMPILE),
            ("org.springframework.boot:spring-boot-starter-test", DependencyScope.TEST),
        ]
        assert descriptor.docker is None

    @pytest.mark.parametrize("dsl", ["kotlin", "groovy"])
    def test_rerender_is_identical(self, renderer, full_descriptor, dsl):
        """Reading a script and rendering it again reproduces the script."""
        descriptor = BuildDescriptor.model_validate(
            {**full_descriptor.model_dump(), "dsl": dsl}
        )
        script = renderer.render_build_script(descriptor)
        again = read_build_script(script)
        assert again.dsl.value == dsl
        assert again.project == descriptor.project
        assert again.test_platform == TestPlatform.TESTNG
        assert renderer.render_build_script(again) == script

    def test_plain_project_without_tests(self, renderer):
        script = renderer.render_build_script(
            BuildDescriptor(language_version=8, test_platform="none")
        )
        descriptor = read_build_script(script)
        assert descriptor.language_version == 8
        assert descriptor.framework_version is None
        assert descriptor.dependencies == []
        assert descriptor.test_platform == TestPlatform.NONE

    def test_explicit_dsl(self, renderer, web_descriptor):
        script = renderer.render_build_script(web_descriptor)
        assert read_build_script(script, dsl="kotlin").dsl == BuildDsl.KOTLIN


class TestDetectDsl:
    def test_kotlin(self):
        assert detect_dsl("plugins {\n    java\n}\n") == BuildDsl.KOTLIN

    def test_groovy(self):
        assert detect_dsl("plugins {\n    id 'java'\n}\n") == BuildDsl.GROOVY

    def test_unknown(self):
        with pytest.raises(ParseError):
            detect_dsl("apply plugin: 'application'\n")


class TestParseErrors:
    def test_unrecognized_top_level_block(self):
        script = "plugins {\n    java\n}\n\nrepositories {\n    mavenCentral()\n}\n"
        with pytest.raises(ParseError) as exc_info:
            read_build_script(script)
        assert exc_info.value.line == 5
        assert "repositories" in str(exc_info.value)

    def test_unknown_plugin(self):
        script = (
            "plugins {\n    java\n"
            '    id("io.spring.dependency-management") version "1.1.4"\n}\n'
        )
        with pytest.raises(ParseError) as exc_info:
            read_build_script(script)
        assert exc_info.value.line == 3

    def test_unterminated_block(self):
        with pytest.raises(ParseError) as exc_info:
            read_build_script("plugins {\n    java\n")
        assert "Unterminated" in str(exc_info.value)

    def test_missing_source_compatibility(self):
        with pytest.raises(ParseError) as exc_info:
            read_build_script("plugins {\n    java\n}\n")
        assert "sourceCompatibility" in str(exc_info.value)

    def test_unknown_java_version_constant(self):
        script = "plugins {\n    java\n}\n\njava {\n    sourceCompatibility = JavaVersion.VERSION_99\n}\n"
        with pytest.raises(ParseError) as exc_info:
            read_build_script(script)
        assert "VERSION_99" in str(exc_info.value)

    def test_unknown_configuration(self):
        script = (
            'plugins {\n    java\n    id("org.springframework.boot") version "3.2.0"\n}\n\n'
            "java {\n    sourceCompatibility = JavaVersion.VERSION_21\n}\n\n"
            'dependencies {\n    annotationProcessor("org.projectlombok:lombok")\n}\n'
        )
        with pytest.raises(ParseError) as exc_info:
            read_build_script(script)
        assert exc_info.value.line == 11

    def test_dependencies_without_framework(self):
        script = (
            "plugins {\n    java\n}\n\n"
            "java {\n    sourceCompatibility = JavaVersion.VERSION_21\n}\n\n"
            'dependencies {\n    implementation("org.postgresql:postgresql")\n}\n'
        )
        with pytest.raises(ParseError) as exc_info:
            read_build_script(script)
        assert "framework_version" in str(exc_info.value)
