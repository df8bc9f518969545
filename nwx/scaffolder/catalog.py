"""Template catalog: which artifacts a scaffold contains, and how each is rendered.

Every scaffold contains five language-independent artifacts plus the
build manifest and source stub of exactly one :class:`LanguageTarget`.
Targets are registered with :func:`register_target`; supporting a new
language means adding one subclass and one template directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from nwx import naming
from nwx.errors import ValidationError
from nwx.models import Language, ScannerCreationData

from .specification import (
    SPECIFICATION_FILE,
    build_config_example,
    build_scanner_specification,
    build_source_type,
    source_type_file,
    to_json,
)
from .templates import TemplateRenderer

CONFIG_EXAMPLE_FILE = "config/config.example.json"


@dataclass(frozen=True)
class Artifact:
    """A rendered file: POSIX path relative to the output directory, and its text."""

    path: str
    content: str


# ---------------------------------------------------------------------------
# Language targets
# ---------------------------------------------------------------------------


class LanguageTarget:
    """Artifacts specific to one implementation language."""

    language: ClassVar[Language]
    template_dir: ClassVar[str]
    manifest_file: ClassVar[str]
    source_file: ClassVar[str]
    run_command: ClassVar[str]

    def artifacts(self, renderer: TemplateRenderer, context: dict[str, Any]) -> list[Artifact]:
        """Render the Dockerfile, the build manifest and the scanner stub."""
        return [
            Artifact("Dockerfile", renderer.render(f"{self.template_dir}/Dockerfile.j2", context)),
            Artifact(
                self.manifest_file,
                renderer.render(f"{self.template_dir}/{self.manifest_file}.j2", context),
            ),
            Artifact(
                self.source_file,
                renderer.render(f"{self.template_dir}/{self.source_file}.j2", context),
            ),
        ]


LANGUAGE_TARGETS: dict[Language, LanguageTarget] = {}


def register_target(cls: type[LanguageTarget]) -> type[LanguageTarget]:
    LANGUAGE_TARGETS[cls.language] = cls()
    return cls


@register_target
class PythonTarget(LanguageTarget):
    language = Language.PYTHON
    template_dir = "python"
    manifest_file = "requirements.txt"
    source_file = "scanner.py"
    run_command = "python scanner.py"


@register_target
class JavaScriptTarget(LanguageTarget):
    language = Language.JAVASCRIPT
    template_dir = "javascript"
    manifest_file = "package.json"
    source_file = "scanner.js"
    run_command = "npm start"


@register_target
class GoTarget(LanguageTarget):
    language = Language.GO
    template_dir = "go"
    manifest_file = "go.mod"
    source_file = "scanner.go"
    run_command = "go run scanner.go"


@register_target
class JavaTarget(LanguageTarget):
    language = Language.JAVA
    template_dir = "java"
    manifest_file = "pom.xml"
    source_file = "Scanner.java"
    run_command = "mvn package && java -jar target/scanner.jar"


@register_target
class CSharpTarget(LanguageTarget):
    language = Language.CSHARP
    template_dir = "csharp"
    manifest_file = "Scanner.csproj"
    source_file = "Scanner.cs"
    run_command = "dotnet run"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class TemplateCatalog:
    """Renders the complete, ordered artifact list for a scanner record."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    @staticmethod
    def target_for(language: Language | str) -> LanguageTarget:
        """Return the registered target for *language*.

        Raises:
            ValueError: If the language is unknown or has no registered target.
        """
        target = LANGUAGE_TARGETS.get(Language(language))
        if target is None:
            raise ValueError(f"no templates registered for language {language!r}")
        return target

    def build_context(self, record: ScannerCreationData) -> dict[str, Any]:
        """Build the Jinja2 template context from the scanner record."""
        target = self.target_for(record.language)
        upper_name = naming.upper_snake(record.name)
        return {
            "name": record.name,
            "display_name": record.display_name,
            "description": record.description,
            "version": record.version,
            "language": record.language.value,
            "pascal_name": naming.pascalize(record.name),
            "upper_name": upper_name,
            "image": naming.scanner_image(record.name),
            "scan_queue": naming.queue_name(upper_name, record.version, "access"),
            "test_queue": naming.queue_name(upper_name, record.version, naming.TEST_QUEUE),
            "table_name": naming.table_name(upper_name, record.version),
            "scan_types": [s.value for s in record.supported_scan_types],
            "auth_methods": [a.value for a in record.auth_methods],
            "specification_file": SPECIFICATION_FILE,
            "config_example_file": CONFIG_EXAMPLE_FILE,
            "source_type_file": source_type_file(record),
            "manifest_file": target.manifest_file,
            "source_file": target.source_file,
            "run_command": target.run_command,
        }

    def render(self, record: ScannerCreationData) -> list[Artifact]:
        """Render every artifact for *record*, language-independent ones first.

        Raises:
            ValidationError: If the record has not been fully populated by the wizard.
        """
        if not record.is_complete():
            raise ValidationError("cannot render an incomplete scanner record")

        target = self.target_for(record.language)
        context = self.build_context(record)
        dockerfile, manifest, source = target.artifacts(self.renderer, context)

        return [
            Artifact(SPECIFICATION_FILE, to_json(build_scanner_specification(record))),
            dockerfile,
            Artifact("README.md", self.renderer.render("common/README.md.j2", context)),
            Artifact(CONFIG_EXAMPLE_FILE, to_json(build_config_example(record))),
            Artifact(source_type_file(record), to_json(build_source_type(record))),
            manifest,
            source,
        ]
