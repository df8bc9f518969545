"""nwx scaffolder -- renders and writes Access Analyzer scanner scaffolds.

Quick usage::

    from nwx.scaffolder import ScaffoldWriter, TemplateCatalog

    artifacts = TemplateCatalog().render(record)
    ScaffoldWriter().write(record.output_dir, artifacts)
"""

from nwx.scaffolder.catalog import LANGUAGE_TARGETS, Artifact, LanguageTarget, TemplateCatalog
from nwx.scaffolder.templates import TemplateRenderer
from nwx.scaffolder.writer import ScaffoldWriter

__all__ = [
    "LANGUAGE_TARGETS",
    "Artifact",
    "LanguageTarget",
    "ScaffoldWriter",
    "TemplateCatalog",
    "TemplateRenderer",
]
