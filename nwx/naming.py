"""Name derivation rules shared by the wizard, the templates and the generated code.

A scanner is identified by a kebab-case name (``aws-s3``) and a version
(``1.0.0``).  Everything else -- display names, type identifiers, queue and
table names, the container image tag -- is derived from those two values
with the functions below.  The generated scanner stubs recompute the queue
and table names at their own runtime, so :func:`queue_name` and
:func:`table_name` must stay in lockstep with the templates under
``scaffolder/templates/``.

Examples::

    displayify("aws-s3")                  -> "Aws S3"
    pascalize("my-scanner")               -> "MyScanner"
    upper_snake("aws-s3")                 -> "AWS_S3"
    queue_name("acme", "1.0.0", "access") -> "acme-1.0.0-scan-access"
    queue_name("acme", "1.0.0", "test")   -> "acme-1.0.0-test"
    table_name("Acme", "1.0.0")           -> "acme_1_0_0_access"
"""

from __future__ import annotations

import re

SEPARATOR = "-"
TEST_QUEUE = "test"

_WORD_START = re.compile(r"(?<!\w)(\w)")


def title_words(text: str) -> str:
    """Upper-case the first character of every word, leaving the rest untouched.

    Unlike :meth:`str.title`, letters following a digit are not capitalised
    and existing capitals are preserved (``"s3x"`` stays ``"S3x"``).
    """
    return _WORD_START.sub(lambda m: m.group(1).upper(), text)


def displayify(name: str) -> str:
    """Suggested human-readable name: separators become spaces, words are titled."""
    return title_words(name.replace(SEPARATOR, " "))


def pascalize(name: str) -> str:
    """Type/class identifier used by every language template (``my-scanner`` -> ``MyScanner``)."""
    return "".join(title_words(part) for part in name.split(SEPARATOR) if part)


def upper_snake(name: str) -> str:
    """Specification name stored in ``scannerSpecification.json`` (``aws-s3`` -> ``AWS_S3``)."""
    return name.replace(SEPARATOR, "_").upper()


def queue_name(scanner_name: str, version: str, scan_type: str) -> str:
    """Message queue a scanner consumes for *scan_type* (or ``"test"`` for connection tests)."""
    if scan_type == TEST_QUEUE:
        return f"{scanner_name}-{version}-{TEST_QUEUE}"
    return f"{scanner_name}-{version}-scan-{scan_type}"


def table_name(scanner_name: str, version: str) -> str:
    """Collection-store table for access scan results."""
    return f"{scanner_name}_{version.replace('.', '_')}_access".lower()


def scanner_image(name: str) -> str:
    """Container image tag registered with the source type."""
    return f"access-analyzer/{name}-scanner:latest"
