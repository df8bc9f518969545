"""Integration tests for the wizard-then-scaffold pipeline.

These tests drive the real wizard (with scripted answers), the real template
catalog and the real writer against a temporary working directory, and
verify the generated scanner directory on disk.

No Access Analyzer API is required: the endpoint is left unconfigured, so
the name lookup degrades to a warning exactly as it would offline.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from nwx.cli import main
from nwx.config import Config
from nwx.models import Language, ScanType
from nwx.scaffolder import ScaffoldWriter, TemplateCatalog
from nwx.workflow import ScannerCreationWorkflow

EXPECTED_GO_FILES = [
    "scannerSpecification.json",
    "Dockerfile",
    "README.md",
    "config/config.example.json",
    "aws-s3-source-type.json",
    "go.mod",
    "scanner.go",
]


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NWX_CONFIG_DIR", str(tmp_path / ".nwx"))
    return tmp_path


@pytest.mark.integration
class TestScaffoldEndToEnd:
    """Run the wizard and check the scaffold it leaves behind."""

    def test_aws_s3_go_scanner(self, workdir, scripted, answers, recording_console) -> None:
        prompter = scripted(answers("aws-s3", language="go", scan_types=["access"]))
        workflow = ScannerCreationWorkflow(
            Config(config_dir=workdir / ".nwx"), prompter=prompter, console=recording_console
        )
        record = workflow.run()

        assert record.output_dir == "./aws-s3"
        scanner_dir = workdir / "aws-s3"
        for relative in EXPECTED_GO_FILES:
            assert (scanner_dir / relative).is_file(), f"Missing {relative}"
        assert sorted(p.name for p in scanner_dir.iterdir()) == sorted(
            ["config", *[f for f in EXPECTED_GO_FILES if "/" not in f]]
        )

        go_mod = (scanner_dir / "go.mod").read_text(encoding="utf-8")
        assert go_mod.splitlines()[0] == "module aws-s3-scanner"

        scanner_go = (scanner_dir / "scanner.go").read_text(encoding="utf-8")
        assert "type AwsS3Scanner struct" in scanner_go

        spec = json.loads((scanner_dir / "scannerSpecification.json").read_text(encoding="utf-8"))
        assert spec["name"] == "AWS_S3"
        assert "accessScanConfig" in spec
        assert "sensitiveDataScanConfig" not in spec
        assert set(spec["outputSchema"]) == {"access"}

        source_type = json.loads(
            (scanner_dir / "aws-s3-source-type.json").read_text(encoding="utf-8")
        )
        assert source_type["scannerImage"] == "access-analyzer/aws-s3-scanner:latest"

        output = recording_console.export_text()
        assert "Could not fetch existing scanners" in output
        assert "Scanner files generated successfully!" in output

    def test_cancellation_via_cli_leaves_no_directory(
        self, workdir, scripted, answers, monkeypatch, capsys
    ) -> None:
        prompter = scripted(answers("aws-s3", confirm=False))
        monkeypatch.setattr("nwx.wizard.engine.QuestionaryPrompter", lambda: prompter)

        assert main(["aa", "scanner", "create"]) == 1
        assert "Scanner creation cancelled by user" in capsys.readouterr().out
        assert not (workdir / "aws-s3").exists()

    @pytest.mark.parametrize("language", list(Language))
    def test_rewrite_is_byte_identical(
        self, workdir, make_record, recording_console, language
    ) -> None:
        record = make_record(
            language=language,
            supported_scan_types=[ScanType.ACCESS, ScanType.SENSITIVE_DATA],
            output_dir=str(workdir / "out"),
        )
        writer = ScaffoldWriter(console=recording_console)

        first_paths = writer.write(record.output_dir, TemplateCatalog().render(record))
        first = {p: p.read_bytes() for p in first_paths}
        second_paths = writer.write(record.output_dir, TemplateCatalog().render(record))
        second = {p: p.read_bytes() for p in second_paths}

        assert first == second
        assert len(first) == 7
