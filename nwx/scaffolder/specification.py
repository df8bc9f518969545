"""Builders for the JSON artifacts of a scanner scaffold.

``scannerSpecification.json`` is a contract other Access Analyzer tooling
reads, so its shape is fixed here in Python rather than in a text template:
the builders return plain dicts and :func:`to_json` serialises them with
sorted keys and two-space indentation.
"""

from __future__ import annotations

import json
from typing import Any

from nwx import naming
from nwx.models import ScanType, ScannerCreationData

SPECIFICATION_FILE = "scannerSpecification.json"

HOST_ITEM: dict[str, Any] = {
    "key": "host",
    "label": "Host",
    "type": "text",
    "required": True,
    "placeholder": "example.com",
    "description": "Host to connect to",
}

ACCESS_SCAN_ITEM: dict[str, Any] = {
    "key": "scanDepth",
    "label": "Scan Depth",
    "type": "number",
    "required": False,
    "default": 10,
    "min": 1,
    "max": 100,
    "description": "Maximum scan depth",
}

SENSITIVE_DATA_SCAN_ITEM: dict[str, Any] = {
    "key": "maxFileSize",
    "label": "Max File Size (MB)",
    "type": "number",
    "required": False,
    "default": 100,
    "min": 1,
    "max": 1000,
    "description": "Maximum file size to scan",
}


def to_json(data: dict[str, Any]) -> str:
    """Serialise *data* deterministically (sorted keys, 2-space indent, trailing newline)."""
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# scannerSpecification.json
# ---------------------------------------------------------------------------


def build_scanner_specification(record: ScannerCreationData) -> dict[str, Any]:
    """Configuration schema the service uses to render connection and scan forms."""
    spec: dict[str, Any] = {
        "name": naming.upper_snake(record.name),
        "version": record.version,
        "connectionConfig": {"items": [dict(HOST_ITEM)]},
        "outputSchema": build_output_schema(record),
    }
    if record.has_scan_type(ScanType.ACCESS):
        spec["accessScanConfig"] = {"items": [dict(ACCESS_SCAN_ITEM)]}
    if record.has_scan_type(ScanType.SENSITIVE_DATA):
        spec["sensitiveDataScanConfig"] = {"items": [dict(SENSITIVE_DATA_SCAN_ITEM)]}
    return spec


def build_output_schema(record: ScannerCreationData) -> dict[str, Any]:
    """One three-column table definition per selected scan type."""
    schema: dict[str, Any] = {}
    if record.has_scan_type(ScanType.ACCESS):
        schema["access"] = {
            "columns": _result_columns(
                _column("resource_id", 255, "Unique identifier for the resource")
            )
        }
    if record.has_scan_type(ScanType.SENSITIVE_DATA):
        schema["sensitiveData"] = {
            "columns": _result_columns(
                _column("match_id", 36, "Unique identifier for the match")
            )
        }
    return schema


def _column(name: str, max_length: int, description: str) -> dict[str, Any]:
    return {
        "name": name,
        "type": "string",
        "maxLength": max_length,
        "nullable": False,
        "primaryKey": True,
        "description": description,
    }


def _result_columns(key_column: dict[str, Any]) -> list[dict[str, Any]]:
    return [
        _column("scan_id", 36, "Unique identifier for the scan run"),
        key_column,
        {
            "name": "scan_timestamp",
            "type": "timestamp",
            "nullable": False,
            "defaultValue": "CURRENT_TIMESTAMP",
            "description": "When this scan record was created",
        },
    ]


# ---------------------------------------------------------------------------
# config/config.example.json
# ---------------------------------------------------------------------------


def build_config_example(record: ScannerCreationData) -> dict[str, Any]:
    """Example values matching the specification's config blocks."""
    config: dict[str, Any] = {"connectionConfig": {"host": HOST_ITEM["placeholder"]}}
    if record.has_scan_type(ScanType.ACCESS):
        config["accessScanConfig"] = {"scanDepth": ACCESS_SCAN_ITEM["default"]}
    if record.has_scan_type(ScanType.SENSITIVE_DATA):
        config["sensitiveDataScanConfig"] = {"maxFileSize": SENSITIVE_DATA_SCAN_ITEM["default"]}
    return config


# ---------------------------------------------------------------------------
# <name>-source-type.json
# ---------------------------------------------------------------------------


def source_type_file(record: ScannerCreationData) -> str:
    return f"{record.name}-source-type.json"


def build_source_type(record: ScannerCreationData) -> dict[str, Any]:
    """Registration descriptor for the Access Analyzer source type catalog."""
    return {
        "displayName": record.display_name,
        "description": record.description,
        "icon": record.icon.value,
        "scannerImage": naming.scanner_image(record.name),
        "supportedScanTypes": [s.value for s in record.supported_scan_types],
        "scannerSpecification": {"$ref": SPECIFICATION_FILE},
    }
