"""Data models for scanner creation and the Access Analyzer API.

``ScannerCreationData`` is the single record threaded through the wizard:
created empty, filled in step by step, then consumed read-only by the
template catalog and the scaffold writer.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Language(str, Enum):
    """Implementation languages a scaffold can target."""

    PYTHON = "python"
    JAVASCRIPT = "javascript"
    GO = "go"
    JAVA = "java"
    CSHARP = "c#"


class ScanType(str, Enum):
    """Scan types a scanner can advertise."""

    ACCESS = "access"
    SENSITIVE_DATA = "sensitive_data"


class AuthMethod(str, Enum):
    """Authentication methods offered in step 4."""

    USERNAME_PASSWORD = "Username/Password"
    API_KEY = "API Key"
    OAUTH2 = "OAuth2"
    CERTIFICATE = "Certificate"
    SERVICE_ACCOUNT = "Service Account"
    WINDOWS_AUTHENTICATION = "Windows Authentication"
    CUSTOM = "Custom"


class Icon(str, Enum):
    """Icons the Access Analyzer UI can show for a source type."""

    FOLDER = "folder"
    DATABASE = "database"
    CLOUD = "cloud"
    SERVER = "server"
    LOCK = "lock"
    FILE = "file"
    NETWORK = "network"
    OTHER = "other"


DEFAULT_VERSION = "1.0.0"


# ---------------------------------------------------------------------------
# Wizard record
# ---------------------------------------------------------------------------


class ScannerCreationData(BaseModel):
    """Everything the wizard collects about a new scanner."""

    name: str = Field(default="", description="Kebab-case technical identifier")
    display_name: str = Field(default="", description="Human-readable name shown in the UI")
    description: str = Field(default="")
    version: str = Field(default=DEFAULT_VERSION)
    icon: Icon = Field(default=Icon.FOLDER)
    language: Language = Field(default=Language.PYTHON)
    supported_scan_types: list[ScanType] = Field(default_factory=list)
    auth_methods: list[AuthMethod] = Field(default_factory=list)
    generate_files: bool = Field(default=True)
    output_dir: str | None = Field(default=None)

    @field_validator("supported_scan_types", "auth_methods")
    @classmethod
    def _dedupe(cls, values: list) -> list:
        """Drop repeated selections while keeping their first-seen order."""
        return list(dict.fromkeys(values))

    def has_scan_type(self, scan_type: ScanType | str) -> bool:
        return ScanType(scan_type) in self.supported_scan_types

    def is_complete(self) -> bool:
        """Return ``True`` once every field needed for rendering is populated."""
        if not self.name or not self.version:
            return False
        if not self.supported_scan_types or not self.auth_methods:
            return False
        if self.generate_files and not self.output_dir:
            return False
        return True

    def summary(self) -> dict[str, str]:
        """Label -> value mapping shown on the confirmation step."""
        rows = {
            "Name": self.name,
            "Display Name": self.display_name,
            "Description": self.description,
            "Version": self.version,
            "Icon": self.icon.value,
            "Language": self.language.value,
            "Scan Types": ", ".join(s.value for s in self.supported_scan_types),
            "Auth Methods": ", ".join(a.value for a in self.auth_methods),
        }
        if self.generate_files:
            rows["Output Dir"] = self.output_dir or ""
        return rows


# ---------------------------------------------------------------------------
# Access Analyzer API models
# ---------------------------------------------------------------------------


class SourceType(BaseModel):
    """A scanner/source type registered with Access Analyzer."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    source_type_id: str = Field(default="", alias="sourceTypeId")
    type_name: str = Field(..., alias="typeName")
    display_name: str = Field(default="", alias="displayName")
    description: str = Field(default="")
    version: str = Field(default="")
    scanner_image: str = Field(default="", alias="scannerImage")
    is_active: bool = Field(default=False, alias="isActive")
    is_built_in: bool = Field(default=False, alias="isBuiltIn")
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")
    supported_scan_types: list[str] = Field(default_factory=list, alias="supportedScanTypes")
    icon: str = Field(default="")


class PaginationMetadata(BaseModel):
    """Paging block of a list response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    page: int = 0
    page_size: int = Field(default=0, alias="pageSize")
    total_items: int = Field(default=0, alias="totalItems")
    total_pages: int = Field(default=0, alias="totalPages")


class SourceTypeListResponse(BaseModel):
    """Body of ``GET /source-types``."""

    model_config = ConfigDict(extra="ignore")

    data: list[SourceType] = Field(default_factory=list)
    pagination: PaginationMetadata = Field(default_factory=PaginationMetadata)

    def type_names(self) -> set[str]:
        return {source_type.type_name for source_type in self.data}
