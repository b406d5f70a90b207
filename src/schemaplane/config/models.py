"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (SCHEMAPLANE__SECTION__KEY)
3. Repo YAML (.schemaplane/config.yaml)
4. Global YAML (~/.config/schemaplane/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    SCHEMAPLANE__<SECTION>__<KEY>=<VALUE>

Examples:
    SCHEMAPLANE__LOGGING__LEVEL=DEBUG
    SCHEMAPLANE__DOCS__ERD_MAX_MODELS=30
    SCHEMAPLANE__LINT__FAIL_ON=warning
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
FailOn = Literal["error", "warning", "info"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SCHEMAPLANE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every skipped line and rule.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class PathsConfig(BaseModel):
    """Input and output locations, relative to the repository root.

    Env vars:
        SCHEMAPLANE__PATHS__SCHEMA_PATH: Schema source file
        SCHEMAPLANE__PATHS__DOCS_DIR: Documentation output directory
        SCHEMAPLANE__PATHS__TYPES_PATH: Generated type definitions file
    """

    schema_path: str = "prisma/schema.prisma"
    docs_dir: str = "docs/schema"
    types_path: str = "types/prisma.ts"


class DocsConfig(BaseModel):
    """Documentation generator configuration.

    Env vars:
        SCHEMAPLANE__DOCS__MODELS_DIR: Sub-directory for per-model pages
        SCHEMAPLANE__DOCS__ERD_MAX_MODELS: Largest category drawn as one diagram
        SCHEMAPLANE__DOCS__ENTITY_FIELD_LIMIT: Scalar fields shown per entity diagram
    """

    models_dir: str = Field(
        default="models",
        description="Sub-directory (relative to the docs root) holding one page per model.",
    )
    erd_max_models: int = Field(
        default=20,
        description="Categories with more models than this get a model list instead of a diagram.",
    )
    entity_field_limit: int = Field(
        default=15,
        description="Scalar fields drawn in a model page's entity diagram before truncating.",
    )
    erd_key_fields: list[str] = Field(
        default_factory=lambda: ["name", "status", "companyId"],
        description="Field names always shown on ERD overview entities (besides unique fields).",
    )
    erd_key_field_limit: int = Field(
        default=4,
        description="Maximum key fields per entity on the ERD overview.",
    )

    @field_validator("erd_max_models", "entity_field_limit", "erd_key_field_limit")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Must be at least 1, got {v}")
        return v


class LintConfig(BaseModel):
    """Schema validator configuration.

    Env vars:
        SCHEMAPLANE__LINT__FAIL_ON: Lowest severity that makes `spl validate` exit non-zero
        SCHEMAPLANE__LINT__MIN_FIELDS_FOR_TIMESTAMPS: Field count above which timestamps are expected
    """

    unique_candidates: list[str] = Field(
        default_factory=lambda: ["email", "slug", "code", "externalId", "documentNumber"],
        description="Field names that are conventionally unique (case-insensitive exact match).",
    )
    timestamp_fields: tuple[str, str] = Field(
        default=("createdAt", "updatedAt"),
        description="Conventional created/updated timestamp field names.",
    )
    join_table_patterns: list[str] = Field(
        default_factory=lambda: [r"^(RolePermission|UserPermission|UserOnCompany)$"],
        description="Regular expressions for join/pivot models exempt from the timestamp rule.",
    )
    min_fields_for_timestamps: int = Field(
        default=3,
        description="Models with more fields than this are expected to carry timestamps.",
    )
    fail_on: FailOn = Field(
        default="error",
        description="Lowest severity that makes `spl validate` exit with status 1.",
    )
    disabled_rules: list[str] = Field(
        default_factory=list,
        description="Rule ids to skip (e.g. 'missing-timestamps').",
    )


class TypegenConfig(BaseModel):
    """Type generator configuration.

    Env vars:
        SCHEMAPLANE__TYPEGEN__RUNTIME_IMPORT: Module providing JsonValue/Decimal
    """

    runtime_import: str = Field(
        default="@prisma/client",
        description="Module the generated file imports runtime helper types from.",
    )
    auto_id_defaults: list[str] = Field(
        default_factory=lambda: ["autoincrement()", "uuid()", "cuid()"],
        description="Default expressions that make a primary key auto-generated.",
    )
    timestamp_fields: list[str] = Field(
        default_factory=lambda: ["createdAt", "updatedAt"],
        description="Field names managed by the database, left out of create inputs.",
    )
    header_name: str = Field(
        default="schemaplane types",
        description="Generator name written into the generated file header.",
    )


class SchemaPlaneConfig(BaseModel):
    """Root configuration for SchemaPlane.

    All settings can be configured via:
    1. Environment variables: SCHEMAPLANE__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    docs: DocsConfig = Field(default_factory=DocsConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
    typegen: TypegenConfig = Field(default_factory=TypegenConfig)
