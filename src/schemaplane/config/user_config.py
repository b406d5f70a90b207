"""Minimal user-facing configuration.

This module defines only the config fields that users should care about.
Everything else uses opinionated defaults.

User config is stored in .schemaplane/config.yaml
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from schemaplane.core.errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_SCHEMA_PATH = "prisma/schema.prisma"
DEFAULT_DOCS_DIR = "docs/schema"
DEFAULT_TYPES_PATH = "types/prisma.ts"
DEFAULT_LOG_LEVEL: LogLevel = "INFO"

# Sections users may add by hand; passed through to the loader untouched
PASSTHROUGH_SECTIONS = ("docs", "lint", "typegen", "logging")


class UserConfig(BaseModel):
    """User-facing configuration options."""

    schema_path: str = Field(
        default=DEFAULT_SCHEMA_PATH,
        description="Schema source file, relative to the repository root.",
    )
    docs_dir: str = Field(
        default=DEFAULT_DOCS_DIR,
        description="Directory `spl docs` writes into.",
    )
    types_path: str = Field(
        default=DEFAULT_TYPES_PATH,
        description="File `spl types` writes.",
    )
    log_level: LogLevel = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Log level. DEBUG logs every skipped schema line.",
    )


def write_user_config(path: Path, config: UserConfig | None = None) -> None:
    """Write user config file with helpful comments.

    Values equal to the defaults are written commented out so later default
    changes still reach the repository.
    """
    cfg = config or UserConfig()

    lines = [
        "# SchemaPlane Configuration",
        "# Every key can also be set via SCHEMAPLANE__<SECTION>__<KEY> env vars.",
        "",
    ]

    def _entry(comment: str, key: str, value: str, default: str) -> None:
        lines.append(f"# {comment}")
        prefix = "" if value != default else "# "
        lines.append(f"{prefix}{key}: {value}")
        lines.append("")

    _entry("Schema source file", "schema_path", cfg.schema_path, DEFAULT_SCHEMA_PATH)
    _entry("Output directory for `spl docs`", "docs_dir", cfg.docs_dir, DEFAULT_DOCS_DIR)
    _entry("Output file for `spl types`", "types_path", cfg.types_path, DEFAULT_TYPES_PATH)
    _entry("Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL", "log_level", cfg.log_level, DEFAULT_LOG_LEVEL)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines))


def read_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML mapping, raising ConfigError on bad syntax."""
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def load_user_config(path: Path) -> UserConfig:
    """Load user config from YAML file."""
    data = read_config_file(path)
    user_keys = {k: v for k, v in data.items() if k in UserConfig.model_fields}
    try:
        return UserConfig(**user_keys)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
