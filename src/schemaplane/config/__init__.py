"""Config module exports."""

from schemaplane.config.loader import load_config
from schemaplane.config.models import (
    DocsConfig,
    LintConfig,
    LoggingConfig,
    PathsConfig,
    SchemaPlaneConfig,
    TypegenConfig,
)

__all__ = [
    "load_config",
    "DocsConfig",
    "LintConfig",
    "LoggingConfig",
    "PathsConfig",
    "SchemaPlaneConfig",
    "TypegenConfig",
]
