"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (SCHEMAPLANE__SECTION__KEY)
3. Repo config (.schemaplane/config.yaml)
4. Global config (~/.config/schemaplane/config.yaml)
5. Built-in defaults (lowest priority)

The repo config file holds the flat user-facing keys written by
`spl init` (schema_path, docs_dir, types_path, log_level) and may also
carry full `docs`, `lint`, `typegen` and `logging` sections.
"""

from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from schemaplane.config.models import (
    DocsConfig,
    LintConfig,
    LoggingConfig,
    PathsConfig,
    SchemaPlaneConfig,
    TypegenConfig,
)
from schemaplane.config.user_config import (
    PASSTHROUGH_SECTIONS,
    UserConfig,
    load_user_config,
    read_config_file,
)
from schemaplane.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/schemaplane/config.yaml").expanduser()
CONFIG_DIR_NAME = ".schemaplane"


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class with instance-based YAML source (thread-safe)."""

    class SchemaPlaneSettings(BaseSettings):
        """Root config. Env vars: SCHEMAPLANE__LOGGING__LEVEL, SCHEMAPLANE__LINT__FAIL_ON, etc."""

        model_config = SettingsConfigDict(
            env_prefix="SCHEMAPLANE__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        paths: PathsConfig = PathsConfig()
        docs: DocsConfig = DocsConfig()
        lint: LintConfig = LintConfig()
        typegen: TypegenConfig = TypegenConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml files
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return SchemaPlaneSettings


def _user_config_to_sections(user: UserConfig, explicit: set[str]) -> dict[str, Any]:
    """Map flat user keys onto nested sections, keeping only keys the file set."""
    sections: dict[str, Any] = {}
    path_keys = {"schema_path", "docs_dir", "types_path"}
    paths = {k: getattr(user, k) for k in path_keys & explicit}
    if paths:
        sections["paths"] = paths
    if "log_level" in explicit:
        sections["logging"] = {"level": user.log_level}
    return sections


def load_config(repo_root: Path | None = None, **kwargs: Any) -> SchemaPlaneConfig:
    """Load config: defaults < global yaml < repo yaml < env vars < kwargs.

    Args:
        repo_root: Repository root to load config from.
                   Defaults to current working directory.
        **kwargs: Override values (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On invalid YAML syntax or validation errors.
    """
    repo_root = repo_root or Path.cwd()
    config_path = repo_root / CONFIG_DIR_NAME / "config.yaml"

    raw = read_config_file(config_path)
    user_config = load_user_config(config_path)

    yaml_config = _user_config_to_sections(user_config, set(raw))
    for section in PASSTHROUGH_SECTIONS:
        if isinstance(raw.get(section), dict):
            yaml_config = _deep_merge(yaml_config, {section: raw[section]})

    global_config = read_config_file(GLOBAL_CONFIG_PATH)
    if global_config:
        yaml_config = _deep_merge(global_config, yaml_config)

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e

    return SchemaPlaneConfig.model_validate(settings.model_dump())
