"""Resolved settings for one CLI invocation or embedding host.

Sources, strongest first: explicit keyword arguments (CLI flags),
``RENAMECTL_*`` environment variables (``__`` separates nesting, e.g.
``RENAMECTL_EDITING__REJECT_DUPLICATES=true``), the ``renamectl.toml``
found by :func:`renamectl.config.discovery.find_config`, and the defaults
on the section models. Sections merge key by key across sources.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from renamectl.config.discovery import find_config
from renamectl.config.models import (
    CollectionConfig,
    EditingConfig,
    HistoryConfig,
    PluginsConfig,
)

# TOML file for the settings object currently being built by from_cli().
_toml_file: ContextVar[Path | None] = ContextVar("_toml_file", default=None)


class RenameSettings(BaseSettings):
    """Flags and config sections merged into one frozen object.

    Attributes:
        workspace_root: Directory holding ``renamectl.toml`` (or the CWD).
        config_path: The TOML file that was loaded, if any.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="RENAMECTL_",
        env_nested_delimiter="__",
    )

    workspace_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    editing: EditingConfig = Field(default_factory=EditingConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    collection: CollectionConfig = Field(default_factory=CollectionConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_file = _toml_file.get()
        if toml_file is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_file))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        workspace_root: Path | None = None,
        **overrides: Any,
    ) -> RenameSettings:
        """Build settings for a CLI run.

        With *config_path* only that file is read (a missing file means
        defaults); otherwise ``renamectl.toml`` is searched upward from
        *workspace_root*. Section overrides are dicts, e.g.
        ``editing={"reject_duplicates": True}``.

        Raises:
            click.ClickException: The TOML file does not parse.
        """
        if config_path:
            explicit = Path(config_path)
            toml_file = explicit if explicit.is_file() else None
        else:
            toml_file = find_config(workspace_root)

        root = workspace_root or (toml_file.parent if toml_file else Path.cwd())
        token = _toml_file.set(toml_file)
        try:
            return cls(workspace_root=root, config_path=toml_file, **overrides)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_file}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_file.reset(token)
