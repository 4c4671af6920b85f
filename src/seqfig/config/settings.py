"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SEQFIG_*`` prefix
  3. TOML file    — ``seqfig.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` fed by
:func:`seqfig.config.discovery.find_config`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from seqfig.config.discovery import find_config
from seqfig.config.models import RenderConfig, TemplatesConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``seqfig.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class SeqfigSettings(BaseSettings):
    """Settings for a single seqfig invocation.

    Stored on the :class:`~seqfig.commands._context.AppContext` created by
    the root CLI group.

    Attributes:
        root: Directory relative paths in the config resolve against (parent
            of ``seqfig.toml``, or CWD if no config was found).
        config_path: The config file actually loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SEQFIG_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    render: RenderConfig = Field(default_factory=RenderConfig)
    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> SeqfigSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* that does not exist is an error; otherwise
        ``seqfig.toml`` is discovered by walking up from *root* (or CWD).
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    @property
    def template_dir(self) -> Path | None:
        """Template override directory, resolved against :attr:`root`."""
        directory = self.templates.directory
        if directory is None:
            return None
        return directory if directory.is_absolute() else self.root / directory
