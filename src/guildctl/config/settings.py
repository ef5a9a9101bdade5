"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``GUILDCTL_*`` prefix (``GUILDCTL_API__TIMEOUT=10``)
  3. TOML file    — ``guildctl.toml`` located by :func:`find_config`
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource`.
Invalid TOML and values that fail validation surface as
:class:`click.ClickException` so the CLI reports them without a traceback.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsError

from guildctl.config.models import ApiConfig, CredentialsConfig, SessionConfig

CONFIG_FILENAME = "guildctl.toml"
CONFIG_ENV_VAR = "GUILDCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file for a run started in *start* (default: cwd).

    ``GUILDCTL_CONFIG`` wins when set, and yields None if it names no file.
    Otherwise the nearest ``guildctl.toml`` in *start* or an ancestor.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from the ``guildctl.toml`` chosen by :meth:`GuildSettings.from_cli`."""

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
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class GuildSettings(BaseSettings):
    """Unified settings for the guildctl CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object held by
    :class:`~guildctl.commands._context.AppContext`.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        token_file: ``--token-file`` override; falls back to ``[credentials] file``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GUILDCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    verbose: bool = False
    quiet: bool = False
    log_json: bool = False
    token_file: str | None = None

    # --- TOML sections ---
    api: ApiConfig = Field(default_factory=ApiConfig)
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)

    @property
    def credential_file(self) -> Path:
        """Where the token is read from when no argument is given.

        ``--token-file`` and the built-in ``token.txt`` are relative to the
        working directory. A relative ``[credentials] file`` set alongside a
        loaded config file is relative to that file's directory.
        """
        if self.token_file:
            return Path(self.token_file)
        path = Path(self.credentials.file)
        if (
            self.config_path is not None
            and "file" in self.credentials.model_fields_set
            and not path.is_absolute()
        ):
            return self.config_path.parent / path
        return path

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
        start: Path | None = None,
        **cli_flags: Any,
    ) -> GuildSettings:
        """Construct settings from CLI invocation.

        Uses the explicit *config_path* when it names a file, otherwise
        falls back to :func:`find_config` from *start* (default: cwd).
        CLI flags are merged as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except (ValidationError, SettingsError) as exc:
            source = f" ({toml_path})" if toml_path else ""
            raise click.ClickException(f"Invalid configuration{source}: {exc}") from exc
        finally:
            _tls.toml_path = None
