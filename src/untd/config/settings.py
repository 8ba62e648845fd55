"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``UNTD_*`` prefix
  3. TOML file    — ``untd.toml`` discovered via walk-up
  4. Code defaults
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from untd.config.discovery import find_config


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``untd.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

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


class UntdSettings(BaseSettings):
    """Settings for a single ``untd`` invocation.

    Attributes:
        timezone: Zone name used for rendering. Validated at conversion
            time so a bad value yields "Invalid timezone" rather than a
            settings error.
        clipboard: Copy the rendered string to the clipboard.
        format: Format keyword or custom strftime pattern.
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "UNTD_",
    }

    timezone: str = "JST"
    clipboard: bool = True
    format: str | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    config_path: Path | None = None

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
    ) -> UntdSettings:
        """Construct settings from a CLI invocation.

        Flags passed as ``None`` were not given on the command line and
        fall through to env vars, TOML, and defaults.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            import click

            fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
            msg = f"Invalid settings: {fields or exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
