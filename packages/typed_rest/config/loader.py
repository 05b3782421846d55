"""Settings loading with deterministic precedence.

The cascade is always:
1) Init params (``cli_params``)
2) Environment variables
3) YAML config file (``~/.config/typed-rest/typed-rest.yaml`` by default)
4) Model defaults

Environment variable format:
- Prefix: ``TYPED_REST_``
- Nested keys: ``__`` separator
- Example: ``TYPED_REST_HTTP__TIMEOUT_SECONDS=5`` -> ``http.timeout_seconds = 5.0``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import DEFAULT_CONFIG_PATH, TypedRestSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> TypedRestSettings:
    """Resolve settings from all sources for one process."""
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    settings_cls = _scoped_settings(resolved)
    return settings_cls(**_as_plain_dict(cli_params or {}))


def _scoped_settings(path: Path) -> type[TypedRestSettings]:
    """Return a settings class reading YAML from ``path``."""

    class _ScopedSettings(TypedRestSettings):
        _config_path: ClassVar[Path] = path

    return _ScopedSettings


def _as_plain_dict(value: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a mapping into plain ``dict`` values recursively."""
    output: dict[str, Any] = {}
    for key, subvalue in value.items():
        if isinstance(subvalue, Mapping):
            output[str(key)] = _as_plain_dict(subvalue)
        else:
            output[str(key)] = subvalue
    return output
