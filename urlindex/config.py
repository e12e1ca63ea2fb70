"""Per-project configuration.

Stored as JSON at ``<root>/.urlindex/config.json`` and created by
``urlindex init``. Every key is optional; missing keys take the defaults
below.

Example:
    {
      "version": "1",
      "scanning": {
        "file_name": "urls.py",
        "ignored": ["node_modules", ".git", "__pycache__"],
        "urlpatterns_only": false,
        "max_workers": 8
      },
      "snippet": {"template": "const url_{name} = \\"{{% url '{reference}' %}}\\";"},
      "watching": {"debounce_seconds": 0.5}
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from urlindex.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_IGNORE_DIRS,
    DEFAULT_MAX_WORKERS,
    DEFAULT_SNIPPET_TEMPLATE,
    URLS_FILE_NAME,
)
from urlindex.index.snippets import validate_template
from urlindex.types.errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    RecoveryAction,
    ResourceError,
    ValidationError,
)


def config_path(root: str | Path) -> Path:
    return Path(root) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


@dataclass
class UrlIndexConfig:
    """Settings for scanning, snippets, and watching."""

    file_name: str = URLS_FILE_NAME
    ignored: list[str] = field(default_factory=lambda: sorted(DEFAULT_IGNORE_DIRS))
    urlpatterns_only: bool = False
    max_workers: int = DEFAULT_MAX_WORKERS
    snippet_template: str = DEFAULT_SNIPPET_TEMPLATE
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": CONFIG_VERSION,
            "scanning": {
                "file_name": self.file_name,
                "ignored": list(self.ignored),
                "urlpatterns_only": self.urlpatterns_only,
                "max_workers": self.max_workers,
            },
            "snippet": {"template": self.snippet_template},
            "watching": {"debounce_seconds": self.debounce_seconds},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str | None = None) -> UrlIndexConfig:
        """Build a config from parsed JSON, validating types."""
        scanning = _section(data, "scanning", source)
        snippet = _section(data, "snippet", source)
        watching = _section(data, "watching", source)
        defaults = cls()

        config = cls(
            file_name=_typed(scanning, "file_name", str, defaults.file_name, source),
            ignored=list(_typed(scanning, "ignored", list, defaults.ignored, source)),
            urlpatterns_only=_typed(
                scanning, "urlpatterns_only", bool, defaults.urlpatterns_only, source
            ),
            max_workers=_typed(scanning, "max_workers", int, defaults.max_workers, source),
            snippet_template=_typed(
                snippet, "template", str, defaults.snippet_template, source
            ),
            debounce_seconds=float(
                _typed(watching, "debounce_seconds", (int, float), defaults.debounce_seconds, source)
            ),
        )
        if config.max_workers < 1:
            raise _invalid("scanning.max_workers must be at least 1", source)
        if config.debounce_seconds < 0:
            raise _invalid("watching.debounce_seconds must not be negative", source)
        try:
            validate_template(config.snippet_template)
        except ValidationError as e:
            raise _invalid(e.user_message, source) from e
        return config


def _invalid(message: str, source: str | None) -> ConfigurationError:
    return ConfigurationError(
        message,
        user_message=f"Invalid configuration: {message}",
        context=ErrorContext(operation="load_config", file_path=source),
        recovery_actions=[RecoveryAction("Fix or regenerate the config", "urlindex init --force")],
    )


def _section(data: dict[str, Any], name: str, source: str | None) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise _invalid(f"'{name}' must be an object", source)
    return section


def _typed(section: dict[str, Any], key: str, expected: Any, default: Any, source: str | None) -> Any:
    if key not in section:
        return default
    value = section[key]
    # bool is an int subclass; don't accept it for numeric settings
    if isinstance(value, bool) and expected is not bool:
        raise _invalid(f"'{key}' has the wrong type", source)
    if not isinstance(value, expected):
        raise _invalid(f"'{key}' has the wrong type", source)
    return value


def load_config(root: str | Path) -> UrlIndexConfig:
    """Load ``<root>/.urlindex/config.json``, or defaults when it is absent."""
    path = config_path(root)
    if not path.is_file():
        return UrlIndexConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Cannot load {path}: {e}",
            user_message=f"Could not read configuration file {path}",
            context=ErrorContext(operation="load_config", file_path=str(path)),
            original_error=e,
        ) from e
    if not isinstance(data, dict):
        raise _invalid("top level must be an object", str(path))
    return UrlIndexConfig.from_dict(data, source=str(path))


def save_config(root: str | Path, config: UrlIndexConfig) -> Path:
    """Write ``config`` to ``<root>/.urlindex/config.json``."""
    path = config_path(root)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ResourceError(
            f"Cannot write {path}: {e}",
            user_message=f"Could not write configuration file {path}",
            code=ErrorCode.FILE_WRITE_FAILED,
            context=ErrorContext(operation="save_config", file_path=str(path)),
            original_error=e,
        ) from e
    return path
