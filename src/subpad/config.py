"""Settings for commit messages and output color.

Defaults reproduce the stock behavior. A YAML settings file is read only
when one is passed explicitly (``--config``).
"""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from subpad.git.submodules import (
    DEFAULT_ADD_MESSAGE,
    DEFAULT_UPDATE_MESSAGE,
    DEFAULT_UPDATE_SPECIFIC_MESSAGE,
)
from subpad.output import COLOR_MODES


def _default_messages() -> dict[str, str]:
    return {
        "add": DEFAULT_ADD_MESSAGE,
        "update": DEFAULT_UPDATE_MESSAGE,
        "update_specific": DEFAULT_UPDATE_SPECIFIC_MESSAGE,
    }


@dataclass
class Settings:
    color: str = "auto"
    messages: dict[str, str] = field(default_factory=_default_messages)

    def commit_message(self, kind: str, **fields: str) -> str:
        """Format the commit message template for ``kind`` (add, update, update_specific)."""
        return self.messages[kind].format(**fields)


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from a YAML file, falling back to defaults.

    Args:
        path: Path to the settings file. None means defaults only.

    Returns:
        Settings with file values layered over the defaults.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If a value has the wrong shape.
    """
    settings = Settings()
    if path is None:
        return settings

    settings_path = Path(path)
    with open(settings_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return settings
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {settings_path} is not a YAML mapping")

    color = data.get("color", settings.color)
    if color not in COLOR_MODES:
        raise ValueError(f"Unknown color mode in {settings_path}: {color}")
    settings.color = color

    messages = data.get("messages") or {}
    if not isinstance(messages, dict):
        raise ValueError(f"'messages' in {settings_path} must be a mapping")
    for kind, template in messages.items():
        if kind not in settings.messages:
            continue
        if not isinstance(template, str) or not template.strip():
            raise ValueError(f"Commit message template '{kind}' must be a non-empty string")
        try:
            template.format(folder="vendor/lib", url="https://example.com/lib.git")
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Bad commit message template '{kind}': {e}") from e
        settings.messages[kind] = template

    return settings
