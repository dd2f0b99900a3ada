"""Configuration import/export for the style registry."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel

from .style_engine import StyleRegistry, get_style

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TERMSTYLE_CONFIG"

_FILE_INFO_FIELDS = ("directory", "symbolic_link", "executable")
_SECTIONS = ("formatting", "progress", "file_info", "extensions")


@dataclass
class StyleSettings:
    """Overrides for the settable parts of a style registry.

    Every field is optional; anything left empty keeps the registry's
    current value. Extension entries set to ``None`` remove that extension.
    """

    output_rendering: Optional[str] = None
    formatting: Dict[str, str] = field(default_factory=dict)
    progress: Dict[str, Any] = field(default_factory=dict)
    file_info: Dict[str, str] = field(default_factory=dict)
    extensions: Dict[str, Optional[str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Get the non-empty sections as a plain dictionary."""
        data: Dict[str, Any] = {}
        if self.output_rendering is not None:
            data["output_rendering"] = self.output_rendering
        for section in _SECTIONS:
            values = getattr(self, section)
            if values:
                data[section] = dict(values)
        return data

    def to_yaml(self) -> str:
        """Serialize settings to YAML."""
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "StyleSettings":
        """Build settings from a parsed document."""
        data = dict(data or {})
        unknown = set(data) - {"output_rendering", *_SECTIONS}
        if unknown:
            raise ValueError(f"Unknown style settings: {', '.join(sorted(unknown))}")

        sections = {}
        for name in _SECTIONS:
            values = data.get(name)
            if values is not None and not isinstance(values, dict):
                raise ValueError(f"Style settings section '{name}' must be a mapping")
            sections[name] = dict(values or {})

        rendering = data.get("output_rendering")
        return cls(
            output_rendering=str(rendering) if rendering is not None else None,
            **sections,
        )

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "StyleSettings":
        """Deserialize settings from YAML.

        Raises:
            ValueError: If the text is not valid YAML or not a mapping
        """
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in style settings: {e}")

        if data is not None and not isinstance(data, dict):
            raise ValueError("Style settings must be a mapping")
        return cls.from_dict(data)


def load_settings(config_path: Path) -> StyleSettings:
    """Load style settings from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Style settings not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        settings = StyleSettings.from_yaml(f.read())

    logger.debug(f"Loaded style settings from {config_path}")
    return settings


def _set_group_fields(group: BaseModel, section: str, values: Dict[str, Any],
                      allowed: Optional[tuple] = None) -> None:
    names = allowed if allowed is not None else tuple(type(group).model_fields)
    for name, value in values.items():
        if name not in names:
            raise ValueError(f"Unknown {section} setting: {name}")
        setattr(group, name, value)


def _apply(registry: StyleRegistry, settings: StyleSettings) -> None:
    if settings.output_rendering is not None:
        registry.output_rendering = settings.output_rendering

    _set_group_fields(registry.formatting, "formatting", settings.formatting)
    _set_group_fields(registry.progress, "progress", settings.progress)
    _set_group_fields(registry.file_info, "file_info", settings.file_info, _FILE_INFO_FIELDS)

    for extension, decoration in settings.extensions.items():
        if decoration is None:
            registry.file_info.extension.remove(extension)
        else:
            registry.file_info.extension[extension] = decoration


def apply_settings(registry: StyleRegistry, settings: StyleSettings) -> StyleRegistry:
    """Apply settings through the registry's validated setters.

    The settings are first applied to a scratch registry, so an invalid value
    raises before anything in ``registry`` changes.

    Raises:
        StyleError: If a style value, extension or width is rejected
        ValueError: If a setting name or enum value is unknown
    """
    _apply(StyleRegistry(), settings)
    _apply(registry, settings)
    logger.debug("Applied style settings")
    return registry


def export_settings(registry: StyleRegistry) -> StyleSettings:
    """Snapshot the settable values of a registry."""
    return StyleSettings(
        output_rendering=registry.output_rendering.value,
        formatting=registry.formatting.model_dump(),
        progress=registry.progress.model_dump(mode='json'),
        file_info={name: getattr(registry.file_info, name) for name in _FILE_INFO_FIELDS},
        extensions=registry.file_info.extension.to_dict(),
    )


def get_settings_path() -> Optional[Path]:
    """Get the settings file named by the environment, if any."""
    path = os.environ.get(CONFIG_ENV_VAR)
    return Path(path).expanduser() if path else None


def configure_style(config_path: Optional[Path] = None,
                    registry: Optional[StyleRegistry] = None) -> StyleRegistry:
    """Apply a settings file to a registry.

    Args:
        config_path: Settings file; defaults to ``$TERMSTYLE_CONFIG``
        registry: Registry to configure; defaults to the process-wide one

    Returns:
        The configured registry
    """
    if registry is None:
        registry = get_style()

    if config_path is None:
        config_path = get_settings_path()
    if config_path is None:
        return registry

    return apply_settings(registry, load_settings(config_path))
