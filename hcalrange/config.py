"""Configuration management for hcalrange."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigError

OUTPUT_FORMATS = ["html", "text", "json"]


@dataclass
class HCalRangeConfig:
    """Main configuration for hcalrange."""

    style: Dict[str, Any]
    display: Dict[str, Any]
    output: Dict[str, Any]

    @property
    def text_formatter(self) -> str:
        """Get the text formatter specification."""
        formatter = self.style["formatter"]
        assert isinstance(formatter, str)
        return formatter

    @property
    def show_start_time(self) -> bool:
        """Get the default for displaying the start time."""
        return bool(self.display["show_start_time"])

    @property
    def show_end_time(self) -> bool:
        """Get the default for displaying the end time."""
        return bool(self.display["show_end_time"])

    @property
    def output_format(self) -> str:
        """Get the output format: html, text or json."""
        output_format = self.output["format"]
        assert isinstance(output_format, str)
        return output_format

    @property
    def vevent(self) -> bool:
        """Whether HTML output is wrapped in a vevent container."""
        return bool(self.output["vevent"])


def load_config(config_path: Path) -> HCalRangeConfig:
    """Load and validate configuration from JSON file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {config_path}: {e}")

    return validate_config(data)


def validate_config(data: Dict[str, Any]) -> HCalRangeConfig:
    """Validate configuration data and return HCalRangeConfig instance."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    if "style" not in data:
        raise ConfigError("Missing required configuration section: style")

    display = data.setdefault("display", {})
    output = data.setdefault("output", {})

    _validate_style_section(data["style"])
    _validate_display_section(display)
    _validate_output_section(output)

    return HCalRangeConfig(style=data["style"], display=display, output=output)


def _validate_style_section(style: Dict[str, Any]) -> None:
    """Validate style configuration section."""
    if "formatter" not in style:
        raise ConfigError("Missing required style field: formatter")

    formatter = style["formatter"]
    if not isinstance(formatter, str) or not formatter:
        raise ConfigError("style.formatter must be a non-empty string")
    if formatter != "british" and ":" not in formatter:
        raise ConfigError(
            "style.formatter must be 'british' or a 'module:callable' reference"
        )


def _validate_display_section(display: Dict[str, Any]) -> None:
    """Validate display configuration section and set defaults."""
    for field in ["show_start_time", "show_end_time"]:
        if field not in display:
            display[field] = True
        elif not isinstance(display[field], bool):
            raise ConfigError(f"display.{field} must be true or false")

    if display["show_end_time"] and not display["show_start_time"]:
        raise ConfigError("display.show_end_time requires display.show_start_time")


def _validate_output_section(output: Dict[str, Any]) -> None:
    """Validate output configuration section and set defaults."""
    if "format" not in output:
        output["format"] = "html"
    if output["format"] not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format: {output['format']}. "
            f"Must be one of: {OUTPUT_FORMATS}"
        )

    if "vevent" not in output:
        output["vevent"] = False


def create_default_config() -> Dict[str, Any]:
    """Create a default configuration template."""
    return {
        "style": {"formatter": "british"},
        "display": {"show_start_time": True, "show_end_time": True},
        "output": {"format": "html", "vevent": False},
    }
