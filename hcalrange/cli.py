"""Command-line interface for hcalrange."""

import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Union

import click

from .config import (
    OUTPUT_FORMATS,
    HCalRangeConfig,
    create_default_config,
    load_config,
    validate_config,
)
from .formatter import format_time_span
from .house_style import create_text_formatter
from .markup import render_html, render_text, segments_to_dicts, wrap_vevent
from .segments import OutputSegment
from .timespan import TimeSpan

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(verbose: bool) -> None:
    """hcalrange: Describe date ranges in house style with hCalendar markup."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@main.command("format")
@click.argument("start")
@click.argument("end")
@click.option(
    "--start-time-unknown", is_flag=True, help="Treat the start as a date only"
)
@click.option("--end-time-unknown", is_flag=True, help="Treat the end as a date only")
@click.option(
    "--show-start-time/--hide-start-time",
    default=None,
    help="Display the start time (default from configuration)",
)
@click.option(
    "--show-end-time/--hide-end-time",
    default=None,
    help="Display the end time (default from configuration)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Configuration file",
)
@click.option(
    "--output",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (default from configuration)",
)
@click.option("--summary", help="Event summary; wraps HTML output in a vevent")
def format_range(
    start: str,
    end: str,
    start_time_unknown: bool,
    end_time_unknown: bool,
    show_start_time: Optional[bool],
    show_end_time: Optional[bool],
    config_file: Optional[Path],
    output_format: Optional[str],
    summary: Optional[str],
) -> None:
    """
    Format the range from START to END.

    START and END are YYYY-MM-DD dates (time unknown) or ISO-8601 datetimes.
    """
    try:
        if config_file:
            config = load_config(config_file)
        else:
            config = validate_config(create_default_config())

        start_value = _parse_instant(start)
        end_value = _parse_instant(end)
        if start_time_unknown and isinstance(start_value, datetime):
            start_value = start_value.date()
        if end_time_unknown and isinstance(end_value, datetime):
            end_value = end_value.date()

        span = TimeSpan.from_dates(
            start_value,
            end_value,
            show_start_time=_pick(show_start_time, config.show_start_time),
            show_end_time=_pick(show_end_time, config.show_end_time),
        )
        text_formatter = create_text_formatter(config.text_formatter)
        segments = format_time_span(span, text_formatter)
        output_format = output_format or config.output_format
        click.echo(_render(segments, output_format, config, summary))

    except Exception as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.option("--create", is_flag=True, help="Create default configuration template")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default="hcalrange.json",
    help="Output path",
)
def config(create: bool, output: Path) -> None:
    """
    Configuration management commands.

    Use --create to generate a default configuration template.
    """
    if create:
        with open(output, "w") as f:
            json.dump(create_default_config(), f, indent=2)

        click.echo(f"✅ Created default configuration: {output}")
    else:
        click.echo("Use --create to generate default configuration")


@main.command()
@click.argument(
    "config_file", required=False, type=click.Path(exists=True, path_type=Path)
)
def validate(config_file: Optional[Path]) -> None:
    """Validate a configuration file."""
    click.echo("🔍 Validating configuration...")

    config_path = config_file or _discover_config_file()
    if not config_path:
        click.echo("❌ No configuration file found")
        click.echo("💡 Run 'hcalrange config --create' to generate one")
        return

    try:
        loaded = load_config(config_path)
        click.echo(f"✅ Configuration is valid: {config_path}")
        click.echo(f"  Formatter: {loaded.text_formatter}")
        click.echo(f"  Output: {loaded.output_format}")

    except Exception as e:
        click.echo(f"❌ Configuration validation failed: {e}", err=True)
        sys.exit(1)


def _parse_instant(value: str) -> Union[date, datetime]:
    """Parse a date (time unknown) or an ISO-8601 datetime."""
    if "T" not in value and " " not in value:
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            pass

    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Invalid date or datetime: {value}")


def _pick(flag: Optional[bool], default: bool) -> bool:
    return default if flag is None else flag


def _render(
    segments: List[OutputSegment],
    output_format: str,
    config: HCalRangeConfig,
    summary: Optional[str],
) -> str:
    if output_format == "json":
        return json.dumps(segments_to_dicts(segments), indent=2)
    if output_format == "text":
        return render_text(segments)

    html = render_html(segments)
    if summary or config.vevent:
        html = wrap_vevent(html, summary)
    return html


def _discover_config_file() -> Optional[Path]:
    """Auto-discover a configuration file in the working directory."""
    for name in ["hcalrange.json", "config.json"]:
        path = Path(name)
        if path.exists():
            return path

    logger.debug("No configuration file found in working directory")
    return None


if __name__ == "__main__":
    main()
