"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from json_test_report.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    ReportSettings,
    load_configuration,
    parse_screenshot_flag,
    write_placeholder_configuration,
)
from json_test_report.report_conversion import ConversionRequest, execute_report_conversion

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="json-test-report")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Verbosity of warnings and progress messages written to stderr",
)
def cli(log_level: str) -> None:
    """Convert JSON test results into an Excel report."""
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML report configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML report configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


# pylint: disable=too-many-arguments,too-many-positional-arguments
@cli.command(name="convert")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON report configuration file",
)
@click.option(
    "--input-dir",
    "input_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Folder containing the JSON test result files",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the Excel report to write",
)
@click.option(
    "--bind-screenshots",
    "bind_screenshots",
    required=False,
    help='Embed screenshot images when set to "Yes" (case-insensitive)',
)
@click.option(
    "--summary-dir",
    "summary_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional folder for the one-line test-summary.txt",
)
@click.option(
    "--sanitize-errors",
    is_flag=True,
    default=False,
    help="Keep only the first line of each error and strip terminal colour codes.",
)
def convert(
    config_path: str | None,
    input_dir: str | None,
    output_path: str | None,
    bind_screenshots: str | None,
    summary_dir: str | None,
    sanitize_errors: bool,
) -> None:
    """Convert a folder of JSON test results into a Test Results/Summary workbook."""
    settings = _resolve_settings(
        config_path=config_path,
        input_dir=input_dir,
        output_path=output_path,
        bind_screenshots=bind_screenshots,
        summary_dir=summary_dir,
        sanitize_errors=sanitize_errors,
    )
    outcome = execute_report_conversion(ConversionRequest.from_settings(settings))
    if not outcome.written:
        raise CliError(f"Excel report was not written: {outcome.error}")
    for skipped in outcome.skipped_files:
        click.echo(f"skipped: {skipped}", err=True)
    click.echo(str(outcome.output_path.resolve()))
    if outcome.summary_text_path is not None:
        click.echo(str(outcome.summary_text_path.resolve()))


# pylint: enable=too-many-arguments,too-many-positional-arguments


def _resolve_settings(
    *,
    config_path: str | None,
    input_dir: str | None,
    output_path: str | None,
    bind_screenshots: str | None,
    summary_dir: str | None,
    sanitize_errors: bool,
) -> ReportSettings:
    base: ReportSettings | None = None
    if config_path:
        try:
            base = load_configuration(config_path)
        except ConfigurationError as exc:
            raise CliError(str(exc)) from exc

    resolved_input = Path(input_dir) if input_dir else (base.input_dir if base else None)
    resolved_output = Path(output_path) if output_path else (base.output_path if base else None)
    if resolved_input is None or resolved_output is None:
        raise CliError("Both --input-dir and --output are required (directly or via --config).")

    return ReportSettings(
        input_dir=resolved_input,
        output_path=resolved_output,
        bind_screenshots=(
            parse_screenshot_flag(bind_screenshots)
            if bind_screenshots is not None
            else bool(base and base.bind_screenshots)
        ),
        summary_dir=Path(summary_dir) if summary_dir else (base.summary_dir if base else None),
        sanitize_errors=sanitize_errors or bool(base and base.sanitize_errors),
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
