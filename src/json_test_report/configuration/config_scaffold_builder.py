"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "report-config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Report configuration template for json-test-report.
# Replace every <REQUIRED> placeholder before running convert --config.
# Relative paths are resolved against the directory of this file.

report:
  # Folder holding the *.json result files written by the test runner.
  input_dir: "<REQUIRED>"
  # Workbook to write (Test Results + Summary sheets).
  output_path: "<REQUIRED>"
  # "Yes" embeds each record's screenshot image; any other value leaves the Screenshot column out.
  bind_screenshots: "No"
  # Folder for test-summary.txt (one-line Total/Passed/Failed summary).
  # summary_dir: "<OPTIONAL>"
  # Keep only the first line of each error and drop terminal colour codes.
  sanitize_errors: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML report configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder report configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(
            f"Report configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
