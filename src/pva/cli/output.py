"""Report/JSON output. Results to stdout or a file, diagnostics to stderr."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from pva.core.exceptions import OutputWriteError


def output_json(data: dict | list, pretty: bool = False) -> None:
    """Write JSON to stdout."""
    if pretty:
        print(json.dumps(data, indent=2, default=str))
    else:
        print(json.dumps(data, default=str))


def output_text(text: str) -> None:
    """Write plain text to stdout."""
    print(text, end="" if text.endswith("\n") else "\n")


def write_output(text: str, path: Path | None) -> None:
    """Write rendered output to ``path``, or stdout when no path is given."""
    if path is None:
        output_text(text)
        return
    try:
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as e:
        raise OutputWriteError(f"Cannot write {path}: {e}", str(path)) from e
    progress(f"Results exported to: {path}")


def error(message: str) -> None:
    """Write error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


def warn(message: str) -> None:
    """Write warning to stderr."""
    print(f"Warning: {message}", file=sys.stderr)


def progress(message: str) -> None:
    """Write progress info to stderr."""
    print(message, file=sys.stderr)


def debug(message: str) -> None:
    """Write debug info to stderr."""
    print(f"[debug] {message}", file=sys.stderr)
