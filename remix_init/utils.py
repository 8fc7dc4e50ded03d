"""Shared utility functions for the Remix Netlify initializer.

Provides the Rich console used for all user-facing output, the coloured
message helpers built on top of it, and JSON I/O that keeps the formatting
of hand-maintained files such as ``package.json``.
"""

from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from typing import Any

from rich.console import Console

console = Console()

DEFAULT_INDENT = "  "


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def detect_format(raw: str) -> tuple[str, str]:
    """Return the ``(indent, newline)`` style used by a JSON document.

    The indent is taken from the first indented line; documents written on a
    single line fall back to two spaces, which is what npm writes.

    Examples::

        detect_format('{\\n    "a": 1\\n}\\n')  -> ("    ", "\\n")
        detect_format('{\\r\\n\\t"a": 1\\r\\n}')  -> ("\\t", "\\r\\n")
    """
    match = re.search(r"^[ \t]+(?=\S)", raw, flags=re.MULTILINE)
    indent = match.group(0) if match else DEFAULT_INDENT
    newline = "\r\n" if "\r\n" in raw else "\n"
    return indent, newline


def parse_json_object(raw: str, source: str | Path = "<string>") -> dict[str, Any]:
    """Parse a JSON document whose top level is an object.

    Key order is preserved.

    Raises:
        json.JSONDecodeError: If *raw* is not valid JSON.
        TypeError: If the top-level value is not an object.
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object in {source}, got {type(data).__name__}")
    return data


def dump_json(data: dict[str, Any], indent: str = DEFAULT_INDENT, newline: str = "\n") -> str:
    """Serialise *data* with the given indent and a trailing newline."""
    content = json.dumps(data, indent=indent, ensure_ascii=False)
    if newline != "\n":
        content = content.replace("\n", newline)
    return content + newline


async def save_json(
    data: dict[str, Any],
    path: str | Path,
    indent: str = DEFAULT_INDENT,
    newline: str = "\n",
) -> None:
    """Write *data* to *path*, overwriting it in place.

    The write is performed in a worker thread so the event loop is never
    blocked on disk I/O.
    """
    file_path = Path(path)
    content = dump_json(data, indent=indent, newline=newline)
    await asyncio.to_thread(_write_text, file_path, content)


def _write_text(path: Path, content: str) -> None:
    # Line endings are already in *content*; disable translation.
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)
