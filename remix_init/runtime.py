"""Runtime selection: Netlify Edge Functions or Netlify Functions.

The choice comes from the ``--netlify-edge`` / ``--no-netlify-edge`` flags
when either is present, otherwise from an interactive prompt. This module is
the only place that reads the process arguments; everything downstream
receives the resolved boolean.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.prompt import IntPrompt

from .utils import console as default_console

PROMPT_MESSAGE = "Run your Remix site with:"

# Numbered options shown by the prompt, mapped to "use edge".
RUNTIME_CHOICES: tuple[tuple[str, bool], ...] = (
    ("Netlify Functions", False),
    ("Netlify Edge Functions", True),
)


def build_flag_parser() -> argparse.ArgumentParser:
    """Return the parser for the runtime flags.

    ``--netlify-edge`` and ``--no-netlify-edge`` share one destination, so
    the last flag given wins and the result is a single tri-state value.
    """
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument(
        "--netlify-edge",
        dest="netlify_edge",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=(
            "Explicitly use (or, with --no-netlify-edge, do NOT use) Netlify Edge "
            "Functions to serve this Remix site. Serverless Functions are used otherwise."
        ),
    )
    return parser


def parse_runtime_flag(argv: Sequence[str] | None = None) -> bool | None:
    """Return ``True``/``False`` if a runtime flag was passed, else ``None``.

    Unknown options and positional arguments belong to the surrounding
    command and are ignored.
    """
    if argv is None:
        argv = sys.argv[1:]
    args, _unknown = build_flag_parser().parse_known_args(list(argv))
    return args.netlify_edge


def prompt_runtime_choice(console: Console | None = None) -> bool:
    """Ask which runtime to use. Blocks until a valid option is entered."""
    console = console or default_console
    console.print(f"\n> {PROMPT_MESSAGE}")
    for idx, (label, _value) in enumerate(RUNTIME_CHOICES, 1):
        console.print(f"{idx}. [bold]{label}[/]")

    choice = IntPrompt.ask(
        "\nEnter the number of your choice",
        choices=[str(idx) for idx in range(1, len(RUNTIME_CHOICES) + 1)],
        show_choices=True,
        console=console,
    )
    return RUNTIME_CHOICES[choice - 1][1]


async def resolve_runtime_choice(argv: Sequence[str] | None = None) -> bool:
    """Decide whether the generated site should use Netlify Edge Functions.

    An explicit flag is returned immediately; only when neither flag was
    passed does this suspend on the interactive prompt.
    """
    passed_edge_option = parse_runtime_flag(argv)
    if passed_edge_option is not None:
        return passed_edge_option
    return await asyncio.to_thread(prompt_runtime_choice)
