"""Remix Netlify initializer orchestrator.

Runs once against a freshly generated Remix project:

1. Remove template-only directories (best effort).
2. Resolve the target runtime from the flags or an interactive prompt.
3. Copy the runtime's template files into the project root.
4. Rewrite ``package.json`` for that runtime.

Usage::

    python -m remix_init --root-directory ./my-remix-site --netlify-edge
    python -m remix_init --no-netlify-edge
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import PROFILES, InitConfig
from .errors import InitError
from .manifest import apply_edge_profile, apply_functions_profile
from .runtime import resolve_runtime_choice
from .staging import copy_files, remove_directories
from .utils import print_error


class Initializer:
    """Sequences staging, runtime selection and the manifest rewrite.

    Attributes:
        root_directory: The generated project's root.
        config: Fixed settings for the run.
        argv: Arguments handed to the runtime selector (``None`` means the
            process arguments).
    """

    def __init__(
        self,
        root_directory: str | Path,
        config: InitConfig | None = None,
        argv: Sequence[str] | None = None,
    ) -> None:
        self.root_directory = Path(root_directory)
        self.config = config or InitConfig()
        self.argv = argv

    async def run(self) -> None:
        await remove_directories(self.root_directory, self.config.folders_to_exclude)

        use_edge = await resolve_runtime_choice(self.argv)
        profile = PROFILES[use_edge]

        if not use_edge:
            await copy_files(
                profile.files,
                self.root_directory,
                template_dir=self.config.template_dir,
            )
            await apply_functions_profile(self.root_directory)
            return

        await asyncio.gather(
            *(
                asyncio.to_thread(
                    (self.root_directory / directory).mkdir, parents=True, exist_ok=True
                )
                for directory in profile.directories
            ),
            copy_files(
                profile.files,
                self.root_directory,
                template_dir=self.config.template_dir,
            ),
        )
        await apply_edge_profile(self.root_directory)


async def run(root_directory: str | Path, argv: Sequence[str] | None = None) -> None:
    """Initialize the project at *root_directory*."""
    await Initializer(root_directory, argv=argv).run()


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``remix-netlify-init`` and ``python -m remix_init``."""
    import argparse

    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    parser = argparse.ArgumentParser(
        prog="remix-netlify-init",
        description="Configure a freshly generated Remix site for Netlify",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  remix-netlify-init --root-directory ./my-site --netlify-edge\n"
            "  remix-netlify-init --no-netlify-edge\n"
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "--root-directory",
        default=".",
        help="Root of the generated project (default: current directory)",
    )
    parser.add_argument(
        "--package-manager",
        default=None,
        help="Package manager chosen by the Remix CLI (accepted and ignored)",
    )
    # Runtime flags and anything else are left to the runtime selector.
    args, _unknown = parser.parse_known_args(argv)

    try:
        asyncio.run(run(args.root_directory, argv=argv))
    except InitError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
