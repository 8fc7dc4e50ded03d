"""Template file staging.

Copies the static files of a runtime profile from the template directory
into the generated project, and removes directories that only belong to the
template repository.

The two operations deliberately fail differently: ``copy_files`` stops at
the first error, ``remove_directories`` attempts every directory and only
reports what it could not delete.
"""

from __future__ import annotations

import asyncio
import shutil
from collections.abc import Iterable, Sequence
from pathlib import Path

from .errors import StagingError
from .utils import print_warning

DEFAULT_TEMPLATE_DIR = "remix.init"


def _copy_file(source: Path, destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)


async def copy_files(
    pairs: Iterable[Sequence[str]],
    root_directory: str | Path,
    template_dir: str = DEFAULT_TEMPLATE_DIR,
) -> list[Path]:
    """Copy template files into the project root, byte for byte.

    Args:
        pairs: ``(source, destination)`` pairs. Sources are relative to
            ``<root_directory>/<template_dir>``, destinations to
            *root_directory*. A single-element pair keeps the source path.
        root_directory: The generated project's root.
        template_dir: Name of the template subdirectory.

    Returns:
        The destination paths, in copy order.

    Raises:
        StagingError: On the first file that cannot be copied. Files copied
            before the failure are left in place.
    """
    root = Path(root_directory)
    template_root = root / template_dir
    copied: list[Path] = []

    for pair in pairs:
        source_name = pair[0]
        target_name = pair[1] if len(pair) > 1 and pair[1] else source_name
        source = template_root / source_name
        destination = root / target_name
        try:
            await asyncio.to_thread(_copy_file, source, destination)
        except OSError as exc:
            raise StagingError(
                f"Unable to copy template file {source} to {destination}: {exc}",
                source=source,
                destination=destination,
            ) from exc
        copied.append(destination)

    return copied


def _remove_tree(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink(missing_ok=True)


async def remove_directories(
    root_directory: str | Path,
    relative_dirs: Sequence[str],
) -> list[str]:
    """Recursively delete template-only directories, best effort.

    Every directory is removed concurrently and independently; a missing
    directory counts as removed. Failures are never raised. If any removal
    fails a single warning naming the affected directories is printed.

    Returns:
        The directories that could not be removed (empty on full success).
    """
    root = Path(root_directory)
    results = await asyncio.gather(
        *(asyncio.to_thread(_remove_tree, root / folder) for folder in relative_dirs),
        return_exceptions=True,
    )

    failed = [
        folder
        for folder, result in zip(relative_dirs, results)
        if isinstance(result, Exception)
    ]
    if failed:
        print_warning(
            f"Unable to remove folders {', '.join(failed)}. You can remove them manually."
        )
    return failed
