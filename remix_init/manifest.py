"""``package.json`` rewriting for the chosen Netlify runtime.

Each runtime profile removes a fixed set of dependencies and merges a fixed
set of npm scripts into the generated project's manifest. Every other
top-level field is written back untouched, in its original position.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .config import EDGE_PROFILE, FUNCTIONS_PROFILE, RuntimeProfile
from .errors import ManifestError
from .utils import DEFAULT_INDENT, detect_format, parse_json_object, save_json

MANIFEST_NAME = "package.json"


class PackageJson:
    """A loaded ``package.json`` document.

    Mirrors the load/update/save cycle of npm's own package.json tooling:
    ``update`` merges top-level fields into ``content`` and ``save`` writes
    the whole document back to the file it was loaded from, keeping the
    original indentation and line endings.
    """

    def __init__(
        self,
        path: Path,
        content: dict[str, Any],
        indent: str = DEFAULT_INDENT,
        newline: str = "\n",
    ) -> None:
        self.path = path
        self._content = content
        self.indent = indent
        self.newline = newline

    @classmethod
    def load(cls, directory: str | Path) -> "PackageJson":
        """Read ``<directory>/package.json``.

        Raises:
            ManifestError: If the file is missing, unreadable, not valid JSON
                or not a JSON object.
        """
        path = Path(directory) / MANIFEST_NAME
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ManifestError(f"No {MANIFEST_NAME} found in {directory}", path=path) from exc
        except OSError as exc:
            raise ManifestError(f"Unable to read {path}: {exc}", path=path) from exc

        try:
            content = parse_json_object(raw, path)
        except (json.JSONDecodeError, TypeError) as exc:
            raise ManifestError(f"Invalid {MANIFEST_NAME} at {path}: {exc}", path=path) from exc

        indent, newline = detect_format(raw)
        return cls(path, content, indent=indent, newline=newline)

    @property
    def content(self) -> dict[str, Any]:
        return self._content

    def update(self, fields: Mapping[str, Any]) -> None:
        """Merge *fields* into the document's top level.

        Existing keys keep their position; new keys are appended.
        """
        for key, value in fields.items():
            self._content[key] = value

    async def save(self) -> None:
        """Overwrite the file this document was loaded from.

        Raises:
            ManifestError: If the file cannot be written.
        """
        try:
            await save_json(self._content, self.path, indent=self.indent, newline=self.newline)
        except OSError as exc:
            raise ManifestError(f"Unable to write {self.path}: {exc}", path=self.path) from exc


def remove_unused_dependencies(
    dependencies: Mapping[str, str],
    unused_dependencies: Iterable[str],
) -> dict[str, str]:
    """Return *dependencies* without the keys in *unused_dependencies*.

    The relative order of the remaining keys is preserved.
    """
    unused = set(unused_dependencies)
    return {name: version for name, version in dependencies.items() if name not in unused}


def _mapping_field(package_json: PackageJson, field: str) -> dict[str, Any]:
    value = package_json.content.get(field)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ManifestError(
            f"Expected '{field}' in {package_json.path} to be an object, "
            f"got {type(value).__name__}",
            path=package_json.path,
        )
    return value


async def apply_profile(directory: str | Path, profile: RuntimeProfile) -> PackageJson:
    """Rewrite ``<directory>/package.json`` for *profile* and save it in place."""
    package_json = PackageJson.load(directory)
    dependencies = _mapping_field(package_json, "dependencies")
    scripts = _mapping_field(package_json, "scripts")

    package_json.update(
        {
            "dependencies": remove_unused_dependencies(
                dependencies, profile.excluded_dependencies
            ),
            "scripts": {**scripts, **profile.scripts},
        }
    )

    await package_json.save()
    return package_json


async def apply_edge_profile(directory: str | Path) -> PackageJson:
    """Rewrite the manifest for Netlify Edge Functions."""
    return await apply_profile(directory, EDGE_PROFILE)


async def apply_functions_profile(directory: str | Path) -> PackageJson:
    """Rewrite the manifest for Netlify Functions."""
    return await apply_profile(directory, FUNCTIONS_PROFILE)
