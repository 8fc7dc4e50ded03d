"""Remix Netlify initializer configuration.

Typed, immutable settings for a single initializer run. Every runtime the
generated project can target is described by a ``RuntimeProfile``; the two
known profiles are fixed tables defined at the bottom of this module.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuntimeProfile(BaseModel):
    """Files, dependencies and npm scripts for one Netlify deployment target.

    ``files`` is an ordered sequence of ``(source, destination)`` pairs
    relative to the template directory and the project root respectively.
    A pair given as a single-element tuple copies the file to the same
    relative path.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    files: tuple[tuple[str, str], ...] = Field(default=())
    directories: tuple[str, ...] = Field(
        default=(), description="Directories created alongside the copied files"
    )
    excluded_dependencies: frozenset[str] = Field(default=frozenset())
    scripts: Mapping[str, str] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("files", mode="before")
    @classmethod
    def _default_destinations(cls, value: object) -> object:
        if value is None:
            return ()
        pairs = []
        for pair in value:  # type: ignore[union-attr]
            if isinstance(pair, str):
                pair = (pair,)
            pair = tuple(pair)
            if len(pair) == 1:
                pairs.append((pair[0], pair[0]))
            elif len(pair) == 2:
                pairs.append((pair[0], pair[1] or pair[0]))
            else:
                raise ValueError(f"Invalid file pair: {pair!r}")
        return tuple(pairs)

    @field_validator("scripts", mode="after")
    @classmethod
    def _freeze_scripts(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


class InitConfig(BaseModel):
    """Settings for one initializer run.

    Instances are created once by the CLI entry point (or by tests) and
    passed to ``Initializer``.
    """

    model_config = ConfigDict(frozen=True)

    template_dir: str = Field(default="remix.init")
    folders_to_exclude: tuple[str, ...] = Field(default=(".github",))


# ---------------------------------------------------------------------------
# Fixed runtime profiles
# ---------------------------------------------------------------------------

# Netlify Edge Functions (primary runtime).
EDGE_PROFILE = RuntimeProfile(
    name="Netlify Edge Functions",
    files=(
        ("README-edge.md", "README.md"),
        ("netlify-edge.toml", "netlify.toml"),
        ("server.ts",),
        ("remix.config.js",),
        ("vscode.json", ".vscode/settings.json"),
    ),
    directories=(".vscode",),
    excluded_dependencies=frozenset(
        {
            "@netlify/functions",
            "@netlify/remix-adapter",
            "shx",
            "source-map-support",
        }
    ),
    # Same as the start script under Netlify Edge.
    scripts={
        "dev": 'remix dev --manual -c "ntl dev --framework=#static"',
    },
)

# Netlify Functions (alternate, serverless runtime).
FUNCTIONS_PROFILE = RuntimeProfile(
    name="Netlify Functions",
    files=(
        ("README.md",),
        ("netlify.toml",),
        (".redirects",),
    ),
    excluded_dependencies=frozenset(
        {
            "@netlify/edge-functions",
            "@netlify/remix-edge-adapter",
            "@netlify/remix-runtime",
        }
    ),
    scripts={
        "build": "npm run redirects:enable && remix build",
        "dev": "npm run redirects:disable && remix dev",
        "redirects:enable": "shx cp .redirects public/_redirects",
        "redirects:disable": "shx rm -f public/_redirects",
    },
)

PROFILES: Mapping[bool, RuntimeProfile] = MappingProxyType(
    {True: EDGE_PROFILE, False: FUNCTIONS_PROFILE}
)
