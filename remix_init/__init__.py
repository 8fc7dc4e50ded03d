"""Remix Netlify initializer -- configures a generated Remix site for Netlify.

Quick usage::

    import asyncio
    from remix_init import run

    asyncio.run(run("./my-remix-site", argv=["--netlify-edge"]))
"""

from remix_init.config import EDGE_PROFILE, FUNCTIONS_PROFILE, PROFILES, InitConfig, RuntimeProfile
from remix_init.errors import InitError, ManifestError, StagingError
from remix_init.initializer import Initializer, main, run
from remix_init.manifest import (
    PackageJson,
    apply_edge_profile,
    apply_functions_profile,
    apply_profile,
    remove_unused_dependencies,
)
from remix_init.runtime import parse_runtime_flag, prompt_runtime_choice, resolve_runtime_choice
from remix_init.staging import copy_files, remove_directories

__all__ = [
    "EDGE_PROFILE",
    "FUNCTIONS_PROFILE",
    "PROFILES",
    "InitConfig",
    "InitError",
    "Initializer",
    "ManifestError",
    "PackageJson",
    "RuntimeProfile",
    "StagingError",
    "apply_edge_profile",
    "apply_functions_profile",
    "apply_profile",
    "copy_files",
    "main",
    "parse_runtime_flag",
    "prompt_runtime_choice",
    "remove_directories",
    "remove_unused_dependencies",
    "resolve_runtime_choice",
    "run",
]
