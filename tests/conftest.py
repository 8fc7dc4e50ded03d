"""Shared pytest fixtures for the initializer test suite.

Provides reusable fixtures for:
- A freshly generated Remix project on disk (template files, manifest, CI dir)
- Sample ``package.json`` content
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


TEMPLATE_FILES: dict[str, str] = {
    "README-edge.md": "# Remix on Netlify Edge Functions\n",
    "netlify-edge.toml": '[build]\ncommand = "remix build"\npublish = "public"\n',
    "server.ts": 'export default createRequestHandler({ build, mode: "production" });\n',
    "remix.config.js": "module.exports = { server: './server.ts' };\n",
    "vscode.json": '{\n  "deno.enablePaths": ["netlify/edge-functions"]\n}\n',
    "README.md": "# Remix on Netlify Functions\n",
    "netlify.toml": '[build]\ncommand = "npm run build"\npublish = "public"\n',
    ".redirects": "/*    /.netlify/functions/server    200\n",
}


@pytest.fixture
def template_files() -> dict[str, str]:
    """Contents of every file shipped in ``remix.init``, keyed by name."""
    return dict(TEMPLATE_FILES)


# ---------------------------------------------------------------------------
# Manifest content
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_package_json() -> dict[str, Any]:
    """A package.json as generated by the Remix template, before rewriting."""
    return {
        "name": "my-remix-site",
        "private": True,
        "sideEffects": False,
        "scripts": {
            "build": "remix build",
            "dev": "remix dev",
            "start": "cross-env NODE_ENV=production netlify dev",
            "typecheck": "tsc",
        },
        "dependencies": {
            "@netlify/edge-functions": "^2.0.0",
            "@netlify/functions": "^1.6.0",
            "@netlify/remix-adapter": "^2.0.0",
            "@netlify/remix-edge-adapter": "^2.0.0",
            "@netlify/remix-runtime": "^2.0.0",
            "@remix-run/react": "^2.0.0",
            "cross-env": "^7.0.3",
            "react": "^18.2.0",
            "react-dom": "^18.2.0",
            "shx": "^0.3.4",
            "source-map-support": "^0.5.21",
        },
        "devDependencies": {
            "@remix-run/dev": "^2.0.0",
            "typescript": "^5.1.6",
        },
        "engines": {"node": ">=18"},
    }


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def remix_project(tmp_path: Path, sample_package_json: dict[str, Any]) -> Path:
    """Freshly generated Remix project with its ``remix.init`` template files.

    Layout::

        my-remix-site/
            package.json
            .github/workflows/ci.yml
            remix.init/<TEMPLATE_FILES>
    """
    root = tmp_path / "my-remix-site"
    template_dir = root / "remix.init"
    template_dir.mkdir(parents=True)
    for name, content in TEMPLATE_FILES.items():
        (template_dir / name).write_text(content, encoding="utf-8")

    workflows = root / ".github" / "workflows"
    workflows.mkdir(parents=True)
    (workflows / "ci.yml").write_text("name: CI\n", encoding="utf-8")

    (root / "package.json").write_text(
        json.dumps(sample_package_json, indent=2) + "\n", encoding="utf-8"
    )
    yield root

