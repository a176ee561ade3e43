"""Bundled static resources: template manifest and example document"""

import json
from pathlib import Path


RESOURCE_DIR = Path(__file__).resolve().parent.parent / "resources"

MANIFEST = (RESOURCE_DIR / "manifest.json").read_text(encoding="utf-8")
EXAMPLE = (RESOURCE_DIR / "example.md").read_text(encoding="utf-8")


def manifest_version(manifest: str = MANIFEST) -> str:
    """Return the manifest's version string, or "unknown" when absent or not a string."""
    version = json.loads(manifest).get("version")
    return version if isinstance(version, str) else "unknown"
