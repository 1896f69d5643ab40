"""Project path resolution.

Resolves default locations of the annotator's inputs. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    ORM_ANNOTATOR_ROOT — project root (default: current directory)
    ORM_ANNOTATOR_CONFIG — config file (default: <root>/annotator.yaml)
    ORM_ANNOTATOR_MANIFEST — class manifest (default: <root>/annotator-manifest.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_CONFIG_NAME = "annotator.yaml"
_DEFAULT_MANIFEST_NAME = "annotator-manifest.yaml"


def project_root() -> Path:
    """Return the project root directory."""
    return Path(os.environ.get("ORM_ANNOTATOR_ROOT", str(Path.cwd())))


def config_path() -> Path:
    """Return the path to annotator.yaml."""
    env = os.environ.get("ORM_ANNOTATOR_CONFIG")
    if env:
        return Path(env)
    return project_root() / _DEFAULT_CONFIG_NAME


def manifest_path() -> Path:
    """Return the path to annotator-manifest.yaml."""
    env = os.environ.get("ORM_ANNOTATOR_MANIFEST")
    if env:
        return Path(env)
    return project_root() / _DEFAULT_MANIFEST_NAME
