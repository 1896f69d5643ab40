"""Shared test fixtures for orm-annotator."""

import shutil
from pathlib import Path

import pytest

from orm_annotator.config import load_config
from orm_annotator.manifest import load_manifest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def project(tmp_path):
    """Writable copy of the fixture project."""
    target = tmp_path / "project"
    shutil.copytree(FIXTURES / "project", target)
    return target


@pytest.fixture
def config(project):
    return load_config(project / "annotator.yaml")


@pytest.fixture
def descriptors(project):
    return load_manifest(project / "annotator-manifest.yaml")
