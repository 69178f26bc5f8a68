"""
Shared fixtures for the layout tests.
"""

from pathlib import Path

import pytest

from alvr_filesystem.config import LayoutOverrides
from alvr_filesystem.container import ContainerDetector, ContainerPathTranslator
from alvr_filesystem.platforms import profile_for
from alvr_filesystem.resolver import LayoutResolver

HOME = "/home/tester"


@pytest.fixture
def linux():
    return profile_for("linux")


@pytest.fixture
def windows():
    return profile_for("windows")


@pytest.fixture
def macos():
    return profile_for("macos")


@pytest.fixture
def environ():
    return {"HOME": HOME}


@pytest.fixture
def write_marker(tmp_path):
    """Write a container-manager marker file and return its path."""

    def _write(content) -> Path:
        marker = tmp_path / "container-manager"
        if isinstance(content, bytes):
            marker.write_bytes(content)
        else:
            marker.write_text(content, encoding="utf-8")
        return marker

    return _write


@pytest.fixture
def missing_marker(tmp_path):
    return tmp_path / "no-such-container-manager"


@pytest.fixture
def make_resolver(environ, missing_marker):
    def _make(profile, overrides=None, marker=None) -> LayoutResolver:
        detector = ContainerDetector(marker=marker or missing_marker)
        return LayoutResolver(
            overrides=overrides or LayoutOverrides(),
            profile=profile,
            translator=ContainerPathTranslator(profile, detector),
            environ=environ,
        )

    return _make
