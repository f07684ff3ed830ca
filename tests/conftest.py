"""Shared pytest configuration.

Qt widgets are created on the offscreen platform so the suite runs
without a display.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PanZoomViewer.core.viewer import Viewer


@pytest.fixture
def shifted_viewer():
    """A viewer with non-zero origin and non-unit scale."""
    return Viewer(size=(640, 480), origin=(-37.5, 112.25), scale=2.5)
