"""Zoom and pan management for a viewing surface.

This module turns user gestures into Viewer operations:
- Keeping the Viewer size in sync with the surface
- Fit-to-window and 1:1 display of the loaded content
- Centered zoom (buttons, shortcuts) and cursor-anchored zoom (wheel)
- Drag panning and click-to-center from the navigator

ZoomManager holds the single current Viewer of a surface and replaces it
after every gesture. It does not depend on Qt so it can be driven by any
widget (and by tests) with plain tuples.
"""

import logging
from typing import Callable, List, Optional, Tuple

from ...core.constants import (
    DEFAULT_FIT_MARGIN,
    MAX_SCALE,
    MIN_SCALE,
    WHEEL_STEP,
    ZOOM_IN_COEF,
    ZOOM_OUT_COEF,
)
from ...core.viewer import Point, Size, Viewer

logger = logging.getLogger(__name__)


class ZoomManager:
    """Owns the current Viewer of a surface and applies gestures to it.

    The Viewer operations themselves accept any positive scale; this class
    guards the caller side of that contract by refusing zoom steps that
    leave [MIN_SCALE, MAX_SCALE] and by never fitting against a surface
    with zero width or height.

    Attributes:
        viewer: Current Viewer value (replaced, never mutated)
        content_size: (width, height) of the displayed content, or None
    """

    def __init__(self, size: Size = (0.0, 0.0)):
        """Initialize zoom manager.

        Args:
            size: Initial (width, height) of the viewing surface
        """
        self.viewer = Viewer.with_size(size)
        self.content_size: Optional[Tuple[float, float]] = None
        self._listeners: List[Callable[[Viewer], None]] = []
        self._wheel_accum = 0.0

    def add_listener(self, callback: Callable[[Viewer], None]):
        """Register a callback invoked with the new Viewer after every change."""
        self._listeners.append(callback)

    def _set_viewer(self, viewer: Viewer, reason: str):
        if viewer == self.viewer:
            return
        self.viewer = viewer
        logger.debug("%s: origin=(%.3f, %.3f) scale=%.5f", reason, viewer.origin[0], viewer.origin[1], viewer.scale)
        for callback in self._listeners:
            callback(viewer)

    def has_area(self) -> bool:
        """Return True if the surface has a non-zero width and height."""
        w, h = self.viewer.size
        return w > 0 and h > 0

    def resize(self, size: Size):
        """Update the surface size; origin and scale are kept."""
        self._set_viewer(self.viewer.resize(size), "resize")

    def set_content(self, size: Optional[Size], fit: bool = True):
        """Set the size of the displayed content.

        Args:
            size: (width, height) in image units, or None when nothing is shown
            fit: Fit the new content to the surface right away
        """
        self.content_size = None if size is None else (float(size[0]), float(size[1]))
        if self.content_size is None:
            self._set_viewer(Viewer.with_size(self.viewer.size), "clear content")
        elif fit:
            self.fit()

    def fit(self, margin: float = DEFAULT_FIT_MARGIN) -> bool:
        """Fit the content into the surface with the given margin.

        Returns:
            False if there is no content or the surface has zero area.
        """
        if self.content_size is None or not self.has_area():
            logger.debug("fit skipped: content=%s size=%s", self.content_size, self.viewer.size)
            return False
        cw, ch = self.content_size
        if cw <= 0 or ch <= 0:
            logger.debug("fit skipped: empty content %s", self.content_size)
            return False
        self._set_viewer(self.viewer.fit_image(self.content_size, margin), "fit")
        return True

    def reset(self):
        """Show the content at 1:1 (one image unit per viewer pixel), keeping the center."""
        self._set_viewer(self.viewer.rescale_centered(1.0), "reset")

    def _allowed(self, new_scale: float) -> bool:
        # A step is refused only if it moves further outside the limits
        old = self.viewer.scale
        if new_scale < old and new_scale < MIN_SCALE:
            return False
        if new_scale > old and new_scale > MAX_SCALE:
            return False
        return True

    def zoom_in(self) -> bool:
        if not self._allowed(self.viewer.scale * ZOOM_IN_COEF):
            logger.debug("zoom in refused at scale %.5f", self.viewer.scale)
            return False
        self._set_viewer(self.viewer.zoom_in(), "zoom in")
        return True

    def zoom_out(self) -> bool:
        if not self._allowed(self.viewer.scale * ZOOM_OUT_COEF):
            logger.debug("zoom out refused at scale %.5f", self.viewer.scale)
            return False
        self._set_viewer(self.viewer.zoom_out(), "zoom out")
        return True

    def zoom_toward_viewer_point(self, point: Point) -> bool:
        """Zoom in one step keeping the image point under ``point`` (viewer space) fixed."""
        if not self._allowed(self.viewer.scale * ZOOM_IN_COEF):
            logger.debug("zoom toward refused at scale %.5f", self.viewer.scale)
            return False
        anchor = self.viewer.coordinates_at(point)
        self._set_viewer(self.viewer.zoom_toward(anchor), "zoom toward")
        return True

    def zoom_away_from_viewer_point(self, point: Point) -> bool:
        """Zoom out one step keeping the image point under ``point`` (viewer space) fixed."""
        if not self._allowed(self.viewer.scale * ZOOM_OUT_COEF):
            logger.debug("zoom away refused at scale %.5f", self.viewer.scale)
            return False
        anchor = self.viewer.coordinates_at(point)
        self._set_viewer(self.viewer.zoom_away_from(anchor), "zoom away")
        return True

    def wheel(self, delta_y: float, point: Point) -> bool:
        """Apply one wheel event at a viewer-space position.

        Scrolling up (positive delta) zooms toward the cursor, scrolling
        down zooms away from it. Deltas are accumulated so that fine-grained
        devices (touchpads) zoom once per WHEEL_STEP units; at most one zoom
        step is applied per event.

        Returns:
            True if a zoom step was applied.
        """
        if delta_y == 0:
            return False
        if self._wheel_accum * delta_y < 0:
            # Direction changed
            self._wheel_accum = 0.0
        self._wheel_accum += delta_y
        if abs(self._wheel_accum) < WHEEL_STEP:
            return False
        if self._wheel_accum > 0:
            self._wheel_accum -= WHEEL_STEP
            return self.zoom_toward_viewer_point(point)
        self._wheel_accum += WHEEL_STEP
        return self.zoom_away_from_viewer_point(point)

    def pan(self, delta: Point):
        """Apply a drag of ``delta`` viewer pixels."""
        self._set_viewer(self.viewer.pan(delta), "pan")

    def center_on(self, point: Point):
        """Center the view on an image-space point."""
        self._set_viewer(self.viewer.center_at_coordinates(point), "center")

    def image_point_at(self, point: Point) -> Point:
        """Image-space coordinates under a viewer-space position."""
        return self.viewer.coordinates_at(point)
