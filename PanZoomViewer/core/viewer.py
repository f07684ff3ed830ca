"""Immutable pan/zoom viewer state and its pure operations.

A Viewer describes the affine mapping between two coordinate systems:

- viewer space: pixels of the on-screen surface, origin at the top-left
- image space: coordinates of the displayed content (e.g. image pixels)

The mapping is ``image = origin + scale * viewer``. ``origin`` is the
image-space point shown at viewer (0, 0) and ``scale`` is the number of
image units covered by one viewer pixel (scale > 1 is zoomed out,
scale < 1 is zoomed in).

Every operation returns a new Viewer; instances are never modified.

Example:
    >>> v = Viewer.with_size((800, 600)).fit_image((400, 300))
    >>> v.scale
    0.5
    >>> v.coordinates_at_center()
    (200.0, 150.0)
"""

from dataclasses import dataclass, replace
from typing import Tuple

from .constants import ZOOM_IN_COEF, ZOOM_OUT_COEF

Point = Tuple[float, float]
Size = Tuple[float, float]


def _pair(values) -> Tuple[float, float]:
    x, y = values
    return (float(x), float(y))


@dataclass(frozen=True)
class Viewer:
    """Geometric state of a pan/zoom view.

    Attributes:
        size: (width, height) of the viewing surface in viewer pixels.
              Kept current by the owner of the surface.
        origin: Image-space coordinates shown at viewer (0, 0).
        scale: Image units per viewer pixel. Must stay strictly positive.
    """

    size: Size
    origin: Point = (0.0, 0.0)
    scale: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "size", _pair(self.size))
        object.__setattr__(self, "origin", _pair(self.origin))
        object.__setattr__(self, "scale", float(self.scale))

    # Construction

    @classmethod
    def with_size(cls, size: Size) -> "Viewer":
        """Create a viewer of the given size at origin (0, 0) and scale 1."""
        return cls(size=size)

    def resize(self, size: Size) -> "Viewer":
        """Replace the surface size, keeping origin and scale.

        The visible window grows or shrinks from the top-left corner; the
        content is neither re-fitted nor re-centered.
        """
        return replace(self, size=size)

    # Coordinate conversion

    def coordinates_at(self, point: Point) -> Point:
        """Image-space coordinates of a viewer-space point."""
        x, y = point
        ox, oy = self.origin
        return (ox + self.scale * x, oy + self.scale * y)

    def coordinates_at_center(self) -> Point:
        """Image-space coordinates shown at the middle of the surface."""
        w, h = self.size
        return self.coordinates_at((0.5 * w, 0.5 * h))

    def coordinates_in_viewer(self, point: Point) -> Point:
        """Viewer-space position of an image-space point.

        Exact inverse of :meth:`coordinates_at` for any origin and scale.
        """
        x, y = point
        ox, oy = self.origin
        return ((x - ox) / self.scale, (y - oy) / self.scale)

    def visible_rect(self) -> Tuple[float, float, float, float]:
        """Image-space (x, y, width, height) of the window currently shown."""
        ox, oy = self.origin
        w, h = self.size
        return (ox, oy, self.scale * w, self.scale * h)

    # Translation

    def translate(self, delta: Point) -> "Viewer":
        """Shift the origin by ``delta`` image units."""
        dx, dy = delta
        ox, oy = self.origin
        return replace(self, origin=(ox + dx, oy + dy))

    def center_at_coordinates(self, point: Point) -> "Viewer":
        """Move the view so that ``point`` (image space) sits at the center."""
        x, y = point
        w, h = self.size
        return replace(self, origin=(x - 0.5 * self.scale * w, y - 0.5 * self.scale * h))

    def pan(self, delta: Point) -> "Viewer":
        """Apply a drag of ``delta`` viewer pixels.

        The content follows the pointer: the image point that was under the
        pointer before the drag is under it again afterwards.
        """
        dx, dy = delta
        return self.translate((-self.scale * dx, -self.scale * dy))

    # Scaling

    def fit_image(self, content_size: Size, margin: float = 1.0) -> "Viewer":
        """Scale and center the view so that the content fits entirely.

        Args:
            content_size: (width, height) of the content in image units.
            margin: Extra room around the content along the binding axis
                    (1.0 = exact fit, 1.1 = 10% margin).

        The surface must have a non-zero width and height.
        """
        cw, ch = content_size
        w, h = self.size
        new_scale = margin * max(cw / w, ch / h)
        rescaled = replace(self, scale=new_scale)
        return rescaled.center_at_coordinates((0.5 * cw, 0.5 * ch))

    def rescale_centered(self, scale: float) -> "Viewer":
        """Change the scale, keeping the image point at the center fixed."""
        center = self.coordinates_at_center()
        return replace(self, scale=scale).center_at_coordinates(center)

    def rescale_fix_point(self, scale: float, point: Point) -> "Viewer":
        """Change the scale, keeping ``point`` (image space) under the same viewer pixel."""
        x, y = point
        vx, vy = self.coordinates_in_viewer(point)
        return replace(self, origin=(x - scale * vx, y - scale * vy), scale=scale)

    def zoom_in(self) -> "Viewer":
        return self.rescale_centered(self.scale * ZOOM_IN_COEF)

    def zoom_out(self) -> "Viewer":
        return self.rescale_centered(self.scale * ZOOM_OUT_COEF)

    def zoom_toward(self, point: Point) -> "Viewer":
        """Zoom in one step, anchored at an image-space point (e.g. under the cursor)."""
        return self.rescale_fix_point(self.scale * ZOOM_IN_COEF, point)

    def zoom_away_from(self, point: Point) -> "Viewer":
        """Zoom out one step, anchored at an image-space point."""
        return self.rescale_fix_point(self.scale * ZOOM_OUT_COEF, point)
