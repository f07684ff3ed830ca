"""Export the current view as a standalone SVG document.

The document has the size of the viewing surface and contains the image
inside a group carrying the Viewer's SVG transform, so opening the file
shows exactly what the canvas shows.
"""

import base64
from pathlib import Path
from typing import Union
from xml.sax.saxutils import quoteattr

import cv2
import numpy as np

from .image_io import image_size
from .transforms import format_number, svg_transform
from .viewer import Size, Viewer

SVG_NS = "http://www.w3.org/2000/svg"


def encode_png_data_uri(arr: np.ndarray) -> str:
    """Encode an RGB/RGBA/grayscale array as a ``data:image/png`` URI.

    Raises:
        ValueError: If OpenCV cannot encode the array.
    """
    a = arr
    if np.issubdtype(a.dtype, np.floating):
        a = np.clip(a * 255.0, 0, 255).astype(np.uint8)
    if a.ndim == 3 and a.shape[2] == 3:
        a = cv2.cvtColor(a, cv2.COLOR_RGB2BGR)
    elif a.ndim == 3 and a.shape[2] == 4:
        a = cv2.cvtColor(a, cv2.COLOR_RGBA2BGRA)
    ok, buf = cv2.imencode(".png", a)
    if not ok:
        raise ValueError("Could not encode image as PNG")
    return "data:image/png;base64," + base64.b64encode(buf.tobytes()).decode("ascii")


def build_view_svg(viewer: Viewer, content_size: Size, image_href: str) -> str:
    """Build the SVG markup for the given view.

    Args:
        viewer: Current viewer state
        content_size: (width, height) of the image in image units
        image_href: URI of the image (file path or data URI)

    Returns:
        SVG document as a string
    """
    w, h = (format_number(v) for v in viewer.size)
    cw, ch = (format_number(v) for v in content_size)
    return (
        f'<svg xmlns="{SVG_NS}" width="{w}" height="{h}" viewBox="0 0 {w} {h}">\n'
        f'  <g transform="{svg_transform(viewer)}">\n'
        f'    <image x="0" y="0" width="{cw}" height="{ch}" href={quoteattr(image_href)} />\n'
        "  </g>\n"
        "</svg>\n"
    )


def export_view_svg(path: Union[str, Path], viewer: Viewer, arr: np.ndarray) -> Path:
    """Write the current view of ``arr`` to ``path`` with the image embedded.

    Returns:
        The path written to.
    """
    out = Path(path)
    svg = build_view_svg(viewer, image_size(arr), encode_png_data_uri(arr))
    out.write_text(svg, encoding="utf-8")
    return out
