import xml.etree.ElementTree
from io import BytesIO

import cairosvg
from PIL import Image

from common import raise_as
from exceptions import OutputWriteException, RasterizationException
from svg import SVG_NAMESPACE

DEFAULT_SIZE = 512

xml.etree.ElementTree.register_namespace("", SVG_NAMESPACE)


def stretch_to_canvas(svg: bytes) -> bytes:
    """Return a copy of the SVG whose viewBox is scaled independently on each axis to fill the output."""
    root = xml.etree.ElementTree.fromstring(svg)
    root.set("preserveAspectRatio", "none")
    return xml.etree.ElementTree.tostring(root, encoding="utf-8")


@raise_as(RasterizationException, "Could not rasterize SVG")
def rasterize(svg: str | bytes, size: int = DEFAULT_SIZE) -> Image.Image:
    """Render an SVG document onto a transparent `size`x`size` RGBA image.

    The viewBox is stretched over the whole canvas, so a non-square viewport is
    scaled differently along x and y rather than letterboxed.

    Args:
        svg (str | bytes): SVG document
        size (int, optional): width and height of the image in pixels. Defaults to 512.

    Raises:
        RasterizationException: if CairoSVG fails to parse or render the document

    Returns:
        Image.Image: the rendered image
    """
    if size <= 0:
        raise ValueError(f"Invalid image size: {size}")
    if isinstance(svg, str):
        svg = svg.encode("utf-8")

    png_bytes = cairosvg.svg2png(bytestring=stretch_to_canvas(svg), output_width=size, output_height=size)
    return Image.open(BytesIO(png_bytes)).convert("RGBA")


@raise_as(RasterizationException, "Could not read SVG file", catch=(OSError,))
def read_svg(svg_path: str) -> bytes:
    with open(svg_path, "rb") as f:
        return f.read()


def rasterize_file(svg_path: str, size: int = DEFAULT_SIZE) -> Image.Image:
    """Read an SVG file and render it, see `rasterize`."""
    return rasterize(read_svg(svg_path), size)


@raise_as(OutputWriteException, "Could not write PNG image", catch=(OSError, ValueError))
def write_png(image: Image.Image, png_path: str) -> None:
    with open(png_path, "wb") as f:
        image.save(f, format="PNG")
