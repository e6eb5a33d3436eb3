from color import convert_color
from common import raise_as
from drawable import Drawable, VectorPath
from exceptions import OutputWriteException

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def path_to_svg(path: VectorPath) -> str:
    """Return the `<path>` element for a drawable path. Path data is copied as is, without escaping."""
    return f'<path d="{path.path_data}" fill="{convert_color(path.fill_color)}"/>'


def drawable_to_svg(drawable: Drawable) -> str:
    """Serialize a drawable to a minimal SVG document.

    Top-level paths come first, then one `<g>` per group, each in document order.

    Args:
        drawable (Drawable): parsed vector drawable

    Returns:
        str: SVG document
    """
    parts = [f'<svg viewBox="0 0 {drawable.width:.1f} {drawable.height:.1f}" xmlns="{SVG_NAMESPACE}">']
    parts.extend(path_to_svg(path) for path in drawable.paths)
    for group in drawable.groups:
        parts.append("<g>")
        parts.extend(path_to_svg(path) for path in group.paths)
        parts.append("</g>")
    parts.append("</svg>")
    return "".join(parts)


@raise_as(OutputWriteException, "Could not write SVG file", catch=(OSError,))
def write_svg(svg: str, svg_path: str) -> None:
    with open(svg_path, "w", encoding="utf-8") as f:
        f.write(svg)
