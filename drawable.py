import xml.etree.ElementTree
from dataclasses import dataclass

from common import raise_as
from exceptions import InvalidDrawableException


@dataclass(frozen=True)
class VectorPath:
    """A single `<path>` of a vector drawable."""

    path_data: str = ""
    fill_color: str = ""
    fill_type: str = ""


@dataclass(frozen=True)
class Group:
    """A `<group>` of paths. Transforms and nested groups are not modelled."""

    paths: tuple[VectorPath, ...] = ()


@dataclass(frozen=True)
class Drawable:
    """Root `<vector>` element: viewport size, top-level paths and groups, in document order."""

    width: float = 0.0
    height: float = 0.0
    paths: tuple[VectorPath, ...] = ()
    groups: tuple[Group, ...] = ()


def local_name(name: str) -> str:
    """Strip the namespace from an ElementTree tag or attribute name
    (e.g. "{http://schemas.android.com/apk/res/android}pathData" -> "pathData").
    """
    return name.split("}")[-1]


def get_attribute(node, name: str, default: str = "") -> str:
    """Return the value of an attribute matched on its local name, ignoring any namespace prefix."""
    for key, value in node.attrib.items():
        if local_name(key) == name:
            return value
    return default


def children(node, tag: str) -> list:
    return [child for child in node if local_name(child.tag) == tag]


def parse_viewport(node, name: str) -> float:
    value = get_attribute(node, name)
    if not value:
        return 0.0
    try:
        return float(value)
    except ValueError as e:
        raise InvalidDrawableException(f"Bad <vector> {name}: {value}") from e


def parse_path(node) -> VectorPath:
    return VectorPath(
        path_data=get_attribute(node, "pathData"),
        fill_color=get_attribute(node, "fillColor"),
        fill_type=get_attribute(node, "fillType"),
    )


def parse_group(node) -> Group:
    return Group(paths=tuple(parse_path(child) for child in children(node, "path")))


@raise_as(InvalidDrawableException, "Malformed vector drawable XML", catch=(xml.etree.ElementTree.ParseError,))
def parse_drawable(text: str | bytes) -> Drawable:
    """Parse an Android vector drawable document into a `Drawable`.

    Only direct `<path>` and `<group>` children of `<vector>` and the direct
    `<path>` children of each group are kept; missing attributes default to
    empty strings, and a missing viewport size to 0.

    Args:
        text (str | bytes): XML document

    Raises:
        InvalidDrawableException: if the XML is malformed, the root is not `<vector>`
        or a viewport size is not a number

    Returns:
        Drawable: the parsed drawable
    """
    root = xml.etree.ElementTree.fromstring(text)
    if local_name(root.tag) != "vector":
        raise InvalidDrawableException(f"Expected a <vector> root element, found <{local_name(root.tag)}>")

    return Drawable(
        width=parse_viewport(root, "viewportWidth"),
        height=parse_viewport(root, "viewportHeight"),
        paths=tuple(parse_path(child) for child in children(root, "path")),
        groups=tuple(parse_group(child) for child in children(root, "group")),
    )


def load_drawable(xml_path: str) -> Drawable:
    """Read and parse a vector drawable file. Errors opening the file (`OSError`) are not wrapped."""
    with open(xml_path, "rb") as f:
        data = f.read()
    return parse_drawable(data)
