import argparse
import os
import sys
from dataclasses import dataclass

from drawable import Drawable, load_drawable
from exceptions import ConversionException, MissingInputException
from renderer import DEFAULT_SIZE, rasterize_file, write_png
from svg import drawable_to_svg, write_svg

EXIT_FAILURE = 1
EXIT_MISSING_INPUT = 11
EXIT_UNREADABLE_INPUT = 22


@dataclass(frozen=True)
class ConversionConfig:
    """Paths and canvas size of one conversion, resolved once from the command line."""

    input_path: str
    output_path: str
    svg_path: str
    size: int = DEFAULT_SIZE


def change_extension(filename: str, new_ext: str) -> str:
    """Replace the extension of a file name (e.g. "icon.xml" -> "icon.png")."""
    return os.path.splitext(filename)[0] + new_ext


def get_args(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Convert an Android vector drawable to an SVG and a PNG image.")
    parser.add_argument("input", type=str, nargs="?", help="input android vector xml file")
    parser.add_argument("output", type=str, nargs="?", help="output PNG path (default is the input with .png)")
    parser.add_argument("-input", "--input", dest="input_flag", type=str, help="input android vector xml file")
    parser.add_argument("-output", "--output", "-o", dest="output_flag", type=str, help="output PNG path")
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_SIZE,
        help=f"width and height of the square PNG; an extension, the canvas is otherwise fixed (default is {DEFAULT_SIZE})",
    )

    args = parser.parse_args(argv)
    return args


def build_config(args) -> ConversionConfig:
    """Resolve the input, output and intermediate SVG paths. Flags take precedence over positional arguments.

    Raises:
        MissingInputException: if no input file name was given
    """
    input_path = args.input_flag or args.input
    if not input_path:
        raise MissingInputException("Missing input file name (android xml vector drawable).")

    output_path = args.output_flag or args.output or change_extension(input_path, ".png")
    return ConversionConfig(
        input_path=input_path,
        output_path=output_path,
        svg_path=change_extension(output_path, ".svg"),
        size=args.size,
    )


def convert(config: ConversionConfig) -> Drawable:
    """Run the whole conversion: load the drawable, write the SVG, then render and write the PNG.

    Args:
        config (ConversionConfig): resolved paths

    Raises:
        OSError: if the input file cannot be opened
        ConversionException: if any later step fails

    Returns:
        Drawable: the converted drawable
    """
    drawable = load_drawable(config.input_path)
    write_svg(drawable_to_svg(drawable), config.svg_path)
    image = rasterize_file(config.svg_path, config.size)
    write_png(image, config.output_path)
    return drawable


def main(argv: list[str] | None = None):
    args = get_args(argv)

    try:
        config = build_config(args)
    except MissingInputException as e:
        print(e)
        sys.exit(EXIT_MISSING_INPUT)

    try:
        convert(config)
    except ConversionException as e:
        exception_name = type(e).__name__
        print(f"\033[91mError while converting drawable ({exception_name}): \033[0m{e}")
        sys.exit(EXIT_FAILURE)
    except OSError as e:
        print("Error opening file:", e)
        sys.exit(EXIT_UNREADABLE_INPUT)

    print(f'\033[92mSuccessfully saved output image to: "{config.output_path}"\033[0m')


if __name__ == "__main__":
    main()
