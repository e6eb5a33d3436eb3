ANDROID_COLOR_LENGTH = len("#AARRGGBB")


def convert_color(android_color: str) -> str:
    """Convert an Android color to a color usable in an SVG `fill` attribute.

    Android colors of the form "#AARRGGBB" lose their alpha channel ("#FF112233" -> "#112233");
    any other value (e.g. "#112233" or "red") is returned unchanged. Nothing is validated.

    Args:
        android_color (str): color as found in the `android:fillColor` attribute

    Returns:
        str: the SVG color
    """
    if len(android_color) == ANDROID_COLOR_LENGTH:
        return "#" + android_color[3:]
    return android_color
