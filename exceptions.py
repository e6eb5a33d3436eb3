class ConversionException(Exception):
    """Base class for errors raised while converting a vector drawable."""


class MissingInputException(ConversionException):
    """No input file name could be resolved from the command line."""


class InvalidDrawableException(ConversionException):
    """The input document is not a readable Android vector drawable."""


class RasterizationException(ConversionException):
    """The emitted SVG could not be rendered to a pixel buffer."""


class OutputWriteException(ConversionException):
    """An output file (the SVG or the PNG) could not be written."""
