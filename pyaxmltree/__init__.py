# flake8: noqa

from .axmlparser import AXMLParser, decode
from .axmlprinter import AXMLPrinter
from .element import XmlElement
from .exceptions import FormatError
from .resvalue import TypedValue

__all__ = (
    "__title__",
    "__package_name__",
    "__description__",
    "__version__",
    "__author__",
    "__license__",
    "decode",
    "AXMLParser",
    "AXMLPrinter",
    "XmlElement",
    "TypedValue",
    "FormatError",
)

__title__ = "Pyaxmltree"
__package_name__ = "pyaxmltree"
__description__ = (
    "Decoder for Android binary XML (AXML) into an element tree."
)
__version__ = "0.1.0"
__author__ = "pyaxmltree contributors"
__license__ = "Apache License 2.0"
