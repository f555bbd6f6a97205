"""Domain services.

The writer core and the pure helpers it delegates byte production to.
"""

from .escaper import escape
from .namespace_manager import NamespaceManager
from .pretty_printer import PrettyPrinter
from .xml_writer import XmlWriter

__all__ = [
    "NamespaceManager",
    "PrettyPrinter",
    "XmlWriter",
    "escape",
]
