"""woxml package.

A streaming, write-only XML serializer. Structural calls (open element,
set attribute, write text, close element, ...) are turned into well-formed
XML bytes immediately and appended to a sink; no document tree is built.

Features:
- Compact and pretty (indented) output
- Escaping of the five predefined entities for text and attribute values
- Namespace prefixes applied to element names
- Typed errors for ill-formed call sequences, raised before any byte is written
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("woxml")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from woxml.domain.entities.output import OutputMode, WriterLifecycle
from woxml.domain.exceptions import (
    AttributesNotAcceptedError,
    MisplacedDeclarationError,
    NoOpenElementError,
    SinkError,
    SinkWriteError,
    UnbalancedCloseError,
    UnbalancedNamespaceError,
    UnencodableTextError,
    WriterClosedError,
    XmlWriterError,
)
from woxml.domain.services.escaper import escape
from woxml.domain.services.xml_writer import XmlWriter
from woxml.infrastructure.io.sinks import BytesSink, StreamSink

__all__ = [
    "__version__",
    # Writer
    "XmlWriter",
    "OutputMode",
    "WriterLifecycle",
    "escape",
    # Sinks
    "BytesSink",
    "StreamSink",
    # Errors
    "XmlWriterError",
    "UnbalancedCloseError",
    "UnbalancedNamespaceError",
    "NoOpenElementError",
    "AttributesNotAcceptedError",
    "WriterClosedError",
    "MisplacedDeclarationError",
    "UnencodableTextError",
    "SinkError",
    "SinkWriteError",
]
