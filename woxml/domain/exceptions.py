class XmlWriterError(Exception):
    pass


class UnbalancedCloseError(XmlWriterError):
    def __init__(self) -> None:
        super().__init__("attempted to close an element, when none was open")


class UnbalancedNamespaceError(XmlWriterError):
    def __init__(self) -> None:
        super().__init__(
            "attempted to unset a namespace without a corresponding set_namespace"
        )


class NoOpenElementError(XmlWriterError):
    def __init__(self, operation: str) -> None:
        super().__init__(f"attempted to write {operation}, when no element was open")
        self.operation = operation


class AttributesNotAcceptedError(XmlWriterError):
    def __init__(self, element: str, attribute: str) -> None:
        super().__init__(
            f"attribute {attribute!r} rejected: element <{element}> already has content"
        )
        self.element = element
        self.attribute = attribute


class WriterClosedError(XmlWriterError):
    def __init__(self, operation: str) -> None:
        super().__init__(f"attempted to call {operation}() on a closed writer")
        self.operation = operation


class MisplacedDeclarationError(XmlWriterError):
    def __init__(self) -> None:
        super().__init__("the XML declaration must be the first thing written")


class UnencodableTextError(XmlWriterError):
    def __init__(self, original: UnicodeEncodeError) -> None:
        super().__init__(
            f"text cannot be encoded as {original.encoding}: {original.reason}"
        )
        self.original = original


class SinkError(XmlWriterError):
    """Failure raised by the underlying sink, wrapped without modification."""

    def __init__(self, original: BaseException) -> None:
        super().__init__(str(original) or type(original).__name__)
        self.original = original


class SinkWriteError(OSError):
    pass
