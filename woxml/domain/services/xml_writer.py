"""Streaming, write-only XML writer.

The writer emits bytes straight into a sink as calls arrive and never
builds a document tree. It keeps two independent stacks: open elements
(each with its own write state) and namespace prefixes.

Every public call validates the current state before producing output,
then hands the complete byte string for that call to the sink in a single
``write``. A rejected call therefore leaves both the sink and the writer
state untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from ...constants import Defaults, Markup
from ..entities.element import ElementEntry
from ..entities.output import OutputMode, WriterLifecycle
from ..exceptions import (
    AttributesNotAcceptedError,
    MisplacedDeclarationError,
    NoOpenElementError,
    SinkError,
    UnbalancedCloseError,
    UnbalancedNamespaceError,
    UnencodableTextError,
    WriterClosedError,
    XmlWriterError,
)
from .escaper import escape
from .namespace_manager import NamespaceManager
from .pretty_printer import PrettyPrinter

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort, SinkPort
    from ...config import WriterConfig

type NamespaceMap = Mapping[str | None, str] | Iterable[tuple[str | None, str]]


class XmlWriter[S: SinkPort]:
    def __init__(
        self,
        sink: S,
        mode: OutputMode | str = OutputMode.COMPACT,
        *,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self._sink = sink
        self._mode = OutputMode.parse(mode)
        self._logger = logger
        self._printer = PrettyPrinter(self._mode)
        self._namespaces = NamespaceManager()
        self._stack: list[ElementEntry] = []
        self._lifecycle = WriterLifecycle.OPEN
        self._detached = False
        self._bytes_written = 0
        self._elements_written = 0
        if self._logger is not None:
            self._logger.log_session_start(self._mode)

    @classmethod
    def compact_mode(cls, sink: S, *, logger: LoggerPort | None = None) -> XmlWriter[S]:
        return cls(sink, OutputMode.COMPACT, logger=logger)

    @classmethod
    def pretty_mode(cls, sink: S, *, logger: LoggerPort | None = None) -> XmlWriter[S]:
        return cls(sink, OutputMode.PRETTY, logger=logger)

    @classmethod
    def from_config(
        cls, sink: S, config: WriterConfig, *, logger: LoggerPort | None = None
    ) -> XmlWriter[S]:
        return cls(sink, config.mode, logger=logger)

    def __repr__(self) -> str:
        names = [entry.name for entry in self._stack]
        return (
            f"XmlWriter(mode={self._mode.value}, stack={names}, "
            f"lifecycle={self._lifecycle.value})"
        )

    @property
    def mode(self) -> OutputMode:
        return self._mode

    @property
    def lifecycle(self) -> WriterLifecycle:
        return self._lifecycle

    @property
    def is_closed(self) -> bool:
        return self._lifecycle is WriterLifecycle.CLOSED

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def open_elements(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self._stack)

    @property
    def namespace(self) -> str | None:
        return self._namespaces.current

    @property
    def bytes_written(self) -> int:
        return self._bytes_written

    # Namespaces

    def set_namespace(self, prefix: str | None) -> None:
        """Qualify subsequently opened element names with ``prefix``."""
        self._ensure_open("set_namespace")
        self._namespaces.push(prefix)

    def unset_namespace(self) -> None:
        self._ensure_open("unset_namespace")
        try:
            self._namespaces.pop()
        except UnbalancedNamespaceError as e:
            raise self._reject("unset_namespace", e)

    # Elements

    def begin_elem(self, name: str) -> None:
        """Open an element; its start tag stays open for attributes."""
        self._ensure_open("begin_elem")
        qualified = self._namespaces.qualify(name)
        parent = self._top()
        self._emit(*self._start_tag(parent, qualified))
        if parent is not None:
            parent.mark_content(child_node=True)
        self._record_element(qualified)
        self._stack.append(ElementEntry(qualified))

    def elem(self, name: str) -> None:
        """Write a self-closing element like ``<br/>``."""
        self._ensure_open("elem")
        qualified = self._namespaces.qualify(name)
        parent = self._top()
        self._emit(*self._start_tag(parent, qualified), "/>")
        if parent is not None:
            parent.mark_content(child_node=True)
        self._record_element(qualified)

    def elem_text(self, name: str, text: str) -> None:
        """Write a complete element whose content is ``text``, escaped."""
        self._ensure_open("elem_text")
        qualified = self._namespaces.qualify(name)
        parent = self._top()
        self._emit(
            *self._start_tag(parent, qualified),
            ">",
            escape(text),
            "</",
            qualified,
            ">",
        )
        if parent is not None:
            parent.mark_content(child_node=True)
        self._record_element(qualified)

    def end_elem(self) -> None:
        self._ensure_open("end_elem")
        entry = self._top()
        if entry is None:
            raise self._reject("end_elem", UnbalancedCloseError())
        self._emit(*self._end_tag(entry, len(self._stack) - 1))
        self._stack.pop()

    # Attributes

    def attr(self, name: str, value: str) -> None:
        """Write an attribute verbatim.

        The caller guarantees that ``name`` and ``value`` contain only
        characters allowed in that position. Use ``attr_esc`` otherwise.
        """
        self._ensure_open("attr")
        self._require_attributes("attr", name)
        self._emit(" ", name, '="', value, '"')

    def attr_esc(self, name: str, value: str) -> None:
        self._ensure_open("attr_esc")
        self._require_attributes("attr_esc", name)
        self._emit(" ", name, '="', escape(value), '"')

    def ns_decl(self, ns_map: NamespaceMap) -> None:
        """Declare namespaces on the current element.

        A ``None`` (or empty) prefix declares the default namespace.
        """
        self._ensure_open("ns_decl")
        self._require_attributes("ns_decl", Markup.XMLNS)
        pairs = ns_map.items() if isinstance(ns_map, Mapping) else ns_map
        chunks: list[str] = []
        for prefix, uri in pairs:
            name = f"{Markup.XMLNS}:{prefix}" if prefix else Markup.XMLNS
            chunks.extend((" ", name, '="', escape(uri), '"'))
        self._emit(*chunks)

    # Content

    def text(self, content: str) -> None:
        """Write character data verbatim, without escaping."""
        self._ensure_open("text")
        entry = self._require_element("text")
        self._emit(*self._content(entry, content))
        entry.mark_content()

    def text_esc(self, content: str) -> None:
        self._ensure_open("text_esc")
        entry = self._require_element("text_esc")
        self._emit(*self._content(entry, escape(content)))
        entry.mark_content()

    def cdata(self, content: str) -> None:
        """Write a CDATA section. ``]]>`` inside ``content`` is not checked."""
        self._ensure_open("cdata")
        entry = self._require_element("cdata")
        self._emit(
            *self._content(entry, Markup.CDATA_OPEN, content, Markup.CDATA_CLOSE)
        )
        entry.mark_content()

    def comment(self, content: str) -> None:
        """Write ``<!-- content -->``; allowed at document level as well."""
        self._ensure_open("comment")
        parent = self._top()
        chunks: list[str] = []
        if parent is not None and parent.accepts_attributes:
            chunks.append(">")
        chunks.append(self._separator(len(self._stack)))
        chunks.extend((Markup.COMMENT_OPEN, content, Markup.COMMENT_CLOSE))
        self._emit(*chunks)
        if parent is not None:
            parent.mark_content(child_node=True)

    def raw(self, data: bytes | str) -> None:
        """Write ``data`` verbatim. No escaping, no safety net.

        Raw output still counts as content for the current element.
        """
        if self._detached:
            raise self._reject("raw", WriterClosedError("raw"))
        entry = self._top()
        if entry is not None and entry.accepts_attributes:
            self._emit(">", data)
        else:
            self._emit(data)
        if entry is not None:
            entry.mark_content()

    def declaration(self) -> None:
        """Write the XML declaration; only valid before any other output."""
        self._ensure_open("declaration")
        if self._bytes_written:
            raise self._reject("declaration", MisplacedDeclarationError())
        self._emit(Markup.DECLARATION)

    # Session

    def close(self) -> None:
        """Close every open element, innermost first, and finish the session."""
        if self.is_closed:
            return
        chunks: list[str] = []
        for depth in range(len(self._stack) - 1, -1, -1):
            chunks.extend(self._end_tag(self._stack[depth], depth))
        self._emit(*chunks)
        self._stack.clear()
        self._lifecycle = WriterLifecycle.CLOSED
        if self._logger is not None:
            self._logger.log_session_end(self._elements_written, self._bytes_written)

    def flush(self) -> None:
        if self._detached:
            raise self._reject("flush", WriterClosedError("flush"))
        try:
            self._sink.flush()
        except Exception as e:
            raise SinkError(e) from e

    def extract_sink(self) -> S:
        """Hand the sink back to the caller.

        Open elements are left as they are. The writer is unusable
        afterwards.
        """
        if self._detached:
            raise self._reject("extract_sink", WriterClosedError("extract_sink"))
        self._detached = True
        self._lifecycle = WriterLifecycle.CLOSED
        return self._sink

    # Internals

    def _top(self) -> ElementEntry | None:
        if not self._stack:
            return None
        return self._stack[-1]

    def _separator(self, depth: int) -> str:
        return self._printer.separator(depth, at_start=self._bytes_written == 0)

    def _start_tag(self, parent: ElementEntry | None, qualified: str) -> list[str]:
        chunks: list[str] = []
        if parent is not None and parent.accepts_attributes:
            chunks.append(">")
        chunks.append(self._separator(len(self._stack)))
        chunks.extend(("<", qualified))
        return chunks

    def _end_tag(self, entry: ElementEntry, depth: int) -> list[str]:
        if entry.accepts_attributes:
            return ["/>"]
        chunks: list[str] = []
        if entry.has_child_nodes:
            chunks.append(self._printer.separator(depth, at_start=False))
        chunks.extend(("</", entry.name, ">"))
        return chunks

    def _content(self, entry: ElementEntry, *parts: str) -> list[str]:
        chunks = [">"] if entry.accepts_attributes else []
        chunks.extend(parts)
        return chunks

    def _require_element(self, operation: str) -> ElementEntry:
        entry = self._top()
        if entry is None:
            raise self._reject(operation, NoOpenElementError(operation))
        return entry

    def _require_attributes(self, operation: str, attribute: str) -> ElementEntry:
        entry = self._require_element(operation)
        if not entry.accepts_attributes:
            raise self._reject(
                operation, AttributesNotAcceptedError(entry.name, attribute)
            )
        return entry

    def _ensure_open(self, operation: str) -> None:
        if self.is_closed:
            raise self._reject(operation, WriterClosedError(operation))

    def _reject(self, operation: str, error: XmlWriterError) -> XmlWriterError:
        if self._logger is not None:
            self._logger.log_rejected(operation, error)
        return error

    def _record_element(self, name: str) -> None:
        self._elements_written += 1
        if self._logger is not None:
            self._logger.log_element(name, len(self._stack))

    def _emit(self, *chunks: str | bytes) -> None:
        try:
            data = b"".join(
                chunk.encode(Defaults.ENCODING) if isinstance(chunk, str) else chunk
                for chunk in chunks
            )
        except UnicodeEncodeError as e:
            raise UnencodableTextError(e) from e
        if not data:
            return
        try:
            self._sink.write(data)
        except Exception as e:
            raise SinkError(e) from e
        self._bytes_written += len(data)
