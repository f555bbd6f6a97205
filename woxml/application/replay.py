from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from ..domain.services.xml_writer import XmlWriter
    from .models import ScriptOperation, WriteScript
    from .ports.services import SinkPort


def apply_operation(writer: XmlWriter[SinkPort], operation: ScriptOperation) -> None:
    """Perform one scripted call on ``writer``.

    Writer errors propagate unchanged.
    """
    match operation.op:
        case "ns_decl":
            writer.ns_decl(operation.namespace_pairs())
        case "raw":
            writer.raw(operation.args[0].encode(Defaults.ENCODING))
        case "set_namespace":
            writer.set_namespace(operation.args[0] or None)
        case _:
            getattr(writer, operation.op)(*operation.args)


def replay_script(writer: XmlWriter[SinkPort], script: WriteScript) -> int:
    """Replay every operation of ``script`` and close the writer.

    Returns the number of operations applied.
    """
    count = 0
    for operation in script.operations:
        apply_operation(writer, operation)
        count += 1
    writer.close()
    return count
