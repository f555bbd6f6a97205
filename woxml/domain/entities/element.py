from dataclasses import dataclass
from enum import Enum


class ElementWriteState(Enum):
    ATTRIBUTES_PERMITTED = "attributes_permitted"
    CONTENT_EMITTED = "content_emitted"


@dataclass(slots=True)
class ElementEntry:
    """An open element on the writer's stack.

    ``name`` is the qualified name (namespace prefix already applied), so the
    closing tag always matches the opening tag.
    """

    name: str
    state: ElementWriteState = ElementWriteState.ATTRIBUTES_PERMITTED
    has_child_nodes: bool = False

    @property
    def accepts_attributes(self) -> bool:
        return self.state is ElementWriteState.ATTRIBUTES_PERMITTED

    def mark_content(self, *, child_node: bool = False) -> None:
        """Flip to content-emitted; the transition is irreversible."""
        if child_node:
            self.has_child_nodes = True
        self.state = ElementWriteState.CONTENT_EMITTED
