from ...constants import Markup
from ..entities.output import OutputMode


class PrettyPrinter:
    """Indentation for structural tokens in pretty mode.

    Only element tags and comments are ever placed on a new line. Text and
    CDATA stay where they are, so their whitespace is never altered.
    """

    def __init__(self, mode: OutputMode, unit: str = Markup.INDENT_UNIT) -> None:
        super().__init__()
        self.mode = mode
        self.unit = unit

    @property
    def enabled(self) -> bool:
        return self.mode is OutputMode.PRETTY

    def indent(self, depth: int) -> str:
        if not self.enabled:
            return ""
        return self.unit * depth

    def separator(self, depth: int, *, at_start: bool) -> str:
        """Newline plus indentation preceding a structural token.

        Nothing is produced in compact mode or for the very first token of
        the document.
        """
        if not self.enabled or at_start:
            return ""
        return Markup.NEWLINE + self.indent(depth)
