"""Escaping of character data and attribute values.

Only the five predefined XML entities are produced. Attribute values and
text content share the same rule set, so a value escaped here is safe in
either position (including single-quoted attributes).
"""

from ...constants import Entities

_ESCAPE_TABLE = str.maketrans(Entities.PREDEFINED)


def escape(text: str) -> str:
    """Replace ``& < > " '`` with their entity references.

    Every other character passes through unchanged.
    """
    return text.translate(_ESCAPE_TABLE)
