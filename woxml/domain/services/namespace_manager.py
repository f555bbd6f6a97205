from ..exceptions import UnbalancedNamespaceError


class NamespaceManager:
    """Stack of optional prefixes applied to element names.

    Scoping follows call order only; it is not tied to element nesting.
    """

    def __init__(self) -> None:
        super().__init__()
        self._stack: list[str | None] = []

    def push(self, prefix: str | None) -> None:
        self._stack.append(prefix)

    def pop(self) -> str | None:
        if not self._stack:
            raise UnbalancedNamespaceError()
        return self._stack.pop()

    @property
    def current(self) -> str | None:
        if not self._stack:
            return None
        return self._stack[-1]

    def qualify(self, name: str) -> str:
        prefix = self.current
        if prefix:
            return f"{prefix}:{name}"
        return name

    def __len__(self) -> int:
        return len(self._stack)
