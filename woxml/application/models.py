"""Write scripts: a serializable sequence of writer calls.

A script is replayed against an ``XmlWriter`` by
woxml.application.replay. The models validate the operation names and
their arity up front, so a malformed script fails before any byte is
written.
"""

from __future__ import annotations

from typing import ClassVar, Literal

from pydantic import BaseModel, Field, model_validator

from ..domain.entities.output import OutputMode

OperationName = Literal[
    "declaration",
    "begin_elem",
    "end_elem",
    "elem",
    "elem_text",
    "attr",
    "attr_esc",
    "ns_decl",
    "text",
    "text_esc",
    "cdata",
    "comment",
    "raw",
    "set_namespace",
    "unset_namespace",
    "close",
]


class ScriptOperation(BaseModel):
    ARITY: ClassVar[dict[str, int]] = {
        "declaration": 0,
        "begin_elem": 1,
        "end_elem": 0,
        "elem": 1,
        "elem_text": 2,
        "attr": 2,
        "attr_esc": 2,
        "text": 1,
        "text_esc": 1,
        "cdata": 1,
        "comment": 1,
        "raw": 1,
        "set_namespace": 1,
        "unset_namespace": 0,
        "close": 0,
    }

    op: OperationName
    args: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_arity(self) -> ScriptOperation:
        if self.op == "ns_decl":
            if not self.args or len(self.args) % 2:
                raise ValueError(
                    "ns_decl expects prefix/uri pairs, use an empty prefix "
                    "for the default namespace"
                )
            return self
        expected = self.ARITY[self.op]
        if len(self.args) != expected:
            raise ValueError(
                f"{self.op} expects {expected} argument(s), got {len(self.args)}"
            )
        return self

    def namespace_pairs(self) -> list[tuple[str | None, str]]:
        prefixes = self.args[0::2]
        uris = self.args[1::2]
        return [(prefix or None, uri) for prefix, uri in zip(prefixes, uris)]


class WriteScript(BaseModel):
    mode: OutputMode | None = None
    operations: list[ScriptOperation]
