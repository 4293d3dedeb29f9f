"""
Core type definitions for irlens.

Pydantic models describe the records that flow through one IR pass: parsed
metadata nodes, annotated output lines and the final result envelope.
Wire-format dictionaries are described with TypedDict so that optional keys
(e.g. an unresolved column) can be omitted instead of serialized as null.
"""

from enum import StrEnum
from typing import Dict, List, NotRequired, TypedDict

from pydantic import BaseModel, ConfigDict, Field


class FilterStage(StrEnum):
    """Point in the per-line scan at which a filter runs."""
    PRE_CAPTURE = "pre-capture"
    POST_CAPTURE = "post-capture"


class SourceDict(TypedDict):
    """
    Wire form of a resolved source location.

    `file` and `line` are always present (possibly None); `column` is
    omitted when it could not be resolved.
    """
    file: str | None
    line: int | None
    column: NotRequired[int]


class OutputLineDict(TypedDict, total=False):
    text: str
    scope: str
    source: SourceDict


class MetaNode(BaseModel):
    """
    A debug-info metadata declaration, e.g.
    `!12 = distinct !DISubprogram(name: "main", scope: !1, line: 3)`.
    """
    meta_id: str
    meta_type: str
    attributes: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.attributes.get(key, default)


class SourceLocation(BaseModel):
    """Source position resolved for an IR line through its debug scope."""
    file: str | None = None
    line: int | None = None
    column: int | None = None

    @property
    def is_known(self) -> bool:
        return self.file is not None or self.line is not None

    def to_dict(self) -> SourceDict:
        data: SourceDict = {"file": self.file, "line": self.line}
        if self.column is not None:
            data["column"] = self.column
        return data


class OutputLine(BaseModel):
    """
    One line of processed IR.

    `scope` holds the `!N` id captured from a `!dbg !N` attachment; it is a
    plain identifier and may name a node that never appears in the text.
    """
    text: str
    scope: str | None = None
    source: SourceLocation | None = None

    def to_dict(self) -> OutputLineDict:
        data: OutputLineDict = {"text": self.text}
        if self.scope is not None:
            data["scope"] = self.scope
        if self.source is not None:
            data["source"] = self.source.to_dict()
        return data


class FilterConfig(BaseModel):
    """
    Per-call filtering options for the IR pass.

    Accepts both the snake_case field names and the camelCase wire names
    (`filterDebugInfo`, `filterIRMetadata`, `demangle`, `comments`).
    """
    filter_debug_info: bool = Field(default=False, alias="filterDebugInfo")
    filter_ir_metadata: bool = Field(default=False, alias="filterIRMetadata")
    demangle: bool = False
    comments: bool = False

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ParseFilters(BaseModel):
    """
    Generic compiler-output filter options, as used for assembly views.

    Only the fields that have an IR counterpart are modelled here.
    """
    debug_calls: bool = Field(default=False, alias="debugCalls")
    directives: bool = False
    demangle: bool = False
    comment_only: bool = Field(default=False, alias="commentOnly")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_filter_config(self) -> FilterConfig:
        return FilterConfig(
            filter_debug_info=self.debug_calls,
            filter_ir_metadata=self.directives,
            demangle=self.demangle,
            comments=self.comment_only,
        )


class IrResult(BaseModel):
    """
    Result envelope of one IR pass.

    `label_definitions` is reserved for a disassembly-label subsystem and is
    always empty for IR.
    """
    asm: List[OutputLine] = Field(default_factory=list)
    label_definitions: Dict[str, int] = Field(default_factory=dict)
    language_id: str | None = None

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "asm": [line.to_dict() for line in self.asm],
            "labelDefinitions": dict(self.label_definitions),
        }
        if self.language_id is not None:
            data["languageId"] = self.language_id
        return data
