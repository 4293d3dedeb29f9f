"""Unit tests for core data types."""

import pytest
from pydantic import ValidationError

from irlens.core.types import FilterConfig, IrResult, OutputLine, ParseFilters, SourceLocation


class TestFilterConfig:
    def test_defaults(self):
        config = FilterConfig()
        assert not config.filter_debug_info
        assert not config.filter_ir_metadata
        assert not config.demangle
        assert not config.comments

    def test_accepts_wire_names(self):
        config = FilterConfig.model_validate({"filterDebugInfo": True, "filterIRMetadata": True})
        assert config.filter_debug_info
        assert config.filter_ir_metadata

    def test_accepts_field_names(self):
        assert FilterConfig(filter_ir_metadata=True).filter_ir_metadata

    def test_frozen(self):
        config = FilterConfig()
        with pytest.raises(ValidationError):
            config.comments = True


class TestParseFilters:
    def test_maps_to_filter_config(self):
        filters = ParseFilters.model_validate(
            {"debugCalls": True, "directives": True, "demangle": False, "commentOnly": True}
        )
        assert filters.to_filter_config() == FilterConfig(
            filter_debug_info=True, filter_ir_metadata=True, demangle=False, comments=True
        )


class TestSerialization:
    def test_unresolved_column_is_omitted(self):
        assert SourceLocation(file=None, line=None).to_dict() == {"file": None, "line": None}

    def test_column_included_when_known(self):
        assert SourceLocation(file="a.c", line=1, column=2).to_dict() == {"file": "a.c", "line": 1, "column": 2}

    def test_plain_line(self):
        assert OutputLine(text="ret void").to_dict() == {"text": "ret void"}

    def test_annotated_line(self):
        line = OutputLine(text="ret void, !dbg !4", scope="!4", source=SourceLocation(file="a.c", line=3))
        assert line.to_dict() == {
            "text": "ret void, !dbg !4",
            "scope": "!4",
            "source": {"file": "a.c", "line": 3},
        }

    def test_result_envelope(self):
        result = IrResult(asm=[OutputLine(text="x")], language_id="llvm-ir")
        assert result.to_dict() == {"asm": [{"text": "x"}], "labelDefinitions": {}, "languageId": "llvm-ir"}

    def test_result_without_language(self):
        assert IrResult().to_dict() == {"asm": [], "labelDefinitions": {}}
