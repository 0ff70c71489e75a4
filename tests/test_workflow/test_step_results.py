"""
Tests unitarios para step_results.

Valida:
- Clasificación de resultados previos (wrapper, texto, otro)
- Resolución a texto con cada fallback

python -m pytest tests/test_workflow/test_step_results.py
"""

from types import SimpleNamespace

import pytest

from grail_lookups.workflow.step_results import (
    OpaqueResult,
    TextFallback,
    TextResult,
    WrappedResult,
    classify_step_result,
    resolve_text,
)


class TestClassifyStepResult:
    """Tests de classify_step_result."""

    def test_dict_wrapper(self):
        assert classify_step_result({"content": "a,b"}) == WrappedResult("a,b")

    def test_object_wrapper(self):
        assert classify_step_result(SimpleNamespace(content="a,b")) == WrappedResult("a,b")

    def test_bare_string(self):
        assert classify_step_result("a,b") == TextResult("a,b")

    def test_empty_content_is_not_wrapper(self):
        """content vacío no cuenta como wrapper."""
        assert classify_step_result({"content": ""}) == OpaqueResult({"content": ""})

    @pytest.mark.parametrize("raw", [None, 42, {"filePath": "/lookups/x"}])
    def test_other_values(self, raw):
        assert classify_step_result(raw) == OpaqueResult(raw)


class TestResolveText:
    """Tests de resolve_text."""

    def test_wrapped_text(self):
        assert resolve_text(WrappedResult("x"), TextFallback.STR) == "x"

    def test_wrapped_object_json(self):
        """content no textual se serializa como JSON."""
        assert resolve_text(WrappedResult({"a": 1}), TextFallback.JSON) == '{"a": 1}'

    def test_text(self):
        assert resolve_text(TextResult("x"), TextFallback.JSON) == "x"

    def test_opaque_json(self):
        assert resolve_text(OpaqueResult({"filePath": "/lookups/x"}), TextFallback.JSON) == (
            '{"filePath": "/lookups/x"}'
        )

    def test_opaque_str(self):
        assert resolve_text(OpaqueResult(42), TextFallback.STR) == "42"

    def test_none_str_is_empty(self):
        assert resolve_text(OpaqueResult(None), TextFallback.STR) == ""

    def test_bytes_decoded(self):
        assert resolve_text(WrappedResult(b"a,b"), TextFallback.STR) == "a,b"
