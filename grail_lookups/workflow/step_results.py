"""
Previous step results as an explicit tagged union.

The orchestrator hands back either a wrapper exposing `content`, a bare
string, or some other value. classify_step_result() puts every input in
exactly one of the three shapes and resolve_text() turns any of them
into the text the actions work with.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from grail_lookups.models import read_field


@dataclass(frozen=True)
class WrappedResult:
    """Result object with a non-empty `content` field."""
    content: Any


@dataclass(frozen=True)
class TextResult:
    """Bare string result."""
    text: str


@dataclass(frozen=True)
class OpaqueResult:
    """Anything else (dict without content, number, None...)."""
    value: Any


StepResult = Union[WrappedResult, TextResult, OpaqueResult]


class TextFallback(str, Enum):
    """How non-text values are turned into text."""
    JSON = "json"  # json.dumps
    STR = "str"    # str()


def classify_step_result(raw: Any) -> StepResult:
    """Classify a raw previous-step result."""
    content = read_field(raw, "content")
    if content:
        return WrappedResult(content)
    if isinstance(raw, str):
        return TextResult(raw)
    return OpaqueResult(raw)


def resolve_text(result: StepResult, fallback: TextFallback) -> str:
    """
    Resolve a classified step result to text.

    Args:
        result: Output of classify_step_result
        fallback: Serialization for values that are not already text

    Returns:
        Text content of the result
    """
    if isinstance(result, TextResult):
        return result.text

    value = result.content if isinstance(result, WrappedResult) else result.value
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8")

    if fallback is TextFallback.JSON:
        return json.dumps(value, default=str)
    return "" if value is None else str(value)
