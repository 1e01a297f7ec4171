"""Tests for the result formatter."""

import json

from pydantic import BaseModel

from restify.tools.formatter import format_result, to_text


class _Point(BaseModel):
    x: int
    y: int


class _Opaque:
    def __str__(self) -> str:
        return "opaque-thing"


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no")


def _text(value: object) -> str:
    return format_result(value)["content"][0]["text"]


class TestFormatResult:
    def test_shape(self) -> None:
        assert format_result("hi") == {"content": [{"type": "text", "text": "hi"}]}

    def test_string_verbatim(self) -> None:
        assert _text('{"already": "json"}') == '{"already": "json"}'

    def test_dict_serialized(self) -> None:
        assert json.loads(_text({"a": 1, "b": [True, None]})) == {"a": 1, "b": [True, None]}

    def test_compact_separators(self) -> None:
        assert _text({"sum": 2.5, "tags": [1, 2]}) == '{"sum":2.5,"tags":[1,2]}'

    def test_empty_list(self) -> None:
        assert _text([]) == "[]"

    def test_none(self) -> None:
        assert _text(None) == "null"

    def test_pydantic_model(self) -> None:
        assert json.loads(_text(_Point(x=1, y=2))) == {"x": 1, "y": 2}

    def test_set_serialized_as_list(self) -> None:
        assert json.loads(_text({3})) == [3]


class TestFallbacks:
    def test_unserializable_uses_str(self) -> None:
        assert to_text(_Opaque()) == "opaque-thing"

    def test_circular_uses_str(self) -> None:
        loop: list[object] = []
        loop.append(loop)
        assert to_text(loop) == "[[...]]"

    def test_never_raises(self) -> None:
        assert to_text(_Unprintable()) == "<unprintable _Unprintable>"
