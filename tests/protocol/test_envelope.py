"""Tests for envelope validation at the outer dispatch boundary."""

import json
import sys
from typing import Any
from unittest.mock import MagicMock

import pytest

from restify.protocol.envelope import EnvelopeHandler, decode_body, is_valid_id, validate_envelope
from restify.protocol.errors import InvalidRequestError
from restify.protocol.transport import serialize


def _body(**fields: Any) -> bytes:
    return json.dumps(fields).encode()


class TestVersionCheck:
    @pytest.mark.parametrize("version", ["1.0", "2", 2.0, None, ""])
    def test_wrong_version_is_invalid_request(self, handler: EnvelopeHandler, version: Any) -> None:
        resp = handler.handle(_body(jsonrpc=version, id="abc", method="initialize"))
        assert resp.error is not None
        assert resp.error.code == -32600
        assert resp.id == "abc"

    def test_missing_version(self, handler: EnvelopeHandler) -> None:
        resp = handler.handle(_body(id=4, method="tools/list"))
        assert resp.error is not None
        assert resp.error.code == -32600
        assert resp.error.data == "jsonrpc must be '2.0'"
        assert resp.id == 4

    def test_checked_before_dispatch(self) -> None:
        dispatcher = MagicMock()
        EnvelopeHandler(dispatcher).handle(_body(jsonrpc="1.0", id=1, method="tools/call"))
        dispatcher.dispatch.assert_not_called()


class TestMalformedEnvelope:
    def test_invalid_json(self, handler: EnvelopeHandler) -> None:
        resp = handler.handle(b'{"jsonrpc": "2.0", "id": 1,')
        assert resp.error is not None
        assert resp.error.code == -32600
        assert resp.id is None

    def test_invalid_utf8(self, handler: EnvelopeHandler) -> None:
        resp = handler.handle(b"\xff\xfe")
        assert resp.error is not None
        assert resp.error.code == -32600

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no integer digit limit")
    def test_oversized_integer_literal(self, handler: EnvelopeHandler) -> None:
        body = b'{"jsonrpc": "2.0", "id": 1, "method": "tools/list", "params": {"n": ' + b"9" * 5000 + b"}}"
        resp = handler.handle(body)
        assert resp.error is not None
        assert resp.error.code == -32600
        assert resp.id is None

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants(self, handler: EnvelopeHandler, constant: str) -> None:
        params = f'{{"name": "add", "arguments": {{"a": 1, "b": {constant}}}}}'
        body = f'{{"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {params}}}'
        resp = handler.handle(body)
        assert resp.error is not None
        assert resp.error.code == -32600
        assert resp.id is None

    def test_batch_not_supported(self, handler: EnvelopeHandler) -> None:
        resp = handler.handle(b'[{"jsonrpc": "2.0", "id": 1, "method": "initialize"}]')
        assert resp.error is not None
        assert resp.error.code == -32600
        assert resp.id is None

    def test_missing_method(self, handler: EnvelopeHandler) -> None:
        resp = handler.handle(_body(jsonrpc="2.0", id=1))
        assert resp.error is not None
        assert resp.error.code == -32600
        assert resp.id == 1

    @pytest.mark.parametrize("bad_id", [1.5, True, {"a": 1}, [1]])
    def test_bad_id_is_not_echoed(self, handler: EnvelopeHandler, bad_id: Any) -> None:
        resp = handler.handle(_body(jsonrpc="2.0", id=bad_id, method="initialize"))
        assert resp.error is not None
        assert resp.error.code == -32600
        assert resp.id is None

    def test_scalar_params(self, handler: EnvelopeHandler) -> None:
        resp = handler.handle(_body(jsonrpc="2.0", id=1, method="initialize", params="x"))
        assert resp.error is not None
        assert resp.error.code == -32600


class TestDispatch:
    def test_hello_scenario(self, handler: EnvelopeHandler) -> None:
        body = b'{"jsonrpc":"2.0","id":"1","method":"tools/call","params":{"name":"hello","arguments":{}}}'
        assert serialize(handler.handle(body)) == (
            b'{"jsonrpc":"2.0","id":"1","result":{"content":[{"type":"text","text":"hello world"}]}}'
        )

    def test_unknown_method_scenario(self, handler: EnvelopeHandler) -> None:
        resp = handler.handle(_body(jsonrpc="2.0", id=17, method="unknown"))
        assert serialize(resp) == (
            b'{"jsonrpc":"2.0","id":17,"error":{"code":-32601,"message":"Method not found",'
            b'"data":"Method \'unknown\' is not supported"}}'
        )

    def test_accepts_decoded_mapping(self, handler: EnvelopeHandler) -> None:
        resp = handler.handle({"jsonrpc": "2.0", "id": None, "method": "tools/list"})
        assert resp.error is None
        assert resp.id is None

    def test_accepts_text(self, handler: EnvelopeHandler) -> None:
        resp = handler.handle('{"jsonrpc": "2.0", "id": 3, "method": "initialize"}')
        assert resp.result is not None

    def test_missing_id_answers_with_null(self, handler: EnvelopeHandler) -> None:
        resp = handler.handle(_body(jsonrpc="2.0", method="initialize"))
        assert resp.id is None
        assert resp.result is not None

    def test_dispatcher_crash_becomes_internal_error(self) -> None:
        dispatcher = MagicMock()
        dispatcher.dispatch.side_effect = RuntimeError("kaboom")
        resp = EnvelopeHandler(dispatcher).handle(_body(jsonrpc="2.0", id="q", method="initialize"))
        assert resp.id == "q"
        assert resp.error is not None
        assert resp.error.code == -32603
        assert resp.error.data == "kaboom"


class TestHelpers:
    def test_decode_body_rejects_scalar(self) -> None:
        with pytest.raises(InvalidRequestError, match="JSON object"):
            decode_body(b"42")

    @pytest.mark.parametrize(("value", "valid"), [("a", True), (0, True), (None, True), (False, False), (1.0, False)])
    def test_is_valid_id(self, value: Any, valid: bool) -> None:
        assert is_valid_id(value) is valid

    def test_validate_envelope_builds_request(self) -> None:
        request = validate_envelope(
            {"jsonrpc": "2.0", "id": 8, "method": "tools/call", "params": {"name": "hello"}}, 8
        )
        assert request.method == "tools/call"
        assert request.params == {"name": "hello"}
