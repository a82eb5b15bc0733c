"""Tests for the HTTP transport and response decoding."""

import json

import httpx
import pytest

from tests.conftest import RecordingTransport
from umeng_push.errors import APIError, DecodeError, TransportError
from umeng_push.transport import send

URL = "http://msg.umeng.com/api/send?sign=abc"
BODY = b'{"appkey":"k"}'


def _send(transport: httpx.MockTransport):
    with httpx.Client(transport=transport) as client:
        return send(client, URL, BODY)


class TestSend:
    def test_posts_body_as_json(self):
        transport = RecordingTransport()
        _send(transport)

        [request] = transport.requests
        assert request.method == "POST"
        assert str(request.url) == URL
        assert request.headers["Content-Type"] == "application/json"
        assert request.content == BODY

    def test_success_returns_data(self):
        transport = RecordingTransport(payload={"ret": "SUCCESS", "data": {"msg_id": "123"}})
        assert _send(transport) == {"msg_id": "123"}

    def test_non_string_values_become_strings(self):
        transport = RecordingTransport(
            payload={"ret": "SUCCESS", "data": {"total_count": 5, "status": "2", "open": None}}
        )
        assert _send(transport) == {"total_count": "5", "status": "2", "open": "null"}

    def test_service_failure(self):
        transport = RecordingTransport(payload={"ret": "FAIL", "data": {"errMsg": "bad appkey"}})
        with pytest.raises(APIError) as exc_info:
            _send(transport)

        err = exc_info.value
        assert json.dumps({"errMsg": "bad appkey"}) in str(err)
        assert str(err).startswith("umeng: ")
        assert err.code == "FAIL"
        assert err.data == {"errMsg": "bad appkey"}

    def test_service_failure_with_null_data(self):
        transport = RecordingTransport(content=b'{"ret":"FAIL","data":null}')
        with pytest.raises(APIError) as exc_info:
            _send(transport)

        assert str(exc_info.value) == "umeng: null"
        assert exc_info.value.code == "FAIL"
        assert exc_info.value.data == {}

    def test_null_data_with_error_status_is_a_service_failure(self):
        transport = RecordingTransport(status_code=500, content=b'{"ret":"FAIL","data":null}')
        with pytest.raises(APIError):
            _send(transport)

    def test_success_with_null_data(self):
        transport = RecordingTransport(content=b'{"ret":"SUCCESS","data":null}')
        assert _send(transport) == {}

    def test_success_without_data(self):
        transport = RecordingTransport(content=b'{"ret":"SUCCESS"}')
        assert _send(transport) == {}

    def test_service_failure_with_error_status(self):
        transport = RecordingTransport(
            status_code=400, payload={"ret": "FAIL", "data": {"error_code": "2019"}}
        )
        with pytest.raises(APIError, match="2019"):
            _send(transport)

    def test_unparsable_body_with_error_status(self):
        transport = RecordingTransport(status_code=500, content=b"<html>oops</html>")
        with pytest.raises(TransportError, match="HTTP 500") as exc_info:
            _send(transport)
        assert exc_info.value.status_code == 500

    def test_unparsable_body_with_ok_status(self):
        transport = RecordingTransport(status_code=200, content=b"not json")
        with pytest.raises(DecodeError):
            _send(transport)

    def test_wrong_shape_with_ok_status(self):
        transport = RecordingTransport(status_code=200, content=b'["SUCCESS"]')
        with pytest.raises(DecodeError):
            _send(transport)

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError, match="connection refused") as exc_info:
            _send(httpx.MockTransport(handler))
        assert exc_info.value.status_code is None
