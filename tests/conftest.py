import json

import httpx
import pytest

from umeng_push.config import Settings


class RecordingTransport(httpx.MockTransport):
    """Mock transport that answers with a fixed response and keeps every request."""

    def __init__(self, status_code: int = 200, payload=None, content: bytes = None):
        self.requests: list[httpx.Request] = []
        if content is None:
            content = json.dumps(
                payload if payload is not None else {"ret": "SUCCESS", "data": {"task_id": "t-1"}}
            ).encode()
        self.status_code = status_code
        self.content = content
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        host="http://msg.umeng.com",
        android_app_key="android-key",
        android_app_master_secret="android-secret",
        ios_app_key="ios-key",
        ios_app_master_secret="ios-secret",
    )


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def http_client(transport):
    with httpx.Client(transport=transport) as client:
        yield client
