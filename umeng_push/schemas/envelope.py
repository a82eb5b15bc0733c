"""The outer request envelope sent to every endpoint."""

import time
from enum import Enum, IntEnum
from typing import Any, Optional, Union

from pydantic import Field, PrivateAttr

from umeng_push.schemas.message import AndroidPayload, ChannelProperties, IOSPayload, Policy, WireModel


class Platform(IntEnum):
    ANDROID = 1
    IOS = 2


class SendType(str, Enum):
    UNICAST = "unicast"
    LISTCAST = "listcast"
    FILECAST = "filecast"
    BROADCAST = "broadcast"
    GROUPCAST = "groupcast"
    CUSTOMIZEDCAST = "customizedcast"


def _timestamp() -> str:
    return str(int(time.time()))


class RequestEnvelope(WireModel):
    """
    A single request to the push service.

    Built per operation, signed once and sent once. Signing caches the
    serialized body on the instance, so an envelope must not be signed from
    several threads at the same time; give each call its own envelope.
    """

    platform: Platform = Field(..., exclude=True, frozen=True)

    app_key: Optional[str] = Field(None, alias="appkey")
    # 10 or 13 digits; the service accepts it for ten minutes
    timestamp: Optional[str] = Field(default_factory=_timestamp)
    type: Optional[SendType] = None

    # Target selector. Which of these is used depends on ``type``.
    device_tokens: Optional[str] = Field(None, description="Comma separated, at most 500")
    alias_type: Optional[str] = None
    alias: Optional[str] = None
    file_id: Optional[str] = None
    filter: Optional[dict[str, Any]] = None

    # Upload endpoint: newline separated device tokens or aliases
    content: Optional[str] = None
    # Status and cancel endpoints
    task_id: Optional[str] = None

    payload: Optional[Union[AndroidPayload, IOSPayload]] = None
    policy: Optional[Policy] = None
    production_mode: Optional[str] = Field(None, description='"true" or "false"')
    description: Optional[str] = None
    channel_properties: Optional[ChannelProperties] = None

    _body: Optional[bytes] = PrivateAttr(default=None)

    @property
    def body(self) -> Optional[bytes]:
        """Bytes produced by the last signing, exactly as they go on the wire."""
        return self._body
