"""Pydantic schemas for requests to and responses from the push service."""

from umeng_push.schemas.envelope import Platform, RequestEnvelope, SendType
from umeng_push.schemas.message import (
    Alert,
    AndroidBody,
    AndroidPayload,
    ChannelProperties,
    IOSAps,
    IOSPayload,
    Policy,
)
from umeng_push.schemas.response import ResponseEnvelope, Result

__all__ = [
    "Alert",
    "AndroidBody",
    "AndroidPayload",
    "ChannelProperties",
    "IOSAps",
    "IOSPayload",
    "Platform",
    "Policy",
    "RequestEnvelope",
    "ResponseEnvelope",
    "Result",
    "SendType",
]
