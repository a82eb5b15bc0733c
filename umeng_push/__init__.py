"""Client for the Umeng push notification API."""

from umeng_push.client import UmengClient
from umeng_push.config import Settings
from umeng_push.errors import (
    APIError,
    ConfigurationError,
    DecodeError,
    PayloadValidationError,
    TransportError,
    UmengError,
)
from umeng_push.platforms.builder import build_push, new_envelope
from umeng_push.schemas import (
    Alert,
    AndroidBody,
    AndroidPayload,
    ChannelProperties,
    IOSAps,
    IOSPayload,
    Platform,
    Policy,
    RequestEnvelope,
    Result,
    SendType,
)
from umeng_push.signing import sign
from umeng_push.transport import send

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "Alert",
    "AndroidBody",
    "AndroidPayload",
    "ChannelProperties",
    "ConfigurationError",
    "DecodeError",
    "IOSAps",
    "IOSPayload",
    "PayloadValidationError",
    "Platform",
    "Policy",
    "RequestEnvelope",
    "Result",
    "SendType",
    "Settings",
    "TransportError",
    "UmengClient",
    "UmengError",
    "build_push",
    "new_envelope",
    "send",
    "sign",
]
