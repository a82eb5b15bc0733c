"""Assemble request envelopes for each endpoint."""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from umeng_push.errors import PayloadValidationError
from umeng_push.platforms import coerce_model, describe_errors
from umeng_push.platforms.android import format_android
from umeng_push.platforms.ios import format_ios
from umeng_push.schemas.envelope import Platform, RequestEnvelope
from umeng_push.schemas.message import Policy

logger = logging.getLogger(__name__)


def new_envelope(platform: Platform, app_key: str, **fields: Any) -> RequestEnvelope:
    """Create an envelope for ``platform`` with the other envelope fields as given."""
    try:
        platform = Platform(platform)
    except ValueError as exc:
        raise PayloadValidationError(f"unknown platform: {platform}") from exc

    try:
        return RequestEnvelope(platform=platform, app_key=app_key, **fields)
    except ValidationError as exc:
        raise PayloadValidationError(f"invalid request: {describe_errors(exc)}") from exc


def build_push(
    platform: Platform,
    app_key: str,
    body: Any = None,
    aps: Any = None,
    policy: Any = None,
    extras: Optional[dict[str, Any]] = None,
    **fields: Any,
) -> RequestEnvelope:
    """
    Build a send request. Nothing is signed or sent here.

    Args:
        platform: Target platform, picks the payload shape
        app_key: App key for that platform
        body: AndroidBody (or mapping), Android only
        aps: IOSAps (or mapping), iOS only
        policy: Optional Policy (or mapping)
        extras: Android ``extra`` map, or top-level iOS payload keys
        **fields: Other envelope fields (type, device_tokens, alias, ...)

    Raises:
        PayloadValidationError: the message cannot be sent as given
    """
    envelope = new_envelope(platform, app_key, **fields)

    if envelope.platform == Platform.ANDROID:
        envelope.payload = format_android(body, extras)
    else:
        envelope.payload = format_ios(aps, extras)
        if envelope.channel_properties is not None:
            # Vendor channels exist only on Android
            logger.warning("channel_properties is Android only, dropped from iOS request")
            envelope.channel_properties = None

    if policy is not None:
        envelope.policy = coerce_model(Policy, policy, "policy")

    logger.debug("Built %s push request, type=%s", envelope.platform.name, envelope.type)
    return envelope
