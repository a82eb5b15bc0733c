"""Pydantic schemas for the platform-specific parts of a push message."""

import logging
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_serializer, model_validator

logger = logging.getLogger(__name__)

# Top-level iOS payload keys the service keeps for itself.
RESERVED_IOS_KEYS = {"d", "p"}


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, dict, list)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


class WireModel(BaseModel):
    """
    Base for everything that ends up in the request body.

    Unset and empty values (None, "", 0, {}) are left out of the dump so the
    service sees the field as absent rather than blank.
    """

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def omit_empty(self, handler):
        data = handler(self)
        return {k: v for k, v in data.items() if not _is_empty(v)}

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Delivery policy
# ---------------------------------------------------------------------------

class Policy(WireModel):
    start_time: Optional[str] = Field(
        None, description='Scheduled send time, "yyyy-MM-dd HH:mm:ss". Empty sends now.'
    )
    expire_time: Optional[str] = Field(
        None, description="Expiry time, same format. Service default is three days."
    )
    max_send_num: Optional[int] = Field(
        None, description="Android only: max messages per second (min 1000)."
    )
    out_biz_no: Optional[str] = Field(
        None, description="Idempotency token for task messages."
    )
    apns_collapse_id: Optional[str] = Field(
        None, description="iOS only: devices show only the newest message with this id."
    )


# ---------------------------------------------------------------------------
# Android
# ---------------------------------------------------------------------------

class AndroidBody(WireModel):
    # Lifted into AndroidPayload.display_type, never sent inside the body.
    display_type: str = Field("", exclude=True)

    title: Optional[str] = None
    text: Optional[str] = None
    icon: Optional[str] = None
    large_icon: Optional[str] = Field(None, alias="largeIcon")
    img: Optional[str] = None
    expand_image: Optional[str] = None
    sound: Optional[str] = None
    builder_id: Optional[int] = None
    # "true" / "false" as strings, the service does not take JSON booleans here
    play_vibrate: Optional[str] = None
    play_lights: Optional[str] = None
    play_sound: Optional[str] = None
    after_open: Optional[str] = Field(
        None, description="go_app (default), go_url, go_activity or go_custom"
    )
    url: Optional[str] = None
    activity: Optional[str] = None
    custom: Optional[Union[StrictStr, dict[str, Any]]] = Field(
        None, description="Custom content, a string or a JSON object."
    )


class AndroidPayload(WireModel):
    display_type: str
    body: AndroidBody
    extra: Optional[dict[str, str]] = None

    @model_validator(mode="after")
    def share_display_type(self) -> "AndroidPayload":
        if not self.body.display_type:
            self.body.display_type = self.display_type
        return self


class ChannelProperties(WireModel):
    """Vendor channel settings, Android only. Passed through untouched."""

    channel_activity: Optional[str] = None
    xiaomi_channel_id: Optional[str] = None
    vivo_classification: Optional[str] = None
    vivo_category: Optional[str] = None
    oppo_channel_id: Optional[str] = None
    huawei_channel_importance: Optional[str] = None
    huawei_channel_category: Optional[str] = None


# ---------------------------------------------------------------------------
# iOS
# ---------------------------------------------------------------------------

class Alert(WireModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    body: Optional[str] = None


class IOSAps(WireModel):
    """The APNs ``aps`` dictionary."""

    # Optional for silent pushes (content-available=1), required otherwise.
    alert: Optional[Union[StrictStr, Alert]] = None
    badge: Optional[int] = None
    sound: Optional[str] = None
    content_available: Optional[int] = Field(None, alias="content-available")
    category: Optional[str] = None
    image: Optional[str] = None
    # Must be 1 when pushing an image.
    mutable_content: Optional[int] = Field(None, alias="mutable-content")


class IOSPayload(WireModel):
    """
    Flat iOS payload: ``aps`` plus any caller keys at the top level.

    Extra keys are kept as-is, so ``IOSPayload(aps=aps, order_id="42")``
    serializes to ``{"aps": {...}, "order_id": "42"}``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    aps: IOSAps

    @model_serializer(mode="wrap")
    def omit_empty(self, handler):
        # A plain map on the wire: aps is always present and caller values
        # are sent even when falsy.
        return handler(self)

    @classmethod
    def with_extras(cls, aps: IOSAps, extras: Optional[dict[str, Any]] = None) -> "IOSPayload":
        extras = dict(extras or {})
        reserved = RESERVED_IOS_KEYS.intersection(extras)
        if reserved:
            logger.warning("iOS payload uses reserved keys: %s", ", ".join(sorted(reserved)))
        if "aps" in extras:
            logger.warning("iOS payload extras contain 'aps', the extra value is not sent")
            del extras["aps"]
        return cls(aps=aps, **extras)
