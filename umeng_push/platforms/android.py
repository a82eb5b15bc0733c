"""Android payload formatter."""

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from umeng_push.errors import PayloadValidationError
from umeng_push.platforms import coerce_model, describe_errors
from umeng_push.schemas.message import AndroidBody, AndroidPayload

VALID_DISPLAY_TYPES = {"message", "notification"}


def format_android(body: Any, extras: Optional[dict[str, str]] = None) -> AndroidPayload:
    """
    Build the Android payload from a body.

    ``custom`` is required when display_type is "message", and when it is
    "notification" with after_open "go_custom". It must then be a non-empty
    string or a non-empty JSON object; arrays and other JSON values are
    rejected.
    """
    if body is None:
        raise PayloadValidationError("missing android body")

    # display_type is checked before any other body field
    if isinstance(body, AndroidBody):
        display_type = body.display_type
    elif isinstance(body, Mapping):
        display_type = body.get("display_type")
    else:
        raise PayloadValidationError(f"invalid android body: {type(body).__name__}")
    if display_type not in VALID_DISPLAY_TYPES:
        raise PayloadValidationError("invalid display_type field")

    try:
        body = coerce_model(AndroidBody, body, "android body")
    except PayloadValidationError as exc:
        cause = exc.__cause__
        if isinstance(cause, ValidationError) and any(
            e["loc"] and e["loc"][0] == "custom" for e in cause.errors()
        ):
            raise PayloadValidationError("invalid custom field") from cause
        raise

    if _custom_required(body):
        custom = body.custom
        if custom is None:
            raise PayloadValidationError("missing custom field")
        # JSON objects only, a JSON array is not accepted
        if not isinstance(custom, (str, dict)):
            raise PayloadValidationError("invalid custom field")
        if len(custom) == 0:
            raise PayloadValidationError("missing custom field")

    try:
        return AndroidPayload(
            display_type=body.display_type,
            body=body,
            extra=dict(extras) if extras else None,
        )
    except ValidationError as exc:
        raise PayloadValidationError(f"invalid extras: {describe_errors(exc)}") from exc


def _custom_required(body: AndroidBody) -> bool:
    if body.display_type == "message":
        return True
    return body.display_type == "notification" and body.after_open == "go_custom"
