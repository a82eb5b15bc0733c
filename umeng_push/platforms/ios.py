"""iOS payload formatter."""

from typing import Any, Optional

from pydantic import ValidationError

from umeng_push.errors import PayloadValidationError
from umeng_push.platforms import coerce_model, describe_errors
from umeng_push.schemas.message import IOSAps, IOSPayload


def format_ios(aps: Any, extras: Optional[dict[str, Any]] = None) -> IOSPayload:
    """
    Build the iOS payload: ``aps`` plus caller keys merged at the top level.

    "d" and "p" belong to the service; callers must not use them.
    """
    aps = coerce_model(IOSAps, aps if aps is not None else {}, "aps")
    try:
        return IOSPayload.with_extras(aps, extras)
    except ValidationError as exc:
        raise PayloadValidationError(f"invalid extras: {describe_errors(exc)}") from exc
