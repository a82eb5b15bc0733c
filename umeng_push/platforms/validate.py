"""Target selector validation for send requests."""

from typing import Optional

from umeng_push.schemas.envelope import RequestEnvelope, SendType

MAX_LISTCAST_TOKENS = 500


def validate_target(envelope: RequestEnvelope) -> Optional[str]:
    """
    Check that the target fields match the send type.
    Returns None if valid, or an error message string if invalid.
    """
    validators = {
        SendType.UNICAST: _validate_unicast,
        SendType.LISTCAST: _validate_listcast,
        SendType.FILECAST: _validate_filecast,
        SendType.BROADCAST: _validate_broadcast,
        SendType.GROUPCAST: _validate_groupcast,
        SendType.CUSTOMIZEDCAST: _validate_customizedcast,
    }
    if envelope.type is None:
        return "Missing required field: type"
    validator = validators.get(envelope.type)
    if not validator:
        return f"Unknown send type: {envelope.type}"
    return validator(envelope)


# --- Internal validators ---


def _tokens(envelope: RequestEnvelope) -> list[str]:
    return [t.strip() for t in (envelope.device_tokens or "").split(",") if t.strip()]


def _validate_unicast(envelope: RequestEnvelope) -> Optional[str]:
    tokens = _tokens(envelope)
    if not tokens:
        return "unicast requires device_tokens"
    if len(tokens) > 1:
        return "unicast takes a single device token"
    return None


def _validate_listcast(envelope: RequestEnvelope) -> Optional[str]:
    tokens = _tokens(envelope)
    if not tokens:
        return "listcast requires device_tokens"
    if len(tokens) > MAX_LISTCAST_TOKENS:
        return f"listcast takes at most {MAX_LISTCAST_TOKENS} device tokens, got {len(tokens)}"
    return None


def _validate_filecast(envelope: RequestEnvelope) -> Optional[str]:
    if not envelope.file_id:
        return "filecast requires file_id"
    return None


def _validate_broadcast(envelope: RequestEnvelope) -> Optional[str]:
    return None


def _validate_groupcast(envelope: RequestEnvelope) -> Optional[str]:
    if not envelope.filter:
        return "groupcast requires filter"
    return None


def _validate_customizedcast(envelope: RequestEnvelope) -> Optional[str]:
    if not envelope.alias_type:
        return "customizedcast requires alias_type"
    if bool(envelope.alias) == bool(envelope.file_id):
        return "customizedcast requires exactly one of alias or file_id"
    return None
