"""Request serialization and signing."""

import hashlib
import json
import logging

from umeng_push.schemas.envelope import RequestEnvelope

logger = logging.getLogger(__name__)

METHOD = "POST"


def md5_hex(value: str) -> str:
    return hashlib.md5(value.encode("utf-8")).hexdigest()


def serialize(envelope: RequestEnvelope) -> bytes:
    """Serialize the envelope and cache the bytes on it for the transport."""
    body = json.dumps(
        envelope.to_wire(),
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")
    envelope._body = body
    return body


def sign(envelope: RequestEnvelope, host: str, path: str, app_master_secret: str) -> str:
    """
    Serialize ``envelope`` and return the signed URL for ``path``.

    The signature is md5("POST" + host + path + body + secret) over the exact
    bytes cached on the envelope; send those bytes, never a re-serialization.
    """
    body = serialize(envelope)
    signature = md5_hex(f"{METHOD}{host}{path}{body.decode('utf-8')}{app_master_secret}")
    logger.debug("Signed %s%s (%d bytes)", host, path, len(body))
    return f"{host}{path}?sign={signature}"
