"""HTTP transport and response decoding."""

import json
import logging

import httpx
from pydantic import ValidationError

from umeng_push.errors import APIError, DecodeError, TransportError
from umeng_push.schemas.response import ResponseEnvelope, Result

logger = logging.getLogger(__name__)


def send(client: httpx.Client, url: str, body: bytes) -> Result:
    """
    POST ``body`` to a signed URL and decode the response envelope.

    Args:
        client: HTTP client; timeouts and proxies are its configuration
        url: Signed URL from ``signing.sign``
        body: The bytes that were signed

    Raises:
        TransportError: connection failure, or a non-200 answer that is not an envelope
        DecodeError: a 200 answer that is not an envelope
        APIError: the service reported ``ret != "SUCCESS"``
    """
    try:
        response = client.post(
            url,
            content=body,
            headers={"Content-Type": "application/json"},
        )
    except httpx.HTTPError as e:
        logger.error(f"Request to {_endpoint(url)} failed: {e}")
        raise TransportError(f"request failed: {e}") from e

    return decode_response(response)


def decode_response(response: httpx.Response) -> Result:
    try:
        envelope = ResponseEnvelope.model_validate_json(response.content)
    except ValidationError as e:
        if response.status_code != httpx.codes.OK:
            raise TransportError(
                f"JSON parse error, HTTP {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            ) from e
        raise DecodeError(f"invalid response body: {e}") from e

    if not envelope.ok:
        try:
            message = json.dumps(envelope.data, ensure_ascii=False)
        except (TypeError, ValueError):
            message = "unexpected response content"
        logger.warning(f"Push service returned {envelope.ret}: {message[:200]}")
        raise APIError(message, code=envelope.ret, data=envelope.data)

    return envelope.result()


def _endpoint(url: str) -> str:
    # Drop the query string so signatures stay out of the logs
    return url.split("?", 1)[0]
