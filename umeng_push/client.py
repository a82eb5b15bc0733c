"""Umeng push API client."""

import logging
from typing import Any, Optional

import httpx

from umeng_push.config import Settings
from umeng_push.errors import PayloadValidationError
from umeng_push.platforms.builder import build_push, new_envelope
from umeng_push.platforms.validate import validate_target
from umeng_push.schemas.envelope import Platform, RequestEnvelope
from umeng_push.schemas.response import Result
from umeng_push.signing import sign
from umeng_push.transport import send

logger = logging.getLogger(__name__)


class UmengClient:
    """
    Send, query, cancel and upload against the Umeng push API.

    Every call is one signed POST. Nothing is retried; callers own the retry
    policy.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.Client] = None):
        self.settings = settings
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=settings.timeout)

    @classmethod
    def from_settings(cls, **overrides: Any) -> "UmengClient":
        """Create a client configured from UMENG_* environment variables."""
        return cls(Settings(**overrides))

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> "UmengClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Operations ---

    def push(
        self,
        platform: Platform,
        body: Any = None,
        aps: Any = None,
        policy: Any = None,
        extras: Optional[dict[str, Any]] = None,
        **fields: Any,
    ) -> Result:
        """
        Send a push. Returns the response data (task_id or msg_id).

        ``fields`` are envelope fields such as type, device_tokens, alias,
        filter, production_mode or description.
        """
        app_key, secret = self.settings.credentials(platform)
        envelope = build_push(platform, app_key, body, aps, policy, extras, **fields)

        err = validate_target(envelope)
        if err:
            raise PayloadValidationError(err)

        return self._call(envelope, self.settings.send_path, secret)

    def status(self, platform: Platform, task_id: str) -> Result:
        """Query the status of a task message."""
        app_key, secret = self.settings.credentials(platform)
        envelope = new_envelope(platform, app_key, task_id=task_id)
        return self._call(envelope, self.settings.status_path, secret)

    def cancel(self, platform: Platform, task_id: str) -> Result:
        """Cancel a scheduled task message."""
        app_key, secret = self.settings.credentials(platform)
        envelope = new_envelope(platform, app_key, task_id=task_id)
        return self._call(envelope, self.settings.cancel_path, secret)

    def upload(self, platform: Platform, content: str) -> Result:
        """
        Upload newline separated device tokens or aliases for filecast /
        customizedcast. The returned data holds ``file_id``.
        """
        if not content:
            raise PayloadValidationError("upload content is empty")
        app_key, secret = self.settings.credentials(platform)
        envelope = new_envelope(platform, app_key, content=content)
        return self._call(envelope, self.settings.upload_path, secret)

    def _call(self, envelope: RequestEnvelope, path: str, secret: str) -> Result:
        url = sign(envelope, self.settings.host, path, secret)
        result = send(self.http_client, url, envelope.body)
        logger.info("Umeng %s %s succeeded", envelope.platform.name, path)
        return result
