"""Response envelope returned by every endpoint."""

import json
from typing import Any, Optional

from pydantic import BaseModel

SUCCESS = "SUCCESS"

# The ``data`` section of a response. Meaning depends on the endpoint:
# task_id / msg_id for send, file_id for upload, status fields for status.
Result = dict[str, str]


class ResponseEnvelope(BaseModel):
    ret: str = ""
    # The service may answer "data": null
    data: Optional[dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.ret == SUCCESS

    def result(self) -> Result:
        """Return ``data`` with every value as a string."""
        return {
            k: v if isinstance(v, str) else json.dumps(v, ensure_ascii=False)
            for k, v in (self.data or {}).items()
        }
