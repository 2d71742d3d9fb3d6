"""Response decoding shared by the API clients.

API-level failures (4xx/5xx with a JSON body) are returned as data, not
raised: the tool reports whatever the upstream said.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


def decode_response(response: httpx.Response) -> Any:
    """Return the decoded JSON body of *response*, whatever its status."""
    if response.is_error:
        logger.warning(
            "%s %s returned HTTP %d", response.request.method, response.request.url, response.status_code
        )
    if not response.content.strip():
        return {"error": "Empty response"}
    try:
        data = response.json()
    except ValueError:
        return {
            "error": "Non-JSON response",
            "status_code": response.status_code,
            "body": response.text,
        }
    if data is None:
        return {"error": "Empty response"}
    return data
