"""
webhook_client.py

Responsibility: Isolate all HTTP interaction with Google Chat incoming webhooks.

This module must be the only place that:
- Sends HTTP requests to a webhook URL
- Interprets webhook response status codes

One call sends one request. There are no retries and no timeout unless the
caller configures one.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlsplit

import requests

logger = logging.getLogger(__name__)


class WebhookError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _redact(url: str) -> str:
    """
    Strip the query string; webhook URLs carry their key and token there.
    """
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


class WebhookClient:
    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json; charset=UTF-8",
            "Cache-Control": "no-cache",
        }

    def post_message(self, url: str, message: dict[str, Any]) -> None:
        """
        POST a message document as JSON. Raises WebhookError on a non-2xx status.
        """
        target = _redact(url)
        logger.debug("POST %s", target)
        try:
            r = requests.request("POST", url, headers=self._headers(), json=message, timeout=self._timeout)
        except requests.RequestException as e:
            raise WebhookError(f"Webhook request failed POST {target}: {e}") from e

        if not 200 <= r.status_code < 300:
            raise WebhookError(
                f"Response from POST request was not 2xx. Received: {r.status_code} ({target})",
                status_code=r.status_code,
            )
        logger.debug("Webhook accepted message (%s)", r.status_code)
