"""X-Api-Signature request signing."""

from __future__ import annotations

import base64
import hashlib
from datetime import datetime
from typing import Callable

import httpx

SIGNATURE_HEADER = "X-Api-Signature"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


class Signer:
    """Computes the per-request signature from a user key and secret key.

    The header value is ``user_key:timestamp:base64(sha1(user_key +
    user_agent + timestamp + secret_key))``, with the timestamp taken at
    signing time.
    """

    def __init__(
        self,
        user_key: str,
        secret_key: str,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.user_key = user_key
        self._secret_key = secret_key
        self._clock = clock

    def timestamp(self) -> str:
        return self._clock().strftime(TIMESTAMP_FORMAT)

    def signature(self, user_agent: str, timestamp: str) -> str:
        digest = hashlib.sha1(
            f"{self.user_key}{user_agent}{timestamp}{self._secret_key}".encode()
        ).digest()
        encoded = base64.b64encode(digest).decode("ascii")
        return f"{self.user_key}:{timestamp}:{encoded}"

    def sign(self, request: httpx.Request) -> None:
        """Attach a freshly timestamped signature header to the request."""
        user_agent = request.headers.get("User-Agent", "")
        request.headers[SIGNATURE_HEADER] = self.signature(user_agent, self.timestamp())
