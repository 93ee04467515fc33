"""Top-level Rackspace Email API client."""

from __future__ import annotations

import httpx

from .clients.aliases import AliasesService
from .clients.base import BaseAPIClient
from .clients.domains import DomainsService
from .config import Settings


class RackmailClient(BaseAPIClient):
    """Client for the Rackspace Email administration API.

    Usage::

        settings = Settings(user_key="...", secret_key="...")
        async with RackmailClient(settings) as client:
            domains = await client.domains.list()
            await client.aliases.add("example.com", "sales", ["a@example.com"])

    All services share this client's rate limiters and connection pool.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(settings=settings or Settings(), transport=transport)  # type: ignore[call-arg]
        self.domains = DomainsService(self)
        self.aliases = AliasesService(self)

    async def __aenter__(self) -> RackmailClient:
        return self
