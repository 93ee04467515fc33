"""Domain listing and lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator

from ..errors import ArgError, DecodeError
from ..models import Domain, DomainPage, DomainResponse, PageOptions
from ..pagination import Paginator

if TYPE_CHECKING:
    from .base import BaseAPIClient

DOMAINS_BASE_PATH = "v1/domains"


class DomainsService:
    """Domain endpoints of the Rackspace Email API.

    See: http://api-wiki.apps.rackspace.com/api-wiki/index.php?title=Domain_(Rest_API)
    """

    def __init__(self, client: BaseAPIClient) -> None:
        self._client = client

    async def fetch_page(self, options: PageOptions) -> DomainPage:
        """GET /v1/domains for a single page."""
        request = self._client.new_request(
            "GET", DOMAINS_BASE_PATH, params=options.to_params()
        )
        page, _ = await self._client.do_decode(request, DomainPage)
        return page

    def paginator(self, options: PageOptions | None = None) -> Paginator[DomainPage]:
        return Paginator(
            self.fetch_page,
            options,
            default_size=self._client.settings.default_page_size,
        )

    def pages(self, options: PageOptions | None = None) -> AsyncIterator[DomainPage]:
        """Iterate lazily over the pages of the domain listing."""
        return self.paginator(options).pages()

    async def list(self, options: PageOptions | None = None) -> list[Domain]:
        """List every domain, following pages until the total is reached."""
        return await self.paginator(options).collect()

    async def show(self, name: str) -> Domain:
        """GET /v1/domains/{name}. Requires a non-empty domain name."""
        if not name:
            raise ArgError("name", "cannot be an empty string")

        request = self._client.new_request("GET", f"{DOMAINS_BASE_PATH}/{name}")
        root, _ = await self._client.do_decode(request, DomainResponse)
        if root.domain is None:
            raise DecodeError(f"GET {request.url}: response has no 'domain' object")
        return root.domain
