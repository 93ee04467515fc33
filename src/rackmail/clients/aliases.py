"""Rackspace Email alias management."""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator

from ..errors import ArgError
from ..models import Alias, AliasDetail, AliasPage, PageOptions
from ..pagination import Paginator

if TYPE_CHECKING:
    from .base import BaseAPIClient, Response

ALIASES_BASE_PATH = "v1/domains/{domain}/rs/aliases"


def _require(argument: str, value: str) -> None:
    if not value:
        raise ArgError(argument, "cannot be an empty string")


class AliasesService:
    """Rackspace Email alias endpoints.

    See: http://api-wiki.apps.rackspace.com/api-wiki/index.php?title=Rackspace_Alias(Rest_API)
    """

    def __init__(self, client: BaseAPIClient) -> None:
        self._client = client

    def _alias_path(self, domain: str, alias: str) -> str:
        return f"{ALIASES_BASE_PATH.format(domain=domain)}/{alias}"

    def paginator(
        self, domain: str, options: PageOptions | None = None
    ) -> Paginator[AliasPage]:
        _require("domain", domain)
        path = ALIASES_BASE_PATH.format(domain=domain)

        async def fetch_page(page_options: PageOptions) -> AliasPage:
            request = self._client.new_request("GET", path, params=page_options.to_params())
            page, _ = await self._client.do_decode(request, AliasPage)
            return page

        return Paginator(
            fetch_page,
            options,
            default_size=self._client.settings.default_page_size,
        )

    def pages(
        self, domain: str, options: PageOptions | None = None
    ) -> AsyncIterator[AliasPage]:
        """Iterate lazily over the pages of a domain's alias listing."""
        return self.paginator(domain, options).pages()

    async def list(self, domain: str, options: PageOptions | None = None) -> list[Alias]:
        """List every alias of ``domain``."""
        return await self.paginator(domain, options).collect()

    async def show(self, domain: str, alias: str) -> AliasDetail:
        """Get an alias and its member addresses."""
        _require("domain", domain)
        _require("alias", alias)

        request = self._client.new_request("GET", self._alias_path(domain, alias))
        detail, _ = await self._client.do_decode(request, AliasDetail)
        return detail

    async def add(self, domain: str, alias: str, email_addresses: list[str]) -> Response:
        """Create ``alias`` on ``domain`` forwarding to ``email_addresses``."""
        _require("domain", domain)
        _require("alias", alias)
        if not email_addresses:
            raise ArgError("email_addresses", "cannot be an empty list of strings")

        body = {"aliasEmails": ",".join(email_addresses)}
        request = self._client.new_request("POST", self._alias_path(domain, alias), body=body)
        return await self._client.do(request)

    async def delete(self, domain: str, alias: str) -> Response:
        """Remove ``alias`` from ``domain``."""
        _require("domain", domain)
        _require("alias", alias)

        request = self._client.new_request("DELETE", self._alias_path(domain, alias))
        return await self._client.do(request)
