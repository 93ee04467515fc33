"""Pydantic models for API requests, responses, and pagination envelopes."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from pydantic import BaseModel, Field


# ── Pagination ───────────────────────────────────────────────────

class PageOptions(BaseModel):
    """Offset/size cursor for listing endpoints.

    Mutable: the paginator advances ``offset`` after each page. A zero
    ``size`` means the client's default page size.
    """

    offset: int = Field(default=0, ge=0)
    size: int = Field(default=0, ge=0)

    def to_params(self) -> dict[str, int]:
        """Query parameters, omitting zero values."""
        return {key: value for key, value in self.model_dump().items() if value}


class PageEnvelope(BaseModel):
    """The ``{offset, size, total, <items>}`` shape shared by listing responses."""

    offset: int = 0
    size: int = 0
    total: int = 0

    model_config = {"extra": "allow"}

    @property
    @abstractmethod
    def items(self) -> list[Any]:
        """The endpoint-specific item array."""

    @property
    def is_last(self) -> bool:
        """True once this page covers the reported total."""
        return self.total <= self.size + self.offset


# ── Errors ───────────────────────────────────────────────────────

class ErrorEnvelope(BaseModel):
    """JSON body returned with non-2xx responses."""

    message: str | None = None
    request_id: str | None = None

    model_config = {"extra": "ignore"}


# ── Domains ──────────────────────────────────────────────────────

class Domain(BaseModel):
    """A Rackspace Email domain."""

    name: str = ""
    account_number: str = Field(default="", alias="accountNumber")
    service_type: str = Field(default="", alias="serviceType")
    active_sync_licenses: int = Field(default=0, alias="activeSyncLicenses")
    active_sync_mobile_service_enabled: bool = Field(
        default=False, alias="activeSyncMobileServiceEnabled"
    )
    archiving_service_enabled: bool = Field(default=False, alias="archivingServiceEnabled")
    black_berry_licenses: int = Field(default=0, alias="blackBerryLicenses")
    black_berry_mobile_service_enabled: bool = Field(
        default=False, alias="blackBerryMobileServiceEnabled"
    )
    exchange_extra_storage: int = Field(default=0, alias="exchangeExtraStorage")
    exchange_max_num_mailboxes: int = Field(default=0, alias="exchangeMaxNumMailboxes")
    exchange_used_storage: int = Field(default=0, alias="exchangeUsedStorage")
    rs_email_base_mailbox_size: int = Field(default=0, alias="rsEmailBaseMailboxSize")
    rs_email_extra_storage: int = Field(default=0, alias="rsEmailExtraStorage")
    rs_email_max_number_mailboxes: int = Field(default=0, alias="rsEmailMaxNumberMailboxes")
    rs_email_used_storage: int = Field(default=0, alias="rsEmailUsedStorage")

    model_config = {"populate_by_name": True, "extra": "allow"}


class DomainResponse(BaseModel):
    """GET /v1/domains/{name} response."""

    domain: Domain | None = None


class DomainPage(PageEnvelope):
    """GET /v1/domains response."""

    domains: list[Domain] = Field(default_factory=list)

    @property
    def items(self) -> list[Domain]:
        return self.domains


# ── Rackspace Email aliases ──────────────────────────────────────

class Alias(BaseModel):
    """An alias as it appears in the alias listing."""

    name: str = ""
    number_of_members: int = Field(default=0, alias="numberOfMembers")

    model_config = {"populate_by_name": True, "extra": "allow"}


class EmailAddressList(BaseModel):
    addresses: list[str] = Field(default_factory=list, alias="emailAddress")

    model_config = {"populate_by_name": True}


class AliasDetail(BaseModel):
    """GET /v1/domains/{domain}/rs/aliases/{alias} response."""

    name: str = ""
    email_address_list: EmailAddressList = Field(
        default_factory=EmailAddressList, alias="emailAddressList"
    )

    model_config = {"populate_by_name": True, "extra": "allow"}


class AliasPage(PageEnvelope):
    """GET /v1/domains/{domain}/rs/aliases response."""

    aliases: list[Alias] = Field(default_factory=list)

    @property
    def items(self) -> list[Alias]:
        return self.aliases
