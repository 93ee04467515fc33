"""Async client for the Rackspace Email REST administration API."""

from .client import RackmailClient
from .clients.base import Response
from .config import Settings
from .errors import ArgError, DecodeError, ErrorResponse, RackmailError
from .models import Alias, AliasDetail, Domain, PageOptions
from .pagination import Paginator

__all__ = [
    "Alias",
    "AliasDetail",
    "ArgError",
    "DecodeError",
    "Domain",
    "ErrorResponse",
    "PageOptions",
    "Paginator",
    "RackmailClient",
    "RackmailError",
    "Response",
    "Settings",
]
