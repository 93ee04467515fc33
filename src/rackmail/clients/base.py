"""Base HTTP client: request signing, rate limiting, dispatch and decoding."""

from __future__ import annotations

import logging
from typing import IO, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..config import Settings
from ..errors import ArgError, DecodeError, check_response
from .rate_limiter import DualRateLimiter, TokenBucketRateLimiter
from .signer import Signer

logger = logging.getLogger(__name__)
wire_logger = logging.getLogger("rackmail.wire")

MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"

ModelT = TypeVar("ModelT", bound=BaseModel)


class Response:
    """A Rackspace Email API response wrapping the underlying httpx response."""

    def __init__(self, http_response: httpx.Response) -> None:
        self.http_response = http_response

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def request(self) -> httpx.Request:
        return self.http_response.request

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {self.request.method} {self.request.url}>"


def dump_request(request: httpx.Request) -> str:
    lines = [f"{request.method} {request.url.raw_path.decode()} HTTP/1.1"]
    lines.append(f"Host: {request.url.netloc.decode()}")
    lines.extend(f"{name}: {value}" for name, value in request.headers.items() if name != "host")
    body = request.content.decode("utf-8", errors="replace")
    return "\n".join(lines) + "\n\n" + body


def dump_response(response: httpx.Response) -> str:
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    lines.extend(f"{name}: {value}" for name, value in response.headers.items())
    return "\n".join(lines) + "\n\n" + response.text


class BaseAPIClient:
    """Shared core for the Rackspace Email API.

    Owns the httpx.AsyncClient, the signer and the read/write rate limiters.
    Resource services build requests with ``new_request`` and send them with
    one of ``do``, ``do_decode`` or ``do_stream``.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self.base_url = httpx.URL(settings.base_url)
        self.user_agent = settings.user_agent
        self.debug_http = settings.debug_http
        self._signer = Signer(settings.user_key, settings.secret_key)
        self._limiter = DualRateLimiter(
            read=TokenBucketRateLimiter(
                rate=settings.read_rate_per_second,
                per=1.0,
                burst=settings.read_burst,
            ),
            write=TokenBucketRateLimiter(
                rate=settings.write_rate_per_second,
                per=1.0,
                burst=settings.write_burst,
            ),
        )
        self._client = httpx.AsyncClient(
            transport=transport,
            timeout=httpx.Timeout(settings.http_timeout_seconds),
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def limiter(self) -> DualRateLimiter:
        return self._limiter

    @property
    def signer(self) -> Signer:
        return self._signer

    async def close(self) -> None:
        await self._client.aclose()

    def new_request(
        self,
        method: str,
        path: str,
        body: dict[str, str] | None = None,
        params: dict[str, int | str] | None = None,
    ) -> httpx.Request:
        """Build a signed request for ``path`` relative to the base URL.

        ``path`` must not start with a slash. A ``body`` is sent form-encoded.
        No I/O happens here.
        """
        if path.startswith("/"):
            raise ArgError("path", "it must be relative to the base URL")

        url = self.base_url.join(path)
        method = method.upper()

        if method == "POST" and body:
            content_type = FORM_MEDIA_TYPE
        else:
            content_type = MEDIA_TYPE

        request = self._client.build_request(
            method,
            url,
            params=params or None,
            data=body or None,
            headers={
                "Content-Type": content_type,
                "Accept": MEDIA_TYPE,
                "User-Agent": self.user_agent,
            },
        )
        self._signer.sign(request)
        return request

    async def do(self, request: httpx.Request) -> Response:
        """Send a request whose successful body carries nothing to decode."""
        response = await self._send(request)
        try:
            await self._check(response)
        finally:
            await response.http_response.aclose()
        return response

    async def do_decode(
        self, request: httpx.Request, model: type[ModelT]
    ) -> tuple[ModelT, Response]:
        """Send a request and decode the JSON body into ``model``."""
        response = await self._send(request)
        try:
            await self._check(response)
            data = await response.http_response.aread()
        finally:
            await response.http_response.aclose()

        try:
            return model.model_validate_json(data), response
        except ValidationError as exc:
            raise DecodeError(
                f"{request.method} {request.url}: could not decode {model.__name__}: {exc}"
            ) from exc

    async def do_stream(self, request: httpx.Request, sink: IO[bytes]) -> Response:
        """Send a request and copy the raw body into ``sink`` without decoding."""
        response = await self._send(request)
        try:
            await self._check(response)
            async for chunk in response.http_response.aiter_bytes():
                sink.write(chunk)
        finally:
            await response.http_response.aclose()
        return response

    async def _send(self, request: httpx.Request) -> Response:
        """Rate-limit, send, and optionally dump one request/response pair.

        The returned response is open; callers must close it.
        """
        if self.debug_http:
            wire_logger.debug("Req: %s", dump_request(request))

        await self._limiter.acquire(request.method)

        http_response = await self._client.send(request, stream=True)
        if self.debug_http:
            try:
                await http_response.aread()
            except BaseException:
                await http_response.aclose()
                raise
            wire_logger.debug("Resp: %s", dump_response(http_response))

        return Response(http_response)

    async def _check(self, response: Response) -> None:
        error = await check_response(response)
        if error is not None:
            logger.warning("API error: %s", error)
            raise error

    async def __aenter__(self) -> BaseAPIClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
