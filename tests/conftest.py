"""Shared fixtures: a client whose HTTP transport is an in-process handler."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from rackmail import RackmailClient, Settings

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "base_url": "https://api.test/",
        "user_key": "userid",
        "secret_key": "hunter2",
        "read_rate_per_second": 1000.0,
        "read_burst": 100,
        "write_rate_per_second": 1000.0,
        "write_burst": 100,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def make_client():
    """Build a RackmailClient backed by ``handler``; returns (client, transport)."""

    def factory(
        handler: Handler, **overrides: object
    ) -> tuple[RackmailClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = RackmailClient(make_settings(**overrides), transport=transport)
        return client, transport

    return factory
