import httpx
import pytest

from rackmail import ArgError, ErrorResponse
from rackmail.clients.base import Response
from rackmail.errors import check_response


def make_response(status: int, content: bytes = b"", method: str = "GET") -> Response:
    request = httpx.Request(method, "https://api.test/v1/domains/foo.com")
    return Response(httpx.Response(status, content=content, request=request))


def test_arg_error_names_argument():
    error = ArgError("name", "cannot be an empty string")

    assert error.argument == "name"
    assert error.reason == "cannot be an empty string"
    assert str(error) == "name is invalid because cannot be an empty string"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [200, 201, 204, 299])
async def test_success_statuses_are_not_errors(status):
    assert await check_response(make_response(status)) is None


@pytest.mark.asyncio
async def test_error_envelope_populates_message_and_request_id():
    response = make_response(404, b'{"message":"not found","request_id":"abc"}')

    error = await check_response(response)

    assert isinstance(error, ErrorResponse)
    assert error.status_code == 404
    assert error.message == "not found"
    assert error.request_id == "abc"
    assert error.http_method == "GET"
    assert error.request_url == "https://api.test/v1/domains/foo.com"
    assert error.response is response
    assert str(error) == 'GET https://api.test/v1/domains/foo.com: 404 (request "abc") not found'


@pytest.mark.asyncio
async def test_empty_body_still_produces_full_error():
    error = await check_response(make_response(500, method="DELETE"))

    assert error.status_code == 500
    assert error.message == ""
    assert error.request_id is None
    assert error.http_method == "DELETE"
    assert error.request_url == "https://api.test/v1/domains/foo.com"
    assert str(error) == "DELETE https://api.test/v1/domains/foo.com: 500 "


@pytest.mark.asyncio
async def test_non_json_body_becomes_message():
    error = await check_response(make_response(502, b"Bad Gateway"))

    assert error.message == "Bad Gateway"
    assert error.request_id is None


@pytest.mark.asyncio
async def test_json_of_wrong_shape_becomes_message():
    error = await check_response(make_response(400, b'["unexpected"]'))

    assert error.message == '["unexpected"]'


@pytest.mark.asyncio
async def test_dispatch_raises_error_response(make_client):
    client, transport = make_client(
        lambda request: httpx.Response(404, json={"message": "not found", "request_id": "abc"})
    )

    with pytest.raises(ErrorResponse) as exc_info:
        await client.domains.show("foo.com")

    error = exc_info.value
    assert (error.status_code, error.message, error.request_id) == (404, "not found", "abc")
    assert error.request_url == "https://api.test/v1/domains/foo.com"
    assert error.response.status_code == 404
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_null_message_keeps_request_id():
    error = await check_response(make_response(404, b'{"message":null,"request_id":"abc"}'))

    assert error.status_code == 404
    assert error.message == ""
    assert error.request_id == "abc"
