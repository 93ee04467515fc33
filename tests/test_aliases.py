from urllib.parse import parse_qs

import httpx
import pytest

from rackmail import Alias, AliasDetail, ArgError, ErrorResponse, PageOptions


@pytest.mark.asyncio
async def test_list_aliases(make_client):
    def handler(request):
        assert request.method == "GET"
        assert request.url.path == "/v1/domains/domain.com/rs/aliases"
        return httpx.Response(200, json={"aliases": [{"name": "foo"}, {"name": "bar"}]})

    client, _ = make_client(handler)

    aliases = await client.aliases.list("domain.com")

    assert aliases == [Alias(name="foo"), Alias(name="bar")]


@pytest.mark.asyncio
async def test_list_aliases_multiple_pages(make_client):
    responses = [
        {"offset": 0, "size": 1, "total": 2, "aliases": [{"name": "foo", "numberOfMembers": 2}]},
        {"offset": 1, "size": 1, "total": 2, "aliases": [{"name": "bar", "numberOfMembers": 1}]},
    ]

    def handler(request):
        return httpx.Response(200, json=responses[len(transport.requests) - 1])

    client, transport = make_client(handler)

    aliases = await client.aliases.list("domain.com", PageOptions(size=1))

    assert aliases == [Alias(name="foo", number_of_members=2), Alias(name="bar", number_of_members=1)]
    assert len(transport.requests) == 2


@pytest.mark.asyncio
async def test_list_aliases_error_mid_listing(make_client):
    def handler(request):
        if len(transport.requests) == 1:
            return httpx.Response(200, json={"offset": 0, "size": 1, "total": 2, "aliases": [{"name": "foo"}]})
        return httpx.Response(503, text="Service Unavailable")

    client, transport = make_client(handler)
    paginator = client.aliases.paginator("domain.com", PageOptions(size=1))

    with pytest.raises(ErrorResponse) as exc_info:
        await paginator.collect()

    assert exc_info.value.status_code == 503
    assert exc_info.value.message == "Service Unavailable"
    assert paginator.items == [Alias(name="foo")]


@pytest.mark.asyncio
async def test_list_aliases_empty_domain(make_client):
    client, transport = make_client(lambda request: httpx.Response(200))

    with pytest.raises(ArgError) as exc_info:
        await client.aliases.list("")

    assert exc_info.value.argument == "domain"
    assert transport.requests == []


@pytest.mark.asyncio
async def test_show_alias(make_client):
    def handler(request):
        assert request.method == "GET"
        assert request.url.path == "/v1/domains/foo.com/rs/aliases/bar"
        return httpx.Response(
            200,
            json={"name": "bar", "emailAddressList": {"emailAddress": ["baz@bar.com", "qux@bar.com"]}},
        )

    client, _ = make_client(handler)

    detail = await client.aliases.show("foo.com", "bar")

    assert isinstance(detail, AliasDetail)
    assert detail.name == "bar"
    assert detail.email_address_list.addresses == ["baz@bar.com", "qux@bar.com"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "domain, alias, argument",
    [("", "foo", "domain"), ("domain.com", "", "alias")],
)
async def test_show_alias_missing_arguments(make_client, domain, alias, argument):
    client, transport = make_client(lambda request: httpx.Response(200))

    with pytest.raises(ArgError) as exc_info:
        await client.aliases.show(domain, alias)

    assert exc_info.value.argument == argument
    assert transport.requests == []


@pytest.mark.asyncio
async def test_add_alias(make_client):
    def handler(request):
        assert request.method == "POST"
        assert request.url.path == "/v1/domains/foo.com/rs/aliases/bar"
        return httpx.Response(200)

    client, transport = make_client(handler)

    response = await client.aliases.add("foo.com", "bar", ["foo@bar.com", "baz@bar.com"])

    assert response.status_code == 200
    sent = transport.requests[0]
    assert sent.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert parse_qs(sent.content.decode()) == {"aliasEmails": ["foo@bar.com,baz@bar.com"]}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "domain, alias, emails, argument",
    [
        ("", "foo", ["foo@bar.com"], "domain"),
        ("domain.com", "", ["foo@bar.com"], "alias"),
        ("domain.com", "foo", [], "email_addresses"),
    ],
)
async def test_add_alias_missing_arguments(make_client, domain, alias, emails, argument):
    client, transport = make_client(lambda request: httpx.Response(200))

    with pytest.raises(ArgError) as exc_info:
        await client.aliases.add(domain, alias, emails)

    assert exc_info.value.argument == argument
    assert transport.requests == []


@pytest.mark.asyncio
async def test_delete_alias(make_client):
    def handler(request):
        assert request.method == "DELETE"
        assert request.url.path == "/v1/domains/foo.com/rs/aliases/bar"
        return httpx.Response(200)

    client, transport = make_client(handler)

    response = await client.aliases.delete("foo.com", "bar")

    assert response.status_code == 200
    assert len(transport.requests) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "domain, alias, argument",
    [("", "foo", "domain"), ("domain.com", "", "alias")],
)
async def test_delete_alias_missing_arguments(make_client, domain, alias, argument):
    client, transport = make_client(lambda request: httpx.Response(200))

    with pytest.raises(ArgError) as exc_info:
        await client.aliases.delete(domain, alias)

    assert exc_info.value.argument == argument
    assert transport.requests == []
