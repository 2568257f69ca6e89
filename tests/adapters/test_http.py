import asyncio

import httpx
from aletk.ResultMonad import Err, Ok

from slide_bib_sdk.adapters.http import fetch_json_document, fetch_json_document_async

URL = "https://example.org/references.json"


def test_fetch_json_document() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[{"id": "a"}])

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        result = fetch_json_document(URL, client=client)

    assert isinstance(result, Ok)
    assert result.out == [{"id": "a"}]
    assert len(requests) == 1
    assert requests[0].method == "GET"
    assert str(requests[0].url) == URL


def test_fetch_leaves_caller_client_open() -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])))

    fetch_json_document(URL, client=client)

    assert not client.is_closed
    client.close()


def test_fetch_error_status_is_not_retried() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        result = fetch_json_document(URL, client=client)

    assert isinstance(result, Err)
    assert result.error_type == "HttpStatusError"
    assert result.code == 503
    assert len(calls) == 1


def test_fetch_undecodable_body() -> None:
    with httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, text="nope"))) as client:
        result = fetch_json_document(URL, client=client)

    assert isinstance(result, Err)
    assert result.error_type == "MalformedInputError"


def test_fetch_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        result = fetch_json_document(URL, client=client)

    assert isinstance(result, Err)
    assert result.error_type == "TransportError"


def test_fetch_json_document_async() -> None:
    async def run() -> Ok[object] | Err:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"a": {}}))
        async with httpx.AsyncClient(transport=transport) as client:
            return await fetch_json_document_async(URL, client=client)

    result = asyncio.run(run())

    assert isinstance(result, Ok)
    assert result.out == {"a": {}}


def test_fetch_json_document_async_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async def run() -> Ok[object] | Err:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_json_document_async(URL, client=client)

    result = asyncio.run(run())

    assert isinstance(result, Err)
    assert result.error_type == "TransportError"
