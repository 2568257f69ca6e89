"""HTTP adapter for fetching remote bibliography documents.

A single GET per call, no retries. Callers may pass their own httpx client,
which is left open; otherwise a client is created and closed per call.
"""

import httpx
from aletk.ResultMonad import Err, Ok
from aletk.utils import get_logger

from slide_bib_sdk.adapters.io.json import decode_json_document

lgr = get_logger(__name__)

__all__: list[str] = [
    "fetch_json_document",
    "fetch_json_document_async",
]


def _decode_response(url: str, response: httpx.Response) -> Ok[object] | Err:
    """Turn an HTTP response into a decoded document.

    Args:
        url: the fetched URL, for messages
        response: the received response

    Returns:
        Ok with the decoded JSON body, or Err for error statuses and undecodable bodies
    """
    if response.status_code >= 400:
        return Err(
            message=f"GET {url} failed: {response.status_code} - {response.reason_phrase}",
            code=response.status_code,
            error_type="HttpStatusError",
        )

    result = decode_json_document(response.content)
    if isinstance(result, Err):
        return Err(
            message=f"GET {url} returned an undecodable body. {result.message}",
            code=-1,
            error_type=result.error_type,
        )

    lgr.info(f"Fetched bibliography document from {url}")
    return result


def _transport_error(url: str, e: httpx.HTTPError) -> Err:
    return Err(
        message=f"HTTP request to {url} failed: {e.__class__.__name__}: {e}",
        code=-1,
        error_type="TransportError",
    )


def fetch_json_document(
    url: str,
    client: httpx.Client | None = None,
    timeout: float = 30.0,
) -> Ok[object] | Err:
    """Fetch and decode a JSON document.

    Args:
        url: where to fetch from
        client: optional client to reuse
        timeout: timeout in seconds for a client created here

    Returns:
        Ok with the decoded document, or Err on transport, status or decode failure
    """
    try:
        if client is not None:
            response = client.get(url)
        else:
            with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
                response = own_client.get(url)

        return _decode_response(url, response)

    except httpx.HTTPError as e:
        return _transport_error(url, e)


async def fetch_json_document_async(
    url: str,
    client: httpx.AsyncClient | None = None,
    timeout: float = 30.0,
) -> Ok[object] | Err:
    """Fetch and decode a JSON document without blocking the event loop.

    Same contract as `fetch_json_document`.
    """
    try:
        if client is not None:
            response = await client.get(url)
        else:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as own_client:
                response = await own_client.get(url)

        return _decode_response(url, response)

    except httpx.HTTPError as e:
        return _transport_error(url, e)
