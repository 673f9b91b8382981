"""Spreadsheet download utilities.

This module provides both async and sync fetch functions using httpx. Both
return the raw response body; nothing is written to disk.

Functions
---------
fetch_bytes : Async download with httpx.AsyncClient
fetch_bytes_sync : Sync download with httpx.Client (for CLI scripts)

Notes
-----
Both functions follow redirects and never retry. Any ``httpx.HTTPError``
(transport failure or 4xx/5xx status) or ``httpx.InvalidURL`` is re-raised
as :class:`~column_extractor.errors.FetchError`. A caller-supplied client is
used as-is and left open.
"""

from __future__ import annotations

import httpx

from column_extractor.config import REQUEST_TIMEOUT, setup_logging
from column_extractor.errors import FetchError

# Module-level logger for download operations
logger = setup_logging(__name__)


def _fetch_error(url: str, err: httpx.HTTPError | httpx.InvalidURL) -> FetchError:
    if isinstance(err, httpx.HTTPStatusError):
        status = err.response.status_code
        return FetchError(url, f"HTTP {status}", status_code=status)
    return FetchError(url, str(err) or type(err).__name__)


async def fetch_bytes(
    url: str,
    request_timeout: float = REQUEST_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> bytes:
    """Download a document asynchronously and return its body.

    Parameters
    ----------
    url : str
        URL to download from (supports redirects).
    request_timeout : float, optional
        HTTP request timeout in seconds, ignored when ``client`` is given.
    client : httpx.AsyncClient, optional
        Client to issue the request with.

    Returns
    -------
    bytes
        Raw response content.

    Raises
    ------
    FetchError
        If the request fails (4xx, 5xx, connection error).
    """
    logger.info("Fetching spreadsheet: %s", url)

    try:
        if client is not None:
            http_response = await client.get(url, follow_redirects=True)
            http_response.raise_for_status()
        else:
            async with httpx.AsyncClient(timeout=request_timeout, follow_redirects=True) as async_http:
                http_response = await async_http.get(url)
                http_response.raise_for_status()  # Raise on 4xx/5xx
    except (httpx.HTTPError, httpx.InvalidURL) as err:
        raise _fetch_error(url, err) from err

    logger.debug("Fetched %d bytes from %s", len(http_response.content), url)
    return http_response.content


def fetch_bytes_sync(
    url: str,
    timeout: float = REQUEST_TIMEOUT,
    client: httpx.Client | None = None,
) -> bytes:
    """Download a document using blocking I/O.

    This is the blocking version - use :func:`fetch_bytes` for async contexts.

    Parameters
    ----------
    url : str
        URL to download from (supports redirects).
    timeout : float, optional
        HTTP request timeout in seconds, ignored when ``client`` is given.
    client : httpx.Client, optional
        Client to issue the request with.

    Returns
    -------
    bytes
        Raw response content.

    Raises
    ------
    FetchError
        If the request fails (4xx, 5xx, connection error).
    """
    logger.info("Fetching spreadsheet: %s", url)

    try:
        if client is not None:
            resp = client.get(url, follow_redirects=True)
            resp.raise_for_status()
        else:
            with httpx.Client(timeout=timeout, follow_redirects=True) as sync_client:
                resp = sync_client.get(url)
                resp.raise_for_status()  # Raise on 4xx/5xx
    except (httpx.HTTPError, httpx.InvalidURL) as err:
        raise _fetch_error(url, err) from err

    logger.debug("Fetched %d bytes from %s", len(resp.content), url)
    return resp.content
