"""Best-effort resolution of shortened and redirecting URLs."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


async def try_resolve(client: httpx.AsyncClient, url: str, method: str) -> Optional[str]:
    """
    Follow redirects for ``url`` using ``method``.

    Returns:
        The final URL after redirects, or None if the request failed
    """
    try:
        response = await client.request(method, url, follow_redirects=True)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(f"{method} redirect resolution failed for {url}: {e}")
        return None
    return str(response.url)


async def resolve_redirects(client: httpx.AsyncClient, url: str) -> str:
    """
    Resolve a URL to its final destination.

    Tries HEAD first and falls back to GET, since some hosts reject HEAD.
    If both attempts fail the input URL is returned unchanged.
    """
    resolved = await try_resolve(client, url, "HEAD")
    if resolved is None:
        resolved = await try_resolve(client, url, "GET")
    if resolved is None:
        return url

    if resolved != url:
        logger.info(f"Resolved {url} -> {resolved}")
    return resolved
