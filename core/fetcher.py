# =============================================================================
# core/fetcher.py  :  HTTP pass-through for the fetchApi tool
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Makes ONE outbound HTTP request on the caller's behalf, decodes the
#   response by its content type, and returns a text result.  Successful
#   bodies are summarized by core/formatter.py.
#
# ERROR HANDLING:
#   fetch_url() never raises.  Every failure becomes text:
#     - malformed URL         -> "Invalid URL" result, no network I/O
#     - non-2xx status        -> "Request failed" result with the body
#     - network / decode error -> "Error fetching URL" result with a hint
#   There are no retries; a failed call is reported immediately.
# =============================================================================

import json
import logging
from typing import Any, Optional

import httpx

from core.config import settings
from core.formatter import format_response
from core.models import FetchRequest

logger = logging.getLogger(__name__)

_NETWORK_HINT = (
    "Network error: unable to reach the server. "
    "Check the URL and your internet connection."
)
_UNEXPECTED_HINT = "An unexpected error occurred while processing the request."


def validate_url(url: str) -> httpx.URL:
    """Parse `url`, requiring an absolute URL with a scheme and a host.

    Raises:
        ValueError: if the URL is malformed or relative.
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise ValueError(str(exc)) from exc
    if not parsed.scheme or not parsed.host:
        raise ValueError(f"'{url}' is not an absolute URL (expected scheme://host/...)")
    return parsed


def build_headers(request: FetchRequest) -> dict[str, str]:
    """Default client header, caller headers on top, JSON content type if needed."""
    headers = {"User-Agent": settings.USER_AGENT}
    headers.update(request.headers or {})

    if request.sends_body and not any(k.lower() == "content-type" for k in headers):
        headers["Content-Type"] = "application/json"
    return headers


def decode_body(response: httpx.Response) -> Any:
    """Decode JSON when the content type says so, otherwise return the text."""
    content_type = response.headers.get("content-type", "").lower()
    if "json" in content_type:
        return response.json()
    # text/* and unknown or missing content types are both read as text.
    return response.text


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def _status(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".rstrip()


def _failure_result(url: str, method: str, response: httpx.Response, body: Any) -> str:
    if isinstance(body, (dict, list)):
        body_text = json.dumps(body, indent=2, ensure_ascii=False)
    else:
        body_text = str(body)
    return "\n".join([
        "❌ Request failed",
        "",
        f"URL: {url}",
        f"Method: {method}",
        f"Status: {_status(response)}",
        "",
        "Response body:",
        body_text,
    ])


def _success_result(url: str, method: str, response: httpx.Response, body: Any) -> str:
    return "\n".join([
        "✅ Request successful",
        "",
        f"URL: {url}",
        f"Method: {method}",
        f"Status: {_status(response)}",
        "",
        format_response(body, url),
    ])


def _error_result(url: str, method: str, exc: Exception) -> str:
    hint = _NETWORK_HINT if isinstance(exc, httpx.TransportError) else _UNEXPECTED_HINT
    return "\n".join([
        "❌ Error fetching URL",
        "",
        f"URL: {url}",
        f"Method: {method}",
        f"Error: {_describe(exc)}",
        "",
        f"Details: {hint}",
    ])


async def _send(client: httpx.AsyncClient, request: FetchRequest, method: str) -> httpx.Response:
    return await client.request(
        method,
        request.url,
        headers=build_headers(request),
        content=request.body if request.sends_body else None,
    )


# =============================================================================
# PUBLIC API
# =============================================================================
async def fetch_url(
    request: FetchRequest,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Perform one HTTP request and return a formatted text result.

    Args:
        request: URL, method, optional headers and body.
        client: An existing AsyncClient to send through.  When omitted, a
                short-lived client is created with the configured timeout.

    Returns:
        A multi-line text result.  This function does not raise.
    """
    method = request.method.upper()

    try:
        validate_url(request.url)
    except ValueError as exc:
        logger.info("Rejected malformed URL %r: %s", request.url, exc)
        return "\n".join([
            "❌ Invalid URL",
            "",
            f"URL: {request.url}",
            f"Error: {exc}",
        ])

    if request.body is not None and not request.sends_body:
        logger.warning("Ignoring request body for %s %s", method, request.url)

    try:
        if client is not None:
            response = await _send(client, request, method)
        else:
            async with httpx.AsyncClient(
                timeout=settings.REQUEST_TIMEOUT, follow_redirects=True
            ) as own_client:
                response = await _send(own_client, request, method)
        body = decode_body(response)
    except Exception as exc:
        logger.warning("%s %s failed: %r", method, request.url, exc)
        return _error_result(request.url, method, exc)

    logger.debug("%s %s -> %s", method, request.url, _status(response))
    if not response.is_success:
        return _failure_result(request.url, method, response, body)
    return _success_result(request.url, method, response, body)
