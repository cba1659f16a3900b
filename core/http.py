"""
HTTP Helpers

Thin wrapper around requests that turns transport failures and non-2xx
responses into the pipeline error of the calling phase. No retries: every
failure is surfaced to the caller immediately.
"""

from typing import Any

import requests

from core.errors import PipelineError
from core.logging import get_logger


def classify_response(
    response: requests.Response,
    error_cls: type[PipelineError],
) -> None:
    """
    Raise error_cls unless the response has a 2xx status.

    Args:
        response: The HTTP response to classify
        error_cls: Pipeline error to raise for the calling phase

    Raises:
        PipelineError subclass carrying the status code and body
    """
    if 200 <= response.status_code < 300:
        return

    raise error_cls(
        f"Unexpected HTTP status: {response.status_code} - {response.text[:200]}",
        status_code=response.status_code,
        body=response.text,
    )


def send_request(
    method: str,
    url: str,
    error_cls: type[PipelineError],
    timeout: int = 30,
    **kwargs: Any,
) -> requests.Response:
    """
    Make a single HTTP request.

    Args:
        method: HTTP method (GET, POST)
        url: Request URL
        error_cls: Pipeline error raised on any failure
        timeout: Request timeout in seconds
        **kwargs: Additional arguments passed to requests

    Returns:
        The HTTP response (always 2xx)

    Raises:
        error_cls: On timeouts, connection errors, or non-2xx responses
    """
    log = get_logger("http")

    try:
        log.debug("http_request", method=method, url=url)
        response = requests.request(method, url, timeout=timeout, **kwargs)
    except requests.exceptions.Timeout as e:
        log.warning("http_timeout", method=method, url=url)
        raise error_cls(f"Request timed out: {url}") from e
    except requests.exceptions.ConnectionError as e:
        log.warning("http_connection_error", method=method, url=url, error=str(e))
        raise error_cls(f"Connection failed: {url}") from e
    except requests.exceptions.RequestException as e:
        log.error("http_error", method=method, url=url, error=str(e))
        raise error_cls(f"Request failed: {url} - {e}") from e

    log.debug("http_response", method=method, url=url, status=response.status_code)
    classify_response(response, error_cls)
    return response


__all__ = [
    "classify_response",
    "send_request",
]
