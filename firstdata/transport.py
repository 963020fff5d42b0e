"""
firstdata/transport.py
----------------------

Single HTTP POST to the gateway, through ``requests``.

• No retry, no redirect following.
• Any failure before a status line is received raises `TransportError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple

import requests

from .exceptions import TransportError

logger = logging.getLogger(__name__)

# curl error numbers, kept for continuity with the gateway's documentation
CURLE_UNKNOWN = 1
CURLE_COULDNT_CONNECT = 7
CURLE_OPERATION_TIMEDOUT = 28
CURLE_SSL_CONNECT_ERROR = 35


@dataclass
class TransportResponse:
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""


def _error_code(exc: requests.RequestException) -> int:
    # SSLError subclasses ConnectionError, ConnectTimeout subclasses both
    if isinstance(exc, requests.exceptions.Timeout):
        return CURLE_OPERATION_TIMEDOUT
    if isinstance(exc, requests.exceptions.SSLError):
        return CURLE_SSL_CONNECT_ERROR
    if isinstance(exc, requests.exceptions.ConnectionError):
        return CURLE_COULDNT_CONNECT
    return CURLE_UNKNOWN


def submit(url: str, headers: Dict[str, str], body: bytes,
           timeout: Tuple[float, float] = (30, 60)) -> TransportResponse:
    """POST ``body`` to ``url`` and return status, headers and text.

    Parameters
    ----------
    timeout : (connect, read) seconds, as understood by ``requests``.

    Raises
    ------
    TransportError
        Connection refused, DNS failure, TLS failure or timeout.
    """
    try:
        resp = requests.post(url, data=body, headers=headers,
                             timeout=timeout, allow_redirects=False)
    except requests.RequestException as exc:
        code = _error_code(exc)
        logger.warning("Gateway request to %s failed (%d): %s", url, code, exc)
        raise TransportError(code, str(exc)) from exc

    return TransportResponse(
        status=resp.status_code,
        headers=dict(resp.headers),
        body=resp.text,
    )
