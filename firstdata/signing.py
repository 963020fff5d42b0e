"""
firstdata/signing.py
--------------------

HMAC authentication of GGE4 requests (API v12 and later).

The gateway recomputes the SHA-1 of the body and the HMAC over the same
signing string; any byte of difference is rejected, so the payload signed
here must be the exact payload sent.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
from typing import Dict, Optional

from .models import SigningContext
from .utils import gge4_timestamp

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json; charset=UTF-8;"
FIRST_SIGNED_VERSION = "v12"


def requires_signature(api_version: str) -> bool:
    """True when ``api_version`` sorts at or after "v12".

    The comparison is on the raw strings, as the gateway's own libraries do
    it: "v9" and "v2" sort after "v12" and are signed, "v11" and "v100" are
    not.
    """
    return api_version >= FIRST_SIGNED_VERSION


def content_digest(payload: bytes) -> str:
    return hashlib.sha1(payload).hexdigest()


def signing_string(digest: str, timestamp: str, api_version: str) -> str:
    return "\n".join([
        "POST",
        CONTENT_TYPE,
        digest,
        timestamp,
        "/transaction/" + api_version,
    ])


def compute_signature(api_key_secret: str, message: str) -> str:
    mac = hmac.new((api_key_secret or "").encode("utf-8"), message.encode("utf-8"), hashlib.sha1)
    return base64.b64encode(mac.digest()).decode("ascii")


def make_context(payload: bytes, api_key_id: str, api_key_secret: str,
                 api_version: str, timestamp: Optional[str] = None) -> SigningContext:
    return SigningContext(
        api_key_id=api_key_id or "",
        api_key_secret=api_key_secret or "",
        api_version=api_version,
        timestamp=timestamp or gge4_timestamp(),
        payload=payload,
    )


def sign(context: SigningContext) -> Dict[str, str]:
    """Authentication headers for one request.

    A pure function of the context: identical payload, timestamp and keys
    always give identical headers. Missing keys are not checked here; the
    gateway answers them with a 401.
    """
    digest = content_digest(context.payload)
    signature = compute_signature(
        context.api_key_secret,
        signing_string(digest, context.timestamp, context.api_version),
    )
    logger.debug("Signed %d byte payload for /transaction/%s at %s",
                 len(context.payload), context.api_version, context.timestamp)
    return {
        "X-GGe4-Content-SHA1": digest,
        "X-GGe4-Date": context.timestamp,
        "Authorization": f"GGE4_API {context.api_key_id}:{signature}",
        "Content-Length": str(len(context.payload)),
    }
