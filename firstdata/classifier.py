"""
firstdata/classifier.py
-----------------------

Turns one HTTP exchange into a `GatewayResponse` with ``error_code`` and
``error_message`` set.

The gateway signals failure three independent ways: the HTTP status, the
bank network code (``bank_resp_code``) and its own code
(``exact_resp_code``). Any one of them vetoes an otherwise clean body.

Nothing in this module raises for response content.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

from .models import GatewayResponse
from .response_codes import (
    SUCCESS,
    UNMAPPED_CODE,
    UNMAPPED_MESSAGE,
    classification_of,
    get_response_code,
)
from .utils import as_int, extract_embedded_code, find_value

logger = logging.getLogger(__name__)

OK_STATUSES = (200, 201, 202)


def parse_body(raw_body: str) -> Dict[str, Any]:
    """Decode a JSON object; anything else (bad or too deeply nested JSON,
    list, scalar) gives {}."""
    if not raw_body:
        return {}
    try:
        tree = json.loads(raw_body)
    except (ValueError, RecursionError):
        return {}
    return tree if isinstance(tree, dict) else {}


def is_error(http_status: int, tree: Mapping[str, Any], error_code: int = 0) -> bool:
    if http_status not in OK_STATUSES:
        return True
    if not tree:
        return True
    if error_code > 0:
        return True

    bank_type = classification_of(find_value(tree, "bank_resp_code"))
    if bank_type and bank_type != SUCCESS:
        return True

    exact_code = as_int(find_value(tree, "exact_resp_code"))
    if exact_code is not None and exact_code > 0:
        return True

    return False


def _classify_unparsed(response: GatewayResponse) -> None:
    code = extract_embedded_code(response.raw_body)
    if code is None:
        response.error_code = response.http_status
        response.error_message = response.raw_body
        return

    entry = get_response_code(code)
    if entry is not None:
        # "(000) No Answer" must not read as a success
        response.error_code = code or UNMAPPED_CODE
        response.error_message = entry.name
    else:
        response.error_code = UNMAPPED_CODE
        response.error_message = UNMAPPED_MESSAGE


def classify(http_status: int, headers: Optional[Mapping[str, str]], raw_body: str,
             transport_error_code: int = 0, transport_error_message: str = "") -> GatewayResponse:
    """Build the outcome of one submission. First matching rule wins:

    1. transport failure: its own code and message
    2. empty or unparseable body: code embedded as "(NNN)" in the text, else
       the HTTP status and the raw text
    3. error signalled by status, bank code or exact code: 42 and the bank
       code's name
    4. clean success: 0 and ""
    """
    response = GatewayResponse(
        http_status=http_status,
        headers=dict(headers or {}),
        raw_body=raw_body or "",
        parsed=parse_body(raw_body),
        transport_error_code=transport_error_code,
    )

    if transport_error_code:
        response.error_code = transport_error_code
        response.error_message = transport_error_message
    elif not response.parsed:
        logger.warning("Gateway returned a non-JSON body (HTTP %s)", http_status)
        _classify_unparsed(response)
    elif is_error(http_status, response.parsed, transport_error_code):
        entry = get_response_code(find_value(response.parsed, "bank_resp_code"))
        response.error_code = UNMAPPED_CODE
        response.error_message = entry.name if entry else UNMAPPED_MESSAGE
    else:
        response.error_code = 0
        response.error_message = ""

    logger.info("Transaction classified: code=%s message=%r",
                response.error_code, response.error_message)
    return response
