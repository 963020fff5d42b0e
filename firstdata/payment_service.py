"""
firstdata/payment_service.py
----------------------------

Access layer for the First Data Global Gateway e4 transaction API.

• One `GatewayClient` per in-flight transaction: it holds the fields being
  accumulated and the last response, and is not safe to share across threads.
• `process()` never raises for a declined or rejected card. The outcome is
  read back with `is_success()`, `error_code` and `error_message`.
• Fields are cleared once a submission completes, whatever its outcome.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from . import transport
from .classifier import classify, is_error
from .config import LIVE_API_URL, TEST_API_URL, Config, config as default_config
from .exceptions import TransportError
from .models import (
    Credentials,
    Field,
    GatewayResponse,
    TransactionRequest,
    TransactionType,
)
from .response_codes import get_response_code
from .signing import CONTENT_TYPE, make_context, requires_signature, sign
from .utils import as_int, as_str, find_value

logger = logging.getLogger(__name__)

BASE_HEADERS = {
    "Content-Type": CONTENT_TYPE,
    "Accept": "application/json",
}


class GatewayClient:
    """Builds, signs, sends and interprets GGE4 transactions.

    Credentials default to the values of ``settings`` (the environment-backed
    `firstdata.config.config` when omitted); explicit arguments win.
    """

    def __init__(self, username: Optional[str] = None, password: Optional[str] = None,
                 hmac_id: Optional[str] = None, hmac_key: Optional[str] = None,
                 test_mode: Optional[bool] = None, settings: Optional[Config] = None):
        settings = settings or default_config
        self.username = settings.GATEWAY_ID if username is None else username
        self.password = settings.PASSWORD if password is None else password
        self.api_id = settings.KEY_ID if hmac_id is None else hmac_id
        self.api_key = settings.HMAC_KEY if hmac_key is None else hmac_key
        self.api_version = settings.API_VERSION
        self.test_mode = settings.TEST_MODE if test_mode is None else bool(test_mode)
        self.timeout = (settings.CONNECT_TIMEOUT, settings.TIMEOUT)
        self.transaction_type = TransactionType.PURCHASE.value
        self.request = TransactionRequest()
        self.response = GatewayResponse()

    # ------------------------------------------------------------------ #
    #  Credentials, version and endpoint
    # ------------------------------------------------------------------ #
    def set_username(self, username: str) -> "GatewayClient":
        self.username = username
        return self

    def set_password(self, password: str) -> "GatewayClient":
        self.password = password
        return self

    def set_api_version(self, version: str) -> "GatewayClient":
        self.api_version = version
        return self

    def set_api_id(self, api_id: str) -> "GatewayClient":
        self.api_id = api_id
        return self

    def set_api_key(self, key: str) -> "GatewayClient":
        self.api_key = key
        return self

    def set_test_mode(self, value: bool) -> "GatewayClient":
        self.test_mode = bool(value)
        return self

    def set_transaction_type(self, transaction_type) -> "GatewayClient":
        self.transaction_type = getattr(transaction_type, "value", transaction_type)
        return self

    def get_transaction_type(self) -> str:
        return self.transaction_type

    @property
    def url(self) -> str:
        return (TEST_API_URL if self.test_mode else LIVE_API_URL) + self.api_version

    # ------------------------------------------------------------------ #
    #  Request fields
    # ------------------------------------------------------------------ #
    def get_post_data(self) -> Dict[str, Any]:
        return self.request.fields

    def set_post_data(self, key, value=None) -> "GatewayClient":
        self.request.set_field(key, value)
        return self

    def set_credit_card_number(self, number) -> "GatewayClient":
        return self.set_post_data(Field.CC_NUMBER, str(number))

    def set_credit_card_type(self, card_type) -> "GatewayClient":
        return self.set_post_data(Field.CREDIT_CARD_TYPE, card_type)

    # Track data as read by a USB magnetic stripe swiper
    def set_track1(self, track: str) -> "GatewayClient":
        return self.set_post_data(Field.TRACK1, track)

    def set_track2(self, track: str) -> "GatewayClient":
        return self.set_post_data(Field.TRACK2, track)

    def set_credit_card_name(self, name: str) -> "GatewayClient":
        return self.set_post_data(Field.CARDHOLDER_NAME, name)

    def set_credit_card_expiration(self, date) -> "GatewayClient":
        """Expiry as MMYY."""
        return self.set_post_data(Field.CC_EXPIRY, date)

    def set_amount(self, amount) -> "GatewayClient":
        return self.set_post_data(Field.AMOUNT, amount)

    def set_transarmor_token(self, token: str) -> "GatewayClient":
        return self.set_post_data(Field.TRANSARMOR_TOKEN, token)

    def set_auth_number(self, number: str) -> "GatewayClient":
        return self.set_post_data(Field.AUTHORIZATION_NUM, number)

    def set_credit_card_address(self, address: str) -> "GatewayClient":
        """Verification string: ``Street|Zip/Postal|City|State/Prov|Country``."""
        return self.set_post_data(Field.CC_VERIFICATION_STR1, address)

    def set_credit_card_address_new(self, address) -> "GatewayClient":
        """Structured address replacing ``cc_verification_str1``.

        Accepts an `Address` or a plain mapping with the gateway's keys.
        """
        return self.set_post_data(Field.ADDRESS, address)

    def set_credit_card_verification(self, cvv) -> "GatewayClient":
        """CVV2 / CVD value; also flags it as present."""
        self.set_post_data(Field.CC_VERIFICATION_STR2, cvv)
        return self.set_post_data(Field.CVD_PRESENCE_IND, 1)

    def set_credit_card_cavv(self, cavv) -> "GatewayClient":
        return self.set_post_data(Field.CAVV, cavv)

    def set_credit_card_zip_code(self, zip_code) -> "GatewayClient":
        return self.set_post_data(Field.ZIP_CODE, zip_code)

    def set_currency(self, code: str) -> "GatewayClient":
        return self.set_post_data(Field.CURRENCY_CODE, code)

    def set_client_ip(self, ip: str) -> "GatewayClient":
        return self.set_post_data(Field.CLIENT_IP, ip)

    def set_client_email(self, email: str) -> "GatewayClient":
        return self.set_post_data(Field.CLIENT_EMAIL, email)

    def set_reference_number(self, number) -> "GatewayClient":
        return self.set_post_data(Field.REFERENCE_NO, number)

    def set_transaction_tag(self, number) -> "GatewayClient":
        return self.set_post_data(Field.TRANSACTION_TAG, number)

    def set_customer_reference_number(self, number) -> "GatewayClient":
        return self.set_post_data(Field.CUSTOMER_REF, number)

    # ------------------------------------------------------------------ #
    #  Submission
    # ------------------------------------------------------------------ #
    def build_headers(self, payload: bytes) -> Dict[str, str]:
        headers = dict(BASE_HEADERS)
        if requires_signature(self.api_version):
            context = make_context(payload, self.api_id, self.api_key, self.api_version)
            headers.update(sign(context))
        return headers

    def process(self) -> str:
        """
        Send the accumulated fields as one transaction and classify the answer.

        Returns
        -------
        str
            The raw response body ("" on transport failure).

        Raises
        ------
        RequestBuildError
            If the fields cannot be serialized; nothing is sent.
        """
        self.response = GatewayResponse()
        try:
            payload = self.request.build(
                Credentials(self.username, self.password), self.transaction_type
            )
            headers = self.build_headers(payload)
            logger.debug("POST %s (%s)", self.url, ", ".join(sorted(headers)))

            try:
                resp = transport.submit(self.url, headers, payload, timeout=self.timeout)
            except TransportError as exc:
                self.response = classify(0, {}, "", exc.code, exc.message)
            else:
                self.response = classify(resp.status, resp.headers, resp.body)
        finally:
            self.request.clear()

        return self.response.raw_body

    # ------------------------------------------------------------------ #
    #  Outcome
    # ------------------------------------------------------------------ #
    def is_error(self) -> bool:
        return is_error(self.response.http_status, self.response.parsed, self.response.error_code)

    def is_success(self) -> bool:
        return not self.is_error()

    @property
    def error_code(self) -> int:
        return self.response.error_code

    @property
    def error_message(self) -> str:
        return self.response.error_message

    def get_error_code(self) -> int:
        return self.error_code

    def get_error_message(self) -> str:
        return self.error_message

    def get_response(self) -> str:
        return self.response.raw_body

    def get_array_response(self) -> Dict[str, Any]:
        return self.response.parsed

    def _value(self, key: str):
        return find_value(self.response.parsed, key)

    def is_approved(self) -> Optional[int]:
        return as_int(self._value("transaction_approved"))

    def get_transaction_tag(self) -> Optional[int]:
        return as_int(self._value("transaction_tag"))

    def get_transaction_record(self) -> Optional[str]:
        """Customer transaction record (printable receipt)."""
        return as_str(self._value("ctr"))

    def get_auth_number(self) -> Optional[str]:
        return as_str(self._value("authorization_num"))

    def get_transarmor_token(self) -> Optional[str]:
        return as_str(self._value("transarmor_token"))

    def get_bank_response_code(self) -> Optional[int]:
        return as_int(self._value("bank_resp_code"))

    def get_bank_response_message(self) -> Optional[str]:
        return as_str(self._value("bank_message"))

    def get_exact_response_code(self) -> Optional[int]:
        return as_int(self._value("exact_resp_code"))

    def get_exact_response_message(self) -> Optional[str]:
        return as_str(self._value("exact_message"))

    def get_avs(self) -> Optional[str]:
        """Address Verification System result letter."""
        return as_str(self._value("avs"))

    def get_cavv_response(self) -> Optional[str]:
        return as_str(self._value("cavv"))

    def get_bank_response_comments(self) -> Optional[str]:
        entry = get_response_code(self.get_bank_response_code())
        return entry.comments if entry else None

    def get_bank_response_type(self) -> Optional[str]:
        """S (success), R (reject) or D (decline); None for unknown codes."""
        entry = get_response_code(self.get_bank_response_code())
        return entry.response if entry else None
