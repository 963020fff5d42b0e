"""
firstdata/models.py
-------------------

Value types shared by the request and response halves of the client.

* `TransactionRequest` accumulates the caller's fields and renders the
  canonical JSON body sent to the gateway.
* `GatewayResponse` holds everything learnt from one submission.

Nothing here validates card data: the gateway does.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from .exceptions import RequestBuildError


class TransactionType(str, Enum):
    PURCHASE = "00"
    PRE_AUTH = "01"
    PRE_AUTH_COMPLETE = "02"
    FORCED_POST = "03"
    REFUND = "04"
    PRE_AUTH_ONLY = "05"
    PAYPAL_ORDER = "07"
    VOID = "13"
    TAGGED_PRE_AUTH_COMPLETE = "32"
    TAGGED_VOID = "33"
    TAGGED_REFUND = "34"
    CASH_OUT = "83"
    ACTIVATION = "85"
    BALANCE_INQUIRY = "86"
    RELOAD = "88"
    DEACTIVATION = "89"


class Field(str, Enum):
    """Request fields the client knows about. Any other key is still accepted."""

    AMOUNT = "amount"
    CC_NUMBER = "cc_number"
    CC_EXPIRY = "cc_expiry"
    CARDHOLDER_NAME = "cardholder_name"
    CREDIT_CARD_TYPE = "credit_card_type"
    TRACK1 = "track1"
    TRACK2 = "track2"
    CC_VERIFICATION_STR1 = "cc_verification_str1"
    CC_VERIFICATION_STR2 = "cc_verification_str2"
    CVD_PRESENCE_IND = "cvd_presence_ind"
    CAVV = "cavv"
    ZIP_CODE = "zip_code"
    CURRENCY_CODE = "currency_code"
    CLIENT_IP = "client_ip"
    CLIENT_EMAIL = "client_email"
    REFERENCE_NO = "reference_no"
    TRANSACTION_TAG = "transaction_tag"
    CUSTOMER_REF = "customer_ref"
    TRANSARMOR_TOKEN = "transarmor_token"
    AUTHORIZATION_NUM = "authorization_num"
    ADDRESS = "address"


@dataclass
class Address:
    """Structured billing address (``address`` field, API v14 and later)."""

    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country_code: Optional[str] = None
    phone_number: Optional[str] = None
    phone_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {k: v for k, v in asdict(self).items()
                if v is not None and not k.startswith("phone_")}
        if self.phone_number is not None:
            data["phone"] = {"number": self.phone_number}
            if self.phone_type is not None:
                data["phone"]["type"] = self.phone_type
        return data


FieldValue = Union[str, int, float, Address, Mapping[str, Any]]


@dataclass(frozen=True)
class Credentials:
    gateway_id: str
    password: str


def _field_name(key) -> str:
    return key.value if isinstance(key, Enum) else key


def _encode_value(obj):
    if isinstance(obj, Address):
        return obj.to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class TransactionRequest:
    """Mutable bag of request fields, reused across transactions."""

    def __init__(self):
        self._fields: Dict[str, FieldValue] = {}

    def set_field(self, key, value: Optional[FieldValue] = None) -> "TransactionRequest":
        # A mapping with no value is a bulk merge; anything else is one pair
        if isinstance(key, Mapping) and value is None:
            for k, v in key.items():
                self._fields[_field_name(k)] = v
        else:
            self._fields[_field_name(key)] = value
        return self

    def get(self, key) -> Optional[FieldValue]:
        return self._fields.get(_field_name(key))

    @property
    def fields(self) -> Dict[str, FieldValue]:
        return dict(self._fields)

    def clear(self) -> None:
        self._fields = {}

    def __len__(self) -> int:
        return len(self._fields)

    def build(self, credentials: Credentials, transaction_type) -> bytes:
        """Canonical JSON body: the fields plus gateway id, password and type.

        Keys keep their insertion order, so the same field set always gives
        the same bytes (the signature is computed over them).
        """
        body = dict(self._fields)
        body.update({
            "gateway_id": credentials.gateway_id,
            "password": credentials.password,
            "transaction_type": _field_name(transaction_type),
        })
        try:
            return json.dumps(body, separators=(",", ":"), default=_encode_value).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise RequestBuildError(f"Cannot serialize transaction request: {exc}") from exc


@dataclass(frozen=True)
class SigningContext:
    api_key_id: str
    api_key_secret: str
    api_version: str
    timestamp: str
    payload: bytes


@dataclass
class GatewayResponse:
    http_status: int = 0
    headers: Dict[str, str] = field(default_factory=dict)
    raw_body: str = ""
    parsed: Dict[str, Any] = field(default_factory=dict)
    error_code: int = 0
    error_message: str = ""
    transport_error_code: int = 0
