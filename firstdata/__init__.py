"""Client for the First Data Global Gateway e4 transaction API."""

import logging

from .config import Config
from .exceptions import PaymentError, RequestBuildError, TransportError
from .models import Address, Field, GatewayResponse, TransactionRequest, TransactionType
from .payment_service import GatewayClient
from .response_codes import BANK_RESPONSE_CODES, ResponseCode, classification_of, get_response_code

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def create_client(settings=None, **overrides):
    """Return a `GatewayClient` configured from ``settings`` (or the environment).

    ``overrides`` replace individual configuration options, e.g.
    ``create_client(test_mode=True, api_version="v14")``.
    """
    settings = settings or Config.from_env()
    if overrides:
        settings = Config(**{**_as_dict(settings), **{k.upper(): v for k, v in overrides.items()}})
    return GatewayClient(settings=settings)


def _as_dict(settings):
    return {name: getattr(settings, name) for name in dir(Config) if name.isupper()}


__all__ = [
    "Address",
    "BANK_RESPONSE_CODES",
    "Config",
    "Field",
    "GatewayClient",
    "GatewayResponse",
    "PaymentError",
    "RequestBuildError",
    "ResponseCode",
    "TransactionRequest",
    "TransactionType",
    "TransportError",
    "classification_of",
    "create_client",
    "get_response_code",
]
