class PaymentError(Exception):
    """Base exception for every error raised by the firstdata package."""


class TransportError(PaymentError):
    """The HTTP exchange with the gateway did not complete.

    ``code`` follows the curl error numbers the gateway documentation refers
    to (7 connect failure, 28 timeout, 35 TLS handshake, 1 anything else).
    """

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class RequestBuildError(PaymentError):
    """The outgoing transaction could not be serialized to JSON."""
