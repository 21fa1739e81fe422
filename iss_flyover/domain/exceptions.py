from typing import Any


class APIException(Exception):
    """
    Base exception for all upstream API errors.
    """


class TransportError(APIException):
    """
    Raised when a request could not be sent or its response not received.
    Never retried - the original httpx error is kept as __cause__.
    """


class UpstreamStatusError(APIException):
    """
    Raised when an upstream service answers with a non-success HTTP status.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        coordinates: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.coordinates = coordinates


class UpstreamLogicalError(APIException):
    """
    Raised when the HTTP exchange succeeded but the response body reports failure.
    """

    def __init__(self, message: str, service_message: str | None, ip: str | None):
        super().__init__(message)
        self.service_message = service_message
        self.ip = ip


class InvalidResponseError(APIException):
    """
    Raised when an upstream response is not JSON or lacks a required field.
    """

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body
