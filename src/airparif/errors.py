"""Exceptions raised while querying AirParif and decoding its responses."""

from __future__ import annotations


class AirparifError(RuntimeError):
    """Base class for every failure surfaced by the client."""


class RequestError(AirparifError):
    """Raised when the HTTP transport itself fails (DNS, connection, timeout)."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"Error calling HTTP API {url}: {cause}")
        self.url = url
        self.cause = cause


class JsonError(AirparifError):
    """Raised when a response body is not well-formed JSON."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Error parsing JSON response: {cause}")
        self.cause = cause


class DateParseError(AirparifError):
    """Raised when an absolute ``dd/mm/yyyy`` date cannot be parsed."""

    def __init__(self, value: str, cause: BaseException) -> None:
        super().__init__(f"Error parsing date {value!r}: {cause}")
        self.value = value
        self.cause = cause


class UnknownEnumValue(AirparifError):
    """Raised when a token does not belong to an enumeration's table."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Error parsing enum value: unexpected value {token!r}")
        self.token = token


class WrongType(AirparifError):
    """Raised when a JSON value is present but has the wrong type."""

    def __init__(self, expected: str, json: str) -> None:
        super().__init__(f"Unexpected type value in JSON: expected {expected} but got {json}")
        self.expected = expected
        self.json = json


class UnexpectedDate(AirparifError):
    """Raised when a relative-day token is not ``hier``, ``jour`` or ``demain``."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Wrong date: expected one of 'hier', 'jour', 'demain' but got {value}")
        self.value = value


class CallError(AirparifError):
    """Raised when the service answers with a non-2xx status."""

    def __init__(self, url: str, body: str, status: int) -> None:
        super().__init__(f"Unexpected HTTP response: url={url}, status={status}, body={body!r}")
        self.url = url
        self.body = body
        self.status = status


class MissingField(AirparifError):
    """Raised when a required key is absent from a JSON object."""

    def __init__(self, key: str, json: str) -> None:
        super().__init__(f"Missing key {key} in {json}")
        self.key = key
        self.json = json


__all__ = [
    "AirparifError",
    "CallError",
    "DateParseError",
    "JsonError",
    "MissingField",
    "RequestError",
    "UnexpectedDate",
    "UnknownEnumValue",
    "WrongType",
]
