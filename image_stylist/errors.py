"""Typed failures raised by the stylist client. All derive from StylistError."""
from typing import Optional

from image_stylist.constants import (
    MSG_ERR_CONTENT_FIELD,
    MSG_ERR_MISSING_KEY,
    MSG_ERR_NO_IMAGES_FETCHED,
    MSG_ERR_TRANSPORT,
)


class StylistError(Exception):
    """Base class for every error this library raises."""


class InvalidInputError(StylistError, ValueError):
    """Caller input rejected before any network activity."""


class NoImagesFetchedError(InvalidInputError):
    """The local-model path could not fetch a single image."""

    def __init__(self, image_urls: list[str]) -> None:
        super().__init__(MSG_ERR_NO_IMAGES_FETCHED % len(image_urls))
        self.image_urls = image_urls


class TransportError(StylistError):
    """Connection failure, timeout or non-2xx status. Chained to the httpx error."""

    def __init__(self, reason: str, status_code: Optional[int] = None) -> None:
        super().__init__(MSG_ERR_TRANSPORT % reason)
        self.status_code = status_code


# ── upstream contract violations ──────────────────────────────────────────────


class ResponseError(StylistError):
    """The provider or the model returned data that breaks the expected contract."""


class MalformedEnvelopeError(ResponseError):
    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw


class MissingContentFieldError(ResponseError):
    def __init__(self, provider: str) -> None:
        super().__init__(MSG_ERR_CONTENT_FIELD % provider)
        self.provider = provider


class MalformedPayloadError(ResponseError):
    def __init__(self, message: str, content: str) -> None:
        super().__init__(message)
        self.content = content


class MissingResultKeyError(ResponseError):
    def __init__(self, key: str) -> None:
        super().__init__(MSG_ERR_MISSING_KEY % key)
        self.key = key
