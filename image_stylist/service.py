"""ImageStylistService — single entry point: build → one POST → interpret."""
import logging
import time
from collections.abc import Sequence
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from image_stylist.config import Config
from image_stylist.constants import (
    DEFAULT_LANGUAGE,
    MSG_ERR_NO_API_KEY,
    MSG_RECEIVED,
    MSG_SENDING,
    MSG_TRANSPORT_FAILED,
    REQUEST_TIMEOUT_SECONDS,
)
from image_stylist.errors import InvalidInputError, TransportError
from image_stylist.interpreter import interpret
from image_stylist.providers.provider import Provider
from image_stylist.request_builder import adapter_for, build, validate_images
from image_stylist.result import StyleAnalysisResult

logger = logging.getLogger(__name__)


def _status_code(err: Exception) -> Optional[int]:
    match err:
        case httpx.HTTPStatusError():
            return err.response.status_code
        case _:
            return None


class ImageStylistService:
    """Asks a multimodal model whether a product fits a user's style.

    Holds only immutable configuration, so one instance can serve any number
    of independent calls. Pass ``http`` to reuse a caller-owned
    ``httpx.AsyncClient``; it is never closed here. Without it a client is
    opened and closed inside each call.
    """

    def __init__(
        self,
        api_key: str,
        api_endpoint: str,
        model: str,
        provider: Optional[Provider] = None,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._provider = provider or Provider.for_endpoint(api_endpoint)
        if self._provider is Provider.CLOUD_CHAT and not api_key:
            raise InvalidInputError(MSG_ERR_NO_API_KEY)
        self._api_key = api_key
        self._api_endpoint = api_endpoint
        self._model = model
        self._http = http
        self._timeout = timeout

    @classmethod
    def from_config(
        cls, config: Config, http: Optional[httpx.AsyncClient] = None
    ) -> "ImageStylistService":
        return cls(
            api_key=config.api_key or "",
            api_endpoint=config.api_endpoint,
            model=config.model,
            provider=config.provider,
            http=http,
            timeout=config.timeout,
        )

    @property
    def provider(self) -> Provider:
        return self._provider

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http is not None:
            yield self._http
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client

    async def get_style_analysis(
        self,
        image_urls: Sequence[str],
        style_profile: str,
        language: str = DEFAULT_LANGUAGE,
    ) -> StyleAnalysisResult:
        """Analyze one product shown in ``image_urls`` against ``style_profile``.

        Raises InvalidInputError before any I/O when ``image_urls`` is empty,
        TransportError when the POST fails, and a ResponseError subclass when
        the reply breaks the expected schema. Nothing is retried.
        """
        urls = validate_images(image_urls)
        async with self._client() as http:
            payload = await build(urls, style_profile, language, self._model, self._provider, http)
            body = await self._send(http, payload)
        return interpret(body, self._provider)

    async def _send(self, http: httpx.AsyncClient, payload: dict) -> bytes:
        headers = adapter_for(self._provider).headers(self._api_key)
        logger.info(MSG_SENDING, self._api_endpoint, self._provider.value)
        start = time.monotonic()
        try:
            response = await http.post(
                self._api_endpoint,
                headers=headers,
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(MSG_TRANSPORT_FAILED, time.monotonic() - start, e)
            raise TransportError(str(e), status_code=_status_code(e)) from e
        logger.info(MSG_RECEIVED, time.monotonic() - start, len(response.content))
        return response.content
