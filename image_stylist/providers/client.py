"""ProviderAdapter — abstract base for provider-specific request shapes."""
from abc import ABC, abstractmethod

import httpx

from image_stylist.constants import HEADER_ACCEPT, HEADER_CONTENT_TYPE, MIME_JSON
from image_stylist.providers.provider import Provider


class ProviderAdapter(ABC):
    provider: Provider

    def headers(self, api_key: str) -> dict[str, str]:
        return {HEADER_ACCEPT: MIME_JSON, HEADER_CONTENT_TYPE: MIME_JSON}

    @abstractmethod
    async def build_payload(
        self,
        image_urls: list[str],
        prompt: str,
        model: str,
        http: httpx.AsyncClient,
    ) -> dict:
        """Assemble the JSON request body for this provider."""
        ...
