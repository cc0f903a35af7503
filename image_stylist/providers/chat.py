"""ChatCompletionAdapter — OpenAI-compatible cloud chat-completion shape."""
import httpx

from image_stylist.constants import (
    BEARER_PREFIX,
    CHAT_MAX_TOKENS,
    CHAT_RESPONSE_FORMAT,
    CHAT_ROLE_USER,
    HEADER_AUTHORIZATION,
    PART_IMAGE_URL,
    PART_TEXT,
)
from image_stylist.providers.client import ProviderAdapter
from image_stylist.providers.provider import Provider


def _image_part(url: str) -> dict:
    return {"type": PART_IMAGE_URL, "image_url": {"url": url}}


class ChatCompletionAdapter(ProviderAdapter):
    provider = Provider.CLOUD_CHAT

    def headers(self, api_key: str) -> dict[str, str]:
        return {**super().headers(api_key), HEADER_AUTHORIZATION: BEARER_PREFIX + api_key}

    async def build_payload(
        self,
        image_urls: list[str],
        prompt: str,
        model: str,
        http: httpx.AsyncClient,
    ) -> dict:
        # Images go by reference; the provider fetches them itself.
        content = [{"type": PART_TEXT, "text": prompt}, *map(_image_part, image_urls)]
        return {
            "model": model,
            "response_format": dict(CHAT_RESPONSE_FORMAT),
            "messages": [{"role": CHAT_ROLE_USER, "content": content}],
            "max_tokens": CHAT_MAX_TOKENS,
        }
