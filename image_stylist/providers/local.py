"""LocalModelAdapter — Ollama-style local model shape with inline base64 images."""
import base64
import logging
from typing import Optional

import httpx

from image_stylist.constants import LOCAL_FORMAT, MSG_IMAGE_SKIPPED
from image_stylist.errors import NoImagesFetchedError
from image_stylist.providers.client import ProviderAdapter
from image_stylist.providers.provider import Provider

logger = logging.getLogger(__name__)


async def fetch_image_b64(http: httpx.AsyncClient, url: str) -> Optional[str]:
    """Download one image and return it base64-encoded, or None if it can't be fetched."""
    try:
        response = await http.get(url)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(MSG_IMAGE_SKIPPED, url, e)
        return None
    return base64.standard_b64encode(response.content).decode()


class LocalModelAdapter(ProviderAdapter):
    provider = Provider.LOCAL_MODEL

    async def build_payload(
        self,
        image_urls: list[str],
        prompt: str,
        model: str,
        http: httpx.AsyncClient,
    ) -> dict:
        # One fetch at a time, in input order.
        fetched = [await fetch_image_b64(http, url) for url in image_urls]
        images = [data for data in fetched if data is not None]
        if not images:
            raise NoImagesFetchedError(list(image_urls))
        return {
            "model": model,
            "prompt": prompt,
            "images": images,
            "stream": False,
            "format": LOCAL_FORMAT,
        }
