"""Request builder — validates input and dispatches to the provider's payload shape."""
import logging
from collections.abc import Sequence

import httpx

from image_stylist.constants import (
    MSG_BUILDING_PAYLOAD,
    MSG_ERR_IMAGES_NOT_SEQUENCE,
    MSG_ERR_NO_IMAGES,
    MSG_ERR_UNKNOWN_PROVIDER,
)
from image_stylist.errors import InvalidInputError
from image_stylist.prompt import build_prompt
from image_stylist.providers.chat import ChatCompletionAdapter
from image_stylist.providers.client import ProviderAdapter
from image_stylist.providers.local import LocalModelAdapter
from image_stylist.providers.provider import Provider

logger = logging.getLogger(__name__)


def adapter_for(provider: Provider) -> ProviderAdapter:
    match provider:
        case Provider.LOCAL_MODEL:
            return LocalModelAdapter()
        case Provider.CLOUD_CHAT:
            return ChatCompletionAdapter()
        case _:
            raise InvalidInputError(MSG_ERR_UNKNOWN_PROVIDER % (provider,))


def validate_images(images: Sequence[str]) -> list[str]:
    """Return the image URLs as a list, raising InvalidInputError when there are none."""
    if isinstance(images, (str, bytes)):
        raise InvalidInputError(MSG_ERR_IMAGES_NOT_SEQUENCE)
    match list(images):
        case []:
            raise InvalidInputError(MSG_ERR_NO_IMAGES)
        case urls:
            return urls


async def build(
    images: Sequence[str],
    style_profile: str,
    language: str,
    model: str,
    provider: Provider,
    http: httpx.AsyncClient,
) -> dict:
    """Build the provider-specific request body.

    Raises InvalidInputError for an empty image list before touching ``http``.
    The local-model path fetches every image through ``http`` and raises
    NoImagesFetchedError when none of them could be downloaded.
    """
    urls = validate_images(images)
    adapter = adapter_for(provider)
    logger.debug(MSG_BUILDING_PAYLOAD, provider.value, len(urls))
    return await adapter.build_payload(urls, build_prompt(style_profile, language), model, http)
