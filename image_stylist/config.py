from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from image_stylist.constants import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_LANGUAGE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MODEL,
    REQUEST_TIMEOUT_SECONDS,
)
from image_stylist.providers.provider import Provider


@dataclass(frozen=True)
class Config:
    api_key: Optional[str]
    api_endpoint: str
    model: str
    provider: Provider
    timeout: float
    language: str
    log_level: str
    style_profile: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("STYLIST_API_KEY") or os.getenv("OPENAI_API_KEY") or None
        endpoint = os.getenv("STYLIST_API_ENDPOINT") or DEFAULT_API_ENDPOINT
        model = os.getenv("STYLIST_MODEL") or DEFAULT_MODEL
        raw_provider = os.getenv("STYLIST_PROVIDER") or None
        raw_timeout = os.getenv("STYLIST_TIMEOUT") or str(REQUEST_TIMEOUT_SECONDS)
        language = os.getenv("STYLIST_LANGUAGE") or DEFAULT_LANGUAGE
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
        style_profile = os.getenv("STYLIST_STYLE_PROFILE") or None

        return cls._validate(
            api_key=api_key,
            api_endpoint=endpoint,
            model=model,
            raw_provider=raw_provider,
            raw_timeout=raw_timeout,
            language=language,
            log_level=log_level,
            style_profile=style_profile,
        )

    @staticmethod
    def _validate(
        api_key: Optional[str],
        api_endpoint: str,
        model: str,
        raw_provider: Optional[str],
        raw_timeout: str,
        language: str,
        log_level: str,
        style_profile: Optional[str],
    ) -> "Config":
        match raw_provider:
            case None:
                provider = Provider.for_endpoint(api_endpoint)
            case str() as p if p.lower() in {m.value for m in Provider}:
                provider = Provider(p.lower())
            case _:
                raise ValueError(f"STYLIST_PROVIDER must be one of: cloud_chat, local_model (got {raw_provider!r})")

        match (provider, api_key):
            case (Provider.CLOUD_CHAT, None | ""):
                raise ValueError("STYLIST_API_KEY (or OPENAI_API_KEY) must be set in .env")
            case _:
                pass

        bad_timeout = f"STYLIST_TIMEOUT must be a positive number of seconds (got {raw_timeout!r})"
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(bad_timeout) from None
        match timeout:
            case t if t > 0:
                pass
            case _:
                raise ValueError(bad_timeout)

        return Config(
            api_key=api_key,
            api_endpoint=api_endpoint,
            model=model,
            provider=provider,
            timeout=timeout,
            language=language,
            log_level=log_level,
            style_profile=style_profile,
        )
