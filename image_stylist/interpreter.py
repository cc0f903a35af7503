"""Response interpreter — two independent JSON decode stages, then schema checks.

The envelope is the provider's own JSON. Its message content is a string that
holds the model's answer as JSON text, so it is decoded a second time. Keeping
the stages apart lets callers tell a broken provider API (MalformedEnvelopeError,
MissingContentFieldError) from a misbehaving model (MalformedPayloadError,
MissingResultKeyError).
"""
import json
import logging
from typing import Any

from image_stylist.constants import (
    FALSE_STRINGS,
    KEY_IS_STYLE_MATCH,
    KEY_OBJECTIVE_DESCRIPTION,
    KEY_OCCASION_ANALYSIS,
    KEY_OUTFIT_SUGGESTION,
    KEY_STYLE_ANALYSIS,
    LOG_PREVIEW_CHARS,
    MSG_ERR_ENVELOPE,
    MSG_ERR_FIELD_TYPE,
    MSG_ERR_PAYLOAD,
    MSG_ERR_PAYLOAD_NOT_OBJECT,
    MSG_MODEL_CONTENT,
    REQUIRED_RESULT_KEYS,
    TEXT_RESULT_KEYS,
    TRUE_STRINGS,
)
from image_stylist.errors import (
    MalformedEnvelopeError,
    MalformedPayloadError,
    MissingContentFieldError,
    MissingResultKeyError,
)
from image_stylist.providers.provider import Provider
from image_stylist.result import StyleAnalysisResult

logger = logging.getLogger(__name__)


def _as_text(raw_body: bytes | str) -> str:
    match raw_body:
        case bytes():
            return raw_body.decode("utf-8", errors="replace")
        case _:
            return raw_body


def parse_envelope(raw_body: bytes | str) -> Any:
    text = _as_text(raw_body)
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise MalformedEnvelopeError(MSG_ERR_ENVELOPE % (e, text), raw=text) from e


def extract_content(envelope: Any, provider: Provider) -> str:
    """Pull the model's answer string out of the provider envelope."""
    match provider, envelope:
        case Provider.LOCAL_MODEL, {"message": {"content": str() as content}}:
            return content
        case Provider.CLOUD_CHAT, {"choices": [{"message": {"content": str() as content}}, *_]}:
            return content
        case _:
            raise MissingContentFieldError(provider.value)


def parse_content(content: str) -> dict:
    try:
        data = json.loads(content)
    except (json.JSONDecodeError, RecursionError) as e:
        raise MalformedPayloadError(MSG_ERR_PAYLOAD % (e, content), content=content) from e
    match data:
        case dict():
            return data
        case _:
            raise MalformedPayloadError(MSG_ERR_PAYLOAD_NOT_OBJECT % content, content=content)


def require_keys(data: dict) -> None:
    """Presence check only; outfitSuggestion may legitimately be null."""
    missing = next((key for key in REQUIRED_RESULT_KEYS if key not in data), None)
    if missing is not None:
        raise MissingResultKeyError(missing)


def _is_text(key: str, value: Any) -> bool:
    match key, value:
        case _, str():
            return True
        case k, None if k == KEY_OUTFIT_SUGGESTION:
            return True
        case _:
            return False


def require_types(data: dict, content: str) -> None:
    """Text fields must be strings; outfitSuggestion may also be null."""
    keys = (*TEXT_RESULT_KEYS, KEY_OUTFIT_SUGGESTION)
    wrong = next((key for key in keys if not _is_text(key, data[key])), None)
    if wrong is not None:
        found = type(data[wrong]).__name__
        raise MalformedPayloadError(MSG_ERR_FIELD_TYPE % (wrong, found, content), content=content)


def coerce_bool(value: Any) -> bool:
    match value:
        case str() as s if s.strip().lower() in TRUE_STRINGS:
            return True
        case str() as s if s.strip().lower() in FALSE_STRINGS:
            return False
        case _:
            return bool(value)


def interpret(raw_body: bytes | str, provider: Provider) -> StyleAnalysisResult:
    """Turn a raw HTTP response body into a validated StyleAnalysisResult."""
    envelope = parse_envelope(raw_body)
    content = extract_content(envelope, provider)
    logger.debug(MSG_MODEL_CONTENT, content[:LOG_PREVIEW_CHARS])
    data = parse_content(content)
    require_keys(data)
    require_types(data, content)
    return StyleAnalysisResult(
        objective_description=data[KEY_OBJECTIVE_DESCRIPTION],
        style_analysis=data[KEY_STYLE_ANALYSIS],
        is_style_match=coerce_bool(data[KEY_IS_STYLE_MATCH]),
        outfit_suggestion=data[KEY_OUTFIT_SUGGESTION],
        occasion_analysis=data[KEY_OCCASION_ANALYSIS],
    )
