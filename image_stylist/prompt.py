"""Instruction prompt shared by both providers."""
from image_stylist.constants import (
    PROMPT_JSON_ONLY,
    PROMPT_KEY_DOCS,
    PROMPT_KEYS_HEADER,
    PROMPT_LANGUAGE,
    PROMPT_PROFILE,
    PROMPT_ROLE,
)


def build_prompt(style_profile: str, language: str) -> str:
    """Return the deterministic instruction text with the profile appended verbatim."""
    lines = [
        PROMPT_ROLE + PROMPT_LANGUAGE.format(language=language),
        PROMPT_JSON_ONLY,
        PROMPT_KEYS_HEADER,
        *PROMPT_KEY_DOCS,
    ]
    return "\n".join(lines) + "\n\n" + PROMPT_PROFILE.format(profile=style_profile)
