"""All magic values live here — no inline literals anywhere else."""

# Provider selection
LOCAL_MODEL_ENDPOINT_MARKER = "ollama"

# Config defaults
DEFAULT_API_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o"
DEFAULT_LANGUAGE = "en"
DEFAULT_LOG_LEVEL = "INFO"

REQUEST_TIMEOUT_SECONDS: float = 180.0

# HTTP headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"
MIME_JSON = "application/json"
BEARER_PREFIX = "Bearer "

# Cloud chat-completion payload
CHAT_MAX_TOKENS = 800
CHAT_RESPONSE_FORMAT = {"type": "json_object"}
CHAT_ROLE_USER = "user"
PART_TEXT = "text"
PART_IMAGE_URL = "image_url"

# Local-model payload
LOCAL_FORMAT = "json"

# Result schema, in validation order
KEY_OBJECTIVE_DESCRIPTION = "objectiveDescription"
KEY_STYLE_ANALYSIS = "styleAnalysis"
KEY_IS_STYLE_MATCH = "isStyleMatch"
KEY_OUTFIT_SUGGESTION = "outfitSuggestion"
KEY_OCCASION_ANALYSIS = "occasionAnalysis"
REQUIRED_RESULT_KEYS: tuple[str, ...] = (
    KEY_OBJECTIVE_DESCRIPTION,
    KEY_STYLE_ANALYSIS,
    KEY_IS_STYLE_MATCH,
    KEY_OUTFIT_SUGGESTION,
    KEY_OCCASION_ANALYSIS,
)
TEXT_RESULT_KEYS: tuple[str, ...] = (
    KEY_OBJECTIVE_DESCRIPTION,
    KEY_STYLE_ANALYSIS,
    KEY_OCCASION_ANALYSIS,
)
TRUE_STRINGS = frozenset({"true", "yes", "1"})
FALSE_STRINGS = frozenset({"false", "no", "0", ""})

# Instruction prompt
PROMPT_ROLE = (
    "You are a fashion assistant for visually impaired users. "
    "You will be provided with several images of the same product, showing it "
    "from different angles or in different contexts. Synthesize the information "
    "from all images to create one cohesive analysis. "
)
PROMPT_LANGUAGE = (
    "You MUST provide your entire JSON response, including all text values, "
    "in the following language: {language}."
)
PROMPT_JSON_ONLY = (
    "You MUST respond with a valid JSON object only, and nothing else. "
    "Do not include any introductory text or markdown formatting."
)
PROMPT_KEYS_HEADER = "The JSON object must have five specific keys:"
PROMPT_KEY_DOCS: tuple[str, ...] = (
    '1. "objectiveDescription": (string) A neutral, factual description of the '
    "item, combining details from all provided images.",
    '2. "styleAnalysis": (string) A personalized comparison to the user\'s style, '
    "explaining in a friendly tone why it does or does not match.",
    '3. "isStyleMatch": (boolean) A simple true or false based on your final '
    "recommendation.",
    '4. "outfitSuggestion": (string or null) If the item is a style match '
    "(isStyleMatch is true), provide a brief suggestion for a complete outfit. "
    "If it is not a match, this key's value MUST be null.",
    '5. "occasionAnalysis": (string) Briefly describe for what type of occasions '
    'this item would be appropriate (e.g., "casual wear, meetings with friends" '
    'or "formal events, business meetings").',
)
PROMPT_PROFILE = "User's Style Profile: \"{profile}\""

# Error messages
MSG_ERR_NO_IMAGES = "The image URLs list cannot be empty."
MSG_ERR_IMAGES_NOT_SEQUENCE = "Image URLs must be a list of strings, not a single string."
MSG_ERR_NO_IMAGES_FETCHED = "None of the %d image URLs could be fetched."
MSG_ERR_NO_API_KEY = "An API key is required for the cloud chat provider."
MSG_ERR_UNKNOWN_PROVIDER = "Unsupported provider: %r"
MSG_ERR_TRANSPORT = "Failed to connect to the AI API endpoint: %s"
MSG_ERR_ENVELOPE = "The API response is not valid JSON: %s. Raw body: %s"
MSG_ERR_CONTENT_FIELD = "Could not find the content string in the %s API response."
MSG_ERR_PAYLOAD = "Failed to decode the nested JSON from the API response: %s. Raw content: %s"
MSG_ERR_PAYLOAD_NOT_OBJECT = "The nested JSON is not an object. Raw content: %s"
MSG_ERR_FIELD_TYPE = "The key '%s' has the wrong type (%s). Raw content: %s"
MSG_ERR_MISSING_KEY = "The final JSON data is missing the required key: '%s'."

# Log messages
MSG_BUILDING_PAYLOAD = "Building %s payload for %d image(s)"
MSG_IMAGE_SKIPPED = "Skipping image %s: %s"
MSG_SENDING = "→ POST %s (%s)"
MSG_RECEIVED = "✓ Response received (%.1fs, %d bytes)"
MSG_MODEL_CONTENT = "Model content: %s"
MSG_TRANSPORT_FAILED = "✗ Request failed (%.1fs): %s"
LOG_PREVIEW_CHARS = 200

# Demo entry point
DEMO_STYLE_PROFILE = (
    "I prefer an elegant and business-casual style. I mainly wear muted colors "
    "like navy, grey, and white. I like well-tailored blazers and simple "
    "trousers. I avoid bright colors and sportswear."
)
DEMO_IMAGE_URLS: tuple[str, ...] = (
    "https://images.unsplash.com/photo-1521223890158-f9f7c3d5d504"
    "?auto=format&fit=crop&q=80&w=680",
)
MSG_DEMO_ANALYZING = "Analyzing %d image(s)…"
MSG_DEMO_MATCH = "✅ Recommendation: This item is a likely MATCH for your style."
MSG_DEMO_NO_MATCH = "⚠️ Recommendation: This item is likely NOT a match for your style."
MSG_DEMO_NO_OUTFIT = "None provided."
MSG_DEMO_FAILED = "An error occurred: %s"
DEMO_SECTIONS: tuple[tuple[str, str], ...] = (
    ("Objective Description", "objective_description"),
    ("Style Analysis", "style_analysis"),
    ("Outfit Suggestion", "outfit_suggestion"),
    ("Occasion Analysis", "occasion_analysis"),
)
