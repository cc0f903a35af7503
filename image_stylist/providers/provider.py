from enum import Enum

from image_stylist.constants import LOCAL_MODEL_ENDPOINT_MARKER


class Provider(str, Enum):
    """The two supported request/response protocols."""

    CLOUD_CHAT = "cloud_chat"
    LOCAL_MODEL = "local_model"

    @classmethod
    def for_endpoint(cls, endpoint: str) -> "Provider":
        """Infer the provider from an endpoint URL when none is configured."""
        match LOCAL_MODEL_ENDPOINT_MARKER in endpoint.lower():
            case True:
                return cls.LOCAL_MODEL
            case _:
                return cls.CLOUD_CHAT
