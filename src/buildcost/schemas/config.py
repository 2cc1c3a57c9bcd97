"""Client settings schema."""

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "mistralai/mistral-7b-instruct:free"


class ClientSettings(BaseModel):
    """Connection settings for the completion endpoint.

    Built once at startup and shared read-only by every agent.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    model: str = DEFAULT_MODEL

    # Rate-limit backoff
    max_retries: int = 5
    base_delay: float = 2.0  # seconds; doubles on every retry

    timeout: float = 60.0

    @field_validator("max_retries")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_retries must be >= 0")
        return v
