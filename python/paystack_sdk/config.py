"""Settings for building a PaystackClient from the environment.

All environment variables use the PAYSTACK_ prefix and may also be read
from a local .env file.
Example: PAYSTACK_API_KEY=sk_test_..., PAYSTACK_TIMEOUT=10
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from .endpoints.base import PAYSTACK_BASE_URL


class PaystackSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    api_key: str  # Secret key, sent as the bearer token
    base_url: str = PAYSTACK_BASE_URL
    timeout: float = Field(default=30.0, gt=0)  # Seconds

    model_config = {"env_prefix": "PAYSTACK_", "env_file": ".env", "extra": "ignore"}
