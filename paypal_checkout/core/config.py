import os
import logging
from functools import lru_cache
from typing import Optional
from dotenv import load_dotenv

from paypal_checkout.schemas.auth import Credentials

load_dotenv()

logger = logging.getLogger(__name__)

# PayPal REST credentials (sandbox app by default)
PAYPAL_CLIENT_ID: str = os.getenv("PAYPAL_CLIENT_ID", "")
PAYPAL_CLIENT_SECRET: str = os.getenv("PAYPAL_CLIENT_SECRET", "")
PAYPAL_API_BASE: str = os.getenv("PAYPAL_API_BASE", "https://api-m.sandbox.paypal.com").rstrip("/")

# Experience context sent with vaulting orders
PAYPAL_RETURN_URL: str = os.getenv("PAYPAL_RETURN_URL", "http://example.com")
PAYPAL_CANCEL_URL: str = os.getenv("PAYPAL_CANCEL_URL", "http://example.com")

# Sandbox negative testing, e.g. '{"mock_application_codes": "INSTRUMENT_DECLINED"}'
# See https://developer.paypal.com/tools/sandbox/negative-testing/request-headers/
PAYPAL_MOCK_RESPONSE: Optional[str] = os.getenv("PAYPAL_MOCK_RESPONSE") or None

PAYPAL_HTTP_TIMEOUT: float = float(os.getenv("PAYPAL_HTTP_TIMEOUT", 30))

PORT: int = int(os.getenv("PORT", 8888))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

if not PAYPAL_CLIENT_ID or not PAYPAL_CLIENT_SECRET:
    # Avoid logging the values themselves.
    logger.warning("PayPal client id/secret are not configured. Payment endpoints will fail with MISSING_API_CREDENTIALS.")


@lru_cache
def get_credentials() -> Credentials:
    """Process-wide, immutable credentials read once from the environment."""
    return Credentials(client_id=PAYPAL_CLIENT_ID, client_secret=PAYPAL_CLIENT_SECRET)


def _safe_value(name: str, value) -> str:
    if value is None or value == "":
        return "<unset>"
    if any(secret in name for secret in ["SECRET", "KEY", "TOKEN", "PASSWORD"]):
        return "<redacted>"
    return str(value)


def log_startup_config() -> None:
    """Log the effective configuration with secret-looking values redacted."""
    config = {
        "PAYPAL_API_BASE": PAYPAL_API_BASE,
        "PAYPAL_CLIENT_ID": PAYPAL_CLIENT_ID,
        "PAYPAL_CLIENT_SECRET": PAYPAL_CLIENT_SECRET,
        "PAYPAL_MOCK_RESPONSE": PAYPAL_MOCK_RESPONSE,
        "PAYPAL_HTTP_TIMEOUT": PAYPAL_HTTP_TIMEOUT,
        "PORT": PORT,
        "LOG_LEVEL": LOG_LEVEL,
    }
    logger.info("startup_config=%s", {key: _safe_value(key, value) for key, value in config.items()})
