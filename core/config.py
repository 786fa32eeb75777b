# =============================================================================
# core/config.py  —  Endpoint & Timeout Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the handful of settings the paste handlers need: where the
#   Pastebin API lives, where raw paste content is served from, and how
#   long a single HTTP call may take.
#
# ENVIRONMENT OVERRIDES:
#   PASTEBIN_API_URL      → POST endpoint for paste/list (default: api_post.php)
#   PASTEBIN_RAW_API_URL  → POST endpoint for show_paste (default: api_raw.php)
#   PASTEBIN_BASE_URL  → site root used for raw and public paste URLs
#
#   Secrets (PASTEBIN_API_KEY / PASTEBIN_USER_KEY) are NOT read here.
#   They belong to core/credentials.py and are looked up on every call.
# =============================================================================

from dataclasses import dataclass
import os


DEFAULT_API_URL = "https://pastebin.com/api/api_post.php"
# show_paste (a user's own pastes, private ones included) only exists here.
DEFAULT_RAW_API_URL = "https://pastebin.com/api/api_raw.php"
DEFAULT_BASE_URL = "https://pastebin.com"

# Every network call carries this timeout.  There is no retry.
REQUEST_TIMEOUT_SECONDS = 10.0

# Names of the environment variables that hold the two secrets.
DEVELOPER_KEY_ENV = "PASTEBIN_API_KEY"
USER_KEY_ENV = "PASTEBIN_USER_KEY"


@dataclass(frozen=True)
class PastebinSettings:
    """Endpoints and timeout for one Pastebin deployment."""

    api_url: str = DEFAULT_API_URL
    raw_api_url: str = DEFAULT_RAW_API_URL
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS

    @property
    def raw_url_base(self) -> str:
        return f"{self.base_url.rstrip('/')}/raw"

    @property
    def paste_url_base(self) -> str:
        return self.base_url.rstrip("/")


def load_settings() -> PastebinSettings:
    """Build settings from the environment, falling back to pastebin.com."""
    return PastebinSettings(
        api_url=os.environ.get("PASTEBIN_API_URL", DEFAULT_API_URL),
        raw_api_url=os.environ.get("PASTEBIN_RAW_API_URL", DEFAULT_RAW_API_URL),
        base_url=os.environ.get("PASTEBIN_BASE_URL", DEFAULT_BASE_URL),
    )
