# =============================================================================
# core/transport.py  —  Remote Transport (the ONLY I/O boundary)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs the two kinds of HTTP call the handlers need:
#     - post_form(fields)   → form-encoded POST to the Pastebin API endpoint
#                             (or to another endpoint passed as ``url``)
#     - get_raw(paste_key)  → plain GET of a paste's raw content
#
# EXCEPTIONS STOP HERE:
#   httpx signals every failure by raising.  Each call catches those
#   exceptions and returns a TransportOutcome instead, so validation and
#   normalization code never has to deal with try/except:
#
#     httpx.TimeoutException  → ErrorKind.TRANSPORT_TIMEOUT
#     httpx.HTTPError (other) → ErrorKind.TRANSPORT_NETWORK
#     non-2xx final status    → ErrorKind.TRANSPORT_NETWORK, body kept
#
#   An HTTP error status still carries the body: Pastebin sometimes sends
#   its "Bad API request" message with a 4xx, and core/errors.py turns
#   that into a remote-application error rather than a network one.
#
# NO RETRIES:
#   One attempt per call, with the fixed timeout from core/config.py.
#   Redirects (pastebin.com sends some for raw URLs) are followed within
#   that attempt.
# =============================================================================

from dataclasses import dataclass
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from core.config import PastebinSettings
from core.models import ErrorKind

logger = logging.getLogger(__name__)

_FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


@dataclass
class TransportOutcome:
    """The result of one HTTP call, success or failure, as a plain value."""

    body: Optional[str] = None
    status_code: Optional[int] = None
    error_kind: Optional[ErrorKind] = None
    error_message: str = ""

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @property
    def details(self) -> Any:
        # Mirrors what a caller wants to see next to "Network error: ...":
        # the remote body when there was one, the reason otherwise.
        return self.body if self.body else self.error_message


class PastebinTransport:
    """Async HTTP access to the Pastebin API and raw-content endpoint.

    Each call opens its own ``httpx.AsyncClient``; the transport holds no
    per-call state and is safe to share between concurrent tool calls.
    ``http_transport`` lets tests plug in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        settings: Optional[PastebinSettings] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings or PastebinSettings()
        self._http_transport = http_transport

    def raw_url(self, paste_key: str) -> str:
        return f"{self.settings.raw_url_base}/{quote(paste_key, safe='')}"

    def paste_url(self, paste_key: str) -> str:
        return f"{self.settings.paste_url_base}/{quote(paste_key, safe='')}"

    async def post_form(self, fields: dict[str, str], url: Optional[str] = None) -> TransportOutcome:
        """POST ``fields`` form-encoded to ``url`` (default: the API endpoint)."""
        target = url or self.settings.api_url
        logger.debug("POST %s (api_option=%s)", target, fields.get("api_option"))
        return await self._send("POST", target, data=fields, headers=_FORM_HEADERS)

    async def get_raw(self, paste_key: str) -> TransportOutcome:
        """GET the raw text of one paste."""
        url = self.raw_url(paste_key)
        logger.debug("GET %s", url)
        return await self._send("GET", url)

    async def _send(self, method: str, url: str, **kwargs: Any) -> TransportOutcome:
        try:
            async with httpx.AsyncClient(
                transport=self._http_transport,
                timeout=self.settings.timeout_seconds,
                follow_redirects=True,
            ) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out after %ss", method, url, self.settings.timeout_seconds)
            return TransportOutcome(
                error_kind=ErrorKind.TRANSPORT_TIMEOUT,
                error_message=str(exc) or "timed out",
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            return TransportOutcome(
                error_kind=ErrorKind.TRANSPORT_NETWORK,
                error_message=str(exc) or exc.__class__.__name__,
            )

        body = response.text
        if not response.is_success:
            logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
            return TransportOutcome(
                body=body,
                status_code=response.status_code,
                error_kind=ErrorKind.TRANSPORT_NETWORK,
                error_message=f"Request failed with status code {response.status_code}",
            )

        return TransportOutcome(body=body, status_code=response.status_code)
