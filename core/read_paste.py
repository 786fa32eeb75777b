# =============================================================================
# core/read_paste.py  —  Read-Paste Handler
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Fetches the content of one paste in up to two sequential calls:
#
#     1. POST api_option=show_paste to api_raw.php → authorization check.
#        Only sent when a user key is configured: Pastebin's show_paste
#        requires one.  Only an explicit "Bad API request..." answer stops
#        the read; the rest of the body is ignored.
#     2. GET /raw/<key>                             → the paste's actual text.
#
#   Without a user key the read goes straight to step 2, which serves
#   public and unlisted pastes.
#
#   The two calls are not transactional.  If the paste disappears between
#   them, the failure shows up on the second call, and the error still
#   carries pasteKey and the public URL so the caller can retry by hand.
# =============================================================================

import logging

from core.config import DEVELOPER_KEY_ENV
from core.credentials import CredentialProvider
from core.errors import missing_credential, remote_error, transport_failure, validation_error
from core.forms import build_read_form
from core.models import OperationResult, PasteReadRequest
from core.responses import is_remote_error
from core.transport import PastebinTransport

logger = logging.getLogger(__name__)


async def read_paste(
    request: PasteReadRequest,
    credentials: CredentialProvider,
    transport: PastebinTransport,
) -> OperationResult:
    """Read a paste's raw content by key.

    Returns:
        ``OperationResult.ok(content=..., pasteKey=..., url=...)`` on success.
    """
    paste_key = (request.paste_key or "").strip()
    if not paste_key:
        return validation_error("pasteKey is required")

    developer_key = credentials.developer_key()
    if not developer_key:
        return missing_credential(DEVELOPER_KEY_ENV)

    user_key = credentials.user_key()
    if user_key:
        check = await transport.post_form(
            build_read_form(paste_key, developer_key, user_key),
            url=transport.settings.raw_api_url,
        )
        if not check.ok:
            return transport_failure(check)
        if is_remote_error(check.body):
            return remote_error(check.body or "")
    else:
        logger.debug("No user key configured; reading %s from the raw endpoint only", paste_key)

    url = transport.paste_url(paste_key)
    raw = await transport.get_raw(paste_key)
    if not raw.ok:
        logger.warning("Raw fetch for %s failed", paste_key)
        return transport_failure(
            raw,
            prefix="Failed to fetch raw paste content",
            pasteKey=paste_key,
            url=url,
        )

    return OperationResult.ok(content=raw.body or "", pasteKey=paste_key, url=url)
