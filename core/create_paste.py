# =============================================================================
# core/create_paste.py  —  Create-Paste Handler
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Creates one paste.  Four stages, always in this order:
#
#     1. Validate   → content present, visibility one of public/unlisted/private
#     2. Credentials→ developer key; user key too when visibility is private
#     3. Transport  → one form-encoded POST (api_option=paste)
#     4. Normalize  → "https://..." is the new paste's URL,
#                     "Bad API request..." is a remote error,
#                     anything else is an unexpected response
#
#   Stages 1 and 2 return before any network call, so a private paste is
#   never attempted without a user key in hand.
# =============================================================================

import logging
from typing import Optional

from core.config import DEVELOPER_KEY_ENV, USER_KEY_ENV
from core.credentials import CredentialProvider
from core.errors import (
    missing_credential,
    remote_error,
    transport_failure,
    unexpected_response,
    validation_error,
)
from core.forms import build_create_form
from core.models import VISIBILITY_CHOICES, OperationResult, PasteCreateRequest, Visibility
from core.responses import ResponseShape, classify_response
from core.transport import PastebinTransport

logger = logging.getLogger(__name__)


def validate_create_request(request: PasteCreateRequest) -> Optional[OperationResult]:
    """Return a validation error for ``request``, or None when it is acceptable."""
    if not request.content:
        return validation_error("Content is required")
    if request.visibility not in VISIBILITY_CHOICES:
        return validation_error(
            f"Visibility must be one of: {', '.join(VISIBILITY_CHOICES)}"
        )
    return None


async def create_paste(
    request: PasteCreateRequest,
    credentials: CredentialProvider,
    transport: PastebinTransport,
) -> OperationResult:
    """Create a paste on Pastebin.

    Args:
        request: Title, content, format and visibility of the new paste.
        credentials: Source of the developer key (and user key for private).
        transport: HTTP access to the Pastebin API.

    Returns:
        ``OperationResult.ok(url=..., message=...)`` on success, otherwise a
        failure carrying one of the ErrorKind values.
    """
    invalid = validate_create_request(request)
    if invalid is not None:
        return invalid

    developer_key = credentials.developer_key()
    if not developer_key:
        return missing_credential(DEVELOPER_KEY_ENV)

    user_key = None
    if request.visibility == Visibility.PRIVATE.value:
        user_key = credentials.user_key()
        if not user_key:
            return missing_credential(USER_KEY_ENV, "for private pastes")

    form = build_create_form(request, developer_key, user_key)
    outcome = await transport.post_form(form)
    if not outcome.ok:
        return transport_failure(outcome)

    body = (outcome.body or "").strip()
    shape = classify_response(body)
    if shape is ResponseShape.REMOTE_ERROR:
        return remote_error(body)
    if shape is ResponseShape.PASTE_URL:
        logger.info("Created %s paste at %s", request.visibility, body)
        return OperationResult.ok(url=body, message="Paste created successfully")

    logger.warning("Unrecognized create_paste response: %.80r", body)
    return unexpected_response(body)
