# =============================================================================
# core/list_pastes.py  —  List-Pastes Handler
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Lists the authenticated user's pastes.
#
#     1. Validate    → 1 <= limit <= 100
#     2. Credentials → developer key AND user key (listing is always scoped
#                      to a user, so a missing user key is fatal here)
#     3. Transport   → one POST (api_option=list, api_results_limit=limit)
#     4. Normalize   → "Bad API request..." is a remote error; otherwise the
#                      body is parsed by core/responses.parse_paste_list()
#
#   An empty body is a success with zero pastes, not an error.  The result
#   never holds more than ``limit`` entries.
# =============================================================================

import logging
from typing import Optional

from core.config import DEVELOPER_KEY_ENV, USER_KEY_ENV
from core.credentials import CredentialProvider
from core.errors import missing_credential, remote_error, transport_failure, validation_error
from core.forms import build_list_form
from core.models import OperationResult, PasteListRequest
from core.responses import is_remote_error, parse_paste_list
from core.transport import PastebinTransport

logger = logging.getLogger(__name__)

MIN_LIMIT = 1
MAX_LIMIT = 100


def validate_list_request(request: PasteListRequest) -> Optional[OperationResult]:
    """Return a validation error when ``limit`` is outside 1..100, else None."""
    limit = request.limit
    if isinstance(limit, bool) or not isinstance(limit, int) or not MIN_LIMIT <= limit <= MAX_LIMIT:
        return validation_error(f"Limit must be between {MIN_LIMIT} and {MAX_LIMIT}")
    return None


async def list_pastes(
    request: PasteListRequest,
    credentials: CredentialProvider,
    transport: PastebinTransport,
) -> OperationResult:
    """List up to ``request.limit`` of the user's pastes.

    Returns:
        ``OperationResult.ok(pastes=[PasteSummary, ...], count=N, message=...)``
    """
    invalid = validate_list_request(request)
    if invalid is not None:
        return invalid

    developer_key = credentials.developer_key()
    if not developer_key:
        return missing_credential(DEVELOPER_KEY_ENV)

    user_key = credentials.user_key()
    if not user_key:
        return missing_credential(USER_KEY_ENV, "to list user pastes")

    outcome = await transport.post_form(build_list_form(request.limit, developer_key, user_key))
    if not outcome.ok:
        return transport_failure(outcome)
    if is_remote_error(outcome.body):
        return remote_error(outcome.body or "")

    pastes = parse_paste_list(outcome.body, request.limit, transport.settings.paste_url_base)
    logger.info("Listed %d pastes (limit=%d)", len(pastes), request.limit)

    if not pastes:
        return OperationResult.ok(pastes=[], count=0, message="No pastes found")
    return OperationResult.ok(
        pastes=pastes,
        count=len(pastes),
        message=f"Found {len(pastes)} pastes",
    )
