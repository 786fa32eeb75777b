# =============================================================================
# core/errors.py  —  Error Classifier
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds every failure OperationResult the handlers return, so the
#   wording and the ErrorKind of a given failure are the same no matter
#   which tool produced it.
#
#   Local failures (returned before any network call):
#     validation_error()    → ErrorKind.VALIDATION
#     missing_credential()  → ErrorKind.MISSING_CREDENTIAL
#
#   Remote failures:
#     remote_error()        → ErrorKind.REMOTE_APPLICATION
#     unexpected_response() → ErrorKind.UNEXPECTED_RESPONSE
#     transport_failure()   → TIMEOUT / NETWORK, or REMOTE_APPLICATION when
#                             an HTTP error status carried a "Bad API
#                             request" body
# =============================================================================

from typing import Any

from core.models import ErrorKind, OperationResult
from core.responses import is_remote_error
from core.transport import TransportOutcome

TIMEOUT_MESSAGE = "Request timeout - Pastebin API may be rate limiting"


def validation_error(message: str, **context: Any) -> OperationResult:
    return OperationResult.failure(ErrorKind.VALIDATION, message, **context)


def missing_credential(env_name: str, purpose: str = "", **context: Any) -> OperationResult:
    """Name the missing secret and, optionally, what it was needed for."""
    message = f"{env_name} environment variable is required"
    if purpose:
        message = f"{message} {purpose}"
    return OperationResult.failure(ErrorKind.MISSING_CREDENTIAL, message, **context)


def remote_error(body: str, **context: Any) -> OperationResult:
    return OperationResult.failure(
        ErrorKind.REMOTE_APPLICATION,
        f"Pastebin API error: {body.strip()}",
        **context,
    )


def unexpected_response(body: str, **context: Any) -> OperationResult:
    return OperationResult.failure(
        ErrorKind.UNEXPECTED_RESPONSE,
        f"Unexpected response: {body}",
        **context,
    )


def transport_failure(outcome: TransportOutcome, prefix: str = "Network error", **context: Any) -> OperationResult:
    """Convert a failed TransportOutcome into an error result.

    Args:
        outcome: A TransportOutcome whose ``ok`` is False.
        prefix: Leading words of the message for generic network failures.
        **context: Extra keys to keep on the error (e.g. pasteKey, url).
    """
    if outcome.body and is_remote_error(outcome.body):
        return remote_error(outcome.body, **context)

    if outcome.error_kind is ErrorKind.TRANSPORT_TIMEOUT:
        return OperationResult.failure(
            ErrorKind.TRANSPORT_TIMEOUT,
            TIMEOUT_MESSAGE,
            details=outcome.error_message,
            **context,
        )

    return OperationResult.failure(
        ErrorKind.TRANSPORT_NETWORK,
        f"{prefix}: {outcome.error_message}",
        details=outcome.details,
        **context,
    )
