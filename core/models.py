# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows through a paste operation: what the caller asks for (requests),
# what a listed paste looks like (PasteSummary), and what comes back
# (OperationResult).
#
# LIFETIME:
#   Everything here lives for exactly one tool call.  Nothing is persisted
#   or cached by core/.
#
# WIRE NAMES:
#   Python attributes are snake_case.  The dicts handed back to the tool
#   layer use the key names callers already rely on (pasteKey, url, ...).
# =============================================================================

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional


# -----------------------------------------------------------------------------
# Visibility — create-time access policy for a paste
# -----------------------------------------------------------------------------
class Visibility(str, Enum):
    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"


VISIBILITY_CHOICES: tuple[str, ...] = tuple(v.value for v in Visibility)


# -----------------------------------------------------------------------------
# ErrorKind — the one error taxonomy shared by all three handlers
# -----------------------------------------------------------------------------
#   VALIDATION / MISSING_CREDENTIAL  → detected locally, no network call made
#   REMOTE_APPLICATION               → Pastebin answered with "Bad API request"
#   TRANSPORT_TIMEOUT                → the 10 s timeout fired
#   TRANSPORT_NETWORK                → DNS, refused connection, HTTP error status
#   UNEXPECTED_RESPONSE              → body matched no known shape
# -----------------------------------------------------------------------------
class ErrorKind(str, Enum):
    VALIDATION = "validation"
    MISSING_CREDENTIAL = "missing_credential"
    REMOTE_APPLICATION = "remote_application"
    TRANSPORT_TIMEOUT = "transport_timeout"
    TRANSPORT_NETWORK = "transport_network"
    UNEXPECTED_RESPONSE = "unexpected_response"


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
@dataclass
class PasteCreateRequest:
    """Everything needed to create one paste."""

    content: str
    visibility: str = Visibility.PUBLIC.value
    title: Optional[str] = None
    format: str = "text"               # Pastebin syntax-highlighting name


@dataclass
class PasteReadRequest:
    """Identify one existing paste by its opaque key."""

    paste_key: str


@dataclass
class PasteListRequest:
    """How many of the authenticated user's pastes to return (1–100)."""

    limit: int = 10


# -----------------------------------------------------------------------------
# PasteSummary — one record of the list operation
# -----------------------------------------------------------------------------
@dataclass
class PasteSummary:
    """A listed paste.  Every field is a plain string, placeholders included."""

    key: str
    title: str
    date: str
    size: str
    url: str
    format: str


# -----------------------------------------------------------------------------
# OperationResult — the tagged outcome every handler returns
# -----------------------------------------------------------------------------
@dataclass
class OperationResult:
    """Success with a payload, or an error with a kind and optional details.

    ``data`` holds the operation-specific payload on success, and any
    context worth keeping on failure (read_paste keeps pasteKey and url so
    a caller can retry by hand).
    """

    success: bool
    data: dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    details: Any = None

    @classmethod
    def ok(cls, **data: Any) -> "OperationResult":
        return cls(success=True, data=data)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        details: Any = None,
        **context: Any,
    ) -> "OperationResult":
        return cls(success=False, data=context, error=message, kind=kind, details=details)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the plain dict the tool gateway serializes."""
        if self.success:
            return {"success": True, **_plain(self.data)}

        result: dict[str, Any] = {"error": self.error}
        if self.kind is not None:
            result["kind"] = self.kind.value
        if self.details is not None:
            result["details"] = self.details
        result.update(_plain(self.data))
        return result


def _plain(data: dict[str, Any]) -> dict[str, Any]:
    # asdict() nested PasteSummary objects (list payloads) into dicts.
    converted = {}
    for key, value in data.items():
        if isinstance(value, list):
            value = [asdict(item) if isinstance(item, PasteSummary) else item for item in value]
        converted[key] = value
    return converted
