# =============================================================================
# core/responses.py  —  Response Normalizer
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Pastebin answers every API call with a plain string.  Whether that
#   string is a success or a failure is only visible from how it starts:
#
#     "Bad API request, invalid api_dev_key"   → the API rejected the call
#     "https://pastebin.com/AbCdEf12"          → a paste was created
#     anything else                            → a shape we don't know
#
#   classify_response() turns a body into one of those three shapes, so
#   handlers switch on a ResponseShape instead of repeating startswith()
#   checks inline.
#
#   parse_paste_list() reads the list operation's body: one paste per
#   line, fields separated by TAB, in the order
#       key, title, date, size, url, format
#   A short or partly-empty line degrades field by field to placeholders.
#   One bad line never fails the whole list.
# =============================================================================

from enum import Enum
from typing import Optional

from core.config import DEFAULT_BASE_URL
from core.models import PasteSummary

REMOTE_ERROR_PREFIX = "Bad API request"
PASTE_URL_PREFIX = "https://"


class ResponseShape(str, Enum):
    REMOTE_ERROR = "remote_error"
    PASTE_URL = "paste_url"
    UNRECOGNIZED = "unrecognized"


def classify_response(body: Optional[str]) -> ResponseShape:
    """Decide what a Pastebin API body means from its prefix alone."""
    text = (body or "").strip()
    if text.startswith(REMOTE_ERROR_PREFIX):
        return ResponseShape.REMOTE_ERROR
    if text.startswith(PASTE_URL_PREFIX):
        return ResponseShape.PASTE_URL
    return ResponseShape.UNRECOGNIZED


def is_remote_error(body: Optional[str]) -> bool:
    return classify_response(body) is ResponseShape.REMOTE_ERROR


def parse_paste_list(
    body: Optional[str],
    limit: int,
    base_url: str = DEFAULT_BASE_URL,
) -> list[PasteSummary]:
    """Parse a newline/tab-delimited paste listing into at most ``limit`` entries.

    Args:
        body: The raw response text (may be empty).
        limit: Upper bound on the number of entries returned, even when
            the remote side sends more lines.
        base_url: Site root used to synthesize a URL for records without one.

    Returns:
        A list of PasteSummary, in the order the lines appeared.
    """
    lines = [line.rstrip("\r") for line in (body or "").split("\n") if line.strip()]

    return [
        _parse_record(line, index, base_url.rstrip("/"))
        for index, line in enumerate(lines[:max(limit, 0)])
    ]


def _parse_record(line: str, index: int, base_url: str) -> PasteSummary:
    fields = line.split("\t")

    def field_at(position: int) -> str:
        # Missing and empty positions are treated alike.
        if position < len(fields):
            return fields[position]
        return ""

    key = field_at(0) or f"paste_{index}"
    return PasteSummary(
        key=key,
        title=field_at(1) or "Untitled",
        date=field_at(2) or "Unknown",
        size=field_at(3) or "Unknown",
        url=field_at(4) or f"{base_url}/{key}",
        format=field_at(5) or "text",
    )
