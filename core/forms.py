# =============================================================================
# core/forms.py  —  Request Builder
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a validated request plus resolved credentials into the exact
#   key/value pairs the Pastebin API expects in its form-encoded POST body.
#
#   Every form carries:
#     api_dev_key  → the developer key
#     api_option   → which API operation to run
#
#   Pastebin splits its options across two endpoints:
#     api_post.php → "paste", "list"
#     api_raw.php  → "show_paste" (always with api_user_key)
#
# VISIBILITY → api_paste_private:
#     public   → "0"
#     unlisted → "1"
#     private  → "2"   (requires api_user_key; the paste belongs to that user)
#
# These functions do no validation and no I/O.  Handlers call them only
# after input and credentials have been checked.
# =============================================================================

from typing import Optional

from core.models import PasteCreateRequest, Visibility

DEFAULT_PASTE_TITLE = "Untitled Paste"

PRIVATE_FLAGS: dict[Visibility, str] = {
    Visibility.PUBLIC: "0",
    Visibility.UNLISTED: "1",
    Visibility.PRIVATE: "2",
}


def build_create_form(
    request: PasteCreateRequest,
    developer_key: str,
    user_key: Optional[str] = None,
) -> dict[str, str]:
    """Form for api_post.php's paste option; the user key rides along only when private."""
    visibility = Visibility(request.visibility)
    form = {
        "api_dev_key": developer_key,
        "api_option": "paste",
        "api_paste_code": request.content,
        "api_paste_name": request.title or DEFAULT_PASTE_TITLE,
        "api_paste_format": request.format or "text",
        "api_paste_private": PRIVATE_FLAGS[visibility],
    }
    if visibility is Visibility.PRIVATE and user_key:
        form["api_user_key"] = user_key
    return form


def build_read_form(paste_key: str, developer_key: str, user_key: str) -> dict[str, str]:
    """Form for api_raw.php's show_paste, which only serves the user's own pastes."""
    return {
        "api_dev_key": developer_key,
        "api_user_key": user_key,
        "api_option": "show_paste",
        "api_paste_key": paste_key,
    }


def build_list_form(limit: int, developer_key: str, user_key: str) -> dict[str, str]:
    """Form for api_post.php's list, capped at ``limit`` results."""
    return {
        "api_dev_key": developer_key,
        "api_user_key": user_key,
        "api_option": "list",
        "api_results_limit": str(limit),
    }
