# =============================================================================
# core/credentials.py  —  Credential Resolution
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers two questions for a handler: "what is the developer key?" and
#   "what is the user key?".  Either answer may be None, and each handler
#   decides whether a missing key is fatal for its operation:
#
#     create_paste      → developer key always, user key only for private
#     read_paste        → developer key always, user key if present
#     list_user_pastes  → developer key AND user key, always
#
# PROVIDERS:
#   EnvCredentialProvider    → reads os.environ on EVERY call (no caching;
#                              .env loading happens in the entry points)
#   StaticCredentialProvider → fixed values, used by tests and embedders
#
#   Handlers receive a provider as a parameter, so the process environment
#   is never consulted implicitly from inside core logic.
# =============================================================================

import os
from typing import Optional, Protocol

from core.config import DEVELOPER_KEY_ENV, USER_KEY_ENV


class CredentialProvider(Protocol):
    """Anything that can hand out the two Pastebin secrets."""

    def developer_key(self) -> Optional[str]:
        ...

    def user_key(self) -> Optional[str]:
        ...


class EnvCredentialProvider:
    """Read secrets from the process environment at call time."""

    def __init__(
        self,
        developer_key_env: str = DEVELOPER_KEY_ENV,
        user_key_env: str = USER_KEY_ENV,
    ) -> None:
        self.developer_key_env = developer_key_env
        self.user_key_env = user_key_env

    def developer_key(self) -> Optional[str]:
        return _non_empty(os.environ.get(self.developer_key_env))

    def user_key(self) -> Optional[str]:
        return _non_empty(os.environ.get(self.user_key_env))


class StaticCredentialProvider:
    """Hold fixed secrets (either may be None)."""

    def __init__(self, developer_key: Optional[str] = None, user_key: Optional[str] = None) -> None:
        self._developer_key = developer_key
        self._user_key = user_key

    def developer_key(self) -> Optional[str]:
        return _non_empty(self._developer_key)

    def user_key(self) -> Optional[str]:
        return _non_empty(self._user_key)


def _non_empty(value: Optional[str]) -> Optional[str]:
    # An exported-but-blank variable counts as absent.
    if value is None or not value.strip():
        return None
    return value.strip()
