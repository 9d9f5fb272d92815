"""Public auth exports for gdrivereader."""

from __future__ import annotations

from .auth_config import AuthConfig, Token
from .oauth_handle import OAuthHandle
from .scopes import DEFAULT_SCOPES, AccessType, AuthPrompt, Scope, normalize_scopes

__all__ = [
    "AuthConfig",
    "Token",
    "OAuthHandle",
    "Scope",
    "AccessType",
    "AuthPrompt",
    "DEFAULT_SCOPES",
    "normalize_scopes",
]
