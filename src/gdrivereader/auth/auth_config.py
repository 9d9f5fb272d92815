"""OAuth client settings and stored token pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from gdrivereader.errors import InvalidArgumentError


@dataclass(frozen=True)
class Token:
    """Access/refresh token pair obtained from a previous consent."""

    access: Optional[str]
    refresh: Optional[str]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Token":
        return cls(access=data.get("access"), refresh=data.get("refresh"))


@dataclass(frozen=True)
class AuthConfig:
    """
    OAuth client settings.

    Attributes:
        client_id: OAuth client ID from the API console.
        secret: OAuth client secret.
        callback: Redirect URI registered for the client.
        token: Previously granted tokens, installed at client construction.
        state: Fixed OAuth ``state`` value for the authorization URL. When
            None, a random value is chosen once per OAuthHandle.
    """

    client_id: str
    secret: str
    callback: str
    token: Optional[Token] = None
    state: Optional[str] = None

    def __post_init__(self) -> None:
        for key in ("client_id", "secret", "callback"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise InvalidArgumentError(
                    f"AuthConfig.{key} must be a non-empty string",
                    details={"field": key},
                )
        if self.token is not None and not isinstance(self.token, Token):
            raise InvalidArgumentError("AuthConfig.token must be a Token")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AuthConfig":
        """Build from ``{clientID, secret, callback, token?: {access, refresh}}``."""
        token_data = data.get("token")
        token = Token.from_mapping(token_data) if token_data else None
        return cls(
            client_id=data.get("clientID", ""),
            secret=data.get("secret", ""),
            callback=data.get("callback", ""),
            token=token,
            state=data.get("state"),
        )
