"""Client configuration for gdrivereader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from gdrivereader.auth import DEFAULT_SCOPES, AuthConfig, Scope, normalize_scopes
from gdrivereader.errors import InvalidArgumentError

DEFAULT_CACHE_SIZE: int = 2048
# Seconds a cached file's content is served before Drive is asked again.
DEFAULT_CACHE_MAX_AGE: float = 300.0


@dataclass(frozen=True)
class ClientConfig:
    """
    DriveClient configuration. Immutable after construction.

    Fields left out take the defaults: cache enabled, a 2048-byte cache
    whose entries live 300 seconds, and read-only Drive scopes.

    Attributes:
        api_key: Optional API key sent as ``developerKey``.
        folder_id: Drive folder searched by DriveClient.read_file_by_name.
        auth: OAuth client settings and optional stored token.
        use_cache: Whether to keep a bounded in-memory content cache.
        cache_size: Cache budget in bytes.
        cache_max_age: Seconds before a cached entry expires.
        scope: One Scope or several; stored as a tuple.
    """

    api_key: Optional[str]
    folder_id: str
    auth: AuthConfig
    use_cache: bool = True
    cache_size: int = DEFAULT_CACHE_SIZE
    cache_max_age: float = DEFAULT_CACHE_MAX_AGE
    scope: Scope | str | Iterable[Scope | str] = DEFAULT_SCOPES

    def __post_init__(self) -> None:
        if not isinstance(self.folder_id, str) or not self.folder_id.strip():
            raise InvalidArgumentError("ClientConfig.folder_id must be a non-empty string")

        if not isinstance(self.auth, AuthConfig):
            raise InvalidArgumentError("ClientConfig.auth must be an AuthConfig")

        if (
            isinstance(self.cache_size, bool)
            or not isinstance(self.cache_size, int)
            or self.cache_size <= 0
        ):
            raise InvalidArgumentError(
                "ClientConfig.cache_size must be a positive int",
                details={"cache_size": self.cache_size},
            )

        if (
            isinstance(self.cache_max_age, bool)
            or not isinstance(self.cache_max_age, (int, float))
            or self.cache_max_age <= 0
        ):
            raise InvalidArgumentError(
                "ClientConfig.cache_max_age must be a positive number of seconds",
                details={"cache_max_age": self.cache_max_age},
            )

        try:
            scopes = normalize_scopes(self.scope)
        except ValueError as exc:
            raise InvalidArgumentError(
                "ClientConfig.scope contains an unknown scope",
                details={"scope": self.scope},
                cause=exc,
            ) from exc
        object.__setattr__(self, "scope", scopes)
        object.__setattr__(self, "use_cache", bool(self.use_cache))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ClientConfig":
        """
        Build a config from a plain mapping merged over the defaults.

        Keys: apiKey, folderID, auth, useCache, cacheSize, cacheMaxAge, scope.
        """
        auth = data.get("auth")
        if isinstance(auth, Mapping):
            auth = AuthConfig.from_mapping(auth)

        kwargs: dict[str, Any] = {
            "api_key": data.get("apiKey"),
            "folder_id": data.get("folderID", ""),
            "auth": auth,
        }
        if data.get("useCache") is not None:
            kwargs["use_cache"] = data["useCache"]
        if data.get("cacheSize") is not None:
            kwargs["cache_size"] = data["cacheSize"]
        if data.get("cacheMaxAge") is not None:
            kwargs["cache_max_age"] = data["cacheMaxAge"]
        if data.get("scope") is not None:
            kwargs["scope"] = data["scope"]
        return cls(**kwargs)
