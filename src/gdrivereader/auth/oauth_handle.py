"""OAuth handle: credential install, refresh and consent URL for gdrivereader."""

from __future__ import annotations

import logging
import secrets
from typing import Optional, Sequence

import google_auth_httplib2
import httplib2
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from gdrivereader.errors import InvalidArgumentError

from .auth_config import Token
from .scopes import AccessType, AuthPrompt, Scope, normalize_scopes

logger = logging.getLogger(__name__)

GOOGLE_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


class OAuthHandle:
    """
    Hold OAuth client settings and the current credentials.

    Token refresh policy belongs to google-auth: credentials are refreshed
    only when the access token is absent or expired.
    """

    def __init__(
        self,
        client_id: str,
        secret: str,
        callback: str,
        *,
        scopes: Sequence[Scope | str],
        state: Optional[str] = None,
    ) -> None:
        if not client_id or not secret:
            raise InvalidArgumentError("OAuthHandle requires client_id and secret")
        self._client_id = client_id
        self._secret = secret
        self._callback = callback
        self._scopes = normalize_scopes(scopes)
        self._state = state or secrets.token_urlsafe(16)
        self._credentials = self._make_credentials(None, None)

    @property
    def credentials(self) -> Credentials:
        """Current google.oauth2.credentials.Credentials."""
        return self._credentials

    @property
    def state(self) -> str:
        """OAuth ``state`` value embedded in authorization URLs."""
        return self._state

    def set_credentials(self, token: Token) -> None:
        """Install a stored access/refresh token pair. No network call."""
        self._credentials = self._make_credentials(token.access, token.refresh)

    def get_request_metadata(self) -> dict[str, str]:
        """
        Return authorization headers for a Drive request.

        Refreshes the access token first when it is absent or expired.

        Raises:
            google.auth.exceptions.RefreshError: if the refresh exchange fails.
        """
        creds = self._credentials
        if not creds.valid:
            logger.debug("[oauth] access token stale or absent; refreshing")
            creds.refresh(Request())

        headers: dict[str, str] = {}
        creds.apply(headers)
        return headers

    def generate_auth_url(
        self,
        *,
        access_type: AccessType = AccessType.OFFLINE,
        prompt: AuthPrompt = AuthPrompt.CONSENT,
        scope: Optional[Sequence[Scope | str]] = None,
    ) -> str:
        """Build the consent URL a user visits to grant access."""
        scopes = normalize_scopes(scope) if scope is not None else self._scopes
        flow = Flow.from_client_config(
            self._client_config(),
            scopes=[s.value for s in scopes],
            redirect_uri=self._callback,
            autogenerate_code_verifier=False,
        )
        url, _ = flow.authorization_url(
            access_type=access_type.value,
            prompt=prompt.value,
            state=self._state,
        )
        return url

    def authorized_http(self, timeout: Optional[float] = None):
        """
        Build an authorized HTTP transport for one request.

        Returns:
            google_auth_httplib2.AuthorizedHttp
        """
        return google_auth_httplib2.AuthorizedHttp(
            self._credentials,
            http=httplib2.Http(timeout=timeout),
        )

    def _make_credentials(
        self,
        access: Optional[str],
        refresh: Optional[str],
    ) -> Credentials:
        return Credentials(
            token=access,
            refresh_token=refresh,
            token_uri=GOOGLE_TOKEN_URI,
            client_id=self._client_id,
            client_secret=self._secret,
            scopes=[s.value for s in self._scopes],
        )

    def _client_config(self) -> dict[str, dict[str, object]]:
        return {
            "web": {
                "client_id": self._client_id,
                "client_secret": self._secret,
                "auth_uri": GOOGLE_AUTH_URI,
                "token_uri": GOOGLE_TOKEN_URI,
                "redirect_uris": [self._callback],
            }
        }
