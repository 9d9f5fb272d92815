import unittest
from unittest.mock import patch
from urllib.parse import parse_qs, urlparse

from google.auth.exceptions import RefreshError

from gdrivereader.auth import AccessType, AuthPrompt, OAuthHandle, Scope, Token


def _handle(**kwargs) -> OAuthHandle:
    params = {
        "scopes": [Scope.DRIVE_READ_ONLY, Scope.DRIVE_METADATA_READ_ONLY],
    }
    params.update(kwargs)
    return OAuthHandle("cid", "sec", "http://localhost/auth", **params)


class TestOAuthHandle(unittest.TestCase):
    def test_set_credentials_installs_token_without_network(self) -> None:
        handle = _handle()
        with patch("gdrivereader.auth.oauth_handle.Request") as request_cls:
            handle.set_credentials(Token(access="A", refresh="R"))

        request_cls.assert_not_called()
        self.assertEqual(handle.credentials.token, "A")
        self.assertEqual(handle.credentials.refresh_token, "R")
        self.assertEqual(handle.credentials.client_id, "cid")

    def test_request_metadata_uses_current_access_token(self) -> None:
        handle = _handle()
        handle.set_credentials(Token(access="A", refresh="R"))

        with patch("gdrivereader.auth.oauth_handle.Request") as request_cls:
            headers = handle.get_request_metadata()

        request_cls.assert_not_called()
        self.assertEqual(headers["authorization"], "Bearer A")

    def test_request_metadata_without_token_fails_to_refresh(self) -> None:
        handle = _handle()

        with self.assertRaises(RefreshError):
            handle.get_request_metadata()

    def test_auth_url_requests_offline_consent(self) -> None:
        handle = _handle(state="fixed-state")

        url = handle.generate_auth_url(
            access_type=AccessType.OFFLINE,
            prompt=AuthPrompt.CONSENT,
        )
        query = parse_qs(urlparse(url).query)

        self.assertEqual(query["access_type"], ["offline"])
        self.assertEqual(query["prompt"], ["consent"])
        self.assertEqual(query["client_id"], ["cid"])
        self.assertEqual(query["redirect_uri"], ["http://localhost/auth"])
        self.assertEqual(query["state"], ["fixed-state"])
        self.assertEqual(
            query["scope"][0].split(" "),
            [Scope.DRIVE_READ_ONLY.value, Scope.DRIVE_METADATA_READ_ONLY.value],
        )

    def test_auth_url_is_stable_per_handle(self) -> None:
        handle = _handle()
        self.assertEqual(handle.generate_auth_url(), handle.generate_auth_url())

    def test_auth_url_scope_override(self) -> None:
        handle = _handle(state="s")
        url = handle.generate_auth_url(scope=[Scope.CALENDAR])
        query = parse_qs(urlparse(url).query)
        self.assertEqual(query["scope"], [Scope.CALENDAR.value])


if __name__ == "__main__":
    unittest.main()
