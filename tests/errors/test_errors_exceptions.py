import json
import unittest
from unittest.mock import Mock

from gdrivereader.errors.exceptions import (
    ApiError,
    AuthError,
    DriveClientError,
    HttpErrorInfo,
    NotFoundError,
    PermissionError,
    RateLimitError,
    http_error_to_info,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = DriveClientError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_details_default_to_empty_dict(self) -> None:
        err = DriveClientError("msg")
        self.assertEqual(err.details, {})
        self.assertIsNone(err.cause)

    def test_map_http_error_basic(self) -> None:
        self.assertIsInstance(map_http_error(HttpErrorInfo(status_code=401)), AuthError)
        self.assertIsInstance(map_http_error(HttpErrorInfo(status_code=403)), PermissionError)
        self.assertIsInstance(map_http_error(HttpErrorInfo(status_code=404)), NotFoundError)
        self.assertIsInstance(map_http_error(HttpErrorInfo(status_code=429)), RateLimitError)

    def test_map_http_error_other_is_api_error(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=503))
        self.assertIsInstance(err, ApiError)

        err = map_http_error(HttpErrorInfo(status_code=418))
        self.assertIsInstance(err, ApiError)

    def test_map_http_error_message_names_status(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=500, message="Backend Error"))
        self.assertEqual(str(err), "Server returned HTTP status 500")
        self.assertEqual(err.details["status_code"], 500)
        self.assertEqual(err.details["api_message"], "Backend Error")


class TestHttpErrorToInfo(unittest.TestCase):
    def _http_error(self, status, reason, content: bytes):
        from googleapiclient.errors import HttpError

        resp = Mock()
        resp.status = status
        resp.reason = reason
        return HttpError(resp=resp, content=content)

    def test_reads_status_and_payload_reason(self) -> None:
        body = {
            "error": {
                "message": "User rate limit exceeded.",
                "errors": [{"domain": "usageLimits", "reason": "userRateLimitExceeded"}],
            }
        }
        exc = self._http_error(403, "Forbidden", json.dumps(body).encode("utf-8"))

        info = http_error_to_info(exc)

        self.assertEqual(info.status_code, 403)
        self.assertEqual(info.reason, "userRateLimitExceeded")
        self.assertEqual(info.message, "User rate limit exceeded.")
        self.assertEqual(info.details, {"domain": "usageLimits"})

    def test_non_json_body_keeps_http_reason(self) -> None:
        exc = self._http_error(502, "Bad Gateway", b"<html>oops</html>")

        info = http_error_to_info(exc)

        self.assertEqual(info.status_code, 502)
        self.assertEqual(info.reason, "Bad Gateway")
        self.assertIsNone(info.message)


if __name__ == "__main__":
    unittest.main()
