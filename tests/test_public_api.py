import unittest

import gdrivereader


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(gdrivereader, "DriveClient"))
        self.assertTrue(hasattr(gdrivereader, "ClientConfig"))
        self.assertTrue(hasattr(gdrivereader, "AuthConfig"))
        self.assertTrue(hasattr(gdrivereader, "Token"))
        self.assertTrue(hasattr(gdrivereader, "OAuthHandle"))

        self.assertTrue(hasattr(gdrivereader, "EventType"))
        self.assertTrue(hasattr(gdrivereader, "Scope"))
        self.assertTrue(hasattr(gdrivereader, "DriveFile"))

        self.assertTrue(hasattr(gdrivereader, "DriveClientError"))
        self.assertTrue(hasattr(gdrivereader, "NotFoundError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(gdrivereader, "__all__"))
        self.assertIn("DriveClient", gdrivereader.__all__)
        self.assertIn("DriveClientError", gdrivereader.__all__)
        for name in gdrivereader.__all__:
            self.assertTrue(hasattr(gdrivereader, name), name)


if __name__ == "__main__":
    unittest.main()
