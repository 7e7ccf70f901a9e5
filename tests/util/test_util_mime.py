import unittest

from driveexport.util.mime import FOLDER_MIME, ROOT_FOLDER_ID, is_root_name


class TestMime(unittest.TestCase):
    def test_constants(self) -> None:
        self.assertEqual(FOLDER_MIME, "application/vnd.google-apps.folder")
        self.assertEqual(ROOT_FOLDER_ID, "root")

    def test_is_root_name(self) -> None:
        self.assertTrue(is_root_name("My Drive"))
        self.assertTrue(is_root_name("MY DRIVE"))
        self.assertFalse(is_root_name("My Drive 2"))
        self.assertFalse(is_root_name(None))


if __name__ == "__main__":
    unittest.main()
