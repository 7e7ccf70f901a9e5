import unittest

import driveexport


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(driveexport, "DriveExportService"))
        self.assertTrue(hasattr(driveexport, "DriveExportSettings"))
        self.assertTrue(hasattr(driveexport, "UploadSession"))
        self.assertTrue(hasattr(driveexport, "FolderResolver"))
        self.assertTrue(hasattr(driveexport, "RequestCorrelator"))

        self.assertTrue(hasattr(driveexport, "SaveRequest"))
        self.assertTrue(hasattr(driveexport, "ParentRef"))

        self.assertTrue(hasattr(driveexport, "DriveExportError"))
        self.assertTrue(hasattr(driveexport, "SessionInitError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(driveexport, "__all__"))
        self.assertIn("DriveExportService", driveexport.__all__)
        self.assertIn("DriveExportError", driveexport.__all__)
        for name in driveexport.__all__:
            self.assertTrue(hasattr(driveexport, name), name)


if __name__ == "__main__":
    unittest.main()
