import os
import unittest
from unittest.mock import patch

from driveexport.settings import DEFAULT_SCOPES, DriveExportSettings


class TestDriveExportSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = DriveExportSettings(_env_file=None)
        self.assertEqual(settings.mime, "application/restclient+data")
        self.assertEqual(settings.file_description, "Advanced REST client data export file.")
        self.assertEqual(settings.file_type, "application/json")
        self.assertEqual(settings.scopes, list(DEFAULT_SCOPES))

    def test_environment_overrides(self) -> None:
        env = {
            "DRIVE_EXPORT_FILE_TYPE": "text/plain",
            "DRIVE_EXPORT_SCOPES": "a, b",
            "DRIVE_EXPORT_TIMEOUT": "5",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = DriveExportSettings(_env_file=None)
        self.assertEqual(settings.file_type, "text/plain")
        self.assertEqual(settings.scopes, ["a", "b"])
        self.assertEqual(settings.timeout, 5.0)


if __name__ == "__main__":
    unittest.main()
