import os
import unittest
from pathlib import Path
from unittest.mock import patch

from gopkgcp.config import Settings, load_settings


class TestConfig(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = load_settings(dotenv=False)

        self.assertEqual(settings.go_bin, "go")
        self.assertIsNone(settings.goda_bin)
        self.assertIsNone(settings.gopath)
        self.assertEqual(settings.goda_fallback(), Path.home() / "go" / "bin" / "goda")

    @patch.dict(os.environ, {
        "GOPKGCP_GO": "/opt/go/bin/go",
        "GOPKGCP_GODA": "/opt/goda",
        "GOPATH": os.pathsep.join(["/work/go", "/other/go"]),
    }, clear=True)
    def test_environment(self):
        settings = load_settings(dotenv=False)

        self.assertEqual(settings.go_bin, "/opt/go/bin/go")
        self.assertEqual(settings.goda_bin, "/opt/goda")
        self.assertEqual(settings.gopath, Path("/work/go"))
        self.assertEqual(settings.goda_fallback(), Path("/work/go/bin/goda"))

    @patch("gopkgcp.config.load_dotenv")
    def test_dotenv_loaded(self, mock_load):
        load_settings()
        mock_load.assert_called_once_with()

    def test_settings_defaults(self):
        self.assertEqual(Settings().go_bin, "go")


if __name__ == "__main__":
    unittest.main()
