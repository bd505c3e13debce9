from __future__ import annotations

import os
import unittest

from sourcemap_loader.errors import InvalidFileUrlError, UnsupportedSchemeError
from sourcemap_loader.paths import file_url_to_path, has_unsupported_scheme, resolve_absolute_path


class TestPaths(unittest.TestCase):
    def test_relative_reference_is_joined_and_normalized(self):
        self.assertEqual(
            resolve_absolute_path("/tmp/project/dist", "../src/./index.ts"),
            os.path.abspath("/tmp/project/src/index.ts"),
        )

    def test_absolute_reference_passes_through(self):
        self.assertEqual(resolve_absolute_path("/tmp/project", "/opt/lib/a.js"), os.path.abspath("/opt/lib/a.js"))

    @unittest.skipIf(os.name == "nt", "posix file URL layout")
    def test_file_url_is_decoded(self):
        self.assertEqual(resolve_absolute_path("/elsewhere", "file:///tmp/some%20dir/a.js"), "/tmp/some dir/a.js")

    def test_file_url_accepts_localhost(self):
        self.assertEqual(file_url_to_path("file://localhost/tmp/a.js"), file_url_to_path("file:///tmp/a.js"))

    def test_file_url_with_remote_host_is_rejected(self):
        with self.assertRaises(InvalidFileUrlError):
            resolve_absolute_path("/tmp", "file://example.com/a.js")

    def test_malformed_file_url_is_rejected(self):
        with self.assertRaises(InvalidFileUrlError) as cm:
            file_url_to_path("file://[/x.map")
        self.assertIsInstance(cm.exception.__cause__, ValueError)

    def test_other_schemes_are_rejected(self):
        for url in ("http://example.com/app.js.map", "webpack:///src/index.ts", "data:text/plain,abc"):
            with self.subTest(url=url):
                with self.assertRaises(UnsupportedSchemeError) as cm:
                    resolve_absolute_path("/tmp", url)
                self.assertIn(url, str(cm.exception))

    def test_drive_letter_is_not_a_scheme(self):
        self.assertFalse(has_unsupported_scheme("C:\\src\\index.ts"))
        self.assertFalse(has_unsupported_scheme("c:/src/index.ts"))
        resolve_absolute_path("/tmp", "C:\\src\\index.ts")


if __name__ == "__main__":
    unittest.main()
