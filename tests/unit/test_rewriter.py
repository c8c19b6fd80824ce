import os
import shutil
import stat
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from gopkgcp.rewriter import rewrite_module_references

OLD_MODULE = "github.com/openai/openai-go/v3"
NEW_MODULE = "github.com/myorg/myproject"

GO_FILE = """package main

import (
	"fmt"

	"github.com/openai/openai-go/v3/responses"
	"github.com/openai/openai-go/v3/internal/util"
)

func main() {
	fmt.Println("hello")
}
"""


class TestRewriter(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp())
        self.go_mod = self.test_dir / "go.mod"
        self.go_mod.write_text(f"module {OLD_MODULE}\n\ngo 1.21\n")
        self.go_file = self.test_dir / "main.go"
        self.go_file.write_text(GO_FILE)
        self.txt_file = self.test_dir / "notes.txt"
        self.txt_content = f"Contains {OLD_MODULE} reference"
        self.txt_file.write_text(self.txt_content)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_rewrite_go_mod(self):
        rewrite_module_references(self.test_dir, OLD_MODULE, NEW_MODULE)

        self.assertEqual(self.go_mod.read_text(), f"module {NEW_MODULE}\n\ngo 1.21\n")

    def test_rewrite_imports(self):
        rewrite_module_references(self.test_dir, OLD_MODULE, NEW_MODULE)

        result = self.go_file.read_text()
        self.assertNotIn(OLD_MODULE, result)
        self.assertIn(f'"{NEW_MODULE}/responses"', result)
        self.assertIn(f'"{NEW_MODULE}/internal/util"', result)
        self.assertEqual(result, GO_FILE.replace(OLD_MODULE, NEW_MODULE))

    def test_other_files_untouched(self):
        rewrite_module_references(self.test_dir, OLD_MODULE, NEW_MODULE)

        self.assertEqual(self.txt_file.read_text(), self.txt_content)

    def test_nested_directories(self):
        """All subdirectories are visited, including ones the copier would skip."""
        nested = self.test_dir / "internal" / "testdata"
        nested.mkdir(parents=True)
        nested_go = nested / "x.go"
        nested_go.write_text(f'import "{OLD_MODULE}/x"\n')

        rewritten = rewrite_module_references(self.test_dir, OLD_MODULE, NEW_MODULE)

        self.assertEqual(nested_go.read_text(), f'import "{NEW_MODULE}/x"\n')
        self.assertIn(nested_go, rewritten)

    def test_second_run_is_noop(self):
        first = rewrite_module_references(self.test_dir, OLD_MODULE, NEW_MODULE)
        self.assertEqual(len(first), 2)

        with patch("gopkgcp.rewriter.open", wraps=open, create=True) as mock_open:
            second = rewrite_module_references(self.test_dir, OLD_MODULE, NEW_MODULE)

        self.assertEqual(second, [])
        modes = [c.args[1] for c in mock_open.call_args_list]
        self.assertNotIn("w", modes)

    def test_unchanged_file_not_written(self):
        untouched = self.test_dir / "other.go"
        untouched.write_text("package other\n")

        rewritten = rewrite_module_references(self.test_dir, OLD_MODULE, NEW_MODULE)

        self.assertNotIn(untouched, rewritten)

    def test_mode_preserved(self):
        os.chmod(self.go_file, 0o750)

        rewritten = rewrite_module_references(self.test_dir, OLD_MODULE, NEW_MODULE)

        self.assertIn(self.go_file, rewritten)
        self.assertEqual(stat.S_IMODE(os.stat(self.go_file).st_mode), 0o750)

    def test_crlf_preserved(self):
        crlf = self.test_dir / "win.go"
        crlf.write_bytes(f'package win\r\nimport "{OLD_MODULE}/a"\r\n'.encode())

        rewrite_module_references(self.test_dir, OLD_MODULE, NEW_MODULE)

        self.assertEqual(crlf.read_bytes(), f'package win\r\nimport "{NEW_MODULE}/a"\r\n'.encode())

    def test_missing_root(self):
        with self.assertRaises(FileNotFoundError):
            rewrite_module_references(self.test_dir / "missing", OLD_MODULE, NEW_MODULE)

    def test_read_error_aborts(self):
        with patch("gopkgcp.rewriter.open", side_effect=PermissionError("denied"), create=True):
            with self.assertRaises(PermissionError):
                rewrite_module_references(self.test_dir, OLD_MODULE, NEW_MODULE)

    def test_empty_old_module(self):
        with self.assertRaises(ValueError):
            rewrite_module_references(self.test_dir, "", NEW_MODULE)


if __name__ == "__main__":
    unittest.main()
