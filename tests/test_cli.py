import io
import json
import unittest
import shutil
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from codediff import cli
from codediff.utils import prefs


class TestCli(unittest.TestCase):
    def setUp(self):
        self.base = Path(tempfile.mkdtemp(prefix="codediff_cli_"))
        self.prefs_path = self.base / "prefs.json"
        self._patch = mock.patch.object(prefs, "_prefs_path", return_value=self.prefs_path)
        self._patch.start()
        (self.base / "a.txt").write_text("one\ntwo\nthree\n", encoding="utf-8")
        (self.base / "b.txt").write_text("one\nTWO\nthree\nfour\n", encoding="utf-8")
        (self.base / "crlf.txt").write_bytes(b"one\r\ntwo\r\nthree\r\n")
        (self.base / "spaced.txt").write_text("one\n  two  \nthree\n", encoding="utf-8")

    def tearDown(self):
        self._patch.stop()
        if self.base.exists():
            shutil.rmtree(self.base)

    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            rc = cli.main([str(a) for a in argv])
        return rc, out.getvalue(), err.getvalue()

    def test_identical_files(self):
        a = self.base / "a.txt"
        rc, out, _ = self._run(a, a)
        self.assertEqual(rc, 0)
        self.assertNotIn("<", out)

    def test_split_output(self):
        rc, out, err = self._run(self.base / "a.txt", self.base / "b.txt", "--stats")
        self.assertEqual(rc, 1)
        self.assertIn(" <", out)
        self.assertIn(" > ", out)
        self.assertIn("+2 added, -1 removed, 3 unchanged", err)

    def test_unified_output(self):
        rc, out, _ = self._run(self.base / "a.txt", self.base / "b.txt", "-u", "--context", "all")
        self.assertEqual(rc, 1)
        self.assertIn("- two", out)
        self.assertIn("+ TWO", out)
        self.assertIn("+ four", out)

    def test_ignore_case(self):
        (self.base / "c.txt").write_text("one\nTWO\nthree\n", encoding="utf-8")
        rc, _, _ = self._run(self.base / "a.txt", self.base / "c.txt", "-i")
        self.assertEqual(rc, 0)

    def test_crlf_is_normalized(self):
        rc, _, _ = self._run(self.base / "a.txt", self.base / "crlf.txt")
        self.assertEqual(rc, 0)

    def test_missing_file(self):
        rc, _, err = self._run(self.base / "a.txt", self.base / "nope.txt")
        self.assertEqual(rc, 2)
        self.assertIn("does not exist", err)

    def test_requires_two_files(self):
        rc, _, err = self._run(self.base / "a.txt")
        self.assertEqual(rc, 2)
        self.assertIn("Two files are required", err)

    def test_sample_unified_context(self):
        rc, out, _ = self._run("--sample", "css", "-u", "--context", "0")
        self.assertEqual(rc, 1)
        self.assertIn("unchanged line", out)

    def test_html_report_into_directory(self):
        rc, out, _ = self._run(self.base / "a.txt", self.base / "b.txt", "--html", self.base, "--title", "ab")
        self.assertEqual(rc, 1)
        report = self.base / "code-diff-ab.html"
        self.assertTrue(report.exists())
        self.assertEqual(Path(out.strip()), report.resolve())
        self.assertIn("Code Difference - ab", report.read_text(encoding="utf-8"))

    def test_save_defaults(self):
        a, spaced = self.base / "a.txt", self.base / "spaced.txt"
        rc, _, _ = self._run(a, spaced)
        self.assertEqual(rc, 1)

        rc, _, _ = self._run(a, spaced, "-w", "--context", "all", "--save-defaults")
        self.assertEqual(rc, 0)
        saved = json.loads(self.prefs_path.read_text(encoding="utf-8"))["diff_options"]
        self.assertTrue(saved["ignore_whitespace"])
        self.assertEqual(saved["context_lines"], "all")

        # saved option applies without the flag
        rc, _, _ = self._run(a, spaced)
        self.assertEqual(rc, 0)

    def test_sample_with_files_is_rejected(self):
        err = io.StringIO()
        with self.assertRaises(SystemExit) as cm:
            with redirect_stderr(err):
                cli.main(["--sample", "css", str(self.base / "a.txt")])
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("--sample cannot be combined", err.getvalue())

    def test_bad_context_value(self):
        with self.assertRaises(SystemExit):
            with redirect_stderr(io.StringIO()):
                cli.main(["--sample", "java", "--context", "lots"])


if __name__ == "__main__":
    unittest.main()
