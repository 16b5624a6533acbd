import unittest
import shutil
import tempfile
from pathlib import Path

from codediff.core.diff_engine import compute_diff
from codediff.core.renderers import DisplayOptions
from codediff.core.report import build_report, export_report, report_filename


class TestReport(unittest.TestCase):
    def setUp(self):
        self.base = Path(tempfile.mkdtemp(prefix="codediff_report_"))
        self.ops = compute_diff("a\nb\nc", "a\nB\nc\nd")

    def tearDown(self):
        if self.base.exists():
            shutil.rmtree(self.base)

    def test_split_report(self):
        html = build_report(self.ops, "demo <1>")
        self.assertTrue(html.startswith("<!DOCTYPE html>"))
        self.assertIn("<title>Code Diff - demo &lt;1&gt;</title>", html)
        self.assertIn("Code Difference - demo &lt;1&gt;", html)
        self.assertIn('class="diff-summary"', html)
        self.assertIn('class="split-view"', html)
        self.assertEqual(html.count('class="diff-table"'), 2)

    def test_unified_report_collapses(self):
        base = [f"l{i}" for i in range(30)]
        mod = list(base)
        mod[15] = "changed"
        ops = compute_diff("\n".join(base), "\n".join(mod))
        html = build_report(ops, "u", DisplayOptions(split_view=False, context_lines=2))
        self.assertIn('class="unified-view"', html)
        self.assertIn("13 unchanged lines", html)
        self.assertIn('class="collapsed"', html)

    def test_export_writes_file(self):
        dest = self.base / "out" / report_filename("my diff")
        out = export_report(str(dest), self.ops, "my diff")
        self.assertTrue(Path(out).exists())
        text = Path(out).read_text(encoding="utf-8")
        self.assertIn("Code Difference - my diff", text)

    def test_report_filename(self):
        self.assertEqual(report_filename("My  Big Diff"), "code-diff-My-Big-Diff.html")
        self.assertEqual(report_filename("  "), "code-diff-untitled.html")


if __name__ == "__main__":
    unittest.main()
