"""Testy komend CLI dw (bez sieci)."""

import tempfile
import unittest
from pathlib import Path

from dw.cli import build_parser, main
from dw.commands.paragraphs import split_units

LOCAL = (
    '<div id="align-fr" style="display:none;"><pre>\nHistory = Histoire\nMissing = Absent\n</pre></div>'
    "<p>Intro.</p><p>History.</p>"
)
FOREIGN = "<p>Intro fr.</p><p>Histoire.</p>"


class CliTest(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.left = self.tmp / "en.html"
        self.right = self.tmp / "fr.html"
        self.left.write_text(LOCAL, encoding="utf-8")
        self.right.write_text(FOREIGN, encoding="utf-8")

    def tearDown(self):
        self._tmp.cleanup()

    def test_align_writes_table(self):
        out = self.tmp / "table.html"
        main([
            "align", str(self.left), str(self.right),
            "--left-lang", "en", "--right-lang", "fr",
            "--out", str(out),
        ])
        html = out.read_text(encoding="utf-8")
        self.assertTrue(html.startswith('<table id="doubleWikiTable">'))
        self.assertEqual(html.count("<tr>"), 3)
        self.assertNotIn("align-fr", html)

    def test_missing_file_exits_with_error(self):
        with self.assertRaises(SystemExit) as cm:
            main(["paragraphs", str(self.tmp / "missing.html")])
        self.assertEqual(cm.exception.code, 1)

    def test_paragraphs_and_hints_run(self):
        main(["paragraphs", str(self.right), "--show"])
        main(["hints", str(self.left), "--lang", "fr"])

    def test_paragraphs_fragments_mode(self):
        self.assertEqual(split_units(LOCAL, "fr"), ["<p>Intro.</p>", "<p>History.</p>"])
        self.assertEqual(len(split_units(LOCAL)), 2)
        main(["paragraphs", str(self.left), "--fragments", "fr", "--show"])

    def test_fetch_requires_match(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["fetch", "https://en.example/wiki/X"])


if __name__ == "__main__":
    unittest.main()
