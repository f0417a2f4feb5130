"""Testy podziału na akapity najwyższego poziomu."""

import unittest

from aligner.paragraphs import count_paragraphs, find_paragraphs


class FindParagraphsTest(unittest.TestCase):

    def test_top_level_paragraphs(self):
        self.assertEqual(find_paragraphs("<p>A</p><p>B</p>"), ["<p>A</p>", "<p>B</p>"])

    def test_definition_list_and_trailing_text(self):
        html = "<dl><dt>x</dt></dl>\n<p>y</p>\ntrailing"
        self.assertEqual(find_paragraphs(html), ["<dl><dt>x</dt></dl>", "\n<p>y</p>", "\ntrailing"])

    def test_nested_paragraphs_do_not_split(self):
        # </p> wewnątrz <div> jest na głębokości 1
        html = "<div><p>A</p><p>B</p></div><p>C</p>"
        self.assertEqual(find_paragraphs(html), [html])

    def test_uppercase_terminators(self):
        self.assertEqual(count_paragraphs("<P>A</P><P>B</P>"), 2)

    def test_empty_input(self):
        self.assertEqual(find_paragraphs(""), [])

    def test_text_without_terminators_is_one_unit(self):
        self.assertEqual(find_paragraphs("<ul><li>a</li></ul> tail"), ["<ul><li>a</li></ul> tail"])

    def test_round_trip(self):
        samples = [
            "<p>A</p><p>B</p>",
            "lead <p>x <b>bold</b></p>\n<table><tr><td><p>in</p></td></tr></table><p>z</p> end",
            "<dl><dd>a</dd></dl><div>loose</div>",
            "</span><p>broken</p>",
            "",
        ]
        for html in samples:
            self.assertEqual("".join(find_paragraphs(html)), html, repr(html))


if __name__ == "__main__":
    unittest.main()
