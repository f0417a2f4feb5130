"""Testy bloku wskazówek dopasowania i wstawiania znaczników."""

import unittest

from aligner.hints import (
    apply_hints,
    find_hint_block,
    insert_markers,
    parse_hint_lines,
    strip_hint_blocks,
)

BLOCK_FR = '<div id="align-fr" style="display:none;">\n<pre>\nHello = Bonjour\n</pre>\n</div>'


class FindHintBlockTest(unittest.TestCase):

    def test_block_is_found_and_removed(self):
        html, body = find_hint_block("x" + BLOCK_FR + "y", "fr")
        self.assertEqual(html, "xy")
        self.assertEqual(body, "\nHello = Bonjour\n")

    def test_block_for_other_language_is_ignored(self):
        html, body = find_hint_block("x" + BLOCK_FR, "de")
        self.assertEqual(html, "x" + BLOCK_FR)
        self.assertIsNone(body)

    def test_strip_removes_blocks_for_all_languages(self):
        block_de = BLOCK_FR.replace("align-fr", "align-de")
        self.assertEqual(strip_hint_blocks("a" + BLOCK_FR + "b" + block_de + "c"), "abc")


class ParseHintLinesTest(unittest.TestCase):

    def test_pairs_are_trimmed_and_invalid_lines_skipped(self):
        body = "\n  a = b  \nno equals sign\n = orphan value\nk = v = w\n"
        self.assertEqual(parse_hint_lines(body), [("a", "b"), ("k", "v = w")])


class InsertMarkersTest(unittest.TestCase):

    def test_marker_before_first_occurrence(self):
        html = "<p>Intro.</p><p>Hello world</p>"
        hinted = insert_markers(html, [("Hello", "Bonjour")])
        self.assertEqual(len(hinted.markers), 1)
        marker = hinted.markers[0]
        self.assertEqual(marker.position, html.index("Hello"))
        self.assertEqual(marker.hint.anchor_text, "Hello")
        self.assertEqual(marker.title, "Bonjour")
        self.assertEqual(
            hinted.html,
            '<p>Intro.</p><p><span data-dw-marker="0" title="Bonjour"></span>Hello world</p>',
        )

    def test_only_first_occurrence_is_marked(self):
        hinted = insert_markers("Hello, Hello", [("Hello", "Bonjour")])
        self.assertEqual(hinted.html.count("data-dw-marker"), 1)
        self.assertEqual(hinted.markers[0].position, 0)

    def test_missing_key_is_dropped(self):
        hinted = insert_markers("<p>abc</p>", [("zzz", "yyy")])
        self.assertEqual(hinted.markers, ())
        self.assertEqual(hinted.dropped, (("zzz", "yyy"),))
        self.assertEqual(hinted.html, "<p>abc</p>")

    def test_occurrence_inside_tag_is_skipped(self):
        html = '<a title="Hello">x</a> Hello'
        hinted = insert_markers(html, [("Hello", "Bonjour")])
        self.assertEqual(hinted.markers[0].position, html.rindex("Hello"))

    def test_many_occurrences_inside_tags(self):
        html = "".join(f'<a title="Hello {i}">Hello</a>' for i in range(2000))
        hinted = insert_markers(html, [("Hello", "Bonjour")])
        self.assertEqual(hinted.markers[0].position, html.index(">Hello") + 1)

    def test_tag_state_follows_each_candidate(self):
        html = '<b title="Hi">Hi</b><i title="Hi">'
        hinted = insert_markers(html, [("Hi", "Salut")])
        self.assertEqual(hinted.markers[0].position, 14)

    def test_markers_numbered_in_document_order(self):
        hinted = insert_markers("A then B", [("B", "2"), ("A", "1")])
        self.assertEqual([m.hint.anchor_text for m in hinted.markers], ["A", "B"])
        self.assertEqual([m.index for m in hinted.markers], [0, 1])

    def test_same_position_keeps_first_hint(self):
        hinted = insert_markers("Hello", [("Hel", "x"), ("Hello", "y")])
        self.assertEqual(len(hinted.markers), 1)
        self.assertEqual(hinted.markers[0].title, "x")
        self.assertEqual(hinted.dropped, (("Hello", "y"),))

    def test_title_is_attribute_escaped(self):
        hinted = insert_markers("key", [("key", 'a"b')])
        self.assertIn('title="a&quot;b"', hinted.html)
        self.assertEqual(hinted.markers[0].title, 'a"b')


class ApplyHintsTest(unittest.TestCase):

    def test_block_consumed_and_marker_inserted(self):
        hinted = apply_hints(BLOCK_FR + "<p>Hello</p>", "fr")
        self.assertNotIn("align-fr", hinted.html)
        self.assertEqual(len(hinted.markers), 1)
        self.assertTrue(hinted.html.startswith('<p><span data-dw-marker="0"'))

    def test_no_block_is_not_an_error(self):
        hinted = apply_hints("<p>Hello</p>", "fr")
        self.assertEqual(hinted.html, "<p>Hello</p>")
        self.assertEqual(hinted.markers, ())

    def test_blocks_for_other_languages_are_stripped(self):
        block_de = BLOCK_FR.replace("align-fr", "align-de")
        hinted = apply_hints(block_de + "<p>Hello</p>", "fr")
        self.assertEqual(hinted.html, "<p>Hello</p>")


if __name__ == "__main__":
    unittest.main()
