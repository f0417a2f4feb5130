"""Testy katalogu tagów i skanera tagów."""

import unittest

from aligner.tags import TAG_CATALOG, iter_tags, tag_balance


class IterTagsTest(unittest.TestCase):

    def test_opening_and_closing_in_order(self):
        tags = list(iter_tags("<p>a<b>x</b></p>"))
        self.assertEqual([t.name for t in tags], ["p", "b", "b", "p"])
        self.assertEqual([t.closing for t in tags], [False, False, True, True])

    def test_offsets_cover_tag_text(self):
        html = 'x<div class="c">y</div>'
        tag = next(iter_tags(html))
        self.assertEqual(html[tag.start:tag.end], '<div class="c">')

    def test_tags_outside_catalog_are_ignored(self):
        self.assertEqual(list(iter_tags("<br/><img src='a.png'><h2>T</h2><bdi>x</bdi>")), [])

    def test_self_closing_form_is_neutral(self):
        self.assertEqual(list(iter_tags('<span id="m"/>')), [])

    def test_names_are_case_insensitive_and_not_prefix_matched(self):
        tags = list(iter_tags("<BLOCKQUOTE><big>x</big></BLOCKQUOTE>"))
        self.assertEqual([t.name for t in tags], ["blockquote", "big", "big", "blockquote"])

    def test_void_elements_not_in_catalog(self):
        for name in ("br", "img", "hr", "input"):
            self.assertNotIn(name, TAG_CATALOG)


class TagBalanceTest(unittest.TestCase):

    def test_balanced(self):
        self.assertEqual(tag_balance("<div><p>x</p></div>"), 0)

    def test_unbalanced(self):
        self.assertEqual(tag_balance("<div><p>x</p>"), 1)
        self.assertEqual(tag_balance("x</span>"), -1)


if __name__ == "__main__":
    unittest.main()
