"""Testy pełnego przebiegu dopasowania dwóch stron."""

import unittest

from aligner import align_documents, compute_alignment
from aligner.tags import tag_balance
from bilingual.languages import make_document
from data_model import AlignedRow


def _docs(local_html, foreign_html, local_lang="en", foreign_lang="fr"):
    local = make_document(local_html, local_lang, "/wiki/Page")
    foreign = make_document(foreign_html, foreign_lang, f"https://{foreign_lang}.example/wiki/Page")
    return local, foreign


class AlignDocumentsTest(unittest.TestCase):

    def test_single_paragraphs_without_hints(self):
        local, foreign = _docs("<p>Hello world.</p>", "<p>Bonjour le monde.</p>")
        alignment = compute_alignment(local, foreign)
        self.assertEqual(alignment.rows, [AlignedRow("<p>Hello world.</p>", "<p>Bonjour le monde.</p>")])

        html = align_documents(local, foreign)
        self.assertEqual(html.count("<tr>"), 2)
        self.assertIn("<p>Hello world.</p>", html)
        self.assertIn("<p>Bonjour le monde.</p>", html)

    def test_hint_block_guides_alignment(self):
        local_html = (
            '<div id="align-fr" style="display:none;">\n<pre>\nHistory = Histoire\n</pre>\n</div>'
            "<p>Intro.</p><p>More intro.</p><p>History of it.</p>"
        )
        local, foreign = _docs(local_html, "<p>Intro fr.</p><p>Histoire de.</p>")
        alignment = compute_alignment(local, foreign)
        self.assertEqual(len(alignment.hinted.markers), 1)
        self.assertEqual(alignment.rows, [
            AlignedRow("<p>Intro.</p><p>More intro.</p>", "<p>Intro fr.</p>"),
            AlignedRow("<p>History of it.</p>", "<p>Histoire de.</p>"),
        ])
        self.assertNotIn("align-fr", align_documents(local, foreign))

    def test_hint_block_for_other_language_is_stripped(self):
        local_html = (
            '<div id="align-de" style="display:none;">\n<pre>\nHistory = Geschichte\n</pre>\n</div>'
            "<p>History.</p>"
        )
        local, foreign = _docs(local_html, "<p>Histoire.</p>")
        html = align_documents(local, foreign)
        self.assertNotIn("align-de", html)
        self.assertNotIn("data-dw-marker", html)

    def test_links_are_rewritten(self):
        local, foreign = _docs(
            '<p><a href="#sec1">x</a> <a href="/Page_X">p</a></p>',
            '<p><a href="#sec1">y</a></p>',
            foreign_lang="de",
        )
        html = align_documents(local, foreign, "de")
        self.assertIn('href="#r_sec1"', html)
        self.assertIn('href="#l_sec1"', html)
        self.assertIn('href="/Page_X?match=de"', html)

    def test_right_column_reconstructs_foreign_document(self):
        local_html = (
            '<div id="align-fr" style="display:none;"><pre>\nB = Deux\nD = Quatre\n</pre></div>'
            "<p>A</p><p>B</p><p>C</p><p>D</p>"
        )
        foreign_html = "<p>Un</p><p>Deux</p><p>Trois</p><p>Quatre</p>"
        local, foreign = _docs(local_html, foreign_html)
        rows = compute_alignment(local, foreign).rows
        self.assertEqual("".join(r.right for r in rows), foreign_html)
        self.assertEqual("".join(r.left for r in rows), "<p>A</p><p>B</p><p>C</p><p>D</p>")

    def test_fragments_are_balanced(self):
        local_html = (
            '<div id="align-fr" style="display:none;"><pre>\nAnchor = Ancre\n</pre></div>'
            '<div class="c"><p>One.</p><p>Two Anchor.</p></div><p>Three.</p>'
        )
        local, foreign = _docs(local_html, "<p>Un.</p><p>Deux Ancre.</p><p>Trois.</p>")
        for fragment in compute_alignment(local, foreign).fragments:
            self.assertEqual(tag_balance(fragment.html), 0, fragment.html)

    def test_output_is_deterministic(self):
        local_html = (
            '<div id="align-fr" style="display:none;"><pre>\nB = Deux\n</pre></div>'
            '<p>A <a href="#n">1</a></p><p>B</p><ol><li id="n">note</li></ol>'
        )
        local, foreign = _docs(local_html, "<p>Un</p><p>Deux</p>")
        self.assertEqual(align_documents(local, foreign), align_documents(local, foreign))


if __name__ == "__main__":
    unittest.main()
