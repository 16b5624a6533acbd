import unittest

from codediff.core.diff_engine import compute_diff
from codediff.core.doc_nodes import Node, el, frag, to_html, to_text, to_text_columns
from codediff.core.renderers import render_split_panes, render_unified_view


class TestDocNodes(unittest.TestCase):
    def test_to_html_escapes_text_and_classes(self):
        node = el("td", "code", text='<b>"x" & \'y\'</b>')
        self.assertEqual(
            to_html(node),
            '<td class="code">&lt;b&gt;&quot;x&quot; &amp; &#039;y&#039;&lt;/b&gt;</td>',
        )

    def test_fragment_and_attrs(self):
        node = Node("div", ("a", "b"), children=[frag("1 < 2")], attrs={"data-op": "ins"})
        self.assertEqual(to_html(node), '<div class="a b" data-op="ins">1 &lt; 2</div>')

    def test_iter_and_text_content(self):
        root = el("div", children=[el("span", text="a"), el("div", children=[el("span", text="b")])])
        self.assertEqual([n.text for n in root.iter("span")], ["a", "b"])
        self.assertEqual(root.text_content(), "ab")

    def test_rendered_table_escapes_code(self):
        ops = compute_diff("<b>", "<i>")
        left, _ = render_split_panes(ops)
        self.assertIn("&lt;b&gt;", to_html(left))
        self.assertNotIn("<b>", to_html(left))

    def test_unified_to_text(self):
        ops = compute_diff("line1\nline2\nline3", "line1\nlineX\nline3")
        lines = to_text(render_unified_view(ops, show_line_numbers=True)).split("\n")
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[1].endswith("- line2"))
        self.assertTrue(lines[2].endswith("+ lineX"))
        self.assertTrue(lines[0].startswith("1 1 "))

    def test_columns_gutter(self):
        ops = compute_diff("line1\nline2\nline3", "line1\nlineX\nline3")
        left, right = render_split_panes(ops, show_line_numbers=False)
        lines = to_text_columns(left, right, width=10).split("\n")
        self.assertEqual(len(lines), 4)
        self.assertEqual(lines[0], "line1        line1")
        self.assertEqual(lines[1], "line2      <")
        self.assertEqual(lines[2], "           > lineX")


if __name__ == "__main__":
    unittest.main()
