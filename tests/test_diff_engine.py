import random
import unittest

from codediff.core.diff_engine import (
    ComparisonOptions, Delete, Equal, Insert, Line,
    build_lcs_matrix, compute_diff, extract_operations, normalize_line, split_lines,
)
from codediff.core.diff_stats import compute_stats


def _original_side(ops):
    return [op.original_line for op in ops if isinstance(op, (Equal, Delete))]


def _modified_side(ops):
    return [op.modified_line for op in ops if isinstance(op, (Equal, Insert))]


class TestNormalizeLine(unittest.TestCase):
    def test_defaults_keep_line(self):
        self.assertEqual(normalize_line("  Foo  Bar ", ComparisonOptions()), "  Foo  Bar ")

    def test_whitespace_trims_and_collapses(self):
        opts = ComparisonOptions(ignore_whitespace=True)
        self.assertEqual(normalize_line(" \tfoo   bar  ", opts), "foo bar")
        # runs collapse to one space, they are not removed
        self.assertNotEqual(normalize_line("foobar", opts), normalize_line("foo bar", opts))

    def test_case_and_whitespace_compose(self):
        opts = ComparisonOptions(ignore_whitespace=True, ignore_case=True)
        self.assertEqual(normalize_line("  Hello   WORLD", opts), "hello world")


class TestSplitLines(unittest.TestCase):
    def test_numbers_are_one_based(self):
        lines = split_lines("a\nb")
        self.assertEqual(lines, [Line("a", 1), Line("b", 2)])

    def test_trailing_newline_gives_empty_line(self):
        self.assertEqual([ln.content for ln in split_lines("a\n")], ["a", ""])
        self.assertEqual(split_lines(""), [Line("", 1)])


class TestLcsMatrix(unittest.TestCase):
    def test_borders_zero_and_monotonic(self):
        a = split_lines("a\nb\nc\nd\nb")
        b = split_lines("b\na\nd\nc\nb\nx")
        m = build_lcs_matrix(a, b, ComparisonOptions())
        self.assertEqual(len(m), len(a) + 1)
        self.assertEqual(len(m[0]), len(b) + 1)
        self.assertTrue(all(v == 0 for v in m[0]))
        self.assertTrue(all(row[0] == 0 for row in m))
        for i in range(1, len(a) + 1):
            for j in range(1, len(b) + 1):
                self.assertGreaterEqual(m[i][j], m[i - 1][j])
                self.assertGreaterEqual(m[i][j], m[i][j - 1])
        self.assertEqual(m[-1][-1], 3)

    def test_empty_side(self):
        b = split_lines("x\ny")
        m = build_lcs_matrix([], b, ComparisonOptions())
        self.assertEqual(m, [[0, 0, 0]])
        ops = extract_operations(m, [], b, ComparisonOptions())
        self.assertEqual(ops, [Insert("x", 1), Insert("y", 2)])

        m = build_lcs_matrix(b, [], ComparisonOptions())
        ops = extract_operations(m, b, [], ComparisonOptions())
        self.assertEqual(ops, [Delete("x", 1), Delete("y", 2)])


class TestComputeDiff(unittest.TestCase):
    def test_concrete_scenario(self):
        ops = compute_diff("line1\nline2\nline3", "line1\nlineX\nline3")
        self.assertEqual(ops, [
            Equal("line1", "line1", 1, 1),
            Delete("line2", 2),
            Insert("lineX", 2),
            Equal("line3", "line3", 3, 3),
        ])
        st = compute_stats(ops)
        self.assertEqual(
            (st.total_lines, st.added_lines, st.removed_lines, st.unchanged_lines),
            (4, 1, 1, 2),
        )

    def test_identity(self):
        text = "a\nb\nc\nb"
        ops = compute_diff(text, text)
        self.assertEqual(len(ops), 4)
        self.assertTrue(all(isinstance(op, Equal) for op in ops))
        st = compute_stats(ops)
        self.assertEqual((st.added_lines, st.removed_lines, st.unchanged_lines), (0, 0, 4))

    def test_total_replacement(self):
        ops = compute_diff("a\nb", "x\ny\nz")
        st = compute_stats(ops)
        self.assertEqual(st.removed_lines, 2)
        self.assertEqual(st.added_lines, 3)
        self.assertEqual(st.unchanged_lines, 0)
        self.assertEqual(_original_side(ops), ["a", "b"])
        self.assertEqual(_modified_side(ops), ["x", "y", "z"])

    def test_options_change_equality_not_content(self):
        a, b = "Hello World", "hello   world"
        ops = compute_diff(a, b, ComparisonOptions())
        self.assertEqual(ops, [Delete(a, 1), Insert(b, 1)])

        ops = compute_diff(a, b, ComparisonOptions(ignore_whitespace=True, ignore_case=True))
        self.assertEqual(ops, [Equal(a, b, 1, 1)])

    def test_ignore_case_only(self):
        ops = compute_diff("A\nb", "a\nB", ComparisonOptions(ignore_case=True))
        self.assertTrue(all(isinstance(op, Equal) for op in ops))

    def test_trailing_newline_on_both_sides(self):
        ops = compute_diff("a\n", "a\n")
        self.assertEqual(ops, [Equal("a", "a", 1, 1), Equal("", "", 2, 2)])

    def test_empty_inputs(self):
        self.assertEqual(compute_diff("", ""), [Equal("", "", 1, 1)])
        self.assertEqual(compute_diff("", "a"), [Delete("", 1), Insert("a", 1)])

    def test_reconstruction_and_symmetry(self):
        rnd = random.Random(7)
        for _ in range(60):
            a = [rnd.choice("abcde") for _ in range(rnd.randint(0, 12))]
            b = [rnd.choice("abcde") for _ in range(rnd.randint(0, 12))]
            ta, tb = "\n".join(a), "\n".join(b)
            fwd = compute_diff(ta, tb)
            self.assertEqual("\n".join(_original_side(fwd)), ta)
            self.assertEqual("\n".join(_modified_side(fwd)), tb)

            back = compute_diff(tb, ta)
            s1, s2 = compute_stats(fwd), compute_stats(back)
            self.assertEqual(s1.added_lines, s2.removed_lines)
            self.assertEqual(s1.removed_lines, s2.added_lines)

    def test_line_numbers_follow_each_side(self):
        ops = compute_diff("a\nb\nc", "b\nc\nd")
        left = [op.original_line_number for op in ops if isinstance(op, (Equal, Delete))]
        right = [op.modified_line_number for op in ops if isinstance(op, (Equal, Insert))]
        self.assertEqual(left, [1, 2, 3])
        self.assertEqual(right, [1, 2, 3])


if __name__ == "__main__":
    unittest.main()
