# codediff/core/diff_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Sequence, Union
import re

from codediff.utils.logger import logger

_WS_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class Line:
    content: str                # original text, used for display/export
    line_number: int            # 1-based within its own side


@dataclass(frozen=True)
class ComparisonOptions:
    ignore_whitespace: bool = False
    ignore_case: bool = False


@dataclass(frozen=True)
class Equal:
    tag: ClassVar[str] = "equal"
    original_line: str
    modified_line: str
    original_line_number: int
    modified_line_number: int


@dataclass(frozen=True)
class Delete:
    tag: ClassVar[str] = "delete"
    original_line: str
    original_line_number: int


@dataclass(frozen=True)
class Insert:
    tag: ClassVar[str] = "insert"
    modified_line: str
    modified_line_number: int


DiffOperation = Union[Equal, Delete, Insert]


def normalize_line(text: str, options: ComparisonOptions) -> str:
    """Comparison key for a line. Never used for display."""
    x = text
    if options.ignore_whitespace:
        x = _WS_RUN.sub(" ", x).strip()
    if options.ignore_case:
        x = x.lower()
    return x


def split_lines(text: str) -> List[Line]:
    # only "\n" splits; a trailing newline leaves a trailing empty line
    return [Line(s, i) for i, s in enumerate(text.split("\n"), start=1)]


def _keys(lines: Sequence[Line], options: ComparisonOptions) -> List[str]:
    return [normalize_line(ln.content, options) for ln in lines]


def build_lcs_matrix(
    original: Sequence[Line],
    modified: Sequence[Line],
    options: ComparisonOptions,
) -> List[List[int]]:
    """
    LCS length table of size (n+1) x (m+1).

    matrix[i][j] is the LCS length of the first i original lines and the
    first j modified lines; row 0 and column 0 stay zero.
    """
    a = _keys(original, options)
    b = _keys(modified, options)
    n, m = len(a), len(b)

    matrix = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        prev = matrix[i - 1]
        row = matrix[i]
        ai = a[i - 1]
        for j in range(1, m + 1):
            if ai == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = prev[j] if prev[j] >= row[j - 1] else row[j - 1]
    return matrix


def extract_operations(
    matrix: List[List[int]],
    original: Sequence[Line],
    modified: Sequence[Line],
    options: ComparisonOptions,
) -> List[DiffOperation]:
    """
    Walk the matrix back from (n, m) to the origin and return the edit script
    in forward order.

    Must be given the same options the matrix was built with. At equal scores
    an Insert move wins over a Delete move; since the walk runs backward, a
    replaced block comes out as its Delete rows followed by its Insert rows.
    """
    a = _keys(original, options)
    b = _keys(modified, options)
    i, j = len(a), len(b)

    ops: List[DiffOperation] = []
    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1]:
            o, md = original[i - 1], modified[j - 1]
            ops.append(Equal(o.content, md.content, o.line_number, md.line_number))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or matrix[i][j - 1] >= matrix[i - 1][j]):
            md = modified[j - 1]
            ops.append(Insert(md.content, md.line_number))
            j -= 1
        else:
            o = original[i - 1]
            ops.append(Delete(o.content, o.line_number))
            i -= 1

    ops.reverse()
    return ops


def compute_diff(
    original_text: str,
    modified_text: str,
    options: Optional[ComparisonOptions] = None,
) -> List[DiffOperation]:
    """Line-level LCS diff of two texts."""
    options = options or ComparisonOptions()
    original = split_lines(original_text)
    modified = split_lines(modified_text)
    logger.debug(
        "compute_diff: %d vs %d lines (ignore_ws=%s, ignore_case=%s)",
        len(original), len(modified), options.ignore_whitespace, options.ignore_case,
    )
    matrix = build_lcs_matrix(original, modified, options)
    return extract_operations(matrix, original, modified, options)
