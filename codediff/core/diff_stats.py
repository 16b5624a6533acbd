# codediff/core/diff_stats.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from codediff.core.diff_engine import DiffOperation, Delete, Equal, Insert


@dataclass(frozen=True)
class DiffStats:
    total_lines: int = 0
    added_lines: int = 0
    removed_lines: int = 0
    unchanged_lines: int = 0
    changed_lines: int = 0       # added + removed
    chars_diff: int = 0          # inserted chars minus deleted chars
    words_diff: int = 0          # inserted words minus deleted words


def count_words(text: str) -> int:
    return len(text.split())


def compute_stats(operations: Iterable[DiffOperation]) -> DiffStats:
    added = removed = unchanged = 0
    chars = words = 0
    for op in operations:
        if isinstance(op, Insert):
            added += 1
            chars += len(op.modified_line)
            words += count_words(op.modified_line)
        elif isinstance(op, Delete):
            removed += 1
            chars -= len(op.original_line)
            words -= count_words(op.original_line)
        elif isinstance(op, Equal):
            unchanged += 1
    return DiffStats(
        total_lines=added + removed + unchanged,
        added_lines=added,
        removed_lines=removed,
        unchanged_lines=unchanged,
        changed_lines=added + removed,
        chars_diff=chars,
        words_diff=words,
    )
