# codediff/core/doc_nodes.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass
class Node:
    """
    Small document tree returned by the renderers.

    tag=None marks a bare text fragment. The host picks the serialization:
    to_html() for the report / Qt panes, to_text() for the terminal.
    """
    tag: Optional[str]
    classes: Tuple[str, ...] = ()
    text: str = ""
    children: List["Node"] = field(default_factory=list)
    attrs: Dict[str, str] = field(default_factory=dict)

    def add(self, child: "Node") -> "Node":
        self.children.append(child)
        return child

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def iter(self, tag: Optional[str] = None) -> Iterator["Node"]:
        """Depth-first walk over this node and its descendants."""
        if tag is None or self.tag == tag:
            yield self
        for c in self.children:
            yield from c.iter(tag)

    def text_content(self) -> str:
        return self.text + "".join(c.text_content() for c in self.children)


def el(tag: str, *classes: str, text: str = "", children: Optional[List[Node]] = None) -> Node:
    return Node(tag, tuple(classes), text, list(children or []))


def frag(text: str) -> Node:
    return Node(None, (), text)


# ---------- HTML ----------

def _html_escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
         .replace("<", "&lt;")
         .replace(">", "&gt;")
         .replace('"', "&quot;")
         .replace("'", "&#039;")
    )


def to_html(node: Node) -> str:
    if node.tag is None:
        return _html_escape(node.text)
    attrs = ""
    if node.classes:
        attrs += f' class="{_html_escape(" ".join(node.classes))}"'
    for k, v in node.attrs.items():
        attrs += f' {k}="{_html_escape(v)}"'
    inner = _html_escape(node.text) + "".join(to_html(c) for c in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


# ---------- plain text ----------

def _row_cells(tr: Node) -> Tuple[List[str], str]:
    """(line-number cells, code text) of one table row."""
    numbers: List[str] = []
    code = ""
    for td in tr.children:
        if td.has_class("line-number"):
            numbers.append(td.text_content())
        else:
            code += td.text_content()
    return numbers, code


def _table_lines(table: Node) -> List[Tuple[str, Node]]:
    rows = [tr for tr in table.children if tr.tag == "tr"]
    cells = [_row_cells(tr) for tr in rows]
    width = max((len(n) for nums, _ in cells for n in nums), default=0)
    out: List[Tuple[str, Node]] = []
    for tr, (nums, code) in zip(rows, cells):
        gutter = "".join(n.rjust(width) + " " for n in nums)
        out.append((gutter + code, tr))
    return out


def to_text(node: Node) -> str:
    """Plain-text rendering: one line per table row / block."""
    if node.tag == "table":
        return "\n".join(line for line, _ in _table_lines(node))
    if node.tag in ("div", "tr"):
        parts = [to_text(c) for c in node.children]
        own = node.text
        body = "\n".join(p for p in parts if p)
        return "\n".join(p for p in (own, body) if p)
    return node.text_content()


def to_text_columns(left: Node, right: Node, width: int = 60) -> str:
    """
    Lay two aligned split-view tables next to each other.

    The gutter follows diff -y: "<" for a removed row, ">" for an added
    row, blank for unchanged.
    """
    l_lines = _table_lines(left)
    r_lines = _table_lines(right)
    out: List[str] = []
    for (ltxt, ltr), (rtxt, rtr) in zip(l_lines, r_lines):
        if ltr.has_class("removed"):
            mark = "<"
        elif rtr.has_class("added"):
            mark = ">"
        else:
            mark = " "
        ltxt = ltxt[:width].ljust(width)
        out.append(f"{ltxt} {mark} {rtxt[:width]}".rstrip())
    return "\n".join(out)
