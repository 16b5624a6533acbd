# codediff/core/scroll_sync.py
from __future__ import annotations

from typing import Callable, List

ScrollListener = Callable[[int], None]


class ScrollPane:
    """Observable vertical scroll offset of one diff pane."""

    def __init__(self, name: str = "", offset: int = 0):
        self.name = name
        self._offset = max(0, int(offset))
        self._listeners: List[ScrollListener] = []

    @property
    def offset(self) -> int:
        return self._offset

    def scroll_to(self, value: int) -> None:
        value = max(0, int(value))
        if value == self._offset:
            return
        self._offset = value
        for cb in list(self._listeners):
            cb(value)

    def subscribe(self, cb: ScrollListener) -> Callable[[], None]:
        self._listeners.append(cb)

        def unsubscribe() -> None:
            if cb in self._listeners:
                self._listeners.remove(cb)
        return unsubscribe


class ScrollSync:
    """
    Keeps two panes at the same vertical offset.

    Split-view panes are built row for row, so equal offsets mean matching
    lines. The _syncing flag stops the mirrored update from bouncing back.
    """

    def __init__(self, left: ScrollPane, right: ScrollPane):
        self.left = left
        self.right = right
        self._syncing = False
        self._unsubs = [
            left.subscribe(lambda v: self._mirror(self.right, v)),
            right.subscribe(lambda v: self._mirror(self.left, v)),
        ]
        self._mirror(right, left.offset)

    def _mirror(self, target: ScrollPane, value: int) -> None:
        if self._syncing:
            return
        self._syncing = True
        try:
            target.scroll_to(value)
        finally:
            self._syncing = False

    def close(self) -> None:
        for unsub in self._unsubs:
            unsub()
        self._unsubs = []
