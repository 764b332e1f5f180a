# eac/cursor.py
"""
A movable pointer into a BeautifulSoup tree.

Navigation never raises. The first failed step records a StructuralMismatch and
every later step becomes a no-op, so a chain of calls can be issued blindly and
checked once at the end with ok() / raise_for_error(). The recorded error is the
first one; later failures never replace it.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, NamedTuple, Optional

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .errors import StructuralMismatch
from .layout import CHILD, SIBLING, Chain


class CursorState(NamedTuple):
    node: Optional[PageElement]
    next: Optional[PageElement]
    err: Optional[StructuralMismatch]


def is_text(node: Optional[PageElement]) -> bool:
    # Comments, doctypes, CDATA etc. are NavigableStrings too; skip them.
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def first_child(node: Optional[PageElement]) -> Optional[PageElement]:
    if isinstance(node, Tag) and node.contents:
        return node.contents[0]
    return None


class Cursor:
    def __init__(self, node: PageElement) -> None:
        self.node: Optional[PageElement] = node
        # Where the next sibling search starts. A fresh cursor may match its own node.
        self.next: Optional[PageElement] = node
        self.err: Optional[StructuralMismatch] = None

    def __repr__(self) -> str:
        name = getattr(self.node, "name", None) or type(self.node).__name__
        return f"<Cursor at {name}{' err=' + str(self.err) if self.err else ''}>"

    # ---------------
    # Navigation
    # ---------------
    def sibling(self, tag: str) -> "Cursor":
        """Move to the next element named `tag`, resuming after the last match."""
        if self.err is not None:
            return self
        c = self.next
        while c is not None:
            if isinstance(c, Tag) and c.name == tag:
                self.node = c
                self.next = c.next_sibling
                return self
            c = c.next_sibling
        self.err = StructuralMismatch(f"no sibling tag {tag}")
        return self

    def child(self, tag: str) -> "Cursor":
        """Move to the first child element named `tag`."""
        if self.err is not None:
            return self
        self.node = first_child(self.node)
        self.next = self.node
        return self.sibling(tag)

    def follow(self, chain: Chain) -> "Cursor":
        for step, tag in chain:
            if step == CHILD:
                self.child(tag)
            elif step == SIBLING:
                self.sibling(tag)
            else:
                raise ValueError(f"unknown navigation step {step!r}")
        return self

    # ---------------
    # Text (cursor doesn't move)
    # ---------------
    def peek_text(self) -> str:
        """Text of the first text node down the first-child chain."""
        if self.err is not None:
            return ""
        c = self.node
        while c is not None:
            if is_text(c):
                return str(c)
            c = first_child(c)
        return ""

    def sibling_text(self) -> str:
        """Text of the first text node among the current node and its following siblings."""
        if self.err is not None:
            return ""
        c = self.node
        while c is not None:
            if is_text(c):
                return str(c)
            c = c.next_sibling
        return ""

    # ---------------
    # Checkpointing
    # ---------------
    def checkpoint(self) -> CursorState:
        return CursorState(self.node, self.next, self.err)

    def restore(self, state: CursorState) -> None:
        self.node, self.next, self.err = state

    @contextmanager
    def lookahead(self) -> Iterator["Cursor"]:
        """Navigate freely inside the block; the cursor is put back afterwards."""
        state = self.checkpoint()
        try:
            yield self
        finally:
            self.restore(state)

    # ---------------
    # Error state
    # ---------------
    def ok(self) -> bool:
        return self.err is None

    def error(self) -> Optional[StructuralMismatch]:
        return self.err

    def raise_for_error(self) -> None:
        if self.err is not None:
            raise self.err
