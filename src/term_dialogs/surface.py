"""
Clipped, translated drawing surfaces on top of a Blessed terminal.

A widget only ever sees the Surface handed to it by its parent; the
surface translates widget-local coordinates to screen coordinates and
drops anything that falls outside its rectangle.
"""

from typing import Callable, Optional

from blessed import Terminal

from .geometry import Vec2

BOX_HORIZONTAL = '─'
BOX_VERTICAL = '│'
BOX_TOP_LEFT = '┌'
BOX_TOP_RIGHT = '┐'
BOX_BOTTOM_LEFT = '└'
BOX_BOTTOM_RIGHT = '┘'


class Surface:
    """Drawing context restricted to one rectangle of the terminal.

    Attributes:
        term: Blessed Terminal instance used for cursor movement and styling
        offset: Screen position of the surface's top-left cell
        size: Size of the surface in cells
        style: Optional Blessed formatting name applied to printed text
    """

    def __init__(self, term: Terminal, offset=(0, 0), size=None, style: Optional[str] = None):
        self.term = term
        self.offset = Vec2.of(offset)
        self.size = Vec2(term.width, term.height) if size is None else Vec2.of(size)
        self.style = style

    def print(self, pos, text: str):
        """Print ``text`` at the widget-local position ``pos``.

        Text running past the right edge is cut; rows outside the surface
        are skipped entirely.
        """
        pos = Vec2.of(pos)
        if pos.y >= self.size.y or pos.x >= self.size.x:
            return
        text = text[:self.size.x - pos.x]
        if not text:
            return
        if self.style:
            text = getattr(self.term, self.style)(text)
        print(
            self.term.move_xy(self.offset.x + pos.x, self.offset.y + pos.y) + text,
            end=''
        )

    def print_hline(self, start, length: int, char: str = BOX_HORIZONTAL):
        self.print(start, char * length)

    def print_vline(self, start, length: int, char: str = BOX_VERTICAL):
        start = Vec2.of(start)
        for row in range(length):
            self.print((start.x, start.y + row), char)

    def print_box(self, top_left, size):
        """Draw a single-line box outline covering ``size`` cells."""
        top_left = Vec2.of(top_left)
        size = Vec2.of(size)
        if size.x < 2 or size.y < 2:
            return
        right = top_left.x + size.x - 1
        bottom = top_left.y + size.y - 1

        self.print(top_left, BOX_TOP_LEFT)
        self.print((right, top_left.y), BOX_TOP_RIGHT)
        self.print((top_left.x, bottom), BOX_BOTTOM_LEFT)
        self.print((right, bottom), BOX_BOTTOM_RIGHT)

        self.print_hline((top_left.x + 1, top_left.y), size.x - 2)
        self.print_hline((top_left.x + 1, bottom), size.x - 2)
        self.print_vline((top_left.x, top_left.y + 1), size.y - 2)
        self.print_vline((right, top_left.y + 1), size.y - 2)

    def with_emphasis(self, style: str, fn: Callable[['Surface'], None]):
        """Call ``fn`` with a copy of this surface that prints in ``style``."""
        fn(Surface(self.term, self.offset, self.size, style=style))

    def sub_surface(self, offset, size) -> 'Surface':
        """Return a surface for a child rectangle, clipped to this one."""
        offset = Vec2.of(offset)
        available = self.size - offset
        size = Vec2(min(Vec2.of(size).x, available.x), min(Vec2.of(size).y, available.y))
        return Surface(self.term, self.offset + offset, size, style=self.style)

