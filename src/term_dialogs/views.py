"""
Leaf widgets: static text, buttons, and a size-caching wrapper.
"""

import textwrap
from typing import Callable, List

from .geometry import SizeRequest, Vec2
from .widget import EventResult, KEY_ENTER, Widget, key_name


class TextView(Widget):
    """A widget that displays wrapped, optionally scrollable text.

    Text is wrapped to the width it is laid out at. When the laid-out
    height is smaller than the wrapped text, arrow and page keys scroll it
    and the view accepts focus; otherwise it is inert.
    """

    def __init__(self, text):
        """Initialize a text view.

        Args:
            text: Text content (string, list, or tuple of lines)
        """
        super().__init__()
        self.text = "\n".join(text) if isinstance(text, (list, tuple)) else text
        self.scroll = 0
        self._lines: List[str] = []

    def _wrap(self, width) -> List[str]:
        lines = []
        for line in self.text.splitlines() or ['']:
            if width is None:
                lines.append(line)
            else:
                lines.extend(textwrap.wrap(line, max(1, width)) or [''])
        return lines

    def get_min_size(self, req: SizeRequest) -> Vec2:
        width = None
        if req.w.is_bounded:
            width = req.w.value
        lines = self._wrap(width)
        longest = max(len(line) for line in lines)
        return Vec2(req.w.clamp(longest), req.h.clamp(len(lines)))

    def layout(self, size):
        super().layout(size)
        self._lines = self._wrap(self.size.x)
        self.scroll = min(self.scroll, self._below_the_fold())

    def _below_the_fold(self) -> int:
        return max(0, len(self._lines) - self.size.y)

    def draw(self, surface, focused: bool):
        for i in range(self.size.y):
            line_idx = self.scroll + i
            line = self._lines[line_idx] if line_idx < len(self._lines) else ""
            surface.print((0, i), line.ljust(self.size.x))

    def handle_input(self, key) -> EventResult:
        """Handle scrolling input."""
        below_the_fold = self._below_the_fold()
        page = max(1, self.size.y)
        match key_name(key):
            case 'KEY_DOWN' if self.scroll < below_the_fold:
                self.scroll += 1
            case 'KEY_UP' if self.scroll > 0:
                self.scroll -= 1
            case 'KEY_PGDOWN' if self.scroll < below_the_fold:
                self.scroll = min(self.scroll + page, below_the_fold)
            case 'KEY_PGUP' if self.scroll > 0:
                self.scroll = max(self.scroll - page, 0)
            case _:
                return EventResult.IGNORED
        return EventResult.consumed()

    def take_focus(self) -> bool:
        return self._below_the_fold() > 0


class Button(Widget):
    """A focusable label that runs a callback when activated.

    The callback is not called here: activating the button returns it in
    the EventResult and the controller invokes it with itself as argument.

    Attributes:
        label: Text shown between the angle brackets
        callback: Callable taking the controller
    """

    FOCUS_STYLE = 'reverse'

    def __init__(self, label: str, callback: Callable):
        super().__init__()
        if not callable(callback):
            raise TypeError(f"Button callback must be callable, got {callback!r}")
        self.label = label
        self.callback = callback

    def get_min_size(self, req: SizeRequest) -> Vec2:
        return Vec2(len(self.label) + 2, 1)

    def draw(self, surface, focused: bool):
        text = f'<{self.label}>'
        if focused:
            surface.with_emphasis(self.FOCUS_STYLE, lambda s: s.print((0, 0), text))
        else:
            surface.print((0, 0), text)

    def handle_input(self, key) -> EventResult:
        if key_name(key) == KEY_ENTER or key == ' ':
            return EventResult.consumed(self.callback)
        return EventResult.IGNORED

    def take_focus(self) -> bool:
        return True


class SizedView(Widget):
    """Wraps a widget and remembers the size it was last laid out at."""

    def __init__(self, view: Widget):
        super().__init__()
        self.view = view

    def draw(self, surface, focused: bool):
        self.view.draw(surface, focused)

    def get_min_size(self, req: SizeRequest) -> Vec2:
        return self.view.get_min_size(req)

    def layout(self, size):
        super().layout(size)
        self.view.layout(self.size)

    def handle_input(self, key) -> EventResult:
        return self.view.handle_input(key)

    def take_focus(self) -> bool:
        return self.view.take_focus()
