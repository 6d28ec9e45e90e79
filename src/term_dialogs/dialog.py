"""
Popup-like dialog: a content widget framed by a border and an optional
title, with a row of buttons underneath.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .geometry import Margins, SizeRequest, Vec2
from .views import Button, SizedView
from .widget import EventResult, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP, Widget, key_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Focus:
    """Which part of a dialog holds focus: the content, or one button.

    Build with ``Focus.content()`` or ``Focus.button(index)``.
    """
    index: Optional[int] = None

    @classmethod
    def content(cls) -> 'Focus':
        return cls(None)

    @classmethod
    def button(cls, index: int) -> 'Focus':
        return cls(index)

    @property
    def on_content(self) -> bool:
        return self.index is None

    def __repr__(self):
        return 'Focus.content()' if self.on_content else f'Focus.button({self.index})'


class Dialog(Widget):
    """Popup-like widget with a main content and optional buttons under it.

    Configuration calls return the dialog so they can be chained::

        dialog = Dialog(TextView("Hello!")).title("Greeting").dismiss_button("Ok")

    Focus starts on the content. Taking focus from outside always prefers
    the leftmost button when there is one.

    Attributes:
        content: The wrapped widget
        buttons: SizedView-wrapped buttons, in left-to-right order
        padding: Space between the border and the content
        borders: Space taken by the border box
        focus: Current Focus value
    """

    TITLE_STYLE = 'bold'

    def __init__(self, content: Widget, padding: Margins = Margins(1, 1, 0, 0),
                 borders: Margins = Margins(1, 1, 1, 1)):
        super().__init__()
        self.content = content
        self.buttons: List[SizedView] = []
        self._title = ""
        self.padding = padding
        self.borders = borders
        self.focus = Focus.content()

    def button(self, label: str, callback: Callable) -> 'Dialog':
        """Add a button with the given label and callback.

        The callback is called with the controller when the button is
        activated.
        """
        self.buttons.append(SizedView(Button(label, callback)))
        return self

    def dismiss_button(self, label: str = 'Ok') -> 'Dialog':
        """Add a button that pops the top layer (normally this dialog)."""
        return self.button(label, lambda app: app.pop_layer())

    def title(self, label: str) -> 'Dialog':
        """Set the title. An empty title is not drawn."""
        self._title = label
        return self

    @property
    def title_text(self) -> str:
        return self._title

    def _frame(self) -> Vec2:
        return self.borders.combined() + self.padding.combined()

    def buttons_min_size(self, req: SizeRequest) -> Vec2:
        """Room needed by the button row, including one blank cell after
        each button and one blank row above them."""
        width, height = 0, 0
        for button in self.buttons:
            size = button.get_min_size(req)
            width += size.x + 1
            height = max(height, size.y + 1)
        return Vec2(width, height)

    def get_min_size(self, req: SizeRequest) -> Vec2:
        # Padding and borders are not available to the content.
        content_size = self.content.get_min_size(req.reduced(self._frame()))
        # Buttons are measured against the full request.
        buttons_size = self.buttons_min_size(req)

        inner_size = Vec2(
            max(content_size.x, buttons_size.x),
            content_size.y + buttons_size.y,
        )
        size = inner_size + self._frame()

        if self._title:
            # Two junction glyphs and a space on each side of the title.
            size = Vec2(max(size.x, len(self._title) + 6), size.y)
        return size

    def layout(self, size):
        super().layout(size)
        inner = self.size - self._frame()
        req = SizeRequest.at_most(inner)

        # Buttons get everything they ask for; the content gets the rest.
        buttons_height = 0
        for button in reversed(self.buttons):
            button_size = button.get_min_size(req)
            buttons_height = max(buttons_height, button_size.y + 1)
            button.layout(button_size)

        self.content.layout(inner - Vec2(0, buttons_height))

    def draw(self, surface, focused: bool):
        corner = surface.size - self.borders.bot_right() - self.padding.bot_right()

        height = 0
        x = 0
        for i in reversed(range(len(self.buttons))):
            button = self.buttons[i]
            offset = corner - button.size - Vec2(x, 0)
            button.draw(
                surface.sub_surface(offset, button.size),
                focused and self.focus == Focus.button(i),
            )
            x += button.size.x + 1
            height = max(height, button.size.y + 1)

        inner_size = surface.size - Vec2(0, height) - self._frame()
        self.content.draw(
            surface.sub_surface(self.borders.top_left() + self.padding.top_left(), inner_size),
            focused and self.focus.on_content,
        )

        surface.print_box((0, 0), surface.size)

        if self._title:
            title_len = len(self._title)
            x = max(0, surface.size.x - title_len) // 2
            surface.print((max(0, x - 2), 0), '┤ ')
            surface.print((x + title_len, 0), ' ├')
            surface.with_emphasis(self.TITLE_STYLE, lambda s: s.print((x, 0), self._title))

    def _set_focus(self, focus: Focus) -> EventResult:
        logger.debug("Dialog focus %r -> %r", self.focus, focus)
        self.focus = focus
        return EventResult.consumed()

    def handle_input(self, key) -> EventResult:
        name = key_name(key)

        if self.focus.on_content:
            result = self.content.handle_input(key)
            if result.was_consumed:
                return result
            # From the content, focus can only go down, to the leftmost button.
            if name == KEY_DOWN and self.buttons:
                return self._set_focus(Focus.button(0))
            return result

        i = self.focus.index
        result = self.buttons[i].handle_input(key)
        if result.was_consumed:
            return result
        if name == KEY_UP:
            if self.content.take_focus():
                return self._set_focus(Focus.content())
            return EventResult.IGNORED
        if name == KEY_RIGHT and i + 1 < len(self.buttons):
            return self._set_focus(Focus.button(i + 1))
        if name == KEY_LEFT and i > 0:
            return self._set_focus(Focus.button(i - 1))
        return EventResult.IGNORED

    def take_focus(self) -> bool:
        # Buttons first, whatever the content would accept.
        if self.buttons:
            self.focus = Focus.button(0)
            return True
        if self.content.take_focus():
            self.focus = Focus.content()
            return True
        return False
