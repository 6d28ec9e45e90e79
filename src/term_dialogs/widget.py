"""
The contract shared by every displayable element.

Widgets negotiate their size with their parent in two phases: the parent
first asks ``get_min_size`` under a SizeRequest, then commits with
``layout``. Drawing happens on a Surface already translated and clipped to
the widget's rectangle.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .geometry import SizeRequest, Vec2

KEY_UP = 'KEY_UP'
KEY_DOWN = 'KEY_DOWN'
KEY_LEFT = 'KEY_LEFT'
KEY_RIGHT = 'KEY_RIGHT'
KEY_ENTER = 'KEY_ENTER'
KEY_ESCAPE = 'KEY_ESCAPE'
KEY_PGUP = 'KEY_PGUP'
KEY_PGDOWN = 'KEY_PGDOWN'


def key_name(key) -> Optional[str]:
    """Return the Blessed name of a keystroke, or None for plain characters."""
    return getattr(key, 'name', None)


@dataclass(frozen=True)
class EventResult:
    """Outcome of offering a key to a widget.

    An ignored key bubbles up so an ancestor can reinterpret it. A consumed
    key may carry a follow-up callback, run by the controller with itself
    as the only argument.
    """
    was_consumed: bool = False
    callback: Optional[Callable] = None

    @classmethod
    def consumed(cls, callback: Optional[Callable] = None) -> 'EventResult':
        return cls(True, callback)


EventResult.IGNORED = EventResult(False, None)


class Widget:
    """Base class for widgets.

    Subclasses override the parts of the contract they care about. The
    defaults describe an inert, zero-sized widget that never takes focus.

    Attributes:
        size: Size handed to the last ``layout`` call
    """

    def __init__(self):
        self.size = Vec2(0, 0)

    def draw(self, surface, focused: bool):
        """Render into ``surface``; emphasize focus when ``focused`` is true."""

    def get_min_size(self, req: SizeRequest) -> Vec2:
        """Smallest size this widget can render at under ``req``.

        Must not change anything ``draw`` depends on.
        """
        return Vec2(0, 0)

    def layout(self, size: Vec2):
        """Commit to the size the widget will be drawn at."""
        self.size = Vec2.of(size)

    def handle_input(self, key) -> EventResult:
        """Handle a Blessed keystroke.

        Returns EventResult.IGNORED when the key means nothing here.
        """
        return EventResult.IGNORED

    def take_focus(self) -> bool:
        """Accept keyboard focus from outside; return whether it was taken."""
        return False
