"""
Layer stack and event loop.

The controller owns the stack of top-level layers (typically dialogs),
routes keystrokes to the top one, runs button callbacks, and redraws.
It is the application handle passed to button callbacks.
"""

import logging
import signal
import time
from typing import List, Optional

from blessed import Terminal

from .geometry import SizeRequest, Vec2
from .surface import Surface
from .widget import KEY_ESCAPE, Widget, key_name

logger = logging.getLogger(__name__)


class LayerController:
    """Manages a stack of layers and the main event loop.

    Push the first layer with :meth:`add_layer` before calling :meth:`run`.
    Each layer is given its minimum size (within the terminal), centered on
    screen, and redrawn after every handled keystroke.
    """

    def __init__(
        self,
        *,
        term: Optional[Terminal] = None,
        inkey_timeout: float = 0.1,
        idle_sleep: float = 0.01,
        register_resize_handler: bool = True,
    ):
        self.term = term or Terminal()
        self.inkey_timeout = inkey_timeout
        self.idle_sleep = idle_sleep
        self.layers: List[Widget] = []
        self.running = False
        self.redraw = True
        self._resize_pending = False
        if register_resize_handler:
            signal.signal(signal.SIGWINCH, self._handle_sigwinch)

    def _handle_sigwinch(self, signum, frame):
        """Refresh Terminal on resize and trigger a redraw."""
        self.term = Terminal()
        self._resize_pending = True

    def add_layer(self, layer: Widget):
        """Push a layer onto the stack and give it focus."""
        self.layers.append(layer)
        layer.take_focus()
        self.redraw = True
        logger.debug("Pushed layer %s (depth %d)", type(layer).__name__, len(self.layers))

    def pop_layer(self) -> Optional[Widget]:
        """Pop the top layer off the stack."""
        if not self.layers:
            return None
        popped = self.layers.pop()
        self.redraw = True
        logger.debug("Popped layer %s (depth %d)", type(popped).__name__, len(self.layers))
        return popped

    def current_layer(self) -> Optional[Widget]:
        """Return the top-most layer, if any."""
        return self.layers[-1] if self.layers else None

    def quit(self):
        """Stop the event loop after the current iteration."""
        self.running = False

    def screen_size(self) -> Vec2:
        return Vec2(self.term.width, self.term.height)

    def place(self, layer: Widget) -> Surface:
        """Lay out ``layer`` and return the centered surface it draws on."""
        screen = self.screen_size()
        wanted = layer.get_min_size(SizeRequest.at_most(screen))
        size = Vec2(min(wanted.x, screen.x), min(wanted.y, screen.y))
        layer.layout(size)
        offset = Vec2((screen.x - size.x) // 2, (screen.y - size.y) // 2)
        return Surface(self.term).sub_surface(offset, size)

    def handle_key(self, key):
        """Dispatch keyboard input to the top layer."""
        layer = self.current_layer()
        if layer is None:
            return
        result = layer.handle_input(key)
        self.redraw = True
        if result.was_consumed:
            if result.callback is not None:
                result.callback(self)
        elif key_name(key) == KEY_ESCAPE:
            self.pop_layer()

    def draw(self):
        """Draw every layer, bottom first; only the top one is focused."""
        self.redraw = False
        print(self.term.home + self.term.clear, end='')
        for i, layer in enumerate(self.layers):
            layer.draw(self.place(layer), i == len(self.layers) - 1)
        print('', end='', flush=True)

    def run(self):
        """Enter the main event loop."""
        if not self.layers:
            raise RuntimeError(
                "LayerController.run() called with no layers. "
                "Call add_layer() before run()."
            )

        self.running = True
        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
            self.draw()

            while self.running and self.layers:
                if self._resize_pending:
                    self._resize_pending = False
                    self.redraw = True

                key = self.term.inkey(timeout=self.inkey_timeout)
                if key:
                    self.handle_key(key)

                if self.redraw and self.layers:
                    self.draw()

                time.sleep(self.idle_sleep)
