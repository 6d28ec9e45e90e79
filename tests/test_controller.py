"""Tests for the LayerController."""

import pytest
from unittest.mock import MagicMock, Mock, patch
from blessed import Terminal
from blessed.keyboard import Keystroke
from term_dialogs import Dialog, Focus, LayerController, TextView, Vec2, Widget


def make_key(name):
    """Create a mock keystroke with the given Blessed name."""
    key = Mock(spec=Keystroke)
    key.name = name
    return key


def create_mock_terminal(width=80, height=24):
    term = MagicMock(spec=Terminal)
    term.width = width
    term.height = height
    term.home = ''
    term.clear = ''
    term.move_xy = Mock(side_effect=lambda x, y: f'@{x},{y}:')
    term.bold = Mock(side_effect=lambda text: text)
    term.reverse = Mock(side_effect=lambda text: text)
    return term


class RecordingLayer(Widget):
    """Layer stand-in that records how it was drawn."""

    def __init__(self, min_size=(10, 4)):
        super().__init__()
        self.min_size = Vec2.of(min_size)
        self.draws = []

    def get_min_size(self, req):
        return self.min_size

    def draw(self, surface, focused):
        self.draws.append((surface.offset, surface.size, focused))


def create_controller(term=None):
    return LayerController(term=term or create_mock_terminal(), register_resize_handler=False,
                           idle_sleep=0)


class TestLayerController:
    """Tests for the LayerController class."""

    def test_initialization(self):
        """Test default controller state."""
        term = create_mock_terminal()
        controller = create_controller(term)
        assert controller.term is term
        assert controller.layers == []
        assert controller.current_layer() is None

    def test_add_layer_gives_focus(self):
        """Test that a pushed dialog takes focus."""
        controller = create_controller()
        dialog = Dialog(TextView("Hello")).button("Ok", lambda app: None)
        controller.add_layer(dialog)
        assert controller.current_layer() is dialog
        assert dialog.focus == Focus.button(0)

    def test_pop_layer(self):
        """Test popping layers in stack order."""
        controller = create_controller()
        first, second = RecordingLayer(), RecordingLayer()
        controller.add_layer(first)
        controller.add_layer(second)
        assert controller.pop_layer() is second
        assert controller.current_layer() is first
        assert controller.pop_layer() is first
        assert controller.pop_layer() is None

    def test_run_without_layers(self):
        """Test that run() refuses an empty stack."""
        with pytest.raises(RuntimeError):
            create_controller().run()

    def test_callback_receives_controller(self):
        """Test that a consumed key's callback runs with the controller."""
        controller = create_controller()
        callback = Mock()
        controller.add_layer(Dialog(TextView("Hi")).button("Ok", callback))
        controller.handle_key(make_key('KEY_ENTER'))
        callback.assert_called_once_with(controller)

    def test_dismiss_button_pops_dialog(self):
        """Test that a dismiss button removes its dialog."""
        controller = create_controller()
        controller.add_layer(Dialog(TextView("Hi")).dismiss_button("Ok"))
        controller.handle_key(make_key('KEY_ENTER'))
        assert controller.layers == []

    def test_ignored_escape_pops_layer(self):
        """Test that Escape closes the top layer when nothing uses it."""
        controller = create_controller()
        controller.add_layer(RecordingLayer())
        controller.handle_key(make_key('KEY_ESCAPE'))
        assert controller.layers == []

    def test_other_ignored_key_keeps_layer(self):
        """Test that other ignored keys leave the stack alone."""
        controller = create_controller()
        controller.add_layer(RecordingLayer())
        controller.handle_key(make_key('KEY_F1'))
        assert len(controller.layers) == 1

    def test_place_centers_layer(self):
        """Test that layers are laid out at their minimum size and centered."""
        controller = create_controller(create_mock_terminal(80, 24))
        layer = RecordingLayer((16, 4))
        surface = controller.place(layer)
        assert layer.size == Vec2(16, 4)
        assert surface.offset == Vec2(32, 10)
        assert surface.size == Vec2(16, 4)

    def test_place_clamps_to_terminal(self):
        """Test that oversized layers are squeezed into the terminal."""
        controller = create_controller(create_mock_terminal(10, 3))
        layer = RecordingLayer((50, 20))
        surface = controller.place(layer)
        assert layer.size == Vec2(10, 3)
        assert surface.offset == Vec2(0, 0)

    @patch('builtins.print')
    def test_draw_focuses_top_layer_only(self, mock_print):
        """Test that only the top layer is drawn focused."""
        controller = create_controller()
        bottom, top = RecordingLayer(), RecordingLayer()
        controller.add_layer(bottom)
        controller.add_layer(top)
        controller.draw()
        assert bottom.draws[-1][2] is False
        assert top.draws[-1][2] is True
        assert controller.redraw is False

    @patch('builtins.print')
    def test_run_exits_when_last_layer_dismissed(self, mock_print):
        """Test that the loop ends once the stack is empty."""
        term = create_mock_terminal()
        term.inkey = Mock(return_value=make_key('KEY_ENTER'))
        controller = create_controller(term)
        controller.add_layer(Dialog(TextView("Bye")).dismiss_button("Ok"))
        controller.run()
        assert controller.layers == []
        term.inkey.assert_called_once_with(timeout=controller.inkey_timeout)

    @patch('builtins.print')
    def test_quit_stops_loop(self, mock_print):
        """Test that quit() ends the loop with layers still on the stack."""
        term = create_mock_terminal()
        term.inkey = Mock(return_value=make_key('KEY_ENTER'))
        controller = create_controller(term)
        controller.add_layer(Dialog(TextView("Quit?")).button("Yes", lambda app: app.quit()))
        controller.run()
        assert controller.running is False
        assert len(controller.layers) == 1
