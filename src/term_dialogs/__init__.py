"""
Terminal Dialogs Library

Composable terminal widgets built on the Blessed library: a two-phase
size-negotiation protocol, clipped drawing surfaces, and a Dialog widget
that frames a content widget with a border, title and a row of buttons.
"""

from .geometry import Vec2, Margins, DimensionRequest, SizeRequest
from .surface import Surface
from .widget import EventResult, Widget
from .views import TextView, Button, SizedView
from .dialog import Focus, Dialog
from .controller import LayerController

__all__ = [
    'Vec2',
    'Margins',
    'DimensionRequest',
    'SizeRequest',
    'Surface',
    'EventResult',
    'Widget',
    'TextView',
    'Button',
    'SizedView',
    'Focus',
    'Dialog',
    'LayerController',
]

__version__ = '0.1.0'
