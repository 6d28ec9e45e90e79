"""
Box-model geometry for terminal widgets.

Sizes and offsets are measured in character cells. Every subtraction
saturates at zero, so a layout computed for a terminal that is too small
produces a truncated render instead of negative sizes.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vec2:
    """A size or offset in character cells.

    Attributes:
        x: Horizontal component (columns)
        y: Vertical component (rows)
    """
    x: int = 0
    y: int = 0

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Vec2 components must be non-negative, got ({self.x}, {self.y})")

    @staticmethod
    def of(value: Union['Vec2', Tuple[int, int]]) -> 'Vec2':
        """Coerce a 2-tuple (or a Vec2) into a Vec2."""
        if isinstance(value, Vec2):
            return value
        x, y = value
        return Vec2(x, y)

    @staticmethod
    def max(a, b) -> 'Vec2':
        """Componentwise maximum."""
        a, b = Vec2.of(a), Vec2.of(b)
        return Vec2(max(a.x, b.x), max(a.y, b.y))

    def __add__(self, other):
        other = Vec2.of(other)
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        other = Vec2.of(other)
        if other.x > self.x or other.y > self.y:
            logger.debug("Clamping %s - %s at zero", self, other)
        return Vec2(max(0, self.x - other.x), max(0, self.y - other.y))

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Margins:
    """Four independent edge widths, used for borders and padding."""
    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0

    def __post_init__(self):
        if min(self.left, self.right, self.top, self.bottom) < 0:
            raise ValueError(f"Margins must be non-negative, got {self}")

    def combined(self) -> Vec2:
        """Total horizontal and vertical space taken by the margins."""
        return Vec2(self.left + self.right, self.top + self.bottom)

    def top_left(self) -> Vec2:
        return Vec2(self.left, self.top)

    def bot_right(self) -> Vec2:
        return Vec2(self.right, self.bottom)

    def __add__(self, other: 'Margins') -> 'Margins':
        return Margins(
            self.left + other.left,
            self.right + other.right,
            self.top + other.top,
            self.bottom + other.bottom,
        )


@dataclass(frozen=True)
class DimensionRequest:
    """Constraint offered to a child along one axis.

    Use the ``exact``, ``at_most`` and ``unknown`` constructors rather than
    building instances directly.

    Attributes:
        kind: One of ``'exact'``, ``'at_most'`` or ``'unknown'``
        value: The bound in cells, or None for ``'unknown'``
    """
    kind: str = 'unknown'
    value: Optional[int] = None

    EXACT = 'exact'
    AT_MOST = 'at_most'
    UNKNOWN = 'unknown'

    @classmethod
    def exact(cls, value: int) -> 'DimensionRequest':
        return cls(cls.EXACT, value)

    @classmethod
    def at_most(cls, value: int) -> 'DimensionRequest':
        return cls(cls.AT_MOST, value)

    @classmethod
    def unknown(cls) -> 'DimensionRequest':
        return cls(cls.UNKNOWN, None)

    @property
    def is_bounded(self) -> bool:
        return self.kind != self.UNKNOWN

    def reduced(self, offset: int) -> 'DimensionRequest':
        """Return the same kind of request with ``offset`` cells less room."""
        if not self.is_bounded:
            return self
        return DimensionRequest(self.kind, max(0, self.value - offset))

    def clamp(self, value: int) -> int:
        """Fit a desired length to this request."""
        if self.kind == self.EXACT:
            return self.value
        if self.kind == self.AT_MOST:
            return min(value, self.value)
        return value


@dataclass(frozen=True)
class SizeRequest:
    """Per-axis constraints passed down during size negotiation."""
    w: DimensionRequest = DimensionRequest()
    h: DimensionRequest = DimensionRequest()

    @classmethod
    def dummy(cls) -> 'SizeRequest':
        """A request with no constraint on either axis."""
        return cls(DimensionRequest.unknown(), DimensionRequest.unknown())

    @classmethod
    def at_most(cls, size) -> 'SizeRequest':
        size = Vec2.of(size)
        return cls(DimensionRequest.at_most(size.x), DimensionRequest.at_most(size.y))

    @classmethod
    def exact(cls, size) -> 'SizeRequest':
        size = Vec2.of(size)
        return cls(DimensionRequest.exact(size.x), DimensionRequest.exact(size.y))

    def reduced(self, offset) -> 'SizeRequest':
        offset = Vec2.of(offset)
        return SizeRequest(self.w.reduced(offset.x), self.h.reduced(offset.y))
