# IN THIS FILE: HEADINGS and MOVEMENT TYPES
from enum import Enum


class Heading(int, Enum):
    """
    Robot facing direction.
    Values are the positions in the clockwise cycle, so turning is
    plain modulo-4 arithmetic on the value.
    """
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __int__(self):
        return self.value

    def rotate(self, delta: int) -> 'Heading':
        """
        Turn by `delta` quarter turns (> 0 right, < 0 left).

        Examples:
            NORTH.rotate(1)  → EAST
            NORTH.rotate(-1) → WEST (wraps around, not truncated)
            WEST.rotate(1)   → NORTH
        """
        return Heading((self.value + delta) % len(Heading))

    @property
    def vector(self):
        """Unit (dx, dy) of one forward step in this heading."""
        from gridbot.utils.consts import HEADING_VECTORS
        return HEADING_VECTORS[self]

    @staticmethod
    def coerce(value) -> 'Heading':
        """
        Turn user input into a Heading.
        Accepts a Heading, its value (0-3) or its name in any case.
        Anything else falls back to NORTH.
        """
        if isinstance(value, Heading):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name in Heading.__members__:
                return Heading[name]
            if name.isdigit():
                value = int(name)
        if isinstance(value, int) and not isinstance(value, bool) and value in [0, 1, 2, 3]:
            return Heading(value)
        return Heading.NORTH


class Movement(Enum):
    """
    Robot command types.
    Value is the command prefix used in command scripts.
    """
    TURN_LEFT = "TL"
    TURN_RIGHT = "TR"
    FORWARD = "FW"
    BACKWARD = "BW"

    @property
    def is_turn(self) -> bool:
        return self in (Movement.TURN_LEFT, Movement.TURN_RIGHT)
