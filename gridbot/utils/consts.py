# IN THIS FILE: ALL CONSTANTS

from gridbot.utils.enums import Heading

# -----------------------------------------------------------------------------
# 1. START STATE
# -----------------------------------------------------------------------------
DEFAULT_X = 0
DEFAULT_Y = 0
DEFAULT_HEADING = Heading.NORTH

# -----------------------------------------------------------------------------
# 2. SPEED (cells moved by one forward/backward command)
# -----------------------------------------------------------------------------
MIN_SPEED = 1
MAX_SPEED = 3
DEFAULT_SPEED = 1

# -----------------------------------------------------------------------------
# 3. MOVEMENT GEOMETRY
# -----------------------------------------------------------------------------
# One forward step per heading. Backward is the negation.
HEADING_VECTORS = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}
