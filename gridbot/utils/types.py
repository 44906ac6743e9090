# IN THIS FILE: POSITION, COMMAND, ROBOTSTATE

from dataclasses import dataclass
from typing import NamedTuple

from gridbot.utils.enums import Heading, Movement


@dataclass(frozen=True)
class Position:
    """One point of the robot trail. The grid is unbounded, coordinates may go negative."""
    x: int
    y: int
    heading: Heading

    def __str__(self) -> str:
        return f"({self.x},{self.y}) {self.heading.name}"


@dataclass(frozen=True)
class Command:
    """
    One queued robot command.
    Turns carry steps=0, moves carry the validated step count.
    """
    movement: Movement
    steps: int = 0

    def __str__(self) -> str:
        if self.movement.is_turn:
            return self.movement.value
        return f"{self.movement.value}{self.steps}"


class RobotState(NamedTuple):
    """Snapshot returned by Robot.report_state(). Unpacks as (heading, x, y)."""
    heading: Heading
    x: int
    y: int

    def __str__(self) -> str:
        return f'Now facing "{self.heading.name}" at ({self.x},{self.y})'
