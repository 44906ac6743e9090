# gridbot/commands/script.py
import re
from typing import Iterable, List, Optional, Tuple

from gridbot.entities.robot import Robot
from gridbot.utils.enums import Movement
from gridbot.utils.types import Command

# Short aliases accepted on top of the TL/TR/FW/BW prefixes
ALIASES = {
    "L": Movement.TURN_LEFT,
    "R": Movement.TURN_RIGHT,
    "F": Movement.FORWARD,
    "B": Movement.BACKWARD,
}

TOKEN_RE = re.compile(r"^(TL|TR|FW|BW|L|R|F|B)(-?\d+)?$")


class CommandScriptError(ValueError):
    pass


def parse_script(text: str) -> List[Tuple[Movement, Optional[int]]]:
    """
    Split a command script into (movement, steps) pairs.

    "R F R B2" -> [(TURN_RIGHT, None), (FORWARD, None), (TURN_RIGHT, None), (BACKWARD, 2)]

    Steps are returned unvalidated (None = default speed), the robot checks
    the range when the command is queued.
    """
    parsed = []
    for token in re.split(r"[\s,]+", text.strip().upper()):
        if not token:
            continue
        match = TOKEN_RE.match(token)
        if match is None:
            raise CommandScriptError(f"Unknown command '{token}'")

        prefix, number = match.groups()
        movement = ALIASES.get(prefix) or Movement(prefix)
        if movement.is_turn:
            if number is not None:
                raise CommandScriptError(f"Turn command '{token}' takes no step count")
            parsed.append((movement, None))
        else:
            parsed.append((movement, int(number) if number is not None else None))
    return parsed


def load_script(robot: Robot, text: str) -> int:
    """Queue every command of the script on `robot`. Returns how many were accepted."""
    queued = 0
    for movement, steps in parse_script(text):
        if movement == Movement.TURN_LEFT:
            accepted = robot.queue_left_turn()
        elif movement == Movement.TURN_RIGHT:
            accepted = robot.queue_right_turn()
        elif movement == Movement.FORWARD:
            accepted = robot.queue_forward(steps)
        else:
            accepted = robot.queue_backward(steps)
        if accepted:
            queued += 1
    return queued


def format_commands(commands: Iterable[Command]) -> List[str]:
    return [str(c) for c in commands]
