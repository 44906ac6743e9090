# IN THIS FILE: ROBOT STATE, COMMAND QUEUE & REPLAY

import logging
from typing import List, Optional, Tuple

from gridbot.utils.config import RobotConfig
from gridbot.utils.enums import Heading, Movement
from gridbot.utils.types import Command, Position, RobotState

logger = logging.getLogger(__name__)


class InvalidSpeedError(ValueError):
    """Step count of a forward/backward command lies outside the legal range."""

    def __init__(self, steps: int, min_speed: int, max_speed: int):
        self.steps = steps
        self.min_speed = min_speed
        self.max_speed = max_speed
        super().__init__(
            f"The given speed ({steps}) is not legal. "
            f"The step size can only range from {min_speed} up to {max_speed}"
        )


class Robot:
    """
    A grid robot that queues commands now and replays them later.

    Queuing never touches position or heading. execute() applies the whole
    queue in insertion order, so moves use the heading the robot has when
    the replay reaches them, not the heading at queue time.
    """

    def __init__(
        self,
        x: Optional[int] = None,
        y: Optional[int] = None,
        heading=None,
        config: Optional[RobotConfig] = None
    ):
        """
        Initialize robot at its start position.

        Args:
            x, y: Grid coordinates, default to config.default_x / default_y
            heading: Initial facing. Invalid values fall back to NORTH.
                     When omitted, config.default_heading is used as is.
            config: Start defaults and speed range
        """
        self.config = config or RobotConfig()

        self.x = self.config.default_x if x is None else x
        self.y = self.config.default_y if y is None else y
        if heading is None:
            self.heading = self.config.default_heading
        else:
            self.heading = Heading.coerce(heading)

        self.start_position = Position(self.x, self.y, self.heading)
        self.path_history: List[Position] = [self.start_position]
        self._commands: List[Command] = []

    # -------------------------------------------------------------------------
    # Queue
    # -------------------------------------------------------------------------

    @property
    def commands(self) -> Tuple[Command, ...]:
        """Queued commands in insertion order (read-only view)."""
        return tuple(self._commands)

    def queue_left_turn(self) -> bool:
        return self._append(Command(Movement.TURN_LEFT))

    def queue_right_turn(self) -> bool:
        return self._append(Command(Movement.TURN_RIGHT))

    def queue_forward(self, steps: Optional[int] = None) -> bool:
        """
        Queue a forward move of `steps` cells (default speed if omitted).
        An out-of-range step count is reported and nothing is queued.
        """
        return self._queue_move(Movement.FORWARD, steps)

    def queue_backward(self, steps: Optional[int] = None) -> bool:
        """Same as queue_forward, but backward."""
        return self._queue_move(Movement.BACKWARD, steps)

    def _queue_move(self, movement: Movement, steps: Optional[int]) -> bool:
        if steps is None:
            steps = self.config.default_speed
        try:
            self.validate_speed(steps)
        except InvalidSpeedError as e:
            logger.warning(str(e))
            return False
        return self._append(Command(movement, steps))

    def _append(self, command: Command) -> bool:
        self._commands.append(command)
        logger.debug("Queued %s (%d in queue)", command, len(self._commands))
        return True

    def validate_speed(self, steps: int) -> None:
        """Raise InvalidSpeedError unless steps is an int in [min_speed, max_speed]."""
        is_int = isinstance(steps, int) and not isinstance(steps, bool)
        if not is_int or not self.config.min_speed <= steps <= self.config.max_speed:
            raise InvalidSpeedError(steps, self.config.min_speed, self.config.max_speed)

    # -------------------------------------------------------------------------
    # Replay
    # -------------------------------------------------------------------------

    def update_heading(self, delta: int) -> None:
        """
        Rotate the heading index by `delta` (> 0 right, < 0 left).
        The index wraps modulo 4: -1 becomes WEST(3), 4 becomes NORTH(0).
        """
        self.heading = self.heading.rotate(delta)

    def turn_left(self) -> None:
        self.update_heading(-1)

    def turn_right(self) -> None:
        self.update_heading(1)

    def forward(self, steps: int) -> None:
        dx, dy = self.heading.vector
        self.x += dx * steps
        self.y += dy * steps

    def backward(self, steps: int) -> None:
        dx, dy = self.heading.vector
        self.x -= dx * steps
        self.y -= dy * steps

    def execute(self) -> RobotState:
        """
        Apply every queued command in order, starting from the current state.

        The queue is left intact, so calling execute() again replays it from
        wherever the previous run ended.

        Returns:
            RobotState after the replay
        """
        self.path_history = [Position(self.x, self.y, self.heading)]
        for command in self._commands:
            if command.movement == Movement.TURN_LEFT:
                self.turn_left()
            elif command.movement == Movement.TURN_RIGHT:
                self.turn_right()
            elif command.movement == Movement.FORWARD:
                self.forward(command.steps)
            elif command.movement == Movement.BACKWARD:
                self.backward(command.steps)
            self.path_history.append(Position(self.x, self.y, self.heading))

        logger.debug("Executed %d commands, %r", len(self._commands), self.path_history[-1])
        return self.report_state()

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def report_state(self) -> RobotState:
        return RobotState(self.heading, self.x, self.y)

    def print_state(self) -> None:
        print(f"\n{self.report_state()}\n")
