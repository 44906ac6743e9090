import logging

import pytest

from gridbot.entities.robot import InvalidSpeedError, Robot
from gridbot.utils.config import RobotConfig
from gridbot.utils.enums import Heading, Movement
from gridbot.utils.types import Command, Position


# -----------------------------------------------------------------------------
# Construction
# -----------------------------------------------------------------------------

def test_default_robot_starts_at_origin_facing_north():
    robot = Robot()
    assert robot.report_state() == (Heading.NORTH, 0, 0)
    assert robot.commands == ()


def test_explicit_start_state():
    robot = Robot(2, 5, Heading.WEST)
    assert robot.report_state() == (Heading.WEST, 2, 5)
    assert robot.start_position == Position(2, 5, Heading.WEST)


@pytest.mark.parametrize("bad_heading", [7, -1, "UP", 2.5, object()])
def test_invalid_heading_falls_back_to_north(bad_heading):
    robot = Robot(1, 1, bad_heading)
    assert robot.heading is Heading.NORTH


def test_heading_by_name_or_value():
    assert Robot(0, 0, "south").heading is Heading.SOUTH
    assert Robot(0, 0, 3).heading is Heading.WEST


def test_default_path_uses_config_defaults():
    config = RobotConfig(default_x=-4, default_y=9, default_heading=Heading.EAST)
    robot = Robot(config=config)
    assert robot.report_state() == (Heading.EAST, -4, 9)


def test_defaults_are_not_shared_between_robots():
    a = Robot()
    b = Robot()
    a.queue_forward(2)
    a.execute()
    assert b.report_state() == (Heading.NORTH, 0, 0)
    assert b.commands == ()


# -----------------------------------------------------------------------------
# Heading updates
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("start", list(Heading))
@pytest.mark.parametrize("delta", [1, -1])
def test_four_turns_return_to_start(start, delta):
    robot = Robot(0, 0, start)
    for _ in range(4):
        robot.update_heading(delta)
    assert robot.heading is start


def test_update_heading_wraps_both_ways():
    robot = Robot(0, 0, Heading.NORTH)
    robot.update_heading(-1)
    assert robot.heading is Heading.WEST
    robot.update_heading(1)
    assert robot.heading is Heading.NORTH

    robot = Robot(0, 0, Heading.WEST)
    robot.update_heading(1)
    assert robot.heading is Heading.NORTH


# -----------------------------------------------------------------------------
# Queuing
# -----------------------------------------------------------------------------

def test_queuing_does_not_move_the_robot():
    robot = Robot(3, 3, Heading.EAST)
    robot.queue_left_turn()
    robot.queue_forward(3)
    robot.queue_right_turn()
    robot.queue_backward(2)
    assert robot.report_state() == (Heading.EAST, 3, 3)
    assert robot.commands == (
        Command(Movement.TURN_LEFT),
        Command(Movement.FORWARD, 3),
        Command(Movement.TURN_RIGHT),
        Command(Movement.BACKWARD, 2),
    )


def test_moves_default_to_speed_one():
    robot = Robot()
    robot.queue_forward()
    robot.queue_backward()
    assert [c.steps for c in robot.commands] == [1, 1]


@pytest.mark.parametrize("steps", [0, 4, -1, 100, 2.5, True, "2"])
@pytest.mark.parametrize("queue_name", ["queue_forward", "queue_backward"])
def test_out_of_range_speed_is_reported_and_not_queued(steps, queue_name, caplog):
    robot = Robot()
    with caplog.at_level(logging.WARNING, logger="gridbot.entities.robot"):
        accepted = getattr(robot, queue_name)(steps)

    assert accepted is False
    assert robot.commands == ()
    assert "can only range from 1 up to 3" in caplog.text


def test_non_integer_speed_keeps_position_integral():
    robot = Robot()
    robot.queue_forward(1.5)
    robot.queue_backward(False)
    robot.queue_forward(3)
    robot.execute()
    assert robot.report_state() == (Heading.NORTH, 0, 3)
    assert all(type(c.steps) is int for c in robot.commands)


def test_queue_stays_usable_after_invalid_speed():
    robot = Robot()
    robot.queue_forward(9)
    assert robot.queue_forward(2) is True
    assert len(robot.commands) == 1


def test_validate_speed_raises():
    robot = Robot()
    with pytest.raises(InvalidSpeedError) as exc_info:
        robot.validate_speed(4)
    assert exc_info.value.steps == 4
    assert (exc_info.value.min_speed, exc_info.value.max_speed) == (1, 3)


def test_configured_speed_range():
    robot = Robot(config=RobotConfig(max_speed=5, default_speed=2))
    assert robot.queue_forward(5) is True
    assert robot.queue_forward() is True
    assert [c.steps for c in robot.commands] == [5, 2]


# -----------------------------------------------------------------------------
# Execution
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("steps", [1, 2, 3])
def test_forward_from_north_moves_up(steps):
    robot = Robot()
    robot.queue_forward(steps)
    robot.execute()
    assert (robot.x, robot.y) == (0, steps)


@pytest.mark.parametrize("heading, expected", [
    (Heading.NORTH, (0, 2)),
    (Heading.EAST, (2, 0)),
    (Heading.SOUTH, (0, -2)),
    (Heading.WEST, (-2, 0)),
])
def test_forward_and_backward_per_heading(heading, expected):
    robot = Robot(0, 0, heading)
    robot.queue_forward(2)
    robot.execute()
    assert (robot.x, robot.y) == expected

    robot = Robot(0, 0, heading)
    robot.queue_backward(2)
    robot.execute()
    assert (robot.x, robot.y) == (-expected[0], -expected[1])


def test_demo_route():
    robot = Robot(2, 5, Heading.WEST)
    robot.queue_right_turn()
    robot.queue_forward(1)
    robot.queue_right_turn()
    robot.queue_backward(1)

    state = robot.execute()

    assert state == (Heading.EAST, 1, 6)
    assert state.heading.name == "EAST"


def test_moves_use_heading_at_replay_time():
    robot = Robot()
    robot.queue_forward(1)
    robot.queue_right_turn()
    robot.queue_forward(1)
    robot.execute()
    assert robot.report_state() == (Heading.EAST, 1, 1)


def test_empty_queue_changes_nothing():
    robot = Robot(-3, 8, Heading.SOUTH)
    assert robot.execute() == (Heading.SOUTH, -3, 8)


def test_execute_twice_doubles_straight_displacement():
    robot = Robot(1, 1, Heading.EAST)
    robot.queue_forward(3)
    robot.queue_backward(1)
    robot.queue_forward(2)

    robot.execute()
    once = (robot.x - 1, robot.y - 1)
    robot.execute()

    assert (robot.x - 1, robot.y - 1) == (2 * once[0], 2 * once[1])
    assert len(robot.commands) == 3


def test_execute_twice_continues_from_new_heading():
    robot = Robot()
    robot.queue_right_turn()
    robot.queue_forward(1)
    robot.execute()
    robot.execute()
    # second replay starts facing EAST, turns to SOUTH
    assert robot.report_state() == (Heading.SOUTH, 1, -1)


def test_path_history_records_each_command():
    robot = Robot(2, 5, Heading.WEST)
    robot.queue_right_turn()
    robot.queue_forward()
    robot.execute()
    assert robot.path_history == [
        Position(2, 5, Heading.WEST),
        Position(2, 5, Heading.NORTH),
        Position(2, 6, Heading.NORTH),
    ]


def test_commands_view_is_read_only():
    robot = Robot()
    robot.queue_left_turn()
    with pytest.raises(AttributeError):
        robot.commands.append(Command(Movement.TURN_RIGHT))
    assert len(robot.commands) == 1


def test_print_state(capsys):
    robot = Robot(1, 6, Heading.EAST)
    robot.print_state()
    assert 'Now facing "EAST" at (1,6)' in capsys.readouterr().out
