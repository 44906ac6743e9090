# main.py
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from gridbot.commands.script import CommandScriptError, format_commands, load_script
from gridbot.entities.robot import Robot
from gridbot.utils.config import RobotConfig

logger = logging.getLogger(__name__)

# Demo run when no commands are given: start at (2,5) facing WEST
DEMO_START = (2, 5, "WEST")
DEMO_SCRIPT = "R F R B"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Queue grid robot commands and replay them.")
    parser.add_argument("commands", nargs="*",
                        help="Command tokens, e.g. R F2 L B (TL/TR/FW<n>/BW<n> also accepted).")
    parser.add_argument("--x", type=int, default=None, help="Start x (default from config).")
    parser.add_argument("--y", type=int, default=None, help="Start y (default from config).")
    parser.add_argument("--heading", default=None,
                        help="Start heading NORTH/EAST/SOUTH/WEST. Unknown values mean NORTH.")
    parser.add_argument("--config", default=None, help="Path to a JSON robot config.")
    parser.add_argument("--repeat", type=int, default=1, help="How many times to execute the queue.")
    parser.add_argument("--plot", default=None, help="Save a trajectory image to this path.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log queue and replay details.")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s - %(name)s - %(message)s'
    )

    try:
        config = RobotConfig.from_json(args.config) if args.config else RobotConfig()
    except (FileNotFoundError, ValidationError) as e:
        print(f"Error: could not load config: {e}", file=sys.stderr)
        return 2
    logger.debug("Using %r", config)

    if args.commands:
        robot = Robot(args.x, args.y, args.heading, config=config)
        script = " ".join(args.commands)
    else:
        # Explicit start flags still apply to the demo route
        demo_x, demo_y, demo_heading = DEMO_START
        robot = Robot(
            demo_x if args.x is None else args.x,
            demo_y if args.y is None else args.y,
            demo_heading if args.heading is None else args.heading,
            config=config
        )
        script = DEMO_SCRIPT

    try:
        load_script(robot, script)
    except CommandScriptError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"Start: {robot.report_state()}")
    print(f"Queued: {' '.join(format_commands(robot.commands)) or '(none)'}")

    for _ in range(max(args.repeat, 0)):
        robot.execute()
    robot.print_state()

    if args.plot:
        # Imported lazily so plain runs don't need a display backend
        import matplotlib
        matplotlib.use("Agg")
        from dashboard import plot_trajectory
        plot_trajectory(robot, save_path=args.plot)
        print(f"Trajectory saved to {args.plot}")

    return 0


def cli() -> None:
    sys.exit(run())


if __name__ == "__main__":
    cli()
