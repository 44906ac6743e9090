import matplotlib.pyplot as plt
import matplotlib.patches as patches
import numpy as np

from gridbot.entities.robot import Robot

# Heading int → arrow angle in degrees
HEADING_ANGLE = {0: 90, 1: 0, 2: -90, 3: 180}


def plot_trajectory(robot: Robot, ax=None, save_path=None):
    """
    Draw the trail of the robot's last execute() call.

    The view is fitted around the visited cells (the grid is unbounded).
    Returns the Axes so callers can keep drawing on it.
    """
    created = ax is None
    if created:
        _, ax = plt.subplots(figsize=(8, 8))

    trail = robot.path_history
    xs = np.array([p.x for p in trail], dtype=float)
    ys = np.array([p.y for p in trail], dtype=float)

    # ---- Grid ----
    x_min, x_max = int(xs.min()) - 2, int(xs.max()) + 2
    y_min, y_max = int(ys.min()) - 2, int(ys.max()) + 2
    ax.set_xlim(x_min, x_max)
    ax.set_ylim(y_min, y_max)
    ax.set_xticks(range(x_min, x_max + 1))
    ax.set_yticks(range(y_min, y_max + 1))
    ax.set_aspect('equal')
    ax.grid(True, linestyle=':', alpha=0.6)

    # ---- Path segments ----
    colors = plt.cm.winter(np.linspace(0, 1, max(len(trail) - 1, 1)))
    for i in range(len(trail) - 1):
        if xs[i] == xs[i + 1] and ys[i] == ys[i + 1]:
            continue  # turn in place
        ax.annotate(
            '', xy=(xs[i + 1], ys[i + 1]), xytext=(xs[i], ys[i]),
            arrowprops=dict(arrowstyle='->', color=colors[i], lw=2),
            zorder=3
        )

    # ---- Start marker ----
    start = trail[0]
    ax.add_patch(patches.Circle((start.x, start.y), 0.3, color='lightgreen', alpha=0.8, zorder=4))
    ax.text(start.x, start.y - 0.6, "START", ha='center', va='center', color='green', fontsize=8)

    # ---- Robot at final pose ----
    last = trail[-1]
    angle = np.radians(HEADING_ANGLE[int(last.heading)])
    ax.add_patch(patches.Rectangle(
        (last.x - 0.35, last.y - 0.35), 0.7, 0.7,
        color='lightblue', ec='blue', zorder=5
    ))
    ax.arrow(
        last.x, last.y, 0.6 * np.cos(angle), 0.6 * np.sin(angle),
        color='blue', width=0.06, head_width=0.25, zorder=6
    )

    ax.set_title(f"{robot.report_state()}\nCommands: {len(robot.commands)}", fontsize=9)

    if save_path is not None:
        ax.figure.savefig(save_path)
        if created:
            plt.close(ax.figure)
    return ax


if __name__ == "__main__":
    demo = Robot(2, 5, "WEST")
    demo.queue_right_turn()
    demo.queue_forward()
    demo.queue_right_turn()
    demo.queue_backward()
    demo.execute()
    plot_trajectory(demo)
    plt.show()
