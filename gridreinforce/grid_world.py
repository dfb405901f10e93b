"""A small deterministic grid world with obstacles and a single goal cell."""

from __future__ import annotations

from enum import IntEnum

Position = tuple[int, int]


class Action(IntEnum):
    """Moves available to the agent."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


_MOVES: dict[int, Position] = {
    Action.UP: (0, -1),
    Action.RIGHT: (1, 0),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
}


class GridWorldEnv:
    """Agent starts in the top-left corner and must reach the bottom-right one."""

    STEP_REWARD = -0.1
    GOAL_REWARD = 1.0
    OBSTACLE_REWARD = -1.0

    def __init__(self, width: int, height: int) -> None:
        if width < 2 or height < 2:
            raise ValueError("grid must be at least 2x2")
        self.width = width
        self.height = height
        self.goal: Position = (width - 1, height - 1)
        self.obstacles: tuple[Position, ...] = (
            (1, 1),
            (1, 2),
            (2, 1),
            (width - 2, height - 2),
        )
        self.agent: Position = (0, 0)
        self.done = False
        self.reset()

    def reset(self) -> list[float]:
        """Put the agent back at the start and return the initial state."""
        self.agent = (0, 0)
        self.done = False
        return self.state_representation

    def step(self, action: int) -> tuple[list[float], float, bool]:
        """Apply an action; unknown actions leave the agent where it is."""
        old = self.agent
        dx, dy = _MOVES.get(action, (0, 0))
        x = min(max(old[0] + dx, 0), self.width - 1)
        y = min(max(old[1] + dy, 0), self.height - 1)
        self.agent = (x, y)

        reward = self.STEP_REWARD
        if self.agent in self.obstacles:
            self.agent = old
            reward = self.OBSTACLE_REWARD
        if self.agent == self.goal:
            reward = self.GOAL_REWARD
            self.done = True

        return self.state_representation, reward, self.done

    @property
    def state_representation(self) -> list[float]:
        """Agent position scaled into [0, 1] on each axis."""
        return [
            self.agent[0] / (self.width - 1),
            self.agent[1] / (self.height - 1),
        ]

    @property
    def action_space(self) -> int:
        return len(Action)

    @property
    def state_size(self) -> int:
        return 2

    def render(self) -> str:
        """Text picture of the grid, one row per line, followed by a blank line."""

        def cell(pos: Position) -> str:
            if pos == self.agent:
                return "A "
            if pos == self.goal:
                return "G "
            return "# " if pos in self.obstacles else ". "

        rows = (
            "".join(cell((x, y)) for x in range(self.width)) + "\n"
            for y in range(self.height)
        )
        return "".join(rows) + "\n"