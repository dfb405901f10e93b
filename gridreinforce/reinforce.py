"""REINFORCE policy-gradient training on the grid world."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .grid_world import Action, GridWorldEnv
from .policy_network import PolicyNetwork

_GRADIENT_SCALE = 0.01
_RENDER_STEP_LIMIT = 100
_AVERAGE_WINDOW = 100


@dataclass(frozen=True)
class Transition:
    state: list[float]
    action: int
    reward: float
    done: bool


def calculate_returns(rewards: Sequence[float], gamma: float) -> list[float]:
    """Discounted return from every time step onwards."""
    returns: list[float] = []
    cumulative = 0.0
    for reward in reversed(rewards):
        cumulative = reward + gamma * cumulative
        returns.append(cumulative)
    returns.reverse()
    return returns


def normalize_returns(returns: Sequence[float]) -> list[float]:
    """Scale to zero mean and unit standard deviation."""
    if not returns:
        return []
    mean = sum(returns) / len(returns)
    variance = sum((r - mean) * (r - mean) for r in returns) / len(returns)
    std = math.sqrt(variance)
    if std < 1e-10:
        std = 1.0
    return [(r - mean) / std for r in returns]


class Reinforce:
    """Agent that trains a policy network on a 5x5 grid world."""

    def __init__(
        self, discount_factor: float = 0.99, learning_rate: float = 0.01, seed: int = 42
    ) -> None:
        self.environment = GridWorldEnv(5, 5)
        self.gamma = discount_factor
        self.learning_rate = learning_rate
        architecture = [self.environment.state_size, 16, self.environment.action_space]
        self.policy = PolicyNetwork(architecture, seed)

    def run_episode(self) -> tuple[list[Transition], float]:
        """Play until the goal is reached; return the trajectory and total reward."""
        trajectory: list[Transition] = []
        total = 0.0
        state = self.environment.reset()
        done = False
        while not done:
            action = self.policy.sample_action(state)
            next_state, reward, done = self.environment.step(action)
            trajectory.append(Transition(state, action, reward, done))
            state = next_state
            total += reward
        return trajectory, total

    def update_policy(self, trajectory: Sequence[Transition]) -> None:
        if not trajectory:
            return
        returns = normalize_returns(
            calculate_returns([t.reward for t in trajectory], self.gamma)
        )
        weights, biases = self.policy.parameters()

        def input_gradient(index: int) -> float:
            return sum(
                _GRADIENT_SCALE * t.state[index % len(t.state)] * ret
                for t, ret in zip(trajectory, returns)
            )

        bias_gradient = sum(_GRADIENT_SCALE * ret for ret in returns)
        weight_grads = []
        for layer in weights:
            row = [input_gradient(i) for i in range(len(layer[0]))]
            weight_grads.append([list(row) for _ in layer])
        bias_grads = [[bias_gradient] * len(layer) for layer in biases]

        self.policy.update_parameters(weight_grads, bias_grads, self.learning_rate)

    def train(
        self, num_episodes: int, render_frequency: int = 0, out: TextIO | None = None
    ) -> list[float]:
        """Run and learn from episodes; return the total reward of each."""
        out = out if out is not None else sys.stdout
        episode_rewards: list[float] = []
        for episode in range(num_episodes):
            trajectory, total = self.run_episode()
            self.update_policy(trajectory)
            episode_rewards.append(total)

            window = episode_rewards[-_AVERAGE_WINDOW:]
            average = sum(window) / len(window)

            if episode % 10 == 0 or episode == num_episodes - 1:
                print(
                    f"Episode {episode}, Total Reward: {total:g}, "
                    f"Average Reward (last {len(window)}): {average:g}",
                    file=out,
                )
            if render_frequency > 0 and episode % render_frequency == 0:
                print(f"Rendering episode {episode}", file=out)
                self.render_episode(out)
        return episode_rewards

    def render_episode(self, out: TextIO | None = None) -> None:
        """Play one episode of at most 100 steps, drawing the grid after each."""
        out = out if out is not None else sys.stdout
        state = self.environment.reset()
        total = 0.0
        print("Initial state:", file=out)
        out.write(self.environment.render())

        for step in range(1, _RENDER_STEP_LIMIT + 1):
            action = self.policy.sample_action(state)
            state, reward, done = self.environment.step(action)
            total += reward
            print(f"Step {step - 1}, Action: {Action(action).label}", file=out)
            print(f"Reward: {reward:g}, Total: {total:g}", file=out)
            out.write(self.environment.render())
            if done:
                print(f"Episode finished successfully in {step} steps!", file=out)
                break
            print("Episode reached step limit without completion.", file=out)