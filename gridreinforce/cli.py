"""Command line entry point: train an agent and show its final policy."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .reinforce import Reinforce


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridreinforce", description="Train a REINFORCE agent on a grid world."
    )
    parser.add_argument("--episodes", type=int, default=500, help="training episodes")
    parser.add_argument(
        "--render-every", type=int, default=100, help="render every N episodes (0 disables)"
    )
    parser.add_argument("--gamma", type=float, default=0.99, help="discount factor")
    parser.add_argument("--learning-rate", type=float, default=0.01, help="learning rate")
    parser.add_argument("--seed", type=int, default=42, help="random seed")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    print("REINFORCE Algorithm Demonstration\n--------------------------------")
    agent = Reinforce(args.gamma, args.learning_rate, args.seed)
    agent.train(args.episodes, args.render_every)
    print("\nFinal trained policy demonstration:")
    agent.render_episode()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())