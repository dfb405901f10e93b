"""A small fully connected softmax policy."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

Weights = list[list[list[float]]]
Biases = list[list[float]]


def softmax(values: Sequence[float]) -> list[float]:
    """Numerically stable softmax."""
    peak = max(values)
    exps = [math.exp(v - peak) for v in values]
    total = sum(exps)
    return [e / total for e in exps]


def relu(x: float) -> float:
    return max(0.0, x)


def _affine(rows: list[list[float]], bias: list[float], inputs: list[float]) -> list[float]:
    return [
        sum((w * a for w, a in zip(row, inputs)), b) for row, b in zip(rows, bias)
    ]


class PolicyNetwork:
    """Feed-forward network with ReLU hidden layers and a softmax output."""

    def __init__(self, architecture: Sequence[int], seed: int = 42) -> None:
        sizes = list(architecture)
        if len(sizes) < 2 or any(size <= 0 for size in sizes):
            raise ValueError("architecture needs at least two positive layer sizes")
        self.layer_sizes = sizes
        self._rng = random.Random(seed)
        self._weights: Weights = []
        self._biases: Biases = []
        for n_in, n_out in zip(sizes, sizes[1:]):
            scale = math.sqrt(2.0 / n_in)
            self._weights.append(
                [[self._rng.uniform(-0.1, 0.1) * scale for _ in range(n_in)] for _ in range(n_out)]
            )
            self._biases.append([0.0] * n_out)

    def forward(self, inputs: Sequence[float]) -> list[float]:
        """Action probabilities for the given input."""
        activation = list(inputs)
        if len(activation) != self.layer_sizes[0]:
            raise ValueError(
                f"expected {self.layer_sizes[0]} inputs, got {len(activation)}"
            )
        *hidden, output = zip(self._weights, self._biases)
        for rows, bias in hidden:
            activation = [relu(v) for v in _affine(rows, bias, activation)]
        rows, bias = output
        return softmax(_affine(rows, bias, activation))

    def sample_action(self, state: Sequence[float]) -> int:
        probs = self.forward(state)
        return self._rng.choices(range(len(probs)), weights=probs)[0]

    def log_probability(self, state: Sequence[float], action: int) -> float:
        probs = self.forward(state)
        if not 0 <= action < len(probs):
            raise IndexError(f"action {action} out of range")
        return math.log(probs[action])

    def update_parameters(
        self, weight_gradients: Weights, bias_gradients: Biases, learning_rate: float
    ) -> None:
        """Move every parameter by learning_rate times its gradient."""
        for layer_w, grad_w, layer_b, grad_b in zip(
            self._weights, weight_gradients, self._biases, bias_gradients, strict=True
        ):
            for row, grad_row in zip(layer_w, grad_w, strict=True):
                row[:] = [w + learning_rate * g for w, g in zip(row, grad_row, strict=True)]
            layer_b[:] = [b + learning_rate * g for b, g in zip(layer_b, grad_b, strict=True)]

    def parameters(self) -> tuple[Weights, Biases]:
        """Copies of the current weights and biases."""
        weights = [[list(row) for row in layer] for layer in self._weights]
        biases = [list(layer) for layer in self._biases]
        return weights, biases