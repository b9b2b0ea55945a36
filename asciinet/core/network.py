"""Single-hidden-layer sigmoid network trained by online backpropagation."""

from __future__ import annotations

import numpy as np

from .activations import sigmoid, sigmoid_derivative
from .entropy import RandomSource, secure_random, uniform_centered
from .types import Activations, Array, NetworkConfig, NetworkParameters


class Network:
    """Owns the weights and biases of a fixed 3-layer perceptron.

    :meth:`backward` is the only method that mutates parameters. Observers
    read them through :meth:`parameters`, which returns a read-only copy.
    """

    def __init__(
        self,
        config: NetworkConfig,
        parameters: NetworkParameters | None = None,
        *,
        random: RandomSource = secure_random,
    ) -> None:
        self._config = config
        if parameters is None:
            shapes = config.shapes
            parameters = NetworkParameters(
                weights1=uniform_centered(shapes["weights1"], random),
                weights2=uniform_centered(shapes["weights2"], random),
                bias1=uniform_centered(shapes["bias1"], random),
                bias2=uniform_centered(shapes["bias2"], random),
            )
        else:
            parameters = parameters.copy()
            expected = config.shapes
            actual = parameters.shapes()
            if actual != expected:
                raise ValueError(
                    f"Parameter shapes {actual} do not match config {expected}"
                )
        self._params = parameters

    @classmethod
    def zeros(cls, config: NetworkConfig) -> "Network":
        shapes = config.shapes
        return cls(
            config,
            NetworkParameters(
                weights1=np.zeros(shapes["weights1"]),
                weights2=np.zeros(shapes["weights2"]),
                bias1=np.zeros(shapes["bias1"]),
                bias2=np.zeros(shapes["bias2"]),
            ),
        )

    @property
    def config(self) -> NetworkConfig:
        return self._config

    def parameters(self) -> NetworkParameters:
        return self._params.copy(writeable=False)

    def forward(self, inputs: Array) -> Activations:
        p = self._params
        x = np.asarray(inputs, dtype=np.float64)
        hidden = sigmoid(x @ p.weights1 + p.bias1)
        output = sigmoid(hidden @ p.weights2 + p.bias2)
        return Activations(hidden=hidden, output=output)

    def backward(self, inputs: Array, activations: Activations, targets: Array) -> None:
        """Apply one gradient step for a single sample, in place.

        The hidden deltas are propagated through ``weights2`` before it is
        updated.
        """

        p = self._params
        lr = self._config.learning_rate
        x = np.array(inputs, dtype=np.float64)
        hidden = np.array(activations.hidden, dtype=np.float64)
        output = np.array(activations.output, dtype=np.float64)
        target = np.asarray(targets, dtype=np.float64)

        delta = (target - output) * sigmoid_derivative(output)
        hidden_delta = (p.weights2 @ delta) * sigmoid_derivative(hidden)

        # NetworkParameters is frozen; update the arrays it holds in place.
        np.add(p.weights2, lr * np.outer(hidden, delta), out=p.weights2)
        np.add(p.bias2, lr * delta, out=p.bias2)
        np.add(p.weights1, lr * np.outer(x, hidden_delta), out=p.weights1)
        np.add(p.bias1, lr * hidden_delta, out=p.bias1)


__all__ = ["Network"]
