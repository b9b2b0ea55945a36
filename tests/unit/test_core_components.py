import numpy as np
import pytest

from asciinet.core import entropy
from asciinet.core.activations import sigmoid, sigmoid_derivative
from asciinet.core.entropy import EntropyUnavailableError, secure_random, uniform_centered
from asciinet.core.types import NetworkConfig
from asciinet.training.losses import mean_squared_error


def test_sigmoid_midpoint_and_bounds():
    assert sigmoid(0.0) == 0.5
    xs = np.linspace(-30.0, 30.0, 601)
    ys = sigmoid(xs)
    assert np.all(ys > 0.0)
    assert np.all(ys < 1.0)
    assert np.all(np.diff(ys) > 0.0)


def test_sigmoid_derivative_peak_and_zeros():
    a = np.linspace(0.0, 1.0, 101)
    d = sigmoid_derivative(a)
    assert np.argmax(d) == 50
    assert d[50] == pytest.approx(0.25)
    assert sigmoid_derivative(0.0) == 0.0
    assert sigmoid_derivative(1.0) == 0.0


def test_mean_squared_error_is_a_mean():
    output = np.array([0.5, 0.5])
    targets = np.array([1.0, 0.0])
    assert mean_squared_error(output, targets) == pytest.approx(0.25)
    assert mean_squared_error(targets, targets) == 0.0


def test_secure_random_range():
    values = [secure_random() for _ in range(256)]
    assert all(0.0 <= v < 1.0 for v in values)
    assert len(set(values)) > 1


def test_secure_random_ignores_sign_bit(monkeypatch):
    monkeypatch.setattr(entropy.os, "urandom", lambda n: b"\xff" * n)
    top = secure_random()
    assert 0.999 < top < 1.0

    monkeypatch.setattr(entropy.os, "urandom", lambda n: b"\x00" * (n - 1) + b"\x80")
    assert secure_random() == 0.0


def test_secure_random_failure_is_fatal(monkeypatch):
    def _broken(n):
        raise NotImplementedError("no entropy source")

    monkeypatch.setattr(entropy.os, "urandom", _broken)
    with pytest.raises(EntropyUnavailableError, match="cannot generate random number"):
        secure_random()


def test_uniform_centered_shape_and_range():
    values = uniform_centered((3, 4))
    assert values.shape == (3, 4)
    assert np.all(values >= -0.5)
    assert np.all(values < 0.5)


@pytest.mark.parametrize(
    "sizes",
    [(3, 0, 2), (3, -1, 2), (3, 4.5, 2), (3.0, 4, 2), (3, 4, True)],
)
def test_network_config_rejects_empty_layers(sizes):
    with pytest.raises(ValueError, match="positive integer"):
        NetworkConfig(*sizes)
