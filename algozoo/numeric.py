"""Numerical methods: DFT, ODE integrators, Newton's method and Gaussian elimination."""

from __future__ import annotations

import cmath
import math
from collections.abc import Callable, Sequence


def dft_magnitudes(samples: Sequence[float]) -> list[float]:
    """Return the magnitude of each coefficient of the discrete Fourier transform."""
    count = len(samples)
    return [
        abs(
            sum(
                value * cmath.exp(complex(0, -2 * math.pi * k * n / count))
                for n, value in enumerate(samples)
            )
        )
        for k in range(count)
    ]


def _check_step(h: float) -> None:
    if h <= 0:
        raise ValueError("step size must be positive")


def euler(
    f: Callable[[float, float], float],
    x0: float = 0.0,
    y0: float = 1.0,
    h: float = 0.001,
    x_end: float = 1.0,
) -> float:
    """Integrate ``dy/dx = f(x, y)`` from ``x0`` to ``x_end`` with Euler steps.

    The slope of each step is evaluated at the end of that step's x interval.
    """
    _check_step(h)
    x, y = x0, y0
    while x < x_end:
        x += h
        y += h * f(x, y)
    return y


def runge_kutta(
    f: Callable[[float, float], float],
    x0: float = 0.0,
    y0: float = 1.0,
    h: float = 0.001,
    x_end: float = 1.0,
) -> float:
    """Integrate ``dy/dx = f(x, y)`` from ``x0`` to ``x_end`` with classical RK4."""
    _check_step(h)
    x, y = x0, y0
    while x < x_end:
        k1 = h * f(x, y)
        k2 = h * f(x + h / 2.0, y + k1 / 2.0)
        k3 = h * f(x + h / 2.0, y + k2 / 2.0)
        k4 = h * f(x + h, y + k3)
        x += h
        y += (k1 + 2 * k2 + 2 * k3 + k4) / 6
    return y


def newton(
    f: Callable[[float], float],
    df: Callable[[float], float],
    x0: float = 1.0,
    tolerance: float = 1e-6,
    max_iter: int = 1000,
) -> float:
    """Approximate a root of ``f`` by Newton's method, starting from ``x0``.

    Stops once a step moves less than ``tolerance`` or after ``max_iter`` steps,
    and returns the estimate from before the last small step.
    """
    for _ in range(max_iter):
        x1 = x0 - f(x0) / df(x0)
        if abs(x1 - x0) < tolerance:
            break
        x0 = x1
    return x0


def gauss(a: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Solve ``a x = b`` by Gaussian elimination with partial pivoting."""
    size = len(a)
    if len(b) != size or any(len(row) != size for row in a):
        raise ValueError("matrix must be square and match the right-hand side")
    matrix = [list(map(float, row)) for row in a]
    rhs = [float(value) for value in b]

    for i in range(size):
        pivot = max(range(i, size), key=lambda r: abs(matrix[r][i]))
        matrix[i], matrix[pivot] = matrix[pivot], matrix[i]
        rhs[i], rhs[pivot] = rhs[pivot], rhs[i]
        if matrix[i][i] == 0:
            raise ValueError("matrix is singular")
        for j in range(i + 1, size):
            factor = matrix[j][i] / matrix[i][i]
            for k in range(i, size):
                matrix[j][k] -= factor * matrix[i][k]
            rhs[j] -= factor * rhs[i]

    solution = [0.0] * size
    for i in reversed(range(size)):
        row = matrix[i]
        total = rhs[i] - sum(row[j] * solution[j] for j in range(i + 1, size))
        solution[i] = total / row[i]
    return solution