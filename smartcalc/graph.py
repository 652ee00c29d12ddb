"""Sampling of an expression over an interval for plotting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .evaluator import evaluate_rpn

__all__ = ["Plot", "step_for", "build_plot"]

_START_LIMIT = 1000000 + 100


@dataclass
class Plot:
    """Sampled points of a graph together with the visible area."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float
    step: float | None = None
    xs: list[float] = field(default_factory=list)
    ys: list[float] = field(default_factory=list)

    @property
    def points(self) -> list[tuple[float, float]]:
        return list(zip(self.xs, self.ys))


def step_for(value: float) -> float:
    """Return the sampling step used around a starting value of this size."""
    magnitude = abs(value)
    if magnitude < 10:
        return 0.0001
    if magnitude < 100:
        return 0.001
    if magnitude < 1000:
        return 0.01
    if magnitude < 10000:
        return 0.1
    return 1.0


def build_plot(
    rpn: str | Iterable[str],
    start: float,
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
) -> Plot:
    """Sample ``rpn`` from ``start`` rightwards to ``x_max`` and leftwards to ``x_min``.

    The vertical bounds grow to include the start value, values met going
    right that reach the top and values met going left that reach the
    bottom. A start value beyond about a million gives an empty plot.
    """
    plot = Plot(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)
    if not -_START_LIMIT <= start <= _START_LIMIT:
        return plot

    tokens = rpn.split() if isinstance(rpn, str) else list(rpn)
    step = step_for(start)
    plot.step = step

    if start >= plot.y_max:
        plot.y_max = start + 1
    if start <= plot.y_min:
        plot.y_min = start - 1

    x = start
    end = x_max + step
    while x <= end:
        y = evaluate_rpn(tokens, x)
        plot.xs.append(x)
        plot.ys.append(y)
        if y >= plot.y_max:
            plot.y_max = y + 1
        x += step

    x = start
    end = x_min - step
    while x >= end:
        y = evaluate_rpn(tokens, x)
        plot.xs.append(x)
        plot.ys.append(y)
        if y <= plot.y_min:
            plot.y_min = y - 1
        x -= step

    return plot