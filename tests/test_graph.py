import pytest

from smartcalc.graph import Plot, build_plot, step_for
from smartcalc.lexer import ExpressionError


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0.0001),
        (9.5, 0.0001),
        (-9.5, 0.0001),
        (10, 0.001),
        (-50, 0.001),
        (100, 0.01),
        (999, 0.01),
        (1000, 0.1),
        (-5000, 0.1),
        (10000, 1.0),
        (-123456, 1.0),
    ],
)
def test_step_for(value, expected):
    assert step_for(value) == expected


def test_identity_plot_points_lie_on_line():
    plot = build_plot("x", 0.0, -0.001, 0.001, -1.0, 1.0)
    assert plot.xs
    assert plot.xs == plot.ys
    assert plot.step == step_for(0.0)


def test_plot_starts_at_start_in_both_directions():
    plot = build_plot("x 2 *", 0.5, 0.499, 0.501, -10.0, 10.0)
    assert plot.xs[0] == 0.5
    assert plot.xs.count(0.5) == 2


def test_plot_covers_the_requested_interval():
    plot = build_plot("x", 0.0, -0.001, 0.001, -1.0, 1.0)
    step = plot.step
    assert max(plot.xs) >= 0.001 - 1e-12
    assert min(plot.xs) <= -0.001 + 1e-12
    assert max(plot.xs) <= 0.001 + 2 * step
    assert min(plot.xs) >= -0.001 - 2 * step


def test_points_pair_xs_and_ys():
    plot = build_plot("x x *", 0.0, -0.0005, 0.0005, -1.0, 1.0)
    assert plot.points == list(zip(plot.xs, plot.ys))
    assert all(y == pytest.approx(x * x) for x, y in plot.points)


def test_y_max_unchanged_when_values_stay_below():
    plot = build_plot("x", 0.0, -0.001, 0.001, -5.0, 5.0)
    assert plot.y_max == 5.0
    assert plot.y_min == -5.0


def test_start_outside_bounds_widens_them():
    start = -5.0
    plot = build_plot("5", start, -5.0005, -4.9995, 0.0, 1.0)
    assert plot.y_min == start - 1
    assert plot.y_max == 5 + 1


def test_start_too_large_gives_empty_plot():
    plot = build_plot("x", 2e6, -1.0, 1.0, -3.0, 3.0)
    assert plot == Plot(x_min=-1.0, x_max=1.0, y_min=-3.0, y_max=3.0)
    assert plot.xs == [] and plot.step is None


def test_token_list_is_accepted():
    from_string = build_plot("x 3 +", 0.0, -0.0003, 0.0003, -10.0, 10.0)
    from_list = build_plot(["x", "3", "+"], 0.0, -0.0003, 0.0003, -10.0, 10.0)
    assert from_string == from_list


def test_malformed_rpn_raises():
    with pytest.raises(ExpressionError):
        build_plot("+", 0.0, -0.001, 0.001, -1.0, 1.0)