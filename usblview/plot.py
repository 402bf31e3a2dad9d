"""Static scatter plots of decoded positioning fixes."""

from __future__ import annotations

from os import PathLike
from typing import Iterable, Protocol, Sequence

from matplotlib.figure import Figure

X_LABEL = "x轴/m(前向为正)"
Y_LABEL = "y轴/m(右向为正)"
Z_LABEL = "z轴/m(天向为正)"
INDEX_LABEL = "定位序号"


class _Position(Protocol):
    x: float
    y: float
    z: float

    @property
    def valid(self) -> bool: ...


def _scatter(
    figure: Figure,
    slot: int,
    xlabel: str,
    ylabel: str,
    xs: Sequence[float],
    ys: Sequence[float],
) -> None:
    axes = figure.add_subplot(2, 3, slot)
    axes.plot(xs, ys, linestyle="none", marker="o", markersize=5, color="blue")
    axes.set_xlabel(xlabel)
    axes.set_ylabel(ylabel)
    x_low, x_high = min(xs), max(xs)
    y_low, y_high = min(ys), max(ys)
    if x_low < x_high:
        axes.set_xlim(x_low, x_high)
    if y_low < y_high:
        axes.set_ylim(y_low, y_high)


def plot_fixes(fixes: Iterable[_Position], path: str | PathLike[str] | None) -> Figure:
    """Draw the top, side and per-axis views of the valid fixes.

    The figure is saved to ``path`` when one is given and returned either way.
    """
    valid = [fix for fix in fixes if fix.valid]
    if not valid:
        raise ValueError("no valid fixes to plot")

    xs = [fix.x for fix in valid]
    ys = [fix.y for fix in valid]
    zs = [fix.z for fix in valid]
    index = [float(i) for i in range(len(valid))]

    figure = Figure(figsize=(15, 8))
    _scatter(figure, 1, X_LABEL, Y_LABEL, xs, ys)
    _scatter(figure, 2, X_LABEL, Z_LABEL, xs, zs)
    _scatter(figure, 4, INDEX_LABEL, X_LABEL, index, xs)
    _scatter(figure, 5, INDEX_LABEL, Y_LABEL, index, ys)
    _scatter(figure, 6, INDEX_LABEL, Z_LABEL, index, zs)
    figure.tight_layout()

    if path is not None:
        figure.savefig(path)
    return figure