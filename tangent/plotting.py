import matplotlib.pyplot as plt
import numpy as np


def plot_table(table, ax=None):
    """Plot f(x + h) against its tangent approximation.

    table is the (steps, 4) array from extrapolation.tabulate. The error
    column goes on a second y-axis. Returns the matplotlib Figure.
    """
    table = np.asarray(table)
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    else:
        fig = ax.figure

    position = table[:, 0]
    ax.plot(position, table[:, 2], label="f(x + h)", color="blue")
    ax.plot(position, table[:, 1], '--', label="approximation", color="red")
    ax.set_xlabel("x + h")
    ax.set_ylabel("value")

    err_ax = ax.twinx()
    err_ax.plot(position, table[:, 3], ':', label="error", color="gray")
    err_ax.set_ylabel("error")

    lines = ax.get_lines() + err_ax.get_lines()
    ax.legend(lines, [line.get_label() for line in lines], loc="upper left")
    ax.set_title("Tangent extrapolation of a quadratic")
    ax.grid(True)
    return fig
