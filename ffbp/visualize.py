import numpy as np
import matplotlib.pyplot as plt


def plot_error_history(errors, ax=None, **plot_kwargs):
    """ Plot the mean training error of each epoch

    Parameters
    ----------
    errors: ndarray, shape=(epochs,)
        As returned by :func:`ffbp.core.fit.fit`.

    ax: matplotlib.axes.Axes, default=None
        The axes to draw on. A new figure is created when None.

    plot_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib.axes.Axes

    """
    errors = np.asarray(errors, dtype=float)

    if errors.ndim != 1:
        raise ValueError("`errors` must be 1d.")

    if ax is None:
        fig = plt.figure(figsize=(6, 4))
        ax = fig.add_subplot(111)

    ax.plot(np.arange(errors.shape[0]), errors, **plot_kwargs)

    # Errors can be exactly zero, which a log axis can't show
    if (errors > 0).all():
        ax.set_yscale('log')

    ax.set_xlabel('Epoch')
    ax.set_ylabel('Mean error')
    ax.grid(True, ls=':')

    return ax
