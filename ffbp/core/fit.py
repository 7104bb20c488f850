import logging
import numbers

import numpy


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

DEFAULT_LOG_EVERY = 500


def _validate_data(inputs, targets):
    inputs = numpy.atleast_2d(numpy.asarray(inputs, dtype=float))
    targets = numpy.asarray(targets, dtype=float)

    # A flat target array is one scalar target per example
    if targets.ndim == 1:
        targets = targets.reshape(-1, 1)

    if inputs.ndim != 2 or targets.ndim != 2:
        msg = "`inputs` (ndim={}) and `targets` (ndim={}) should be 2d"
        raise ValueError(msg.format(inputs.ndim, targets.ndim))

    if inputs.shape[0] != targets.shape[0]:
        msg = "Mismatch in number of examples: inputs ({}), targets ({})"
        raise ValueError(msg.format(inputs.shape[0], targets.shape[0]))

    if inputs.shape[0] == 0:
        raise ValueError("No examples provided")

    return inputs, targets


def fit(network, inputs, targets, epochs, log_every=DEFAULT_LOG_EVERY,
        shuffle=False, random_state=None):
    """ Train `network` by per-example backpropagation

    Parameters
    ----------
    network: Network
        The network to train; it is updated in place.

    inputs: ndarray, shape=(n_examples, topology[0])
        The training inputs -- examples by row.

    targets: ndarray, shape=(n_examples, topology[-1])
        The training targets -- examples by row. A 1d array is treated as
        one target value per example.

    epochs: int
        The number of passes over the training data.

    log_every: int, default=500
        The mean error is logged every `log_every` epochs and on the last
        epoch. Use 0 or None to only log the last epoch.

    shuffle: bool, default=False
        If True, the examples are visited in a new random order every
        epoch. Otherwise they are visited in row order.

    random_state: numpy.random.RandomState, default=None
        Used for shuffling. The default (None) uses the network's
        random state.

    Returns
    -------
    errors: ndarray, shape=(epochs,)
        The mean per-example error of each epoch, accumulated during the
        epoch (each example's error is computed right after its update).

    """
    inputs, targets = _validate_data(inputs, targets)

    if (not isinstance(epochs, numbers.Integral)
            or isinstance(epochs, bool) or epochs < 1):
        msg = "`epochs` ({}) should be a positive int"
        raise ValueError(msg.format(epochs))

    if random_state is None:
        random_state = network.random_state

    n_examples = inputs.shape[0]
    errors = numpy.zeros(epochs)
    pstr = "Epoch {{:0{:d}d}} / {:d}: mean error = {{:.6f}}"
    pstr = pstr.format(len(str(epochs)), epochs)

    for epoch in range(epochs):
        if shuffle:
            order = random_state.permutation(n_examples)
        else:
            order = numpy.arange(n_examples)

        total_error = 0.0
        for i in order:
            total_error += network.train_example(inputs[i], targets[i])

        errors[epoch] = total_error / n_examples

        if (log_every and epoch % log_every == 0) or epoch == epochs - 1:
            logger.info(pstr.format(epoch, errors[epoch]))

    return errors


def predict_all(network, inputs):
    """ Returns the network outputs for every row of `inputs`, stacked
    into an array of shape `(n_examples, topology[-1])`
    """
    inputs = numpy.atleast_2d(numpy.asarray(inputs, dtype=float))
    return numpy.vstack([network.predict(x) for x in inputs])


def evaluate(network, inputs, targets):
    """ Returns the mean per-example error over the given data without
    changing any weight
    """
    inputs, targets = _validate_data(inputs, targets)

    total_error = 0.0
    for x, y in zip(inputs, targets):
        network.forward_propagation(x)
        total_error += network.calculate_error(y)

    return total_error / inputs.shape[0]
