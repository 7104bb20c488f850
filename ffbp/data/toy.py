import logging

import numpy
from sklearn.datasets import load_iris
from sklearn.preprocessing import LabelBinarizer


logger = logging.getLogger(__name__)


def xor():
    """ The four examples of the XOR truth table

    Returns
    -------
    inputs, targets: ndarray, shape=(4, 2), ndarray, shape=(4, 1)

    """
    inputs = numpy.array([[0., 0.],
                          [0., 1.],
                          [1., 0.],
                          [1., 1.]])
    targets = numpy.array([[0.],
                           [1.],
                           [1.],
                           [0.]])
    return inputs, targets


def sine(n_samples=50):
    """ Samples of `sin(x)` on `[-pi, pi)`

    Parameters
    ----------
    n_samples: int, default=50
        The sample `i` is taken at `x = -pi + 2*pi*i/n_samples`.

    Returns
    -------
    inputs, targets: ndarray, shape=(n_samples, 1), ndarray, shape=(n_samples, 1)

    """
    if n_samples < 1:
        msg = "`n_samples` ({}) should be a positive integer"
        raise ValueError(msg.format(n_samples))

    x = -numpy.pi + numpy.arange(n_samples) * (2 * numpy.pi / n_samples)
    return x.reshape(-1, 1), numpy.sin(x).reshape(-1, 1)


def one_hot(labels):
    """ Encode class labels as one-hot rows

    Returns
    -------
    targets: ndarray, shape=(n_examples, n_classes)
        Columns follow the sorted class labels.

    classes: ndarray, shape=(n_classes,)

    Note
    ----
    With only two classes, sklearn's binarizer yields a single column; it
    is expanded here so that there is always one column per class.
    """
    binarizer = LabelBinarizer()
    targets = binarizer.fit_transform(labels).astype(float)

    if len(binarizer.classes_) == 2:
        targets = numpy.hstack([1.0 - targets, targets])

    return targets, binarizer.classes_


def iris():
    """ The Iris dataset bundled with scikit-learn

    Returns
    -------
    inputs: ndarray, shape=(150, 4)
        The raw (not normalized) features.

    targets: ndarray, shape=(150, 3)
        One-hot class targets.

    classes: ndarray, shape=(3,)
        The class names, ordered as the target columns.

    """
    dataset = load_iris()
    labels = dataset.target_names[dataset.target]
    targets, classes = one_hot(labels)

    msg = "Loaded iris dataset with {} examples"
    logger.debug(msg.format(dataset.data.shape[0]))

    return dataset.data.astype(float), targets, classes
