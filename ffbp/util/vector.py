import numpy

from ffbp.core.exception import ShapeMismatchError


def as_vector(values, length, name):
    """ Convert `values` to a float vector of the given length

    A scalar is accepted as a vector of length one. Arrays with more than
    one dimension are rejected instead of being flattened, so a batch of
    examples is never mistaken for a single example.

    Raises
    ------
    ShapeMismatchError
        If `values` is not 1d or its length differs from `length`.

    """
    values = numpy.atleast_1d(numpy.asarray(values, dtype=float))

    if values.ndim != 1:
        msg = "`{}` should be a 1d vector, got shape {}"
        raise ShapeMismatchError(msg.format(name, values.shape))

    if values.shape[0] != length:
        msg = "`{}` has length {:d} but {:d} values are required"
        raise ShapeMismatchError(msg.format(name, values.shape[0], length))

    return values
