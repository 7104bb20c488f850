import numpy

from ffbp.util.vector import as_vector


def _column_ranges(matrix):
    col_min = matrix.min(axis=0)
    col_max = matrix.max(axis=0)
    return col_min, col_max - col_min


def normalize_matrix(matrix):
    """ Rescale each column of `matrix` to [0, 1] using the column minimum
    and maximum

    Parameters
    ----------
    matrix: ndarray, shape=(n_rows, n_cols)

    Returns
    -------
    normalized: ndarray, shape=(n_rows, n_cols)
        A new array. The row holding a column's maximum maps to 1 and the
        row holding its minimum maps to 0.

    Note
    ----
    A constant column (min == max) is set to 0 rather than 0/0.
    """
    matrix = numpy.asarray(matrix, dtype=float)

    if matrix.ndim != 2:
        msg = "`matrix` should be 2d, got ndim={}"
        raise ValueError(msg.format(matrix.ndim))

    if matrix.shape[0] == 0:
        raise ValueError("`matrix` has no rows")

    col_min, col_range = _column_ranges(matrix)
    constant = col_range == 0

    normalized = (matrix - col_min) / numpy.where(constant, 1.0, col_range)
    normalized[:, constant] = 0.0

    return normalized


def normalize_input(input, reference):
    """ Rescale a single vector using the column-wise minimum and maximum
    of a reference matrix (typically the training data)

    Values outside the reference range map outside [0, 1]. Columns that
    are constant in `reference` map to 0.
    """
    reference = numpy.asarray(reference, dtype=float)

    if reference.ndim != 2 or reference.shape[0] == 0:
        msg = "`reference` should be a non-empty 2d array, got shape {}"
        raise ValueError(msg.format(reference.shape))

    input = as_vector(input, reference.shape[1], 'input')

    col_min, col_range = _column_ranges(reference)
    constant = col_range == 0

    normalized = (input - col_min) / numpy.where(constant, 1.0, col_range)
    normalized[constant] = 0.0

    return normalized
