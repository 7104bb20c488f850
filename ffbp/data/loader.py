import logging

import numpy
import pandas

from ffbp.core.exception import DataLoadError


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


def _read_frame(filename, delimiter):
    try:
        return pandas.read_csv(
            filename, sep=delimiter, header=None, dtype=str,
            keep_default_na=False, skip_blank_lines=True,
            skipinitialspace=True)
    except pandas.errors.EmptyDataError:
        msg = "No data found in {}"
        raise DataLoadError(msg.format(filename))
    except pandas.errors.ParserError as e:
        msg = "Inconsistent row widths in {}: {}"
        raise DataLoadError(msg.format(filename, e))
    except (OSError, UnicodeDecodeError) as e:
        msg = "Unable to read {}: {}"
        raise DataLoadError(msg.format(filename, e))


def _numeric_rows(frame, filename):
    """ Coerce every cell to float, skip the cells that are not numeric,
    and drop rows left empty. Returns the matrix and the positions of the
    kept rows in `frame`.
    """
    numeric = frame.apply(pandas.to_numeric, errors='coerce')
    values = numeric.to_numpy(dtype=float)

    rows = []
    kept = []
    for irow, row in enumerate(values):
        row = row[~numpy.isnan(row)]

        if row.shape[0] == 0:
            logger.debug("Skipping row {} of {}".format(irow, filename))
            continue

        if row.shape[0] < values.shape[1]:
            msg = "Skipped {} non-numeric cell(s) in row {} of {}"
            logger.debug(msg.format(values.shape[1] - row.shape[0],
                                    irow, filename))

        rows.append(row)
        kept.append(irow)

    if not rows:
        msg = "No numeric data found in {}"
        raise DataLoadError(msg.format(filename))

    widths = set(row.shape[0] for row in rows)
    if len(widths) > 1:
        msg = "Inconsistent row widths in {}: {}"
        raise DataLoadError(msg.format(filename, sorted(widths)))

    return numpy.vstack(rows), numpy.array(kept)


def load_csv(filename, delimiter=','):
    """ Load a numeric matrix from a delimited text file

    Parameters
    ----------
    filename: str
        Path to the file.

    delimiter: str, default=','
        The field separator.

    Returns
    -------
    matrix: ndarray, shape=(n_rows, n_cols)

    Note
    ----
    Cells that cannot be parsed as numbers are skipped, so a header line
    or a trailing label column is dropped. A
    :class:`ffbp.core.exception.DataLoadError` is raised if the file can't
    be read, holds no numeric data, or the rows end up with different
    widths.
    """
    frame = _read_frame(filename, delimiter)
    matrix, _ = _numeric_rows(frame, filename)

    msg = "Loaded {} rows and {} columns from {}"
    logger.info(msg.format(matrix.shape[0], matrix.shape[1], filename))

    return matrix


def load_labelled_csv(filename, delimiter=','):
    """ Load a delimited text file whose last column is a class label
    (e.g., the UCI Iris data)

    Returns
    -------
    features: ndarray, shape=(n_rows, n_cols-1)
        The numeric features. Non-numeric cells are skipped as in
        :func:`load_csv`.

    labels: ndarray, shape=(n_rows,)
        The label strings of the kept rows.

    """
    frame = _read_frame(filename, delimiter)

    if frame.shape[1] < 2:
        msg = "Expected at least two columns in {}, found {}"
        raise DataLoadError(msg.format(filename, frame.shape[1]))

    features, kept = _numeric_rows(frame.iloc[:, :-1], filename)
    labels = frame.iloc[:, -1].str.strip().to_numpy()[kept]

    msg = "Loaded {} labelled rows ({} classes) from {}"
    logger.info(msg.format(
        features.shape[0], len(numpy.unique(labels)), filename))

    return features, labels
