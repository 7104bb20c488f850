import logging
import os


DEFAULT_LOG_FILENAME = 'fit-log.txt'


def setup_logging(filename=None, stdout=True, level=logging.INFO):
    """ Sets up logging formatting, etc

    Parameters
    ----------
    filename: str, default=None
        The log file, truncated on setup. The default (None) uses
        `fit-log.txt` in the current directory.

    stdout: bool, default=True
        If True, log records are also written to the terminal.

    level: int, default=logging.INFO
        The level of the root logger.

    Returns
    -------
    root: logging.Logger
        The configured root logger.

    """
    filename = filename or os.path.join(os.path.curdir, DEFAULT_LOG_FILENAME)

    line_fmt = ("[%(asctime)s] [%(name)s:%(lineno)d] "
                "%(levelname)-8s %(message)s")

    date_fmt = "%Y-%m-%d %H:%M:%S"

    formatter = logging.Formatter(fmt=line_fmt, datefmt=date_fmt)

    handlers = [logging.FileHandler(filename, mode='w')]

    if stdout:
        handlers.append(logging.StreamHandler())

    root = logging.getLogger()
    root.setLevel(level)

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return root
