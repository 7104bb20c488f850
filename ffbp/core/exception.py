class ShapeMismatchError(ValueError):
    """ Raised when an input or target vector does not match the number of
    neurons in the layer it is fed to
    """


class DataLoadError(ValueError):
    """ Raised when a data file cannot be read or does not yield a
    rectangular, non-empty numeric matrix
    """
