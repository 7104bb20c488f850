# flake8: noqa

from .core.exception import DataLoadError, ShapeMismatchError
from .core.fit import evaluate, fit, predict_all
from .core.layer import Layer, LayerKind
from .core.network import Network
from .core.neuron import Neuron
from .util.normalize import normalize_input, normalize_matrix
