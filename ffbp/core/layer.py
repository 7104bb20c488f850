import enum

import numpy

from .neuron import Neuron
from ffbp.util.vector import as_vector


class LayerKind(enum.Enum):
    INPUT = 'input'
    HIDDEN = 'hidden'
    OUTPUT = 'output'


class Layer:
    """ An ordered collection of neurons

    A layer knows its own position in the owning network and the positions
    of its neighbours. The neighbours are never referenced directly; the
    module-level :func:`forward` and :func:`backward` functions resolve
    them through the sequence of layers owned by the network.
    """

    def __init__(self, kind, n_neurons, index,
                 previous_index=None, next_index=None):
        """
        Parameters
        ----------
        kind: LayerKind
            One of input, hidden, or output.

        n_neurons: int
            The number of neurons in the layer.

        index: int
            The position of the layer in the network.

        previous_index, next_index: int, default=None
            The positions of the neighbouring layers. None at the network
            boundaries.

        """
        if not isinstance(kind, LayerKind):
            msg = "`kind` ({}) should be a LayerKind"
            raise TypeError(msg.format(kind))

        if kind is LayerKind.INPUT and previous_index is not None:
            raise ValueError("An input layer cannot have a previous layer")

        if kind is not LayerKind.INPUT and previous_index is None:
            msg = "A {} layer requires a previous layer"
            raise ValueError(msg.format(kind.value))

        if kind is LayerKind.OUTPUT and next_index is not None:
            raise ValueError("An output layer cannot have a next layer")

        if kind is LayerKind.HIDDEN and next_index is None:
            raise ValueError("A hidden layer requires a next layer")

        if n_neurons < 1:
            msg = "`n_neurons` ({}) should be a positive integer"
            raise ValueError(msg.format(n_neurons))

        self.kind = kind
        self.index = index
        self.previous_index = previous_index
        self.next_index = next_index
        self._neurons = tuple(Neuron() for _ in range(n_neurons))

    def __repr__(self):
        msg = "<Layer kind={}, index={:d}, n_neurons={:d}>"
        return msg.format(self.kind.value, self.index, self.n_neurons)

    def __len__(self):
        return len(self._neurons)

    @property
    def n_neurons(self):
        return len(self._neurons)

    @property
    def neurons(self):
        return self._neurons

    def neuron(self, i):
        return self._neurons[i]

    def activations(self):
        return numpy.array([n.activation for n in self._neurons])

    def gradients(self):
        return numpy.array([n.gradient for n in self._neurons])

    def biases(self):
        return numpy.array([n.bias for n in self._neurons])

    def weights(self):
        """ Returns the incoming weights as a matrix with shape
        `(n_neurons, n_previous)`, row `i` being the weights of neuron `i`
        """
        if self.kind is LayerKind.INPUT:
            return numpy.zeros((self.n_neurons, 0))
        return numpy.vstack([n.weights for n in self._neurons])


def _forward_input(layer, values):
    if values is None:
        raise ValueError("The input layer requires input values")

    values = as_vector(values, layer.n_neurons, 'input')

    for neuron, value in zip(layer.neurons, values):
        neuron.set_value(value)
        neuron.set_activation(value)


def _forward_weighted(layer, previous):
    inputs = previous.activations()

    for neuron in layer.neurons:
        weighted_sum = neuron.weighted_sum(inputs)
        neuron.set_activation(Neuron.tanh_activation(weighted_sum))


def _backward_hidden(layer, following):
    # Column i holds the weights of every downstream neuron on neuron i
    downstream = numpy.dot(following.gradients(), following.weights())

    for neuron, error in zip(layer.neurons, downstream):
        derivative = Neuron.tanh_derivative_from_activation(neuron.activation)
        neuron.set_gradient(error * derivative)


def _backward_output(layer, target):
    target = as_vector(target, layer.n_neurons, 'target')

    for neuron, expected in zip(layer.neurons, target):
        error = expected - neuron.activation
        derivative = Neuron.tanh_derivative_from_activation(neuron.activation)
        neuron.set_gradient(error * derivative)


def forward(layers, index, values=None):
    """ Run the forward computation of `layers[index]`

    Parameters
    ----------
    layers: sequence of Layer
        The layers owned by a network, in order.

    index: int
        The layer to compute.

    values: array-like, default=None
        The external input. Required for (and only used by) the input
        layer.

    """
    layer = layers[index]

    if layer.kind is LayerKind.INPUT:
        _forward_input(layer, values)
    elif layer.kind in (LayerKind.HIDDEN, LayerKind.OUTPUT):
        _forward_weighted(layer, layers[layer.previous_index])
    else:
        msg = "Unknown layer kind: {}"
        raise ValueError(msg.format(layer.kind))


def backward(layers, index, target=None):
    """ Run the backward computation of `layers[index]`

    The input layer never carries a gradient, so it is a no-op there. The
    output layer is seeded from `target`; without it, it is a no-op as well.
    A hidden layer reads the gradients of the next layer, so the next layer
    must already have been visited in the current cycle.
    """
    layer = layers[index]

    if layer.kind is LayerKind.INPUT:
        return
    elif layer.kind is LayerKind.HIDDEN:
        _backward_hidden(layer, layers[layer.next_index])
    elif layer.kind is LayerKind.OUTPUT:
        if target is not None:
            _backward_output(layer, target)
    else:
        msg = "Unknown layer kind: {}"
        raise ValueError(msg.format(layer.kind))
