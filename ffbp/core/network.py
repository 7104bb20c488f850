import logging
import numbers

import numpy

from .layer import Layer, LayerKind, backward, forward
from ffbp.util.vector import as_vector


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


class Network:
    """
    A fully-connected feed-forward network with tanh units, trained one
    example at a time by backpropagation.

    For a single input vector `x` the computation chain is::

        a[0] = x
        a[l] = tanh( dot(W[l], a[l-1]) + b[l] ),  l = 1, ..., L-1

    where row `i` of `W[l]` holds the weights of neuron `i` in layer `l`.

    A training step is :meth:`forward_propagation`, then
    :meth:`back_propagation`, then :meth:`update_weights_and_biases`
    (see :meth:`train_example`).
    """

    def __init__(self, topology, learning_rate, random_state=None):
        """
        Parameters
        ----------
        topology: sequence of int
            The number of neurons in each layer, input layer first and
            output layer last. At least two entries are required.

        learning_rate: float
            The (positive) step size of the weight updates.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.

        """
        topology = tuple(topology)

        if len(topology) < 2:
            msg = "`topology` needs at least 2 layers, got {:d}"
            raise ValueError(msg.format(len(topology)))

        for n_neurons in topology:
            if (not isinstance(n_neurons, numbers.Integral)
                    or isinstance(n_neurons, bool) or n_neurons < 1):
                msg = "`topology` entries should be positive ints, got {}"
                raise ValueError(msg.format(topology))

        try:
            learning_rate = float(learning_rate)
        except (ValueError, TypeError):
            msg = "`learning_rate` must be numeric, got {}"
            raise ValueError(msg.format(learning_rate))

        if not learning_rate > 0:
            msg = "`learning_rate` ({}) should be positive"
            raise ValueError(msg.format(learning_rate))

        if random_state is None:
            random_state = numpy.random.RandomState()
            msg = ("RandomState not provided; results will "
                   "not be reproducible")
            logger.warning(msg)
        elif not isinstance(random_state, numpy.random.RandomState):
            msg = "`random_state` ({}) not instance numpy.random.RandomState"
            raise TypeError(msg.format(type(random_state)))

        self._topology = tuple(int(n) for n in topology)
        self._learning_rate = learning_rate
        self.random_state = random_state

        self._layers = self._build_layers(self._topology)
        self.initialize_weights_and_biases()

        logger.debug("Created {}".format(self))

    def __repr__(self):
        msg = "<Network topology={}, learning_rate={}>"
        return msg.format(list(self._topology), self._learning_rate)

    def __len__(self):
        return len(self._layers)

    @staticmethod
    def _build_layers(topology):
        last = len(topology) - 1
        layers = []

        for index, n_neurons in enumerate(topology):
            if index == 0:
                kind = LayerKind.INPUT
            elif index == last:
                kind = LayerKind.OUTPUT
            else:
                kind = LayerKind.HIDDEN

            layers.append(Layer(
                kind=kind, n_neurons=n_neurons, index=index,
                previous_index=index - 1 if index > 0 else None,
                next_index=index + 1 if index < last else None))

        return tuple(layers)

    @property
    def topology(self):
        return self._topology

    @property
    def learning_rate(self):
        return self._learning_rate

    @property
    def layers(self):
        return self._layers

    @property
    def n_layers(self):
        return len(self._layers)

    @property
    def input_layer(self):
        return self._layers[0]

    @property
    def output_layer(self):
        return self._layers[-1]

    def initialize_weights_and_biases(self):
        """
        Draw every bias and weight of the non-input neurons independently
        from a zero-mean normal distribution with standard deviation
        `sqrt(2 / (fan_in + fan_out))`, fan_in and fan_out being the sizes
        of the previous and the current layer.
        """
        for layer in self._layers[1:]:
            fan_in = self._layers[layer.previous_index].n_neurons
            fan_out = layer.n_neurons
            scale = numpy.sqrt(2.0 / (fan_in + fan_out))

            for neuron in layer.neurons:
                neuron.set_bias(scale * self.random_state.randn())
                neuron.set_weights(scale * self.random_state.randn(fan_in))

    def forward_propagation(self, input):
        """ Feed `input` to the input layer and compute every following
        layer in order

        Parameters
        ----------
        input: array-like, shape=(topology[0],)
            The input vector.

        """
        forward(self._layers, 0, values=input)

        for index in range(1, len(self._layers)):
            forward(self._layers, index)

    def back_propagation(self, target):
        """ Compute the neuron gradients for `target`, starting from the
        output layer and moving toward (but not into) the input layer

        Must follow a call to :meth:`forward_propagation`.

        Parameters
        ----------
        target: array-like, shape=(topology[-1],)
            The desired output vector.

        """
        # Without a target the output layer keeps its old gradients
        if target is None:
            raise ValueError("`target` is required for backpropagation")

        backward(self._layers, len(self._layers) - 1, target=target)

        for index in range(len(self._layers) - 2, 0, -1):
            backward(self._layers, index)

    def update_weights_and_biases(self):
        """ Apply the delta rule to every non-input neuron using the
        gradients of the last :meth:`back_propagation`
        """
        for layer in self._layers[1:]:
            inputs = self._layers[layer.previous_index].activations()

            for neuron in layer.neurons:
                neuron.apply_update(self._learning_rate, inputs)

    def predict(self, input):
        """
        Parameters
        ----------
        input: array-like, shape=(topology[0],)
            The input vector.

        Returns
        -------
        output: ndarray, shape=(topology[-1],)
            The output layer activations.

        Note
        ----
        This runs :meth:`forward_propagation`, so the activations stored in
        every layer are overwritten.
        """
        self.forward_propagation(input)
        return self.output_layer.activations()

    def calculate_error(self, target):
        """ Returns `sum(0.5 * (target - output)**2)` for the current output
        layer activations. No state is changed.
        """
        target = as_vector(target, self.output_layer.n_neurons, 'target')
        diff = target - self.output_layer.activations()
        return 0.5 * float(numpy.dot(diff, diff))

    def train_example(self, input, target):
        """ Run a full training step on one example and return the error
        of the output computed before the update
        """
        self.forward_propagation(input)
        self.back_propagation(target)
        self.update_weights_and_biases()
        return self.calculate_error(target)
