import numpy

from .exception import ShapeMismatchError


class Neuron:
    """ A single unit of the network

    A neuron carries the scalar state of one forward/backward cycle
    (raw value, bias, activation, gradient) and the weights of its incoming
    connections, one per neuron of the previous layer. Input-layer neurons
    hold no weights.

    The state is read through properties; it is changed only through the
    `set_*` methods and :meth:`apply_update`.
    """

    def __init__(self):
        self._value = 0.0
        self._bias = 0.0
        self._activation = 0.0
        self._gradient = 0.0
        self._weights = numpy.zeros(0, dtype=float)

    def __repr__(self):
        msg = "<Neuron activation={:.5f}, gradient={:.5f}, n_weights={:d}>"
        return msg.format(self._activation, self._gradient, self.n_weights)

    @property
    def value(self):
        return self._value

    @property
    def bias(self):
        return self._bias

    @property
    def activation(self):
        return self._activation

    @property
    def gradient(self):
        return self._gradient

    @property
    def weights(self):
        """ A read-only view of the incoming weights
        """
        view = self._weights.view()
        view.flags.writeable = False
        return view

    @property
    def n_weights(self):
        return self._weights.shape[0]

    def set_value(self, value):
        self._value = float(value)

    def set_bias(self, bias):
        self._bias = float(bias)

    def set_activation(self, activation):
        self._activation = float(activation)

    def set_gradient(self, gradient):
        self._gradient = float(gradient)

    def set_weights(self, weights):
        """ Replace the incoming weights with a copy of `weights`

        Note
        ----
        The first call fixes the number of weights (the size of the
        previous layer). Later calls must supply the same number.
        """
        weights = numpy.array(weights, dtype=float)

        if weights.ndim != 1:
            msg = "`weights` should be 1d, got ndim={}"
            raise ValueError(msg.format(weights.ndim))

        if self.n_weights > 0 and weights.shape[0] != self.n_weights:
            msg = "`weights` has length {:d} but the neuron has {:d} inputs"
            raise ShapeMismatchError(
                msg.format(weights.shape[0], self.n_weights))

        self._weights = weights

    def weighted_sum(self, inputs):
        """ Returns `dot(inputs, weights) + bias`
        """
        return float(numpy.dot(inputs, self._weights)) + self._bias

    def apply_update(self, learning_rate, inputs):
        """ Apply the delta rule using the stored gradient

        Parameters
        ----------
        learning_rate: float
            The step size

        inputs: ndarray, shape=(n_weights,)
            The activations of the previous layer, aligned with the weights

        """
        step = learning_rate * self._gradient
        self._weights += step * numpy.asarray(inputs, dtype=float)
        self._bias += step

    @staticmethod
    def tanh_activation(x):
        return numpy.tanh(x)

    @staticmethod
    def tanh_derivative(x):
        """ Derivative of tanh evaluated at the pre-activation input `x`
        """
        tanh_value = numpy.tanh(x)
        return 1.0 - tanh_value * tanh_value

    @staticmethod
    def tanh_derivative_from_activation(activation):
        """ Derivative of tanh expressed through its output, i.e.,
        `1 - activation**2` where `activation = tanh(x)`

        Note
        ----
        This is only valid because the activation is tanh. The layers use
        this form so the weighted sum does not need to be stored.
        """
        return 1.0 - activation * activation
