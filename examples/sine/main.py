import matplotlib.pyplot as plt
import numpy as np

from ffbp import Network, fit, predict_all
from ffbp.core.logger import setup_logging
from ffbp.data import toy
from ffbp.visualize import plot_error_history


setup_logging(filename='sine-log.txt')

random_state = np.random.RandomState(1234)

# Sample sin(x) on [-pi, pi) ##################################################

inputs, targets = toy.sine(n_samples=50)

# Set up the network and fit it ###############################################

net = Network(topology=[1, 6, 1], learning_rate=0.01,
              random_state=random_state)

errors = fit(net, inputs, targets, epochs=10000, log_every=500)

# Report every fifth prediction ###############################################

print("Sine Function Approximation Results:")
for x, y in zip(inputs[::5], targets[::5]):
    output = net.predict(x)
    print("Input: {:+.4f}, Predicted: {:+.4f}, Target: {:+.4f}".format(
        x[0], output[0], y[0]))

# Plot the fit and the training error #########################################

fig, (ax_fit, ax_err) = plt.subplots(1, 2, figsize=(10, 4))

ax_fit.plot(inputs[:, 0], targets[:, 0], 'k-', label='sin(x)')
ax_fit.plot(inputs[:, 0], predict_all(net, inputs)[:, 0], 'b.',
            label='network')
ax_fit.legend()

plot_error_history(errors, ax=ax_err)

plt.show()
