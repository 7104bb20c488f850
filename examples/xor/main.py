import numpy as np

from ffbp import Network, fit
from ffbp.core.logger import setup_logging
from ffbp.data import toy


setup_logging(filename='xor-log.txt')

random_state = np.random.RandomState(1234)

# Load the data ###############################################################

inputs, targets = toy.xor()

# Set up the network and fit it ###############################################

net = Network(topology=[2, 4, 1], learning_rate=0.01,
              random_state=random_state)

errors = fit(net, inputs, targets, epochs=6000, log_every=500)

# Report the predictions ######################################################

print("XOR Test Results:")
for x, y in zip(inputs, targets):
    output = net.predict(x)
    print("Input: {}, Predicted: {:.4f}, Target: {:.0f}".format(
        x, output[0], y[0]))
