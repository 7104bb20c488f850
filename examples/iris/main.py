import os

import numpy as np

from ffbp import Network, fit, normalize_input, normalize_matrix
from ffbp.core.logger import setup_logging
from ffbp.data import toy
from ffbp.data.loader import load_labelled_csv


setup_logging(filename='iris-log.txt')

random_state = np.random.RandomState(1234)

# The UCI file (sepal/petal measurements followed by the class name) is used
# when present; otherwise the copy bundled with scikit-learn.
DATA_FILENAME = 'iris.data'

# Load and normalize the data #################################################

if os.path.exists(DATA_FILENAME):
    features, labels = load_labelled_csv(DATA_FILENAME)
    targets, classes = toy.one_hot(labels)
else:
    features, targets, classes = toy.iris()

inputs = normalize_matrix(features)

# Set up the network and fit it ###############################################

net = Network(topology=[4, 8, 3], learning_rate=0.01,
              random_state=random_state)

errors = fit(net, inputs, targets, epochs=1000, log_every=100, shuffle=True)

# Report the accuracy and classify a new measurement ##########################

n_correct = 0
for x, y in zip(inputs, targets):
    n_correct += net.predict(x).argmax() == y.argmax()

print("Training accuracy: {:.2%}".format(n_correct / inputs.shape[0]))

sample = np.array([5.9, 3.0, 5.1, 1.8])
output = net.predict(normalize_input(sample, reference=features))

print("Input: {}, Predicted class: {}".format(
    sample, classes[output.argmax()]))
print("Output activations: {}".format(np.round(output, 4)))
