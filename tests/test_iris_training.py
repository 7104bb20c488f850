import unittest

import numpy as np

from ffbp import Network, evaluate, fit, normalize_matrix, predict_all
from ffbp.data import toy


class TestIrisTraining(unittest.TestCase):

    def test_learns_iris(self):
        rs = np.random.RandomState(1234)
        inputs, targets, _ = toy.iris()
        inputs = normalize_matrix(inputs)

        net = Network([4, 8, 3], learning_rate=0.05, random_state=rs)
        initial_error = evaluate(net, inputs, targets)

        fit(net, inputs, targets, epochs=300, shuffle=True, log_every=100)

        self.assertLess(evaluate(net, inputs, targets), initial_error)

        predicted = predict_all(net, inputs).argmax(axis=1)
        accuracy = (predicted == targets.argmax(axis=1)).mean()
        self.assertGreater(accuracy, 0.8)


if __name__ == '__main__':
    unittest.main()
