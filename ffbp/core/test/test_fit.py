import unittest

import numpy as np

from ffbp.core.fit import evaluate, fit, predict_all
from ffbp.core.network import Network


class TestFit(unittest.TestCase):

    def setUp(self):
        self.rs = np.random.RandomState(1234)
        self.net = Network([2, 3, 1], 0.05, random_state=self.rs)
        self.inputs = self.rs.rand(6, 2)
        self.targets = 0.5 * self.inputs.sum(axis=1, keepdims=True) - 0.25

    def test_error_history(self):
        errors = fit(self.net, self.inputs, self.targets, epochs=20,
                     log_every=None)

        self.assertEqual(errors.shape, (20,))
        self.assertTrue((errors >= 0).all())
        self.assertLess(errors[-1], errors[0])

    def test_flat_targets(self):
        errors = fit(self.net, self.inputs, self.targets.ravel(), epochs=3,
                     log_every=None)
        self.assertEqual(errors.shape, (3,))

    def test_logging(self):
        with self.assertLogs('fit', level='INFO') as captured:
            fit(self.net, self.inputs, self.targets, epochs=10, log_every=5)

        # Epochs 0, 5 and the last one
        self.assertEqual(len(captured.records), 3)
        self.assertIn('Epoch 00 / 10', captured.records[0].getMessage())
        self.assertIn('Epoch 09 / 10', captured.records[-1].getMessage())

    def test_shuffle_is_reproducible(self):
        net1 = Network([2, 3, 1], 0.05, random_state=np.random.RandomState(1))
        net2 = Network([2, 3, 1], 0.05, random_state=np.random.RandomState(1))

        errors1 = fit(net1, self.inputs, self.targets, epochs=5,
                      shuffle=True, random_state=np.random.RandomState(3),
                      log_every=None)
        errors2 = fit(net2, self.inputs, self.targets, epochs=5,
                      shuffle=True, random_state=np.random.RandomState(3),
                      log_every=None)

        np.testing.assert_array_equal(errors1, errors2)

    def test_bad_arguments(self):
        with self.assertRaises(ValueError):
            fit(self.net, self.inputs, self.targets[:-1], epochs=5)

        with self.assertRaises(ValueError):
            fit(self.net, self.inputs, self.targets, epochs=0)

        with self.assertRaises(ValueError):
            fit(self.net, self.inputs, self.targets, epochs=2.5)

        with self.assertRaises(ValueError):
            fit(self.net, np.zeros((0, 2)), np.zeros((0, 1)), epochs=5)

    def test_predict_all_and_evaluate(self):
        outputs = predict_all(self.net, self.inputs)

        self.assertEqual(outputs.shape, (6, 1))
        for x, output in zip(self.inputs, outputs):
            np.testing.assert_array_equal(self.net.predict(x), output)

        expected = np.mean(0.5 * ((self.targets - outputs)**2).sum(axis=1))
        self.assertAlmostEqual(
            evaluate(self.net, self.inputs, self.targets), expected)


if __name__ == '__main__':
    unittest.main()
