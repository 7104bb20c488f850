import unittest

import numpy as np

from ffbp.data import toy


class TestToyData(unittest.TestCase):

    def test_xor(self):
        inputs, targets = toy.xor()

        self.assertEqual(inputs.shape, (4, 2))
        self.assertEqual(targets.shape, (4, 1))

        expected = np.logical_xor(inputs[:, 0], inputs[:, 1])
        np.testing.assert_array_equal(targets[:, 0], expected.astype(float))

    def test_sine(self):
        inputs, targets = toy.sine(n_samples=50)

        self.assertEqual(inputs.shape, (50, 1))
        self.assertEqual(targets.shape, (50, 1))
        self.assertAlmostEqual(inputs[0, 0], -np.pi)
        self.assertAlmostEqual(inputs[1, 0] - inputs[0, 0], 2 * np.pi / 50)
        self.assertLess(inputs[-1, 0], np.pi)
        np.testing.assert_allclose(targets, np.sin(inputs))

    def test_sine_bad_samples(self):
        with self.assertRaises(ValueError):
            toy.sine(n_samples=0)

    def test_one_hot(self):
        targets, classes = toy.one_hot(['b', 'a', 'c', 'a'])

        self.assertEqual(list(classes), ['a', 'b', 'c'])
        np.testing.assert_array_equal(
            targets, [[0, 1, 0], [1, 0, 0], [0, 0, 1], [1, 0, 0]])

    def test_one_hot_two_classes(self):
        targets, classes = toy.one_hot(['yes', 'no', 'yes'])

        self.assertEqual(list(classes), ['no', 'yes'])
        np.testing.assert_array_equal(targets, [[0, 1], [1, 0], [0, 1]])

    def test_iris(self):
        inputs, targets, classes = toy.iris()

        self.assertEqual(inputs.shape, (150, 4))
        self.assertEqual(targets.shape, (150, 3))
        self.assertEqual(len(classes), 3)
        np.testing.assert_array_equal(targets.sum(axis=1), np.ones(150))
        np.testing.assert_array_equal(targets.sum(axis=0), [50, 50, 50])


if __name__ == '__main__':
    unittest.main()
