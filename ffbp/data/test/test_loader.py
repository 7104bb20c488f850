import os
import shutil
import tempfile
import unittest

import numpy as np

from ffbp.core.exception import DataLoadError
from ffbp.data.loader import load_csv, load_labelled_csv


class TestLoader(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def write(self, contents, filename='data.csv'):
        path = os.path.join(self.tmp_dir, filename)
        with open(path, 'w') as f:
            f.write(contents)
        return path

    def test_numeric(self):
        path = self.write("1,2,3\n4.5,-5,6e1\n")

        matrix = load_csv(path)

        np.testing.assert_array_equal(matrix, [[1., 2., 3.], [4.5, -5., 60.]])

    def test_header_is_skipped(self):
        path = self.write("x,y\n1,2\n3,4\n\n")

        np.testing.assert_array_equal(load_csv(path), [[1., 2.], [3., 4.]])

    def test_label_column_is_skipped(self):
        path = self.write("5.1,3.5,Iris-setosa\n6.2,2.9,Iris-versicolor\n")

        np.testing.assert_array_equal(
            load_csv(path), [[5.1, 3.5], [6.2, 2.9]])

    def test_other_delimiter(self):
        path = self.write("1;2\n3;4\n")

        np.testing.assert_array_equal(
            load_csv(path, delimiter=';'), [[1., 2.], [3., 4.]])

    def test_skipped_cell_breaks_width(self):
        path = self.write("1,2,3\n4,oops,6\n")

        with self.assertRaises(DataLoadError):
            load_csv(path)

    def test_short_row(self):
        path = self.write("1,2,3\n4,5\n")

        with self.assertRaises(DataLoadError):
            load_csv(path)

    def test_long_row(self):
        path = self.write("1,2\n3,4,5\n")

        with self.assertRaises(DataLoadError):
            load_csv(path)

    def test_missing_file(self):
        with self.assertRaises(DataLoadError):
            load_csv(os.path.join(self.tmp_dir, 'nope.csv'))

    def test_empty_file(self):
        path = self.write("")

        with self.assertRaises(DataLoadError):
            load_csv(path)

    def test_no_numeric_data(self):
        path = self.write("a,b\nc,d\n")

        with self.assertRaises(DataLoadError):
            load_csv(path)

    def test_data_load_error_is_value_error(self):
        self.assertTrue(issubclass(DataLoadError, ValueError))

    def test_labelled(self):
        path = self.write(
            "sepal,width,species\n"
            "5.1,3.5,Iris-setosa\n"
            "6.2,2.9, Iris-versicolor\n"
            "5.9,3.0,Iris-virginica\n")

        features, labels = load_labelled_csv(path)

        np.testing.assert_array_equal(
            features, [[5.1, 3.5], [6.2, 2.9], [5.9, 3.0]])
        self.assertEqual(
            list(labels),
            ['Iris-setosa', 'Iris-versicolor', 'Iris-virginica'])

    def test_labelled_single_column(self):
        path = self.write("a\nb\n")

        with self.assertRaises(DataLoadError):
            load_labelled_csv(path)


if __name__ == '__main__':
    unittest.main()
