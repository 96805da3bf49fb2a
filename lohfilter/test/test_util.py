# -*- coding: utf-8 -*-
import unittest


import numpy as np


from lohfilter.util import asarray_ndim, check_allele_mask, check_reference_base, \
    check_allele_mask_array, check_reference_base_array


class TestChecks(unittest.TestCase):

    def test_asarray_ndim(self):
        a = asarray_ndim([1, 2, 3], 1)
        self.assertIsInstance(a, np.ndarray)
        self.assertEqual(1, a.ndim)
        self.assertIsNone(asarray_ndim(None, 1, allow_none=True))
        with self.assertRaises(TypeError):
            asarray_ndim([[1, 2]], 1)
        with self.assertRaises(TypeError):
            asarray_ndim(1, 1, 2)

    def test_check_allele_mask(self):
        self.assertEqual(0, check_allele_mask(0))
        self.assertEqual(15, check_allele_mask(np.int8(15)))
        self.assertIs(int, type(check_allele_mask(np.uint8(3))))
        for bad in 16, -1, 255:
            with self.assertRaises(ValueError):
                check_allele_mask(bad)
        for bad in 1.0, '1', None, False:
            with self.assertRaises(TypeError):
                check_allele_mask(bad)

    def test_check_reference_base(self):
        for r in 1, 2, 4, 8:
            self.assertEqual(r, check_reference_base(r))
        for bad in 0, 3, 15, 16:
            with self.assertRaises(ValueError):
                check_reference_base(bad)

    def test_check_allele_mask_array(self):
        a = check_allele_mask_array([[0, 15], [3, 4]])
        self.assertEqual((2, 2), a.shape)
        with self.assertRaises(ValueError):
            check_allele_mask_array([0, 16])
        with self.assertRaises(ValueError):
            check_allele_mask_array([-1, 1])
        with self.assertRaises(TypeError):
            check_allele_mask_array([0.5, 1.0])

    def test_check_reference_base_array(self):
        check_reference_base_array([1, 2, 4, 8])
        check_reference_base_array(4)
        with self.assertRaises(ValueError):
            check_reference_base_array([1, 3])
        with self.assertRaises(TypeError):
            check_reference_base_array(['A'])
