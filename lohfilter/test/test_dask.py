# -*- coding: utf-8 -*-
import unittest


import numpy as np
import dask
import dask.array as da


from lohfilter.constants import A, C, G, T, SINGLE_ALLELES
from lohfilter.filters import loh_filter, gor_filter, somatic_artifact_filter
from lohfilter.dask import loh_filter_dask, gor_filter_dask, \
    somatic_artifact_filter_dask, ensure_dask_array
from lohfilter.test.tools import assert_filter_equal


# use synchronous scheduler because getting random hangs with default
dask.config.set(scheduler='synchronous')


def random_calls(n, seed=42):
    rng = np.random.RandomState(seed)
    reference = rng.choice(SINGLE_ALLELES, size=n)
    tumor = rng.randint(0, 16, size=n)
    normal = rng.randint(0, 16, size=n)
    return reference, tumor, normal


class TestDaskFilters(unittest.TestCase):

    def test_matches_numpy(self):
        reference, tumor, normal = random_calls(1000)
        for f, fd in ((loh_filter, loh_filter_dask),
                      (gor_filter, gor_filter_dask),
                      (somatic_artifact_filter, somatic_artifact_filter_dask)):
            expect = f(reference, tumor, normal)
            actual = fd(reference, tumor, normal, chunks=(128,))
            self.assertIsInstance(actual, da.Array)
            assert_filter_equal(expect, actual.compute())

    def test_scalar_reference(self):
        _, tumor, normal = random_calls(500, seed=1)
        expect = loh_filter(C, tumor, normal)
        actual = loh_filter_dask(C, tumor, normal, chunks=(64,))
        assert_filter_equal(expect, actual.compute())

    def test_dask_inputs(self):
        tumor = da.from_array(np.array([G, A | G, A, C | G]), chunks=2)
        normal = da.from_array(np.array([A | G, G, G, G]), chunks=3)
        assert_filter_equal([True, False, False, False],
                            loh_filter_dask(A, tumor, normal).compute())
        assert_filter_equal([True, True, True, False],
                            gor_filter_dask(A, tumor, normal).compute())

    def test_empty(self):
        tumor = np.array([], dtype=int)
        normal = np.array([], dtype=int)
        for f, fd in ((loh_filter, loh_filter_dask),
                      (gor_filter, gor_filter_dask),
                      (somatic_artifact_filter, somatic_artifact_filter_dask)):
            expect = f(A, tumor, normal)
            actual = fd(A, tumor, normal).compute()
            self.assertEqual((0,), actual.shape)
            assert_filter_equal(expect, actual)

    def test_2d(self):
        tumor = np.array([[G, A, A | G], [C, C | T, T]])
        normal = np.array([A | G, C | T])[:, np.newaxis]
        reference = np.array([A, C])[:, np.newaxis]
        actual = loh_filter_dask(reference, tumor, normal, chunks=(1, 2))
        assert_filter_equal(loh_filter(reference, tumor, normal), actual.compute())

    def test_errors(self):
        with self.assertRaises(TypeError):
            loh_filter_dask(A, np.array([0.5]), np.array([A | G]))
        with self.assertRaises(ValueError):
            loh_filter_dask(A | G, np.array([G]), np.array([A | G]))
        # values are checked when blocks are computed
        with self.assertRaises(ValueError):
            gor_filter_dask(A, np.array([A, 16]), np.array([G, G])).compute()

    def test_ensure_dask_array(self):
        d = ensure_dask_array(np.arange(10), chunks=(4,))
        self.assertEqual(((4, 4, 2),), d.chunks)
        self.assertIs(d, ensure_dask_array(d))
        with self.assertRaises(TypeError):
            ensure_dask_array(1)
