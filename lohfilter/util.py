# -*- coding: utf-8 -*-
import numbers


import numpy as np


from lohfilter.constants import ALLELE_MASK_MAX, SINGLE_ALLELES


def asarray_ndim(a, *ndims, **kwargs):
    """Ensure numpy array.

    Parameters
    ----------
    a : array_like
    *ndims : int, optional
        Allowed values for number of dimensions. If none are given, any
        number of dimensions is accepted.
    **kwargs
        Passed through to :func:`numpy.asarray`.

    Returns
    -------
    a : numpy.ndarray

    """
    allow_none = kwargs.pop('allow_none', False)
    if a is None and allow_none:
        return None
    a = np.asarray(a, **kwargs)
    if ndims and a.ndim not in ndims:
        if len(ndims) > 1:
            expect_str = 'one of %s' % str(ndims)
        else:
            # noinspection PyUnresolvedReferences
            expect_str = '%s' % ndims[0]
        raise TypeError('bad number of dimensions: expected %s; found %s' %
                        (expect_str, a.ndim))
    return a


def check_dtype_kind(a, *kinds):
    if a.dtype.kind not in kinds:
        raise TypeError('bad dtype kind: expected one of %s; found %s' % (kinds, a.dtype.kind))


def check_integer_dtype(a):
    check_dtype_kind(a, 'u', 'i')


def check_type(obj, expected):
    if not isinstance(obj, expected) or isinstance(obj, (bool, np.bool_)):
        raise TypeError('bad argument type, expected %s, found %s' % (expected, type(obj)))


def check_allele_mask(mask, name='genotype'):
    """Check that `mask` is an integer allele bitmask in the range [0, 15].
    Returns the mask as a plain int."""
    check_type(mask, numbers.Integral)
    mask = int(mask)
    if mask < 0 or mask > ALLELE_MASK_MAX:
        raise ValueError(
            '%s must be an allele bitmask between 0 and %s, found %s' %
            (name, ALLELE_MASK_MAX, mask)
        )
    return mask


def check_reference_base(reference_base):
    """Check that `reference_base` is a single-allele bitmask."""
    check_type(reference_base, numbers.Integral)
    reference_base = int(reference_base)
    if reference_base not in SINGLE_ALLELES:
        raise ValueError(
            'reference base must be a single allele (one of %s), found %s' %
            (SINGLE_ALLELES, reference_base)
        )
    return reference_base


def check_allele_mask_array(a, name='genotypes'):
    a = asarray_ndim(a)
    check_integer_dtype(a)
    if a.size and (a.min() < 0 or a.max() > ALLELE_MASK_MAX):
        raise ValueError(
            '%s must contain allele bitmasks between 0 and %s, found values in [%s, %s]' %
            (name, ALLELE_MASK_MAX, a.min(), a.max())
        )
    # range checked above, narrowing to one dtype is lossless
    return a.astype('u1', copy=False)


def check_reference_base_array(a):
    a = asarray_ndim(a)
    check_integer_dtype(a)
    bad = ~np.isin(a, SINGLE_ALLELES)
    if np.any(bad):
        raise ValueError(
            'reference bases must be single alleles (one of %s), found %s' %
            (SINGLE_ALLELES, np.unique(a[bad]).tolist())
        )
    return a.astype('u1', copy=False)
