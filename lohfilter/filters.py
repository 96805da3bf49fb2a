# -*- coding: utf-8 -*-
"""Vectorised versions of the predicates in :mod:`lohfilter.alleles`,
operating on arrays of allele bitmasks, e.g., one value per candidate site.
All inputs are broadcast against each other."""
import logging


import numpy as np


from lohfilter.constants import NO_CALL, N, ALLELE_MASK_MAX
from lohfilter.util import check_allele_mask_array, check_reference_base_array


logger = logging.getLogger(__name__)
debug = logger.debug


# number of set bits for every possible allele bitmask
_ALLELE_COUNTS = np.array([bin(i).count('1') for i in range(ALLELE_MASK_MAX + 1)],
                          dtype='u1')


def count_alleles_array(masks):
    """Count the number of distinct alleles in each genotype bitmask.

    Parameters
    ----------
    masks : array_like, int
        Allele bitmasks, values in [0, 15].

    Returns
    -------
    n : ndarray, uint8
        Same shape as `masks`.

    Examples
    --------
    >>> from lohfilter.filters import count_alleles_array
    >>> count_alleles_array([0, 1, 5, 7, 15])
    array([0, 1, 2, 3, 4], dtype=uint8)

    """
    masks = check_allele_mask_array(masks, 'masks')
    return _ALLELE_COUNTS[masks]


def genotype_set_difference_array(a, b):
    """Remove from each genotype in `a` the alleles present in the
    corresponding genotype in `b`.

    Examples
    --------
    >>> from lohfilter.filters import genotype_set_difference_array
    >>> genotype_set_difference_array([3, 7, 3, 1], [2, 2, 3, 3])
    array([1, 5, 0, 0], dtype=uint8)

    """
    a = check_allele_mask_array(a, 'a')
    b = check_allele_mask_array(b, 'b')
    return _set_difference(a, b)


def _set_difference(a, b):
    # mask the complement to 4 bits so signed inputs stay non-negative
    return a & (N ^ b)


def _is_loh(mutant, original):
    gained = _set_difference(mutant, original)
    loh = ((gained == NO_CALL) & (mutant != original)) | (original == N)
    return loh & (mutant != NO_CALL)


def is_loh_array(mutant_genotypes, original_genotypes):
    """Locate calls where the mutant genotype is explained by loss of
    heterozygosity in the original genotype.

    Parameters
    ----------
    mutant_genotypes : array_like, int
        Allele bitmasks of the derived calls, e.g., tumor.
    original_genotypes : array_like, int
        Allele bitmasks of the original calls, e.g., normal.

    Returns
    -------
    loh : ndarray, bool

    See Also
    --------
    lohfilter.alleles.is_loh

    Examples
    --------
    >>> from lohfilter.filters import is_loh_array
    >>> is_loh_array([4, 5, 5, 15, 0], [5, 4, 5, 15, 15])
    array([ True, False, False,  True, False])

    """
    mutant = check_allele_mask_array(mutant_genotypes, 'mutant genotypes')
    original = check_allele_mask_array(original_genotypes, 'original genotypes')
    return np.asarray(_is_loh(mutant, original))


def _check_inputs(reference, tumor, normal):
    reference = check_reference_base_array(reference)
    tumor = check_allele_mask_array(tumor, 'tumor genotypes')
    normal = check_allele_mask_array(normal, 'normal genotypes')
    try:
        return np.broadcast_arrays(reference, tumor, normal)
    except ValueError:
        raise ValueError('reference, tumor and normal arrays cannot be broadcast together: '
                         '%s, %s, %s' % (reference.shape, tumor.shape, normal.shape))


def _is_transition(reference, tumor, normal):
    # sites where a filter can apply at all: both samples called, calls
    # differ and the normal is not homozygous reference
    return ((tumor != NO_CALL) & (normal != NO_CALL) & (tumor != normal) &
            (normal != reference))


def _loh_filter(reference, tumor, normal):
    return _is_transition(reference, tumor, normal) & _is_loh(tumor, normal)


def _gor_filter(reference, tumor, normal):
    gained = _set_difference(tumor, normal)
    is_reverted = (gained == NO_CALL) | (gained == reference)
    return _is_transition(reference, tumor, normal) & is_reverted


def loh_filter(reference, tumor_genotypes, normal_genotypes):
    """Locate tumor calls to filter as loss of heterozygosity.

    Parameters
    ----------
    reference : array_like, int
        Reference base bitmasks, each one of 1, 2, 4 or 8.
    tumor_genotypes : array_like, int
        Tumor allele bitmasks.
    normal_genotypes : array_like, int
        Normal allele bitmasks.

    Returns
    -------
    filtered : ndarray, bool

    See Also
    --------
    lohfilter.alleles.should_filter_as_loh

    Examples
    --------
    >>> from lohfilter.constants import A, C, G
    >>> from lohfilter.filters import loh_filter
    >>> loh_filter(A, [G, A | G, G, A], [A | G, G, G, A | C])
    array([ True, False, False,  True])

    """
    reference, tumor, normal = _check_inputs(reference, tumor_genotypes, normal_genotypes)
    out = np.asarray(_loh_filter(reference, tumor, normal))
    debug('loh filter: %s of %s calls filtered', np.count_nonzero(out), out.size)
    return out


def gor_filter(reference, tumor_genotypes, normal_genotypes):
    """Locate tumor calls to filter because they have gone back to the
    reference allele.

    Parameters
    ----------
    reference : array_like, int
        Reference base bitmasks, each one of 1, 2, 4 or 8.
    tumor_genotypes : array_like, int
        Tumor allele bitmasks.
    normal_genotypes : array_like, int
        Normal allele bitmasks.

    Returns
    -------
    filtered : ndarray, bool

    See Also
    --------
    lohfilter.alleles.should_filter_as_gor

    Examples
    --------
    >>> from lohfilter.constants import A, C, G, T
    >>> from lohfilter.filters import gor_filter
    >>> gor_filter(A, [A, A | G, T | G, A], [G, C | G, G, A])
    array([ True,  True, False, False])

    """
    reference, tumor, normal = _check_inputs(reference, tumor_genotypes, normal_genotypes)
    out = np.asarray(_gor_filter(reference, tumor, normal))
    debug('gor filter: %s of %s calls filtered', np.count_nonzero(out), out.size)
    return out


def somatic_artifact_filter(reference, tumor_genotypes, normal_genotypes):
    """Locate tumor calls that should not be reported as somatic because
    they are filtered as either LOH or GOR.

    Examples
    --------
    >>> from lohfilter.constants import A, C, G, T
    >>> from lohfilter.filters import somatic_artifact_filter
    >>> somatic_artifact_filter(A, [G, A, C | G, A | C], [A | G, G, G, A | T])
    array([ True,  True, False, False])

    """
    reference, tumor, normal = _check_inputs(reference, tumor_genotypes, normal_genotypes)
    loh = _loh_filter(reference, tumor, normal)
    gor = _gor_filter(reference, tumor, normal)
    out = np.asarray(loh | gor)
    debug('somatic artifact filter: %s loh, %s gor, %s of %s calls filtered',
          np.count_nonzero(loh), np.count_nonzero(gor), np.count_nonzero(out), out.size)
    return out
