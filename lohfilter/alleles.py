# -*- coding: utf-8 -*-
"""Set arithmetic and filtering predicates over allele bitmasks.

A genotype call at a single site is encoded as a 4-bit integer with one bit
per nucleotide (A=1, C=2, G=4, T=8). 0 is a no call and 15 is the
ambiguous "N" call, which is taken to contain every allele.

"""
import numbers


from lohfilter.constants import NO_CALL, N
from lohfilter.util import check_allele_mask, check_reference_base, check_type


def count_alleles(mask):
    """Count the number of distinct alleles in a genotype bitmask.

    Parameters
    ----------
    mask : int
        Allele bitmask. Any non-negative integer is accepted, all set bits
        are counted.

    Returns
    -------
    n : int

    Examples
    --------
    >>> from lohfilter.constants import A, C, G, T
    >>> from lohfilter.alleles import count_alleles
    >>> count_alleles(0)
    0
    >>> count_alleles(A | G)
    2
    >>> count_alleles(A | C | G | T)
    4

    """
    check_type(mask, numbers.Integral)
    mask = int(mask)
    if mask < 0:
        raise ValueError('cannot count alleles in a negative value: %s' % mask)
    return bin(mask).count('1')


def genotype_set_difference(a, b):
    """Remove from genotype `a` every allele also present in genotype `b`.

    Parameters
    ----------
    a : int
        Allele bitmask.
    b : int
        Allele bitmask.

    Returns
    -------
    d : int
        Alleles found in `a` but not in `b`; 0 if `a` is a subset of `b`.

    Examples
    --------
    >>> from lohfilter.constants import A, C, G
    >>> from lohfilter.alleles import genotype_set_difference
    >>> genotype_set_difference(A | C | G, C) == A | G
    True
    >>> genotype_set_difference(A, A | C)
    0

    """
    a = check_allele_mask(a, 'a')
    b = check_allele_mask(b, 'b')
    return a & ~b


def is_no_call(mask):
    return check_allele_mask(mask) == NO_CALL


def is_hom(mask):
    """Genotype has exactly one allele."""
    return count_alleles(check_allele_mask(mask)) == 1


def is_het(mask):
    """Genotype has two or more alleles. Note that the "N" call counts as
    heterozygous."""
    return count_alleles(check_allele_mask(mask)) > 1


def is_hom_ref(reference_base, genotype):
    reference_base = check_reference_base(reference_base)
    return check_allele_mask(genotype) == reference_base


def is_loh(mutant_genotype, original_genotype):
    """Determine whether `mutant_genotype` can be explained by
    `original_genotype` having lost one or more alleles.

    Parameters
    ----------
    mutant_genotype : int
        Allele bitmask of the derived call, e.g., tumor.
    original_genotype : int
        Allele bitmask of the original call, e.g., normal.

    Returns
    -------
    loh : bool
        True if the mutant alleles are a strict, non-empty subset of the
        original alleles. If the original call is "N" (15), any non-empty
        mutant call is LOH, including "N" itself. A mutant no call is never
        LOH.

    Notes
    -----
    An original call with a single allele has nothing to lose, so it never
    shows LOH.

    Examples
    --------
    >>> from lohfilter.constants import A, C, G, N
    >>> from lohfilter.alleles import is_loh
    >>> is_loh(G, A | G)
    True
    >>> is_loh(A | G, G)
    False
    >>> is_loh(A | G, A | G)
    False
    >>> is_loh(N, N)
    True

    """
    mutant_genotype = check_allele_mask(mutant_genotype, 'mutant genotype')
    original_genotype = check_allele_mask(original_genotype, 'original genotype')

    if mutant_genotype == NO_CALL:
        return False

    # N matches everything, so anything called against it is a loss of information
    if original_genotype == N:
        return True

    gained = genotype_set_difference(mutant_genotype, original_genotype)
    return gained == NO_CALL and mutant_genotype != original_genotype


def should_filter_as_loh(reference_base, tumor_genotype, normal_genotype):
    """Determine whether a tumor call should be filtered because it is
    explained by loss of heterozygosity in the normal call.

    Parameters
    ----------
    reference_base : int
        Single-allele bitmask of the reference base (1, 2, 4 or 8).
    tumor_genotype : int
        Allele bitmask of the tumor call.
    normal_genotype : int
        Allele bitmask of the normal call.

    Returns
    -------
    filtered : bool

    Notes
    -----
    Identical calls, a homozygous reference normal, a tumor that carries any
    allele absent from the normal, and a no call in either sample are never
    filtered.

    Examples
    --------
    Heterozygous normal, tumor lost the reference allele::

        >>> from lohfilter.constants import A, C, G
        >>> from lohfilter.alleles import should_filter_as_loh
        >>> should_filter_as_loh(A, tumor_genotype=G, normal_genotype=A | G)
        True

    Tumor picks up the reference allele at a homozygous SNP site in the
    normal; this is a gain, not a loss::

        >>> should_filter_as_loh(A, tumor_genotype=A | G, normal_genotype=G)
        False

    """
    reference_base = check_reference_base(reference_base)
    tumor_genotype = check_allele_mask(tumor_genotype, 'tumor genotype')
    normal_genotype = check_allele_mask(normal_genotype, 'normal genotype')

    if tumor_genotype == NO_CALL or normal_genotype == NO_CALL:
        return False
    if tumor_genotype == normal_genotype:
        return False
    if normal_genotype == reference_base:
        return False

    return is_loh(tumor_genotype, normal_genotype)


def should_filter_as_gor(reference_base, tumor_genotype, normal_genotype):
    """Determine whether a tumor call should be filtered because it adds
    nothing to the normal call other than the reference allele, i.e., the
    tumor has gone back towards the reference or only lost alleles.

    Parameters
    ----------
    reference_base : int
        Single-allele bitmask of the reference base (1, 2, 4 or 8).
    tumor_genotype : int
        Allele bitmask of the tumor call.
    normal_genotype : int
        Allele bitmask of the normal call.

    Returns
    -------
    filtered : bool

    Notes
    -----
    A tri-allelic tumor call that adds the reference allele to a
    heterozygous non-reference normal (e.g., A|C|T over C|T with reference A)
    is filtered too. Whether that is right for callers that model more than
    two alleles per sample is unsettled.

    A tumor call with no allele absent from the normal call, e.g., G over
    A|G, is filtered as well.

    Examples
    --------
    Homozygous SNP in the normal, tumor back at homozygous reference::

        >>> from lohfilter.constants import A, C, G, T
        >>> from lohfilter.alleles import should_filter_as_gor
        >>> should_filter_as_gor(A, tumor_genotype=A, normal_genotype=G)
        True
        >>> should_filter_as_gor(A, tumor_genotype=A | G, normal_genotype=C | G)
        True
        >>> should_filter_as_gor(A, tumor_genotype=G, normal_genotype=A | G)
        True

    Picking up a new non-reference allele is not filtered::

        >>> should_filter_as_gor(A, tumor_genotype=T | G, normal_genotype=G)
        False

    """
    reference_base = check_reference_base(reference_base)
    tumor_genotype = check_allele_mask(tumor_genotype, 'tumor genotype')
    normal_genotype = check_allele_mask(normal_genotype, 'normal genotype')

    if tumor_genotype == NO_CALL or normal_genotype == NO_CALL:
        return False
    if tumor_genotype == normal_genotype:
        return False
    if normal_genotype == reference_base:
        return False

    gained = genotype_set_difference(tumor_genotype, normal_genotype)
    return gained == NO_CALL or gained == reference_base


def is_somatic_artifact(reference_base, tumor_genotype, normal_genotype):
    """Determine whether a tumor call should not be reported as somatic
    because it is filtered as either LOH or GOR."""
    return (should_filter_as_loh(reference_base, tumor_genotype, normal_genotype) or
            should_filter_as_gor(reference_base, tumor_genotype, normal_genotype))
