# -*- coding: utf-8 -*-
"""Conversion between allele bitmasks and nucleotide strings."""
from lohfilter.constants import IUPAC_CODES, NO_CALL, NO_CALL_CODE, BASES, \
    SINGLE_ALLELES
from lohfilter.util import check_allele_mask


_CODE_TO_MASK = {code: mask for mask, code in IUPAC_CODES.items()}

# separators found between alleles in genotype strings, e.g., "A/G" or "A|G"
_SEPARATORS = '/|,'


def encode_genotype(bases):
    """Encode a genotype string as an allele bitmask.

    Parameters
    ----------
    bases : str
        Either a run of alleles, optionally separated by '/', '|' or ',',
        e.g., 'AG' or 'A/G', or a single IUPAC code, e.g., 'R'. Case is
        ignored. '.' or an empty string is a no call.

    Returns
    -------
    mask : int

    Examples
    --------
    >>> from lohfilter.iupac import encode_genotype
    >>> encode_genotype('A/G')
    5
    >>> encode_genotype('R')
    5
    >>> encode_genotype('N')
    15
    >>> encode_genotype('.')
    0

    """
    if not isinstance(bases, str):
        raise TypeError('bad argument type, expected str, found %s' % type(bases))
    s = bases.strip().upper()
    if s in ('', NO_CALL_CODE):
        return NO_CALL
    mask = NO_CALL
    for c in s:
        if c in _SEPARATORS:
            continue
        try:
            mask |= _CODE_TO_MASK[c]
        except KeyError:
            raise ValueError('invalid nucleotide code %r in genotype %r' % (c, bases))
    return mask


def encode_base(base):
    """Encode a single reference base, rejecting ambiguity codes.

    >>> from lohfilter.iupac import encode_base
    >>> encode_base('g')
    4

    """
    mask = encode_genotype(base)
    if mask not in SINGLE_ALLELES:
        raise ValueError('reference must be one of A, C, G or T, found %r' % base)
    return mask


def decode_genotype(mask):
    """Decode an allele bitmask as an IUPAC code.

    Examples
    --------
    >>> from lohfilter.constants import A, G
    >>> from lohfilter.iupac import decode_genotype
    >>> decode_genotype(A | G)
    'R'
    >>> decode_genotype(0)
    '.'

    """
    mask = check_allele_mask(mask)
    if mask == NO_CALL:
        return NO_CALL_CODE
    return IUPAC_CODES[mask]


def genotype_to_bases(mask):
    """Spell out the alleles of a genotype bitmask in A, C, G, T order.

    >>> from lohfilter.iupac import genotype_to_bases
    >>> genotype_to_bases(15)
    'ACGT'

    """
    mask = check_allele_mask(mask)
    if mask == NO_CALL:
        return NO_CALL_CODE
    return ''.join(b for i, b in enumerate(BASES) if mask & (1 << i))
