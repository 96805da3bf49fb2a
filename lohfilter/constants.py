# -*- coding: utf-8 -*-

# single alleles, one bit per nucleotide
A = 1
C = 2
G = 4
T = 8
SINGLE_ALLELES = (A, C, G, T)

# no call and the ambiguous "N" call, which contains every allele
NO_CALL = 0
N = A | C | G | T

ALLELE_MASK_MAX = N

# bases in bit order
BASES = 'ACGT'

# IUPAC nucleotide codes indexed by allele bitmask
IUPAC_CODES = {
    A: 'A',
    C: 'C',
    A | C: 'M',
    G: 'G',
    A | G: 'R',
    C | G: 'S',
    A | C | G: 'V',
    T: 'T',
    A | T: 'W',
    C | T: 'Y',
    A | C | T: 'H',
    G | T: 'K',
    A | G | T: 'D',
    C | G | T: 'B',
    N: 'N',
}

NO_CALL_CODE = '.'
