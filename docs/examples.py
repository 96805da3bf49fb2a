# -*- coding: utf-8 -*-
import numpy as np
import lohfilter
from lohfilter import A, C, G, T, N


# scalar predicates
lohfilter.count_alleles(A | G)
lohfilter.genotype_set_difference(A | C | G, C)
lohfilter.is_loh(G, A | G)
lohfilter.is_loh(A | G, G)
lohfilter.is_loh(G, N)
# heterozygous normal, tumor lost the reference allele
lohfilter.should_filter_as_loh(A, tumor_genotype=G, normal_genotype=A | G)
# homozygous snp in the normal, tumor back at reference
lohfilter.should_filter_as_gor(A, tumor_genotype=A, normal_genotype=G)


# genotypes from strings
lohfilter.encode_genotype('A/G')
lohfilter.decode_genotype(A | G)
lohfilter.genotype_to_bases(N)


# one row per site
reference = np.array([lohfilter.encode_base(b) for b in 'AACAT'])
tumor = np.array([lohfilter.encode_genotype(g) for g in ['G', 'A', 'C', 'AG', 'T']])
normal = np.array([lohfilter.encode_genotype(g) for g in ['AG', 'G', 'CT', 'G', 'T']])
lohfilter.loh_filter(reference, tumor, normal)
lohfilter.gor_filter(reference, tumor, normal)
keep = ~lohfilter.somatic_artifact_filter(reference, tumor, normal)
keep


# the same filters, lazily and block-wise
f = lohfilter.somatic_artifact_filter_dask(reference, tumor, normal, chunks=(2,))
f
f.compute()
