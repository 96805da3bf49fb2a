# -*- coding: utf-8 -*-
# flake8: noqa
"""Filters for somatic variant calls that are explained by loss of
heterozygosity (LOH) or by the tumor going back to the reference allele
(GOR), operating on genotypes encoded as allele bitmasks."""

from .constants import A, C, G, T, N, NO_CALL

from .alleles import count_alleles, genotype_set_difference, is_loh, \
    should_filter_as_loh, should_filter_as_gor, is_somatic_artifact, \
    is_no_call, is_hom, is_het, is_hom_ref

from .iupac import encode_genotype, encode_base, decode_genotype, genotype_to_bases

from .filters import count_alleles_array, genotype_set_difference_array, \
    is_loh_array, loh_filter, gor_filter, somatic_artifact_filter

from .dask import loh_filter_dask, gor_filter_dask, somatic_artifact_filter_dask

from .version import version as __version__
