# -*- coding: utf-8 -*-
"""This module provides alternative implementations of the filters defined
in the :mod:`lohfilter.filters` module, using
`dask.array <https://docs.dask.org/en/latest/array.html>`_ as the
computational engine.

Inputs are split into blocks and filtered lazily, so that very large
arrays of calls, e.g., backed by HDF5 or zarr, can be processed without
loading them into memory. Call ``.compute()`` on the result to obtain a
numpy array.

"""
import numpy as np
import dask.array as da


from lohfilter.util import check_integer_dtype, check_reference_base
from lohfilter.filters import _check_inputs, _loh_filter, _gor_filter


__all__ = ['loh_filter_dask', 'gor_filter_dask', 'somatic_artifact_filter_dask']


def get_chunks(data, chunks=None):
    """Try to guess a reasonable chunk shape to use for block-wise
    algorithms operating over `data`."""

    if chunks is None:

        if hasattr(data, 'chunks') and hasattr(data, 'shape') and \
                len(data.chunks) == len(data.shape):
            # h5py dataset or zarr array
            return data.chunks

        elif data.shape[0] == 0:
            # nothing to split, any non-zero chunk length will do
            return tuple(max(1, n) for n in data.shape)

        else:
            # fall back to something simple, ~4Mb chunks of first dimension
            row = np.asarray(data[0])
            chunklen = max(1, (2**22) // max(1, row.nbytes))
            if row.shape:
                chunks = (chunklen,) + row.shape
            else:
                chunks = (chunklen,)
            return chunks

    else:

        return chunks


def ensure_dask_array(data, chunks=None):
    if isinstance(data, da.Array):
        return data
    else:
        if not hasattr(data, 'shape'):
            data = np.asarray(data)
        if not data.shape:
            raise TypeError('data is not array-like')
        chunks = get_chunks(data, chunks)
        return da.from_array(data, chunks=chunks)


def _map_filter(kernel, reference, tumor_genotypes, normal_genotypes, chunks):

    tumor = ensure_dask_array(tumor_genotypes, chunks=chunks)
    normal = ensure_dask_array(normal_genotypes, chunks=chunks)
    check_integer_dtype(tumor)
    check_integer_dtype(normal)

    # a single reference base applies to every call
    if np.ndim(reference) == 0:
        reference = check_reference_base(reference)
        tumor, normal = da.broadcast_arrays(tumor, normal)

        def f(tumor_block, normal_block):
            r, t, n = _check_inputs(reference, tumor_block, normal_block)
            return kernel(r, t, n)

        return da.map_blocks(f, tumor, normal, dtype=bool)

    reference = ensure_dask_array(reference, chunks=chunks)
    check_integer_dtype(reference)
    reference, tumor, normal = da.broadcast_arrays(reference, tumor, normal)

    def f(reference_block, tumor_block, normal_block):
        r, t, n = _check_inputs(reference_block, tumor_block, normal_block)
        return kernel(r, t, n)

    return da.map_blocks(f, reference, tumor, normal, dtype=bool)


def loh_filter_dask(reference, tumor_genotypes, normal_genotypes, chunks=None):
    """Lazily locate tumor calls to filter as loss of heterozygosity.

    Parameters
    ----------
    reference : int or array_like, int
        Reference base bitmask(s), each one of 1, 2, 4 or 8.
    tumor_genotypes : array_like, int
        Tumor allele bitmasks.
    normal_genotypes : array_like, int
        Normal allele bitmasks.
    chunks : tuple of ints, optional
        Chunk shape to use when wrapping non-dask inputs.

    Returns
    -------
    filtered : dask.array.Array, bool

    See Also
    --------
    lohfilter.filters.loh_filter

    """
    return _map_filter(_loh_filter, reference, tumor_genotypes, normal_genotypes, chunks)


def gor_filter_dask(reference, tumor_genotypes, normal_genotypes, chunks=None):
    """Lazily locate tumor calls to filter because they have gone back to
    the reference allele. See :func:`lohfilter.filters.gor_filter`."""
    return _map_filter(_gor_filter, reference, tumor_genotypes, normal_genotypes, chunks)


def _somatic_artifact_filter(reference, tumor, normal):
    return _loh_filter(reference, tumor, normal) | _gor_filter(reference, tumor, normal)


def somatic_artifact_filter_dask(reference, tumor_genotypes, normal_genotypes, chunks=None):
    """Lazily locate tumor calls filtered as either LOH or GOR. See
    :func:`lohfilter.filters.somatic_artifact_filter`."""
    return _map_filter(_somatic_artifact_filter, reference, tumor_genotypes,
                       normal_genotypes, chunks)
