"""
geovario subpackage providing pairwise variogram matrices.

.. currentmodule:: geovario.pairwise

The following functions are provided

.. autosummary::
   result_type
   pairwise
"""

import logging
from collections.abc import Sequence

import numpy as np

from geovario.errors import EmptyDomainError
from geovario.geometry import sample

__all__ = ["result_type", "pairwise"]

logger = logging.getLogger(__name__)


def result_type(model, a, b):
    """
    Numeric type of ``model.evaluate(a, b)``.

    Performs exactly one evaluation, so `a` and `b` should be
    representative elements of the domains.

    Returns
    -------
    dtype : :class:`numpy.dtype`
    """
    return np.result_type(model.evaluate(a, b))


def _as_domain(domain):
    if not isinstance(domain, (Sequence, np.ndarray)):
        domain = list(domain)
    if len(domain) == 0:
        raise EmptyDomainError("pairwise: domain must not be empty")
    return domain


def _check_out(out, shape):
    if out.shape != shape:
        raise ValueError(
            f"pairwise: out must have shape {shape}, got {out.shape}"
        )
    if not np.issubdtype(out.dtype, np.floating):
        raise ValueError(
            f"pairwise: out must have a floating dtype, got {out.dtype}"
        )
    return out


def pairwise(model, domain1, domain2=None, out=None):
    """
    Evaluate a variogram between all elements of one or two domains.

    With a single domain the (symmetric) self matrix is built: entry
    ``[i, j]`` is the mean variogram value over all pairs of sample points
    of ``domain1[i]`` and ``domain1[j]``. Only the lower triangle and the
    diagonal are computed, the upper triangle is mirrored, so the result
    is exactly symmetric. The diagonal holds the mean over the element's
    own sample, i.e. the nugget for points and the within-support variance
    for geometries.

    With two domains the cross matrix is built, computing each entry
    independently.

    Parameters
    ----------
    model : :any:`Variogram`
        The variogram model.
    domain1 : :class:`list` or :class:`numpy.ndarray`
        Points, coordinates or geometries (rows of a 2D array are points).
    domain2 : :class:`list` or :class:`numpy.ndarray`, optional
        Second domain for the cross matrix. Default: None
    out : :class:`numpy.ndarray`, optional
        Array to fill in place. It must have the matrix shape and a
        floating dtype.
        Default: None

    Returns
    -------
    gamma : :class:`numpy.ndarray`
        Matrix of shape ``(n, n)`` or ``(m, n)``.

    Raises
    ------
    EmptyDomainError
        If a domain has no elements.
    """
    domain1 = _as_domain(domain1)
    if domain2 is None:
        n = len(domain1)
        if out is None:
            dtype = result_type(model, domain1[0], domain1[0])
            out = np.empty((n, n), dtype=dtype)
        logger.debug("pairwise: self matrix %dx%d (%s)", n, n, out.dtype)
        return _pairwise_self(_check_out(out, (n, n)), model, domain1)

    domain2 = _as_domain(domain2)
    m, n = len(domain1), len(domain2)
    if out is None:
        dtype = result_type(model, domain1[0], domain2[0])
        out = np.empty((m, n), dtype=dtype)
    logger.debug("pairwise: cross matrix %dx%d (%s)", m, n, out.dtype)
    return _pairwise_cross(_check_out(out, (m, n)), model, domain1, domain2)


def _pairwise_self(gamma, model, domain):
    n = len(domain)
    for j in range(n):
        s_j = sample(domain[j])
        for i in range(j + 1, n):
            s_i = sample(domain[i])
            gamma[i, j] = model.average(s_i, s_j)
        gamma[j, j] = model.average(s_j, s_j)
        # mirror the lower triangle computed in previous columns
        for i in range(j):
            gamma[i, j] = gamma[j, i]
    return gamma


def _pairwise_cross(gamma, model, domain1, domain2):
    m, n = len(domain1), len(domain2)
    for j in range(n):
        s_j = sample(domain2[j])
        for i in range(m):
            s_i = sample(domain1[i])
            gamma[i, j] = model.average(s_i, s_j)
    return gamma
