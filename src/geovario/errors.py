"""
geovario subpackage providing the error types.

.. currentmodule:: geovario.errors

The following classes are provided

.. autosummary::
   VariogramError
   InvalidParameter
   InvalidLag
   EmptyDomainError
   IncompatibleGeometry
"""

__all__ = [
    "VariogramError",
    "InvalidParameter",
    "InvalidLag",
    "EmptyDomainError",
    "IncompatibleGeometry",
]


class VariogramError(ValueError):
    """Base class for all errors raised by geovario."""


class InvalidParameter(VariogramError):
    """Invalid model or metric ball parameter (raised at construction)."""


class InvalidLag(VariogramError):
    """Negative lag distance passed to a variogram."""


class EmptyDomainError(VariogramError):
    """Pairwise evaluation requested on a domain without elements."""


class IncompatibleGeometry(VariogramError):
    """A geometry produced an empty discretization sample."""
