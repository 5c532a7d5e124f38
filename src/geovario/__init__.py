"""
Purpose
=======

geovario is a library for theoretical variogram models and their
evaluation between points, geometries and whole collections of them.

Subpackages
===========

.. autosummary::
   :toctree: api

   variogram
   geometry
   metric
   errors

The pairwise matrix builder lives in ``geovario.pairwise``, whose name is
taken by the :any:`pairwise` function on the package.

Variogram Models
================

.. currentmodule:: geovario.variogram

.. autosummary::
   Variogram
   Gaussian
   Exponential
   Spherical
   Matern
   Cubic
   Pentaspherical
   SineHole
   Power
   Nugget
   Circular

Functions
=========

.. currentmodule:: geovario

.. autosummary::
   pairwise
   result_type
   is_stationary
   is_isotropic
"""

from geovario import errors, geometry, metric, variogram
from geovario.errors import (
    EmptyDomainError,
    IncompatibleGeometry,
    InvalidLag,
    InvalidParameter,
    VariogramError,
)
from geovario.geometry import Box, Geometry, MultiPoint, Point, Segment
from geovario.metric import Euclidean, GreatCircle, Mahalanobis, MetricBall
from geovario.pairwise import pairwise, result_type
from geovario.variogram import (
    Circular,
    Cubic,
    Exponential,
    Gaussian,
    Matern,
    Nugget,
    Pentaspherical,
    Power,
    SineHole,
    Spherical,
    Variogram,
    is_isotropic,
    is_stationary,
)

__version__ = "0.1.0"

__all__ = ["__version__"]
__all__ += ["errors", "geometry", "metric", "variogram"]
__all__ += [
    "Variogram",
    "Gaussian",
    "Exponential",
    "Spherical",
    "Matern",
    "Cubic",
    "Pentaspherical",
    "SineHole",
    "Power",
    "Nugget",
    "Circular",
]
__all__ += ["pairwise", "result_type", "is_stationary", "is_isotropic"]
__all__ += ["Point", "Geometry", "MultiPoint", "Segment", "Box"]
__all__ += ["Euclidean", "Mahalanobis", "GreatCircle", "MetricBall"]
__all__ += [
    "VariogramError",
    "InvalidParameter",
    "InvalidLag",
    "EmptyDomainError",
    "IncompatibleGeometry",
]
