"""
geovario subpackage providing theoretical variogram models.

.. currentmodule:: geovario.variogram

A variogram model is a scalar function of the lag distance. All models
share the :any:`Variogram` interface and can be evaluated at lags, between
points and between geometries.

Base Class
^^^^^^^^^^

.. autosummary::
   :toctree:

   Variogram

Models
^^^^^^

.. autosummary::
   :toctree:

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

Queries
^^^^^^^

.. autosummary::
   :toctree:

   is_stationary
   is_isotropic
"""

from geovario.variogram.base import Variogram, is_isotropic, is_stationary
from geovario.variogram.models import (
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
)

__all__ = [
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
    "is_stationary",
    "is_isotropic",
]
