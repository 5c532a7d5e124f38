"""
geovario subpackage providing the variogram base class.

.. currentmodule:: geovario.variogram.base

The following classes and functions are provided

.. autosummary::
   Variogram
   is_stationary
   is_isotropic
"""

from abc import ABC, abstractmethod

import numpy as np

from geovario.errors import IncompatibleGeometry, InvalidLag, InvalidParameter
from geovario.geometry import Geometry, sample
from geovario.metric import Euclidean, MetricBall

__all__ = ["Variogram", "is_stationary", "is_isotropic"]


class Variogram(ABC):
    """
    Abstract base class for theoretical variogram models.

    A variogram is a scalar function of the lag distance :math:`h`.
    Bounded models are written as

    .. math::
       \\gamma(h) = n + (s - n) \\cdot g\\left(\\frac{h}{r}\\right)

    with the sill :math:`s`, the nugget :math:`n`, the radius :math:`r`
    of the metric ball and a normalized shape :math:`g` with
    :math:`g(0) = 0`. Hence :math:`\\gamma(0) = n` for every model.

    Besides the scalar form :any:`Variogram.evaluate_at`, a model can be
    evaluated between points and geometries with :any:`Variogram.evaluate`.
    Geometries are replaced by their discretization and the variogram is
    averaged over all pairs of sample points (regularized variogram).

    Parameters
    ----------
    sill : :class:`float`, optional
        Value approached for large lags. Default: 1.0
    nugget : :class:`float`, optional
        Value in the limit of zero lag. Default: 0.0
    ball : :any:`MetricBall` or :class:`float` or :class:`list`, optional
        Metric ball of the model or its range(s). Default: 1.0

    Notes
    -----
    Subclasses must implement:
        - :any:`Variogram.normalized`: the normalized shape :math:`g(u)`

    Subclasses without a metric ball set the class attribute
    ``has_ball = False`` and override :any:`Variogram.evaluate_at`.
    """

    stationary = True
    """:class:`bool`: Whether the model family is 2nd-order stationary."""

    has_ball = True

    def __init__(self, sill=1.0, nugget=0.0, ball=1.0):
        self._sill = float(sill)
        self._nugget = float(nugget)
        self._ball = self._make_ball(ball) if self.has_ball else None
        self._validate()

    def _make_ball(self, ball):
        if isinstance(ball, MetricBall):
            return ball
        if ball is None or isinstance(ball, (str, bytes)):
            raise TypeError(
                f"{self.name}: ball must be a MetricBall or range(s), "
                f"got {type(ball)}"
            )
        return MetricBall(ball)

    def _validate(self):
        """
        Validate the model parameters.

        Raises
        ------
        InvalidParameter
            If sill or nugget are negative or the nugget exceeds the sill
            of a bounded model.
        """
        if not self._sill >= 0:
            raise InvalidParameter(
                f"{self.name}: sill must be non-negative, got {self._sill}"
            )
        if not self._nugget >= 0:
            raise InvalidParameter(
                f"{self.name}: nugget must be non-negative, got {self._nugget}"
            )
        if self.stationary and self._nugget > self._sill:
            raise InvalidParameter(
                f"{self.name}: nugget ({self._nugget}) must not exceed "
                f"sill ({self._sill})"
            )

    @property
    def name(self):
        """:class:`str`: Name of the model."""
        return type(self).__name__

    @property
    def sill(self):
        """:class:`float`: The sill of the model."""
        return self._sill

    @property
    def nugget(self):
        """:class:`float`: The nugget of the model."""
        return self._nugget

    @property
    def ball(self):
        """:any:`MetricBall` or :any:`None`: The metric ball of the model."""
        return self._ball

    @property
    def range(self):
        """:class:`float`: Maximum range of the model."""
        return float(np.max(self._ball.ranges))

    @property
    def metric(self):
        """The metric used to compute lags between points."""
        return self._ball.metric if self._ball is not None else Euclidean()

    @property
    def is_isotropic(self):
        """:class:`bool`: Whether the model is isotropic."""
        return self._ball is None or self._ball.is_isotropic

    @abstractmethod
    def normalized(self, u):
        """
        Normalized variogram shape :math:`g(u)`.

        Parameters
        ----------
        u : :class:`numpy.ndarray`
            Non-negative lags divided by the radius of the ball (1D).

        Returns
        -------
        g : :class:`numpy.ndarray`
            Shape values with :math:`g(0) = 0`.
        """

    def evaluate_at(self, h):
        """
        Evaluate the variogram at lag distance(s) `h`.

        Parameters
        ----------
        h : :class:`float` or :class:`numpy.ndarray`
            Non-negative lag(s).

        Returns
        -------
        gamma : :class:`numpy.float64` or :class:`numpy.ndarray`
            Variogram value(s) with the shape of `h`.

        Raises
        ------
        InvalidLag
            If any lag is negative.
        """
        h = self._check_lag(h)
        u = np.atleast_1d(h) / self._ball.radius
        gamma = self._nugget + (self._sill - self._nugget) * self.normalized(u)
        return gamma.reshape(h.shape)[()]

    def _check_lag(self, h):
        h = np.asarray(h, dtype=np.double)
        if np.any(h < 0):
            raise InvalidLag(f"{self.name}: lag must be non-negative, got {h}")
        return h

    def evaluate(self, a, b):
        """
        Evaluate the variogram between two points or geometries.

        Parameters
        ----------
        a, b : :any:`Point`, :any:`Geometry` or :class:`list`
            Points (or bare coordinates) or geometries. A geometry is
            replaced by its discretization and the mean over all pairs
            of sample points is returned.

        Returns
        -------
        gamma : :class:`numpy.float64`
            The (regularized) variogram value.
        """
        if not isinstance(a, Geometry) and not isinstance(b, Geometry):
            return self._evaluate_points(*sample(a), *sample(b))
        return self.average(sample(a), sample(b))

    def _evaluate_points(self, x, y):
        if self._ball is not None and not self._ball.is_isotropic:
            for coords in (x, y):
                if coords.size != self._ball.dim:
                    raise IncompatibleGeometry(
                        f"{self.name}: point of dimension {coords.size} for a "
                        f"ball with {self._ball.dim} ranges"
                    )
        return self.evaluate_at(self.metric.distance(x, y))

    def average(self, us, vs):
        """
        Mean variogram value over all pairs of two samples.

        Parameters
        ----------
        us, vs : :class:`list` of :class:`numpy.ndarray`
            Non-empty coordinate samples (see :any:`sample`).

        Returns
        -------
        gamma : :class:`numpy.float64`
            Sum over the cross product divided by the number of pairs.
        """
        total = 0.0
        for u in us:
            for v in vs:
                total += self._evaluate_points(u, v)
        return total / (len(us) * len(vs))

    def _params(self):
        """Model specific parameters for display, in display order."""
        return {}

    def _display_params(self):
        params = {"sill": self._sill, "nugget": self._nugget}
        params.update(self._params())
        if self._ball is not None:
            if self._ball.is_isotropic:
                params["range"] = self._ball.radius
            else:
                params["ranges"] = tuple(self._ball.ranges.tolist())
            params["metric"] = type(self._ball.metric).__name__
        return params

    def __repr__(self):
        params = ", ".join(f"{k}={v}" for k, v in self._display_params().items())
        return f"{self.name}({params})"

    def __str__(self):
        header = self.name if self.is_isotropic else f"{self.name} (anisotropic)"
        lines = [f"  └─{k} ⇨ {v}" for k, v in self._display_params().items()]
        return "\n".join([header] + lines)


def is_stationary(model):
    """
    Whether a model (instance or class) is 2nd-order stationary.

    The answer depends on the model family only, not on its parameters.
    """
    cls = model if isinstance(model, type) else type(model)
    return cls.stationary


def is_isotropic(model):
    """Whether the model's metric ball has all-equal ranges."""
    return model.is_isotropic
