"""
geovario subpackage providing metrics and metric balls.

.. currentmodule:: geovario.metric

Metrics measure the lag between two coordinate vectors. A metric ball
pairs a metric with one range per principal axis and thereby encodes
(an)isotropy of a variogram model.

The following classes are provided

.. autosummary::
   Euclidean
   Mahalanobis
   GreatCircle
   MetricBall
"""

import warnings

import numpy as np
from scipy.spatial import distance

from geovario.errors import InvalidParameter

__all__ = ["Euclidean", "Mahalanobis", "GreatCircle", "MetricBall"]


class Euclidean:
    """Euclidean distance between two coordinate vectors."""

    def distance(self, x, y):
        """
        Distance between `x` and `y`.

        Parameters
        ----------
        x, y : :class:`numpy.ndarray`
            Coordinate vectors of equal length.

        Returns
        -------
        h : :class:`float`
            Non-negative distance.
        """
        return distance.euclidean(x, y)

    def __repr__(self):
        return "Euclidean()"


class Mahalanobis:
    """
    Mahalanobis distance :math:`\\sqrt{(x-y)^T Q (x-y)}`.

    Parameters
    ----------
    vi : :class:`numpy.ndarray`
        Symmetric positive definite matrix :math:`Q`
        (the inverse covariance in the statistical reading).
    """

    def __init__(self, vi):
        vi = np.array(vi, dtype=np.double)
        if vi.ndim != 2 or vi.shape[0] != vi.shape[1]:
            raise InvalidParameter(
                f"Mahalanobis: matrix must be square, got shape {vi.shape}"
            )
        if not np.allclose(vi, vi.T):
            raise InvalidParameter("Mahalanobis: matrix must be symmetric")
        vi.setflags(write=False)
        self._vi = vi

    @property
    def vi(self):
        """:class:`numpy.ndarray`: The (read-only) metric matrix."""
        return self._vi

    def distance(self, x, y):
        """Distance between coordinate vectors `x` and `y`."""
        return distance.mahalanobis(x, y, self._vi)

    def __repr__(self):
        return f"Mahalanobis(vi={self._vi.tolist()})"


class GreatCircle:
    """
    Great circle distance on a sphere (haversine formula).

    Coordinates are interpreted as (longitude, latitude) in degrees.

    Parameters
    ----------
    radius : :class:`float`, optional
        Radius of the sphere. Default: 6371.2 (earth radius in km)
    """

    def __init__(self, radius=6371.2):
        self.radius = float(radius)
        if self.radius <= 0:
            raise InvalidParameter(
                f"GreatCircle: radius must be positive, got {self.radius}"
            )

    def distance(self, x, y):
        """Distance between (lon, lat) coordinate vectors `x` and `y`."""
        lon1, lat1 = np.radians(x[:2])
        lon2, lat2 = np.radians(y[:2])
        aval = (
            np.sin((lat2 - lat1) / 2.0) ** 2
            + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2.0) ** 2
        )
        # clip rounding noise so that identical points give exactly zero
        aval = min(max(aval, 0.0), 1.0)
        return 2.0 * self.radius * np.arctan2(np.sqrt(aval), np.sqrt(1.0 - aval))

    def __repr__(self):
        return f"GreatCircle(radius={self.radius})"


def _rotation_matrix(rotation, dim):
    """Rotation matrix from an angle (2D, radians) or a square matrix."""
    if rotation is None:
        return np.eye(dim)
    rot = np.asarray(rotation, dtype=np.double)
    if rot.ndim == 0:
        if dim != 2:
            raise InvalidParameter(
                f"MetricBall: a rotation angle is only valid in 2D, got dim={dim}"
            )
        cos, sin = np.cos(rot), np.sin(rot)
        return np.array([[cos, -sin], [sin, cos]])
    if rot.shape != (dim, dim):
        raise InvalidParameter(
            f"MetricBall: rotation must have shape {(dim, dim)}, got {rot.shape}"
        )
    return rot


class MetricBall:
    """
    A metric together with one range per principal axis.

    For an anisotropic ball (and no explicit metric) the lag is measured
    with a Mahalanobis metric scaled such that the ball's surface lies at
    distance :any:`MetricBall.radius` in every principal direction:

    .. math::
       Q = R \\, \\mathrm{diag}\\left(\\frac{r_0^2}{r_i^2}\\right) R^T

    Parameters
    ----------
    ranges : :class:`float` or :class:`list`
        Positive range(s). A single value gives an isotropic ball
        of arbitrary dimension.
    rotation : :class:`float` or :class:`numpy.ndarray`, optional
        Orientation of the principal axes, either an angle in radians (2D)
        or a rotation matrix. Only used for anisotropic balls.
        Default: None
    metric : :any:`None` or metric, optional
        Explicit metric object with a ``distance(x, y)`` method. It measures
        lags as given, so it is only accepted for an isotropic ball.
        Default: Euclidean for isotropic, Mahalanobis for anisotropic balls.
    """

    def __init__(self, ranges, rotation=None, metric=None):
        ranges = np.atleast_1d(np.array(ranges, dtype=np.double))
        if ranges.ndim != 1 or ranges.size == 0:
            raise InvalidParameter(
                f"MetricBall: ranges must be a scalar or 1D sequence, got {ranges}"
            )
        if not np.all(ranges > 0) or not np.all(np.isfinite(ranges)):
            raise InvalidParameter(
                f"MetricBall: ranges must be positive and finite, got {ranges}"
            )
        ranges.setflags(write=False)
        self._ranges = ranges

        if metric is None:
            if self.is_isotropic:
                if rotation is not None:
                    warnings.warn(
                        "MetricBall: rotation has no effect on an isotropic ball"
                    )
                metric = Euclidean()
            else:
                rot = _rotation_matrix(rotation, ranges.size)
                scale = np.diag((ranges[0] / ranges) ** 2)
                metric = Mahalanobis(rot @ scale @ rot.T)
        elif not callable(getattr(metric, "distance", None)):
            raise TypeError(
                f"MetricBall: metric needs a distance method, got {type(metric)}"
            )
        elif not self.is_isotropic:
            raise InvalidParameter(
                "MetricBall: an explicit metric requires equal ranges, "
                f"got {tuple(ranges.tolist())}"
            )
        self._metric = metric

    @property
    def metric(self):
        """The metric measuring lags inside this ball."""
        return self._metric

    @property
    def ranges(self):
        """:class:`numpy.ndarray`: The (read-only) ranges."""
        return self._ranges

    @property
    def radius(self):
        """:class:`float`: Normalizing range of the lag (the first range)."""
        return float(self._ranges[0])

    @property
    def dim(self):
        """:class:`int`: Number of ranges."""
        return self._ranges.size

    @property
    def is_isotropic(self):
        """:class:`bool`: Whether all ranges are equal."""
        return bool(np.all(self._ranges == self._ranges[0]))

    def __eq__(self, other):
        if not isinstance(other, MetricBall):
            return NotImplemented
        return (
            np.array_equal(self._ranges, other.ranges)
            and repr(self._metric) == repr(other.metric)
        )

    def __repr__(self):
        return (
            f"MetricBall(ranges={tuple(self._ranges.tolist())}, "
            f"metric={type(self._metric).__name__})"
        )
