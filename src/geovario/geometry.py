"""
geovario subpackage providing points, geometries and their sampling.

.. currentmodule:: geovario.geometry

Variograms are evaluated between points and geometries. A geometry is any
object with a ``discretize()`` method returning a finite, deterministic,
non-empty sequence of points. The classes below are simple reference
implementations of these interfaces.

The following classes and functions are provided

.. autosummary::
   Point
   Geometry
   MultiPoint
   Segment
   Box
   sample
"""

from typing import Protocol, runtime_checkable

import numpy as np

from geovario.errors import IncompatibleGeometry, InvalidParameter

__all__ = ["Point", "Geometry", "MultiPoint", "Segment", "Box", "sample"]


class Point:
    """
    An immutable point.

    Parameters
    ----------
    *coords : :class:`float`
        The coordinates (x, [y, z, ...]). A single sequence is accepted too.

    Examples
    --------
    >>> Point(1.0, 2.0).coordinates
    array([1., 2.])
    """

    __slots__ = ("_coords",)

    def __init__(self, *coords):
        if len(coords) == 1 and np.ndim(coords[0]) == 1:
            coords = coords[0]
        coords = np.array(coords, dtype=np.double)
        if coords.ndim != 1 or coords.size == 0:
            raise InvalidParameter(
                f"Point: coordinates must be a non-empty 1D sequence, got {coords}"
            )
        coords.setflags(write=False)
        self._coords = coords

    @property
    def coordinates(self):
        """:class:`numpy.ndarray`: The (read-only) coordinates."""
        return self._coords

    @property
    def dim(self):
        """:class:`int`: Dimension of the ambient space."""
        return self._coords.size

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return np.array_equal(self._coords, other.coordinates)

    def __hash__(self):
        return hash(self._coords.tobytes())

    def __repr__(self):
        return f"Point{tuple(self._coords.tolist())}"


@runtime_checkable
class Geometry(Protocol):
    """Structural interface of a geometry."""

    def discretize(self):
        """Return a finite, deterministic, non-empty sequence of points."""
        ...


class MultiPoint:
    """
    A finite collection of points, discretized to itself.

    Parameters
    ----------
    points : :class:`list`
        Points or coordinate sequences.
    """

    def __init__(self, points):
        self._points = tuple(
            p if isinstance(p, Point) else Point(p) for p in points
        )

    def discretize(self):
        """The points of the collection."""
        return self._points

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return f"MultiPoint({list(self._points)})"


class Segment:
    """
    A line segment between two points.

    Parameters
    ----------
    start, end : :any:`Point` or :class:`list`
        End points of the segment.
    num : :class:`int`, optional
        Number of sample points, placed at the midpoints of `num`
        sub-segments of equal length. Default: 10
    """

    def __init__(self, start, end, num=10):
        self.start = start if isinstance(start, Point) else Point(start)
        self.end = end if isinstance(end, Point) else Point(end)
        if self.start.dim != self.end.dim:
            raise InvalidParameter(
                "Segment: start and end must have the same dimension"
            )
        self.num = int(num)
        if self.num < 1:
            raise InvalidParameter(f"Segment: num must be positive, got {num}")

    @property
    def length(self):
        """:class:`float`: Euclidean length of the segment."""
        return float(np.linalg.norm(self.end.coordinates - self.start.coordinates))

    def discretize(self):
        """Midpoints of `num` equal sub-segments."""
        t = (np.arange(self.num) + 0.5) / self.num
        a, b = self.start.coordinates, self.end.coordinates
        return [Point(a + ti * (b - a)) for ti in t]

    def __repr__(self):
        return f"Segment({self.start!r}, {self.end!r}, num={self.num})"


class Box:
    """
    An axis aligned box.

    Parameters
    ----------
    lower, upper : :class:`list`
        Lower and upper corners.
    shape : :class:`int` or :class:`list`, optional
        Number of grid cells per axis. The sample consists of the cell
        centres. Default: 10
    """

    def __init__(self, lower, upper, shape=10):
        self.lower = np.array(lower, dtype=np.double, ndmin=1)
        self.upper = np.array(upper, dtype=np.double, ndmin=1)
        if self.lower.shape != self.upper.shape or self.lower.ndim != 1:
            raise InvalidParameter("Box: corners must be 1D of equal length")
        if np.any(self.upper < self.lower):
            raise InvalidParameter(
                f"Box: upper {self.upper} must not be below lower {self.lower}"
            )
        shape = np.broadcast_to(np.asarray(shape, dtype=int), self.lower.shape)
        if np.any(shape < 1):
            raise InvalidParameter(f"Box: shape must be positive, got {shape}")
        self.shape = tuple(shape.tolist())

    def discretize(self):
        """Centres of a regular grid of cells (C order)."""
        axes = [
            lo + (np.arange(n) + 0.5) * (hi - lo) / n
            for lo, hi, n in zip(self.lower, self.upper, self.shape)
        ]
        grid = np.meshgrid(*axes, indexing="ij")
        coords = np.stack([g.ravel() for g in grid], axis=1)
        return [Point(c) for c in coords]

    def __repr__(self):
        return (
            f"Box(lower={self.lower.tolist()}, upper={self.upper.tolist()}, "
            f"shape={self.shape})"
        )


def _coordinates(point):
    """Coordinate array of a point object or of bare coordinates."""
    coords = getattr(point, "coordinates", point)
    return np.asarray(coords, dtype=np.double)


def sample(entity):
    """
    Coordinates sampling a point or a geometry.

    Parameters
    ----------
    entity : :any:`Point`, :any:`Geometry` or :class:`list`
        A point, bare coordinates, or a geometry.

    Returns
    -------
    coords : :class:`list` of :class:`numpy.ndarray`
        A single coordinate vector for a point, the coordinates of the
        discretization for a geometry.

    Raises
    ------
    IncompatibleGeometry
        If the geometry's discretization is empty.
    """
    if isinstance(entity, Geometry):
        coords = [_coordinates(p) for p in entity.discretize()]
        if not coords:
            raise IncompatibleGeometry(
                f"{type(entity).__name__}: discretization produced no points"
            )
        return coords
    return [_coordinates(entity)]
