"""
This is the unittest of the geometry and metric modules.
"""

import unittest

import numpy as np

import geovario as gv
from geovario.geometry import sample


class TestGeometry(unittest.TestCase):
    def test_point(self):
        """Test construction and immutability of points."""
        p = gv.Point(1.0, 2.0)
        np.testing.assert_array_equal(p.coordinates, [1.0, 2.0])
        self.assertEqual(p, gv.Point([1.0, 2.0]))
        self.assertEqual(hash(p), hash(gv.Point(np.array([1.0, 2.0]))))
        self.assertEqual(p.dim, 2)
        self.assertEqual(repr(p), "Point(1.0, 2.0)")
        with self.assertRaises(ValueError):
            p.coordinates[0] = 5.0
        with self.assertRaises(gv.InvalidParameter):
            gv.Point()

    def test_protocol(self):
        """Test the structural geometry check."""
        self.assertIsInstance(gv.Segment((0, 0), (1, 1)), gv.Geometry)
        self.assertIsInstance(gv.Box((0, 0), (1, 1)), gv.Geometry)
        self.assertIsInstance(gv.MultiPoint([(0, 0)]), gv.Geometry)
        self.assertNotIsInstance(gv.Point(0, 0), gv.Geometry)
        self.assertNotIsInstance(np.zeros(2), gv.Geometry)

    def test_segment(self):
        """Test the midpoint discretization of a segment."""
        seg = gv.Segment((0.0, 0.0), (4.0, 0.0), num=4)
        xs = [p.coordinates[0] for p in seg.discretize()]
        np.testing.assert_allclose(xs, [0.5, 1.5, 2.5, 3.5])
        self.assertAlmostEqual(seg.length, 4.0)
        # deterministic
        self.assertEqual(seg.discretize(), seg.discretize())
        with self.assertRaises(gv.InvalidParameter):
            gv.Segment((0.0, 0.0), (1.0, 0.0), num=0)
        with self.assertRaises(gv.InvalidParameter):
            gv.Segment((0.0, 0.0), (1.0, 0.0, 0.0))

    def test_box(self):
        """Test the cell centre discretization of a box."""
        box = gv.Box((0.0, 0.0), (2.0, 3.0), shape=(2, 3))
        points = box.discretize()
        self.assertEqual(len(points), 6)
        np.testing.assert_allclose(points[0].coordinates, [0.5, 0.5])
        np.testing.assert_allclose(points[-1].coordinates, [1.5, 2.5])
        self.assertEqual(len(gv.Box((0.0,), (1.0,), shape=4).discretize()), 4)
        self.assertEqual(gv.Box((0, 0, 0), (1, 1, 1), shape=2).shape, (2, 2, 2))
        with self.assertRaises(gv.InvalidParameter):
            gv.Box((1.0, 0.0), (0.0, 1.0))
        with self.assertRaises(gv.InvalidParameter):
            gv.Box((0.0, 0.0), (1.0, 1.0), shape=0)

    def test_multipoint(self):
        """Test that a multi point discretizes to its points."""
        mp = gv.MultiPoint([(0.0, 0.0), gv.Point(1.0, 1.0)])
        self.assertEqual(len(mp), 2)
        self.assertEqual(mp.discretize()[1], gv.Point(1.0, 1.0))

    def test_sample(self):
        """Test sampling of points and geometries."""
        coords = sample(gv.Point(1.0, 2.0))
        self.assertEqual(len(coords), 1)
        np.testing.assert_array_equal(coords[0], [1.0, 2.0])
        self.assertEqual(len(sample((1.0, 2.0))), 1)
        self.assertEqual(len(sample(gv.Segment((0, 0), (1, 0), num=7))), 7)
        with self.assertRaises(gv.IncompatibleGeometry):
            sample(gv.MultiPoint([]))


class TestMetric(unittest.TestCase):
    def test_euclidean(self):
        """Test the Euclidean metric."""
        metric = gv.Euclidean()
        self.assertEqual(metric.distance(np.zeros(2), np.array([3.0, 4.0])), 5.0)

    def test_mahalanobis(self):
        """Test the Mahalanobis metric."""
        metric = gv.Mahalanobis(np.diag([1.0, 4.0]))
        self.assertAlmostEqual(
            metric.distance(np.zeros(2), np.array([0.0, 1.0])), 2.0
        )
        with self.assertRaises(gv.InvalidParameter):
            gv.Mahalanobis(np.ones((2, 3)))
        with self.assertRaises(gv.InvalidParameter):
            gv.Mahalanobis([[1.0, 1.0], [0.0, 1.0]])

    def test_great_circle(self):
        """Test the great circle metric."""
        metric = gv.GreatCircle(radius=1.0)
        same = np.array([10.0, 20.0])
        self.assertEqual(metric.distance(same, same), 0.0)
        self.assertAlmostEqual(
            metric.distance(np.array([0.0, 0.0]), np.array([0.0, 90.0])), np.pi / 2
        )
        self.assertAlmostEqual(
            metric.distance(np.array([0.0, 0.0]), np.array([180.0, 0.0])), np.pi
        )
        with self.assertRaises(gv.InvalidParameter):
            gv.GreatCircle(radius=0.0)


class TestMetricBall(unittest.TestCase):
    def test_isotropic(self):
        """Test an isotropic ball."""
        ball = gv.MetricBall(5.0)
        self.assertTrue(ball.is_isotropic)
        self.assertIsInstance(ball.metric, gv.Euclidean)
        self.assertEqual(ball.radius, 5.0)
        self.assertEqual(ball.dim, 1)
        self.assertTrue(gv.MetricBall([2.0, 2.0, 2.0]).is_isotropic)

    def test_anisotropic(self):
        """Test an anisotropic ball."""
        ball = gv.MetricBall([4.0, 2.0])
        self.assertFalse(ball.is_isotropic)
        self.assertIsInstance(ball.metric, gv.Mahalanobis)
        np.testing.assert_allclose(ball.metric.vi, np.diag([1.0, 4.0]))
        self.assertEqual(ball.radius, 4.0)
        np.testing.assert_array_equal(ball.ranges, [4.0, 2.0])
        with self.assertRaises(ValueError):
            ball.ranges[0] = 1.0

    def test_invalid(self):
        """Test the validation of a ball."""
        for ranges in (0.0, -1.0, [1.0, -2.0], [], np.inf):
            with self.assertRaises(gv.InvalidParameter):
                gv.MetricBall(ranges)
        with self.assertRaises(gv.InvalidParameter):
            gv.MetricBall([1.0, 2.0, 3.0], rotation=0.5)
        with self.assertRaises(gv.InvalidParameter):
            gv.MetricBall([1.0, 2.0], rotation=np.eye(3))
        with self.assertRaises(TypeError):
            gv.MetricBall(1.0, metric="euclidean")
        with self.assertRaises(gv.InvalidParameter):
            gv.MetricBall([10.0, 5.0], metric=gv.Euclidean())

    def test_rotation_warning(self):
        """Test that a rotation of an isotropic ball is reported."""
        with self.assertWarns(UserWarning):
            gv.MetricBall(1.0, rotation=0.3)

    def test_custom_metric(self):
        """Test an explicit metric."""
        metric = gv.GreatCircle()
        ball = gv.MetricBall(100.0, metric=metric)
        self.assertIs(ball.metric, metric)
        self.assertEqual(repr(ball), "MetricBall(ranges=(100.0,), metric=GreatCircle)")


if __name__ == "__main__":
    unittest.main()
