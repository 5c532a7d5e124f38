"""
This is the unittest of the evaluation between points and geometries.
"""

import unittest

import numpy as np

import geovario as gv


class TestEvaluate(unittest.TestCase):
    def setUp(self):
        self.model = gv.Exponential(sill=1.0, nugget=0.1, ball=5.0)
        self.u = gv.Point(0.0, 0.0)
        self.v = gv.Point(3.0, 4.0)
        self.segment = gv.Segment((0.0, 0.0), (2.0, 0.0), num=4)
        self.box = gv.Box((5.0, 5.0), (6.0, 7.0), shape=(2, 3))

    def test_point_point(self):
        """Test that points are evaluated at their distance."""
        self.assertEqual(
            self.model.evaluate(self.u, self.v), self.model.evaluate_at(5.0)
        )
        self.assertEqual(self.model.evaluate(self.u, self.u), 0.1)

    def test_bare_coordinates(self):
        """Test that bare coordinates are treated as points."""
        self.assertEqual(
            self.model.evaluate((0.0, 0.0), [3.0, 4.0]),
            self.model.evaluate(self.u, self.v),
        )
        self.assertEqual(
            self.model.evaluate(np.array([0.0, 0.0]), self.v),
            self.model.evaluate(self.u, self.v),
        )

    def test_single_sample_geometry(self):
        """Test that a geometry sampled by one point behaves like the point."""
        single = gv.MultiPoint([self.u])
        expected = self.model.evaluate(self.u, self.v)
        self.assertEqual(self.model.evaluate(single, self.v), expected)
        self.assertEqual(self.model.evaluate(self.v, single), expected)

    def test_geometry_point(self):
        """Test the mean over the sample of a geometry."""
        xs = (0.25, 0.75, 1.25, 1.75)
        expected = sum(
            self.model.evaluate_at(np.hypot(x - 3.0, 4.0)) for x in xs
        ) / 4
        self.assertAlmostEqual(self.model.evaluate(self.segment, self.v), expected)
        self.assertAlmostEqual(self.model.evaluate(self.v, self.segment), expected)

    def test_geometry_geometry(self):
        """Test the mean over the cross product of two samples."""
        us = [p.coordinates for p in self.segment.discretize()]
        vs = [p.coordinates for p in self.box.discretize()]
        total = 0.0
        for a in us:
            for b in vs:
                total += self.model.evaluate_at(np.linalg.norm(a - b))
        expected = total / (len(us) * len(vs))
        self.assertAlmostEqual(
            self.model.evaluate(self.segment, self.box), expected
        )
        self.assertAlmostEqual(
            self.model.evaluate(self.box, self.segment),
            self.model.evaluate(self.segment, self.box),
        )

    def test_within_support(self):
        """Test that a geometry with extent has a within-support variance."""
        model = gv.Spherical(sill=1.0, nugget=0.0, ball=10.0)
        self.assertGreater(model.evaluate(self.box, self.box), 0.0)
        self.assertEqual(model.evaluate(gv.MultiPoint([self.u]), self.u), 0.0)

    def test_average(self):
        """Test the average of precomputed samples."""
        us = gv.geometry.sample(self.segment)
        vs = gv.geometry.sample(self.v)
        self.assertEqual(
            self.model.average(us, vs), self.model.evaluate(self.segment, self.v)
        )

    def test_empty_geometry(self):
        """Test that empty discretizations are rejected."""
        empty = gv.MultiPoint([])
        with self.assertRaises(gv.IncompatibleGeometry):
            self.model.evaluate(empty, self.v)
        with self.assertRaises(gv.IncompatibleGeometry):
            self.model.evaluate(self.segment, empty)

    def test_anisotropic(self):
        """Test that the lag is scaled by the ranges of the ball."""
        model = gv.Gaussian(ball=gv.MetricBall([10.0, 5.0]))
        origin = (0.0, 0.0)
        major = model.evaluate(origin, (10.0, 0.0))
        minor = model.evaluate(origin, (0.0, 5.0))
        self.assertAlmostEqual(major, minor)
        self.assertAlmostEqual(major, model.evaluate_at(10.0))
        self.assertLess(model.evaluate(origin, (5.0, 0.0)), minor)

    def test_anisotropic_rotated(self):
        """Test that the rotation turns the principal axes."""
        model = gv.Gaussian(ball=gv.MetricBall([10.0, 5.0], rotation=np.pi / 2))
        origin = (0.0, 0.0)
        self.assertAlmostEqual(
            model.evaluate(origin, (0.0, 10.0)), model.evaluate_at(10.0)
        )
        self.assertAlmostEqual(
            model.evaluate(origin, (5.0, 0.0)), model.evaluate_at(10.0)
        )

    def test_anisotropic_dimension(self):
        """Test that points must match the number of ranges."""
        model = gv.Gaussian(ball=gv.MetricBall([10.0, 5.0]))
        with self.assertRaises(gv.IncompatibleGeometry):
            model.evaluate((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
        with self.assertRaises(gv.IncompatibleGeometry):
            model.evaluate(gv.Segment((0.0,), (1.0,)), (0.0, 0.0))
        # isotropic balls work in any dimension
        iso = gv.Gaussian(ball=10.0)
        self.assertAlmostEqual(
            iso.evaluate((0.0, 0.0, 0.0), (3.0, 4.0, 0.0)), iso.evaluate_at(5.0)
        )

    def test_ball_less_models(self):
        """Test that models without a ball use the Euclidean distance."""
        power = gv.Power(sill=2.0, exponent=1.0)
        self.assertAlmostEqual(power.evaluate(self.u, self.v), 10.0)
        nugget = gv.Nugget(sill=1.0, nugget=0.3)
        self.assertEqual(nugget.evaluate(self.u, self.u), 0.3)
        self.assertEqual(nugget.evaluate(self.u, self.v), 1.0)

    def test_custom_metric(self):
        """Test a metric ball with a great circle metric."""
        ball = gv.MetricBall(1000.0, metric=gv.GreatCircle())
        model = gv.Spherical(ball=ball)
        lag = gv.GreatCircle().distance(np.array([0.0, 0.0]), np.array([1.0, 1.0]))
        self.assertAlmostEqual(
            model.evaluate((0.0, 0.0), (1.0, 1.0)), model.evaluate_at(lag)
        )


if __name__ == "__main__":
    unittest.main()
