import unittest

import pytest

from trackstats.centroid import simple_centroid, vector_centroid
from trackstats.exceptions import InsufficientPointsError
from trackstats.geometry import Centroid, TrackPoint


class TestVectorCentroid(unittest.TestCase):

    def test_repeated_point_returns_that_point(self):
        point = TrackPoint(longitude=116.397128, latitude=39.916527, distance=3.2)
        centroid = vector_centroid([point, point, point])
        self.assertAlmostEqual(centroid.longitude, point.longitude, places=9)
        self.assertAlmostEqual(centroid.latitude, point.latitude, places=9)

    def test_returns_centroid_record(self):
        points = [TrackPoint(0.0, 0.0), TrackPoint(10.0, 0.0)]
        self.assertIsInstance(vector_centroid(points), Centroid)

    def test_symmetric_points_on_equator(self):
        points = [TrackPoint(-10.0, 0.0), TrackPoint(10.0, 0.0)]
        centroid = vector_centroid(points)
        self.assertAlmostEqual(centroid.longitude, 0.0, places=9)
        self.assertAlmostEqual(centroid.latitude, 0.0, places=9)

    def test_antimeridian_wraparound(self):
        points = [TrackPoint(179.0, 0.0), TrackPoint(-179.0, 0.0)]
        centroid = vector_centroid(points)
        self.assertAlmostEqual(abs(centroid.longitude), 180.0, places=9)
        self.assertAlmostEqual(centroid.latitude, 0.0, places=9)

    def test_points_around_pole(self):
        points = [
            TrackPoint(0.0, 80.0),
            TrackPoint(90.0, 80.0),
            TrackPoint(180.0, 80.0),
            TrackPoint(-90.0, 80.0),
        ]
        centroid = vector_centroid(points)
        self.assertAlmostEqual(centroid.latitude, 90.0, places=6)

    def test_distance_field_is_ignored(self):
        plain = [TrackPoint(1.0, 2.0), TrackPoint(3.0, 4.0)]
        annotated = [p._replace(distance=100.0) for p in plain]
        self.assertEqual(vector_centroid(plain), vector_centroid(annotated))

    def test_too_few_points(self):
        with self.assertRaises(InsufficientPointsError):
            vector_centroid([TrackPoint(1.0, 2.0)])
        with self.assertRaises(InsufficientPointsError):
            vector_centroid([])


def test_simple_centroid_of_two_points_is_midpoint():
    centroid = simple_centroid([TrackPoint(0.0, 0.0), TrackPoint(2.0, 4.0)])
    assert centroid == Centroid(longitude=1.0, latitude=2.0)


def test_simple_centroid_counts_repeated_points():
    points = [TrackPoint(0.0, 0.0), TrackPoint(0.0, 0.0), TrackPoint(3.0, 3.0)]
    centroid = simple_centroid(points)
    assert centroid.longitude == pytest.approx(1.0)
    assert centroid.latitude == pytest.approx(1.0)


def test_simple_centroid_does_not_wrap_antimeridian():
    centroid = simple_centroid([TrackPoint(179.0, 0.0), TrackPoint(-179.0, 0.0)])
    assert centroid.longitude == pytest.approx(0.0)


def test_centroids_agree_for_small_extent():
    points = [
        TrackPoint(116.397128, 39.916527),
        TrackPoint(116.397245, 39.916702),
        TrackPoint(116.397401, 39.916797),
    ]
    vector = vector_centroid(points)
    simple = simple_centroid(points)
    assert vector.longitude == pytest.approx(simple.longitude, abs=1e-6)
    assert vector.latitude == pytest.approx(simple.latitude, abs=1e-6)


def test_simple_centroid_too_few_points():
    with pytest.raises(InsufficientPointsError, match="at least 2 points"):
        simple_centroid([TrackPoint(1.0, 2.0)])
