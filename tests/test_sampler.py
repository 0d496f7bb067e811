import numpy as np
import pytest

from arc_edges.geometry import derive_control_polygon
from arc_edges.sampler import sample, sample_polygons, sample_positions
from arc_edges.types import ControlPolygon
from arc_edges.validate import InputValidationError


def _bezier(poly: np.ndarray, t: float) -> np.ndarray:
    s = 1.0 - t
    return s**3 * poly[0] + 3 * s**2 * t * poly[1] + 3 * s * t**2 * poly[2] + t**3 * poly[3]


def test_sample_hits_endpoints_exactly():
    poly = ControlPolygon((0.1, 0.7), (1.3, -2.9), (4.4, 3.3), (2.2, 0.3))

    points = sample(poly, 11)

    assert len(points) == 11
    assert points[0].xy == poly.p0
    assert points[-1].xy == poly.p3
    assert points[0].t == 0.0
    assert points[-1].t == 1.0


def test_sample_parameters_strictly_increase():
    poly = derive_control_polygon((0.0, 0.0), (5.0, 0.0))

    ts = [point.t for point in sample(poly, 37)]

    assert all(b > a for a, b in zip(ts, ts[1:]))


def test_sample_matches_bernstein_formula():
    rng = np.random.default_rng(3)
    poly = rng.normal(size=(4, 2))

    points = sample(poly, 7)

    for point in points:
        assert point.xy == pytest.approx(tuple(_bezier(poly, point.t)), abs=1e-12)


def test_half_circle_midpoint():
    poly = derive_control_polygon((0.0, 0.0), (2.0, 0.0), curvature=1.0)

    middle = sample(poly, 3)[1]

    assert middle.t == pytest.approx(0.5)
    assert middle.xy == pytest.approx((1.0, -0.75))


def test_two_samples_are_the_endpoints():
    poly = derive_control_polygon((1.0, 1.0), (4.0, 5.0), curvature=0.3)

    points = sample(poly, 2)

    assert [p.xy for p in points] == [poly.p0, poly.p3]


@pytest.mark.parametrize('n', [1, 0, -5])
def test_too_few_samples_are_rejected(n):
    poly = derive_control_polygon((0.0, 0.0), (1.0, 0.0))

    with pytest.raises(InputValidationError):
        sample(poly, n)


def test_non_integer_sample_count_is_rejected():
    with pytest.raises(InputValidationError):
        sample_positions(2.5)


def test_sample_polygons_batch_shape_and_endpoints():
    polygons = np.stack(
        [
            derive_control_polygon((0.0, 0.0), (2.0, 0.0)).as_array(),
            derive_control_polygon((1.0, 0.0), (0.0, 1.0), circular=True).as_array(),
            derive_control_polygon((3.0, 3.0), (3.0, 3.0)).as_array(),
        ]
    )

    points, t = sample_polygons(polygons, 25)

    assert points.shape == (3, 25, 2)
    assert t.shape == (25,)
    assert np.array_equal(points[:, 0, :], polygons[:, 0, :])
    assert np.array_equal(points[:, -1, :], polygons[:, 3, :])
    assert np.allclose(points[2], [3.0, 3.0])


def test_sample_polygons_rejects_bad_shape():
    with pytest.raises(ValueError):
        sample_polygons(np.zeros((2, 3, 2)), 10)


def test_straight_polygon_samples_stay_on_line():
    poly = derive_control_polygon((0.0, 0.0), (4.0, 2.0), curvature=0.0)

    for point in sample(poly, 9):
        assert point.y == pytest.approx(point.x / 2.0, abs=1e-12)


def test_sample_copies_edge_attributes_onto_every_point():
    poly = derive_control_polygon((0.0, 0.0), (2.0, 0.0))
    attrs = {'edge_colour': 'red', 'weight': 2.0}

    points = sample(poly, 4, attrs)

    assert [p.attrs for p in points] == [attrs] * 4
    points[0].attrs['weight'] = 5.0
    assert points[1].attrs['weight'] == 2.0
    assert attrs['weight'] == 2.0


def test_sample_without_attributes_gives_empty_mappings():
    poly = derive_control_polygon((0.0, 0.0), (2.0, 0.0))

    assert all(p.attrs == {} for p in sample(poly, 3))
