import math
import unittest

from spheretracer.color import WHITE
from spheretracer.light import AmbientLight, DirectionalLight, PointLight
from spheretracer.lighting import compute_lighting
from spheretracer.shape import SPECULAR_NONE, Sphere
from spheretracer.vector import Point, Vector

ORIGIN = Point(0.0, 0.0, 0.0)
UP = Vector(0.0, 1.0, 0.0)
SIDEWAYS = Vector(1.0, 0.0, 0.0)


class TestComputeLighting(unittest.TestCase):

    def test_ambient_only(self):
        i = compute_lighting(ORIGIN, UP, UP, [AmbientLight(0.2)], SPECULAR_NONE, [])
        self.assertAlmostEqual(i, 0.2)

    def test_ambient_ignores_orientation_and_occluders(self):
        blocker = Sphere(Point(0.0, 5.0, 0.0), 1.0, WHITE)
        i = compute_lighting(ORIGIN, -UP, UP, [AmbientLight(0.3), AmbientLight(0.4)], SPECULAR_NONE, [blocker])
        self.assertAlmostEqual(i, 0.7)

    def test_point_light_diffuse(self):
        i = compute_lighting(ORIGIN, UP, SIDEWAYS, [PointLight(0.5, Point(0.0, 10.0, 0.0))], SPECULAR_NONE, [])
        self.assertAlmostEqual(i, 0.5)

    def test_diffuse_follows_cosine_law(self):
        light = PointLight(1.0, Point(10.0, 10.0, 0.0))
        i = compute_lighting(ORIGIN, UP, SIDEWAYS, [light], SPECULAR_NONE, [])
        self.assertAlmostEqual(i, 1 / math.sqrt(2))

    def test_light_behind_surface(self):
        i = compute_lighting(ORIGIN, UP, UP, [PointLight(0.5, Point(0.0, -10.0, 0.0))], SPECULAR_NONE, [])
        self.assertEqual(i, 0.0)

    def test_directional_light(self):
        light = DirectionalLight(0.4, Vector(1.0, 1.0, 0.0))
        i = compute_lighting(ORIGIN, UP, UP, [light], SPECULAR_NONE, [])
        self.assertAlmostEqual(i, 0.4 / math.sqrt(2))

    def test_intensities_are_not_clamped(self):
        lights = [AmbientLight(2.0), PointLight(3.0, Point(0.0, 4.0, 0.0))]
        i = compute_lighting(ORIGIN, UP, SIDEWAYS, lights, SPECULAR_NONE, [])
        self.assertAlmostEqual(i, 5.0)

    def test_zero_length_light_vector_is_skipped(self):
        lights = [AmbientLight(0.1), PointLight(0.5, ORIGIN), DirectionalLight(0.5, Vector(0.0, 0.0, 0.0))]
        i = compute_lighting(ORIGIN, UP, UP, lights, 10.0, [])
        self.assertAlmostEqual(i, 0.1)


class TestShadows(unittest.TestCase):

    def setUp(self):
        self.between = Sphere(Point(0.0, 5.0, 0.0), 1.0, WHITE)
        self.beyond = Sphere(Point(0.0, 20.0, 0.0), 1.0, WHITE)
        self.point_light = PointLight(0.5, Point(0.0, 10.0, 0.0))
        self.sun = DirectionalLight(0.5, Vector(0.0, 1.0, 0.0))

    def test_point_light_blocked(self):
        i = compute_lighting(ORIGIN, UP, SIDEWAYS, [self.point_light], SPECULAR_NONE, [self.between])
        self.assertEqual(i, 0.0)

    def test_occluder_past_point_light_casts_no_shadow(self):
        i = compute_lighting(ORIGIN, UP, SIDEWAYS, [self.point_light], SPECULAR_NONE, [self.beyond])
        self.assertAlmostEqual(i, 0.5)

    def test_directional_light_blocked_at_any_distance(self):
        i = compute_lighting(ORIGIN, UP, SIDEWAYS, [self.sun], SPECULAR_NONE, [self.beyond])
        self.assertEqual(i, 0.0)

    def test_surface_does_not_shadow_itself(self):
        sphere = Sphere(Point(0.0, -1.0, 0.0), 1.0, WHITE)
        i = compute_lighting(ORIGIN, UP, SIDEWAYS, [self.point_light], SPECULAR_NONE, [sphere])
        self.assertAlmostEqual(i, 0.5)


class TestSpecular(unittest.TestCase):

    def setUp(self):
        self.light = PointLight(1.0, Point(0.0, 10.0, 0.0))

    def test_highlight_toward_viewer(self):
        i = compute_lighting(ORIGIN, UP, UP, [self.light], 10.0, [])
        self.assertAlmostEqual(i, 2.0)

    def test_sentinel_disables_highlight(self):
        i = compute_lighting(ORIGIN, UP, UP, [self.light], SPECULAR_NONE, [])
        self.assertAlmostEqual(i, 1.0)

    def test_no_highlight_when_viewer_is_perpendicular(self):
        i = compute_lighting(ORIGIN, UP, SIDEWAYS, [self.light], 10.0, [])
        self.assertAlmostEqual(i, 1.0)

    def test_exponent_sharpens_highlight(self):
        light = PointLight(1.0, Point(1.0, 10.0, 0.0))
        view = Vector(0.0, 1.0, 0.0)
        dull = compute_lighting(ORIGIN, UP, view, [light], 2.0, [])
        sharp = compute_lighting(ORIGIN, UP, view, [light], 200.0, [])
        self.assertGreater(dull, sharp)


class TestLight(unittest.TestCase):

    def test_negative_intensity_rejected(self):
        with self.assertRaises(ValueError):
            AmbientLight(-0.1)
        with self.assertRaises(ValueError):
            PointLight(-1.0, ORIGIN)
        with self.assertRaises(ValueError):
            DirectionalLight(-1.0, UP)

    def test_non_finite_intensity_rejected(self):
        for intensity in (math.nan, math.inf):
            with self.assertRaises(ValueError):
                AmbientLight(intensity)
            with self.assertRaises(ValueError):
                PointLight(intensity, ORIGIN)
            with self.assertRaises(ValueError):
                DirectionalLight(intensity, UP)

    def test_unknown_light_rejected(self):
        with self.assertRaises(TypeError):
            compute_lighting(ORIGIN, UP, UP, [object()], SPECULAR_NONE, [])


if __name__ == "__main__":
    unittest.main()
