import math

import numpy as np

from hatescene.camera import Camera


def test_fresh_camera_view_is_identity():
    assert np.allclose(Camera().view_matrix(), np.eye(4))


def test_view_maps_camera_position_to_origin():
    cam = Camera()
    cam.set_position([3.0, -2.0, 5.0])
    cam.set_rotation([10.0, 40.0, 0.0])
    result = cam.view_matrix() @ np.append(cam.global_position(), 1.0)
    assert np.allclose(result, [0.0, 0.0, 0.0, 1.0])


def test_projection_shape():
    cam = Camera(fov=70.0, render_dist=50.0)
    p = cam.projection_matrix(2.0)
    assert p[3, 2] == -1.0
    assert math.isclose(p[0, 0] * 2.0, p[1, 1])


def test_projection_cached_per_aspect_ratio():
    cam = Camera(fov=60.0)
    first = cam.projection_matrix(1.5)
    cam.fov = 90.0
    assert np.array_equal(cam.projection_matrix(1.5), first)
    assert not np.allclose(cam.projection_matrix(1.0)[1, 1], first[1, 1])


def test_center_ray_of_fresh_camera_looks_down_negative_z():
    ray = Camera().project_ray_from_screen((400, 300), (800, 600))
    assert np.allclose(ray, [0.0, 0.0, -1.0])


def test_center_ray_follows_camera_direction():
    cam = Camera()
    cam.set_rotation([20.0, 60.0, 0.0])
    ray = cam.project_ray_from_screen((320, 240), (640, 480))
    assert np.allclose(ray, cam.direction)
    assert math.isclose(float(np.linalg.norm(ray)), 1.0)


def test_skybox_encloses_render_distance():
    cam = Camera(render_dist=42.0)
    assert math.isclose(cam.skybox.aabb_radius, 42.0)
    cam.render_dist = 10.0
    assert math.isclose(cam.skybox.aabb_radius, 10.0)


def test_skybox_follows_position_not_rotation():
    cam = Camera()
    cam.set_position([1.0, 2.0, 3.0])
    cam.set_rotation([0.0, 45.0, 0.0])
    assert np.allclose(cam.skybox.global_position(), [1.0, 2.0, 3.0])
    assert np.allclose(cam.skybox.global_rotation_matrix(), np.eye(4))


def test_skybox_geometry():
    cam = Camera()
    assert cam.skybox.indices == list(reversed(range(36)))
    assert len(cam.skybox.uv) == 72
    assert cam.skybox.light_shading is False
    assert all(0.0 <= v <= 1.0 for v in cam.skybox.uv)