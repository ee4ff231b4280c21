import numpy as np
import pytest

from hatescene.scene_object import euler_xyz_matrix
from hatescene.shapes import (
    BoxShape,
    CapsuleShape,
    CollisionShape,
    ConvexShape,
    PolygonFace,
    ShapeType,
    SphereShape,
)


def test_shape_types():
    assert BoxShape().shape_type is ShapeType.BOX
    assert SphereShape().shape_type is ShapeType.SPHERE
    assert CapsuleShape().shape_type is ShapeType.CAPSULE
    assert ConvexShape([0, 0, 0], [[0]]).shape_type is ShapeType.CONVEX


def test_rotation_from_degrees():
    shape = SphereShape(1.0, (1, 2, 3), (10, 20, 30))
    np.testing.assert_allclose(shape.position, [1, 2, 3])
    np.testing.assert_allclose(
        shape.rotation_matrix, euler_xyz_matrix(np.radians([10, 20, 30]))
    )


def test_rotation_from_matrix():
    mat = euler_xyz_matrix(np.radians([0, 90, 0]))
    shape = CollisionShape(ShapeType.SPHERE, (0, 0, 0), mat)
    np.testing.assert_allclose(shape.rotation_matrix, mat)


def test_bad_rotation_raises():
    with pytest.raises(ValueError):
        SphereShape(1.0, (0, 0, 0), (1, 2))


def test_transform_changes_are_ignored(capsys):
    shape = SphereShape(1.0, (1, 2, 3))
    shape.set_position((9, 9, 9))
    shape.offset((1, 1, 1))
    shape.rotate((0, 45, 0))
    np.testing.assert_allclose(shape.position, [1, 2, 3])
    np.testing.assert_allclose(shape.rotation_matrix, np.eye(4))
    assert "not supported for CollisionShape" in capsys.readouterr().err


def test_collision_category_round_trip():
    shape = SphereShape()
    shape.set_collision_category(5)
    assert shape.collision_category == 5
    assert shape.collision_category_bits == 1 << 5


def test_collision_category_out_of_range_is_ignored(capsys):
    shape = SphereShape()
    shape.set_collision_category(3)
    shape.set_collision_category(16)
    assert shape.collision_category == 3
    assert "category cannot be greater than 15" in capsys.readouterr().err


def test_raw_category_reports_lowest_bit():
    shape = SphereShape()
    shape.collision_category_bits = 0b1100
    assert shape.collision_category == 2


def test_empty_category_reports_zero():
    shape = SphereShape()
    shape.collision_category_bits = 0
    assert shape.collision_category == 0


def test_mask_bits():
    shape = SphereShape()
    shape.collision_mask = 0
    shape.set_collision_mask_bit(1, True)
    shape.set_collision_mask_bit(7, True)
    shape.set_collision_mask_bit(15, True)
    assert shape.enabled_collision_mask_bits() == [1, 7, 15]
    assert shape.collision_mask_bit(7)
    shape.set_collision_mask_bit(7, False)
    assert not shape.collision_mask_bit(7)
    assert shape.enabled_collision_mask_bits() == [1, 15]


def test_mask_bit_out_of_range_is_ignored(capsys):
    shape = SphereShape()
    shape.collision_mask = 0b101
    shape.set_collision_mask_bit(20, True)
    assert shape.collision_mask == 0b101
    assert "mask cannot be greater than 15" in capsys.readouterr().err


def test_full_mask_enables_every_bit():
    shape = SphereShape()
    shape.collision_mask = 0xFFFF
    assert shape.enabled_collision_mask_bits() == list(range(16))


def test_friction_and_bounciness_validation():
    shape = BoxShape()
    shape.friction = 0.7
    shape.friction = -1.0
    assert shape.friction == 0.7
    shape.bounciness = 0.25
    shape.bounciness = 1.5
    shape.bounciness = -0.1
    assert shape.bounciness == 0.25


def test_box_half_extents_reverse_axes():
    box = BoxShape((2.0, 4.0, 6.0))
    assert box.half_extents == (3.0, 2.0, 1.0)
    box.change_size(8.0, 8.0, 8.0)
    assert box.half_extents == (4.0, 4.0, 4.0)


def test_sphere_radius():
    sphere = SphereShape(2.5)
    assert sphere.radius == 2.5
    sphere.change_radius(0.75)
    assert sphere.radius == 0.75


def test_capsule_height_excludes_caps():
    capsule = CapsuleShape(1.0, 5.0)
    assert capsule.radius == 1.0
    assert capsule.height == 3.0
    capsule.change_radius(0.5)
    assert capsule.height == 3.0
    capsule.change_height(5.0)
    assert capsule.height == 4.0


def test_convex_faces_flatten_indices():
    verts = [0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 1, 0]
    shape = ConvexShape(verts, [[0, 1, 2], [0, 2, 3]])
    assert shape.indices == [0, 1, 2, 0, 2, 3]
    assert shape.faces == [PolygonFace(3, 0), PolygonFace(3, 3)]
    assert shape.vertex_count == len(verts) // 3


def test_convex_bad_vertices():
    with pytest.raises(ValueError):
        ConvexShape([0, 0], [[0]])


def test_initialized_follows_collider():
    shape = SphereShape()
    assert not shape.is_initialized
    shape.collider = object()
    assert shape.is_initialized