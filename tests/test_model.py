import pytest

from hatescene.mesh import Mesh
from hatescene.model import Model

UNIT = [0, 0, 0, 1, 1, 1]


def _two_level_model():
    model = Model()
    near = [Mesh(UNIT), Mesh(UNIT)]
    far = [Mesh(UNIT), Mesh(UNIT)]
    model.add_lod(0.0, near)
    model.add_lod(10.0, far)
    return model, near, far


def test_empty_model_has_no_meshes():
    assert Model().meshes_for((0, 0, 0)) == []


def test_single_lod_returns_its_meshes():
    model = Model()
    meshes = [Mesh(UNIT)]
    model.add_lod(0.0, meshes)
    assert model.meshes_for((100, 0, 0)) == meshes
    assert model.lod_count == 1


def test_near_camera_gets_first_level():
    model, near, _ = _two_level_model()
    assert model.meshes_for((0.5, 0.5, 0.5)) == near


def test_far_camera_gets_second_level():
    model, _, far = _two_level_model()
    assert model.meshes_for((100.0, 0.0, 0.0)) == far


def test_levels_chosen_per_mesh():
    model, near, far = _two_level_model()
    near[1].set_position([200.0, 0.0, 0.0])
    assert model.meshes_for((0.0, 0.0, 0.0)) == [near[0], far[1]]


def test_mismatched_levels_raise():
    model = Model()
    model.add_lod(0.0, [Mesh(UNIT), Mesh(UNIT)])
    model.add_lod(1.0, [Mesh(UNIT)])
    with pytest.raises(IndexError):
        model.meshes_for((100.0, 100.0, 100.0))


def test_copy_of_unloaded_model_is_empty():
    model, _, _ = _two_level_model()
    model.set_position([1.0, 2.0, 3.0])
    clone = model.copy()
    assert clone.lod_count == 0
    assert list(clone.position) == [1.0, 2.0, 3.0]
    assert clone.is_loaded is False


def test_copy_of_loaded_model_duplicates_meshes():
    model, near, _ = _two_level_model()
    model.is_loaded = True
    model.textures = [{"w": 1}]
    clone = model.copy(copy_textures=True)
    assert clone.lod_count == 2
    assert clone.lod(1).__len__() == 2
    assert all(a is not b for a, b in zip(clone.lod(0), near))
    assert [m.vertices for m in clone.lod(0)] == [m.vertices for m in near]
    assert clone.textures == model.textures
    assert clone.textures[0] is not model.textures[0]
    assert clone.uuid != model.uuid


def test_copy_shares_textures_by_default():
    model, _, _ = _two_level_model()
    model.is_loaded = True
    model.textures = [{"w": 1}]
    assert model.copy().textures[0] is model.textures[0]


def test_set_visible_hides_all_meshes():
    model, near, far = _two_level_model()
    model.set_visible(False)
    assert not any(m.visible for m in near + far)