import logging
import random

import pytest

from painter3d.errors import DuplicateObjectError
from painter3d.mesh import Cube, Face, Mesh, Vertex
from painter3d.renderer import Renderer
from painter3d.scene import Scene


def test_empty_scene_draws_nothing(camera, surface):
    stats = Scene().draw(camera, surface)
    assert surface.calls == []
    assert stats.faces == 0


def test_add_and_flatten(camera):
    scene = Scene()
    a = Cube((0, 0, 10), 2, random.Random(1))
    b = Cube((5, 0, 10), 1, random.Random(2))
    scene.add("a", a)
    scene.add("b", b)
    assert scene.names() == ["a", "b"]
    assert scene.vertices() == a.vertices + b.vertices
    assert scene.faces() == a.faces + b.faces


def test_flatten_returns_fresh_lists(scene):
    first = scene.faces()
    first.clear()
    assert len(scene.faces()) == 6


def test_duplicate_name_overwrites_by_default(caplog):
    scene = Scene()
    first, second = Cube((0, 0, 10), 2), Cube((0, 0, 20), 2)
    scene.add("cube", first)
    with caplog.at_level(logging.WARNING, logger="painter3d.scene"):
        scene.add("cube", second)
    assert len(scene) == 1
    assert scene.objects["cube"] is second
    assert "Replacing scene object 'cube'" in caplog.text


def test_duplicate_name_rejected_when_replace_is_false():
    scene = Scene()
    first = Cube((0, 0, 10), 2)
    scene.add("cube", first)
    with pytest.raises(DuplicateObjectError):
        scene.add("cube", Cube((0, 0, 20), 2), replace=False)
    with pytest.raises(KeyError):
        scene.add("cube", Cube((0, 0, 20), 2), replace=False)
    assert scene.objects["cube"] is first


def test_add_rejects_objects_without_geometry():
    with pytest.raises(TypeError):
        Scene().add("bad", object())


def test_add_rejects_faces_that_are_not_faces():
    scene = Scene()
    with pytest.raises(TypeError):
        scene.add("loose", Mesh(vertices=[Vertex(0, 0, 5)], faces=[(0, 1, 2)]))
    assert "loose" not in scene


def test_add_rejects_faces_over_foreign_vertices():
    corners = [Vertex(0, 0, 5), Vertex(1, 0, 5), Vertex(0, 1, 5)]
    stray = Face(corners, "#ffffff", (0, 0, -1))
    scene = Scene()
    with pytest.raises(ValueError):
        scene.add("stray", Mesh(vertices=corners[:2], faces=[stray]))
    assert len(scene) == 0
    scene.add("whole", Mesh(vertices=corners, faces=[stray]))
    assert scene.faces() == [stray]


def test_remove_and_contains(scene):
    assert "cube" in scene
    removed = scene.remove("cube")
    assert isinstance(removed, Mesh)
    assert "cube" not in scene
    with pytest.raises(KeyError):
        scene.remove("cube")


def test_draw_uses_given_renderer(scene, camera, surface):
    from painter3d.config import RendererConfig

    stats = scene.draw(camera, surface, Renderer(RendererConfig(show_vertices=False)))
    assert stats.drawn == 6
    assert len(surface.calls) == 6
