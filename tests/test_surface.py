import pytest
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure

from painter3d.surface import MatplotlibSurface


@pytest.fixture
def mpl_surface():
    fig = Figure(figsize=(8, 6), dpi=100)
    ax = fig.add_subplot(111)
    return MatplotlibSurface(ax, 800, 600)


def test_axes_are_centred_with_y_down(mpl_surface):
    ax = mpl_surface.ax
    assert ax.get_xlim() == (-400.0, 400.0)
    assert ax.get_ylim() == (300.0, -300.0)


def test_fill_polygon_adds_patch(mpl_surface):
    mpl_surface.fill_polygon([(0, 0), (10, 0), (10, 10)], "#ff0000")
    patches = mpl_surface.ax.patches
    assert len(patches) == 1
    assert patches[0].get_facecolor() == to_rgba("#ff0000")


def test_fill_rect_adds_patch(mpl_surface):
    mpl_surface.fill_rect(5, 6, 5, 5, "blue")
    rect = mpl_surface.ax.patches[0]
    assert rect.get_xy() == (5, 6)
    assert rect.get_width() == 5
    assert rect.get_facecolor() == to_rgba("blue")


def test_drawing_does_not_rescale_axes(mpl_surface):
    mpl_surface.fill_polygon([(-5000, -5000), (5000, -5000), (0, 5000)], "#00ff00")
    assert mpl_surface.ax.get_xlim() == (-400.0, 400.0)


def test_clear_removes_patches_and_sets_background(mpl_surface):
    mpl_surface.fill_polygon([(0, 0), (10, 0), (10, 10)], "#ff0000")
    mpl_surface.fill_rect(0, 0, 5, 5, "blue")
    mpl_surface.clear("black")
    assert len(mpl_surface.ax.patches) == 0
    assert mpl_surface.patches == []
    assert mpl_surface.ax.get_facecolor() == to_rgba("black")
