import math

import pytest

from torusterm.linalg import ZERO, Vec2, Vec3, axis_for_frame, rotate_about_z


def test_vec3_arithmetic():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(0.5, -1.0, 2.0)
    assert a.add(b) == Vec3(1.5, 1.0, 5.0)
    assert a - b == Vec3(0.5, 3.0, 1.0)
    assert a * 2 == Vec3(2.0, 4.0, 6.0)
    assert 2 * a == a.scale(2)
    assert a.dot(b) == 0.5 - 2.0 + 6.0
    assert math.isclose(Vec3(3.0, 4.0, 0.0).length(), 5.0)


def test_vec_types_are_immutable():
    v = Vec3(1.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        v.x = 2.0
    t = Vec2(1.2, 0.3)
    with pytest.raises(AttributeError):
        t.y = 0.1


@pytest.mark.parametrize(
    "v",
    [Vec3(1.0, 1.0, 1.0), Vec3(-3.0, 0.0, 4.0), Vec3(1e-5, 0.0, 0.0), Vec3(100.0, -250.0, 0.5)],
)
def test_normalize_unit_length(v):
    assert math.isclose(v.normalize().length(), 1.0, abs_tol=1e-9)


def test_normalize_zero_vector_unchanged():
    assert ZERO.normalize() == ZERO
    assert Vec3(0.0, 0.0, 0.0).normalize() == Vec3(0.0, 0.0, 0.0)


def test_rotate_about_z_keeps_x_and_rotates_yz():
    v = Vec3(0.7, 1.0, 0.0)
    r = rotate_about_z(v, math.pi / 2)
    assert r.x == 0.7
    assert math.isclose(r.y, 0.0, abs_tol=1e-12)
    assert math.isclose(r.z, 1.0, abs_tol=1e-12)
    assert math.isclose(r.length(), v.length())


def test_axis_for_frame_zero_is_base_diagonal():
    a = axis_for_frame(0, 0.6)
    s = 1.0 / math.sqrt(3.0)
    assert math.isclose(a.x, s) and math.isclose(a.y, s) and math.isclose(a.z, s)


def test_axis_for_frame_is_pure_and_linear():
    a = axis_for_frame(150, 0.6)
    assert a == axis_for_frame(150, 0.6)
    assert math.isclose(a.length(), 1.0, abs_tol=1e-12)
    # 150 frames at 0.6 deg equals one step of 90 deg
    b = axis_for_frame(1, 90.0)
    assert math.isclose(a.y, b.y, abs_tol=1e-12)
    assert math.isclose(a.z, b.z, abs_tol=1e-12)
