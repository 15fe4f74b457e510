import math

import pytest

from orbitgl.matrix4 import Decomposition, Matrix4
from orbitgl.vector3 import Vector3


def assert_matrix_close(actual, expected, tol=1e-9):
    assert list(actual) == pytest.approx(list(expected), abs=tol)


def assert_vector_close(actual, expected, tol=1e-9):
    assert tuple(actual) == pytest.approx(tuple(expected), abs=tol)


SAMPLE = Matrix4(
    [
        [2.0, 0.0, 1.0, 3.0],
        [1.0, 3.0, 0.0, -1.0],
        [0.0, 1.0, 4.0, 2.0],
        [0.0, 0.0, 0.0, 1.0],
    ]
)


def test_default_is_identity():
    assert Matrix4() == Matrix4.identity()
    assert Matrix4.identity()[0, 0] == 1.0
    assert Matrix4.identity()[0, 1] == 0.0


def test_flat_and_nested_construction_agree():
    flat = Matrix4(range(16))
    nested = Matrix4([[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11], [12, 13, 14, 15]])
    assert flat == nested
    assert flat[2, 1] == 9.0


def test_wrong_size_rejected():
    with pytest.raises(ValueError):
        Matrix4([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        Matrix4([[1, 2, 3], [4, 5, 6], [7, 8, 9], [1, 2, 3]])


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Matrix4()[4, 0]
    with pytest.raises(IndexError):
        Matrix4().with_entry(0, 4, 1.0)


def test_zero_matrix():
    assert all(value == 0.0 for value in Matrix4.zero())


def test_with_entry_returns_copy():
    original = Matrix4()
    changed = original.with_entry(1, 2, 7.0)
    assert changed[1, 2] == 7.0
    assert original[1, 2] == 0.0


def test_identity_is_multiplicative_neutral():
    assert SAMPLE * Matrix4.identity() == SAMPLE
    assert Matrix4.identity() * SAMPLE == SAMPLE


def test_product_is_associative():
    a = Matrix4.rotation_x(0.3)
    b = Matrix4.translation(Vector3(1, 2, 3))
    c = Matrix4.scale(Vector3(2, 3, 4))
    assert_matrix_close((a * b) * c, a * (b * c))


def test_scalar_multiplication_both_sides():
    assert SAMPLE * 2 == 2 * SAMPLE
    assert (SAMPLE * 2)[0, 3] == SAMPLE[0, 3] * 2


def test_add_and_subtract_round_trip():
    other = Matrix4.rotation_z(1.1)
    assert_matrix_close((SAMPLE + other) - other, SAMPLE)
    assert SAMPLE - SAMPLE == Matrix4.zero()


def test_translation_entries():
    m = Matrix4.translation(Vector3(1.5, -2.0, 3.0))
    assert (m[0, 3], m[1, 3], m[2, 3]) == (1.5, -2.0, 3.0)


def test_transform_point_uses_row_vector_convention():
    point = Vector3(1.0, 2.0, 3.0)
    assert_vector_close(Matrix4.translation(Vector3(5, 6, 7)).transform_point(point), point)
    transposed = Matrix4.translation(Vector3(5, 6, 7)).transpose()
    assert_vector_close(transposed.transform_point(point), point + Vector3(5, 6, 7))


def test_transform_vector_ignores_last_row():
    m = Matrix4.translation(Vector3(5, 6, 7)).transpose()
    v = Vector3(1.0, 2.0, 3.0)
    assert_vector_close(m.transform_vector(v), v)


def test_scale_vector_and_uniform():
    assert Matrix4.scale(2.0) == Matrix4.scale(Vector3(2.0, 2.0, 2.0))
    assert_vector_close(Matrix4.scale(Vector3(2, 3, 4)).transform_vector(Vector3(1, 1, 1)), (2, 3, 4))


@pytest.mark.parametrize(
    "axis, builder",
    [
        (Vector3(1, 0, 0), Matrix4.rotation_x),
        (Vector3(0, 1, 0), Matrix4.rotation_y),
        (Vector3(0, 0, 1), Matrix4.rotation_z),
    ],
)
def test_axis_rotation_matches_arbitrary_rotation(axis, builder):
    assert_matrix_close(Matrix4.rotation(axis * 3.0, 0.7), builder(0.7))


def test_rotation_preserves_length_and_determinant():
    m = Matrix4.rotation(Vector3(1, 2, 3), 1.2)
    v = Vector3(0.5, -1.5, 2.0)
    assert m.transform_vector(v).length() == pytest.approx(v.length())
    assert m.determinant() == pytest.approx(1.0)


def test_transpose_twice_is_identity_operation():
    assert SAMPLE.transpose().transpose() == SAMPLE
    assert SAMPLE.transpose()[0, 1] == SAMPLE[1, 0]


def test_inverse_round_trip():
    assert_matrix_close(SAMPLE * SAMPLE.inverse(), Matrix4.identity())
    assert_matrix_close(SAMPLE.inverse() * SAMPLE, Matrix4.identity())


def test_inverse_of_singular_is_identity():
    assert Matrix4.zero().inverse() == Matrix4.identity()


def test_determinant_of_scale():
    assert Matrix4.scale(Vector3(2, 3, 4)).determinant() == pytest.approx(2 * 3 * 4)


def test_is_invertible():
    assert SAMPLE.is_invertible()
    assert not Matrix4.zero().is_invertible()
    assert not Matrix4.scale(1e-3).is_invertible(epsilon=1e-6)


def test_perspective_fixed_entries():
    m = Matrix4.perspective(math.radians(60), 16 / 9, 1.0, 100.0)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0
    assert m[1, 1] == pytest.approx(1.0 / math.tan(math.radians(30)))


def test_orthographic_is_invertible():
    m = Matrix4.orthographic(-2, 2, -1, 1, 0.1, 10)
    assert m[3, 3] == 1.0
    assert_matrix_close(m * m.inverse(), Matrix4.identity())


def test_look_at_is_rigid_and_moves_eye_to_origin():
    eye = Vector3(3.0, 2.0, 5.0)
    view = Matrix4.look_at(eye, Vector3(), Vector3.up())
    assert view.determinant() == pytest.approx(1.0)
    moved = view.transpose().transform_point(eye)
    assert_vector_close(moved, Vector3(), tol=1e-9)


def test_decompose_translation_and_scale():
    m = Matrix4.translation(Vector3(1, 2, 3)) * Matrix4.scale(Vector3(2, 3, 4))
    parts = m.decompose()
    assert isinstance(parts, Decomposition)
    assert_vector_close(parts.translation, (1, 2, 3))
    assert_vector_close(parts.scale, (2, 3, 4))
    assert_vector_close(parts.rotation, (0, 0, 0))


def test_decompose_rotation_x():
    parts = Matrix4.rotation_x(0.5).decompose()
    assert parts.rotation.x == pytest.approx(0.5)
    assert_vector_close(parts.scale, (1, 1, 1))


def test_decompose_negative_determinant_flips_scale():
    parts = Matrix4.scale(Vector3(-1, 1, 1)).decompose()
    assert_vector_close(parts.scale, (-1, -1, -1))


def test_str_format():
    text = str(Matrix4.identity())
    lines = text.splitlines()
    assert len(lines) == 4
    assert lines[0] == "|    1.000    0.000    0.000    0.000 |"
    assert all(line.startswith("| ") and line.endswith("|") for line in lines)


def test_hash_matches_equality():
    assert hash(Matrix4(range(16))) == hash(Matrix4(list(range(16))))
    assert {Matrix4(), Matrix4.identity()} == {Matrix4()}