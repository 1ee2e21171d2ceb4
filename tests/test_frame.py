import pytest

from spriteforge.frame import Color, Frame, TRANSPARENT


def test_new_frame_is_transparent_white():
    frame = Frame(3, 3)
    assert frame.height == 3
    assert frame.width == 3
    assert all(pixel == Color(255, 255, 255, 0) for row in frame.rows() for pixel in row)
    assert TRANSPARENT == Color(255, 255, 255, 0)


def test_default_frame_is_empty():
    frame = Frame()
    assert frame.rows() == []
    assert (frame.height, frame.width) == (0, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Frame(-1, 2)


def test_rows_shape_matches_dimensions():
    frame = Frame(2, 5)
    rows = frame.rows()
    assert len(rows) == 2
    assert all(len(row) == 5 for row in rows)


def test_set_and_get_pixel():
    frame = Frame(2, 2)
    red = Color(200, 10, 20, 255)
    frame.set_pixel(1, 0, red)
    assert frame.pixel(1, 0) == red
    assert frame.rows()[1][0] == red
    assert frame.pixel(0, 1) == TRANSPARENT


@pytest.mark.parametrize("row,column", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_pixel_out_of_range(row, column):
    frame = Frame(2, 2)
    with pytest.raises(IndexError):
        frame.pixel(row, column)
    with pytest.raises(IndexError):
        frame.set_pixel(row, column, TRANSPARENT)


def test_rows_returns_copy():
    frame = Frame(1, 1)
    rows = frame.rows()
    rows[0][0] = Color(1, 2, 3, 4)
    assert frame.pixel(0, 0) == TRANSPARENT


def test_rotate_clockwise():
    a, b, c, d = Color(1, 0, 0), Color(0, 1, 0), Color(0, 0, 1), Color(1, 1, 1)
    frame = Frame(2, 2)
    frame.set_pixel(0, 0, a)
    frame.set_pixel(0, 1, b)
    frame.set_pixel(1, 0, c)
    frame.set_pixel(1, 1, d)
    frame.rotate()
    assert frame.rows() == [[c, a], [d, b]]


def test_four_rotations_restore_frame():
    frame = Frame(3, 3)
    for i in range(3):
        frame.set_pixel(i, (i + 1) % 3, Color(i * 10, 5, 7, 100))
    original = frame.copy()
    for _ in range(4):
        frame.rotate()
    assert frame == original


def test_rotate_non_square_rejected():
    frame = Frame(2, 3)
    with pytest.raises(ValueError):
        frame.rotate()


def test_copy_is_independent():
    frame = Frame(2, 2)
    duplicate = frame.copy()
    duplicate.set_pixel(0, 0, Color(9, 9, 9, 9))
    assert frame.pixel(0, 0) == TRANSPARENT
    assert duplicate.pixel(0, 0) == Color(9, 9, 9, 9)


def test_color_default_alpha_is_opaque():
    assert Color(0, 0, 0).alpha == 255


def test_color_inverted_keeps_alpha():
    color = Color(10, 20, 30, 40)
    inverted = color.inverted()
    assert inverted.alpha == 40
    assert inverted.red + color.red == 255
    assert inverted.green + color.green == 255
    assert inverted.blue + color.blue == 255
    assert inverted.inverted() == color


def test_hex_argb():
    assert Color(0, 0, 0, 255).hex_argb() == "#ff000000"
    assert Color(255, 255, 255, 0).hex_argb() == "#00ffffff"


@pytest.mark.parametrize("values", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 0, 300)])
def test_color_out_of_range(values):
    with pytest.raises(ValueError):
        Color(*values)


def test_color_rejects_non_int():
    with pytest.raises(TypeError):
        Color(1.5, 0, 0)