from itertools import islice

import pytest

from spriteforge.editor import canvas_geometry
from spriteforge.frame import Color
from spriteforge.frames import FrameManager
from spriteforge.preview import animation_frames, frame_delay_ms, preview_geometry


def test_delay_at_one_fps_is_a_second():
    assert frame_delay_ms(1) == 1000


def test_delay_truncates():
    assert frame_delay_ms(3) == 333


def test_delay_never_grows_with_fps():
    delays = [frame_delay_ms(fps) for fps in range(1, 61)]
    assert delays == sorted(delays, reverse=True)


@pytest.mark.parametrize("fps", [0, -5])
def test_delay_rejects_non_positive_fps(fps):
    with pytest.raises(ValueError):
        frame_delay_ms(fps)


def test_actual_size_uses_one_pixel_per_pixel():
    geometry = preview_geometry(12, 12, 400, 300, True)
    assert geometry.pixel_size == 1
    assert (geometry.offset_x, geometry.offset_y) == (0, 0)
    assert (geometry.label_width, geometry.label_height) == (12, 12)


def test_scaled_matches_canvas_geometry():
    assert preview_geometry(10, 10, 500, 500, False) == canvas_geometry(500, 500, 10, 10)


def test_scaled_fits_inside_label():
    geometry = preview_geometry(7, 7, 300, 200, False)
    left, top, size, _ = geometry.cell_rect(6, 6)
    assert left + size <= 300
    assert top + size <= 200


def test_preview_geometry_rejects_empty_frame():
    with pytest.raises(ValueError):
        preview_geometry(0, 0, 100, 100, False)


def test_animation_cycles_frames_in_order():
    manager = FrameManager(2, 2)
    manager.add_frame()
    manager.add_frame()
    manager.update_pixel(1, 0, 0, Color(1, 2, 3, 4))
    shown = list(islice(animation_frames(manager), 6))
    assert shown[0::2] == [manager.frames[0]] * 3
    assert shown[1::2] == [manager.frames[1]] * 3


def test_animation_uses_snapshot():
    manager = FrameManager(2, 2)
    manager.add_frame()
    frames = animation_frames(manager)
    first = next(frames)
    manager.update_pixel(0, 1, 1, Color(9, 9, 9, 9))
    assert first.pixel(1, 1) != manager.frames[0].pixel(1, 1)
    assert next(frames) == first


def test_animation_of_no_frames_is_empty():
    assert list(animation_frames(FrameManager(3, 3))) == []