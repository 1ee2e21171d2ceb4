from pathlib import Path

import pytest

from spriteforge.startup import (
    CONFIRMED_MARK,
    MAX_SIZE,
    MIN_SIZE,
    UNCONFIRMED_MARK,
    SizeForm,
    ensure_ssp_suffix,
    is_ssp_file,
)


def test_width_keeps_height_in_sync():
    form = SizeForm()
    form.set_width_text("16")
    assert form.height_text == "16"
    assert form.width_text == "16"


def test_height_keeps_width_in_sync():
    form = SizeForm()
    form.set_height_text("8")
    assert form.width_text == form.height_text == "8"


def test_can_set_size_needs_text():
    form = SizeForm()
    assert form.can_set_size() is False
    form.set_width_text("4")
    assert form.can_set_size() is True
    form.set_width_text("")
    assert form.can_set_size() is False


@pytest.mark.parametrize("text", ["abc", "-1", "100", "1.5"])
def test_rejected_text(text):
    form = SizeForm()
    with pytest.raises(ValueError):
        form.set_width_text(text)
    assert form.width_text == ""


@pytest.mark.parametrize("size", [MIN_SIZE, MAX_SIZE])
def test_confirm_accepts_bounds(size):
    form = SizeForm()
    form.set_width_text(str(size))
    assert form.confirm_size() is True
    assert form.status == CONFIRMED_MARK
    assert form.requested_size() == (size, size)


@pytest.mark.parametrize("text", ["0", str(MAX_SIZE + 1), ""])
def test_confirm_rejects_out_of_range(text):
    form = SizeForm()
    form.set_width_text(text)
    assert form.confirm_size() is False
    assert form.status == UNCONFIRMED_MARK


def test_changing_text_drops_confirmation():
    form = SizeForm()
    form.set_width_text("32")
    form.confirm_size()
    form.set_height_text("20")
    assert form.confirmed is False
    assert form.status == UNCONFIRMED_MARK
    with pytest.raises(ValueError):
        form.requested_size()


def test_requested_size_needs_confirmation():
    form = SizeForm()
    form.set_width_text("10")
    with pytest.raises(ValueError):
        form.requested_size()


def test_ensure_suffix_adds_missing():
    assert ensure_ssp_suffix("sprite") == "sprite.ssp"


def test_ensure_suffix_keeps_existing_any_case():
    assert ensure_ssp_suffix("sprite.SSP") == "sprite.SSP"
    assert ensure_ssp_suffix(Path("dir/sprite.ssp")) == str(Path("dir/sprite.ssp"))


def test_ensure_suffix_result_is_ssp_file():
    for name in ["a", "b.txt", "c.Ssp"]:
        assert is_ssp_file(ensure_ssp_suffix(name))


@pytest.mark.parametrize(
    "path, expected",
    [("x.ssp", True), ("X.SSP", True), ("x.png", False), ("ssp", False), ("", False)],
)
def test_is_ssp_file(path, expected):
    assert is_ssp_file(path) is expected