import numpy as np
import pytest

from sitegfx.image.pixels import (
    BACKGROUND,
    DARK,
    UNCHANGED,
    classify_pixel,
    remove_background,
    transform_pixel,
)


@pytest.mark.parametrize("keep", [False, True])
def test_near_white_becomes_transparent_in_both_modes(keep):
    for rgb in [(221, 221, 221), (255, 255, 255), (240, 230, 250)]:
        out = transform_pixel(rgb + (255,), keep_original_colors=keep)
        assert out[3] == 0
        assert out[:3] == rgb


def test_threshold_bounds_are_exclusive():
    assert classify_pixel(220, 255, 255) == UNCHANGED
    assert classify_pixel(221, 221, 221) == BACKGROUND
    assert classify_pixel(80, 0, 0) == UNCHANGED
    assert classify_pixel(79, 79, 79) == DARK


def test_dark_pixels_inverted_keep_alpha():
    assert transform_pixel((10, 20, 79, 128)) == (255, 255, 255, 128)
    assert transform_pixel((0, 0, 0, 0)) == (255, 255, 255, 0)


def test_dark_pixels_untouched_when_keeping_colors():
    assert classify_pixel(10, 10, 10, keep_original_colors=True) == UNCHANGED
    assert transform_pixel((10, 20, 30, 200), keep_original_colors=True) == (10, 20, 30, 200)


def test_accent_colors_pass_through():
    # Brand blue and a mid grey match neither rule
    for px in [(0, 102, 255, 255), (128, 128, 128, 255), (10, 10, 200, 90)]:
        assert transform_pixel(px) == px
        assert transform_pixel(px, keep_original_colors=True) == px


def test_second_pass_is_not_idempotent():
    once = transform_pixel((10, 10, 10, 255))
    assert once == (255, 255, 255, 255)
    twice = transform_pixel(once)
    assert twice == (255, 255, 255, 0)


def test_remove_background_matches_pixel_rule():
    rng = np.random.default_rng(0)
    img = rng.integers(0, 256, size=(16, 16, 4), dtype=np.uint8)
    img[0, :4, :3] = 250
    img[1, :4, :3] = 5
    for keep in (False, True):
        out = remove_background(img, keep_original_colors=keep)
        assert out.shape == img.shape
        assert out.dtype == np.uint8
        for y in range(img.shape[0]):
            for x in range(img.shape[1]):
                expected = transform_pixel(tuple(int(v) for v in img[y, x]), keep_original_colors=keep)
                assert tuple(int(v) for v in out[y, x]) == expected


def test_remove_background_does_not_modify_input():
    img = np.zeros((2, 2, 4), dtype=np.uint8)
    img[..., 3] = 255
    out = remove_background(img)
    assert (img[..., :3] == 0).all()
    assert (out[..., :3] == 255).all()


def test_remove_background_rejects_non_rgba():
    with pytest.raises(ValueError):
        remove_background(np.zeros((4, 4, 3), dtype=np.uint8))
