import cv2
import numpy as np
import pytest

from sitegfx.image import DecodeError, NotFoundError, RasterImage, WriteError, decode, encode


def test_decode_missing_file_raises_not_found(tmp_path):
    missing = tmp_path / "nope.jpg"
    with pytest.raises(NotFoundError) as exc:
        decode(str(missing))
    assert exc.value.path == str(missing)
    assert isinstance(exc.value, FileNotFoundError)


def test_decode_garbage_raises_decode_error(tmp_path):
    bad = tmp_path / "broken.jpg"
    bad.write_bytes(b"definitely not an image")
    with pytest.raises(DecodeError):
        decode(str(bad))


def test_decode_jpeg_gives_opaque_rgba(tmp_path):
    bgr = np.zeros((12, 20, 3), dtype=np.uint8)
    bgr[:, :, 0] = 200  # blue in BGR order
    path = tmp_path / "logo.jpg"
    assert cv2.imwrite(str(path), bgr)

    img = decode(str(path))
    assert (img.width, img.height) == (20, 12)
    assert img.pixels.shape == (12, 20, 4)
    assert (img.pixels[..., 3] == 255).all()
    # RGBA order: blue channel is last of the colour triplet
    assert img.pixels[..., 2].mean() > 150
    assert img.pixels[..., 0].mean() < 50


def test_decode_grayscale_png(tmp_path):
    gray = np.full((5, 7), 30, dtype=np.uint8)
    path = tmp_path / "gray.png"
    assert cv2.imwrite(str(path), gray)
    img = decode(str(path))
    assert img.pixels.shape == (5, 7, 4)
    assert (img.pixels[..., :3] == 30).all()


def test_encode_preserves_alpha_and_overwrites(tmp_path):
    pixels = np.zeros((3, 4, 4), dtype=np.uint8)
    pixels[..., 0] = 200
    pixels[0, 0, 3] = 0
    pixels[1:, :, 3] = 255
    path = tmp_path / "out.png"
    path.write_bytes(b"old contents")

    encode(RasterImage(pixels=pixels), str(path))
    back = decode(str(path))
    assert np.array_equal(back.pixels, pixels)


def test_encode_into_missing_directory_raises_write_error(tmp_path):
    img = RasterImage(pixels=np.zeros((2, 2, 4), dtype=np.uint8))
    target = tmp_path / "missing" / "out.png"
    with pytest.raises(WriteError) as exc:
        encode(img, str(target))
    assert exc.value.path == str(target)
