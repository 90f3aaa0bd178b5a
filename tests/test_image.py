import pytest

from bwkit.image import BMP_HEADER_LENGTH, Image
from bwkit.log import FatalError


def _image():
    return Image(2, 2, [0x112233, 0x445566, 0x778899, 0xAABBCC])


def test_pixel_at_reads_row_major():
    image = _image()
    assert image.pixel_at(0, 0) == 0x112233
    assert image.pixel_at(1, 0) == 0x445566
    assert image.pixel_at(0, 1) == 0x778899
    assert image.pixel_at(1, 1) == 0xAABBCC


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 2), (5, 5)])
def test_pixel_at_out_of_range_is_zero(x, y):
    assert _image().pixel_at(x, y) == 0


def test_empty_image_has_no_pixels():
    image = Image()
    assert image.size() == (0, 0)
    assert image.pixel_at(0, 0) == 0


def test_default_pixels_are_black():
    image = Image(3, 2)
    assert all(image.pixel_at(x, y) == 0 for x in range(3) for y in range(2))
    assert image.size() == (3, 2)


def test_wrong_pixel_count_rejected():
    with pytest.raises(ValueError):
        Image(2, 2, [1, 2, 3])


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Image(-1, 2)


def test_bmp_header_fields():
    data = _image().bmp_bytes()
    assert data[:2] == b"BM"
    assert len(data) == BMP_HEADER_LENGTH + 3 * 4
    assert int.from_bytes(data[2:6], "little") == len(data)
    assert data[10] == BMP_HEADER_LENGTH
    assert data[14] == 40
    assert int.from_bytes(data[18:21], "little") == 2
    assert int.from_bytes(data[22:25], "little") == 2
    assert data[26] == 1
    assert data[28] == 24
    assert data[38:40] == bytes((0x13, 0x0B))
    assert data[42:44] == bytes((0x13, 0x0B))


def test_bmp_pixels_bottom_row_first_in_bgr_order():
    body = _image().bmp_bytes()[BMP_HEADER_LENGTH:]
    assert body[0:3] == bytes((0x99, 0x88, 0x77))
    assert body[3:6] == bytes((0xCC, 0xBB, 0xAA))
    assert body[6:9] == bytes((0x33, 0x22, 0x11))
    assert body[9:12] == bytes((0x66, 0x55, 0x44))


def test_zero_width_is_fatal():
    with pytest.raises(FatalError):
        Image(0, 3).bmp_bytes()


def test_zero_height_is_fatal():
    with pytest.raises(FatalError):
        Image(3, 0).bmp_bytes()


def test_write_bmp_round_trip(tmp_path):
    image = _image()
    target = tmp_path / "out.bmp"
    image.write_bmp(target)
    assert target.read_bytes() == image.bmp_bytes()


def test_write_bmp_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        _image().write_bmp(tmp_path / "missing" / "out.bmp")