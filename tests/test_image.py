import pytest
from PIL import Image as PILImage

from raycube.errors import ErrorCode, MlxError
from raycube.image import (
    Image,
    Texture,
    encode_pixel,
    fnv_hash,
    load_png,
    rgba_to_mono,
    texture_to_image,
)


def test_encode_pixel_is_big_endian_rgba():
    assert encode_pixel(0x11223344) == b"\x11\x22\x33\x44"


def test_new_image_is_blank():
    image = Image(3, 2)
    assert len(image.pixels) == 3 * 2 * 4
    assert all(b == 0 for b in image.pixels)
    assert image.enabled is True


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (32768, 1), (1, 32768)])
def test_invalid_dimensions(width, height):
    with pytest.raises(MlxError) as info:
        Image(width, height)
    assert info.value.code is ErrorCode.INVDIM


def test_put_and_get_pixel_round_trip():
    image = Image(4, 4)
    image.put_pixel(2, 3, 0xAABBCCDD)
    assert image.get_pixel(2, 3) == 0xAABBCCDD
    offset = (3 * 4 + 2) * 4
    assert bytes(image.pixels[offset:offset + 4]) == encode_pixel(0xAABBCCDD)
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize("x,y", [(4, 0), (0, 4), (-1, 0)])
def test_put_pixel_out_of_bounds(x, y):
    image = Image(4, 4)
    with pytest.raises(MlxError) as info:
        image.put_pixel(x, y, 1)
    assert info.value.code is ErrorCode.INVPOS


def test_resize_upscale_is_nearest_neighbour():
    image = Image(2, 2)
    colors = {(0, 0): 0x10, (1, 0): 0x20, (0, 1): 0x30, (1, 1): 0x40}
    for (x, y), color in colors.items():
        image.put_pixel(x, y, color)
    image.resize(4, 4)
    assert (image.width, image.height) == (4, 4)
    for y in range(4):
        for x in range(4):
            assert image.get_pixel(x, y) == colors[(x // 2, y // 2)]


def test_resize_downscale_samples_every_other_pixel():
    image = Image(4, 4)
    for y in range(4):
        for x in range(4):
            image.put_pixel(x, y, y * 4 + x + 1)
    image.resize(2, 2)
    assert image.get_pixel(1, 1) == 2 * 4 + 2 + 1
    assert image.get_pixel(0, 0) == 1


def test_resize_same_size_keeps_pixels():
    image = Image(2, 2)
    image.put_pixel(1, 1, 0x55)
    before = bytes(image.pixels)
    image.resize(2, 2)
    assert bytes(image.pixels) == before


def test_resize_rejects_bad_dimensions():
    image = Image(2, 2)
    with pytest.raises(MlxError) as info:
        image.resize(0, 2)
    assert info.value.code is ErrorCode.INVDIM
    assert (image.width, image.height) == (2, 2)


def test_add_instance_returns_indices():
    image = Image(1, 1)
    assert image.add_instance(5, 6, 7) == 0
    assert image.add_instance(1, 2, 3) == 1
    first = image.instances[0]
    assert (first.x, first.y, first.z, first.enabled) == (5, 6, 7, True)


def test_texture_rejects_wrong_buffer_length():
    with pytest.raises(ValueError):
        Texture(2, 2, bytearray(3))


def test_texture_to_image_copies_pixels():
    data = bytearray(range(2 * 3 * 4))
    texture = Texture(2, 3, data)
    image = texture_to_image(texture)
    assert (image.width, image.height) == (2, 3)
    assert bytes(image.pixels) == bytes(data)
    image.put_pixel(0, 0, 0)
    assert texture.pixels[:4] == data[:4]


def test_load_png_round_trip(tmp_path):
    path = tmp_path / "pic.png"
    picture = PILImage.new("RGBA", (3, 2))
    picture.putpixel((2, 1), (1, 2, 3, 4))
    picture.save(path)
    texture = load_png(path)
    assert (texture.width, texture.height) == (3, 2)
    image = texture_to_image(texture)
    assert image.get_pixel(2, 1) == 0x01020304


def test_load_png_missing_file(tmp_path):
    with pytest.raises(MlxError) as info:
        load_png(tmp_path / "missing.png")
    assert info.value.code is ErrorCode.INVPNG


def test_load_png_rejects_non_png(tmp_path):
    path = tmp_path / "pic.bmp"
    PILImage.new("RGBA", (1, 1)).save(path, format="BMP")
    with pytest.raises(MlxError) as info:
        load_png(path)
    assert info.value.code is ErrorCode.INVPNG


def test_fnv_hash_empty_is_offset_basis():
    assert fnv_hash(b"") == 0xCBF29CE484222325


def test_fnv_hash_known_vector():
    assert fnv_hash(b"a") == 0xAF63DC4C8601EC8C


def test_fnv_hash_str_matches_bytes():
    assert fnv_hash("ab") == fnv_hash(b"ab")
    assert fnv_hash("ab") < 2 ** 64


@pytest.mark.parametrize("color", [0xFFFFFFFF, 0x12345678, 0xFF000080, 0x00FF00FF])
def test_rgba_to_mono_is_grey_and_keeps_alpha(color):
    mono = rgba_to_mono(color)
    red, green, blue, alpha = mono.to_bytes(4, "big")
    assert red == green == blue
    assert alpha == color & 0xFF


def test_rgba_to_mono_black_stays_black():
    assert rgba_to_mono(0x00000080) == 0x00000080