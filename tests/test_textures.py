import pytest

from meshcore.textures import checkerboard_texture, cold_warm_texture

BLUE = (42, 157, 223)
WHITE = (255, 255, 255)


def texel(data: bytes, resolution: int, x: int, y: int) -> tuple[int, int, int]:
    offset = 3 * (x * resolution + y)
    return tuple(data[offset : offset + 3])


def test_cold_warm_texture_size():
    assert len(cold_warm_texture()) == 3 * 256


def test_cold_warm_texture_first_texels():
    data = cold_warm_texture()
    assert tuple(data[0:3]) == (59, 76, 192)
    assert tuple(data[3:6]) == (60, 78, 194)


def test_cold_warm_texture_contains_neutral_and_warm_end():
    data = cold_warm_texture()
    texels = [tuple(data[i : i + 3]) for i in range(0, len(data), 3)]
    assert (221, 221, 221) in texels
    assert (181, 11, 39) in texels
    neutral = texels.index((221, 221, 221))
    warm = texels.index((181, 11, 39))
    assert neutral < warm


def test_cold_warm_texture_is_stable():
    first = bytes(cold_warm_texture())
    second = bytes(cold_warm_texture())
    assert first[:3] == bytes([59, 76, 192])
    assert second[:3] == bytes([59, 76, 192])
    assert first == second


def test_cold_warm_cold_end_is_blue_dominant():
    data = cold_warm_texture()
    r, g, b = data[0:3]
    assert b > r and b > g


def test_checkerboard_default_size():
    assert len(checkerboard_texture()) == 512 * 512 * 3


@pytest.mark.parametrize("resolution", [0, 1, 31, 64, 100])
def test_checkerboard_size(resolution):
    assert len(checkerboard_texture(resolution)) == resolution * resolution * 3


def test_checkerboard_origin_is_white():
    data = checkerboard_texture(64)
    assert texel(data, 64, 0, 0) == WHITE
    assert texel(data, 64, 31, 31) == WHITE


def test_checkerboard_neighbouring_squares_are_blue():
    data = checkerboard_texture(64)
    assert texel(data, 64, 0, 32) == BLUE
    assert texel(data, 64, 32, 0) == BLUE
    assert texel(data, 64, 32, 32) == WHITE


def test_checkerboard_only_two_colours():
    data = checkerboard_texture(96)
    colours = {tuple(data[i : i + 3]) for i in range(0, len(data), 3)}
    assert colours == {BLUE, WHITE}


def test_checkerboard_is_symmetric():
    res = 80
    data = checkerboard_texture(res)
    for x in range(0, res, 7):
        for y in range(0, res, 5):
            assert texel(data, res, x, y) == texel(data, res, y, x)


def test_checkerboard_small_is_all_white():
    data = checkerboard_texture(32)
    assert set(data) == {255}


def test_checkerboard_prefix_of_larger_board():
    small = checkerboard_texture(64)
    large = checkerboard_texture(128)
    for x in range(0, 64, 9):
        for y in range(0, 64, 11):
            assert texel(small, 64, x, y) == texel(large, 128, x, y)


def test_checkerboard_negative_resolution_rejected():
    with pytest.raises(ValueError):
        checkerboard_texture(-1)