import pytest

from glyphscreen.color_info import ColorInfo, get_color_info


def test_black_entry():
    assert get_color_info(0) == ColorInfo("Black", 0, 0, 0, 0, 0, 0, 0, 0)


def test_red1_entry():
    info = get_color_info(196)
    assert info.name == "Red1"
    assert (info.red, info.green, info.blue) == (255, 0, 0)
    assert info.index_16 == 9


def test_last_entry():
    info = get_color_info(255)
    assert info.name == "Grey93"
    assert (info.red, info.green, info.blue) == (238, 238, 238)
    assert info.index_16 == 15


def test_index_256_matches_position():
    assert [get_color_info(i).index_256 for i in range(256)] == list(range(256))


def test_first_sixteen_map_onto_themselves():
    assert [get_color_info(i).index_16 for i in range(16)] == list(range(16))


def test_index_16_always_in_small_palette():
    assert all(0 <= get_color_info(i).index_16 < 16 for i in range(256))


def test_grey_ramp_is_neutral_and_increasing():
    greys = [get_color_info(i) for i in range(232, 256)]
    assert all(g.red == g.green == g.blue for g in greys)
    assert all(g.saturation == 0 for g in greys)
    levels = [g.red for g in greys]
    assert levels == sorted(levels)
    assert len(set(levels)) == len(levels)


def test_value_is_brightest_component():
    for i in range(256):
        info = get_color_info(i)
        assert info.value == max(info.red, info.green, info.blue), info.name


def test_components_are_bytes():
    for i in range(256):
        info = get_color_info(i)
        for component in (info.red, info.green, info.blue, info.hue,
                          info.saturation, info.value):
            assert 0 <= component <= 255


def test_color_cube_components_use_cube_levels():
    levels = {0, 95, 135, 175, 215, 255}
    for i in range(16, 232):
        info = get_color_info(i)
        assert {info.red, info.green, info.blue} <= levels, info.name


def test_lookup_is_stable_and_pinned():
    first = get_color_info(42)
    second = get_color_info(42)
    expected = ColorInfo("SpringGreen2", 42, 14, 0, 215, 135, 112, 255, 215)
    assert first == expected
    assert second == expected
    assert first is second


@pytest.mark.parametrize("bad", [-1, 256, 1000])
def test_out_of_range_index_raises(bad):
    with pytest.raises(ValueError):
        get_color_info(bad)


def test_non_integer_index_raises():
    with pytest.raises(TypeError):
        get_color_info(1.5)


def test_color_info_is_frozen():
    info = get_color_info(1)
    with pytest.raises(AttributeError):
        info.red = 0
    assert info.red == 128