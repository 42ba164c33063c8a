"""Unit tests for hex palette parsing and bundled palettes."""

import pytest

from pynoiseflow.palette import (
    DEFAULT_PALETTE,
    Color,
    DiscretePalette,
    HexColorError,
    get_default_palette,
    list_default_palettes,
    load_hex_palette,
    parse_hex_color,
    parse_hex_palette,
)


@pytest.mark.unit
def test_parse_hex_color():
    assert parse_hex_color("FF0000") == Color.from_rgba8(255, 0, 0)
    assert parse_hex_color("00ff7f") == Color.from_rgba8(0, 255, 127)


@pytest.mark.unit
def test_parse_palette_keeps_order(primaries_hex):
    colors = parse_hex_palette(primaries_hex)
    assert colors == [
        Color.from_rgba8(0, 0, 0),
        Color.from_rgba8(255, 0, 0),
        Color.from_rgba8(0, 255, 0),
        Color.from_rgba8(0, 0, 255),
        Color.from_rgba8(255, 255, 255),
    ]


@pytest.mark.unit
def test_parse_palette_ignores_blank_lines_and_whitespace():
    colors = parse_hex_palette("\n  ff0000  \r\n\n00ff00\n\n")
    assert colors == [Color.from_rgba8(255, 0, 0), Color.from_rgba8(0, 255, 0)]


@pytest.mark.unit
def test_wrong_length_reports_lengths():
    with pytest.raises(HexColorError) as excinfo:
        parse_hex_color("fff")
    err = excinfo.value
    assert err.input_str == "fff"
    assert err.actual_length == 3
    assert err.expected_length == 6
    assert "'fff'" in str(err)


@pytest.mark.unit
@pytest.mark.parametrize("text", ["gg0000", "+fffff", "12 456", "ff00000"])
def test_malformed_colors_rejected(text):
    with pytest.raises(HexColorError):
        parse_hex_color(text)


@pytest.mark.unit
def test_error_names_line_number():
    with pytest.raises(HexColorError) as excinfo:
        parse_hex_palette("000000\nabc\nffffff\n")
    assert excinfo.value.line_number == 2
    assert "line 2" in str(excinfo.value)


@pytest.mark.unit
def test_hex_color_error_is_value_error():
    assert issubclass(HexColorError, ValueError)


@pytest.mark.unit
def test_load_hex_palette(palette_file):
    palette = load_hex_palette(palette_file)
    assert isinstance(palette, DiscretePalette)
    assert len(palette) == 5
    assert palette.resolve(0.25) == Color.from_rgba8(255, 0, 0)


@pytest.mark.unit
def test_load_empty_palette(tmp_path):
    path = tmp_path / "empty.hex"
    path.write_text("\n\n", encoding="utf-8")
    with pytest.raises(ValueError, match="no colors"):
        load_hex_palette(path)


@pytest.mark.unit
def test_load_missing_palette(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_hex_palette(tmp_path / "missing.hex")


@pytest.mark.unit
def test_bundled_palettes(primaries_hex):
    names = list_default_palettes()
    assert {"ocaso", "golden-haze", "primaries"} <= set(names)
    assert DEFAULT_PALETTE in names
    assert len(get_default_palette()) > 0
    assert list(get_default_palette("primaries")) == parse_hex_palette(primaries_hex)


@pytest.mark.unit
def test_unknown_bundled_palette():
    with pytest.raises(ValueError, match="Unknown palette"):
        get_default_palette("no-such-palette")
